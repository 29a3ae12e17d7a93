from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response

from liftlog.repositories.errors import DataImportError
from liftlog.repositories.exercise import StoreExerciseRepository
from liftlog.repositories.store import CollectionStore, get_store
from liftlog.services import setgraph, transfer
from liftlog.settings import settings
from liftlog.utils.log import logger

router = APIRouter(prefix="/data", tags=["data"])


async def csv_body(request: Request) -> str:
    return (await request.body()).decode("utf-8-sig")


# ---------------------- Export ---------------------------


@router.get("/export")
def export_json(store: CollectionStore = Depends(get_store)):
    return Response(
        content=transfer.export_to_json(store),
        media_type="application/json",
        headers={"Content-Disposition": 'attachment; filename="workout-export.json"'},
    )


@router.get("/export.csv")
def export_csv(store: CollectionStore = Depends(get_store)):
    return Response(
        content=transfer.export_to_csv(store),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="workout-sets.csv"'},
    )


# ---------------------- Import ---------------------------


@router.post("/import", status_code=204)
def import_json(
    data: dict[str, Any] = Body(...), store: CollectionStore = Depends(get_store)
):
    transfer.import_data(store, data)
    return Response(status_code=204)


@router.post("/setgraph/preview")
def preview_setgraph(
    content: str = Depends(csv_body),
    store: CollectionStore = Depends(get_store),
):
    """Validate a Setgraph CSV and propose exercise mappings."""
    validation = setgraph.validate_setgraph_csv(content)
    if not validation.valid:
        return {"validation": validation, "mappings": []}

    names = setgraph.unique_exercise_names(setgraph.parse_setgraph_csv(content))
    exercises = StoreExerciseRepository(store).get_all()
    return {
        "validation": validation,
        "mappings": setgraph.create_default_mappings(names, exercises),
    }


@router.post("/setgraph/import")
def import_setgraph(
    content: str = Depends(csv_body),
    store: CollectionStore = Depends(get_store),
) -> setgraph.SetgraphImportResult:
    validation = setgraph.validate_setgraph_csv(content)
    if not validation.valid:
        raise DataImportError("; ".join(validation.errors))

    rows = setgraph.parse_setgraph_csv(content)
    exercises = StoreExerciseRepository(store).get_all()
    mappings = setgraph.create_default_mappings(
        setgraph.unique_exercise_names(rows), exercises
    )
    logger.info(f"Importing {len(rows)} Setgraph rows")
    return setgraph.import_setgraph_data(rows, mappings, store, settings.TIMEZONE)
