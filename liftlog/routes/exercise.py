from fastapi import APIRouter, Depends, HTTPException, Response

from liftlog.dependencies import get_exercise_repo
from liftlog.models.exercise import Exercise, ExerciseCreate
from liftlog.repositories.exercise import ExerciseRepository
from liftlog.utils.log import logger
from liftlog.utils.taxonomy import (
    CABLE_ACCESSORIES,
    EQUIPMENT_TYPES,
    MUSCLE_GROUP_DISPLAY_NAMES,
    MUSCLE_GROUPS,
    TEMPLATE_TYPES,
)

router = APIRouter(prefix="/exercise", tags=["exercise"])


@router.get("/all")
def get_all_exercises(
    q: str = "",
    muscle_group: str | None = None,
    equipment: str | None = None,
    location_id: str | None = None,
    repo: ExerciseRepository = Depends(get_exercise_repo),
) -> list[Exercise]:
    logger.debug(f"Searching exercises q={q!r} muscle_group={muscle_group}")
    return repo.search(
        q, muscle_group=muscle_group, equipment=equipment, location_id=location_id
    )


@router.get("/options")
def get_exercise_options():
    """Choices for building exercise and template forms."""
    return {
        "equipment": list(EQUIPMENT_TYPES),
        "cable_accessories": list(CABLE_ACCESSORIES),
        "template_types": list(TEMPLATE_TYPES),
        "muscle_groups": [
            {"id": mg, "name": MUSCLE_GROUP_DISPLAY_NAMES[mg]} for mg in MUSCLE_GROUPS
        ],
    }


@router.get("/{exercise_id}")
def get_exercise(
    exercise_id: str, repo: ExerciseRepository = Depends(get_exercise_repo)
) -> Exercise:
    exercise = repo.get_by_id(exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.post("/create", status_code=201)
def create_exercise(
    data: ExerciseCreate, repo: ExerciseRepository = Depends(get_exercise_repo)
) -> Exercise:
    return repo.create_exercise(data)


@router.delete("/{exercise_id}", status_code=204)
def delete_exercise(
    exercise_id: str, repo: ExerciseRepository = Depends(get_exercise_repo)
):
    if not repo.delete(exercise_id):
        raise HTTPException(status_code=404, detail="Exercise not found")
    logger.info(f"Deleted exercise {exercise_id}, logged sets kept")
    return Response(status_code=204)
