import platform

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from liftlog.migrations.steps import CURRENT_MIGRATION_VERSION
from liftlog.settings import settings
from liftlog.utils.dates import now

router = APIRouter()

BUILD_TIME = now()


@router.get("/healthz", response_class=JSONResponse)
def healthz():
    return {"status": "ok"}


@router.get("/meta")
def get_meta():
    return {
        "app_name": settings.PROJECT_NAME,
        "version": "0.1.0",
        "schema_version": CURRENT_MIGRATION_VERSION,
        "build_time": BUILD_TIME,
        "python_version": platform.python_version(),
        "environment": settings.ENV,
    }
