from contextlib import asynccontextmanager

from fastapi import FastAPI

from liftlog.migrations.engine import MigrationEngine
from liftlog.repositories.store import get_store
from liftlog.settings import settings
from liftlog.utils.log import logger

from .error_handlers import register_error_handlers
from .routes import analytics, data, exercise, home, suggestions, workout


def run_startup_migrations(app: FastAPI) -> None:
    engine = MigrationEngine(get_store())
    result = engine.run()
    if not result.ok:
        # the app still serves whatever shape the store is in
        logger.error(f"Startup migration did not complete: {result.error}")
    app.state.migration_result = result


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.RUN_MIGRATIONS_ON_STARTUP:
        run_startup_migrations(app)
    yield


app = FastAPI(title="LiftLog", lifespan=lifespan)

register_error_handlers(app)

app.include_router(home.router)
app.include_router(exercise.router)
app.include_router(workout.router)
app.include_router(analytics.router)
app.include_router(suggestions.router)
app.include_router(data.router)
