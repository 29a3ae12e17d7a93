from zoneinfo import available_timezones

from dotenv import find_dotenv, load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv(find_dotenv(), override=False)


class Settings(BaseSettings):
    PROJECT_NAME: str = "liftlog"
    REGION: str = "eu-west-2"
    ENV: str = "dev"
    model_config = SettingsConfigDict(env_file=None)

    # ──────────────────── Store ─────────────────────

    DDB_TABLE_NAME: str = "liftlog-dev-table"
    # Set to http://localhost:8000 to run against DynamoDB Local
    DDB_ENDPOINT_URL: str | None = None
    STORE_NAMESPACE: str = "workout_tracker"

    # ──────────────────── Startup ─────────────────────

    RUN_MIGRATIONS_ON_STARTUP: bool = True

    # ──────────────────── Analytics ─────────────────────

    TIMEZONE: str = "UTC"

    @field_validator("TIMEZONE")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        if v not in available_timezones():
            raise ValueError(f"Invalid timezone: {v}")
        return v


settings = Settings()
