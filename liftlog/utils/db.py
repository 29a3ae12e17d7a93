from enum import StrEnum

import boto3

from liftlog.settings import settings

REGION_NAME = settings.REGION
TABLE_NAME = settings.DDB_TABLE_NAME


class CollectionKey(StrEnum):
    EXERCISES = "exercises"
    TEMPLATES = "templates"
    LOCATIONS = "locations"
    WORKOUTS = "workouts"
    SETS = "sets"
    USER_SETTINGS = "user_settings"
    SUPPLEMENTS = "supplements"
    SUPPLEMENT_INTAKES = "supplement_intakes"
    ROUTINES = "routines"
    INITIALIZED = "initialized"
    MIGRATION_VERSION = "migration_version"
    SETGRAPH_MAPPINGS = "setgraph_mappings"


def get_dynamo_resource():
    return boto3.resource(
        "dynamodb", region_name=REGION_NAME, endpoint_url=settings.DDB_ENDPOINT_URL
    )


def get_table():
    resource = get_dynamo_resource()
    return resource.Table(TABLE_NAME)  # type: ignore


def build_store_pk(namespace: str) -> str:
    """
    Partition key shared by every collection of one store.
    Example: STORE#workout_tracker
    """
    return f"STORE#{namespace}"


def build_collection_sk(key: str) -> str:
    """
    Sort key for a single collection.
    Example: COLLECTION#exercises
    """
    return f"COLLECTION#{key}"
