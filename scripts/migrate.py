# Run using uv run python -m scripts.migrate

from liftlog.migrations.engine import MigrationEngine
from liftlog.repositories.store import DynamoCollectionStore
from liftlog.settings import settings


def main():
    store = DynamoCollectionStore()
    print(f"Migrating {settings.DDB_TABLE_NAME} ({settings.STORE_NAMESPACE})")

    result = MigrationEngine(store).run()
    if result.seeded:
        print(f"Seeded fresh store at V{result.to_version}")
    elif result.applied:
        print(f"Applied {result.applied}, now at V{result.to_version}")
    else:
        print(f"Nothing to do, store at V{result.to_version}")

    if not result.ok:
        raise SystemExit(f"Migration failed at V{result.failed_step}: {result.error}")


if __name__ == "__main__":
    main()
