import copy
from dataclasses import dataclass, field

from liftlog.data.historical import IMPORTED_EXERCISES, IMPORTED_SETS, IMPORTED_WORKOUTS
from liftlog.data.seed import (
    DEFAULT_LOCATIONS,
    DEFAULT_USER_SETTINGS,
    SEED_EXERCISES,
    SEED_TEMPLATES,
)
from liftlog.migrations.steps import (
    CURRENT_MIGRATION_VERSION,
    MIGRATION_STEPS,
    MigrationStep,
    merge_by_id,
)
from liftlog.repositories.errors import MigrationError, StoreError
from liftlog.repositories.store import CollectionStore
from liftlog.utils.db import CollectionKey
from liftlog.utils.log import logger


@dataclass
class MigrationState:
    """The two process-wide scalars that record how far the store has been migrated."""

    initialized: bool = False
    migration_version: int = 1

    @classmethod
    def load(cls, store: CollectionStore) -> "MigrationState":
        initialized = store.load(CollectionKey.INITIALIZED, False)
        raw_version = store.load(CollectionKey.MIGRATION_VERSION, None)

        try:
            version = int(raw_version) if raw_version is not None else 1
        except (TypeError, ValueError):
            logger.warning(f"Unreadable migration version {raw_version!r}, assuming 1")
            version = 1

        return cls(initialized=bool(initialized), migration_version=version)

    def save(self, store: CollectionStore) -> None:
        store.set(CollectionKey.INITIALIZED, self.initialized)
        store.set(CollectionKey.MIGRATION_VERSION, self.migration_version)


@dataclass
class MigrationResult:
    seeded: bool = False
    from_version: int = 1
    to_version: int = 1
    applied: list[int] = field(default_factory=list)
    failed_step: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class MigrationEngine:
    """
    Brings the store from its recorded schema version up to the current one.

    Runs at most once per instance; the app builds a single instance at
    startup. Import data is only deduplicated by id within a pass, so two
    overlapping runs against the same store could double-merge.
    """

    def __init__(
        self,
        store: CollectionStore,
        steps: tuple[MigrationStep, ...] = MIGRATION_STEPS,
        current_version: int = CURRENT_MIGRATION_VERSION,
    ):
        self._store = store
        self._steps = steps
        self._current_version = current_version
        self._has_run = False
        self._result: MigrationResult | None = None
        self.state: MigrationState | None = None

    @property
    def has_run(self) -> bool:
        return self._has_run

    def run(self) -> MigrationResult:
        if self._has_run and self._result is not None:
            logger.warning("Migration engine already ran in this process, skipping")
            return self._result
        self._has_run = True

        try:
            state = MigrationState.load(self._store)
        except StoreError as e:
            logger.error(f"Could not read migration state: {e}")
            self._result = MigrationResult(error=str(e))
            return self._result

        self.state = state

        if not state.initialized:
            self._result = self._seed()
        else:
            self._result = self._migrate(state)
        return self._result

    # ----------------------- Seed -----------------------------

    def _seed(self) -> MigrationResult:
        logger.info(f"First run, seeding store at version {self._current_version}")
        result = MigrationResult(
            seeded=True, from_version=self._current_version, to_version=self._current_version
        )

        collections = {
            CollectionKey.EXERCISES: merge_by_id(SEED_EXERCISES, IMPORTED_EXERCISES),
            CollectionKey.TEMPLATES: SEED_TEMPLATES,
            CollectionKey.LOCATIONS: DEFAULT_LOCATIONS,
            CollectionKey.WORKOUTS: IMPORTED_WORKOUTS,
            CollectionKey.SETS: IMPORTED_SETS,
            CollectionKey.USER_SETTINGS: DEFAULT_USER_SETTINGS,
        }

        try:
            for key, value in collections.items():
                self._store.set(key, copy.deepcopy(value))

            state = MigrationState(True, self._current_version)
            state.save(self._store)
        except StoreError as e:
            # initialized stays unset, so the next launch seeds again
            logger.error(f"Seeding failed: {e}")
            result.error = str(e)
            return result

        self.state = state
        logger.info("Store initialized with seed data and imported history")
        return result

    # ----------------------- Migrate -----------------------------

    def _migrate(self, state: MigrationState) -> MigrationResult:
        result = MigrationResult(
            from_version=state.migration_version, to_version=state.migration_version
        )

        if state.migration_version > self._current_version:
            logger.warning(
                f"Stored migration version {state.migration_version} is newer than "
                f"{self._current_version}, leaving store untouched"
            )
            return result

        pending = [s for s in self._steps if s.version > state.migration_version]
        if not pending:
            logger.debug(f"Store already at version {state.migration_version}")
            return result

        for step in pending:
            try:
                self._apply(step)
            except Exception as e:
                logger.exception(f"Migration to V{step.version} failed, stopping")
                result.failed_step = step.version
                result.error = str(e)
                return result
            result.applied.append(step.version)

        try:
            state.migration_version = self._current_version
            state.save(self._store)
        except StoreError as e:
            logger.error(f"Migrations applied but version could not be saved: {e}")
            result.error = str(e)
            return result

        result.to_version = self._current_version
        logger.info(
            f"Migrated store from V{result.from_version} to V{result.to_version}"
        )
        return result

    def _apply(self, step: MigrationStep) -> None:
        logger.info(f"Running migration to V{step.version} - {step.description}...")

        for key, transform in step.transforms:
            records = self._store.load(key, [])
            if not isinstance(records, list):
                raise MigrationError(f"Collection {key} is not a list")

            migrated = transform(records)
            if migrated != records:
                self._store.set(key, migrated)
                logger.debug(f"V{step.version}: rewrote {key} ({len(migrated)} records)")

        logger.info(f"Migration to V{step.version} complete")
