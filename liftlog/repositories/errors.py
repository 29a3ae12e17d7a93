class RepoError(Exception):
    """Base class for repository-level errors."""

    pass


class RecordNotFoundError(RepoError):
    """Raised when a record id is not present in its collection."""

    pass


# ------------------------- STORE -------------------------


class StoreError(RepoError):
    """Generic persistent store error."""

    pass


class StoreReadError(StoreError):
    pass


class StoreWriteError(StoreError):
    pass


# ------------------------- EXERCISE -------------------------
class ExerciseRepoError(RepoError):
    """Generic exercise repository error"""

    pass


# ------------------------- TEMPLATE -------------------------
class TemplateRepoError(RepoError):
    pass


# ------------------------- LOCATION -------------------------
class LocationRepoError(RepoError):
    pass


# ------------------------- WORKOUT -------------------------


class WorkoutRepoError(RepoError):
    """Generic workout repository error."""

    pass


class WorkoutSetRepoError(RepoError):
    pass


# ------------------------- SETTINGS -------------------------
class UserSettingsRepoError(RepoError):
    pass


# ------------------------- ROUTINE -------------------------
class RoutineRepoError(RepoError):
    pass


# ------------------------- SUPPLEMENT -------------------------
class SupplementRepoError(RepoError):
    pass


# ------------------------- MIGRATION -------------------------
class MigrationError(Exception):
    """Raised when a migration step cannot complete."""

    pass


# ------------------------- DATA TRANSFER -------------------------
class DataImportError(RepoError):
    """Raised when an import document or CSV cannot be applied."""

    pass
