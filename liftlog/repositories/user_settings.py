from copy import deepcopy
from typing import Any, Protocol

from pydantic import ValidationError

from liftlog.data.seed import DEFAULT_USER_SETTINGS
from liftlog.models.user_settings import UserSettings
from liftlog.repositories.errors import (
    StoreReadError,
    StoreWriteError,
    UserSettingsRepoError,
)
from liftlog.repositories.store import CollectionStore
from liftlog.utils.db import CollectionKey
from liftlog.utils.log import logger


class UserSettingsRepository(Protocol):
    def get(self) -> UserSettings: ...
    def update(self, **changes: Any) -> UserSettings: ...
    def replace(self, settings: UserSettings) -> UserSettings: ...


class StoreUserSettingsRepository:
    """
    The single user settings record. Stored values are merged over the
    defaults so settings added later pick up their default.
    """

    key = CollectionKey.USER_SETTINGS

    def __init__(self, store: CollectionStore | None = None):
        from liftlog.repositories.store import get_store

        self._store = store or get_store()

    def _load_item(self, strict: bool = False) -> dict:
        if strict:
            try:
                stored = self._store.load(self.key, {})
            except StoreReadError as e:
                raise UserSettingsRepoError("Failed to read user settings") from e
        else:
            stored = self._store.get(self.key, {})
        if not isinstance(stored, dict):
            logger.warning("Stored user settings are not an object, using defaults")
            stored = {}

        merged = deepcopy(DEFAULT_USER_SETTINGS)
        targets = dict(merged["muscleGroupTargets"])
        stored_targets = stored.get("muscleGroupTargets", {})
        if isinstance(stored_targets, dict):
            targets.update(stored_targets)
        else:
            logger.warning("Stored muscle group targets are not an object, using defaults")
        merged.update(stored)
        merged["muscleGroupTargets"] = targets
        return merged

    def _save(self, settings: UserSettings) -> UserSettings:
        try:
            self._store.set(self.key, settings.to_item())
        except StoreWriteError as e:
            logger.error(f"Failed to save user settings: {e}")
            raise UserSettingsRepoError("Failed to write user settings") from e
        return settings

    def _read(self, strict: bool = False) -> UserSettings:
        try:
            return UserSettings.model_validate(self._load_item(strict))
        except ValidationError as e:
            logger.warning(f"Invalid stored user settings, using defaults: {e}")
            return UserSettings()

    def get(self) -> UserSettings:
        return self._read()

    def update(self, **changes: Any) -> UserSettings:
        """
        Partial update; `changes` uses model field names. Reads strictly so a
        failed read never turns into a write of the defaults.
        """
        current = self._read(strict=True)
        try:
            updated = UserSettings.model_validate(
                {**current.model_dump(), **changes}
            )
        except ValidationError as e:
            raise UserSettingsRepoError(f"Invalid settings update: {e}") from e
        return self._save(updated)

    def replace(self, settings: UserSettings) -> UserSettings:
        return self._save(settings)
