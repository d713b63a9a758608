# ## File: propdesk_engine/preferences_store.py
# Version: 1.0.0
# Date: 2026-10-18
# Purpose: Durable key-value persistence for user preferences and presets.
#          All reads degrade to caller-supplied defaults; only writes raise.

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .config import get_preferences_path
from .exceptions import PersistenceError
from .utils import ensure_directory, get_logger

logger = get_logger(__name__)


class KeyValueStore(Protocol):
    """Minimal string key-value contract, shaped like browser local storage."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...


class InMemoryStore:
    """Dict-backed store for tests and short-lived hosts."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self):
        return list(self._items.keys())


class JsonFileStore:
    """
    Single JSON document on disk mapping key -> raw string value.

    The file is re-read on every access so several hosts sharing a profile
    directory see each other's commits. Writes go through a temp file and
    ``os.replace`` so a crash never leaves a truncated document behind.
    """

    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path) if path else get_preferences_path()

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Preference file {self.path} is unreadable; treating as empty: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Preference file {self.path} does not hold an object; treating as empty")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, items: Dict[str, str]) -> None:
        try:
            ensure_directory(self.path.parent)
            fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".prefs_", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(items, f, indent=4)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            logger.error(f"Failed to write preference file {self.path}: {e}")
            raise PersistenceError("Could not write preference file", str(e)) from e

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if key in items:
            del items[key]
            self._write_all(items)


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, dict):
        return {k: _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    return value


class PreferencesStore:
    """
    Typed persistence port over a ``KeyValueStore``.

    ``load`` never raises: a missing key, unparsable JSON or a value that
    fails validation against ``model`` all yield ``default``. ``save`` raises
    ``PersistenceError`` when the backing store refuses the write.
    """

    def __init__(self, store: Optional[KeyValueStore] = None):
        self.store = store if store is not None else JsonFileStore()

    def load_raw(self, key: str) -> Any:
        """Return the decoded JSON value for ``key`` or ``None``."""
        try:
            raw = self.store.get_item(key)
        except Exception as e:
            logger.warning(f"Could not read preference '{key}': {e}")
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning(f"Stored preference '{key}' is not valid JSON; using defaults: {e}")
            return None

    def load(self, key: str, default: Any = None, model: Any = None) -> Any:
        """
        Load a stored value.

        Args:
            key: Storage key
            default: Value returned when nothing usable is stored
            model: Optional pydantic model class or ``TypeAdapter`` used to
                validate and coerce the decoded value

        Returns:
            The stored (and validated) value, or ``default``
        """
        value = self.load_raw(key)
        if value is None:
            return default
        if model is None:
            return value

        adapter = model if isinstance(model, TypeAdapter) else TypeAdapter(model)
        try:
            return adapter.validate_python(value)
        except PydanticValidationError as e:
            logger.warning(f"Stored preference '{key}' failed validation; using defaults: {e.error_count()} error(s)")
            return default

    def save(self, key: str, value: Any) -> None:
        """Serialise ``value`` to JSON and write it under ``key``."""
        try:
            payload = json.dumps(_to_jsonable(value))
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"Preference '{key}' is not JSON serialisable", str(e)) from e

        try:
            self.store.set_item(key, payload)
        except PersistenceError:
            raise
        except Exception as e:
            logger.error(f"Failed to save preference '{key}': {e}")
            raise PersistenceError(f"Could not save preference '{key}'", str(e)) from e
        logger.debug(f"Saved preference '{key}'")

    def remove(self, key: str) -> None:
        try:
            self.store.remove_item(key)
        except Exception as e:
            logger.error(f"Failed to remove preference '{key}': {e}")
            raise PersistenceError(f"Could not remove preference '{key}'", str(e)) from e
