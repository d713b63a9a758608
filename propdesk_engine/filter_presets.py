# ## File: propdesk_engine/filter_presets.py
# Version: 1.0.0
# Date: 2026-10-18
# Purpose: Named project filter presets and the default filter loaded at
#          session start, persisted through the preference store.

from typing import Any, Dict, List, Optional

from .config import DEFAULT_FILTER_KEY, FILTER_PRESETS_KEY
from .exceptions import NotFoundError, ValidationError
from .filter_state import FilterState
from .preferences_store import PreferencesStore
from .utils import get_logger

logger = get_logger(__name__)


class FilterPresetManager:
    """
    Manages the ``name -> FilterState`` preset mapping and the default filter.

    The mapping is re-read from the store on every call, so the manager holds
    no state of its own. Deleting a preset should be confirmed by the user
    before ``delete_preset`` is called; that prompt belongs to the host.
    """

    def __init__(self, store: Optional[PreferencesStore] = None):
        self.store = store or PreferencesStore()

    def _load_raw(self) -> Dict[str, Any]:
        raw = self.store.load(FILTER_PRESETS_KEY, default={})
        if not isinstance(raw, dict):
            logger.warning("Stored filter presets are not a mapping; ignoring them")
            return {}
        return raw

    def _load_mapping(self) -> Dict[str, FilterState]:
        presets: Dict[str, FilterState] = {}
        for name, data in self._load_raw().items():
            try:
                presets[name] = FilterState.from_dict(data)
            except ValidationError as e:
                logger.warning(f"Skipping unreadable filter preset '{name}': {e}")
        return presets

    def _save_raw(self, raw: Dict[str, Any]) -> None:
        # Entries that failed to parse are written back untouched.
        self.store.save(FILTER_PRESETS_KEY, raw)

    def list_presets(self) -> List[str]:
        """Preset names in the order they were first saved."""
        return list(self._load_mapping().keys())

    def get_presets(self) -> Dict[str, FilterState]:
        return self._load_mapping()

    def save_preset(self, name: str, state: FilterState) -> None:
        """
        Insert or overwrite a named preset.

        Raises:
            ValidationError: If ``name`` is empty or whitespace
        """
        if not name or not name.strip():
            raise ValidationError("Please enter a name for this filter preset")
        raw = self._load_raw()
        raw[name] = state.to_dict()
        self._save_raw(raw)
        logger.info(f"Filter preset '{name}' saved")

    def load_preset(self, name: str) -> FilterState:
        """
        Raises:
            NotFoundError: If no preset is stored under ``name``
        """
        presets = self._load_mapping()
        if name not in presets:
            raise NotFoundError("Filter preset not found", repr(name))
        return presets[name]

    def delete_preset(self, name: str) -> None:
        """Remove a preset, including one whose stored entry is unreadable."""
        raw = self._load_raw()
        if name not in raw:
            raise NotFoundError("Filter preset not found", repr(name))
        del raw[name]
        self._save_raw(raw)
        logger.info(f"Filter preset '{name}' deleted")

    def set_as_default(self, state: FilterState) -> None:
        """Persist ``state`` as the filter applied when the next session starts."""
        self.store.save(DEFAULT_FILTER_KEY, state.to_dict())
        logger.info("Filter settings saved as the default view")

    def load_default(self) -> FilterState:
        """The saved default filter, or an empty filter if none is usable."""
        raw = self.store.load(DEFAULT_FILTER_KEY)
        if raw is None:
            return FilterState()
        try:
            return FilterState.from_dict(raw)
        except ValidationError as e:
            logger.warning(f"Stored default filter is invalid; using no filter: {e}")
            return FilterState()

    def clear_default(self) -> None:
        self.store.remove(DEFAULT_FILTER_KEY)
