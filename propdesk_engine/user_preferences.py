# ## File: propdesk_engine/user_preferences.py
# Version: 1.0.0
# Date: 2026-10-18
# Purpose: Layout preferences (sidebar, project sort) stored in the shared
#          userPreferences record alongside the committed theme selection.

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .config import DEFAULT_SORT_KEY, DEFAULT_SORT_ORDER, USER_PREFERENCES_KEY
from .filter_state import SortKey, SortOrder, SortSpec
from .preferences_store import PreferencesStore
from .utils import get_logger

logger = get_logger(__name__)


def read_user_preferences(store: PreferencesStore) -> Dict[str, Any]:
    """The raw userPreferences record; ``{}`` when missing or not an object."""
    raw = store.load(USER_PREFERENCES_KEY, default={})
    if not isinstance(raw, dict):
        logger.warning("Stored user preferences are not an object; starting fresh")
        return {}
    return raw


def merge_user_preferences(store: PreferencesStore, updates: Dict[str, Any]) -> Dict[str, Any]:
    """Read-modify-write so theme and layout writers never clobber each other."""
    record = read_user_preferences(store)
    record.update(updates)
    store.save(USER_PREFERENCES_KEY, record)
    return record


class LayoutPreferences(BaseModel):
    """Sidebar state and the last chosen project sort."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sidebar_collapsed: bool = Field(default=False, alias="sidebarCollapsed")
    sort_by: SortKey = Field(default=SortKey(DEFAULT_SORT_KEY), alias="sortBy")
    sort_order: SortOrder = Field(default=SortOrder(DEFAULT_SORT_ORDER), alias="sortOrder")

    @field_validator('sort_by', mode='before')
    @classmethod
    def _unknown_sort_key(cls, v):
        # Keys from older clients fall back to the default ordering.
        try:
            return SortKey(v)
        except ValueError:
            return SortKey(DEFAULT_SORT_KEY)

    @field_validator('sort_order', mode='before')
    @classmethod
    def _unknown_sort_order(cls, v):
        try:
            return SortOrder(v)
        except ValueError:
            return SortOrder(DEFAULT_SORT_ORDER)

    @field_validator('sidebar_collapsed', mode='before')
    @classmethod
    def _null_sidebar(cls, v):
        return False if v is None else v

    @property
    def sort_spec(self) -> SortSpec:
        return SortSpec(key=self.sort_by, order=self.sort_order)


class UserPreferencesManager:
    """Loads and updates layout preferences for the host."""

    _LAYOUT_KEYS = ("sidebarCollapsed", "sortBy", "sortOrder")

    def __init__(self, store: Optional[PreferencesStore] = None):
        self.store = store or PreferencesStore()

    def load(self) -> LayoutPreferences:
        record = read_user_preferences(self.store)
        layout = {k: record[k] for k in self._LAYOUT_KEYS if k in record}
        try:
            return LayoutPreferences.model_validate(layout)
        except PydanticValidationError as e:
            logger.warning(f"Stored layout preferences are invalid; using defaults: {e}")
            return LayoutPreferences()

    def save_sort(self, spec: SortSpec) -> LayoutPreferences:
        merge_user_preferences(self.store, {"sortBy": spec.key.value, "sortOrder": spec.order.value})
        return self.load()

    def change_sort(self, key) -> SortSpec:
        """Apply the header-click rule to the stored sort and persist the result."""
        spec = self.load().sort_spec.toggle(key)
        self.save_sort(spec)
        return spec

    def set_sidebar_collapsed(self, collapsed: bool) -> LayoutPreferences:
        merge_user_preferences(self.store, {"sidebarCollapsed": bool(collapsed)})
        return self.load()

    def toggle_sidebar(self) -> bool:
        collapsed = not self.load().sidebar_collapsed
        self.set_sidebar_collapsed(collapsed)
        return collapsed
