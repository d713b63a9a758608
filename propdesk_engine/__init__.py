"""
Proposal Desk Engine
====================

Client-side data derivation for the proposal management UI:

- project filtering, sorting, pagination and filter presets
- theme derivation from four base colours, with presets and live preview

The engine is pure computation over host-supplied snapshots plus a small
preference store; it performs no network I/O.
"""

__version__ = "1.0.0"

from .exceptions import NotFoundError, PersistenceError, PropdeskException, ValidationError
from .color_math import darken, is_dark, lighten
from .filter_state import DueDateRange, FilterState, SortKey, SortOrder, SortSpec
from .project_model import ProjectRecord, project_from_api, projects_from_api
from .project_query import ProjectQuery, filter_projects, filter_then_sort, sort_projects
from .filter_presets import FilterPresetManager
from .pagination import ArchiveView, PageInfo, paginate
from .preferences_store import InMemoryStore, JsonFileStore, PreferencesStore
from .theme_engine import DerivedTheme, ThemeColors, ThemeEditor, ThemePreferences, derive

__all__ = [
    "PropdeskException",
    "ValidationError",
    "NotFoundError",
    "PersistenceError",
    "is_dark",
    "lighten",
    "darken",
    "DueDateRange",
    "FilterState",
    "SortKey",
    "SortOrder",
    "SortSpec",
    "ProjectRecord",
    "project_from_api",
    "projects_from_api",
    "ProjectQuery",
    "filter_projects",
    "sort_projects",
    "filter_then_sort",
    "FilterPresetManager",
    "ArchiveView",
    "PageInfo",
    "paginate",
    "InMemoryStore",
    "JsonFileStore",
    "PreferencesStore",
    "DerivedTheme",
    "ThemeColors",
    "ThemeEditor",
    "ThemePreferences",
    "derive",
]
