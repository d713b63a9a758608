# ## File: propdesk_engine/config.py
# Version: 1.0.0
# Date: 2026-10-18
# Purpose: Central configuration for the Proposal Desk derivation engine.
#          Storage keys, pagination limits and theme/sort defaults.

import os
from pathlib import Path
from typing import Any, Dict

# --- Core Paths ---
PROJECT_ROOT = Path(__file__).parent.parent

# Directory holding the JSON preference file. Overridable per deployment.
DATA_DIR = os.getenv("PROPDESK_DATA_DIR", str(PROJECT_ROOT / "user_data"))
PREFERENCES_FILE_NAME = "preferences.json"

# --- Preference Store Keys ---
# Kept identical to the browser storage keys so exported data stays portable.
FILTER_PRESETS_KEY = "projectFilterPresets"
DEFAULT_FILTER_KEY = "defaultProjectFilter"
USER_PREFERENCES_KEY = "userPreferences"

# --- Archived Projects Pagination ---
ARCHIVE_PAGE_SIZE = int(os.getenv("PROPDESK_ARCHIVE_PAGE_SIZE", "20"))
ARCHIVE_MAX_PAGE_SIZE = 100
ARCHIVE_DEFAULT_DAYS = 30

# --- Theme Defaults ---
DEFAULT_THEME_PRESET = "light"
DEFAULT_PATTERN_ID = "none"
CUSTOM_THEME_KEY = "custom"

# --- Sort Defaults ---
DEFAULT_SORT_KEY = "created"
DEFAULT_SORT_ORDER = "desc"

# --- Project Record Defaults (applied at the API boundary) ---
DEFAULT_DOCUMENT_TYPE = "RFP"
DEFAULT_PRIORITY_LEVEL = 3
DEFAULT_DUE_DATE_OFFSET_DAYS = 30


def get_preferences_path() -> Path:
    """Resolve the preference file location from the configured data dir."""
    return Path(os.path.expanduser(DATA_DIR)) / PREFERENCES_FILE_NAME


def get_engine_config() -> Dict[str, Any]:
    """Return the effective engine configuration as a plain dictionary."""
    return {
        "data_dir": DATA_DIR,
        "preferences_path": str(get_preferences_path()),
        "filter_presets_key": FILTER_PRESETS_KEY,
        "default_filter_key": DEFAULT_FILTER_KEY,
        "user_preferences_key": USER_PREFERENCES_KEY,
        "archive_page_size": ARCHIVE_PAGE_SIZE,
        "archive_max_page_size": ARCHIVE_MAX_PAGE_SIZE,
        "archive_default_days": ARCHIVE_DEFAULT_DAYS,
        "default_theme_preset": DEFAULT_THEME_PRESET,
        "default_pattern_id": DEFAULT_PATTERN_ID,
        "default_sort_key": DEFAULT_SORT_KEY,
        "default_sort_order": DEFAULT_SORT_ORDER,
    }
