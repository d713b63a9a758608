# ## File: propdesk_engine/session_state.py
# Seeds the host's Streamlit session with persisted preferences.

from typing import MutableMapping, Optional

import streamlit as st

from .filter_presets import FilterPresetManager
from .preferences_store import PreferencesStore
from .theme_engine import ThemePreferences
from .user_preferences import UserPreferencesManager


def initialize_app_session_state(state: Optional[MutableMapping] = None,
                                 store: Optional[PreferencesStore] = None) -> MutableMapping:
    """
    Initialize view state from the preference store.

    Existing keys are left alone so reruns keep what the user changed in the
    current session. ``state`` defaults to ``st.session_state``.
    """
    if state is None:
        state = st.session_state
    store = store or PreferencesStore()

    layout = UserPreferencesManager(store).load()
    theme_prefs = ThemePreferences(store)

    defaults = {
        "filters": FilterPresetManager(store).load_default(),
        "sort_spec": layout.sort_spec,
        "sidebar_collapsed": layout.sidebar_collapsed,
        "theme_selection": theme_prefs.load_selection(),
        "archive_page": 1,
        "preset_name_input": "",
    }
    for k, v in defaults.items():
        if k not in state:
            state[k] = v

    if "theme" not in state:
        state["theme"] = state["theme_selection"].derive()
    return state
