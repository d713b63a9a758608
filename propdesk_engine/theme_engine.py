# ## File: propdesk_engine/theme_engine.py
# Version: 1.0.0
# Date: 2026-10-18
# Purpose: Expand the four user-chosen base colours into the full UI palette
#          and run the preview / apply / cancel / reset editing protocol.

"""
Theme Derivation Engine
=======================

A theme is chosen as four base colours (background, lowlight, highlight,
selected) plus a background pattern. Everything else the UI paints with is
derived from those by ``derive``:

- primary = highlight, secondary = textSecondary = lowlight
- dark backgrounds get lightened surface / border / sidebar and light text
- light backgrounds get darkened surface / border, an unchanged sidebar and
  dark text

Only the base colours, pattern id and preset key are persisted. The palette
is recomputed on every load.
"""

from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from .color_math import darken, is_dark, lighten, validate_hex
from .config import CUSTOM_THEME_KEY, DEFAULT_PATTERN_ID, DEFAULT_THEME_PRESET
from .exceptions import NotFoundError, ValidationError
from .preferences_store import PreferencesStore
from .theme_catalog import BACKGROUND_PATTERNS, THEME_PRESETS, ThemePreset, get_preset, resolve_pattern_url
from .user_preferences import merge_user_preferences, read_user_preferences
from .utils import get_logger

logger = get_logger(__name__)

DARK_TEXT_ON_LIGHT = "#212529"
LIGHT_TEXT_ON_DARK = "#e2e8f0"
SIDEBAR_TEXT_ON_LIGHT = "#495057"

BASE_COLOR_FIELDS = ("background", "lowlight", "highlight", "selected")


class ThemeColors(BaseModel):
    """The four editor colours plus the chosen background pattern."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    background: str = Field(description="Page background")
    lowlight: str = Field(description="Secondary / muted text colour")
    highlight: str = Field(description="Primary accent colour")
    selected: str = Field(description="Selected-item colour")
    background_pattern_id: str = Field(default=DEFAULT_PATTERN_ID, description="Pattern catalogue id")

    @field_validator(*BASE_COLOR_FIELDS, mode='before')
    @classmethod
    def _hex_color(cls, v):
        # Raises the engine ValidationError, which pydantic lets through as-is.
        return validate_hex(v)

    @field_validator('background_pattern_id', mode='before')
    @classmethod
    def _known_pattern(cls, v):
        v = v or DEFAULT_PATTERN_ID
        if v not in BACKGROUND_PATTERNS:
            raise ValidationError("Unknown background pattern", repr(v))
        return v

    def with_color(self, field: str, value: str) -> "ThemeColors":
        if field not in BASE_COLOR_FIELDS:
            raise ValidationError("Unknown theme colour field", repr(field))
        return self.model_copy(update={field: validate_hex(value)})

    def with_pattern(self, pattern_id: str) -> "ThemeColors":
        return ThemeColors(**{**self.model_dump(), "background_pattern_id": pattern_id})


class DerivedTheme(BaseModel):
    """Complete palette used to render the interface."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    primary: str
    secondary: str
    background: str
    background_image: Optional[str] = None
    surface: str
    text: str
    text_secondary: str
    border: str
    sidebar: str
    sidebar_text: str

    def to_dict(self) -> dict:
        """camelCase dict, the shape the rendering layer consumes."""
        return self.model_dump(by_alias=True)

    def to_css_variables(self) -> str:
        """
        Render the palette as CSS custom properties for injection into the
        host page (e.g. ``st.markdown(css, unsafe_allow_html=True)``).
        """
        lines = [
            f"    --theme-primary: {self.primary};",
            f"    --theme-secondary: {self.secondary};",
            f"    --theme-background: {self.background};",
            f"    --theme-surface: {self.surface};",
            f"    --theme-text: {self.text};",
            f"    --theme-text-secondary: {self.text_secondary};",
            f"    --theme-border: {self.border};",
            f"    --theme-sidebar: {self.sidebar};",
            f"    --theme-sidebar-text: {self.sidebar_text};",
        ]
        if self.background_image:
            lines.append(f"    --theme-background-image: url('{self.background_image}');")
        else:
            lines.append("    --theme-background-image: none;")
        return ":root {\n" + "\n".join(lines) + "\n}"


def _coerce_colors(colors) -> ThemeColors:
    if isinstance(colors, ThemeColors):
        return colors
    try:
        return ThemeColors.model_validate(colors)
    except PydanticValidationError as e:
        raise ValidationError("Invalid theme colours", str(e)) from e


def derive(colors, pattern_id: Optional[str] = None) -> DerivedTheme:
    """
    Compute the full palette from base colours.

    Args:
        colors: ``ThemeColors`` or an equivalent mapping
        pattern_id: Background pattern; defaults to the one in ``colors``

    Raises:
        ValidationError: On malformed colours
        NotFoundError: On an unknown pattern id
    """
    colors = _coerce_colors(colors)
    pattern_id = pattern_id if pattern_id is not None else colors.background_pattern_id
    background = colors.background

    if is_dark(background):
        surface = lighten(background, 10)
        border = lighten(background, 20)
        sidebar = lighten(background, 8)
        text = LIGHT_TEXT_ON_DARK
        sidebar_text = LIGHT_TEXT_ON_DARK
    else:
        surface = darken(background, 5)
        border = darken(background, 10)
        sidebar = background
        text = DARK_TEXT_ON_LIGHT
        sidebar_text = SIDEBAR_TEXT_ON_LIGHT

    return DerivedTheme(
        primary=colors.highlight,
        secondary=colors.lowlight,
        background=background,
        background_image=resolve_pattern_url(pattern_id),
        surface=surface,
        text=text,
        text_secondary=colors.lowlight,
        border=border,
        sidebar=sidebar,
        sidebar_text=sidebar_text,
    )


def base_colors_of(preset: ThemePreset, pattern_id: str = DEFAULT_PATTERN_ID) -> ThemeColors:
    """Editor colours for a preset; its stored derived fields are not copied."""
    return ThemeColors(background_pattern_id=pattern_id, **preset.base_colors())


class ThemeSelection(BaseModel):
    """What the user has chosen: a preset key (or ``custom``) and its colours."""
    model_config = ConfigDict(frozen=True)

    theme_key: str = DEFAULT_THEME_PRESET
    colors: ThemeColors = Field(default_factory=lambda: base_colors_of(get_preset(DEFAULT_THEME_PRESET)))

    @property
    def is_custom(self) -> bool:
        return self.theme_key == CUSTOM_THEME_KEY

    def derive(self) -> DerivedTheme:
        return derive(self.colors)


def default_selection() -> ThemeSelection:
    return ThemeSelection()


def _pattern_for_url(url: Optional[str]) -> str:
    for pattern in BACKGROUND_PATTERNS.values():
        if url and pattern.url == url:
            return pattern.id
    return DEFAULT_PATTERN_ID


def _base_colors_from_record(custom: dict) -> dict:
    """
    The four base colours of a stored ``customTheme``.

    Older records hold the full derived palette instead of the base colours;
    those are mapped back (primary -> highlight, textSecondary -> lowlight).
    A palette carries no separate selected colour, so primary stands in.
    """
    if all(field in custom for field in BASE_COLOR_FIELDS):
        return {field: custom[field] for field in BASE_COLOR_FIELDS}
    return {
        "background": custom.get("background"),
        "lowlight": custom.get("textSecondary") or custom.get("secondary"),
        "highlight": custom.get("primary"),
        "selected": custom.get("selected") or custom.get("primary"),
    }


class ThemePreferences:
    """
    Persists the committed theme selection inside userPreferences.

    The record keeps ``themeKey``, ``customTheme`` (base colours, ``None``
    for a preset) and ``backgroundPattern``.
    """

    def __init__(self, store: Optional[PreferencesStore] = None):
        self.store = store or PreferencesStore()

    def load_selection(self) -> ThemeSelection:
        """The committed selection; built-in default when nothing usable is stored."""
        record = read_user_preferences(self.store)
        theme_key = record.get("themeKey") or DEFAULT_THEME_PRESET
        custom = record.get("customTheme")

        try:
            if isinstance(custom, dict):
                pattern_id = record.get("backgroundPattern") or _pattern_for_url(custom.get("backgroundImage"))
                colors = ThemeColors(background_pattern_id=pattern_id, **_base_colors_from_record(custom))
                # A stored palette wins over the key unless it is exactly that preset.
                if theme_key not in THEME_PRESETS or base_colors_of(THEME_PRESETS[theme_key], pattern_id) != colors:
                    theme_key = CUSTOM_THEME_KEY
            elif custom is None:
                pattern_id = record.get("backgroundPattern") or DEFAULT_PATTERN_ID
                colors = base_colors_of(get_preset(theme_key), pattern_id)
            else:
                raise ValidationError("Stored custom theme is not an object", type(custom).__name__)
            return ThemeSelection(theme_key=theme_key, colors=colors)
        except (ValidationError, NotFoundError, PydanticValidationError, TypeError) as e:
            logger.warning(f"Stored theme selection is invalid; using default theme: {e}")
            return default_selection()

    def load_theme(self) -> DerivedTheme:
        return self.load_selection().derive()

    def save_selection(self, selection: ThemeSelection) -> None:
        colors = selection.colors
        custom = None
        if selection.is_custom:
            custom = {field: getattr(colors, field) for field in BASE_COLOR_FIELDS}
        merge_user_preferences(self.store, {
            "themeKey": selection.theme_key,
            "customTheme": custom,
            "backgroundPattern": colors.background_pattern_id,
        })
        logger.info(f"Theme '{selection.theme_key}' committed (pattern '{colors.background_pattern_id}')")


class ThemeEditor:
    """
    One editing session of the preferences dialog.

    Edits only touch ``selection`` and ``preview``; the committed selection
    changes on ``apply`` alone. The host creates an editor when the dialog
    opens and drops it when the dialog closes.
    """

    def __init__(self, preferences: Optional[ThemePreferences] = None,
                 committed: Optional[ThemeSelection] = None):
        self.preferences = preferences or ThemePreferences()
        self.committed = committed or self.preferences.load_selection()
        self.selection = self.committed
        self.preview: Optional[DerivedTheme] = None

    @property
    def current_theme(self) -> DerivedTheme:
        """What the dialog should render: the preview if any, else the committed theme."""
        return self.preview if self.preview is not None else self.committed.derive()

    def _update(self, selection: ThemeSelection) -> DerivedTheme:
        self.selection = selection
        self.preview = selection.derive()
        return self.preview

    def set_color(self, field: str, value: str) -> DerivedTheme:
        """
        Change one base colour; the selection becomes ``custom``.

        Raises:
            ValidationError: On an unknown field or malformed colour. The
                editor is left unchanged.
        """
        colors = self.selection.colors.with_color(field, value)
        return self._update(ThemeSelection(theme_key=CUSTOM_THEME_KEY, colors=colors))

    def select_pattern(self, pattern_id: str) -> DerivedTheme:
        colors = self.selection.colors.with_pattern(pattern_id)
        return self._update(ThemeSelection(theme_key=self.selection.theme_key, colors=colors))

    def select_preset(self, key: str) -> DerivedTheme:
        """
        Load a preset's base colours into the editor, keeping the pattern.

        Raises:
            NotFoundError: If ``key`` is not a built-in preset
        """
        preset = get_preset(key)
        colors = base_colors_of(preset, self.selection.colors.background_pattern_id)
        return self._update(ThemeSelection(theme_key=key, colors=colors))

    def reset(self) -> DerivedTheme:
        """Back to the default preset with no pattern. Not committed."""
        return self._update(default_selection())

    def apply(self, on_theme_change: Optional[Callable[[DerivedTheme], None]] = None) -> DerivedTheme:
        """Commit the current selection, persist it and notify the host."""
        theme = self.selection.derive()
        self.preferences.save_selection(self.selection)
        self.committed = self.selection
        self.preview = None
        if on_theme_change is not None:
            on_theme_change(theme)
        return theme

    def cancel(self) -> DerivedTheme:
        """Discard edits and return the committed theme."""
        self.selection = self.committed
        self.preview = None
        return self.committed.derive()
