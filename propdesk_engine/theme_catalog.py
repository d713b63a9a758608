# ## File: propdesk_engine/theme_catalog.py
# Version: 1.0.0
# Date: 2026-10-18
# Purpose: Read-only catalogues of built-in theme presets and background
#          patterns offered by the preferences screen.

from dataclasses import dataclass
from typing import Dict, List, Optional

from .exceptions import NotFoundError


@dataclass(frozen=True)
class ThemePreset:
    """A built-in theme: the four editor colours plus its stored palette."""
    key: str
    name: str
    background: str
    lowlight: str
    highlight: str
    selected: str
    surface: str
    text: str
    text_secondary: str
    border: str
    sidebar: str
    sidebar_text: str

    def base_colors(self) -> Dict[str, str]:
        return {
            "background": self.background,
            "lowlight": self.lowlight,
            "highlight": self.highlight,
            "selected": self.selected,
        }


@dataclass(frozen=True)
class BackgroundPattern:
    id: str
    name: str
    url: Optional[str]


_PRESETS = [
    ThemePreset(key='light', name='Light',
                background='#ffffff', lowlight='#6c757d', highlight='#007bff', selected='#0056b3',
                surface='#f8f9fa', text='#212529', text_secondary='#6c757d', border='#dee2e6',
                sidebar='#ffffff', sidebar_text='#495057'),
    ThemePreset(key='dark', name='Dark',
                background='#1a202c', lowlight='#718096', highlight='#4299e1', selected='#2b6cb0',
                surface='#2d3748', text='#e2e8f0', text_secondary='#a0aec0', border='#4a5568',
                sidebar='#2d3748', sidebar_text='#e2e8f0'),
    ThemePreset(key='oceanBlue', name='Ocean Blue',
                background='#f7fafc', lowlight='#4a5568', highlight='#3182ce', selected='#2c5aa0',
                surface='#edf2f7', text='#2d3748', text_secondary='#4a5568', border='#cbd5e0',
                sidebar='#ebf8ff', sidebar_text='#2b6cb0'),
    ThemePreset(key='forestGreen', name='Forest Green',
                background='#f7fafc', lowlight='#4a5568', highlight='#38a169', selected='#2f855a',
                surface='#edf2f7', text='#2d3748', text_secondary='#4a5568', border='#cbd5e0',
                sidebar='#f0fff4', sidebar_text='#2f855a'),
    ThemePreset(key='sunsetOrange', name='Sunset Orange',
                background='#fffaf0', lowlight='#744210', highlight='#dd6b20', selected='#c05621',
                surface='#fef5e7', text='#2d3748', text_secondary='#744210', border='#e2e8f0',
                sidebar='#fff7ed', sidebar_text='#9c4221'),
    ThemePreset(key='royalPurple', name='Royal Purple',
                background='#faf5ff', lowlight='#553c9a', highlight='#805ad5', selected='#6b46c1',
                surface='#f3e8ff', text='#2d3748', text_secondary='#553c9a', border='#e2e8f0',
                sidebar='#f9f5ff', sidebar_text='#6b46c1'),
    ThemePreset(key='crimsonRed', name='Crimson Red',
                background='#fffafa', lowlight='#742a2a', highlight='#e53e3e', selected='#c53030',
                surface='#fed7d7', text='#2d3748', text_secondary='#742a2a', border='#feb2b2',
                sidebar='#fff5f5', sidebar_text='#9b2c2c'),
    ThemePreset(key='mintGreen', name='Mint Green',
                background='#f0fff4', lowlight='#276749', highlight='#48bb78', selected='#38a169',
                surface='#c6f6d5', text='#2d3748', text_secondary='#276749', border='#9ae6b4',
                sidebar='#f0fff4', sidebar_text='#2f855a'),
    ThemePreset(key='goldenYellow', name='Golden Yellow',
                background='#fffff0', lowlight='#975a16', highlight='#ecc94b', selected='#d69e2e',
                surface='#fef5e7', text='#2d3748', text_secondary='#975a16', border='#f6e05e',
                sidebar='#fffff0', sidebar_text='#b7791f'),
    ThemePreset(key='deepTeal', name='Deep Teal',
                background='#f0fdfa', lowlight='#234e52', highlight='#319795', selected='#2c7a7b',
                surface='#c6f7f5', text='#2d3748', text_secondary='#234e52', border='#81e6d9',
                sidebar='#e6fffa', sidebar_text='#2d5016'),
]

# SVG data URLs are rendered as CSS background-image by the host.
_PATTERNS = [
    BackgroundPattern(id='none', name='None', url=None),
    BackgroundPattern(id='subtle-pattern', name='Subtle Pattern', url='data:image/svg+xml,%3Csvg width="20" height="20" viewBox="0 0 20 20" xmlns="http://www.w3.org/2000/svg"%3E%3Cg fill="%23f8f9fa" fill-opacity="0.4"%3E%3Ccircle cx="3" cy="3" r="3"/%3E%3Ccircle cx="13" cy="13" r="3"/%3E%3C/g%3E%3C/svg%3E'),
    BackgroundPattern(id='geometric', name='Geometric', url='data:image/svg+xml,%3Csvg width="40" height="40" viewBox="0 0 40 40" xmlns="http://www.w3.org/2000/svg"%3E%3Cg fill="%23f1f3f4" fill-opacity="0.3"%3E%3Cpath d="M20 20.5V18H0v-2h20v-2H0v-2h20v-2H0V8h20V6H0V4h20V2H0V0h22v20.5z"/%3E%3C/g%3E%3C/svg%3E'),
    BackgroundPattern(id='dots', name='Dots', url='data:image/svg+xml,%3Csvg width="30" height="30" viewBox="0 0 30 30" xmlns="http://www.w3.org/2000/svg"%3E%3Cdefs%3E%3Cpattern id="dots" x="0" y="0" width="30" height="30" patternUnits="userSpaceOnUse"%3E%3Ccircle cx="15" cy="15" r="2" fill="%23e2e8f0"/%3E%3C/pattern%3E%3C/defs%3E%3Crect width="100%25" height="100%25" fill="url(%23dots)"/%3E%3C/svg%3E'),
    BackgroundPattern(id='waves', name='Waves', url='data:image/svg+xml,%3Csvg width="60" height="60" viewBox="0 0 60 60" xmlns="http://www.w3.org/2000/svg"%3E%3Cg fill="none" fill-rule="evenodd"%3E%3Cg fill="%23e6fffa" fill-opacity="0.4"%3E%3Cpath d="M36 34v-4h-2v4h-4v2h4v4h2v-4h4v-2h-4zm0-30V0h-2v4h-4v2h4v4h2V6h4V4h-4zM6 34v-4H4v4H0v2h4v4h2v-4h4v-2H6zM6 4V0H4v4H0v2h4v4h2V6h4V4H6z"/%3E%3C/g%3E%3C/g%3E%3C/svg%3E'),
    BackgroundPattern(id='hexagons', name='Hexagons', url='data:image/svg+xml,%3Csvg width="56" height="100" viewBox="0 0 56 100" xmlns="http://www.w3.org/2000/svg"%3E%3Cg fill="%23f7fafc" fill-opacity="0.5"%3E%3Cpath d="M28 66L0 50V16l28-16 28 16v34l-28 16z" fill-opacity="0.2"/%3E%3C/g%3E%3C/svg%3E'),
    BackgroundPattern(id='grid', name='Grid', url='data:image/svg+xml,%3Csvg width="100" height="100" viewBox="0 0 100 100" xmlns="http://www.w3.org/2000/svg"%3E%3Cg fill-rule="evenodd"%3E%3Cg fill="%23e2e8f0" fill-opacity="0.3"%3E%3Cpath d="M96 95h4v1h-4v4h-1v-4h-9v4h-1v-4h-9v4h-1v-4h-9v4h-1v-4h-9v4h-1v-4h-9v4h-1v-4h-9v4h-1v-4h-9v4h-1v-4h-9v4h-1v-4H0v-1h15v-9H0v-1h15v-9H0v-1h15v-9H0v-1h15v-9H0v-1h15v-9H0v-1h15v-9H0v-1h15v-9H0v-1h15v-9H0v-1h15V0h1v15h9V0h1v15h9V0h1v15h9V0h1v15h9V0h1v15h9V0h1v15h9V0h1v15h9V0h1v15h9V0h1v15h4v1h-4v9h4v1h-4v9h4v1h-4v9h4v1h-4v9h4v1h-4v9h4v1h-4v9h4v1h-4v9h4v1h-4v9zm-1 0v-9h-9v9h9zm-10 0v-9h-9v9h9zm-10 0v-9h-9v9h9zm-10 0v-9h-9v9h9zm-10 0v-9h-9v9h9zm-10 0v-9h-9v9h9zm-10 0v-9h-9v9h9zm-10 0v-9h-9v9h9zm-9-10h9v-9h-9v9zm10 0h9v-9h-9v9zm10 0h9v-9h-9v9zm10 0h9v-9h-9v9zm10 0h9v-9h-9v9zm10 0h9v-9h-9v9zm10 0h9v-9h-9v9zm10 0h9v-9h-9v9z"/%3E%3C/g%3E%3C/g%3E%3C/svg%3E'),
    BackgroundPattern(id='triangles', name='Triangles', url='data:image/svg+xml,%3Csvg width="60" height="60" viewBox="0 0 60 60" xmlns="http://www.w3.org/2000/svg"%3E%3Cg fill="none" fill-rule="evenodd"%3E%3Cg fill="%23f1f3f4" fill-opacity="0.4"%3E%3Ctriangle fill-rule="nonzero"/%3E%3Cpath d="M30 15l15 25.98H15z"/%3E%3C/g%3E%3C/g%3E%3C/svg%3E'),
    BackgroundPattern(id='circuit', name='Circuit', url='data:image/svg+xml,%3Csvg width="100" height="100" viewBox="0 0 100 100" xmlns="http://www.w3.org/2000/svg"%3E%3Cg fill="%23e6fffa" fill-opacity="0.3"%3E%3Cpath d="M11 18c3.866 0 7-3.134 7-7s-3.134-7-7-7-7 3.134-7 7 3.134 7 7 7zm48 25c3.866 0 7-3.134 7-7s-3.134-7-7-7-7 3.134-7 7 3.134 7 7 7zm-43-7c1.657 0 3-1.343 3-3s-1.343-3-3-3-3 1.343-3 3 1.343 3 3 3zm63 31c1.657 0 3-1.343 3-3s-1.343-3-3-3-3 1.343-3 3 1.343 3 3 3zM34 90c1.657 0 3-1.343 3-3s-1.343-3-3-3-3 1.343-3 3 1.343 3 3 3zm56-76c1.657 0 3-1.343 3-3s-1.343-3-3-3-3 1.343-3 3 1.343 3 3 3zM12 86c2.21 0 4-1.79 4-4s-1.79-4-4-4-4 1.79-4 4 1.79 4 4 4zm28-65c2.21 0 4-1.79 4-4s-1.79-4-4-4-4 1.79-4 4 1.79 4 4 4zm23-11c2.76 0 5-2.24 5-5s-2.24-5-5-5-5 2.24-5 5 2.24 5 5 5zm-6 60c2.21 0 4-1.79 4-4s-1.79-4-4-4-4 1.79-4 4 1.79 4 4 4zm29 22c2.76 0 5-2.24 5-5s-2.24-5-5-5-5 2.24-5 5 2.24 5 5 5zM32 63c2.76 0 5-2.24 5-5s-2.24-5-5-5-5 2.24-5 5 2.24 5 5 5zm57-13c2.76 0 5-2.24 5-5s-2.24-5-5-5-5 2.24-5 5 2.24 5 5 5zm-9-21c1.105 0 2-.895 2-2s-.895-2-2-2-2 .895-2 2 .895 2 2 2zM60 91c1.105 0 2-.895 2-2s-.895-2-2-2-2 .895-2 2 .895 2 2 2zM35 41c1.105 0 2-.895 2-2s-.895-2-2-2-2 .895-2 2 .895 2 2 2zM12 60c1.105 0 2-.895 2-2s-.895-2-2-2-2 .895-2 2 .895 2 2 2z"/%3E%3C/g%3E%3C/svg%3E'),
    BackgroundPattern(id='leaves', name='Leaves', url='data:image/svg+xml,%3Csvg width="100" height="100" viewBox="0 0 100 100" xmlns="http://www.w3.org/2000/svg"%3E%3Cg fill="%23f0fff4" fill-opacity="0.4"%3E%3Cpath d="M25 30c0-15 15-15 15 0s-15 15-15 0zm40 0c0-15 15-15 15 0s-15 15-15 0zM25 70c0-15 15-15 15 0s-15 15-15 0zm40 0c0-15 15-15 15 0s-15 15-15 0z"/%3E%3C/g%3E%3C/svg%3E'),
]

THEME_PRESETS: Dict[str, ThemePreset] = {p.key: p for p in _PRESETS}
BACKGROUND_PATTERNS: Dict[str, BackgroundPattern] = {p.id: p for p in _PATTERNS}


def list_presets() -> List[ThemePreset]:
    return list(_PRESETS)


def list_patterns() -> List[BackgroundPattern]:
    return list(_PATTERNS)


def get_preset(key: str) -> ThemePreset:
    try:
        return THEME_PRESETS[key]
    except KeyError:
        raise NotFoundError("Unknown theme preset", repr(key)) from None


def get_pattern(pattern_id: str) -> BackgroundPattern:
    try:
        return BACKGROUND_PATTERNS[pattern_id]
    except KeyError:
        raise NotFoundError("Unknown background pattern", repr(pattern_id)) from None


def resolve_pattern_url(pattern_id: Optional[str]) -> Optional[str]:
    """URL for ``pattern_id``; ``None`` for the ``none`` pattern or no id."""
    if not pattern_id:
        return None
    return get_pattern(pattern_id).url
