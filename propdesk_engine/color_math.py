# ## File: propdesk_engine/color_math.py
# Version: 1.0.0
# Date: 2026-10-18
# Purpose: Hex colour parsing, brightness test and lighten/darken helpers
#          used by the theme derivation engine.

"""
Colour math for theme derivation.

``lighten`` and ``darken`` are plain linear shifts of the 8-bit R, G and B
channels by ``round(2.55 * percent)``, clamped to [0, 255]. They are not
perceptual (no gamma, no HSL) and steps near black or white look uneven.
The arithmetic is kept as-is so derived palettes match the ones users have
already saved.

Every function returns colours normalised to lower-case ``#rrggbb``, so
``lighten("#ABCDEF", 0)`` is ``"#abcdef"``. Compare against
``validate_hex(color)`` rather than the raw input.
"""

import math
import re
from typing import Tuple

from .exceptions import ValidationError

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")

DARK_BRIGHTNESS_THRESHOLD = 128


def is_valid_hex(color) -> bool:
    """True for ``#rrggbb`` / ``rrggbb`` strings (case-insensitive)."""
    return isinstance(color, str) and bool(_HEX_RE.match(color.strip()))


def validate_hex(color) -> str:
    """
    Validate a hex colour and normalise it to lower-case ``#rrggbb``.

    Raises:
        ValidationError: On wrong length, non-hex characters or non-strings
    """
    if not isinstance(color, str):
        raise ValidationError("Colour must be a hex string", repr(color))
    match = _HEX_RE.match(color.strip())
    if not match:
        raise ValidationError("Malformed hex colour", repr(color))
    return "#" + match.group(1).lower()


def parse_hex(color: str) -> Tuple[int, int, int]:
    value = int(validate_hex(color)[1:], 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def to_hex(r: int, g: int, b: int) -> str:
    return "#{:02x}{:02x}{:02x}".format(_clamp(r), _clamp(g), _clamp(b))


def _clamp(channel: int) -> int:
    return max(0, min(255, channel))


def _shift_amount(percent: float) -> int:
    # Half-up rounding, matching the arithmetic stored themes were built with.
    return int(math.floor(2.55 * percent + 0.5))


def brightness(color: str) -> float:
    """Perceived brightness ``(299R + 587G + 114B) / 1000`` on a 0-255 scale."""
    r, g, b = parse_hex(color)
    return (r * 299 + g * 587 + b * 114) / 1000


def is_dark(color: str) -> bool:
    return brightness(color) < DARK_BRIGHTNESS_THRESHOLD


def lighten(color: str, percent: float) -> str:
    amount = _shift_amount(percent)
    r, g, b = parse_hex(color)
    return to_hex(r + amount, g + amount, b + amount)


def darken(color: str, percent: float) -> str:
    amount = _shift_amount(percent)
    r, g, b = parse_hex(color)
    return to_hex(r - amount, g - amount, b - amount)
