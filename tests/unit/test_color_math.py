"""
Unit Tests for Colour Math
Purpose: Brightness test, lighten/darken channel shifts and hex validation
"""

import pytest

from propdesk_engine.color_math import (
    brightness,
    darken,
    is_dark,
    is_valid_hex,
    lighten,
    parse_hex,
    validate_hex,
)
from propdesk_engine.exceptions import ValidationError

EXTREMES = ["#000000", "#ffffff", "#808080"]


class TestBrightness:

    def test_black_and_white(self):
        assert brightness("#000000") == 0
        assert brightness("#ffffff") == 255

    def test_threshold_is_exclusive(self):
        # 128 exactly is not dark, 127 is
        assert is_dark("#808080") is False
        assert is_dark("#7f7f7f") is True

    def test_weighted_channels(self):
        # pure green is much brighter than pure blue
        assert is_dark("#00ff00") is False
        assert is_dark("#0000ff") is True

    def test_dark_preset_background(self):
        assert brightness("#1a202c") == pytest.approx(31.574)
        assert is_dark("#1a202c")


class TestLightenDarken:

    def test_known_values(self):
        assert lighten("#1a202c", 10) == "#343a46"
        assert lighten("#1a202c", 20) == "#4d535f"
        assert lighten("#1a202c", 8) == "#2e3440"
        assert darken("#ffffff", 5) == "#f2f2f2"
        assert darken("#ffffff", 10) == "#e5e5e5"

    @pytest.mark.parametrize("color", EXTREMES + ["#1a202c", "#abcdef"])
    def test_zero_percent_is_identity(self, color):
        assert lighten(color, 0) == color
        assert darken(color, 0) == color

    @pytest.mark.parametrize("color", ["#ABCDEF", "abcdef", " #1A202C "])
    def test_zero_percent_is_identity_after_normalising(self, color):
        assert lighten(color, 0) == validate_hex(color)
        assert darken(color, 0) == validate_hex(color)
        assert lighten("#ABCDEF", 0) == "#abcdef"

    @pytest.mark.parametrize("color", EXTREMES)
    @pytest.mark.parametrize("percent", [0, 1, 5, 10, 33, 50, 99, 100])
    def test_channels_stay_in_range(self, color, percent):
        for result in (lighten(color, percent), darken(color, percent)):
            assert is_valid_hex(result)
            assert all(0 <= channel <= 255 for channel in parse_hex(result))

    def test_clamps_at_extremes(self):
        assert lighten("#ffffff", 50) == "#ffffff"
        assert darken("#000000", 50) == "#000000"
        assert lighten("#000000", 100) == "#ffffff"
        assert darken("#ffffff", 100) == "#000000"

    def test_per_channel_clamping(self):
        assert lighten("#f0100a", 10) == "#ff2a24"
        assert darken("#f0100a", 10) == "#d60000"

    def test_output_is_lowercase(self):
        assert lighten("#ABCDEF", 0) == "#abcdef"


class TestHexValidation:

    @pytest.mark.parametrize("value", ["#ffffff", "ffffff", "#A1b2C3", " #123456 "])
    def test_accepts_well_formed(self, value):
        assert is_valid_hex(value)
        assert validate_hex(value).startswith("#")
        assert len(validate_hex(value)) == 7

    @pytest.mark.parametrize("value", ["#fff", "#fffffff", "#gggggg", "", "blue", None, 0xffffff, "#007bffdd"])
    def test_rejects_malformed(self, value):
        assert not is_valid_hex(value)
        with pytest.raises(ValidationError):
            validate_hex(value)

    def test_lighten_rejects_malformed(self):
        with pytest.raises(ValidationError):
            lighten("#12345", 10)
