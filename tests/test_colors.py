"""Tests for aviary.ui.colors – palette and stylesheet helpers."""

from __future__ import annotations

import pytest

from aviary.ui.colors import RoomColors, blend_hex, hex_to_rgba, parse_scale


# ===========================================================================
# RoomColors – constants
# ===========================================================================

class TestRoomColors:
    @pytest.mark.parametrize("name", ["BG_TOP", "BG_BOTTOM", "PRIMARY", "BRASS", "WOOD", "DIGIT_BG"])
    def test_is_hex(self, name: str):
        value = getattr(RoomColors, name)
        assert value.startswith("#")
        assert len(value) == 7

    def test_scrim_is_rgba(self):
        assert RoomColors.OVERLAY_SCRIM.startswith("rgba(")


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint(self):
        result = blend_hex("#000000", "#FFFFFF", 0.5)
        assert 126 <= int(result[1:3], 16) <= 128

    def test_clamped(self):
        assert blend_hex("#FF0000", "#0000FF", 2.0) == "#0000FF"
        assert blend_hex("#FF0000", "#0000FF", -1.0) == "#FF0000"

    def test_invalid_hex_chars(self):
        assert blend_hex("#GGHHII", "#000000", 0.5) == "#GGHHII"

    def test_wrong_length(self):
        assert blend_hex("#FFF", "#000000", 0.5) == "#FFF"


# ===========================================================================
# hex_to_rgba
# ===========================================================================

class TestHexToRgba:
    def test_door_glow(self):
        assert hex_to_rgba("#fff3c2", 0.6) == "rgba(255, 243, 194, 153)"

    def test_fully_transparent(self):
        assert hex_to_rgba("#000000", 0.0) == "rgba(0, 0, 0, 0)"

    def test_opacity_clamped(self):
        assert hex_to_rgba("#000000", 3.0) == "rgba(0, 0, 0, 255)"

    def test_non_hex_passthrough(self):
        assert hex_to_rgba("red", 0.5) == "red"

    def test_bad_digits_passthrough(self):
        assert hex_to_rgba("#zzzzzz", 0.5) == "#zzzzzz"


# ===========================================================================
# parse_scale
# ===========================================================================

class TestParseScale:
    def test_pulse(self):
        assert parse_scale("scale(1.2)") == 1.2

    def test_reset(self):
        assert parse_scale("scale(1)") == 1.0

    @pytest.mark.parametrize("value", ["", "rotate(10deg)", "scale(x)"])
    def test_fallback(self, value: str):
        assert parse_scale(value) == 1.0
