"""Unit tests for hex/RGB/HSL conversion, contrast and distance helpers."""

import pytest

from prism.contexts.theming.color_math import (
    color_distance,
    contrast_ratio,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    is_canonical_hex,
    is_valid_hex_color,
    normalize_hex,
    relative_luminance,
    rgb_to_hex,
    rotate_hue,
    scale_channels,
)
from prism.contexts.theming.exceptions import InvalidColorFormatError

SAMPLE_COLORS = [
    "#000000",
    "#ffffff",
    "#ff0000",
    "#3b82f6",
    "#0f172a",
    "#10b981",
    "#f59e0b",
    "#7c3aed",
    "#ec4899",
    "#64748b",
    "#00ff41",
    "#fefce8",
]


@pytest.mark.unit
class TestHexParsing:
    def test_hex_to_rgb(self):
        assert hex_to_rgb("#ff8000") == (255, 128, 0)

    def test_uppercase_is_accepted(self):
        assert hex_to_rgb("#FF8000") == (255, 128, 0)

    def test_shorthand_is_expanded(self):
        assert normalize_hex("#ABC") == "#aabbcc"
        assert hex_to_rgb("#fff") == (255, 255, 255)

    @pytest.mark.parametrize("value", ["123456", "#12345", "#ggg000", "", None, "#1234567", "red"])
    def test_invalid_values_raise(self, value):
        with pytest.raises(InvalidColorFormatError):
            normalize_hex(value)

    def test_invalid_value_is_not_valid(self):
        assert not is_valid_hex_color("#12")
        assert is_valid_hex_color("#123")

    @pytest.mark.parametrize("value", ["#abc", "#ABCDEF", "abcdef", None])
    def test_only_lowercase_six_digit_is_canonical(self, value):
        assert not is_canonical_hex(value)
        assert is_canonical_hex("#abcdef")

    def test_error_carries_field(self):
        with pytest.raises(InvalidColorFormatError) as exc_info:
            normalize_hex("blue", field="primary")

        assert exc_info.value.color == "blue"
        assert exc_info.value.field == "primary"
        assert isinstance(exc_info.value, ValueError)

    def test_rgb_to_hex_rounds_and_clamps(self):
        assert rgb_to_hex(255.4, -3, 300) == "#ff00ff"
        assert rgb_to_hex(127.6, 0, 0) == "#800000"


@pytest.mark.unit
class TestHsl:
    @pytest.mark.parametrize(
        "color,expected",
        [
            ("#ff0000", (0, 100, 50)),
            ("#00ff00", (120, 100, 50)),
            ("#0000ff", (240, 100, 50)),
            ("#ffffff", (0, 0, 100)),
            ("#000000", (0, 0, 0)),
        ],
    )
    def test_known_conversions(self, color, expected):
        hsl = hex_to_hsl(color)
        assert hsl.h == pytest.approx(expected[0])
        assert hsl.s == pytest.approx(expected[1])
        assert hsl.l == pytest.approx(expected[2])

    @pytest.mark.parametrize("color", SAMPLE_COLORS)
    def test_hsl_ranges(self, color):
        hsl = hex_to_hsl(color)
        assert 0 <= hsl.h < 360
        assert 0 <= hsl.s <= 100
        assert 0 <= hsl.l <= 100

    @pytest.mark.parametrize("color", SAMPLE_COLORS)
    def test_round_trip_within_one_unit(self, color):
        restored = hex_to_rgb(hsl_to_hex(*hex_to_hsl(color)))
        original = hex_to_rgb(color)
        assert all(abs(a - b) <= 1 for a, b in zip(restored, original))

    def test_hsl_to_hex_wraps_hue_and_clamps(self):
        assert hsl_to_hex(360, 100, 50) == "#ff0000"
        assert hsl_to_hex(120, 100, 50) == "#00ff00"
        assert hsl_to_hex(0, 150, -10) == "#000000"
        assert hsl_to_hex(0, 0, 150) == "#ffffff"

    def test_rotate_hue_complementary(self):
        assert rotate_hue("#ff0000", 180) == "#00ffff"

    def test_rotate_hue_caps_lightness(self):
        rotated = rotate_hue("#fefce8", 120, lightness_offset=10, max_lightness=90)
        assert hex_to_hsl(rotated).l <= 90.5


@pytest.mark.unit
class TestContrast:
    def test_black_on_white(self):
        assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)

    @pytest.mark.parametrize("color", SAMPLE_COLORS)
    def test_identical_colors(self, color):
        assert contrast_ratio(color, color) == 1

    @pytest.mark.parametrize("fg", SAMPLE_COLORS[:6])
    @pytest.mark.parametrize("bg", SAMPLE_COLORS[6:])
    def test_symmetric_and_bounded(self, fg, bg):
        ratio = contrast_ratio(fg, bg)
        assert ratio == contrast_ratio(bg, fg)
        assert 1 <= ratio <= 21.0000001

    def test_luminance_bounds(self):
        assert relative_luminance("#000000") == 0
        assert relative_luminance("#ffffff") == pytest.approx(1.0)


@pytest.mark.unit
def test_color_distance():
    """Test Euclidean RGB distance."""
    assert color_distance("#000000", "#ffffff") == pytest.approx(255 * 3 ** 0.5)
    assert color_distance("#3b82f6", "#3b82f6") == 0
    assert color_distance("#000000", "#030400") == pytest.approx(5.0)


@pytest.mark.unit
def test_scale_channels_floors_and_clamps():
    """Test coarse channel scaling used for light/dark conversion."""
    assert scale_channels("#ff8040", 0.8) == "#cc6633"
    assert scale_channels("#ff8040", 1.2) == "#ff994c"
    assert scale_channels("#ffffff", 0.8) == "#cccccc"
