"""Unit tests for ranked palette generation."""

import pytest
from loguru import logger

from prism.contexts.theming.color_math import hex_to_hsl, is_valid_hex_color, rotate_hue
from prism.contexts.theming.palette_generator import (
    INDUSTRY_COLOR_PROFILES,
    build_palette,
    check_accessibility,
    generate_color_scheme,
    generate_color_variations,
    select_primary_color,
    wcag_level,
)
from prism.contexts.theming.theme_data_structures import (
    INDUSTRIES,
    PERSONALITIES,
    ColorPreferences,
    ColorSchemeRequest,
)


def _hue_gap(a: float, b: float) -> float:
    gap = abs(a - b) % 360
    return min(gap, 360 - gap)


@pytest.mark.unit
class TestGenerateColorScheme:
    @pytest.mark.parametrize("industry", INDUSTRIES)
    @pytest.mark.parametrize("personality", PERSONALITIES)
    def test_three_sorted_schemes(self, industry, personality):
        schemes = generate_color_scheme(ColorSchemeRequest(industry, personality))

        assert len(schemes) == 3
        confidences = [scheme.confidence for scheme in schemes]
        assert confidences == sorted(confidences, reverse=True)
        assert all(0 <= c <= 1 for c in confidences)

    def test_technology_professional(self):
        schemes = generate_color_scheme(ColorSchemeRequest("technology", "professional"))

        assert [s.palette.primary for s in schemes] == ["#2563eb", "#3b82f6", "#1e40af"]
        assert schemes[0].name == "technology professional 1"
        assert schemes[0].accessibility.level == "AAA"
        assert schemes[0].confidence == pytest.approx(0.9)
        assert "#2563eb" in schemes[0].reasoning
        assert schemes[0].description == (
            "A professional color scheme optimized for technology professionals"
        )

    def test_top_scheme_is_accessible(self):
        top = generate_color_scheme(ColorSchemeRequest("technology", "professional"))[0]
        report = check_accessibility(top.palette.text.primary, top.palette.background)
        assert report.level != "fail"

    def test_favorite_color_is_preferred(self):
        request = ColorSchemeRequest(
            "technology", "professional", ColorPreferences(favorite_colors=("#2563eb",))
        )
        schemes = generate_color_scheme(request)

        assert all(s.palette.primary == "#2563eb" for s in schemes)
        assert all(s.confidence == 1.0 for s in schemes)

    def test_avoided_colors_are_skipped(self):
        request = ColorSchemeRequest(
            "technology", "professional", ColorPreferences(avoid_colors=("#2563eb",))
        )
        primaries = {s.palette.primary for s in generate_color_scheme(request)}

        # #3b82f6 is within the avoid radius of #2563eb too
        assert primaries == {"#1e40af", "#0ea5e9"}

    def test_avoiding_everything_falls_back_to_full_list(self):
        avoid = INDUSTRY_COLOR_PROFILES["technology"]["primary"]
        request = ColorSchemeRequest(
            "technology", "professional", ColorPreferences(avoid_colors=tuple(avoid))
        )
        schemes = generate_color_scheme(request)

        assert [s.palette.primary for s in schemes] == ["#2563eb", "#3b82f6", "#1e40af"]

    def test_candidate_filtering_is_logged(self):
        messages = []
        sink_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
        try:
            select_primary_color(
                ColorSchemeRequest(
                    "technology",
                    "professional",
                    ColorPreferences(avoid_colors=("#2563eb",), favorite_colors=("#1e40af",)),
                ),
                0,
            )
        finally:
            logger.remove(sink_id)

        assert "[theme] Avoid colors left 2 of 4 technology candidates" in messages
        assert "[theme] Favorite colors matched 1 technology candidates" in messages

    def test_unknown_industry_rejected(self):
        with pytest.raises(ValueError, match="Unknown industry"):
            ColorSchemeRequest("astrology", "professional")

    def test_unknown_personality_rejected(self):
        with pytest.raises(ValueError, match="Unknown personality"):
            ColorSchemeRequest("technology", "grumpy")

    def test_request_from_dict(self):
        request = ColorSchemeRequest.from_dict(
            {
                "industry": "finance",
                "personality": "classic",
                "preferences": {"favoriteColors": ["#059669"]},
            }
        )
        assert request.preferences.favorite_colors == ("#059669",)
        assert select_primary_color(request, 0) == "#059669"


@pytest.mark.unit
class TestBuildPalette:
    def test_derived_hues(self):
        palette = build_palette("#2563eb", "professional")
        base = hex_to_hsl("#2563eb")

        assert palette.secondary == rotate_hue("#2563eb", 180, saturation_factor=0.8)
        assert _hue_gap(hex_to_hsl(palette.secondary).h, base.h + 180) < 2
        assert _hue_gap(hex_to_hsl(palette.accent).h, base.h + 120) < 2
        assert hex_to_hsl(palette.accent).l <= 90.5

    def test_personality_neutrals_and_status_colors(self):
        palette = build_palette("#7c3aed", "creative")

        assert palette.background == "#fefefe"
        assert palette.text.primary == "#581c87"
        assert (palette.success, palette.warning, palette.error) == ("#10b981", "#f59e0b", "#ef4444")

    def test_all_colors_are_valid_hex(self):
        palette = build_palette("#ABC", "bold")
        assert palette.primary == "#aabbcc"
        assert all(is_valid_hex_color(value) for _, value in palette.iter_colors())


@pytest.mark.unit
class TestAccessibility:
    def test_wcag_thresholds(self):
        assert wcag_level(21) == "AAA"
        assert wcag_level(7.0) == "AAA"
        assert wcag_level(4.5) == "AA"
        assert wcag_level(4.49) == "fail"

    def test_check_accessibility(self):
        assert check_accessibility("#000000", "#ffffff").level == "AAA"
        assert check_accessibility("#ffffff", "#ffffff").level == "fail"
        assert check_accessibility("#ffffff", "#ffffff").ratio == 1


@pytest.mark.unit
@pytest.mark.parametrize("color", ["#3b82f6", "#000000", "#ffffff", "#f59e0b"])
def test_color_variations(color):
    """Test that eight valid lighter/darker variations are produced."""
    variations = generate_color_variations(color)

    assert len(variations) == 8
    assert all(is_valid_hex_color(v) for v in variations)


@pytest.mark.unit
def test_color_variations_are_ordered_dark_to_light():
    """Test that variations go from darkest to lightest."""
    lightness = [hex_to_hsl(v).l for v in generate_color_variations("#3b82f6")]
    assert lightness == sorted(lightness)
