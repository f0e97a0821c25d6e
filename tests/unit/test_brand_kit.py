"""Unit tests for brand kit derivation and validation."""

import pytest

from prism.contexts.theming.brand_kit import (
    BRAND_TEXT_FALLBACK,
    PLACEHOLDER_LOGO_COLORS,
    apply_brand_colors,
    create_brand_kit,
    derive_brand_colors,
    extract_colors_from_logo,
    find_best_font_pairing,
    generate_brand_theme,
    generate_logo_css,
    get_personality_colors,
    harmonious_color,
    optimal_text_color,
    suggest_brand_fonts,
    validate_brand_kit,
)
from prism.contexts.theming.color_math import hex_to_hsl, rotate_hue
from prism.contexts.theming.exceptions import InvalidColorFormatError
from prism.contexts.theming.font_manager import create_configuration, get_pairings_by_category
from prism.contexts.theming.palette_generator import build_palette
from prism.contexts.theming.theme_data_structures import BrandColors, BrandFonts, BrandKit, BrandLogo


@pytest.mark.unit
class TestGenerateBrandTheme:
    def test_derives_missing_colors(self):
        palette, _ = generate_brand_theme(BrandKit(colors=BrandColors(primary="#2563eb")))

        assert palette.primary == "#2563eb"
        assert palette.secondary == rotate_hue("#2563eb", 180, saturation_factor=0.8)
        assert palette.accent == rotate_hue("#2563eb", 120, lightness_offset=10, max_lightness=90)
        assert palette.background == "#ffffff"

    def test_supplied_colors_are_normalized(self):
        kit = BrandKit(colors=BrandColors(primary="#2563EB", secondary="#F00", accent="#10b981"))
        palette, _ = generate_brand_theme(kit)

        assert palette.secondary == "#ff0000"
        assert palette.accent == "#10b981"

    def test_text_stays_readable_on_white(self):
        # White reads best on this blue, but white text on a white page does not
        palette, _ = generate_brand_theme(BrandKit(colors=BrandColors(primary="#2563eb")))
        assert palette.text.primary == BRAND_TEXT_FALLBACK

    def test_text_uses_black_for_light_primary(self):
        palette, _ = generate_brand_theme(BrandKit(colors=BrandColors(primary="#fde047")))
        assert palette.text.primary == "#000000"

    def test_personality_font(self):
        _, fonts = generate_brand_theme(BrandKit(colors=BrandColors(primary="#2563eb")))

        # professional -> Roboto Slab -> Corporate Executive
        assert fonts.heading.family == "Roboto Slab"
        assert fonts.heading.weight == 700
        assert fonts.body.family == "Roboto"

    def test_kit_font_wins(self):
        kit = BrandKit(colors=BrandColors(primary="#2563eb"), fonts=BrandFonts(primary="Inter"))
        _, fonts = generate_brand_theme(kit, personality="creative")
        assert fonts.heading.family == "Inter"

    def test_unmatched_kit_font_uses_style_pairing(self):
        kit = BrandKit(colors=BrandColors(primary="#2563eb"), fonts=BrandFonts(primary="Comic Neue"))
        _, fonts = generate_brand_theme(kit, personality="innovative")
        assert fonts == create_configuration(get_pairings_by_category("modern")[0])

    def test_kit_is_not_modified(self):
        kit = BrandKit(colors=BrandColors(primary="#2563EB"))
        generate_brand_theme(kit)
        assert kit == BrandKit(colors=BrandColors(primary="#2563EB"))

    def test_unknown_personality(self):
        with pytest.raises(ValueError, match="Unknown brand personality"):
            generate_brand_theme(BrandKit(colors=BrandColors(primary="#2563eb")), "sleepy")

    def test_invalid_color(self):
        with pytest.raises(InvalidColorFormatError):
            generate_brand_theme(BrandKit(colors=BrandColors(primary="blue")))


@pytest.mark.unit
class TestColorHelpers:
    def test_optimal_text_color(self):
        assert optimal_text_color("#000000") == "#ffffff"
        assert optimal_text_color("#ffffff") == "#000000"

    def test_harmonious_tints(self):
        surface = hex_to_hsl(harmonious_color("#2563eb", "surface"))
        border = hex_to_hsl(harmonious_color("#2563eb", "border"))

        assert surface.l == pytest.approx(95, abs=1)
        assert border.l == pytest.approx(hex_to_hsl("#2563eb").l + 30, abs=1)

    def test_unknown_kind_returns_primary(self):
        assert harmonious_color("#2563EB", "glow") == "#2563eb"

    def test_derive_brand_colors_keeps_supplied(self):
        colors = derive_brand_colors(BrandColors(primary="#000", secondary="#111111"))
        assert colors.primary == "#000000"
        assert colors.secondary == "#111111"
        assert colors.accent is not None

    def test_apply_brand_colors(self):
        palette = build_palette("#2563eb", "professional")
        branded = apply_brand_colors(palette, BrandKit(colors=BrandColors(primary="#e50914")))

        assert branded.primary == "#e50914"
        assert branded.secondary == palette.secondary
        assert branded.text == palette.text
        assert branded.surface == harmonious_color("#e50914", "surface")

    def test_personality_colors(self):
        colors = get_personality_colors("innovative")
        assert colors == BrandColors(primary="#6366f1", secondary="#8b5cf6", accent="#06b6d4")


@pytest.mark.unit
class TestFontPairingMatch:
    def test_family_match(self):
        assert find_best_font_pairing("Inter") == "Modern Tech"
        assert find_best_font_pairing("Roboto Slab") == "Corporate Executive"

    def test_style_fallback(self):
        assert find_best_font_pairing("Comic Neue", "creative") == "Creative Bold"

    def test_default_fallback(self):
        assert find_best_font_pairing("Comic Neue") == "Professional Classic"


@pytest.mark.unit
class TestValidateBrandKit:
    def test_valid_kit(self):
        kit = BrandKit(colors=BrandColors(primary="#1e40af", secondary="#fbbf24"))
        result = validate_brand_kit(kit)

        assert result.is_valid
        assert result.issues == []

    def test_invalid_color(self):
        result = validate_brand_kit(BrandKit(colors=BrandColors(primary="blue")))

        assert not result.is_valid
        assert "Invalid color format: blue" in result.issues
        assert "Use valid hex color format (e.g., #ff0000)" in result.suggestions

    def test_poor_contrast(self):
        result = validate_brand_kit(BrandKit(colors=BrandColors(primary="#2563eb", secondary="#3b82f6")))
        assert "Primary and secondary colors have insufficient contrast" in result.issues

    def test_font_suggestion(self):
        kit = BrandKit(colors=BrandColors(primary="#1e40af"), fonts=BrandFonts(primary="Inter"))
        result = validate_brand_kit(kit)

        assert result.is_valid
        assert "Ensure custom fonts are properly loaded" in result.suggestions

    @pytest.mark.parametrize(
        "url,issue",
        [
            ("", "Logo URL is required when logo is specified"),
            ("not a url", "Invalid logo URL format"),
            ("https://", "Invalid logo URL format"),
        ],
    )
    def test_logo_problems(self, url, issue):
        kit = BrandKit(colors=BrandColors(primary="#1e40af"), logo=BrandLogo(url=url))
        result = validate_brand_kit(kit)

        assert not result.is_valid
        assert issue in result.issues

    def test_valid_logo(self):
        kit = BrandKit(colors=BrandColors(primary="#1e40af"), logo=BrandLogo(url="https://example.com/logo.png"))
        assert validate_brand_kit(kit).is_valid


@pytest.mark.unit
class TestLogoCss:
    def test_top_right(self):
        css = generate_logo_css(BrandLogo(url="https://example.com/logo.png", position="top-right"))

        assert css.startswith(".resume-logo {")
        assert "background-image: url('https://example.com/logo.png');" in css
        assert "float: right;" in css
        assert "width: auto;" in css
        assert "height: 40px;" in css

    def test_center_with_size(self):
        css = generate_logo_css(
            BrandLogo(url="https://example.com/logo.png", position="center", width="120px", height="60px")
        )
        assert "margin: 0 auto 1rem auto;" in css
        assert "width: 120px;" in css
        assert "height: 60px;" in css

    def test_no_logo(self):
        assert generate_logo_css(None) == ""


@pytest.mark.unit
class TestBrandKitCreation:
    def test_known_company(self):
        assert create_brand_kit("Spotify").colors.primary == "#1db954"
        assert create_brand_kit("Coca-Cola").colors.primary == "#f40009"

    def test_unknown_company_gets_placeholder(self):
        assert create_brand_kit("Acme Widgets").colors == PLACEHOLDER_LOGO_COLORS

    def test_custom_colors_win(self):
        custom = BrandColors(primary="#123456")
        assert create_brand_kit("Spotify", custom_colors=custom).colors == custom

    def test_suggest_brand_fonts(self):
        assert suggest_brand_fonts("Acme Software") == BrandFonts("Inter", "JetBrains Mono")
        assert suggest_brand_fonts("First Capital Bank") == BrandFonts("Source Sans Pro", "Roboto Slab")
        assert suggest_brand_fonts("Blue Sky LLC") == BrandFonts("Inter", "Source Sans Pro")

    def test_extract_colors_from_logo_is_placeholder(self):
        assert extract_colors_from_logo("https://example.com/a.png") == PLACEHOLDER_LOGO_COLORS
