"""
Theme Engine

Composes palettes, fonts and layout tokens into complete ResumeTheme values.

Responsibilities:
- Serve the predefined templates (read-only registry) and build themes from them
- Build custom themes from a ColorSchemeRequest and from a BrandKit
- Synthesize dark palettes for generated themes
- Validate themes for accessibility and completeness
- Front the rendering context for CSS and themed HTML output

Every construction path returns a new theme; templates and brand kits passed
in are never modified.
"""

import os
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from dotenv import load_dotenv

from prism.contexts.rendering.css_generator import generate_css as _render_css
from prism.contexts.rendering.html_renderer import render_document
from prism.contexts.theming.brand_kit import generate_brand_theme
from prism.contexts.theming.color_math import is_canonical_hex, is_valid_hex_color, normalize_hex, scale_channels
from prism.contexts.theming.defaults import DARK_BASE_COLORS, DARK_MODE_FACTOR, FONT_WEIGHTS, get_default_tokens
from prism.contexts.theming.exceptions import InvalidThemeStructureError, TemplateNotFoundError
from prism.contexts.theming.font_manager import create_configuration, get_all_pairings, get_pairing_by_name
from prism.contexts.theming.logger import _log_debug, _log_warning, log_theme_created
from prism.contexts.theming.palette_generator import check_accessibility, generate_color_scheme
from prism.contexts.theming.registries import ThemeRegistry
from prism.contexts.theming.theme_data_structures import (
    BorderRadius,
    BrandKit,
    ColorPalette,
    ColorSchemeRequest,
    FontConfiguration,
    Layout,
    ResumeTheme,
    Shadows,
    Spacing,
    TextColors,
    ThemeColors,
    ThemeConfiguration,
    ThemeMode,
    ThemePreview,
    ThemeValidation,
)
from prism.utils.timestamp import epoch_millis

load_dotenv()
DEFAULT_THEME_ID = os.getenv("PRISM_DEFAULT_THEME", "modern-professional")

DEFAULT_PREVIEW_SECTIONS = ("header", "experience", "skills")

_registry: Optional[ThemeRegistry] = None


def get_registry() -> ThemeRegistry:
    """Shared predefined-theme registry, created on first use."""
    global _registry
    if _registry is None:
        _registry = ThemeRegistry()
    return _registry


# ---------------------------------------------------------------------------
# Predefined templates
# ---------------------------------------------------------------------------


def get_all_themes() -> List[ResumeTheme]:
    """All predefined themes in listing order."""
    return get_registry().get_all_themes()


def get_theme_by_id(theme_id: str) -> Optional[ResumeTheme]:
    """Predefined theme with this id, or None."""
    registry = get_registry()
    if not registry.has_theme(theme_id):
        return None
    return registry.get_theme(theme_id)


def _override_palette(palette: ColorPalette, overrides: Mapping[str, Any]) -> ColorPalette:
    values: Dict[str, Any] = {}
    for key, value in overrides.items():
        if key == "text":
            if not isinstance(value, Mapping):
                raise InvalidThemeStructureError("Color override 'text' must be a mapping")
            text = palette.text.to_dict()
            for tone, color in value.items():
                if tone not in text:
                    raise InvalidThemeStructureError(f"Unknown text color '{tone}'")
                text[tone] = normalize_hex(color, field=f"text.{tone}")
            values["text"] = TextColors(**text)
        elif key in ColorPalette.COLOR_FIELDS:
            values[key] = normalize_hex(value, field=key)
        else:
            raise InvalidThemeStructureError(f"Unknown palette field '{key}'")
    return replace(palette, **values)


def _override_fonts(fonts: FontConfiguration, overrides: Union[FontConfiguration, Mapping[str, Any]]) -> FontConfiguration:
    if isinstance(overrides, FontConfiguration):
        return overrides

    merged = fonts.to_dict()
    for section, value in overrides.items():
        if section not in merged:
            raise InvalidThemeStructureError(f"Unknown font section '{section}'")
        if not isinstance(value, Mapping):
            raise InvalidThemeStructureError(f"Font override '{section}' must be a mapping")
        merged[section] = {**merged[section], **value}
    return FontConfiguration.from_dict(merged)


def create_from_template(
    template_id: str,
    customizations: Optional[Union[Mapping[str, Any], ThemeConfiguration]] = None,
) -> ResumeTheme:
    """
    Build a theme from a predefined template.

    Args:
        template_id: Registry id (e.g., 'modern-professional')
        customizations: Optional {"colors": {...}, "fonts": {...}} overrides, or a
                        ThemeConfiguration carrying them. Color overrides apply to
                        both the light and dark palette; font overrides are merged
                        per section (heading, body, code).

    Returns:
        New ResumeTheme. The registry copy is left untouched.

    Raises:
        TemplateNotFoundError: If template_id is not registered
        InvalidColorFormatError: If an override color is malformed
        InvalidThemeStructureError: If an override names an unknown field
    """
    theme = get_registry().get_theme(template_id)

    if isinstance(customizations, ThemeConfiguration):
        customizations = customizations.customizations
    if not customizations:
        log_theme_created(theme, source="template")
        return theme

    color_overrides = customizations.get("colors")
    if color_overrides:
        theme = replace(
            theme,
            colors=ThemeColors(
                light=_override_palette(theme.colors.light, color_overrides),
                dark=_override_palette(theme.colors.dark, color_overrides),
            ),
        )

    font_overrides = customizations.get("fonts")
    if font_overrides:
        theme = replace(theme, fonts=_override_fonts(theme.fonts, font_overrides))

    log_theme_created(theme, source="template")
    return theme


# ---------------------------------------------------------------------------
# Generated themes
# ---------------------------------------------------------------------------


def adjust_color_for_dark_mode(color: str) -> str:
    """Darken a color for dark mode by scaling each RGB channel by DARK_MODE_FACTOR."""
    return scale_channels(color, DARK_MODE_FACTOR)


def synthesize_dark_palette(light: ColorPalette) -> ColorPalette:
    """
    Dark counterpart of a light palette.

    Brand and status colors are darkened; background, surface, border and
    text are fixed dark-slate tones.
    """
    return ColorPalette(
        primary=adjust_color_for_dark_mode(light.primary),
        secondary=adjust_color_for_dark_mode(light.secondary),
        accent=adjust_color_for_dark_mode(light.accent),
        background=DARK_BASE_COLORS["background"],
        surface=DARK_BASE_COLORS["surface"],
        border=DARK_BASE_COLORS["border"],
        text=TextColors(**DARK_BASE_COLORS["text"]),
        success=adjust_color_for_dark_mode(light.success),
        warning=adjust_color_for_dark_mode(light.warning),
        error=adjust_color_for_dark_mode(light.error),
    )


def _default_token_fields() -> Dict[str, Any]:
    tokens = get_default_tokens()
    return {
        "spacing": Spacing.from_dict(tokens["spacing"]),
        "border_radius": BorderRadius.from_dict(tokens["borderRadius"]),
        "shadows": Shadows.from_dict(tokens["shadows"]),
        "layout": Layout.from_dict(tokens["layout"]),
    }


def create_custom_theme(request: ColorSchemeRequest, font_pairing_name: Optional[str] = None) -> ResumeTheme:
    """
    Build a theme from a color scheme request.

    Uses the top-ranked generated scheme as the light palette and the named
    font pairing (or the first catalog pairing when the name is missing or
    unknown).

    Args:
        request: Industry, personality and optional color preferences
        font_pairing_name: Optional catalog pairing name (case-insensitive)

    Returns:
        New ResumeTheme with id custom-<epoch ms>
    """
    scheme = generate_color_scheme(request)[0]

    pairing = get_pairing_by_name(font_pairing_name) if font_pairing_name else None
    if font_pairing_name and pairing is None:
        _log_warning(f"Unknown font pairing '{font_pairing_name}', using '{get_all_pairings()[0].name}'")
    if pairing is None:
        pairing = get_all_pairings()[0]

    light = scheme.palette
    theme = ResumeTheme(
        id=f"custom-{epoch_millis()}",
        name=f"Custom {request.industry} Theme",
        description=scheme.description,
        industry=request.industry,
        colors=ThemeColors(light=light, dark=synthesize_dark_palette(light)),
        fonts=create_configuration(pairing),
        **_default_token_fields(),
    )
    log_theme_created(theme, source="custom")
    return theme


def create_from_brand_kit(brand_kit: BrandKit, personality: str = "professional") -> ResumeTheme:
    """
    Build a theme from a brand kit.

    Args:
        brand_kit: Brand seed (never modified)
        personality: innovative, trustworthy, creative, professional or energetic

    Returns:
        New ResumeTheme with id brand-<epoch ms>

    Raises:
        ValueError: If personality is unknown
        InvalidColorFormatError: If a kit color is malformed
    """
    light, fonts = generate_brand_theme(brand_kit, personality)

    theme = ResumeTheme(
        id=f"brand-{epoch_millis()}",
        name="Brand Theme",
        description="Custom theme based on brand colors",
        colors=ThemeColors(light=light, dark=synthesize_dark_palette(light)),
        fonts=fonts,
        **_default_token_fields(),
    )
    log_theme_created(theme, source="brand")
    return theme


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _malformed_colors(palette: ColorPalette) -> List[str]:
    return [f"{name}={value!r}" for name, value in palette.iter_colors() if not is_canonical_hex(value)]


def _text_contrast_level(palette: ColorPalette) -> Optional[str]:
    if not (is_valid_hex_color(palette.text.primary) and is_valid_hex_color(palette.background)):
        return None
    return check_accessibility(palette.text.primary, palette.background).level


def validate_theme(theme: ResumeTheme) -> ThemeValidation:
    """
    Check a theme for accessibility and completeness.

    Never raises: malformed colors, failing contrast and missing fonts are all
    reported in the returned ThemeValidation.
    """
    errors: List[str] = []
    warnings: List[str] = []
    suggestions: List[str] = []

    for mode in ("light", "dark"):
        malformed = _malformed_colors(theme.colors.for_mode(mode))
        if malformed:
            errors.append(f"Invalid {mode} mode colors: {', '.join(malformed)}")

    light_level = _text_contrast_level(theme.colors.light)
    if light_level == "fail":
        errors.append("Text color does not meet accessibility standards")
    elif light_level == "AA":
        warnings.append("Consider improving color contrast for better accessibility")

    if _text_contrast_level(theme.colors.dark) == "fail":
        warnings.append("Dark mode text color does not meet accessibility standards")

    if not theme.fonts.heading.family:
        errors.append("Heading font family is required")
    if not theme.fonts.body.family:
        errors.append("Body font family is required")

    for usage, weight in (("Heading", theme.fonts.heading.weight), ("Body", theme.fonts.body.weight)):
        if weight not in FONT_WEIGHTS:
            warnings.append(f"{usage} font weight {weight} is not one of {list(FONT_WEIGHTS)}")

    if theme.fonts.code.family == "monospace":
        suggestions.append("Add a dedicated code font for code snippets")

    return ThemeValidation(is_valid=not errors, errors=errors, warnings=warnings, suggestions=suggestions)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def generate_css(theme: ResumeTheme, mode: str = "light") -> str:
    """`:root` custom-property block for one mode of a theme."""
    return _render_css(theme, mode)


def apply_theme_to_html(html: str, theme: ResumeTheme, mode: str = "light") -> str:
    """Wrap a resume HTML fragment in a complete themed document."""
    return render_document(html, theme, mode)


def generate_preview(theme: ResumeTheme, sections: Optional[Sequence[str]] = None) -> ThemePreview:
    """Describe the HTML preview a caller should render for a theme."""
    preview = ThemePreview(
        format="html",
        sections=tuple(sections) if sections else DEFAULT_PREVIEW_SECTIONS,
        output_path=f"preview-{theme.id}.html",
    )
    _log_debug(f"Preview for {theme.id}: {list(preview.sections)} -> {preview.output_path}")
    return preview


def default_configuration() -> ThemeConfiguration:
    """
    Starting configuration: the default theme in auto mode.

    Raises:
        TemplateNotFoundError: If PRISM_DEFAULT_THEME names an unregistered template
    """
    registry = get_registry()
    if not registry.has_theme(DEFAULT_THEME_ID):
        raise TemplateNotFoundError(DEFAULT_THEME_ID, available=registry.ids())
    return ThemeConfiguration(active_theme=DEFAULT_THEME_ID, mode=ThemeMode(mode="auto"))
