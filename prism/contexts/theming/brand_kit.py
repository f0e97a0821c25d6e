"""
Brand Kit Manager

Derives a full palette and font configuration from a small brand seed (one to
three colors, optional fonts and logo) and a brand personality.

Missing secondary/accent colors are derived from the primary with the same hue
rotations the palette generator uses (complementary and triadic). Surface and
border tints are lightened, desaturated versions of the primary.
"""

from dataclasses import replace
from typing import Dict, List, Optional, Tuple
from urllib.parse import urlparse

from prism.contexts.theming.color_math import (
    contrast_ratio,
    hex_to_hsl,
    hsl_to_hex,
    is_valid_hex_color,
    normalize_hex,
    rotate_hue,
)
from prism.contexts.theming.defaults import SEMANTIC_COLORS
from prism.contexts.theming.font_manager import (
    create_configuration,
    get_all_pairings,
    get_pairing_by_name,
    get_pairings_by_category,
)
from prism.contexts.theming.logger import _log_debug, _log_info, _log_warning
from prism.contexts.theming.palette_generator import check_accessibility
from prism.contexts.theming.theme_data_structures import (
    BrandColors,
    BrandFonts,
    BrandKit,
    BrandKitValidation,
    BrandLogo,
    ColorPalette,
    FontConfiguration,
    TextColors,
)

DEFAULT_PAIRING_NAME = "Professional Classic"

# Returned by extract_colors_from_logo() until real image analysis exists
PLACEHOLDER_LOGO_COLORS = BrandColors(primary="#2563eb", secondary="#64748b", accent="#10b981")

BRAND_BACKGROUND = "#ffffff"
BRAND_TEXT_SECONDARY = "#64748b"
BRAND_TEXT_MUTED = "#94a3b8"
# Used for body text when black/white on the primary would be unreadable on the page
BRAND_TEXT_FALLBACK = "#0f172a"

COMPANY_BRAND_COLORS: Dict[str, Dict[str, str]] = {
    # Tech
    "google": {"primary": "#4285f4", "secondary": "#ea4335", "accent": "#fbbc05"},
    "microsoft": {"primary": "#0078d4", "secondary": "#00bcf2", "accent": "#40e0d0"},
    "apple": {"primary": "#007aff", "secondary": "#5856d6", "accent": "#ff9500"},
    "meta": {"primary": "#1877f2", "secondary": "#42a5f5", "accent": "#e91e63"},
    "amazon": {"primary": "#ff9900", "secondary": "#232f3e", "accent": "#146eb4"},
    "netflix": {"primary": "#e50914", "secondary": "#221f1f", "accent": "#f5f5f1"},
    "spotify": {"primary": "#1db954", "secondary": "#191414", "accent": "#1ed760"},
    # Financial
    "jpmorgan": {"primary": "#0066b2", "secondary": "#5a5a5a", "accent": "#00a651"},
    "goldman": {"primary": "#0066cc", "secondary": "#003d7a", "accent": "#4d94ff"},
    "visa": {"primary": "#1a1f71", "secondary": "#faa61a", "accent": "#ee4036"},
    "mastercard": {"primary": "#eb001b", "secondary": "#ff5f00", "accent": "#f79e1b"},
    # Consulting
    "mckinsey": {"primary": "#0066cc", "secondary": "#003d7a", "accent": "#4d94ff"},
    "bcg": {"primary": "#0073e6", "secondary": "#004d99", "accent": "#3399ff"},
    "bain": {"primary": "#c41e3a", "secondary": "#8b0000", "accent": "#ff6b6b"},
    # Healthcare
    "pfizer": {"primary": "#0093d0", "secondary": "#005eb8", "accent": "#00b4d8"},
    "jnj": {"primary": "#cc0000", "secondary": "#990000", "accent": "#ff3333"},
    # Other
    "nike": {"primary": "#000000", "secondary": "#ff6600", "accent": "#ffffff"},
    "cocacola": {"primary": "#f40009", "secondary": "#000000", "accent": "#ffffff"},
    "starbucks": {"primary": "#00704a", "secondary": "#d4af37", "accent": "#f1f8e9"},
}

BRAND_PERSONALITIES = {
    "innovative": {
        "colors": ("#6366f1", "#8b5cf6", "#06b6d4", "#10b981"),
        "fonts": ("Inter", "Work Sans", "Poppins"),
        "style": "modern",
    },
    "trustworthy": {
        "colors": ("#1e40af", "#059669", "#374151", "#0f172a"),
        "fonts": ("Source Sans Pro", "Roboto", "Merriweather"),
        "style": "classic",
    },
    "creative": {
        "colors": ("#ec4899", "#f59e0b", "#8b5cf6", "#ef4444"),
        "fonts": ("Montserrat", "Oswald", "Playfair Display"),
        "style": "creative",
    },
    "professional": {
        "colors": ("#374151", "#1e40af", "#059669", "#6b7280"),
        "fonts": ("Roboto Slab", "Source Sans Pro", "Crimson Text"),
        "style": "classic",
    },
    "energetic": {
        "colors": ("#f59e0b", "#ef4444", "#ec4899", "#8b5cf6"),
        "fonts": ("Work Sans", "Montserrat", "Open Sans"),
        "style": "modern",
    },
}

# Company-name keywords -> suggested (primary, secondary) fonts
BRAND_FONT_KEYWORDS = (
    (("tech", "software", "digital"), ("Inter", "JetBrains Mono")),
    (("bank", "financial", "capital"), ("Source Sans Pro", "Roboto Slab")),
    (("creative", "design", "agency"), ("Montserrat", "Playfair Display")),
    (("consulting", "advisory"), ("Merriweather", "Source Sans Pro")),
)
DEFAULT_BRAND_FONTS = ("Inter", "Source Sans Pro")


def _personality_profile(personality: str) -> dict:
    if personality not in BRAND_PERSONALITIES:
        raise ValueError(
            f"Unknown brand personality '{personality}'. Expected one of {list(BRAND_PERSONALITIES)}"
        )
    return BRAND_PERSONALITIES[personality]


def get_personality_colors(personality: str) -> BrandColors:
    """Seed colors for a personality, for callers that have no brand colors of their own."""
    primary, secondary, accent = _personality_profile(personality)["colors"][:3]
    return BrandColors(primary=primary, secondary=secondary, accent=accent)


def harmonious_color(primary_color: str, kind: str) -> str:
    """
    Light tint of the primary for "surface" or "border" use.

    Unknown kinds return the primary unchanged.
    """
    hsl = hex_to_hsl(primary_color)
    if kind == "surface":
        return hsl_to_hex(hsl.h, max(hsl.s - 80, 5), min(hsl.l + 45, 95))
    if kind == "border":
        return hsl_to_hex(hsl.h, max(hsl.s - 60, 10), min(hsl.l + 30, 85))
    return normalize_hex(primary_color)


def optimal_text_color(background_color: str) -> str:
    """Black or white, whichever has the higher contrast against the background."""
    black = contrast_ratio("#000000", background_color)
    white = contrast_ratio("#ffffff", background_color)
    return "#000000" if black >= white else "#ffffff"


def find_best_font_pairing(font_family: str, style: Optional[str] = None) -> str:
    """
    Name of the catalog pairing that best matches a brand font.

    Prefers a pairing whose heading or body contains the family, then the
    first pairing in the style category, then "Professional Classic".
    """
    for pairing in get_all_pairings():
        if font_family in pairing.heading or font_family in pairing.body:
            return pairing.name

    if style:
        in_style = get_pairings_by_category(style)
        if in_style:
            return in_style[0].name

    return DEFAULT_PAIRING_NAME


def derive_brand_colors(colors: BrandColors) -> BrandColors:
    """
    Fill in missing secondary/accent colors harmonically from the primary.

    All colors are validated and normalized to lowercase #rrggbb.

    Raises:
        InvalidColorFormatError: If any supplied color is malformed
    """
    primary = normalize_hex(colors.primary, field="colors.primary")
    secondary = (
        normalize_hex(colors.secondary, field="colors.secondary")
        if colors.secondary
        else rotate_hue(primary, 180, saturation_factor=0.8)
    )
    accent = (
        normalize_hex(colors.accent, field="colors.accent")
        if colors.accent
        else rotate_hue(primary, 120, lightness_offset=10, max_lightness=90)
    )
    return BrandColors(primary=primary, secondary=secondary, accent=accent)


def generate_brand_theme(
    brand_kit: BrandKit, personality: str = "professional"
) -> Tuple[ColorPalette, FontConfiguration]:
    """
    Build a palette and font configuration from a brand kit.

    Args:
        brand_kit: Brand seed (read only)
        personality: innovative, trustworthy, creative, professional or energetic

    Returns:
        Tuple of (ColorPalette, FontConfiguration)

    Raises:
        ValueError: If personality is unknown
        InvalidColorFormatError: If a kit color is malformed
    """
    profile = _personality_profile(personality)
    colors = derive_brand_colors(brand_kit.colors)

    on_brand_text = optimal_text_color(colors.primary)
    text_primary = on_brand_text
    if check_accessibility(on_brand_text, BRAND_BACKGROUND).level == "fail":
        _log_debug(
            f"On-brand text {on_brand_text} is unreadable on {BRAND_BACKGROUND}, "
            f"using {BRAND_TEXT_FALLBACK} for body text"
        )
        text_primary = BRAND_TEXT_FALLBACK

    palette = ColorPalette(
        primary=colors.primary,
        secondary=colors.secondary,
        accent=colors.accent,
        background=BRAND_BACKGROUND,
        surface=harmonious_color(colors.primary, "surface"),
        border=harmonious_color(colors.primary, "border"),
        text=TextColors(primary=text_primary, secondary=BRAND_TEXT_SECONDARY, muted=BRAND_TEXT_MUTED),
        success=SEMANTIC_COLORS["success"],
        warning=SEMANTIC_COLORS["warning"],
        error=SEMANTIC_COLORS["error"],
    )

    font_family = brand_kit.fonts.primary if brand_kit.fonts else profile["fonts"][0]
    fonts = create_configuration(get_pairing_by_name(find_best_font_pairing(font_family, profile["style"])))

    _log_info(
        f"Brand theme for {colors.primary} ({personality}): "
        f"fonts {fonts.heading.family}/{fonts.body.family}"
    )
    return palette, fonts


def apply_brand_colors(palette: ColorPalette, brand_kit: BrandKit) -> ColorPalette:
    """
    Overlay brand colors onto an existing palette.

    The kit primary replaces the palette primary; kit secondary/accent replace
    theirs when present. Surface and border are re-tinted from the primary.
    """
    primary = normalize_hex(brand_kit.colors.primary, field="colors.primary")
    return replace(
        palette,
        primary=primary,
        secondary=normalize_hex(brand_kit.colors.secondary, field="colors.secondary")
        if brand_kit.colors.secondary
        else palette.secondary,
        accent=normalize_hex(brand_kit.colors.accent, field="colors.accent")
        if brand_kit.colors.accent
        else palette.accent,
        surface=harmonious_color(primary, "surface"),
        border=harmonious_color(primary, "border"),
    )


def _is_valid_url(url: str) -> bool:
    parsed = urlparse(url)
    if not parsed.scheme:
        return False
    if parsed.scheme in ("http", "https"):
        return bool(parsed.netloc)
    return bool(parsed.netloc or parsed.path)


def validate_brand_kit(brand_kit: BrandKit) -> BrandKitValidation:
    """
    Check a brand kit for malformed colors, weak contrast and logo problems.

    Never raises: every problem is reported in the returned issues list.
    """
    issues: List[str] = []
    suggestions: List[str] = []
    colors = brand_kit.colors

    supplied = [c for c in (colors.primary, colors.secondary, colors.accent) if c]
    for color in supplied:
        if not is_valid_hex_color(color):
            issues.append(f"Invalid color format: {color}")
            suggestions.append("Use valid hex color format (e.g., #ff0000)")

    if (
        colors.primary
        and colors.secondary
        and is_valid_hex_color(colors.primary)
        and is_valid_hex_color(colors.secondary)
    ):
        if check_accessibility(colors.primary, colors.secondary).level == "fail":
            issues.append("Primary and secondary colors have insufficient contrast")
            suggestions.append("Consider adjusting color lightness or choosing different colors")

    if brand_kit.fonts and brand_kit.fonts.primary:
        suggestions.append("Ensure custom fonts are properly loaded")

    if brand_kit.logo:
        if not brand_kit.logo.url:
            issues.append("Logo URL is required when logo is specified")
        elif not _is_valid_url(brand_kit.logo.url):
            issues.append("Invalid logo URL format")
            suggestions.append("Provide a valid URL to the logo image")

    return BrandKitValidation(is_valid=not issues, issues=issues, suggestions=suggestions)


def generate_logo_css(logo: Optional[BrandLogo]) -> str:
    """CSS rule for a .resume-logo element placed according to logo.position."""
    if not logo:
        return ""

    lines = [
        ".resume-logo {",
        f"  background-image: url('{logo.url}');",
        "  background-size: contain;",
        "  background-repeat: no-repeat;",
        f"  width: {logo.width or 'auto'};",
        f"  height: {logo.height or '40px'};",
        "  display: inline-block;",
    ]

    if logo.position == "top-left":
        lines += ["  float: left;", "  margin: 0 1rem 1rem 0;"]
    elif logo.position == "top-right":
        lines += ["  float: right;", "  margin: 0 0 1rem 1rem;"]
    elif logo.position == "center":
        lines += ["  display: block;", "  margin: 0 auto 1rem auto;"]
    elif logo.position == "bottom":
        lines += ["  display: block;", "  margin: 1rem auto 0 auto;"]

    lines.append("}")
    return "\n".join(lines) + "\n"


def extract_colors_from_logo(logo_url: str) -> BrandColors:
    """
    Placeholder for logo color extraction.

    No image analysis is performed: the same fixed colors are returned for any URL.
    """
    _log_warning(f"Color extraction from {logo_url} is not implemented, returning placeholder colors")
    return PLACEHOLDER_LOGO_COLORS


def suggest_brand_fonts(company_name: str) -> BrandFonts:
    """Suggest brand fonts from keywords in a company name."""
    name = company_name.lower()
    for keywords, (primary, secondary) in BRAND_FONT_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return BrandFonts(primary=primary, secondary=secondary)
    return BrandFonts(primary=DEFAULT_BRAND_FONTS[0], secondary=DEFAULT_BRAND_FONTS[1])


def create_brand_kit(company_name: str, custom_colors: Optional[BrandColors] = None) -> BrandKit:
    """
    Create a brand kit for a company.

    Colors come from custom_colors, then the known-company table (matched on
    the lowercase name with non-letters stripped), then PLACEHOLDER_LOGO_COLORS.
    """
    key = "".join(ch for ch in company_name.lower() if "a" <= ch <= "z")
    known = COMPANY_BRAND_COLORS.get(key)

    if custom_colors:
        colors = custom_colors
    elif known:
        colors = BrandColors(**known)
    else:
        colors = PLACEHOLDER_LOGO_COLORS

    return BrandKit(colors=colors, fonts=suggest_brand_fonts(company_name))
