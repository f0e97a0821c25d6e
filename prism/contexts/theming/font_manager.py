"""
Font Manager

Curated catalog of heading/body/code font pairings, industry-aware suggestions,
and expansion of a pairing into a FontConfiguration plus its CSS.

The catalog is a module-level tuple of frozen FontPairing values built once at
import; accessors return new lists so callers cannot reorder the registry.
"""

from typing import Dict, List, Optional, Sequence

from prism.contexts.theming.logger import _log_debug
from prism.contexts.theming.theme_data_structures import (
    FONT_CATEGORIES,
    BodyFont,
    CodeFont,
    FontConfiguration,
    FontPairing,
    HeadingFont,
    HeadingSizes,
)

FONT_PAIRINGS = (
    FontPairing(
        name="Professional Classic",
        description="Timeless combination perfect for corporate and traditional industries",
        heading="Playfair Display",
        body="Source Sans Pro",
        code="Source Code Pro",
        category="classic",
        google_fonts=True,
        fallbacks=("Georgia", "serif", "Arial", "sans-serif"),
    ),
    FontPairing(
        name="Modern Tech",
        description="Clean, geometric fonts ideal for technology and startup resumes",
        heading="Inter",
        body="Inter",
        code="JetBrains Mono",
        category="modern",
        google_fonts=True,
        fallbacks=("Helvetica", "Arial", "sans-serif"),
    ),
    FontPairing(
        name="Creative Bold",
        description="Distinctive fonts for creative professionals and designers",
        heading="Montserrat",
        body="Open Sans",
        code="Fira Code",
        category="creative",
        google_fonts=True,
        fallbacks=("Arial", "sans-serif"),
    ),
    FontPairing(
        name="Academic Serif",
        description="Traditional serif combination for academic and research positions",
        heading="Crimson Text",
        body="Crimson Text",
        code="Inconsolata",
        category="classic",
        google_fonts=True,
        fallbacks=("Times New Roman", "serif"),
    ),
    FontPairing(
        name="Minimal Sans",
        description="Ultra-clean sans-serif for minimalist and modern designs",
        heading="Poppins",
        body="Nunito Sans",
        code="Roboto Mono",
        category="modern",
        google_fonts=True,
        fallbacks=("Helvetica", "Arial", "sans-serif"),
    ),
    FontPairing(
        name="Editorial Style",
        description="Magazine-inspired fonts for media and publishing professionals",
        heading="Libre Baskerville",
        body="Lato",
        code="Ubuntu Mono",
        category="classic",
        google_fonts=True,
        fallbacks=("Georgia", "serif", "Arial", "sans-serif"),
    ),
    FontPairing(
        name="Tech Startup",
        description="Modern, approachable fonts for startup and tech company resumes",
        heading="Work Sans",
        body="Work Sans",
        code="Space Mono",
        category="modern",
        google_fonts=True,
        fallbacks=("Helvetica", "Arial", "sans-serif"),
    ),
    FontPairing(
        name="Artistic Flair",
        description="Expressive fonts for artists, designers, and creative directors",
        heading="Oswald",
        body="Merriweather",
        code="Courier Prime",
        category="creative",
        google_fonts=True,
        fallbacks=("Arial", "sans-serif", "Georgia", "serif"),
    ),
    FontPairing(
        name="Corporate Executive",
        description="Authoritative fonts for senior management and executive positions",
        heading="Roboto Slab",
        body="Roboto",
        code="Roboto Mono",
        category="classic",
        google_fonts=True,
        fallbacks=("Georgia", "serif", "Arial", "sans-serif"),
    ),
    FontPairing(
        name="Consultant Pro",
        description="Professional fonts that convey expertise and trustworthiness",
        heading="Merriweather",
        body="Source Sans Pro",
        code="Source Code Pro",
        category="classic",
        google_fonts=True,
        fallbacks=("Georgia", "serif", "Arial", "sans-serif"),
    ),
    FontPairing(
        name="Developer Mono",
        description="Engineering-grade family with a matching monospace for technical resumes",
        heading="IBM Plex Sans",
        body="IBM Plex Sans",
        code="IBM Plex Mono",
        category="technical",
        google_fonts=True,
        fallbacks=("Helvetica", "Arial", "sans-serif"),
    ),
)

# System fonts never requested from Google Fonts
SYSTEM_FONTS = {
    "serif": ("Georgia", "Times New Roman", "Times", "serif"),
    "sans_serif": ("Helvetica", "Arial", "sans-serif"),
    "monospace": ("Monaco", "Menlo", "Consolas", "monospace"),
}

SERIF_FONTS = ("Playfair Display", "Merriweather", "Crimson Text", "Libre Baskerville", "Roboto Slab")
MONOSPACE_FONTS = (
    "Source Code Pro",
    "JetBrains Mono",
    "Fira Code",
    "Inconsolata",
    "Space Mono",
    "Ubuntu Mono",
    "Courier Prime",
    "Roboto Mono",
    "IBM Plex Mono",
)

# Families known to be served by Google Fonts
GOOGLE_FONTS = (
    "Inter",
    "Roboto",
    "Open Sans",
    "Lato",
    "Montserrat",
    "Source Sans Pro",
    "Playfair Display",
    "Merriweather",
    "Crimson Text",
    "Libre Baskerville",
    "Work Sans",
    "Poppins",
    "Nunito Sans",
    "Oswald",
    "Roboto Slab",
    "IBM Plex Sans",
) + MONOSPACE_FONTS

FONT_SCALES = {
    "compact": {"h1": "1.5rem", "h2": "1.25rem", "h3": "1.125rem", "body": "0.875rem", "small": "0.75rem"},
    "standard": {"h1": "1.875rem", "h2": "1.5rem", "h3": "1.25rem", "body": "1rem", "small": "0.875rem"},
    "large": {"h1": "2.25rem", "h2": "1.875rem", "h3": "1.5rem", "body": "1.125rem", "small": "1rem"},
}

# Industry -> preferred pairing categories, most preferred first
INDUSTRY_FONT_CATEGORIES = {
    "technology": ("modern", "technical"),
    "finance": ("classic", "modern"),
    "healthcare": ("classic", "modern"),
    "education": ("classic", "modern"),
    "creative": ("creative", "modern"),
    "consulting": ("classic", "modern"),
    "marketing": ("creative", "modern"),
    "engineering": ("technical", "modern"),
    "sales": ("modern", "creative"),
    "legal": ("classic",),
    "nonprofit": ("classic", "modern"),
    "startup": ("modern", "creative"),
    "corporate": ("classic", "modern"),
    "freelance": ("creative", "modern"),
}

MAX_SUGGESTIONS = 5

HEADING_WEIGHTS = {
    "Playfair Display": 700,
    "Montserrat": 600,
    "Oswald": 500,
    "Roboto Slab": 700,
    "Work Sans": 600,
}
DEFAULT_HEADING_WEIGHT = 600
DEFAULT_BODY_WEIGHT = 400

LINE_HEIGHTS = {
    "Inter": "1.5",
    "Open Sans": "1.6",
    "Source Sans Pro": "1.6",
    "Lato": "1.6",
    "Merriweather": "1.7",
    "Crimson Text": "1.7",
    "Libre Baskerville": "1.7",
}
DEFAULT_LINE_HEIGHT = "1.6"

# Weights requested per family in the Google Fonts URL
GOOGLE_FONT_WEIGHTS = {
    "Inter": (400, 500, 600, 700),
    "Roboto": (300, 400, 500, 700),
    "Open Sans": (400, 600, 700),
    "Montserrat": (400, 500, 600, 700),
    "Playfair Display": (400, 700),
    "Merriweather": (300, 400, 700),
    "Work Sans": (400, 500, 600),
}
DEFAULT_GOOGLE_FONT_WEIGHTS = (400, 600, 700)


def get_all_pairings() -> List[FontPairing]:
    """All catalog pairings in catalog order."""
    return list(FONT_PAIRINGS)


def get_pairings_by_category(category: str) -> List[FontPairing]:
    """
    Pairings tagged with a category.

    Raises:
        ValueError: If category is not classic, modern, creative or technical
    """
    if category not in FONT_CATEGORIES:
        raise ValueError(f"Unknown font category '{category}'. Expected one of {list(FONT_CATEGORIES)}")
    return [pairing for pairing in FONT_PAIRINGS if pairing.category == category]


def get_pairing_by_name(name: str) -> Optional[FontPairing]:
    """Case-insensitive exact-name lookup. Returns None when absent."""
    wanted = name.strip().lower()
    for pairing in FONT_PAIRINGS:
        if pairing.name.lower() == wanted:
            return pairing
    return None


def suggest_pairings(industry: str, style: str) -> List[FontPairing]:
    """
    Suggest pairings for an industry, favoring a style.

    The industry decides which categories are eligible (unknown industries get
    "modern" only). Pairings whose category equals the style are moved to the
    front without dropping the rest; relative catalog order is otherwise kept.

    Args:
        industry: Industry name (see INDUSTRY_FONT_CATEGORIES)
        style: Preferred category, or "professional" for no re-ordering

    Returns:
        Up to five pairings
    """
    categories = INDUSTRY_FONT_CATEGORIES.get(industry, ("modern",))
    suggestions = [pairing for pairing in FONT_PAIRINGS if pairing.category in categories]

    if style in FONT_CATEGORIES:
        suggestions = [p for p in suggestions if p.category == style] + [
            p for p in suggestions if p.category != style
        ]

    _log_debug(
        f"Font suggestions for {industry}/{style}: {[p.name for p in suggestions[:MAX_SUGGESTIONS]]}"
    )
    return suggestions[:MAX_SUGGESTIONS]


def get_optimal_weight(font_family: str, usage: str) -> int:
    """Preferred weight of a family as heading ("heading") or body ("body") text."""
    if usage == "heading":
        return HEADING_WEIGHTS.get(font_family, DEFAULT_HEADING_WEIGHT)
    return DEFAULT_BODY_WEIGHT


def get_optimal_line_height(font_family: str) -> str:
    return LINE_HEIGHTS.get(font_family, DEFAULT_LINE_HEIGHT)


def create_configuration(pairing: FontPairing, scale: str = "standard") -> FontConfiguration:
    """
    Expand a pairing into a full font configuration.

    Args:
        pairing: Catalog (or caller-built) pairing
        scale: "compact", "standard" or "large"

    Returns:
        FontConfiguration with sizes from the scale and weights/line-height
        from the per-family lookup tables

    Raises:
        ValueError: If scale is unknown
    """
    if scale not in FONT_SCALES:
        raise ValueError(f"Unknown font scale '{scale}'. Expected one of {list(FONT_SCALES)}")
    sizes = FONT_SCALES[scale]

    heading_weight = get_optimal_weight(pairing.heading, "heading")
    body_weight = get_optimal_weight(pairing.body, "body")

    return FontConfiguration(
        heading=HeadingFont(
            family=pairing.heading,
            weight=heading_weight,
            size=HeadingSizes(h1=sizes["h1"], h2=sizes["h2"], h3=sizes["h3"]),
        ),
        body=BodyFont(
            family=pairing.body,
            weight=body_weight,
            size=sizes["body"],
            line_height=get_optimal_line_height(pairing.body),
        ),
        code=CodeFont(family=pairing.code or "monospace", size=sizes["small"]),
    )


def is_system_font(font_family: str) -> bool:
    return any(font_family in fonts for fonts in SYSTEM_FONTS.values())


def is_known_font(font_family: str) -> bool:
    """Whether a family is a known Google Font or a system font."""
    return font_family in GOOGLE_FONTS or is_system_font(font_family)


def get_fallbacks(font_family: str) -> str:
    """Comma-separated system fallback stack matching the family's classification."""
    if font_family in SERIF_FONTS:
        return ", ".join(SYSTEM_FONTS["serif"])
    if font_family in MONOSPACE_FONTS:
        return ", ".join(SYSTEM_FONTS["monospace"])
    return ", ".join(SYSTEM_FONTS["sans_serif"])


def google_fonts_url(fonts: Sequence[str]) -> Optional[str]:
    """
    Build a Google Fonts css2 URL for the non-system families in fonts.

    Returns:
        URL string, or None when every family is a system font
    """
    families = []
    for font in fonts:
        if font in families or is_system_font(font):
            continue
        families.append(font)

    if not families:
        return None

    params = "&family=".join(
        f"{font.replace(' ', '+')}:wght@"
        + ";".join(str(w) for w in GOOGLE_FONT_WEIGHTS.get(font, DEFAULT_GOOGLE_FONT_WEIGHTS))
        for font in families
    )
    return f"https://fonts.googleapis.com/css2?family={params}&display=swap"


def generate_font_css(config: FontConfiguration, include_google_fonts: bool = True) -> str:
    """
    Generate typography CSS for a font configuration.

    Emits an optional @import for Google Fonts, a :root block of font custom
    properties, and base rules for body, headings and code.
    """
    lines = []

    if include_google_fonts:
        url = google_fonts_url(config.families)
        if url:
            lines.append(f"@import url('{url}');")
            lines.append("")

    properties: Dict[str, object] = {
        "--font-heading": f"'{config.heading.family}', {get_fallbacks(config.heading.family)}",
        "--font-body": f"'{config.body.family}', {get_fallbacks(config.body.family)}",
        "--font-code": f"'{config.code.family}', {get_fallbacks(config.code.family)}",
        "--font-weight-heading": config.heading.weight,
        "--font-weight-body": config.body.weight,
        "--font-size-h1": config.heading.size.h1,
        "--font-size-h2": config.heading.size.h2,
        "--font-size-h3": config.heading.size.h3,
        "--font-size-body": config.body.size,
        "--font-size-code": config.code.size,
        "--line-height-body": config.body.line_height,
    }
    lines.append(":root {")
    lines.extend(f"  {name}: {value};" for name, value in properties.items())
    lines.append("}")
    lines.append("")

    lines.extend(
        [
            "body {",
            "  font-family: var(--font-body);",
            "  font-weight: var(--font-weight-body);",
            "  font-size: var(--font-size-body);",
            "  line-height: var(--line-height-body);",
            "}",
            "",
            "h1, h2, h3, h4, h5, h6 {",
            "  font-family: var(--font-heading);",
            "  font-weight: var(--font-weight-heading);",
            "}",
            "",
            "h1 { font-size: var(--font-size-h1); }",
            "h2 { font-size: var(--font-size-h2); }",
            "h3 { font-size: var(--font-size-h3); }",
            "",
            "code, pre {",
            "  font-family: var(--font-code);",
            "  font-size: var(--font-size-code);",
            "}",
        ]
    )
    return "\n".join(lines) + "\n"
