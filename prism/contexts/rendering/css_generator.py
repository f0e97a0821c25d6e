"""
Theme CSS generation.

Turns a ResumeTheme into CSS custom properties (--color-*, --font-*,
--spacing-*, --radius-*, --shadow-*) for one mode, the [data-theme="dark"]
override block, and the Google Fonts <link> for the theme's families.
"""

from typing import List, Optional, Tuple

from prism.contexts.theming.theme_data_structures import ColorPalette, FontConfiguration, ResumeTheme

# Families assumed to be installed locally and never requested from Google Fonts
WEB_SAFE_FONTS = ("Arial", "Helvetica", "Times", "Georgia", "Courier")
GENERIC_FAMILIES = ("serif", "sans-serif", "monospace", "system-ui")

GOOGLE_FONTS_CSS_URL = "https://fonts.googleapis.com/css2"
FONT_IMPORT_WEIGHTS = "300;400;500;600;700"

INDENT = "  "


def palette_variables(colors: ColorPalette) -> List[Tuple[str, str]]:
    """--color-* custom properties of a palette, in output order."""
    return [
        ("--color-primary", colors.primary),
        ("--color-secondary", colors.secondary),
        ("--color-accent", colors.accent),
        ("--color-background", colors.background),
        ("--color-surface", colors.surface),
        ("--color-text-primary", colors.text.primary),
        ("--color-text-secondary", colors.text.secondary),
        ("--color-text-muted", colors.text.muted),
        ("--color-border", colors.border),
        ("--color-success", colors.success),
        ("--color-warning", colors.warning),
        ("--color-error", colors.error),
    ]


def theme_variables(theme: ResumeTheme, mode: str = "light") -> List[Tuple[str, List[Tuple[str, str]]]]:
    """
    CSS custom properties of a theme for one mode, grouped for output.

    Returns:
        List of (group label, [(property name, value), ...]) in output order

    Raises:
        ValueError: If mode is not "light" or "dark"
    """
    fonts = theme.fonts

    return [
        ("Colors", palette_variables(theme.colors.for_mode(mode))),
        (
            "Fonts",
            [
                ("--font-heading", f"'{fonts.heading.family}', sans-serif"),
                ("--font-body", f"'{fonts.body.family}', sans-serif"),
                ("--font-code", f"'{fonts.code.family}', monospace"),
            ],
        ),
        (
            "Spacing",
            [(f"--spacing-{key}", value) for key, value in theme.spacing.to_dict().items()],
        ),
        (
            "Border Radius",
            [(f"--radius-{key}", value) for key, value in theme.border_radius.to_dict().items()],
        ),
        (
            "Shadows",
            [(f"--shadow-{key}", value) for key, value in theme.shadows.to_dict().items()],
        ),
    ]


def _declarations(theme: ResumeTheme, mode: str) -> str:
    blocks = []
    for label, variables in theme_variables(theme, mode):
        lines = [f"{INDENT}/* {label} */"]
        lines.extend(f"{INDENT}{name}: {value};" for name, value in variables)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


def generate_css(theme: ResumeTheme, mode: str = "light") -> str:
    """
    `:root` block declaring every theme custom property for one mode.

    Args:
        theme: Theme to render
        mode: "light" or "dark"

    Returns:
        CSS text

    Raises:
        ValueError: If mode is not "light" or "dark"
    """
    return ":root {\n" + _declarations(theme, mode) + "}\n"


def generate_dark_block(theme: ResumeTheme) -> str:
    """Dark-mode custom properties scoped to [data-theme="dark"]."""
    return '[data-theme="dark"] {\n' + _declarations(theme, "dark") + "}\n"


def font_import_url(fonts: FontConfiguration) -> Optional[str]:
    """
    Google Fonts css2 URL for the theme's non-web-safe families.

    Returns:
        URL requesting weights 300-700 for each family, or None when every
        family is web-safe
    """
    families = [
        family
        for family in fonts.families
        if family and family not in WEB_SAFE_FONTS and family not in GENERIC_FAMILIES
    ]
    if not families:
        return None

    params = "&".join(
        f"family={family.replace(' ', '+')}:wght@{FONT_IMPORT_WEIGHTS}" for family in families
    )
    return f"{GOOGLE_FONTS_CSS_URL}?{params}&display=swap"


def generate_font_imports(fonts: FontConfiguration) -> str:
    """<link> element loading the theme fonts, or an empty string when none are needed."""
    url = font_import_url(fonts)
    if url is None:
        return ""
    return f'<link href="{url}" rel="stylesheet">'
