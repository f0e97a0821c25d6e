"""
Default values for PRISM themes.

Provides shared defaults used by:
- palette_generator.py and brand_kit.py (semantic status colors)
- theme_engine.py (spacing, radius, shadows, layout and the dark palette base)
- rendering/theme_mode.py (light/dark channel scale factors)

Values match the tokens of the "modern-professional" template.
"""

from typing import Any, Dict

# Fixed semantic status colors for generated palettes
SEMANTIC_COLORS = {
    "success": "#10b981",
    "warning": "#f59e0b",
    "error": "#ef4444",
}

# Neutral tones used when a light palette is synthesized into dark mode
DARK_BASE_COLORS = {
    "background": "#0f172a",
    "surface": "#1e293b",
    "border": "#334155",
    "text": {
        "primary": "#f1f5f9",
        "secondary": "#cbd5e1",
        "muted": "#94a3b8",
    },
}

DEFAULT_SPACING = {
    "xs": "0.25rem",
    "sm": "0.5rem",
    "md": "1rem",
    "lg": "1.5rem",
    "xl": "2rem",
}

DEFAULT_BORDER_RADIUS = {
    "sm": "0.25rem",
    "md": "0.5rem",
    "lg": "0.75rem",
}

DEFAULT_SHADOWS = {
    "sm": "0 1px 2px 0 rgba(0, 0, 0, 0.05)",
    "md": "0 4px 6px -1px rgba(0, 0, 0, 0.1)",
    "lg": "0 10px 15px -3px rgba(0, 0, 0, 0.1)",
}

DEFAULT_LAYOUT = {
    "maxWidth": "8.5in",
    "padding": "0.75in",
    "sectionSpacing": "1.5rem",
}

# Weights accepted in a FontConfiguration
FONT_WEIGHTS = (300, 400, 500, 600, 700)

# Per-channel scale factors for the coarse light <-> dark color transform
DARK_MODE_FACTOR = 0.8
LIGHT_MODE_FACTOR = 1.2


def get_default_tokens() -> Dict[str, Any]:
    """
    Get the non-color, non-font theme tokens shared by generated themes.

    Returns fresh copies so callers may modify them freely.

    Returns:
        Dict with spacing, borderRadius, shadows and layout keys
    """
    return {
        "spacing": DEFAULT_SPACING.copy(),
        "borderRadius": DEFAULT_BORDER_RADIUS.copy(),
        "shadows": DEFAULT_SHADOWS.copy(),
        "layout": DEFAULT_LAYOUT.copy(),
    }
