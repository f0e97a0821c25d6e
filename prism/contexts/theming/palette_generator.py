"""
Color Palette Generator

Produces ranked palette candidates from an industry, a personality and optional
color preferences.

Selection uses two fixed tables:
- INDUSTRY_COLOR_PROFILES: four primary candidates per industry
- PERSONALITY_PALETTES: background/surface/border/text tones per personality

Each candidate is scored for WCAG accessibility and preference fit, and the
three candidates are returned sorted by descending confidence.
"""

from typing import Any, Dict, List, Sequence

from prism.contexts.theming.color_math import (
    color_distance,
    contrast_ratio,
    hex_to_hsl,
    hsl_to_hex,
    normalize_hex,
    rotate_hue,
)
from prism.contexts.theming.defaults import SEMANTIC_COLORS
from prism.contexts.theming.logger import _log_debug, _log_info
from prism.contexts.theming.theme_data_structures import (
    AccessibilityReport,
    ColorPalette,
    ColorSchemeRequest,
    GeneratedColorScheme,
    TextColors,
)

# Number of candidates generate_color_scheme() returns
SCHEME_COUNT = 3

# Distances in raw RGB space (see color_math.color_distance)
AVOID_DISTANCE = 50
FAVORITE_DISTANCE = 30
FAVORITE_MATCH_DISTANCE = 50

# WCAG thresholds
AAA_RATIO = 7.0
AA_RATIO = 4.5

BASE_CONFIDENCE = 0.7
AAA_BONUS = 0.2
AA_BONUS = 0.1
FAVORITE_BONUS = 0.1

INDUSTRY_COLOR_PROFILES: Dict[str, Dict[str, Any]] = {
    "technology": {
        "primary": ("#2563eb", "#3b82f6", "#1e40af", "#0ea5e9"),
        "personality": "Modern, innovative, trustworthy",
    },
    "finance": {
        "primary": ("#1e40af", "#059669", "#0f172a", "#374151"),
        "personality": "Professional, stable, trustworthy",
    },
    "healthcare": {
        "primary": ("#059669", "#0ea5e9", "#6366f1", "#8b5cf6"),
        "personality": "Caring, professional, clean",
    },
    "education": {
        "primary": ("#0ea5e9", "#059669", "#7c3aed", "#2563eb"),
        "personality": "Approachable, knowledgeable, inspiring",
    },
    "creative": {
        "primary": ("#7c3aed", "#ec4899", "#f59e0b", "#10b981"),
        "personality": "Bold, artistic, expressive",
    },
    "consulting": {
        "primary": ("#374151", "#1e40af", "#059669", "#0f172a"),
        "personality": "Professional, analytical, strategic",
    },
    "marketing": {
        "primary": ("#ec4899", "#f59e0b", "#8b5cf6", "#10b981"),
        "personality": "Dynamic, creative, engaging",
    },
    "engineering": {
        "primary": ("#374151", "#2563eb", "#059669", "#0ea5e9"),
        "personality": "Precise, reliable, technical",
    },
    "sales": {
        "primary": ("#10b981", "#f59e0b", "#2563eb", "#ec4899"),
        "personality": "Energetic, persuasive, results-driven",
    },
    "legal": {
        "primary": ("#0f172a", "#374151", "#1e40af", "#059669"),
        "personality": "Authoritative, professional, trustworthy",
    },
    "nonprofit": {
        "primary": ("#059669", "#0ea5e9", "#7c3aed", "#10b981"),
        "personality": "Compassionate, hopeful, community-focused",
    },
    "startup": {
        "primary": ("#7c3aed", "#2563eb", "#10b981", "#f59e0b"),
        "personality": "Innovative, agile, disruptive",
    },
    "corporate": {
        "primary": ("#1e40af", "#374151", "#059669", "#0f172a"),
        "personality": "Established, professional, reliable",
    },
    "freelance": {
        "primary": ("#8b5cf6", "#10b981", "#f59e0b", "#ec4899"),
        "personality": "Independent, versatile, creative",
    },
}

PERSONALITY_PALETTES: Dict[str, Dict[str, Any]] = {
    "professional": {
        "background": "#ffffff",
        "surface": "#f8fafc",
        "border": "#e2e8f0",
        "text": {"primary": "#0f172a", "secondary": "#475569", "muted": "#64748b"},
    },
    "creative": {
        "background": "#fefefe",
        "surface": "#faf5ff",
        "border": "#e879f9",
        "text": {"primary": "#581c87", "secondary": "#7c3aed", "muted": "#a855f7"},
    },
    "modern": {
        "background": "#ffffff",
        "surface": "#f1f5f9",
        "border": "#cbd5e1",
        "text": {"primary": "#1e293b", "secondary": "#334155", "muted": "#64748b"},
    },
    "classic": {
        "background": "#fffef7",
        "surface": "#fefce8",
        "border": "#d4d4aa",
        "text": {"primary": "#365314", "secondary": "#4d7c0f", "muted": "#65a30d"},
    },
    "bold": {
        "background": "#ffffff",
        "surface": "#fef2f2",
        "border": "#fca5a5",
        "text": {"primary": "#7f1d1d", "secondary": "#dc2626", "muted": "#ef4444"},
    },
}

DESCRIPTION_TEMPLATES = (
    "A {personality} color scheme optimized for {industry} professionals",
    "An alternative {personality} palette with enhanced visual appeal for {industry}",
    "A bold {personality} approach perfect for standing out in {industry}",
)


def wcag_level(ratio: float) -> str:
    """Classify a contrast ratio as "AAA" (>= 7), "AA" (>= 4.5) or "fail"."""
    if ratio >= AAA_RATIO:
        return "AAA"
    if ratio >= AA_RATIO:
        return "AA"
    return "fail"


def check_accessibility(foreground: str, background: str) -> AccessibilityReport:
    """
    Check the WCAG contrast of a foreground/background pair.

    Args:
        foreground: Text hex color
        background: Background hex color

    Returns:
        AccessibilityReport with the ratio and the level it reaches
    """
    ratio = contrast_ratio(foreground, background)
    return AccessibilityReport(ratio=ratio, level=wcag_level(ratio))


def _near_any(color: str, references: Sequence[str], threshold: float) -> bool:
    return any(color_distance(color, ref) < threshold for ref in references)


def select_primary_color(request: ColorSchemeRequest, index: int) -> str:
    """
    Pick the primary color for the index-th candidate.

    Candidates within AVOID_DISTANCE of an avoided color are dropped; if that
    removes every candidate the unfiltered list is used instead. Candidates
    within FAVORITE_DISTANCE of a favorite are then preferred when any exist.
    The index wraps around the remaining list.
    """
    all_candidates = list(INDUSTRY_COLOR_PROFILES[request.industry]["primary"])
    preferences = request.preferences
    candidates = all_candidates

    if preferences and preferences.avoid_colors:
        filtered = [c for c in candidates if not _near_any(c, preferences.avoid_colors, AVOID_DISTANCE)]
        if filtered:
            if len(filtered) < len(candidates):
                _log_debug(
                    f"Avoid colors left {len(filtered)} of {len(candidates)} {request.industry} candidates"
                )
            candidates = filtered
        else:
            _log_debug(
                f"Avoid colors {list(preferences.avoid_colors)} exclude every {request.industry} "
                "candidate, falling back to the full list"
            )

    if preferences and preferences.favorite_colors:
        favorites = [
            c for c in candidates if _near_any(c, preferences.favorite_colors, FAVORITE_DISTANCE)
        ]
        if favorites:
            _log_debug(f"Favorite colors matched {len(favorites)} {request.industry} candidates")
            candidates = favorites

    return candidates[index % len(candidates)]


def build_palette(primary_color: str, personality: str) -> ColorPalette:
    """
    Expand a primary color into a full palette.

    Secondary is the complementary hue at 80% saturation, accent the triadic
    hue ten points lighter (capped at 90). Neutral tones come from the
    personality table and status colors are fixed.
    """
    base = PERSONALITY_PALETTES[personality]
    primary = normalize_hex(primary_color, field="primary")

    return ColorPalette(
        primary=primary,
        secondary=rotate_hue(primary, 180, saturation_factor=0.8),
        accent=rotate_hue(primary, 120, lightness_offset=10, max_lightness=90),
        background=base["background"],
        surface=base["surface"],
        border=base["border"],
        text=TextColors(**base["text"]),
        success=SEMANTIC_COLORS["success"],
        warning=SEMANTIC_COLORS["warning"],
        error=SEMANTIC_COLORS["error"],
    )


def calculate_accessibility(palette: ColorPalette) -> AccessibilityReport:
    """Worst-case contrast of primary and secondary text against the background."""
    primary_ratio = contrast_ratio(palette.text.primary, palette.background)
    secondary_ratio = contrast_ratio(palette.text.secondary, palette.background)
    ratio = min(primary_ratio, secondary_ratio)
    return AccessibilityReport(ratio=ratio, level=wcag_level(ratio))


def calculate_confidence(request: ColorSchemeRequest, palette: ColorPalette) -> float:
    """Score a palette in [0, 1] from its accessibility level and favorite-color fit."""
    confidence = BASE_CONFIDENCE

    level = calculate_accessibility(palette).level
    if level == "AAA":
        confidence += AAA_BONUS
    elif level == "AA":
        confidence += AA_BONUS

    preferences = request.preferences
    if preferences and preferences.favorite_colors:
        if _near_any(palette.primary, preferences.favorite_colors, FAVORITE_MATCH_DISTANCE):
            confidence += FAVORITE_BONUS

    return min(round(confidence, 10), 1.0)


def _describe(request: ColorSchemeRequest, index: int) -> str:
    return DESCRIPTION_TEMPLATES[index % len(DESCRIPTION_TEMPLATES)].format(
        personality=request.personality, industry=request.industry
    )


def _reason(request: ColorSchemeRequest, primary_color: str) -> str:
    profile = INDUSTRY_COLOR_PROFILES[request.industry]
    return (
        f"Selected based on {request.personality} personality traits and {profile['personality']} "
        f"industry standards. Primary color {primary_color} conveys professionalism while "
        "maintaining visual interest."
    )


def generate_color_scheme(request: ColorSchemeRequest) -> List[GeneratedColorScheme]:
    """
    Generate three ranked palette candidates for a request.

    Args:
        request: Industry, personality and optional color preferences

    Returns:
        Exactly three GeneratedColorScheme objects sorted by descending confidence

    Example:
        >>> schemes = generate_color_scheme(ColorSchemeRequest("technology", "professional"))
        >>> schemes[0].palette.primary
        '#2563eb'
    """
    _log_info(f"Generating color schemes for {request.industry}/{request.personality}")

    schemes = []
    for index in range(SCHEME_COUNT):
        primary = select_primary_color(request, index)
        palette = build_palette(primary, request.personality)
        accessibility = calculate_accessibility(palette)

        schemes.append(
            GeneratedColorScheme(
                name=f"{request.industry} {request.personality} {index + 1}",
                description=_describe(request, index),
                reasoning=_reason(request, palette.primary),
                palette=palette,
                confidence=calculate_confidence(request, palette),
                accessibility=accessibility,
            )
        )
        _log_debug(
            f"  candidate {index + 1}: primary={palette.primary} contrast={accessibility.ratio:.2f} "
            f"({accessibility.level})"
        )

    # sorted() is stable, so ties keep generation order
    return sorted(schemes, key=lambda scheme: scheme.confidence, reverse=True)


def generate_color_variations(base_color: str) -> List[str]:
    """
    Eight lighter/darker variations of a color.

    Lightness is shifted by -40..+40 in steps of 10 (skipping 0) and clamped to
    [0, 100]; hue and saturation are kept.
    """
    hsl = hex_to_hsl(base_color)
    return [
        hsl_to_hex(hsl.h, hsl.s, max(0.0, min(100.0, hsl.l + offset)))
        for offset in range(-40, 41, 10)
        if offset != 0
    ]
