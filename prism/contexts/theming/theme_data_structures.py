"""
Theme Data Structures

Defines value types for palettes, fonts, brand kits and complete resume themes.
All types are frozen dataclasses: a theme is treated as an immutable value once
built, and "changing" one means producing a new object with dataclasses.replace().

Every type serializes to (and parses from) the camelCase JSON shape used by
persisted <theme-id>.json files via to_dict() / from_dict().
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple

from prism.contexts.theming.color_math import normalize_hex
from prism.contexts.theming.exceptions import InvalidColorFormatError, InvalidThemeStructureError

Industry = Literal[
    "technology",
    "finance",
    "healthcare",
    "education",
    "creative",
    "consulting",
    "marketing",
    "engineering",
    "sales",
    "legal",
    "nonprofit",
    "startup",
    "corporate",
    "freelance",
]
Personality = Literal["professional", "creative", "modern", "classic", "bold"]
FontCategory = Literal["classic", "modern", "creative", "technical"]
WcagLevel = Literal["AA", "AAA", "fail"]
Mode = Literal["light", "dark"]
ModePreference = Literal["light", "dark", "auto"]
LogoPosition = Literal["top-left", "top-right", "center", "bottom"]

INDUSTRIES: Tuple[str, ...] = (
    "technology",
    "finance",
    "healthcare",
    "education",
    "creative",
    "consulting",
    "marketing",
    "engineering",
    "sales",
    "legal",
    "nonprofit",
    "startup",
    "corporate",
    "freelance",
)
PERSONALITIES: Tuple[str, ...] = ("professional", "creative", "modern", "classic", "bold")
FONT_CATEGORIES: Tuple[str, ...] = ("classic", "modern", "creative", "technical")
MODES: Tuple[str, ...] = ("light", "dark")
MODE_PREFERENCES: Tuple[str, ...] = ("light", "dark", "auto")
LOGO_POSITIONS: Tuple[str, ...] = ("top-left", "top-right", "center", "bottom")


def _require(data: Mapping[str, Any], key: str, context: str) -> Any:
    """Fetch a required key from serialized data with a structured error."""
    if not isinstance(data, Mapping):
        raise InvalidThemeStructureError(f"{context} must be a mapping, got {type(data).__name__}")
    if key not in data or data[key] is None:
        raise InvalidThemeStructureError(f"{context} missing required field '{key}'")
    return data[key]


def _color(data: Mapping[str, Any], key: str, context: str) -> str:
    """Fetch a required color and bring it to lowercase #rrggbb form."""
    try:
        return normalize_hex(_require(data, key, context), field=f"{context}.{key}")
    except InvalidColorFormatError as e:
        raise InvalidThemeStructureError(str(e)) from e


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextColors:
    """Text tones of a palette, from strongest to weakest."""

    primary: str
    secondary: str
    muted: str

    def to_dict(self) -> Dict[str, str]:
        return {"primary": self.primary, "secondary": self.secondary, "muted": self.muted}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TextColors":
        return cls(
            primary=_color(data, "primary", "text"),
            secondary=_color(data, "secondary", "text"),
            muted=_color(data, "muted", "text"),
        )


@dataclass(frozen=True)
class ColorPalette:
    """
    Full set of semantic colors used to theme a document.

    Attributes:
        primary: Brand/headline color
        secondary: Supporting color (complementary hue when generated)
        accent: Highlight color (triadic hue when generated)
        background: Page background
        surface: Card/pill background
        border: Divider and outline color
        text: Primary, secondary and muted text colors
        success: Positive status color
        warning: Cautionary status color
        error: Negative status color
    """

    primary: str
    secondary: str
    accent: str
    background: str
    surface: str
    border: str
    text: TextColors
    success: str
    warning: str
    error: str

    # Palette fields holding a single hex string (everything except text)
    COLOR_FIELDS = (
        "primary",
        "secondary",
        "accent",
        "background",
        "surface",
        "border",
        "success",
        "warning",
        "error",
    )

    def iter_colors(self) -> List[Tuple[str, str]]:
        """All (field_name, hex) pairs including text tones as text.primary etc."""
        pairs = [(name, getattr(self, name)) for name in self.COLOR_FIELDS]
        pairs.extend((f"text.{name}", value) for name, value in self.text.to_dict().items())
        return pairs

    def to_dict(self) -> Dict[str, Any]:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "accent": self.accent,
            "background": self.background,
            "surface": self.surface,
            "text": self.text.to_dict(),
            "border": self.border,
            "success": self.success,
            "warning": self.warning,
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ColorPalette":
        values = {name: _color(data, name, "palette") for name in cls.COLOR_FIELDS}
        text = _require(data, "text", "palette")
        return cls(text=text if isinstance(text, TextColors) else TextColors.from_dict(text), **values)


@dataclass(frozen=True)
class ThemeColors:
    """Light and dark palettes of a theme."""

    light: ColorPalette
    dark: ColorPalette

    def for_mode(self, mode: str) -> ColorPalette:
        """Palette for "light" or "dark"."""
        if mode not in MODES:
            raise ValueError(f"Unknown mode '{mode}'. Expected one of {list(MODES)}")
        return self.light if mode == "light" else self.dark

    def to_dict(self) -> Dict[str, Any]:
        return {"light": self.light.to_dict(), "dark": self.dark.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ThemeColors":
        return cls(
            light=ColorPalette.from_dict(_require(data, "light", "colors")),
            dark=ColorPalette.from_dict(_require(data, "dark", "colors")),
        )


# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HeadingSizes:
    h1: str
    h2: str
    h3: str

    def to_dict(self) -> Dict[str, str]:
        return {"h1": self.h1, "h2": self.h2, "h3": self.h3}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HeadingSizes":
        return cls(
            h1=_require(data, "h1", "heading.size"),
            h2=_require(data, "h2", "heading.size"),
            h3=_require(data, "h3", "heading.size"),
        )


@dataclass(frozen=True)
class HeadingFont:
    family: str
    weight: int
    size: HeadingSizes

    def to_dict(self) -> Dict[str, Any]:
        return {"family": self.family, "weight": self.weight, "size": self.size.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HeadingFont":
        return cls(
            family=data.get("family", "") if isinstance(data, Mapping) else "",
            weight=int(_require(data, "weight", "fonts.heading")),
            size=HeadingSizes.from_dict(_require(data, "size", "fonts.heading")),
        )


@dataclass(frozen=True)
class BodyFont:
    family: str
    weight: int
    size: str
    line_height: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "family": self.family,
            "weight": self.weight,
            "size": self.size,
            "lineHeight": self.line_height,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BodyFont":
        return cls(
            family=data.get("family", "") if isinstance(data, Mapping) else "",
            weight=int(_require(data, "weight", "fonts.body")),
            size=_require(data, "size", "fonts.body"),
            line_height=str(_require(data, "lineHeight", "fonts.body")),
        )


@dataclass(frozen=True)
class CodeFont:
    family: str
    size: str

    def to_dict(self) -> Dict[str, str]:
        return {"family": self.family, "size": self.size}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CodeFont":
        return cls(
            family=_require(data, "family", "fonts.code"),
            size=_require(data, "size", "fonts.code"),
        )


@dataclass(frozen=True)
class FontConfiguration:
    """Heading, body and code typography of a theme."""

    heading: HeadingFont
    body: BodyFont
    code: CodeFont

    @property
    def families(self) -> List[str]:
        """Distinct font families in heading, body, code order."""
        ordered = []
        for family in (self.heading.family, self.body.family, self.code.family):
            if family not in ordered:
                ordered.append(family)
        return ordered

    def to_dict(self) -> Dict[str, Any]:
        return {
            "heading": self.heading.to_dict(),
            "body": self.body.to_dict(),
            "code": self.code.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FontConfiguration":
        return cls(
            heading=HeadingFont.from_dict(_require(data, "heading", "fonts")),
            body=BodyFont.from_dict(_require(data, "body", "fonts")),
            code=CodeFont.from_dict(_require(data, "code", "fonts")),
        )


@dataclass(frozen=True)
class FontPairing:
    """
    Curated heading/body(/code) font combination.

    Attributes:
        name: Display name, unique within the catalog
        description: One-line usage guidance
        heading: Heading font family
        body: Body font family
        category: Style category (classic, modern, creative, technical)
        google_fonts: Whether all families are served by Google Fonts
        fallbacks: Fallback families in priority order
        code: Optional monospace family
    """

    name: str
    description: str
    heading: str
    body: str
    category: FontCategory
    google_fonts: bool
    fallbacks: Tuple[str, ...]
    code: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "name": self.name,
            "description": self.description,
            "heading": self.heading,
            "body": self.body,
            "category": self.category,
            "googleFonts": self.google_fonts,
            "fallbacks": list(self.fallbacks),
        }
        if self.code:
            data["code"] = self.code
        return data


# ---------------------------------------------------------------------------
# Color scheme generation
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ColorPreferences:
    favorite_colors: Tuple[str, ...] = ()
    avoid_colors: Tuple[str, ...] = ()
    accessibility: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ColorPreferences":
        return cls(
            favorite_colors=tuple(data.get("favoriteColors") or ()),
            avoid_colors=tuple(data.get("avoidColors") or ()),
            accessibility=bool(data.get("accessibility", False)),
        )


@dataclass(frozen=True)
class ColorSchemeRequest:
    """
    Input to palette generation.

    Raises:
        ValueError: If industry or personality is not a known value
    """

    industry: Industry
    personality: Personality
    preferences: Optional[ColorPreferences] = None

    def __post_init__(self):
        if self.industry not in INDUSTRIES:
            raise ValueError(f"Unknown industry '{self.industry}'. Expected one of {list(INDUSTRIES)}")
        if self.personality not in PERSONALITIES:
            raise ValueError(
                f"Unknown personality '{self.personality}'. Expected one of {list(PERSONALITIES)}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ColorSchemeRequest":
        preferences = data.get("preferences")
        return cls(
            industry=_require(data, "industry", "request"),
            personality=_require(data, "personality", "request"),
            preferences=ColorPreferences.from_dict(preferences) if preferences else None,
        )


@dataclass(frozen=True)
class AccessibilityReport:
    """WCAG contrast ratio and the level it reaches."""

    ratio: float
    level: WcagLevel


@dataclass(frozen=True)
class GeneratedColorScheme:
    """A ranked palette candidate produced by the palette generator."""

    name: str
    description: str
    reasoning: str
    palette: ColorPalette
    confidence: float
    accessibility: AccessibilityReport

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "reasoning": self.reasoning,
            "palette": self.palette.to_dict(),
            "confidence": self.confidence,
            "accessibility": {
                "contrastRatio": self.accessibility.ratio,
                "wcagLevel": self.accessibility.level,
            },
        }


# ---------------------------------------------------------------------------
# Brand kits
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BrandColors:
    primary: str
    secondary: Optional[str] = None
    accent: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        data = {"primary": self.primary}
        if self.secondary:
            data["secondary"] = self.secondary
        if self.accent:
            data["accent"] = self.accent
        return data


@dataclass(frozen=True)
class BrandLogo:
    url: str
    position: LogoPosition = "top-left"
    width: Optional[str] = None
    height: Optional[str] = None


@dataclass(frozen=True)
class BrandFonts:
    primary: str
    secondary: Optional[str] = None


@dataclass(frozen=True)
class BrandKit:
    """
    Minimal brand seed: one to three colors plus optional logo and fonts.

    Supplied by the caller and never modified by the engine.
    """

    colors: BrandColors
    logo: Optional[BrandLogo] = None
    fonts: Optional[BrandFonts] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BrandKit":
        colors = _require(data, "colors", "brandKit")
        logo = data.get("logo")
        fonts = data.get("fonts")
        return cls(
            colors=BrandColors(
                primary=_require(colors, "primary", "brandKit.colors"),
                secondary=colors.get("secondary"),
                accent=colors.get("accent"),
            ),
            logo=BrandLogo(
                url=logo.get("url", ""),
                position=logo.get("position", "top-left"),
                width=logo.get("width"),
                height=logo.get("height"),
            )
            if logo
            else None,
            fonts=BrandFonts(primary=fonts["primary"], secondary=fonts.get("secondary"))
            if fonts and fonts.get("primary")
            else None,
        )


# ---------------------------------------------------------------------------
# Themes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Spacing:
    xs: str
    sm: str
    md: str
    lg: str
    xl: str

    def to_dict(self) -> Dict[str, str]:
        return {"xs": self.xs, "sm": self.sm, "md": self.md, "lg": self.lg, "xl": self.xl}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Spacing":
        return cls(**{key: _require(data, key, "spacing") for key in ("xs", "sm", "md", "lg", "xl")})


@dataclass(frozen=True)
class BorderRadius:
    sm: str
    md: str
    lg: str

    def to_dict(self) -> Dict[str, str]:
        return {"sm": self.sm, "md": self.md, "lg": self.lg}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BorderRadius":
        return cls(**{key: _require(data, key, "borderRadius") for key in ("sm", "md", "lg")})


@dataclass(frozen=True)
class Shadows:
    sm: str
    md: str
    lg: str

    def to_dict(self) -> Dict[str, str]:
        return {"sm": self.sm, "md": self.md, "lg": self.lg}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Shadows":
        return cls(**{key: _require(data, key, "shadows") for key in ("sm", "md", "lg")})


@dataclass(frozen=True)
class Layout:
    max_width: str
    padding: str
    section_spacing: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "maxWidth": self.max_width,
            "padding": self.padding,
            "sectionSpacing": self.section_spacing,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Layout":
        return cls(
            max_width=_require(data, "maxWidth", "layout"),
            padding=_require(data, "padding", "layout"),
            section_spacing=_require(data, "sectionSpacing", "layout"),
        )


@dataclass(frozen=True)
class ResumeTheme:
    """
    Complete theme: light/dark palettes, typography and layout tokens.

    Attributes:
        id: Stable identifier (template id, custom-<ms> or brand-<ms>)
        name: Display name
        description: One-line summary
        colors: Light and dark palettes
        fonts: Typography configuration
        spacing: Spacing scale xs..xl
        border_radius: Corner radius scale
        shadows: Box shadow scale
        layout: Page width, padding and section spacing
        industry: Optional industry tag
    """

    id: str
    name: str
    description: str
    colors: ThemeColors
    fonts: FontConfiguration
    spacing: Spacing
    border_radius: BorderRadius
    shadows: Shadows
    layout: Layout
    industry: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
        }
        if self.industry:
            data["industry"] = self.industry
        data.update(
            {
                "colors": self.colors.to_dict(),
                "fonts": self.fonts.to_dict(),
                "spacing": self.spacing.to_dict(),
                "borderRadius": self.border_radius.to_dict(),
                "shadows": self.shadows.to_dict(),
                "layout": self.layout.to_dict(),
            }
        )
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResumeTheme":
        """
        Parse a serialized theme.

        Raises:
            InvalidThemeStructureError: If a required field is missing or malformed
        """
        try:
            return cls(
                id=_require(data, "id", "theme"),
                name=_require(data, "name", "theme"),
                description=data.get("description", ""),
                industry=data.get("industry"),
                colors=ThemeColors.from_dict(_require(data, "colors", "theme")),
                fonts=FontConfiguration.from_dict(_require(data, "fonts", "theme")),
                spacing=Spacing.from_dict(_require(data, "spacing", "theme")),
                border_radius=BorderRadius.from_dict(_require(data, "borderRadius", "theme")),
                shadows=Shadows.from_dict(_require(data, "shadows", "theme")),
                layout=Layout.from_dict(_require(data, "layout", "theme")),
            )
        except (TypeError, ValueError, AttributeError) as e:
            if isinstance(e, InvalidThemeStructureError):
                raise
            raise InvalidThemeStructureError(f"Malformed theme data: {e}") from e


@dataclass(frozen=True)
class ThemeValidation:
    """Outcome of validate_theme(). Validation failures are data, never exceptions."""

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class BrandKitValidation:
    """Outcome of validate_brand_kit()."""

    is_valid: bool
    issues: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Mode and configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AutoSwitchTime:
    """Daily light/dark switch times in HH:MM."""

    light_start: str = "06:00"
    dark_start: str = "18:00"


@dataclass(frozen=True)
class ThemeMode:
    mode: ModePreference = "auto"
    auto_switch_time: Optional[AutoSwitchTime] = None

    def __post_init__(self):
        if self.mode not in MODE_PREFERENCES:
            raise ValueError(f"Unknown theme mode '{self.mode}'. Expected one of {list(MODE_PREFERENCES)}")


@dataclass(frozen=True)
class ThemePreview:
    format: Literal["html", "pdf", "image"]
    sections: Tuple[str, ...]
    output_path: Optional[str] = None


@dataclass(frozen=True)
class ThemeConfiguration:
    """
    Caller-side theme selection.

    Attributes:
        active_theme: Template id of the active theme
        mode: Light/dark/auto preference
        customizations: Optional {"colors": {...}, "fonts": {...}} overrides
        preview_mode: Whether the caller is previewing rather than exporting
    """

    active_theme: str
    mode: ThemeMode = field(default_factory=ThemeMode)
    customizations: Optional[Dict[str, Any]] = None
    preview_mode: bool = False
