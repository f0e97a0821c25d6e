"""
Theme Mode Manager

Resolves the light/dark/auto preference to a concrete mode and converts
palettes between modes.

Mode state lives on ThemeModeManager instances; nothing here is global. The
host color-scheme signal used by "auto" comes from the constructor argument
or, failing that, the PRISM_SYSTEM_COLOR_SCHEME environment variable.

The palette conversions scale RGB channels (x0.8 darker, x1.2 lighter). This
is a coarse brightness transform, not a perceptual one.
"""

import os
import re
from datetime import datetime, time
from typing import Optional, Union

from dotenv import load_dotenv

from prism.contexts.rendering.css_generator import palette_variables
from prism.contexts.rendering.logger import _log_debug, _log_warning
from prism.contexts.rendering.registries import DocumentTemplateRegistry, get_document_registry
from prism.contexts.theming.color_math import scale_channels
from prism.contexts.theming.defaults import DARK_MODE_FACTOR, LIGHT_MODE_FACTOR
from prism.contexts.theming.theme_data_structures import (
    MODE_PREFERENCES,
    MODES,
    ColorPalette,
    FontConfiguration,
    ResumeTheme,
    TextColors,
    ThemeMode,
)

load_dotenv()

SYSTEM_COLOR_SCHEME_ENV = "PRISM_SYSTEM_COLOR_SCHEME"
MODE_STYLES_TEMPLATE = "mode_styles.css"
CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")

DARK_MODE_NEUTRALS = {
    "background": "#0f0f0f",
    "surface": "#1a1a1a",
    "border": "#333333",
    "text": {"primary": "#ffffff", "secondary": "#e0e0e0", "muted": "#a0a0a0"},
    "success": "#4ade80",
    "warning": "#fbbf24",
    "error": "#f87171",
}

LIGHT_MODE_NEUTRALS = {
    "background": "#ffffff",
    "surface": "#f8f9fa",
    "border": "#e0e0e0",
    "text": {"primary": "#1a1a1a", "secondary": "#4a4a4a", "muted": "#6a6a6a"},
    "success": "#16a34a",
    "warning": "#d97706",
    "error": "#dc2626",
}


def is_valid_mode(mode: object) -> bool:
    """Check whether a value is "light", "dark" or "auto"."""
    return mode in MODE_PREFERENCES


def darken_color(color: str) -> str:
    return scale_channels(color, DARK_MODE_FACTOR)


def lighten_color(color: str) -> str:
    return scale_channels(color, LIGHT_MODE_FACTOR)


def _convert(palette: ColorPalette, adjust, neutrals: dict) -> ColorPalette:
    return ColorPalette(
        primary=adjust(palette.primary),
        secondary=adjust(palette.secondary),
        # Accent stays as-is in both directions
        accent=palette.accent,
        background=neutrals["background"],
        surface=neutrals["surface"],
        border=neutrals["border"],
        text=TextColors(**neutrals["text"]),
        success=neutrals["success"],
        warning=neutrals["warning"],
        error=neutrals["error"],
    )


def convert_to_dark_mode(palette: ColorPalette) -> ColorPalette:
    """Dark palette from a light one: darkened primary/secondary over near-black neutrals."""
    return _convert(palette, darken_color, DARK_MODE_NEUTRALS)


def convert_to_light_mode(palette: ColorPalette) -> ColorPalette:
    """Light palette from a dark one: lightened primary/secondary over white neutrals."""
    return _convert(palette, lighten_color, LIGHT_MODE_NEUTRALS)


def _minutes_of_day(clock: str) -> int:
    match = CLOCK_PATTERN.match(clock)
    if not match:
        raise ValueError(f"Invalid time '{clock}'. Expected HH:MM")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise ValueError(f"Invalid time '{clock}'. Expected HH:MM")
    return hours * 60 + minutes


def mode_for_time(now: Union[datetime, time], light_start: str = "06:00", dark_start: str = "18:00") -> str:
    """
    Mode for a time of day under a daily light/dark schedule.

    Dark from dark_start (inclusive) until light_start (exclusive), light otherwise.

    Raises:
        ValueError: If either switch time is not HH:MM
    """
    current = now.hour * 60 + now.minute
    light_minutes = _minutes_of_day(light_start)
    dark_minutes = _minutes_of_day(dark_start)

    if current >= dark_minutes or current < light_minutes:
        return "dark"
    return "light"


def _normalize_signal(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    signal = value.strip().lower()
    if signal in MODES:
        return signal
    _log_warning(f"Ignoring unrecognized system color scheme '{value}'")
    return None


class ThemeModeManager:
    """
    Holds a light/dark/auto preference and resolves its effective mode.

    Attributes:
        mode: Current preference ("light", "dark" or "auto")
        system_preference: Host color scheme ("light", "dark") or None when unknown
    """

    def __init__(self, mode: str = "auto", system_preference: Optional[str] = None):
        self.set_mode(mode)
        if system_preference is None:
            system_preference = os.getenv(SYSTEM_COLOR_SCHEME_ENV)
        self.system_preference = _normalize_signal(system_preference)

    @property
    def effective_mode(self) -> str:
        """Concrete mode: the explicit preference, or for auto the system signal (default light)."""
        if self.mode == "auto":
            return self.system_preference or "light"
        return self.mode

    def set_mode(self, mode: str) -> None:
        """
        Set the mode preference.

        Raises:
            ValueError: If mode is not "light", "dark" or "auto"
        """
        if not is_valid_mode(mode):
            raise ValueError(f"Unknown theme mode '{mode}'. Expected one of {list(MODE_PREFERENCES)}")
        self.mode = mode

    def toggle(self) -> str:
        """Switch to the opposite of the effective mode, as an explicit preference."""
        self.set_mode("dark" if self.effective_mode == "light" else "light")
        _log_debug(f"Toggled theme mode to {self.mode}")
        return self.mode

    def is_dark_mode(self) -> bool:
        return self.effective_mode == "dark"

    def is_light_mode(self) -> bool:
        return self.effective_mode == "light"


def resolve_mode(
    theme_mode: Union[ThemeMode, str],
    now: Optional[Union[datetime, time]] = None,
    system_preference: Optional[str] = None,
) -> str:
    """
    Resolve a mode preference to "light" or "dark".

    Explicit modes are returned as-is. "auto" uses the ThemeMode's switch
    schedule when it has one, otherwise the system signal (default light).

    Args:
        theme_mode: ThemeMode or plain mode string
        now: Time used for scheduled switching (defaults to the current time)
        system_preference: Host color scheme signal, see ThemeModeManager

    Raises:
        ValueError: If the mode or a switch time is invalid
    """
    value = theme_mode.mode if isinstance(theme_mode, ThemeMode) else theme_mode
    if not is_valid_mode(value):
        raise ValueError(f"Unknown theme mode '{value}'. Expected one of {list(MODE_PREFERENCES)}")
    if value != "auto":
        return value

    schedule = theme_mode.auto_switch_time if isinstance(theme_mode, ThemeMode) else None
    if schedule:
        return mode_for_time(now or datetime.now(), schedule.light_start, schedule.dark_start)

    return ThemeModeManager("auto", system_preference).effective_mode


def generate_mode_css(
    palette: ColorPalette,
    fonts: FontConfiguration,
    mode: str,
    registry: DocumentTemplateRegistry = None,
) -> str:
    """
    Stylesheet applying a single palette: custom properties plus utility classes
    (body, headings, .surface, .text-muted, .btn-primary, ...).
    """
    registry = registry or get_document_registry()
    return registry.get_template(MODE_STYLES_TEMPLATE).render(
        color_variables=palette_variables(palette),
        fonts=fonts,
        mode=mode,
    )


def inject_theme_css(
    html: str,
    theme: ResumeTheme,
    mode: Union[ThemeMode, str] = "auto",
    now: Optional[Union[datetime, time]] = None,
    system_preference: Optional[str] = None,
) -> str:
    """
    Insert a <style id="theme-styles"> block for the resolved mode into HTML.

    The block goes right before the first </head>, or at the very start when
    the HTML has no head.
    """
    effective = resolve_mode(mode, now=now, system_preference=system_preference)
    css = generate_mode_css(theme.colors.for_mode(effective), theme.fonts, effective)
    style_tag = f'<style id="theme-styles">{css}</style>'

    if "</head>" in html:
        return html.replace("</head>", f"{style_tag}</head>", 1)
    return style_tag + html
