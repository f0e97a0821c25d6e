"""
Color Math Utilities

Pure functions over sRGB hex colors:
- hex <-> RGB <-> HSL conversion
- WCAG 2.x relative luminance and contrast ratio
- Euclidean distance in raw RGB space

All public functions validate their hex input and raise InvalidColorFormatError
on malformed values instead of propagating NaN through the HSL math.

Note on precision: hex colors are quantized to 8 bits per channel, so
hsl_to_hex(*hex_to_hsl(c)) reproduces c only to within one unit per channel.
The round trip is visually lossless but not guaranteed bit-exact.
"""

import colorsys
import re
from typing import NamedTuple

from prism.contexts.theming.exceptions import InvalidColorFormatError

HEX_COLOR_PATTERN = re.compile(r"^#([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")
CANONICAL_HEX_PATTERN = re.compile(r"^#[0-9a-f]{6}$")

# WCAG linearization threshold and luminance weights
LINEAR_THRESHOLD = 0.03928
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in [0, 360), saturation and lightness in [0, 100]."""

    h: float
    s: float
    l: float  # noqa: E741


def is_valid_hex_color(color: object) -> bool:
    """Check whether a value is a #RGB or #RRGGBB hex string."""
    return isinstance(color, str) and HEX_COLOR_PATTERN.match(color) is not None


def is_canonical_hex(color: object) -> bool:
    """Check whether a value is already in lowercase six-digit #rrggbb form."""
    return isinstance(color, str) and CANONICAL_HEX_PATTERN.match(color) is not None


def normalize_hex(color: object, field: str = None) -> str:
    """
    Validate a hex color and return it in canonical lowercase #rrggbb form.

    Three-digit shorthand is expanded (#abc -> #aabbcc).

    Args:
        color: Candidate color value
        field: Optional palette field name used in the error message

    Returns:
        Lowercase six-digit hex string

    Raises:
        InvalidColorFormatError: If the value is not a hex color
    """
    if not is_valid_hex_color(color):
        raise InvalidColorFormatError(color, field=field)

    digits = color[1:].lower()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits}"


def hex_to_rgb(color: str) -> RGB:
    """Split a hex color into 0-255 integer channels."""
    digits = normalize_hex(color)[1:]
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Join 0-255 channels into a lowercase hex color, rounding and clamping each channel."""
    channels = [max(0, min(255, int(round(c)))) for c in (r, g, b)]
    return "#" + "".join(f"{c:02x}" for c in channels)


def hex_to_hsl(color: str) -> HSL:
    """
    Convert a hex color to HSL.

    Returns:
        HSL with h in [0, 360) and s, l in [0, 100]
    """
    r, g, b = (channel / 255 for channel in hex_to_rgb(color))
    hue, lightness, saturation = colorsys.rgb_to_hls(r, g, b)
    return HSL((hue * 360) % 360, saturation * 100, lightness * 100)


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    """
    Convert HSL to a lowercase hex color.

    Hue wraps modulo 360; saturation and lightness are clamped to [0, 100].
    """
    hue = (h % 360) / 360
    saturation = max(0.0, min(100.0, s)) / 100
    lightness = max(0.0, min(100.0, l)) / 100

    r, g, b = colorsys.hls_to_rgb(hue, lightness, saturation)
    return rgb_to_hex(r * 255, g * 255, b * 255)


def rotate_hue(color: str, degrees: float, saturation_factor: float = 1.0, lightness_offset: float = 0.0,
               max_lightness: float = 100.0) -> str:
    """
    Derive a related color by rotating the hue of a base color.

    Args:
        color: Base hex color
        degrees: Hue rotation (180 = complementary, 120 = triadic)
        saturation_factor: Multiplier applied to the base saturation
        lightness_offset: Added to the base lightness
        max_lightness: Upper bound for the resulting lightness

    Returns:
        Derived hex color
    """
    hsl = hex_to_hsl(color)
    return hsl_to_hex(
        (hsl.h + degrees) % 360,
        hsl.s * saturation_factor,
        min(hsl.l + lightness_offset, max_lightness),
    )


def _linearize(channel: int) -> float:
    value = channel / 255
    if value <= LINEAR_THRESHOLD:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    """WCAG relative luminance of a hex color, in [0, 1]."""
    r, g, b = (_linearize(channel) for channel in hex_to_rgb(color))
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * r + wg * g + wb * b


def contrast_ratio(foreground: str, background: str) -> float:
    """
    WCAG contrast ratio between two colors.

    Symmetric in its arguments; ranges from 1 (identical) to 21 (black on white).
    """
    lum_fg = relative_luminance(foreground)
    lum_bg = relative_luminance(background)
    lighter = max(lum_fg, lum_bg)
    darker = min(lum_fg, lum_bg)
    return (lighter + 0.05) / (darker + 0.05)


def color_distance(color1: str, color2: str) -> float:
    """
    Euclidean distance between two colors in raw 0-255 RGB space.

    Not perceptually uniform. Only meant for coarse "basically the same color"
    checks against fixed thresholds.
    """
    rgb1 = hex_to_rgb(color1)
    rgb2 = hex_to_rgb(color2)
    return sum((a - b) ** 2 for a, b in zip(rgb1, rgb2)) ** 0.5


def scale_channels(color: str, factor: float) -> str:
    """
    Multiply each RGB channel by a fixed factor, flooring and clamping to 0-255.

    A coarse brightness transform used for light/dark mode adjustment, not a
    color-space accurate conversion.
    """
    r, g, b = hex_to_rgb(color)
    return "#" + "".join(f"{max(0, min(255, int(c * factor))):02x}" for c in (r, g, b))
