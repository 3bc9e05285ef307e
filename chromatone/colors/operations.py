"""
Color adjustments and perceptual metrics.

Adjustments add to one HSLA component and rebuild the color, so the
results are clamped by the Color constructor. The metrics follow the W3C
definitions:

- brightness: https://www.w3.org/TR/AERT#color-contrast
- luminance and contrast: https://www.w3.org/TR/WCAG20/#relativeluminancedef

Every function is also attached to ``Color`` as a method.
"""
import math

import numpy as np

from .color import BLACK, WHITE, Color
from ..types.constants import (
    BRIGHTNESS_WEIGHTS,
    CONTRAST_OFFSET,
    LIGHT_BRIGHTNESS,
    LUMINANCE_WEIGHTS,
    READABLE_CONTRAST,
    WCAG_DECOMPAND_CUT,
)


def rotate_hue(color: Color, angle: float) -> Color:
    """Rotate the hue by ``angle`` degrees."""
    h, s, l, a = color
    return Color(h + angle, s, l, a)


def complementary(color: Color) -> Color:
    return rotate_hue(color, 180.0)


def lighten(color: Color, amount: float) -> Color:
    """Add ``amount`` (between -1 and 1) to the lightness. Negative darkens."""
    h, s, l, a = color
    return Color(h, s, l + amount, a)


def darken(color: Color, amount: float) -> Color:
    return lighten(color, -amount)


def saturate(color: Color, amount: float) -> Color:
    """Add ``amount`` (between -1 and 1) to the saturation. Negative desaturates."""
    h, s, l, a = color
    return Color(h, s + amount, l, a)


def desaturate(color: Color, amount: float) -> Color:
    return saturate(color, -amount)


def to_gray(color: Color) -> Color:
    """
    A gray with the same perceived lightness.

    The LCh lightness is kept while chroma and hue are dropped. Alpha is
    kept as well.
    """
    l, _, _ = color.to_lch()
    return desaturate(Color.lch(l, 0.0, 0.0, alpha=color.alpha), 1.0)


def brightness(color: Color) -> float:
    """Perceived brightness in [0, 1], from the normalized RGB channels."""
    r, g, b, _ = color.to_unit_rgba()
    return float(BRIGHTNESS_WEIGHTS @ np.array([r, g, b], dtype=float)) / 1000.0


def _linear(c: float) -> float:
    if c <= WCAG_DECOMPAND_CUT:
        return c / 12.92
    return math.pow((c + 0.055) / 1.055, 2.4)


def luminance(color: Color) -> float:
    """Relative luminance: 0.0 for black, 1.0 for white."""
    r, g, b, _ = color.to_unit_rgba()
    wr, wg, wb = (float(w) for w in LUMINANCE_WEIGHTS)
    return wr * _linear(r) + wg * _linear(g) + wb * _linear(b)


def contrast(color: Color, other: Color) -> float:
    """
    Contrast ratio between two colors, from 1.0 up to 21.0.

    Symmetric in both arguments. A ratio above 4.5 is considered readable.
    """
    l1 = luminance(color)
    l2 = luminance(other)
    if l1 > l2:
        return (l1 + CONTRAST_OFFSET) / (l2 + CONTRAST_OFFSET)
    return (l2 + CONTRAST_OFFSET) / (l1 + CONTRAST_OFFSET)


def is_light(color: Color) -> bool:
    return brightness(color) > LIGHT_BRIGHTNESS


def is_readable(color: Color, other: Color) -> bool:
    return contrast(color, other) > READABLE_CONTRAST


def text_color(color: Color) -> Color:
    """Black or white, whichever reads better on ``color``."""
    return BLACK if is_light(color) else WHITE


def distance(color: Color, other: Color) -> float:
    """Euclidean distance in CIE Lab (CIE76 delta E)."""
    l1, a1, b1 = color.to_lab()
    l2, a2, b2 = other.to_lab()
    return math.sqrt((l1 - l2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)


def _compare(x: float, y: float) -> int:
    return (x > y) - (x < y)


def compare_luminance(color: Color, other: Color) -> int:
    """-1, 0 or 1 as ``color`` is darker, as luminous, or brighter than ``other``."""
    return _compare(luminance(color), luminance(other))


def compare_brightness(color: Color, other: Color) -> int:
    return _compare(brightness(color), brightness(other))


Color.rotate_hue = rotate_hue
Color.complementary = complementary
Color.lighten = lighten
Color.darken = darken
Color.saturate = saturate
Color.desaturate = desaturate
Color.to_gray = to_gray
Color.brightness = brightness
Color.luminance = luminance
Color.contrast = contrast
Color.is_light = is_light
Color.is_readable = is_readable
Color.text_color = text_color
Color.distance = distance

__all__ = [
    "rotate_hue",
    "complementary",
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "to_gray",
    "brightness",
    "luminance",
    "contrast",
    "is_light",
    "is_readable",
    "text_color",
    "distance",
    "compare_luminance",
    "compare_brightness",
]
