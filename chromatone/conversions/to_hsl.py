"""Conversions into the canonical HSLA form."""
from typing import Tuple

from .numbers import Channel, Hue, UnitInterval
from ..utils.num_utils import mod_pos

HSLATuple = Tuple[Hue, UnitInterval, UnitInterval, UnitInterval]


def hsla_value(h: float, s: float, l: float, a: float = 1.0) -> HSLATuple:
    """Normalize raw HSLA components into their bounded types."""
    return Hue(h), UnitInterval(s), UnitInterval(l), UnitInterval(a)


def hue_from_rgb(r: float, g: float, b: float) -> Hue:
    """
    Hue angle of an 8-bit RGB triple.

    Uses the six-piece formula on the channel that holds the maximum:
    ``(g - b)/c mod 6`` for red, ``(b - r)/c + 2`` for green and
    ``(r - g)/c + 4`` for blue, times 60 degrees. Grays (zero chroma)
    have hue 0.

    Args:
        r, g, b: Channels in [0, 255] (clamped and rounded first)

    Returns:
        Hue in degrees
    """
    red, green, blue = Channel(r), Channel(g), Channel(b)
    max_c = max(red, green, blue)
    min_c = min(red, green, blue)
    chroma = (max_c - min_c) / 255.0

    if chroma == 0:
        return Hue(0.0)

    rn, gn, bn = red / 255.0, green / 255.0, blue / 255.0
    if max_c == red:
        sector = mod_pos((gn - bn) / chroma, 6.0)
    elif max_c == green:
        sector = (bn - rn) / chroma + 2.0
    else:
        sector = (rn - gn) / chroma + 4.0

    return Hue(60.0 * sector)


def rgba_to_hsla(r: float, g: float, b: float, a: float = 1.0) -> HSLATuple:
    """
    Convert 8-bit RGB (+ float alpha) to HSLA.

    Channels are rounded and clamped to [0, 255] first; the lightness and
    chroma are computed in that integer domain.

    Args:
        r, g, b: Channels in [0, 255]
        a: Alpha in [0, 1]

    Returns:
        Tuple[Hue, UnitInterval, UnitInterval, UnitInterval]
    """
    red, green, blue = Channel(r), Channel(g), Channel(b)
    max_c = max(red, green, blue)
    min_c = min(red, green, blue)
    chroma = max_c - min_c

    hue = hue_from_rgb(red, green, blue)
    lightness = (max_c + min_c) / (255.0 * 2.0)

    if chroma == 0:
        saturation = 0.0
    else:
        saturation = (chroma / 255.0) / (1.0 - abs(2.0 * lightness - 1.0))

    return hsla_value(hue, saturation, lightness, a)


def hsva_to_hsla(h: float, s: float, v: float, a: float = 1.0) -> HSLATuple:
    """
    Convert HSV(A) to HSL(A).

    ``v == 0`` and ``s == 0, v == 1`` are handled separately since the
    general formula divides by zero there.
    """
    s = UnitInterval(s)
    v = UnitInterval(v)

    if v == 0:
        return hsla_value(h, s / (2.0 - s), 0.0, a)

    if s == 0 and v == 1.0:
        return hsla_value(h, 0.0, 1.0, a)

    tmp = (2.0 - s) * v
    saturation = (s * v) / (tmp if tmp < 1.0 else 2.0 - tmp)
    lightness = tmp / 2.0

    return hsla_value(h, saturation, lightness, a)


__all__ = ["HSLATuple", "hsla_value", "hue_from_rgb", "rgba_to_hsla", "hsva_to_hsla"]
