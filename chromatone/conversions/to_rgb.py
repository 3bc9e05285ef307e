import math
from typing import Tuple

import numpy as np

from .numbers import Channel, Hue, UnitInterval
from ..types.constants import SRGB_COMPAND_CUT, XYZ_TO_RGB

UnitRGBATuple = Tuple[UnitInterval, UnitInterval, UnitInterval, UnitInterval]
RGBATuple = Tuple[Channel, Channel, Channel, UnitInterval]

## HSL to RGB conversions

def hsla_to_unit_rgba(h: float, s: float, l: float, a: float = 1.0) -> UnitRGBATuple:
    """
    Convert HSLA to RGBA with every channel in [0, 1].

    Standard sector decomposition: chroma ``(1 - |2l - 1|) * s``, the
    secondary component ``x``, and the lightness offset ``m`` added to all
    three channels.

    Args:
        h: Hue in degrees
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]
        a: Alpha in [0, 1]

    Returns:
        Tuple of UnitInterval (r, g, b, a)
    """
    hue = Hue(h) / 60.0
    s = UnitInterval(s)
    l = UnitInterval(l)

    chroma = (1.0 - abs(2.0 * l - 1.0)) * s
    m = l - chroma / 2.0
    x = chroma * (1.0 - abs((hue % 2.0) - 1.0))

    if hue < 1.0:
        r, g, b = chroma, x, 0.0
    elif hue < 2.0:
        r, g, b = x, chroma, 0.0
    elif hue < 3.0:
        r, g, b = 0.0, chroma, x
    elif hue < 4.0:
        r, g, b = 0.0, x, chroma
    elif hue < 5.0:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return (
        UnitInterval(r + m),
        UnitInterval(g + m),
        UnitInterval(b + m),
        UnitInterval(a),
    )


def hsla_to_rgba(h: float, s: float, l: float, a: float = 1.0) -> RGBATuple:
    """Convert HSLA to 8-bit RGB channels plus a float alpha."""
    r, g, b, alpha = hsla_to_unit_rgba(h, s, l, a)
    return Channel.from_unit(r), Channel.from_unit(g), Channel.from_unit(b), alpha

## XYZ to RGB conversions

def compand(c: float) -> float:
    """sRGB companding: linear light -> encoded channel."""
    if c <= SRGB_COMPAND_CUT:
        return 12.92 * c
    return 1.055 * math.pow(c, 1.0 / 2.4) - 0.055


def xyz_to_unit_rgb(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """
    Convert CIE XYZ (D65) to companded sRGB.

    The result is not clamped: XYZ is bigger than the sRGB gamut, and
    out-of-gamut values are clamped by the channel constructors later.
    """
    linear = XYZ_TO_RGB @ np.array([x, y, z], dtype=float)
    r, g, b = (compand(float(c)) for c in linear)
    return r, g, b


__all__ = ["hsla_to_unit_rgba", "hsla_to_rgba", "compand", "xyz_to_unit_rgb"]
