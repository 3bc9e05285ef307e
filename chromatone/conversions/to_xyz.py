import math
from typing import Tuple

import numpy as np
from boundednumbers import clamp

from ..types.constants import (
    D65_XN,
    D65_YN,
    D65_ZN,
    LAB_DELTA,
    RGB_TO_XYZ,
    SRGB_DECOMPAND_CUT,
)

XYZTuple = Tuple[float, float, float]


def xyz_value(x: float, y: float, z: float) -> XYZTuple:
    """
    Clamp XYZ coordinates to the D65 box.

    X goes from 0 to 0.95047, Y (the luminance) from 0 to 1 and Z from 0
    to 1.08883.
    """
    return (
        float(clamp(x, 0.0, D65_XN)),
        float(clamp(y, 0.0, D65_YN)),
        float(clamp(z, 0.0, D65_ZN)),
    )


def decompand(c: float) -> float:
    """sRGB decompanding: encoded channel -> linear light."""
    if c <= SRGB_DECOMPAND_CUT:
        return c / 12.92
    return math.pow((c + 0.055) / 1.055, 2.4)


def unit_rgb_to_xyz(r: float, g: float, b: float) -> XYZTuple:
    """
    Convert companded sRGB channels in [0, 1] to CIE XYZ (D65).

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        (x, y, z) clamped to the D65 box
    """
    linear = np.array([decompand(r), decompand(g), decompand(b)])
    x, y, z = RGB_TO_XYZ @ linear
    return xyz_value(float(x), float(y), float(z))


def lab_to_xyz(l: float, a: float, b: float) -> XYZTuple:
    """
    Convert CIE Lab to XYZ against the D65 white point.

    Inverse of the piecewise cube root: ``t**3`` above ``6/29``, the
    linear segment ``3 * delta**2 * (t - 4/29)`` below.
    """
    def finv(t: float) -> float:
        if t > LAB_DELTA:
            # anything past 2 lands outside the D65 box after scaling
            return min(t, 2.0) ** 3
        return 3.0 * LAB_DELTA * LAB_DELTA * (t - 4.0 / 29.0)

    l2 = (l + 16.0) / 116.0
    x = D65_XN * finv(l2 + a / 500.0)
    y = D65_YN * finv(l2)
    z = D65_ZN * finv(l2 - b / 200.0)

    return xyz_value(x, y, z)


__all__ = ["XYZTuple", "xyz_value", "decompand", "unit_rgb_to_xyz", "lab_to_xyz"]
