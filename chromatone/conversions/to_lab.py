import math
from typing import Tuple

from .numbers import Hue
from ..types.constants import D65_XN, D65_YN, D65_ZN, LAB_CUT
from ..utils.num_utils import DEG2RAD, RAD2DEG

LabTuple = Tuple[float, float, float]
LChTuple = Tuple[float, float, Hue]


def _f(t: float) -> float:
    if t > LAB_CUT:
        return math.pow(t, 1.0 / 3.0)
    return (1.0 / 3.0) * (29.0 / 6.0) ** 2 * t + 4.0 / 29.0


def xyz_to_lab(x: float, y: float, z: float) -> LabTuple:
    """
    Convert CIE XYZ to CIE Lab (D65 reference white).

    Returns:
        (l, a, b) with l in [0, 100]
    """
    fy = _f(y / D65_YN)
    l = 116.0 * fy - 16.0
    a = 500.0 * (_f(x / D65_XN) - fy)
    b = 200.0 * (fy - _f(z / D65_ZN))
    return l, a, b


def lab_to_lch(l: float, a: float, b: float) -> LChTuple:
    """Polar form of Lab: chroma ``hypot(a, b)``, hue ``atan2(b, a)`` in degrees."""
    c = math.hypot(a, b)
    h = Hue(math.atan2(b, a) * RAD2DEG)
    return l, c, h


def lch_to_lab(l: float, c: float, h: float) -> LabTuple:
    a = c * math.cos(h * DEG2RAD)
    b = c * math.sin(h * DEG2RAD)
    return l, a, b


__all__ = ["LabTuple", "LChTuple", "xyz_to_lab", "lab_to_lch", "lch_to_lab"]
