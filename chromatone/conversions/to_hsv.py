from typing import Tuple

from .numbers import Hue, UnitInterval

HSVATuple = Tuple[Hue, UnitInterval, UnitInterval, UnitInterval]


def hsva_value(h: float, s: float, v: float, a: float = 1.0) -> HSVATuple:
    return Hue(h), UnitInterval(s), UnitInterval(v), UnitInterval(a)


def hsla_to_hsva(h: float, s: float, l: float, a: float = 1.0) -> HSVATuple:
    """
    Convert HSL(A) to HSV(A).

    Mirrors ``hsva_to_hsla``: ``l == 0`` and ``s == 0, l == 1`` are
    special-cased.
    """
    s = UnitInterval(s)
    l = UnitInterval(l)

    if l == 0:
        return hsva_value(h, (2.0 * s) / (1.0 + s), 0.0, a)

    if s == 0 and l == 1.0:
        return hsva_value(h, 0.0, 1.0, a)

    tmp = s * (l if l < 0.5 else 1.0 - l)
    saturation = (2.0 * tmp) / (l + tmp)
    value = l + tmp

    return hsva_value(h, saturation, value, a)


__all__ = ["HSVATuple", "hsva_value", "hsla_to_hsva"]
