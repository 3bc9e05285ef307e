"""Small numeric helpers shared by the conversions and the scale engine."""
import math

from boundednumbers import clamp

DEG2RAD = math.pi / 180.0
RAD2DEG = 180.0 / math.pi


def mod_pos(x: float, y: float) -> float:
    """Like ``%``, but always non-negative for a positive modulus."""
    return ((x % y) + y) % y


def lerp(t: float, a: float, b: float) -> float:
    """
    Linear interpolation between ``a`` and ``b``.

    ``t`` is not clamped, values outside [0, 1] extrapolate.
    """
    return a + t * (b - a)


def lerp_angle(t: float, a: float, b: float) -> float:
    """
    Interpolate between two angles (degrees) along the shortest arc.

    Three paths are considered: a -> b, a -> b + 360 and a + 360 -> b.
    The one with the smallest absolute length wins; on a tie the earlier
    candidate is kept. The result is not wrapped into [0, 360).

    Args:
        t: Interpolation factor
        a: Start angle in degrees
        b: End angle in degrees

    Returns:
        Interpolated angle in degrees
    """
    candidates = ((a, b), (a, b + 360.0), (a + 360.0, b))
    start, end = min(candidates, key=lambda path: abs(path[1] - path[0]))
    return lerp(t, start, end)


def between(lo: float, hi: float, x: float) -> bool:
    """Closed interval test ``lo <= x <= hi``."""
    return lo <= x <= hi


def round_half_up(x: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals with ties going up, like JavaScript's Math.round."""
    factor = 10.0 ** digits
    return math.floor(x * factor + 0.5) / factor


def format_number(x: float, digits: int = 2) -> str:
    """
    Format a number for CSS output.

    Rounded half-up to ``digits`` decimals; trailing zeros are dropped, so
    integral values print without a fractional part (``100``, ``0.5``).
    """
    text = f"{round_half_up(float(x), digits):.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


__all__ = [
    "DEG2RAD",
    "RAD2DEG",
    "clamp",
    "mod_pos",
    "lerp",
    "lerp_angle",
    "between",
    "round_half_up",
    "format_number",
]
