"""
Color stops: the data of a color scale.

A ``ColorStops`` value holds a start color (ratio 0), a tuple of
``ColorStop`` sorted by ratio, and an end color (ratio 1). The endpoints
are kept apart from the middle stops so they exist even when there are no
middle stops.

All values are immutable; every function here returns a new value.
"""
import warnings
from bisect import bisect_right
from typing import Callable, Iterable, NamedTuple, Sequence, Tuple

from ..colors.color import Color
from ..conversions.numbers import UnitInterval
from ..types.constants import DEFAULT_EPSILON


class ColorStop(NamedTuple):
    color: Color
    ratio: UnitInterval


class ColorStops(NamedTuple):
    start: Color
    stops: Tuple[ColorStop, ...]
    end: Color


def color_stop(color: Color, ratio: float) -> ColorStop:
    """Create a stop; the ratio is clamped to [0, 1]."""
    return ColorStop(color, UnitInterval(ratio))


def stop_color(stop: ColorStop) -> Color:
    return stop.color


def stop_ratio(stop: ColorStop) -> UnitInterval:
    return stop.ratio


def color_stops(start: Color, stops: Iterable[ColorStop], end: Color) -> ColorStops:
    """
    Create ``ColorStops``.

    Middle stops are sorted by ratio; stops with equal ratios keep their
    given order.
    """
    middle = tuple(sorted((color_stop(c, r) for c, r in stops), key=stop_ratio))
    return ColorStops(start, middle, end)


def add_stop(stops: ColorStops, color: Color, ratio: float) -> ColorStops:
    """
    Insert a stop, keeping the middle stops sorted.

    A stop whose ratio equals existing ones goes after them.
    """
    stop = color_stop(color, ratio)
    ratios = [s.ratio for s in stops.stops]
    index = bisect_right(ratios, stop.ratio)
    middle = stops.stops[:index] + (stop,) + stops.stops[index:]
    return ColorStops(stops.start, middle, stops.end)


def combine_stops(epsilon: float, x: float, a: ColorStops, b: ColorStops) -> ColorStops:
    """
    Concatenate two sets of stops at the transition point ``x``.

    The stops of ``a`` are squeezed into [0, x) and those of ``b`` into
    (x, 1]. The color right at ``x`` is the start of ``b``; the end of
    ``a`` sits at ``x - epsilon``.

    Args:
        epsilon: Width of the transition zone
        x: Transition point, strictly between 0 and 1
        a: Stops of the left part
        b: Stops of the right part

    Returns:
        The combined stops, from the start of ``a`` to the end of ``b``

    Raises:
        ValueError: If ``x`` is not strictly between 0 and 1
    """
    if not 0.0 < x < 1.0:
        raise ValueError(f"Transition point must be strictly between 0 and 1, got {x}")
    if epsilon >= x:
        warnings.warn(
            f"epsilon ({epsilon}) is not smaller than the transition point ({x}); "
            "the end of the first scale is clamped to ratio 0."
        )

    left = tuple(color_stop(s.color, s.ratio / (1.0 / x)) for s in a.stops)
    middle = (color_stop(a.end, x - epsilon), color_stop(b.start, x))
    right = tuple(color_stop(s.color, x + s.ratio / (1.0 / (1.0 - x))) for s in b.stops)
    return ColorStops(a.start, tuple(sorted(left + middle + right, key=stop_ratio)), b.end)


def combine_color_stops(x: float, a: ColorStops, b: ColorStops) -> ColorStops:
    """``combine_stops`` with a one-in-a-million transition zone."""
    return combine_stops(DEFAULT_EPSILON, x, a, b)


def reverse_stops(stops: ColorStops) -> ColorStops:
    """Mirror the stops: endpoints swap and every ratio ``r`` becomes ``1 - r``."""
    middle = tuple(color_stop(s.color, 1.0 - s.ratio) for s in reversed(stops.stops))
    return ColorStops(stops.end, middle, stops.start)


def uniform_stops(start: Color, colors: Sequence[Color], end: Color) -> ColorStops:
    """Place ``colors`` evenly between ``start`` and ``end`` (ratios ``i / (n + 1)``)."""
    n = len(colors) + 1
    middle = tuple(color_stop(c, i / n) for i, c in enumerate(colors, start=1))
    return ColorStops(start, middle, end)


def modify(f: Callable[[float, Color], Color], stops: ColorStops) -> ColorStops:
    """
    Apply ``f(position, color)`` to every stop.

    The position is 0 for the start, the ratio for middle stops and 1 for
    the end. Ratios are left unchanged.
    """
    start = f(0.0, stops.start)
    middle = tuple(color_stop(f(s.ratio, s.color), s.ratio) for s in stops.stops)
    return ColorStops(start, middle, f(1.0, stops.end))


__all__ = [
    "ColorStop",
    "ColorStops",
    "color_stop",
    "stop_color",
    "stop_ratio",
    "color_stops",
    "add_stop",
    "combine_stops",
    "combine_color_stops",
    "reverse_stops",
    "uniform_stops",
    "modify",
]
