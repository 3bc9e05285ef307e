"""
Color scales: color stops plus the color space used between them.

Sampling
--------
``sample(scale, x)`` walks the stops from left to right. Inside a segment
the two neighbouring colors are mixed in the scale's color space; outside
of [0, 1] the endpoint colors are returned. A segment of zero width yields
its left color, which is what makes the hard edge of ``combine_scales``
work.

CSS
---
CSS gradients always interpolate in RGB, so scales in other spaces are
resampled into enough RGB stops first (``min_color_stops``).
"""
import warnings
from typing import Callable, List, NamedTuple, Optional, Sequence, Union

from .stops import (
    ColorStop,
    ColorStops,
    add_stop,
    color_stop,
    color_stops,
    combine_color_stops,
    reverse_stops,
    uniform_stops,
)
from ..colors.color import BLACK, WHITE, Color
from ..colors.mixing import Mixer, mixer
from ..types.color_types import ColorSpace
from ..types.constants import MANY_STOPS_WARNING, MIN_CSS_STOPS
from ..utils.num_utils import between, format_number

Sampler = Callable[[float], Color]


class ColorScale(NamedTuple):
    space: ColorSpace
    stops: ColorStops


def color_scale(
    space: Union[ColorSpace, str],
    start: Color,
    stops: Sequence[ColorStop],
    end: Color,
) -> ColorScale:
    """
    Create a color scale.

    Args:
        space: Color space used for interpolation between stops
        start: Color at ratio 0.0
        stops: Intermediate ``ColorStop``s (or ``(color, ratio)`` pairs), in any order
        end: Color at ratio 1.0

    Raises:
        ValueError: If the color space is unknown
    """
    return ColorScale(ColorSpace(space), color_stops(start, stops, end))


def add_scale_stop(scale: ColorScale, color: Color, ratio: float) -> ColorScale:
    return ColorScale(scale.space, add_stop(scale.stops, color, ratio))


def make_sampler(interpolate: Mixer, stops: ColorStops) -> Sampler:
    """
    Build a sampling function over ``stops``.

    Args:
        interpolate: Two-color mixer, ``interpolate(c1, c2, p)``
        stops: The stops to sample

    Returns:
        A function from a position to the color at that position
    """
    segments = stops.stops + (color_stop(stops.end, 1.0),)

    def sample_at(x: float) -> Color:
        if x < 0.0:
            return stops.start
        if x > 1.0:
            return stops.end

        left_color, left = stops.start, 0.0
        for right_color, right in segments:
            if between(left, right, x):
                if left == right:
                    return left_color
                return interpolate(left_color, right_color, (x - left) / (right - left))
            left_color, left = right_color, right
        return left_color

    return sample_at


def sampler(scale: ColorScale) -> Sampler:
    """Sampling function of a scale, interpolating in the scale's color space."""
    return make_sampler(mixer(scale.space), scale.stops)


def sample(scale: ColorScale, x: float) -> Color:
    """The color at position ``x``; positions outside [0, 1] are clamped."""
    return sampler(scale)(x)


def colors(f: Sampler, n: int) -> List[Color]:
    """
    Sample ``n`` evenly spaced colors from ``f``, both ends included.

    Raises:
        ValueError: If ``n`` is negative
    """
    if n < 0:
        raise ValueError(f"Number of colors must be non-negative, got {n}")
    if n == 0:
        return []
    if n == 1:
        return [f(0.0)]
    return [f(i / (n - 1)) for i in range(n)]


def sample_colors(scale: ColorScale, n: int) -> List[Color]:
    return colors(sampler(scale), n)


def combine_scales(x: float, a: ColorScale, b: ColorScale) -> ColorScale:
    """Concatenate two scales at ``x``; the result interpolates in ``a``'s space."""
    return ColorScale(a.space, combine_color_stops(x, a.stops, b.stops))


def reverse_scale(scale: ColorScale) -> ColorScale:
    return ColorScale(scale.space, reverse_stops(scale.stops))


def uniform_scale(
    space: Union[ColorSpace, str],
    start: Color,
    middle: Sequence[Color],
    end: Color,
) -> ColorScale:
    """A scale with ``middle`` colors evenly spaced between ``start`` and ``end``."""
    return ColorScale(ColorSpace(space), uniform_stops(start, middle, end))


def min_color_stops(interpolate: Mixer, n: int, stops: ColorStops) -> ColorStops:
    """
    Make sure ``stops`` has at least ``n`` samples.

    Adds ``n - 1`` stops at ratios ``k / n``, sampled from the original
    stops. For ``n <= 1`` the stops are returned unchanged.
    """
    if n <= 1:
        return stops
    if n > MANY_STOPS_WARNING:
        warnings.warn(f"Resampling into {n} color stops; this can be slow and the result large.")

    sample_at = make_sampler(interpolate, stops)
    result = stops
    for k in range(1, n):
        ratio = k / n
        result = add_stop(result, sample_at(ratio), ratio)
    return result


def _css_stops(stops: ColorStops) -> str:
    parts = [stops.start.css_hsla()]
    parts.extend(f"{c.css_hsla()} {format_number(r * 100.0)}%" for c, r in stops.stops)
    parts.append(stops.end.css_hsla())
    return ", ".join(parts)


def css_color_stops(scale: ColorScale) -> str:
    """
    Comma-separated CSS color stops of a scale.

    Examples:
        >>> css_color_stops(GRAYSCALE)
        'hsl(0, 0%, 0%), hsl(0, 0%, 100%)'
    """
    if scale.space == ColorSpace.RGB:
        return _css_stops(scale.stops)
    return _css_stops(min_color_stops(mixer(scale.space), MIN_CSS_STOPS, scale.stops))


def css_linear_gradient(scale: ColorScale, angle: Optional[float] = None) -> str:
    """
    A CSS ``linear-gradient(...)`` value for the scale.

    Args:
        scale: The color scale
        angle: Gradient direction in degrees; CSS defaults to 180 (top to bottom)
    """
    stops = css_color_stops(scale)
    if angle is None:
        return f"linear-gradient({stops})"
    return f"linear-gradient({format_number(angle)}deg, {stops})"


GRAYSCALE = color_scale(ColorSpace.RGB, BLACK, [], WHITE)

__all__ = [
    "ColorScale",
    "Sampler",
    "color_scale",
    "add_scale_stop",
    "make_sampler",
    "sampler",
    "sample",
    "colors",
    "sample_colors",
    "combine_scales",
    "reverse_scale",
    "uniform_scale",
    "min_color_stops",
    "css_color_stops",
    "css_linear_gradient",
    "GRAYSCALE",
]
