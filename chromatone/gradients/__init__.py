"""
Color scales (1D gradients) built from color stops.

>>> from chromatone.gradients import color_scale, color_stop, sample
>>> from chromatone.samples.x11 import BLUE, RED, YELLOW
>>> scale = color_scale("hsl", RED, [color_stop(BLUE, 0.3)], YELLOW)
>>> sample(scale, 0.3) == BLUE
True
"""
from .stops import (
    ColorStop,
    ColorStops,
    add_stop,
    color_stop,
    color_stops,
    combine_color_stops,
    combine_stops,
    modify,
    reverse_stops,
    stop_color,
    stop_ratio,
    uniform_stops,
)
from .scale import (
    GRAYSCALE,
    ColorScale,
    Sampler,
    add_scale_stop,
    color_scale,
    colors,
    combine_scales,
    css_color_stops,
    css_linear_gradient,
    make_sampler,
    min_color_stops,
    reverse_scale,
    sample,
    sample_colors,
    sampler,
    uniform_scale,
)

__all__ = [
    "ColorStop",
    "ColorStops",
    "ColorScale",
    "Sampler",
    "color_stop",
    "color_stops",
    "color_scale",
    "stop_color",
    "stop_ratio",
    "add_stop",
    "add_scale_stop",
    "make_sampler",
    "sampler",
    "sample",
    "colors",
    "sample_colors",
    "combine_stops",
    "combine_color_stops",
    "combine_scales",
    "reverse_stops",
    "reverse_scale",
    "uniform_stops",
    "uniform_scale",
    "modify",
    "min_color_stops",
    "css_color_stops",
    "css_linear_gradient",
    "GRAYSCALE",
]
