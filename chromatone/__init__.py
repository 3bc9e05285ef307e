"""Chromatone: immutable colors, color space conversions and color scales."""

__version__ = "0.1.0"

from .types.color_types import BlendMode, ColorModel, ColorSpace
from .types.format_type import FormatType
from .colors import (
    BLACK,
    WHITE,
    Color,
    blend,
    brightness,
    complementary,
    contrast,
    darken,
    desaturate,
    distance,
    graytone,
    is_light,
    is_readable,
    lighten,
    luminance,
    mix,
    mix_hsl,
    mix_lab,
    mix_lch,
    mix_rgb,
    rotate_hue,
    saturate,
    text_color,
    to_gray,
)
from .conversions import Channel, Hue, UnitInterval, clip_hue, convert
from .gradients import (
    GRAYSCALE,
    ColorScale,
    ColorStop,
    ColorStops,
    color_scale,
    color_stop,
    css_color_stops,
    css_linear_gradient,
    sample,
    sample_colors,
)
from .samples import X11_COLORS, named_color

__all__ = [
    "__version__",
    # enums
    "BlendMode",
    "ColorModel",
    "ColorSpace",
    "FormatType",
    # core color type
    "Color",
    "BLACK",
    "WHITE",
    "graytone",
    # operations
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
    "blend",
    "mix",
    "mix_rgb",
    "mix_hsl",
    "mix_lab",
    "mix_lch",
    # conversions
    "Hue",
    "UnitInterval",
    "Channel",
    "clip_hue",
    "convert",
    # scales
    "ColorStop",
    "ColorStops",
    "ColorScale",
    "color_stop",
    "color_scale",
    "sample",
    "sample_colors",
    "css_color_stops",
    "css_linear_gradient",
    "GRAYSCALE",
    # named colors
    "X11_COLORS",
    "named_color",
]
