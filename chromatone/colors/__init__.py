from .color import BLACK, WHITE, Color, graytone
from .operations import (
    brightness,
    compare_brightness,
    compare_luminance,
    complementary,
    contrast,
    darken,
    desaturate,
    distance,
    is_light,
    is_readable,
    lighten,
    luminance,
    rotate_hue,
    saturate,
    text_color,
    to_gray,
)
from .blending import BLEND_FUNCTIONS, blend, blend_channel, multiply, overlay, screen
from .mixing import MIXERS, mix, mix_hsl, mix_lab, mix_lch, mix_rgb, mixer

__all__ = [
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
    "compare_luminance",
    "compare_brightness",
    # blending
    "BLEND_FUNCTIONS",
    "blend_channel",
    "blend",
    "multiply",
    "screen",
    "overlay",
    # mixing
    "MIXERS",
    "mixer",
    "mix",
    "mix_rgb",
    "mix_hsl",
    "mix_lab",
    "mix_lch",
]
