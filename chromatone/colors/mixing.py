"""
Interpolation between two colors in a chosen color space.

Each mixer converts both colors into the space, interpolates every
component (hues along the shortest arc, everything else linearly) and
converts back. The spaces disagree on purpose: mixing red and blue half
way gives purple (#800080) in RGB but magenta (#ff00ff) in HSL.
"""
from typing import Callable, Dict, Union

from .color import Color
from ..types.color_types import ColorSpace
from ..utils.num_utils import lerp, lerp_angle

Mixer = Callable[[Color, Color, float], Color]


def mix_rgb(c1: Color, c2: Color, ratio: float) -> Color:
    """Interpolate the normalized RGB channels and alpha."""
    r1, g1, b1, a1 = c1.to_unit_rgba()
    r2, g2, b2, a2 = c2.to_unit_rgba()
    return Color.rgba2(
        lerp(ratio, r1, r2),
        lerp(ratio, g1, g2),
        lerp(ratio, b1, b2),
        lerp(ratio, a1, a2),
    )


def mix_hsl(c1: Color, c2: Color, ratio: float) -> Color:
    h1, s1, l1, a1 = c1.to_hsla()
    h2, s2, l2, a2 = c2.to_hsla()
    return Color.hsla(
        lerp_angle(ratio, h1, h2),
        lerp(ratio, s1, s2),
        lerp(ratio, l1, l2),
        lerp(ratio, a1, a2),
    )


def mix_lab(c1: Color, c2: Color, ratio: float) -> Color:
    l1, a1, b1 = c1.to_lab()
    l2, a2, b2 = c2.to_lab()
    return Color.lab(
        lerp(ratio, l1, l2),
        lerp(ratio, a1, a2),
        lerp(ratio, b1, b2),
        alpha=lerp(ratio, c1.alpha, c2.alpha),
    )


def mix_lch(c1: Color, c2: Color, ratio: float) -> Color:
    l1, ch1, h1 = c1.to_lch()
    l2, ch2, h2 = c2.to_lch()
    return Color.lch(
        lerp(ratio, l1, l2),
        lerp(ratio, ch1, ch2),
        lerp_angle(ratio, h1, h2),
        alpha=lerp(ratio, c1.alpha, c2.alpha),
    )


MIXERS: Dict[ColorSpace, Mixer] = {
    ColorSpace.RGB: mix_rgb,
    ColorSpace.HSL: mix_hsl,
    ColorSpace.LAB: mix_lab,
    ColorSpace.LCH: mix_lch,
}


def mixer(space: Union[ColorSpace, str]) -> Mixer:
    """
    Return the mixing function of a color space.

    Raises:
        ValueError: If the space is unknown
    """
    return MIXERS[ColorSpace(space)]


def mix(space: Union[ColorSpace, str], c1: Color, c2: Color, ratio: float) -> Color:
    """
    Mix two colors in the given space.

    Args:
        space: ``ColorSpace`` or its name ("rgb", "hsl", "lab", "lch")
        c1: Start color, returned at ratio 0
        c2: End color, returned at ratio 1
        ratio: Position between the two colors; not clamped

    Returns:
        The mixed color
    """
    return mixer(space)(c1, c2, ratio)


Color.mix = lambda self, other, ratio=0.5, space=ColorSpace.RGB: mix(space, self, other, ratio)

__all__ = ["MIXERS", "mixer", "mix", "mix_rgb", "mix_hsl", "mix_lab", "mix_lch"]
