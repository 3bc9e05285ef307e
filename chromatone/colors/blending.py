"""
Blend modes for layering one color over another.

Blending works channel by channel on normalized RGB. The background is the
bottom layer, the foreground is painted on top; the alpha of the result is
the mean of both alphas.
"""
from typing import Callable, Dict, Union

from .color import Color
from ..types.color_types import BlendMode

ChannelBlend = Callable[[float, float], float]


def _multiply(a: float, b: float) -> float:
    return a * b


def _screen(a: float, b: float) -> float:
    return 1.0 - (1.0 - a) * (1.0 - b)


def _overlay(a: float, b: float) -> float:
    if a < 0.5:
        return 2.0 * a * b
    return 1.0 - 2.0 * (1.0 - a) * (1.0 - b)


BLEND_FUNCTIONS: Dict[BlendMode, ChannelBlend] = {
    BlendMode.MULTIPLY: _multiply,
    BlendMode.SCREEN: _screen,
    BlendMode.OVERLAY: _overlay,
}


def blend_channel(mode: Union[BlendMode, str], a: float, b: float) -> float:
    """
    Blend two normalized channel values.

    Args:
        mode: Blend mode (``BlendMode`` or its name)
        a: Background channel in [0, 1]
        b: Foreground channel in [0, 1]

    Returns:
        Blended channel in [0, 1]

    Raises:
        ValueError: If the mode is unknown
    """
    return BLEND_FUNCTIONS[BlendMode(mode)](a, b)


def blend(mode: Union[BlendMode, str], background: Color, foreground: Color) -> Color:
    """
    Blend ``foreground`` onto ``background``.

    Examples:
        >>> blend("multiply", Color.rgb(255, 102, 0), Color.rgb(51, 51, 51)).to_rgba()
        (51, 20, 0, 1.0)
    """
    fn = BLEND_FUNCTIONS[BlendMode(mode)]
    r1, g1, b1, a1 = background.to_unit_rgba()
    r2, g2, b2, a2 = foreground.to_unit_rgba()
    return Color.rgba2(
        fn(r1, r2),
        fn(g1, g2),
        fn(b1, b2),
        (a1 + a2) / 2.0,
    )


def multiply(background: Color, foreground: Color) -> Color:
    return blend(BlendMode.MULTIPLY, background, foreground)


def screen(background: Color, foreground: Color) -> Color:
    return blend(BlendMode.SCREEN, background, foreground)


def overlay(background: Color, foreground: Color) -> Color:
    return blend(BlendMode.OVERLAY, background, foreground)


Color.blend = lambda self, foreground, mode=BlendMode.MULTIPLY: blend(mode, self, foreground)

__all__ = ["BLEND_FUNCTIONS", "blend_channel", "blend", "multiply", "screen", "overlay"]
