from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

Scalar = Union[int, float]
ScalarVector = Tuple[Scalar, ...]
IntTriple = Tuple[int, int, int]
FloatTriple = Tuple[float, float, float]
FloatQuad = Tuple[float, float, float, float]
RGBAValue = Tuple[int, int, int, float]


class _CaseInsensitiveEnum(str, Enum):
    """String enum that also accepts differently cased names ("Lab", "LCh")."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class ColorSpace(_CaseInsensitiveEnum):
    """
    Interpolation spaces for mixing and color scales.

    RGB:  r, g, b, a interpolated linearly
    HSL:  h along the shortest arc, s, l, a linearly
    LAB:  l, a, b linearly
    LCH:  l, c linearly, h along the shortest arc
    """
    RGB = "rgb"
    HSL = "hsl"
    LAB = "lab"
    LCH = "lch"


class ColorModel(_CaseInsensitiveEnum):
    """Component representations a Color can be projected to."""
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    HSV = "hsv"
    HSVA = "hsva"
    XYZ = "xyz"
    LAB = "lab"
    LCH = "lch"


class BlendMode(_CaseInsensitiveEnum):
    MULTIPLY = "multiply"
    SCREEN = "screen"
    OVERLAY = "overlay"


HUE_MODELS = {ColorModel.HSL, ColorModel.HSLA, ColorModel.HSV, ColorModel.HSVA}
ALPHA_MODELS = {ColorModel.RGBA, ColorModel.HSLA, ColorModel.HSVA}
