from __future__ import annotations
from typing import Iterator, Optional, Tuple, Union

from ..conversions import (
    Channel,
    Hue,
    UnitInterval,
    format_hex,
    from_hsla,
    hsla_to_hsva,
    hsla_to_rgba,
    hsla_to_unit_rgba,
    hsla_value,
    hsva_to_hsla,
    lab_to_lch,
    lab_to_xyz,
    lch_to_lab,
    pack_int,
    parse_hex,
    rgba_to_hsla,
    unit_rgb_to_xyz,
    unpack_int,
    xyz_to_lab,
    xyz_to_unit_rgb,
)
from ..types.color_types import ColorModel, FloatQuad, FloatTriple, RGBAValue
from ..types.format_type import FormatType
from ..utils.num_utils import format_number


class Color:
    """
    A color in the sRGB gamut, stored as HSLA.

    The stored components are always normalized: hue in degrees (folded into
    [0, 360), 360 kept), saturation, lightness and alpha in [0, 1]. Every
    other model (RGB, HSV, XYZ, Lab, LCh, hex) is a view computed on demand.

    Two colors are equal when their 8-bit RGBA projections are equal, since
    HSL has many representations of the same visible color (black has any
    hue and saturation).

    Instances are immutable.
    """

    __slots__ = ('_value', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, h: float, s: float, l: float, a: float = 1.0) -> None:
        self._value = hsla_value(h, s, l, a)
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def hsla(cls, h: float, s: float, l: float, a: float) -> Color:
        """Hue in degrees; saturation, lightness and alpha in [0, 1]."""
        return cls(h, s, l, a)

    @classmethod
    def hsl(cls, h: float, s: float, l: float) -> Color:
        return cls(h, s, l, 1.0)

    @classmethod
    def _from_hsla(cls, hsla: FloatQuad) -> Color:
        return cls(*hsla)

    @classmethod
    def rgba(cls, r: float, g: float, b: float, a: float) -> Color:
        """Channels in [0, 255] (rounded and clamped), alpha in [0, 1]."""
        return cls._from_hsla(rgba_to_hsla(r, g, b, a))

    @classmethod
    def rgb(cls, r: float, g: float, b: float) -> Color:
        return cls.rgba(r, g, b, 1.0)

    @classmethod
    def rgba2(cls, r: float, g: float, b: float, a: float) -> Color:
        """Channels and alpha in [0, 1]; channels are rounded to 8 bits."""
        return cls.rgba(
            Channel.from_unit(r),
            Channel.from_unit(g),
            Channel.from_unit(b),
            a,
        )

    @classmethod
    def rgb2(cls, r: float, g: float, b: float) -> Color:
        return cls.rgba2(r, g, b, 1.0)

    @classmethod
    def hsva(cls, h: float, s: float, v: float, a: float) -> Color:
        return cls._from_hsla(hsva_to_hsla(h, s, v, a))

    @classmethod
    def hsv(cls, h: float, s: float, v: float) -> Color:
        return cls.hsva(h, s, v, 1.0)

    @classmethod
    def xyz(cls, x: float, y: float, z: float, alpha: float = 1.0) -> Color:
        """
        Create a Color from CIE 1931 XYZ coordinates (D65).

        XYZ is bigger than the sRGB gamut; coordinates outside of it end up
        as fully saturated colors at the gamut edge.
        """
        r, g, b = xyz_to_unit_rgb(x, y, z)
        return cls.rgba(r * 255.0, g * 255.0, b * 255.0, alpha)

    @classmethod
    def lab(cls, l: float, a: float, b: float, alpha: float = 1.0) -> Color:
        """Create a Color from CIE Lab coordinates (D65). See ``xyz``."""
        return cls.xyz(*lab_to_xyz(l, a, b), alpha=alpha)

    @classmethod
    def lch(cls, l: float, c: float, h: float, alpha: float = 1.0) -> Color:
        """Create a Color from CIE LCh (cylindrical Lab) coordinates. See ``xyz``."""
        return cls.lab(*lch_to_lab(l, c, h), alpha=alpha)

    @classmethod
    def from_hex(cls, text: str) -> Optional[Color]:
        """
        Parse ``#rgb`` or ``#rrggbb``.

        Returns:
            The color, or None if the string is malformed
        """
        channels = parse_hex(text)
        if channels is None:
            return None
        return cls.rgb(*channels)

    @classmethod
    def from_int(cls, n: int) -> Color:
        """Create a Color from a packed ``0xRRGGBB`` integer (clamped to 24 bits)."""
        return cls.rgb(*unpack_int(n))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Hue, UnitInterval, UnitInterval, UnitInterval]:
        return self._value

    @property
    def hue(self) -> Hue:
        return self._value[0]

    @property
    def saturation(self) -> UnitInterval:
        return self._value[1]

    @property
    def lightness(self) -> UnitInterval:
        return self._value[2]

    @property
    def alpha(self) -> UnitInterval:
        return self._value[3]

    def with_alpha(self, alpha: float) -> Color:
        """Return a copy with a different alpha channel."""
        h, s, l, _ = self._value
        return self.__class__(h, s, l, alpha)

    # ------------------ DESTRUCTORS ------------------
    def to_hsla(self) -> Tuple[Hue, UnitInterval, UnitInterval, UnitInterval]:
        return self._value

    def to_unit_rgba(self) -> Tuple[UnitInterval, UnitInterval, UnitInterval, UnitInterval]:
        """Red, green, blue and alpha, all in [0, 1] and unrounded."""
        return hsla_to_unit_rgba(*self._value)

    def to_rgba(self) -> RGBAValue:
        """Red, green and blue as integers in [0, 255], alpha in [0, 1]."""
        return hsla_to_rgba(*self._value)

    def to_hsva(self) -> Tuple[Hue, UnitInterval, UnitInterval, UnitInterval]:
        return hsla_to_hsva(*self._value)

    def to_xyz(self) -> FloatTriple:
        """CIE 1931 XYZ coordinates (D65)."""
        r, g, b, _ = self.to_unit_rgba()
        return unit_rgb_to_xyz(r, g, b)

    def to_lab(self) -> FloatTriple:
        return xyz_to_lab(*self.to_xyz())

    def to_lch(self) -> Tuple[float, float, Hue]:
        return lab_to_lch(*self.to_lab())

    def to_hex(self) -> str:
        r, g, b, _ = self.to_rgba()
        return format_hex(r, g, b)

    def to_int(self) -> int:
        r, g, b, _ = self.to_rgba()
        return pack_int(r, g, b)

    def convert(
        self,
        model: Union[ColorModel, str],
        format_type: Union[FormatType, str] = FormatType.FLOAT,
    ) -> Tuple[Union[int, float], ...]:
        """
        Project this color onto a model as a component tuple.

        Args:
            model: Target model ("rgb", "rgba", "hsl", "hsv", "xyz", "lab", ...)
            format_type: Scaling of RGB/HSL/HSV channels (INT, FLOAT, PERCENTAGE)

        Returns:
            Component tuple
        """
        return from_hsla(self._value, model, format_type)

    def css_rgba(self) -> str:
        """CSS ``rgb(r, g, b)``, or ``rgba(r, g, b, a)`` when alpha is not 1."""
        r, g, b, a = self.to_rgba()
        if a == 1.0:
            return f"rgb({r}, {g}, {b})"
        return f"rgba({r}, {g}, {b}, {format_number(a)})"

    def css_hsla(self) -> str:
        """CSS ``hsl(h, s%, l%)``, or ``hsla(...)`` when alpha is not 1."""
        h, s, l, a = self._value
        saturation = f"{format_number(s * 100.0)}%"
        lightness = f"{format_number(l * 100.0)}%"
        if a == 1.0:
            return f"hsl({format_number(h)}, {saturation}, {lightness})"
        return f"hsla({format_number(h)}, {saturation}, {lightness}, {format_number(a)})"

    # ------------------ PROTOCOLS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_rgba() == other.to_rgba()

    def __hash__(self) -> int:
        return hash(self.to_rgba())

    def __repr__(self) -> str:
        h, s, l, a = self._value
        return f"{self.__class__.__name__}(h={float(h)!r}, s={float(s)!r}, l={float(l)!r}, a={float(a)!r})"


BLACK = Color.hsl(0.0, 0.0, 0.0)
WHITE = Color.hsl(0.0, 0.0, 1.0)


def graytone(l: float) -> Color:
    """A gray tone from a lightness value (0.0 is black, 1.0 is white)."""
    return Color.hsl(0.0, 0.0, l)


__all__ = ["Color", "BLACK", "WHITE", "graytone"]
