"""
Bounded value types.

Each class is an immutable ``float``/``int`` subclass whose constructor is
the only way in, and it always normalizes:

- ``Hue``: degrees folded into [0, 360); 360 itself is kept as-is
- ``UnitInterval``: clamped into [0.0, 1.0]
- ``Channel``: rounded half-up, then clamped into [0, 255]

NaN is not handled specially. It passes the clamping comparisons untouched
for Hue and UnitInterval; ``Channel(nan)`` raises ValueError since an
integer cannot hold it.
"""
import math

from boundednumbers import clamp

from ..types.format_type import HUE_360
from ..utils.num_utils import mod_pos


class Hue(float):
    """A hue angle in degrees, folded into ``[0, 360)`` except for ``360`` itself."""

    __slots__ = ()

    def __new__(cls, value: float):
        value = float(value)
        if value != HUE_360:
            value = mod_pos(value, HUE_360)
        return super().__new__(cls, value)

    def __repr__(self):
        return f"Hue({float(self)})"


class UnitInterval(float):
    """A floating-point number clamped to the inclusive range ``[0, 1]``."""

    __slots__ = ()

    def __new__(cls, value: float):
        value = float(value)
        if value < 0.0 or value > 1.0:
            value = float(clamp(value, 0.0, 1.0))
        return super().__new__(cls, value)

    def __repr__(self):
        return f"UnitInterval({float(self)})"


class Channel(int):
    """An 8-bit color channel: ``round(x)`` clamped to ``[0, 255]``."""

    __slots__ = ()

    def __new__(cls, value: float):
        # pre-clamp so infinities round; NaN falls through to floor
        if value > 256:
            value = 256
        elif value < -1:
            value = -1
        rounded = math.floor(value + 0.5)
        return super().__new__(cls, int(clamp(rounded, 0, 255)))

    @classmethod
    def from_unit(cls, value: float) -> "Channel":
        """Denormalize a 0-1 value to an 8-bit channel (``round(x * 255)``)."""
        return cls(value * 255.0)

    def to_unit(self) -> UnitInterval:
        return UnitInterval(self / 255.0)

    def __repr__(self):
        return f"Channel({int(self)})"


def clip_hue(hue: float) -> Hue:
    """Fold a hue angle into [0, 360), keeping 360 as a fixed point."""
    return Hue(hue)


__all__ = ["Hue", "UnitInterval", "Channel", "clip_hue"]
