"""
Chromatone Color Model Conversions
==================================

Pure functions converting between RGB, HSL, HSV, CIE XYZ, CIE Lab and
CIE LCh. HSLA is the canonical form every other model converts through.

Bounded types
-------------
    Hue, UnitInterval, Channel, clip_hue

RGB <-> HSL:
    rgba_to_hsla(r, g, b, a)        8-bit channels -> HSLA
    hsla_to_unit_rgba(h, s, l, a)   HSLA -> channels in [0, 1]
    hsla_to_rgba(h, s, l, a)        HSLA -> 8-bit channels

HSV <-> HSL:
    hsva_to_hsla(h, s, v, a)
    hsla_to_hsva(h, s, l, a)

XYZ / Lab / LCh:
    unit_rgb_to_xyz, xyz_to_unit_rgb, lab_to_xyz, xyz_to_lab,
    lab_to_lch, lch_to_lab

Hex and packed integers:
    parse_hex, format_hex, unpack_int, pack_int

High-Level API
--------------
    convert(color, from_model, to_model, input_type, output_type)

Examples
--------
>>> from chromatone.conversions import convert, FormatType
>>> convert((255, 0, 0), "rgb", "hsl", FormatType.INT, FormatType.FLOAT)
(0.0, 1.0, 0.5)
>>> convert((53.233, 80.109, 67.22), "lab", "rgb", output_type="int")
(255, 0, 0)
"""

from .numbers import Hue, UnitInterval, Channel, clip_hue

from .to_hsl import hsla_value, hue_from_rgb, rgba_to_hsla, hsva_to_hsla
from .to_hsv import hsva_value, hsla_to_hsva
from .to_rgb import hsla_to_unit_rgba, hsla_to_rgba, compand, xyz_to_unit_rgb
from .to_xyz import xyz_value, decompand, unit_rgb_to_xyz, lab_to_xyz
from .to_lab import xyz_to_lab, lab_to_lch, lch_to_lab
from .hex import parse_hex, format_hex, unpack_int, pack_int

from .wrapper import convert, to_hsla, from_hsla

from ..types.color_types import ColorModel
from ..types.format_type import FormatType

__all__ = [
    # Bounded types
    'Hue',
    'UnitInterval',
    'Channel',
    'clip_hue',

    # RGB <-> HSL
    'hsla_value',
    'hue_from_rgb',
    'rgba_to_hsla',
    'hsla_to_unit_rgba',
    'hsla_to_rgba',

    # HSV <-> HSL
    'hsva_value',
    'hsva_to_hsla',
    'hsla_to_hsva',

    # XYZ / Lab / LCh
    'compand',
    'decompand',
    'xyz_value',
    'unit_rgb_to_xyz',
    'xyz_to_unit_rgb',
    'lab_to_xyz',
    'xyz_to_lab',
    'lab_to_lch',
    'lch_to_lab',

    # Hex
    'parse_hex',
    'format_hex',
    'unpack_int',
    'pack_int',

    # High-level API
    'convert',
    'to_hsla',
    'from_hsla',

    # Types
    'ColorModel',
    'FormatType',
]
