"""
Model-to-model conversion of plain component tuples.

Everything goes through the canonical HSLA form:

    input tuple --normalize--> unit components --to HSLA--> HSLA
    HSLA --from HSLA--> unit components --scale--> output tuple

RGB/HSL/HSV channels (and alpha) are scaled by the FormatType maxima
(INT 0-255, FLOAT 0-1, PERCENTAGE 0-100). Hue is always in degrees and
XYZ, Lab and LCh are never rescaled.
"""

from typing import Callable, Dict, Tuple, Union

from .to_hsl import HSLATuple, hsla_value, hsva_to_hsla, rgba_to_hsla
from .to_hsv import hsla_to_hsva
from .to_lab import lab_to_lch, lch_to_lab, xyz_to_lab
from .to_rgb import hsla_to_unit_rgba, xyz_to_unit_rgb
from .to_xyz import lab_to_xyz, unit_rgb_to_xyz
from ..types.color_types import ALPHA_MODELS, HUE_MODELS, ColorModel, ScalarVector
from ..types.format_type import FormatType, format_classes, max_non_hue
from ..utils.num_utils import round_half_up

RGB_MODELS = {ColorModel.RGB, ColorModel.RGBA}
SCALED_MODELS = RGB_MODELS | HUE_MODELS

num_channels: Dict[ColorModel, int] = {
    model: 4 if model in ALPHA_MODELS else 3 for model in ColorModel
}


def _from_xyz(x: float, y: float, z: float, a: float = 1.0) -> HSLATuple:
    r, g, b = xyz_to_unit_rgb(x, y, z)
    return rgba_to_hsla(r * 255.0, g * 255.0, b * 255.0, a)


def _from_lab(l: float, a: float, b: float) -> HSLATuple:
    return _from_xyz(*lab_to_xyz(l, a, b))


def _to_xyz(h: float, s: float, l: float, a: float) -> Tuple[float, float, float]:
    r, g, b, _ = hsla_to_unit_rgba(h, s, l, a)
    return unit_rgb_to_xyz(r, g, b)


def _to_lab(h: float, s: float, l: float, a: float) -> Tuple[float, float, float]:
    return xyz_to_lab(*_to_xyz(h, s, l, a))


# unit components -> canonical HSLA
TO_HSLA: Dict[ColorModel, Callable[..., HSLATuple]] = {
    ColorModel.RGB: lambda r, g, b: rgba_to_hsla(r * 255.0, g * 255.0, b * 255.0),
    ColorModel.RGBA: lambda r, g, b, a: rgba_to_hsla(r * 255.0, g * 255.0, b * 255.0, a),
    ColorModel.HSL: lambda h, s, l: hsla_value(h, s, l),
    ColorModel.HSLA: hsla_value,
    ColorModel.HSV: lambda h, s, v: hsva_to_hsla(h, s, v),
    ColorModel.HSVA: hsva_to_hsla,
    ColorModel.XYZ: lambda x, y, z: _from_xyz(x, y, z),
    ColorModel.LAB: _from_lab,
    ColorModel.LCH: lambda l, c, h: _from_lab(*lch_to_lab(l, c, h)),
}

# canonical HSLA -> unit components
FROM_HSLA: Dict[ColorModel, Callable[[float, float, float, float], Tuple[float, ...]]] = {
    ColorModel.RGB: lambda h, s, l, a: tuple(hsla_to_unit_rgba(h, s, l, a)[:3]),
    ColorModel.RGBA: hsla_to_unit_rgba,
    ColorModel.HSL: lambda h, s, l, a: hsla_value(h, s, l, a)[:3],
    ColorModel.HSLA: hsla_value,
    ColorModel.HSV: lambda h, s, l, a: hsla_to_hsva(h, s, l, a)[:3],
    ColorModel.HSVA: hsla_to_hsva,
    ColorModel.XYZ: _to_xyz,
    ColorModel.LAB: _to_lab,
    ColorModel.LCH: lambda h, s, l, a: lab_to_lch(*_to_lab(h, s, l, a)),
}




def normalize(values: ScalarVector, model: ColorModel, fmt: FormatType) -> Tuple[float, ...]:
    """Bring RGB/HSL/HSV channels into [0, 1]; hue and CIE models are untouched."""
    if model not in SCALED_MODELS:
        return tuple(float(v) for v in values)

    maxval = max_non_hue[fmt]
    if model in RGB_MODELS:
        return tuple(v / maxval for v in values)

    h, *rest = values
    return (float(h),) + tuple(v / maxval for v in rest)


def scale(values: Tuple[float, ...], model: ColorModel, fmt: FormatType) -> Tuple[Union[int, float], ...]:
    """Inverse of ``normalize``; INT output is rounded half-up."""
    if model not in SCALED_MODELS:
        return tuple(float(v) for v in values)

    maxval = max_non_hue[fmt]
    if model in RGB_MODELS:
        scaled = tuple(v * maxval for v in values)
    else:
        h, *rest = values
        scaled = (float(h),) + tuple(v * maxval for v in rest)

    if fmt == FormatType.INT:
        scaled = tuple(round_half_up(v) for v in scaled)
    return tuple(format_classes[fmt](v) for v in scaled)


def to_hsla(
    values: ScalarVector,
    from_model: Union[ColorModel, str],
    input_type: Union[FormatType, str] = FormatType.FLOAT,
) -> HSLATuple:
    """Convert a component tuple of any model into canonical HSLA."""
    model = ColorModel(from_model)
    if len(values) != num_channels[model]:
        raise ValueError(
            f"{model.value} expects {num_channels[model]} components, got {len(values)}"
        )
    unit = normalize(values, model, FormatType(input_type))
    return TO_HSLA[model](*unit)


def from_hsla(
    hsla: ScalarVector,
    to_model: Union[ColorModel, str],
    output_type: Union[FormatType, str] = FormatType.FLOAT,
) -> Tuple[Union[int, float], ...]:
    """Project canonical HSLA components onto another model."""
    model = ColorModel(to_model)
    h, s, l, a = hsla
    unit = FROM_HSLA[model](h, s, l, a)
    return scale(tuple(unit), model, FormatType(output_type))


def convert(
    color: ScalarVector,
    from_model: Union[ColorModel, str],
    to_model: Union[ColorModel, str],
    input_type: Union[FormatType, str] = FormatType.FLOAT,
    output_type: Union[FormatType, str] = FormatType.FLOAT,
) -> Tuple[Union[int, float], ...]:
    """
    Convert a color tuple between models and formats.

    Args:
        color: Component tuple in ``from_model``
        from_model: Source model ("rgb", "hsla", "lab", ...)
        to_model: Target model
        input_type: Scaling of the input RGB/HSL/HSV channels
        output_type: Scaling of the output RGB/HSL/HSV channels

    Returns:
        Component tuple in ``to_model``

    Raises:
        ValueError: unknown model or format, or wrong number of components
    """
    return from_hsla(to_hsla(color, from_model, input_type), to_model, output_type)


__all__ = ["TO_HSLA", "FROM_HSLA", "normalize", "scale", "to_hsla", "from_hsla", "convert"]
