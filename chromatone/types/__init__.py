"""Shared enums, aliases and constants."""
from .color_types import BlendMode, ColorModel, ColorSpace
from .format_type import FormatType

__all__ = ["BlendMode", "ColorModel", "ColorSpace", "FormatType"]
