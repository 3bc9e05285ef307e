"""Hex strings (``#rgb`` / ``#rrggbb``) and packed ``0xRRGGBB`` integers."""
import re
from typing import Optional

from boundednumbers import clamp

from ..types.color_types import IntTriple
from .numbers import Channel

_HEX_PATTERN = re.compile(r"#(?:([0-9a-fA-F]{3})|([0-9a-fA-F]{6}))")

MAX_PACKED = 0xFFFFFF


def parse_hex(text: str) -> Optional[IntTriple]:
    """
    Parse ``#rgb`` or ``#rrggbb`` (case-insensitive, ``#`` required).

    The short form duplicates each digit (``#abc`` -> ``#aabbcc``).

    Returns:
        (r, g, b) channels, or None if the string has any other shape
    """
    match = _HEX_PATTERN.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        return None

    short, full = match.groups()
    if short is not None:
        full = "".join(digit * 2 for digit in short)

    return int(full[0:2], 16), int(full[2:4], 16), int(full[4:6], 16)


def format_hex(r: int, g: int, b: int) -> str:
    """Render 8-bit channels as ``#rrggbb`` (lowercase)."""
    return "#" + "".join(f"{Channel(c):02x}" for c in (r, g, b))


def unpack_int(n: int) -> IntTriple:
    """Split a packed ``0xRRGGBB`` integer, clamping it to ``[0, 0xFFFFFF]`` first."""
    n = int(clamp(int(n), 0, MAX_PACKED))
    return (n >> 16) & 0xFF, (n >> 8) & 0xFF, n & 0xFF


def pack_int(r: int, g: int, b: int) -> int:
    return (Channel(r) << 16) | (Channel(g) << 8) | Channel(b)


__all__ = ["parse_hex", "format_hex", "unpack_int", "pack_int", "MAX_PACKED"]
