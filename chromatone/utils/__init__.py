from .num_utils import (
    DEG2RAD,
    RAD2DEG,
    between,
    clamp,
    format_number,
    lerp,
    lerp_angle,
    mod_pos,
    round_half_up,
)

__all__ = [
    "DEG2RAD",
    "RAD2DEG",
    "between",
    "clamp",
    "format_number",
    "lerp",
    "lerp_angle",
    "mod_pos",
    "round_half_up",
]
