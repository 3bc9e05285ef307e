"""Ready-made color tables."""
from .x11 import X11_COLORS, named_color

__all__ = ["X11_COLORS", "named_color"]
