import pytest

from chromatone.colors import BLEND_FUNCTIONS, WHITE, Color, blend, blend_channel, multiply, overlay, screen
from chromatone.types import BlendMode

BACKGROUND = Color.rgb(255, 102, 0)
FOREGROUND = Color.rgb(51, 51, 51)


def test_blend_channel():
    assert blend_channel(BlendMode.MULTIPLY, 0.5, 0.5) == 0.25
    assert blend_channel(BlendMode.SCREEN, 0.5, 0.5) == 0.75
    assert blend_channel(BlendMode.OVERLAY, 0.25, 0.5) == 0.25
    assert blend_channel(BlendMode.OVERLAY, 0.75, 0.5) == 0.75
    assert blend_channel("screen", 0.0, 0.0) == 0.0


def test_multiply():
    assert blend(BlendMode.MULTIPLY, BACKGROUND, FOREGROUND) == Color.rgb(51, 20, 0)
    assert multiply(BACKGROUND, FOREGROUND) == Color.rgb(51, 20, 0)


def test_screen():
    assert blend(BlendMode.SCREEN, BACKGROUND, FOREGROUND) == Color.rgb(255, 133, 51)
    assert screen(BACKGROUND, FOREGROUND) == Color.rgb(255, 133, 51)


def test_overlay():
    assert blend(BlendMode.OVERLAY, BACKGROUND, FOREGROUND) == Color.rgb(255, 41, 0)
    assert overlay(BACKGROUND, FOREGROUND) == Color.rgb(255, 41, 0)


def test_mode_names():
    assert blend("multiply", BACKGROUND, FOREGROUND) == multiply(BACKGROUND, FOREGROUND)
    assert blend("Overlay", BACKGROUND, FOREGROUND) == overlay(BACKGROUND, FOREGROUND)
    assert set(BLEND_FUNCTIONS) == set(BlendMode)


def test_unknown_mode_fails_fast():
    with pytest.raises(ValueError):
        blend("darken", BACKGROUND, FOREGROUND)
    with pytest.raises(ValueError):
        blend_channel("dodge", 0.1, 0.2)


def test_alpha_is_averaged():
    assert blend("multiply", WHITE, WHITE.with_alpha(0.5)).alpha == 0.75
    assert blend("screen", WHITE.with_alpha(0.0), WHITE.with_alpha(0.0)).alpha == 0.0


def test_multiply_with_white_is_identity():
    c = Color.rgb(12, 140, 230)
    assert multiply(c, WHITE) == c
    assert screen(c, Color.rgb(0, 0, 0)) == c


def test_method():
    assert BACKGROUND.blend(FOREGROUND) == Color.rgb(51, 20, 0)
    assert BACKGROUND.blend(FOREGROUND, "screen") == Color.rgb(255, 133, 51)
