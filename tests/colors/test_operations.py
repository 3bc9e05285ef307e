import pytest

from chromatone.colors import (
    BLACK,
    WHITE,
    Color,
    brightness,
    compare_brightness,
    compare_luminance,
    complementary,
    contrast,
    darken,
    desaturate,
    distance,
    graytone,
    is_light,
    is_readable,
    lighten,
    luminance,
    rotate_hue,
    saturate,
    text_color,
    to_gray,
)

LIME = Color.rgb(0, 255, 0)
MAGENTA = Color.rgb(255, 0, 255)
CYAN = Color.rgb(0, 255, 255)


def test_complementary(red, blue, yellow):
    assert complementary(LIME) == MAGENTA
    assert complementary(red) == CYAN
    assert complementary(blue) == yellow


def test_rotate_hue(red, blue):
    assert rotate_hue(red, -120) == blue
    assert rotate_hue(red, 360) == red
    assert rotate_hue(red, 720).hue == 0.0


def test_lighten_and_darken(red):
    assert lighten(red, 0.5) == WHITE
    assert darken(red, 0.5) == BLACK
    assert lighten(BLACK, 2.0) == WHITE
    assert darken(red, -0.5) == WHITE
    assert lighten(red, 0.1).lightness == pytest.approx(0.6)


def test_saturate_and_desaturate(red):
    assert desaturate(red, 1.0) == graytone(0.5)
    assert saturate(Color.hsl(0, 0.5, 0.5), 1.0) == red
    assert desaturate(red, 0.25).saturation == pytest.approx(0.75)
    assert saturate(red, -1.0) == desaturate(red, 1.0)


def test_adjustments_keep_alpha(red):
    c = red.with_alpha(0.3)
    for adjusted in (lighten(c, 0.1), darken(c, 0.1), saturate(c, 0.1), desaturate(c, 0.1), rotate_hue(c, 10)):
        assert adjusted.alpha == 0.3


def test_to_gray(red):
    gray = to_gray(red)
    r, g, b, a = gray.to_rgba()
    assert r == g == b
    assert abs(r - 127) <= 1
    assert gray.saturation == 0.0
    assert a == 1.0
    assert to_gray(red.with_alpha(0.4)).alpha == 0.4
    assert to_gray(WHITE) == WHITE
    assert to_gray(BLACK) == BLACK


def test_brightness(red):
    assert brightness(WHITE) == 1.0
    assert brightness(BLACK) == 0.0
    assert brightness(red) == pytest.approx(0.299)


def test_luminance(red):
    assert luminance(WHITE) == pytest.approx(1.0)
    assert luminance(BLACK) == 0.0
    assert luminance(red) == pytest.approx(0.2126)
    assert luminance(Color.rgb(5, 5, 5)) == pytest.approx(5 / 255 / 12.92)


def test_contrast(red, blue):
    assert contrast(BLACK, WHITE) == 21.0
    assert contrast(WHITE, BLACK) == contrast(BLACK, WHITE)
    assert contrast(red, blue) == contrast(blue, red)
    for c in (BLACK, WHITE, red, blue, Color.rgb(12, 200, 99)):
        assert contrast(c, c) == 1.0
        assert contrast(c, WHITE) >= 1.0


def test_is_readable(red):
    assert is_readable(BLACK, WHITE)
    assert is_readable(WHITE, BLACK)
    assert not is_readable(red, red)
    assert not is_readable(graytone(0.5), graytone(0.55))


def test_is_light_and_text_color(blue, yellow):
    assert is_light(WHITE)
    assert not is_light(BLACK)
    assert text_color(WHITE) == BLACK
    assert text_color(BLACK) == WHITE
    assert text_color(yellow) == BLACK
    assert text_color(blue) == WHITE


def test_distance(red, blue):
    assert distance(red, red) == 0.0
    assert distance(red, blue) == distance(blue, red)
    assert distance(BLACK, WHITE) == pytest.approx(100.0, abs=0.5)


def test_ordering(red):
    assert compare_luminance(BLACK, WHITE) == -1
    assert compare_luminance(WHITE, BLACK) == 1
    assert compare_luminance(red, red) == 0
    assert compare_brightness(BLACK, red) == -1
    assert sorted([WHITE, red, BLACK], key=luminance) == [BLACK, red, WHITE]
    assert sorted([WHITE, red, BLACK], key=brightness) == [BLACK, red, WHITE]


def test_methods(red):
    assert red.complementary() == CYAN
    assert red.lighten(0.5) == WHITE
    assert red.darken(0.5) == BLACK
    assert red.contrast(red) == 1.0
    assert WHITE.text_color() == BLACK
    assert red.distance(red) == 0.0
    assert red.to_gray() == to_gray(red)
