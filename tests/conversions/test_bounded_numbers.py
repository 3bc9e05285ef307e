import math

import pytest

from chromatone.conversions import Channel, Hue, UnitInterval, clip_hue
from chromatone.utils import format_number, lerp, lerp_angle, mod_pos, round_half_up


def test_clip_hue():
    assert clip_hue(0) == 0
    assert clip_hue(360) == 360
    assert clip_hue(361) == 1
    assert clip_hue(720) == 0
    assert clip_hue(-10) == 350
    assert clip_hue(-360) == 0
    assert isinstance(clip_hue(42), Hue)


def test_hue_range():
    for value in (-725.5, -1.0, 0.0, 59.9, 359.99, 360.5, 1000.0):
        hue = Hue(value)
        assert 0.0 <= hue < 360.0


def test_unit_interval_clamps():
    assert UnitInterval(-0.5) == 0.0
    assert UnitInterval(1.5) == 1.0
    assert UnitInterval(0.3) == 0.3
    assert isinstance(UnitInterval(2), float)


def test_channel_rounds_then_clamps():
    assert Channel(254.5) == 255
    assert Channel(254.49) == 254
    assert Channel(300) == 255
    assert Channel(-3) == 0
    assert Channel(0.5) == 1
    assert Channel(0.49) == 0
    assert Channel.from_unit(0.5) == 128
    assert Channel.from_unit(1.0) == 255
    assert abs(Channel(51).to_unit() - 0.2) < 1e-12


def test_channel_accepts_infinities():
    assert Channel(float("inf")) == 255
    assert Channel(float("-inf")) == 0
    assert Channel(1e300) == 255
    assert Channel(-1e300) == 0
    assert Channel(255.4) == 255
    assert Channel(-0.6) == 0


def test_nan_passes_through():
    assert math.isnan(UnitInterval(float("nan")))
    assert math.isnan(Hue(float("nan")))
    with pytest.raises(ValueError):
        Channel(float("nan"))


def test_mod_pos():
    assert mod_pos(-10, 360) == 350
    assert mod_pos(370, 360) == 10
    assert mod_pos(0, 360) == 0


def test_lerp():
    assert lerp(0.0, 2.0, 4.0) == 2.0
    assert lerp(1.0, 2.0, 4.0) == 4.0
    assert lerp(0.5, 2.0, 4.0) == 3.0
    # no clamping
    assert lerp(2.0, 2.0, 4.0) == 6.0
    assert lerp(-1.0, 2.0, 4.0) == 0.0


def test_lerp_angle_takes_shortest_arc():
    assert lerp_angle(0.5, 0.0, 240.0) == 300.0
    assert lerp_angle(0.5, 350.0, 10.0) == 360.0
    assert lerp_angle(0.5, 10.0, 350.0) == 360.0
    assert lerp_angle(0.5, 10.0, 50.0) == 30.0


def test_lerp_angle_tie_keeps_direct_path():
    assert lerp_angle(0.5, 0.0, 180.0) == 90.0
    assert lerp_angle(0.5, 240.0, 60.0) == 150.0


def test_round_half_up():
    assert round_half_up(0.5) == 1.0
    assert round_half_up(2.5) == 3.0
    assert round_half_up(-0.5) == 0.0
    assert round_half_up(66.666666, 2) == 66.67


def test_format_number():
    assert format_number(100.0) == "100"
    assert format_number(0.0) == "0"
    assert format_number(0.5) == "0.5"
    assert format_number(200 / 3) == "66.67"
    assert format_number(12.5) == "12.5"
    assert format_number(-0.001) == "0"
