from chromatone.conversions import hsla_to_rgba, hsla_to_unit_rgba, hue_from_rgb, rgba_to_hsla
from color_samples import samples_rgb_hsl


def test_rgba_to_hsla():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h, s, l, a = rgba_to_hsla(r, g, b)

        assert abs(h - h_exp) < 0.5
        assert abs(s - s_exp) < 1 / 255
        assert abs(l - l_exp) < 1 / 255
        assert a == 1.0


def test_hsla_to_rgba():
    for rgb, hsl in samples_rgb_hsl.items():
        r, g, b, a = hsla_to_rgba(*hsl, 0.25)
        assert (r, g, b) == rgb
        assert a == 0.25


def test_rgb_hsl_round_trip_is_exact():
    values = list(range(0, 256, 15)) + [128, 254, 255]
    for r in values:
        for g in values:
            for b in values:
                assert hsla_to_rgba(*rgba_to_hsla(r, g, b, 0.5)) == (r, g, b, 0.5)


def test_rgba_to_hsla_clamps_channels():
    assert rgba_to_hsla(300, -20, 0) == rgba_to_hsla(255, 0, 0)


def test_gray_hue_is_zero():
    for v in (0, 1, 127, 255):
        assert hue_from_rgb(v, v, v) == 0.0


def test_hsla_to_unit_rgba_sectors():
    expected = {
        0.0: (1.0, 0.0, 0.0),
        60.0: (1.0, 1.0, 0.0),
        120.0: (0.0, 1.0, 0.0),
        180.0: (0.0, 1.0, 1.0),
        240.0: (0.0, 0.0, 1.0),
        300.0: (1.0, 0.0, 1.0),
        360.0: (1.0, 0.0, 0.0),
    }
    for hue, rgb in expected.items():
        r, g, b, a = hsla_to_unit_rgba(hue, 1.0, 0.5)
        assert all(abs(x - y) < 1e-9 for x, y in zip((r, g, b), rgb))
        assert a == 1.0
