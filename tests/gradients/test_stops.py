import pytest

from chromatone.colors import BLACK, WHITE, graytone
from chromatone.gradients import (
    ColorStop,
    ColorStops,
    add_stop,
    color_stop,
    color_stops,
    combine_color_stops,
    combine_stops,
    modify,
    reverse_stops,
    stop_color,
    stop_ratio,
    uniform_stops,
)


def test_color_stop():
    stop = color_stop(WHITE, 0)
    assert stop_color(stop) == WHITE
    assert stop_ratio(stop) == 0
    assert color_stop(WHITE, 1.5).ratio == 1.0
    assert color_stop(WHITE, -0.5).ratio == 0.0
    assert isinstance(stop, ColorStop)


def test_color_stops_are_sorted(red, blue, yellow):
    stops = color_stops(BLACK, [(red, 0.7), (blue, 0.2), (yellow, 0.7)], WHITE)
    assert [s.ratio for s in stops.stops] == [0.2, 0.7, 0.7]
    # equal ratios keep their order
    assert stops.stops[1].color == red
    assert stops.stops[2].color == yellow
    assert isinstance(stops, ColorStops)


def test_add_stop(red, blue, yellow):
    stops = color_stops(BLACK, [color_stop(red, 0.2), color_stop(blue, 0.6)], WHITE)

    added = add_stop(stops, yellow, 0.4)
    assert [s.color for s in added.stops] == [red, yellow, blue]

    first = add_stop(stops, yellow, 0.0)
    assert first.stops[0] == (yellow, 0.0)

    last = add_stop(stops, yellow, 1.0)
    assert last.stops[-1] == (yellow, 1.0)

    # original is unchanged
    assert len(stops.stops) == 2


def test_add_stop_goes_after_equal_ratios(red, blue, yellow):
    stops = color_stops(BLACK, [color_stop(red, 0.5)], WHITE)
    added = add_stop(add_stop(stops, blue, 0.5), yellow, 0.5)
    assert [s.color for s in added.stops] == [red, blue, yellow]


def test_add_stop_to_empty(red):
    stops = add_stop(color_stops(BLACK, [], WHITE), red, 0.3)
    assert stops.stops == (color_stop(red, 0.3),)


def test_reverse_stops(red, blue):
    stops = color_stops(BLACK, [color_stop(red, 0.25), color_stop(blue, 0.5)], WHITE)
    reversed_ = reverse_stops(stops)

    assert reversed_.start == WHITE
    assert reversed_.end == BLACK
    assert [s.color for s in reversed_.stops] == [blue, red]
    assert [s.ratio for s in reversed_.stops] == [0.5, 0.75]


def test_reverse_is_an_involution(red, blue, yellow):
    stops = color_stops(red, [color_stop(blue, 0.1), color_stop(yellow, 0.3), color_stop(red, 0.9)], BLACK)
    twice = reverse_stops(reverse_stops(stops))

    assert twice.start == stops.start
    assert twice.end == stops.end
    for a, b in zip(twice.stops, stops.stops):
        assert a.color == b.color
        assert a.ratio == pytest.approx(b.ratio)


def test_uniform_stops(red, blue, yellow):
    stops = uniform_stops(BLACK, [red, blue, yellow], WHITE)
    assert [s.ratio for s in stops.stops] == [0.25, 0.5, 0.75]
    assert [s.color for s in stops.stops] == [red, blue, yellow]
    assert uniform_stops(BLACK, [], WHITE).stops == ()


def test_combine_stops(red, blue, yellow):
    a = color_stops(red, [color_stop(blue, 0.5)], yellow)
    b = color_stops(BLACK, [color_stop(graytone(0.5), 0.5)], WHITE)
    combined = combine_stops(0.01, 0.4, a, b)

    assert combined.start == red
    assert combined.end == WHITE
    ratios = [s.ratio for s in combined.stops]
    assert ratios == pytest.approx([0.2, 0.39, 0.4, 0.7])
    assert [s.color for s in combined.stops] == [blue, yellow, BLACK, graytone(0.5)]


def test_combine_color_stops_default_epsilon(red, blue):
    a = color_stops(red, [], blue)
    b = color_stops(BLACK, [], WHITE)
    combined = combine_color_stops(0.5, a, b)
    assert [s.ratio for s in combined.stops] == pytest.approx([0.5 - 1e-6, 0.5])


def test_combine_rejects_bad_transition_point(red, blue):
    a = color_stops(red, [], blue)
    for x in (0.0, 1.0, -0.1, 1.5):
        with pytest.raises(ValueError):
            combine_color_stops(x, a, a)


def test_combine_warns_on_wide_epsilon(red, blue):
    a = color_stops(red, [], blue)
    with pytest.warns(UserWarning):
        combine_stops(0.5, 0.2, a, a)


def test_modify(red, blue):
    stops = color_stops(BLACK, [color_stop(red, 0.25)], WHITE)
    positions = []

    def record(position, color):
        positions.append(position)
        return blue

    modified = modify(record, stops)
    assert positions == [0.0, 0.25, 1.0]
    assert modified.start == blue
    assert modified.end == blue
    assert modified.stops == (color_stop(blue, 0.25),)
