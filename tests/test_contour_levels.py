import re

import numpy as np
import pytest

from flowgrid.contour_levels import (
    BLACK,
    BLUE,
    GREEN,
    LABEL_COLOR,
    NEGATIVE_COLOR,
    POSITIVE_COLOR,
    RED,
    ZERO_COLOR,
    FieldExtrema,
    contour_color,
    find_extrema,
    min_max_label,
    negative_levels,
    palette,
    positive_levels,
    time_label,
)


def _is_multiple(value, cint):
    q = value / cint
    return abs(q - round(q)) < 1e-9


def test_find_extrema_positions():
    s = np.zeros((5, 6), dtype=np.float32)
    s[2, 3] = 7.5
    s[4, 1] = -2.25
    e = find_extrema(s)
    assert (e.smax, e.imax, e.jmax) == (7.5, 2, 3)
    assert (e.smin, e.imin, e.jmin) == (-2.25, 4, 1)


def test_find_extrema_ties_follow_second_index_order():
    s = np.zeros((4, 4))
    s[3, 0] = 9.0
    s[0, 1] = 9.0
    e = find_extrema(s)
    assert (e.imax, e.jmax) == (3, 0)


def test_find_extrema_constant_field_points_at_origin():
    e = find_extrema(np.full((3, 3), 4.0))
    assert e.constant
    assert (e.imin, e.jmin, e.imax, e.jmax) == (0, 0, 0, 0)


@pytest.mark.parametrize("bad", [np.zeros(5), np.zeros((0, 3))])
def test_find_extrema_rejects_bad_shapes(bad):
    with pytest.raises(ValueError):
        find_extrema(bad)


def test_constant_label_round_trips_value():
    label = min_max_label(FieldExtrema(5.0, 0, 0, 5.0, 0, 0))
    assert label.startswith("CONSTANT FIELD = ")
    assert float(label.split("=")[1]) == 5.0


def test_constant_label_for_large_value():
    label = min_max_label(FieldExtrema(1234.5, 0, 0, 1234.5, 0, 0))
    assert label.split("= ")[1] == "1234.500"


def test_range_label_carries_values_and_positions():
    e = FieldExtrema(-1.5, 2, 3, 10.25, 40, 60)
    label = min_max_label(e)
    m = re.fullmatch(
        r"MIN =\s*(\S+) \(\s*(\d+),\s*(\d+)\), MAX =\s*(\S+) \(\s*(\d+),\s*(\d+)\)",
        label,
    )
    assert m is not None
    assert float(m.group(1)) == e.smin
    assert (int(m.group(2)), int(m.group(3))) == (e.imin, e.jmin)
    assert float(m.group(4)) == e.smax
    assert (int(m.group(5)), int(m.group(6))) == (e.imax, e.jmax)


def test_label_size_shrinks_for_wide_values():
    assert FieldExtrema(-1.0, 0, 0, 1.0, 1, 1).label_size == 0.014
    assert FieldExtrema(-1.0, 0, 0, 5000.0, 1, 1).label_size == 0.013
    assert FieldExtrema(5000.0, 0, 0, 5000.0, 0, 0).label_size == 0.014


def test_time_label_round_trips():
    label = time_label(1.5)
    assert label.startswith("TIME=")
    assert float(label[len("TIME="):]) == 1.5
    assert len(label) == len("TIME=") + 8


def test_positive_levels_invariants():
    cint = 0.5
    levels = positive_levels(-1.2, 3.7, cint, True)
    assert levels
    assert levels[0] == 0.0
    assert all(_is_multiple(v, cint) for v in levels)
    assert all(b - a == pytest.approx(cint) for a, b in zip(levels, levels[1:]))
    assert levels[-1] <= 3.7 < levels[-1] + cint


def test_positive_levels_without_zero():
    levels = positive_levels(-1.0, 3.0, 1.0, False)
    assert 0.0 not in levels
    assert min(levels) == 1.0


def test_positive_levels_skipped_when_below_interval():
    assert positive_levels(-5.0, 0.5, 1.0, False) == ()
    assert positive_levels(-5.0, -0.5, 1.0, True) == ()


def test_positive_levels_for_zero_field():
    assert positive_levels(0.0, 0.0, 0.5, True) == (0.0,)
    assert positive_levels(0.0, 0.0, 0.5, False) == (0.5,)


def test_negative_levels_invariants():
    cint = 0.5
    levels = negative_levels(-2.3, 4.0, cint)
    assert levels
    assert all(v < 0 for v in levels)
    assert levels[-1] == -cint
    assert -2.3 <= levels[0] < -2.3 + cint
    assert all(_is_multiple(v, cint) for v in levels)


def test_negative_levels_empty_without_negatives():
    assert negative_levels(0.0, 3.0, 1.0) == ()


def test_negative_levels_all_negative_field():
    levels = negative_levels(-4.5, -2.5, 1.0)
    assert levels[0] == -4.0
    assert levels[-1] == -2.0


@pytest.mark.parametrize("cint", [0.0, -1.0])
def test_levels_reject_bad_interval(cint):
    with pytest.raises(ValueError):
        positive_levels(0.0, 1.0, cint)
    with pytest.raises(ValueError):
        negative_levels(-1.0, 1.0, cint)


def test_contour_color_by_sign():
    assert contour_color(2.0) == POSITIVE_COLOR
    assert contour_color(0.0) == ZERO_COLOR
    assert contour_color(-0.1) == NEGATIVE_COLOR


def test_palette_default_and_reversed():
    default = palette(0)
    assert default[POSITIVE_COLOR] == RED
    assert default[NEGATIVE_COLOR] == BLUE
    assert default[ZERO_COLOR] == GREEN
    reversed_ = palette(3)
    assert reversed_[POSITIVE_COLOR] == default[NEGATIVE_COLOR]
    assert reversed_[NEGATIVE_COLOR] == default[POSITIVE_COLOR]


def test_palette_black_and_label_colour():
    assert set(palette(-1).values()) == {BLACK}
    for colors in (-1, 0, 1):
        assert palette(colors)[LABEL_COLOR] == BLACK