import math

import numpy as np
import pytest

from lollipop_mapper.config import DiagramOptions
from lollipop_mapper.scale import (
    calc_bounds,
    compute_domain_max,
    compute_tick_interval,
    compute_tick_values,
    x_axis_scale,
    x_tick_label,
    y_axis_scale,
    y_tick_label,
)


def test_domain_max_is_clamped():
    assert compute_domain_max(766, 0, math.inf) == 766
    assert compute_domain_max(2, 5, math.inf) == 5
    assert compute_domain_max(-1, 5, math.inf) == 5
    assert compute_domain_max(40, 5, 30) == 30


def test_tick_interval_picks_first_fitting_candidate():
    assert compute_tick_interval([100, 200, 400, 500, 1000], 766, 8) == 200


def test_tick_interval_falls_back_to_coarsest():
    assert compute_tick_interval([1, 2], 1000, 5) == 2


def test_tick_interval_tolerates_zero_domain():
    assert compute_tick_interval([100, 200], 0, 8) == 100
    assert compute_tick_interval([100, 200], 0, 1) == 100


@pytest.mark.parametrize("intervals, ticks", [([], 8), ([100], 0), ([100], -3)])
def test_tick_interval_rejects_bad_configuration(intervals, ticks):
    with pytest.raises(ValueError):
        compute_tick_interval(intervals, 766, ticks)


def test_tick_values_always_end_with_max():
    assert compute_tick_values(10, 5) == [0, 5, 10]
    assert compute_tick_values(12, 5) == [0, 5, 10, 12]
    assert compute_tick_values(0, 5) == [0]
    assert compute_tick_values(766, 200, half_step=True) == [
        0, 100, 200, 300, 400, 500, 600, 700, 766,
    ]


def test_tick_values_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        compute_tick_values(10, 0)


def test_x_tick_labels():
    labels = [x_tick_label(v, 766, 200) for v in compute_tick_values(766, 200, True)]
    assert labels == ["0", "", "200", "", "400", "", "600", "", "766 aa"]
    # a major tick too close to the max is hidden
    assert x_tick_label(400, 420, 200) == ""
    assert x_tick_label(400, 500, 200) == "400"


def test_y_tick_labels():
    assert y_tick_label(0, 10, 3) == "0"
    assert y_tick_label(5, 10, 3) == ""
    assert y_tick_label(10, 10, 10) == "10"
    assert y_tick_label(10, 10, 25) == ">10"


def test_x_axis_scale_defaults():
    axis = x_axis_scale(766, DiagramOptions())
    assert axis.domain_max == 766
    assert axis.tick_interval == 200
    assert axis.tick_labels[-1] == "766 aa"
    assert axis.pixel_range == (45, 710)


def test_y_axis_scale_without_pileups_uses_minimum():
    axis = y_axis_scale(-1, DiagramOptions())
    assert axis.domain_max == 5
    assert axis.tick_interval == 1
    assert axis.tick_values == (0, 1, 2, 3, 4, 5)
    assert axis.tick_labels == ("0", "", "", "", "", "5")


def test_y_axis_scale_marks_clipped_max():
    axis = y_axis_scale(25, DiagramOptions(max_length_y=10))
    assert axis.domain_max == 10
    assert axis.tick_labels[-1] == ">10"


def test_y_axis_ticks_step_by_interval():
    axis = y_axis_scale(40, DiagramOptions())
    # 40 / 5 = 8 < 9
    assert axis.tick_interval == 5
    assert axis.tick_values == (0, 5, 10, 15, 20, 25, 30, 35, 40)


def test_calc_bounds_and_pixel_mapping():
    options = DiagramOptions()
    bounds = calc_bounds(options)
    assert (bounds.x, bounds.y, bounds.width, bounds.height) == (45, 120, 665, 90)

    y = y_axis_scale(10, options)
    assert y.to_pixel(0) == 120
    assert y.to_pixel(10) == 30
    np.testing.assert_allclose(y.to_pixel([0, 5, 10]), [120, 75, 30])
