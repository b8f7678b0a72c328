import pytest

from camera_animation.cinematic.animation_state import SceneBounds
from camera_animation.cinematic.vector_math import expand_bounds, lerp, offset


@pytest.mark.parametrize("a,b", [
    ([0, 0, 0], [10, 0, 0]),
    ([-3.5, 2.0, 7.25], [4.0, -1.0, 0.0]),
])
def test_lerp_endpoints_return_inputs(a, b):
    assert lerp(a, b, 0) == pytest.approx(a)
    assert lerp(a, b, 1) == pytest.approx(b)


def test_lerp_midpoint_and_extrapolation():
    assert lerp([0, 0, 0], [10, 4, -2], 0.5) == pytest.approx([5, 2, -1])
    assert lerp([0, 0, 0], [10, 0, 0], 1.5) == pytest.approx([15, 0, 0])


def test_expand_bounds_adds_full_scale_on_both_sides():
    bounds = SceneBounds(min=[0, 0, 0], max=[1, 1, 1])

    grown = expand_bounds(bounds, [5, 0, 0], [2, 1, 1])

    assert grown.min == [0, -1, -1]
    assert grown.max == [7, 1, 1]
    # original is untouched
    assert bounds.max == [1, 1, 1]


def test_offset_weights_each_axis():
    assert offset([1, 2, 3], 2.0, (1.0, 0.5, -1.0)) == pytest.approx([3, 3, 1])
