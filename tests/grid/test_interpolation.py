import itertools
import math

import numpy as np
import pytest

from multidimgrid import (
    GridFunction,
    LinearCoordinateAxis,
    LinearLogarithmicCoordinateAxis,
    LogarithmicCoordinateAxis,
    RangeError,
    SinglePointCoordinateAxis,
)


def _noisy_function(x):
    return math.sin(sum((i + 1) * xi for i, xi in enumerate(x))) + 0.1 * len(x)


@pytest.mark.parametrize(
    "axes",
    [
        [LinearLogarithmicCoordinateAxis(0.0, 1.0, 1000.0, 10, 3)],
        [LinearCoordinateAxis(1.0, 1000.0, 10), LogarithmicCoordinateAxis(1.0, 1000.0, 10)],
        [
            LogarithmicCoordinateAxis(0.1, 7.0, 5),
            SinglePointCoordinateAxis(3.5),
            LinearCoordinateAxis(-1.0, 1.0, 4),
        ],
    ],
    ids=["1D", "2D", "3D"],
)
def test_exact_at_grid_points(axes):
    """Test that the interpolation reproduces the stored values at every grid point."""
    func = GridFunction(axes, _noisy_function)

    for index in range(func.point_number):
        coords = func.coordinates_at_index(index)
        assert func.interpolate(coords) == func.value_at_index(index)


def test_exact_for_linear_function(linear_axis):
    """Test that a function linear in x0 is interpolated exactly on a lin-lin grid."""
    func = GridFunction([linear_axis, linear_axis], lambda x: x[0])

    for coords in [(30.0, 650.0), (1.0, 999.9), (777.7, 1.0), (1000.0, 1000.0)]:
        assert func.interpolate(coords) == pytest.approx(coords[0], rel=1e-12)


def test_bounded_error_for_logarithmic_function(linear_axis):
    """Test that log(x1) is interpolated with a small but non-vanishing error on a lin-lin grid."""
    func = GridFunction([linear_axis, linear_axis], lambda x: math.log(x[1]))

    error = abs(func(30.0, 650.0) - math.log(650.0))

    assert 0 < error < 1e-2


def test_exact_on_linear_logarithmic_grid(linear_axis, logarithmic_axis):
    """Test that x0 * log(x1) is interpolated exactly on a lin-log grid."""
    func = GridFunction([linear_axis, logarithmic_axis], lambda x: x[0] * math.log(x[1]))

    for x0, x1 in itertools.product([1.0, 30.0, 512.3], [1.0, 42.0, 650.0, 1000.0]):
        assert func(x0, x1) == pytest.approx(x0 * math.log(x1), rel=1e-10, abs=1e-10)


def test_interpolation_along_hybrid_axis(linear_logarithmic_axis):
    """Test the interpolation on both sides of the threshold of a hybrid axis."""
    def function(x):
        return x[0] if x[0] <= 1 else math.log10(x[0]) + 1

    func = GridFunction([linear_logarithmic_axis], function)

    assert func(0.55) == pytest.approx(0.55)
    assert func(50.0) == pytest.approx(math.log10(50.0) + 1)
    assert func(1.0) == 1.0


def test_interpolation_with_single_point_axis():
    """Test that a single-point axis reduces the interpolation to the other axes."""
    axes = [SinglePointCoordinateAxis(2.0), LinearCoordinateAxis(0.0, 1.0, 4)]
    func = GridFunction(axes, lambda x: x[0] * x[1])

    assert func(2.0, 0.3) == pytest.approx(0.6)


def test_interpolation_within_cell_bounds():
    """Test that interpolated values stay within the values at the corners of the grid cell."""
    axes = [LinearCoordinateAxis(0.0, 1.0, 3), LogarithmicCoordinateAxis(1.0, 10.0, 3)]
    func = GridFunction(axes, _noisy_function)
    values = func.values

    for x0, x1 in itertools.product(np.linspace(0.0, 1.0, 17), np.logspace(0.0, 1.0, 17)):
        value = func(x0, x1)
        assert values.min() - 1e-12 <= value <= values.max() + 1e-12


def test_interpolate_out_of_range(linear_axis, logarithmic_axis):
    """Test that coordinates outside the grid raise RangeError."""
    func = GridFunction([linear_axis, logarithmic_axis])

    with pytest.raises(RangeError):
        func.interpolate((0.5, 10.0))
    with pytest.raises(RangeError):
        func(10.0, 1000.5)
    with pytest.raises(RangeError):
        func(math.nan, 10.0)


def test_interpolate_wrong_dimension(linear_axis, logarithmic_axis):
    """Test that the number of coordinates must match the dimension."""
    func = GridFunction([linear_axis, logarithmic_axis])

    with pytest.raises(ValueError):
        func.interpolate((10.0,))
    with pytest.raises(ValueError):
        func(10.0, 10.0, 10.0)


def test_interpolate_unchecked(linear_axis):
    """Test that the unchecked interpolation agrees with the checked one inside the grid."""
    func = GridFunction([linear_axis, linear_axis], lambda x: x[0] + 2 * x[1])

    assert func.interpolate_unchecked((30.0, 650.0)) == func.interpolate((30.0, 650.0))
