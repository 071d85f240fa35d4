import math

import pytest

from multidimgrid import AxisConstructionError, LinearCoordinateAxis


def test_linear_axis_coordinates(linear_axis: LinearCoordinateAxis):
    """Test the coordinates of a linear axis over [1, 1000] with 10 intervals."""
    assert linear_axis.lower_limit == 1.0
    assert linear_axis.upper_limit == 1000.0
    assert linear_axis.interval_number == 10
    assert linear_axis.point_number == 11
    assert linear_axis.step == pytest.approx(99.9)

    assert linear_axis.coordinate(0) == 1.0
    assert linear_axis.coordinate(10) == 1000.0
    assert linear_axis.coordinate(5) == pytest.approx(500.5)


def test_linear_axis_integration_weights(linear_axis: LinearCoordinateAxis):
    """Test the trapezoidal integration weights of a linear axis."""
    assert linear_axis.integration_weight(0) == pytest.approx(49.95)
    assert linear_axis.integration_weight(5) == pytest.approx(99.9)
    assert linear_axis.integration_weight(10) == pytest.approx(49.95)

    total = sum(linear_axis.integration_weight(i) for i in range(linear_axis.point_number))
    assert total == pytest.approx(999.0)


def test_linear_axis_nearest_points(linear_axis: LinearCoordinateAxis):
    """Test the nearest axis points of a coordinate between two axis points."""
    assert linear_axis.nearest_lower_axis_point(450.0) == 4
    assert linear_axis.nearest_higher_axis_point(450.0) == 5
    assert linear_axis.nearest_lower_axis_point(1.0) == 0
    assert linear_axis.nearest_higher_axis_point(1000.0) == 10


def test_linear_axis_interpolation_weight(linear_axis: LinearCoordinateAxis):
    """Test that the interpolation weight is linear in the coordinate."""
    assert linear_axis.interpolation_weight(450.0) == pytest.approx((450.0 - 400.6) / 99.9)
    midpoint = 0.5 * (linear_axis.coordinate(2) + linear_axis.coordinate(3))
    assert linear_axis.interpolation_weight(midpoint) == pytest.approx(0.5)


def test_linear_axis_negative_range():
    """Test a linear axis extending to negative coordinates."""
    axis = LinearCoordinateAxis(-2, 2, 4)

    assert [axis.coordinate(i) for i in range(5)] == pytest.approx([-2, -1, 0, 1, 2])
    assert axis.nearest_lower_axis_point(-0.5) == 1
    assert axis.nearest_higher_axis_point(-0.5) == 2
    assert axis.interpolation_weight(-0.25) == pytest.approx(0.75)


def test_linear_axis_repr(linear_axis: LinearCoordinateAxis):
    """Test the string representation of a linear axis."""
    assert repr(linear_axis) == "LinearCoordinateAxis(1.0, 1000.0, 10)"


@pytest.mark.parametrize(
    "lower_limit, upper_limit, interval_number",
    [
        (1000.0, 1.0, 10),  # upper limit below lower limit
        (1.0, 1.0, 10),  # several points with equal limits
        (1.0, 2.0, 0),  # single point with unequal limits
        (1.0, 1.0, 0),  # linear axis without intervals
        (1.0, 2.0, -1),  # negative number of intervals
        (1.0, 2.0, 2.5),  # non-integer number of intervals
        (math.nan, 2.0, 10),  # limit not finite
        (1.0, math.inf, 10),  # limit not finite
    ],
)
def test_linear_axis_invalid_parameters(lower_limit, upper_limit, interval_number):
    """Test that invalid parameters raise AxisConstructionError."""
    with pytest.raises(AxisConstructionError):
        LinearCoordinateAxis(lower_limit, upper_limit, interval_number)


def test_linear_axis_iteration():
    """Test that a linear axis can be converted to a list of its coordinates."""
    assert list(LinearCoordinateAxis(0.0, 1.0, 2)) == [0.0, 0.5, 1.0]
