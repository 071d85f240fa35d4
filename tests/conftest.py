import pytest
from matplotlib import pyplot as plt

from multidimgrid import (
    LinearCoordinateAxis,
    LinearLogarithmicCoordinateAxis,
    LogarithmicCoordinateAxis,
    SinglePointCoordinateAxis,
)

plt.rcParams["backend"] = "Agg"  # Use non-interactive backend for testing


@pytest.fixture
def linear_axis() -> LinearCoordinateAxis:
    """Linear axis over [1, 1000] with 10 intervals."""
    return LinearCoordinateAxis(1.0, 1000.0, 10)


@pytest.fixture
def logarithmic_axis() -> LogarithmicCoordinateAxis:
    """Logarithmic axis over [1, 1000] with 10 intervals."""
    return LogarithmicCoordinateAxis(1.0, 1000.0, 10)


@pytest.fixture
def linear_logarithmic_axis() -> LinearLogarithmicCoordinateAxis:
    """Axis linear over [0, 1] with 10 intervals and logarithmic over [1, 1000] with 3 intervals."""
    return LinearLogarithmicCoordinateAxis(0.0, 1.0, 1000.0, 10, 3)


@pytest.fixture
def single_point_axis() -> SinglePointCoordinateAxis:
    """Single-point axis at 3.5."""
    return SinglePointCoordinateAxis(3.5)


@pytest.fixture(params=["linear", "logarithmic", "linear_logarithmic", "single_point"])
def any_axis(request):
    """Each of the axis fixtures in turn."""
    return request.getfixturevalue(f"{request.param}_axis")
