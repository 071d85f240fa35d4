import matplotlib.pyplot as plt
import pytest
from matplotlib.axes import Axes

from multidimgrid import GridFunction, SinglePointCoordinateAxis


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_plot_1d(logarithmic_axis):
    """Test plotting a 1D grid function."""
    func = GridFunction([logarithmic_axis], lambda x: x[0] ** 2)
    ax = func.plot()

    assert isinstance(ax, Axes)
    assert ax.get_xscale() == "log"
    assert len(ax.lines) == 1


def test_plot_2d(linear_axis, logarithmic_axis):
    """Test plotting a 2D grid function."""
    func = GridFunction([linear_axis, logarithmic_axis], lambda x: x[0] * x[1])
    ax = func.plot()

    assert isinstance(ax, Axes)
    assert ax.get_xscale() == "linear"
    assert ax.get_yscale() == "log"
    assert len(ax.collections) == 1


def test_plot_existing_axes(linear_axis):
    """Test that the given matplotlib axes are used."""
    _, ax = plt.subplots()
    func = GridFunction([linear_axis])

    assert func.plot(ax=ax, color="red") is ax


def test_plot_3d_raises(linear_axis):
    """Test that only 1D and 2D grid functions can be plotted."""
    func = GridFunction([linear_axis, linear_axis, SinglePointCoordinateAxis(1.0)])

    with pytest.raises(ValueError):
        func.plot()


def test_plot_linear_logarithmic_axis(linear_logarithmic_axis, linear_axis):
    """Test that linear-logarithmic axes are shown on a symmetric logarithmic scale."""
    func_1d = GridFunction([linear_logarithmic_axis], lambda x: x[0])
    ax = func_1d.plot()

    assert ax.get_xscale() == "symlog"
    assert ax.xaxis.get_transform().linthresh == linear_logarithmic_axis.threshold

    func_2d = GridFunction([linear_axis, linear_logarithmic_axis], lambda x: x[0] + x[1])
    ax = func_2d.plot()

    assert ax.get_xscale() == "linear"
    assert ax.get_yscale() == "symlog"
