# Copyright 2023 Euratom
# Copyright 2023 United Kingdom Atomic Energy Authority
# Copyright 2023 Centro de Investigaciones Energéticas, Medioambientales y Tecnológicas
#
# Licensed under the EUPL, Version 1.1 or – as soon they will be approved by the
# European Commission - subsequent versions of the EUPL (the "Licence");
# You may not use this work except in compliance with the Licence.
# You may obtain a copy of the Licence at:
#
# https://joinup.ec.europa.eu/software/page/eupl5
#
# Unless required by applicable law or agreed to in writing, software distributed
# under the Licence is distributed on an "AS IS" basis, WITHOUT WARRANTIES OR
# CONDITIONS OF ANY KIND, either express or implied.
#
# See the Licence for the specific language governing permissions and limitations
# under the Licence.
"""Module defining discrete functions on multi-dimensional coordinate grids."""

from __future__ import annotations

import math
import warnings
from collections.abc import Callable, Sequence
from numbers import Integral, Real

import matplotlib.axes
import matplotlib.pyplot as plt
import numpy as np
from numpy.typing import NDArray

from .axes import CoordinateAxis, LinearLogarithmicCoordinateAxis, LogarithmicCoordinateAxis
from .errors import GridIndexError, RangeError

__all__ = ["GridFunction"]


class GridFunction:
    """Discrete function defined on a multi-dimensional coordinate grid.

    The grid is the tensor product of an arbitrary number of coordinate axes, each with its own
    range and spacing. The function values are stored in a flat array in row-major order: the
    value at the grid point ``(i_0, ..., i_(n-1))`` is stored at the index
    ``i_0 * index_strides[0] + ... + i_(n-1) * index_strides[n-1]``, where the stride of the last
    axis is 1 and the stride of axis ``j`` is the product of the numbers of axis points of all the
    following axes.

    The grid function gives access to the value at each grid point, to the coordinates and
    integration weights of each grid point, and interpolates the discrete values multi-linearly in
    the coordinate spacings anywhere within the range of the grid.

    The coordinate axes are copied on construction, so the grid function never shares them with
    the caller.

    Parameters
    ----------
    axes
        Sequence of coordinate axes spanning the grid. Axis 0 is the outermost axis.
    function
        Either a constant value assigned to every grid point, or a callable taking the tuple of
        coordinates of a grid point and returning the function value there, by default 0.
        Bound methods can be passed directly. The callable is evaluated exactly once per grid
        point in ascending order of the grid point index.

    Raises
    ------
    ValueError
        If ``axes`` is empty.
    TypeError
        If ``axes`` is a single `.CoordinateAxis` instead of a sequence, an element of ``axes`` is
        not a `.CoordinateAxis`, or ``function`` is neither callable nor a real number.

    Examples
    --------
    .. code-block:: python

        import math

        from multidimgrid import GridFunction, LinearCoordinateAxis, LogarithmicCoordinateAxis

        x0 = LinearCoordinateAxis(1, 1000, 10)
        x1 = LogarithmicCoordinateAxis(1, 1000, 10)
        func = GridFunction([x0, x1], lambda x: x[0] * math.log(x[1]))

        value = func[2, 7]
        interpolated = func(30, 650)
    """

    def __init__(
        self,
        axes: Sequence[CoordinateAxis],
        function: Callable[[tuple[float, ...]], float] | float = 0.0,
    ):
        if isinstance(axes, CoordinateAxis):
            raise TypeError(
                "Argument 'axes' must be a sequence of coordinate axes, "
                + f"not a single axis ({axes!r})."
            )

        axes = tuple(axes)

        if not len(axes):
            raise ValueError("The sequence of coordinate axes must contain at least one element.")

        for axis in axes:
            if not isinstance(axis, CoordinateAxis):
                raise TypeError(f"Coordinate axis must be a CoordinateAxis instance ({axis!r}).")

        self._axes: tuple[CoordinateAxis, ...] = tuple(axis.clone() for axis in axes)
        self._dimension: int = len(self._axes)
        self._shape: tuple[int, ...] = tuple(axis.point_number for axis in self._axes)
        self._index_strides: tuple[int, ...] = self._compute_index_strides(self._shape)
        self._point_number: int = math.prod(self._shape)
        self._values: NDArray[np.float64] = np.empty(self._point_number, dtype=np.float64)

        if callable(function):
            self._evaluate(function)
        elif isinstance(function, Real):
            self._values.fill(float(function))
        else:
            raise TypeError(
                f"Argument 'function' must be callable or a real number ({function!r})."
            )

    @staticmethod
    def _compute_index_strides(shape: tuple[int, ...]) -> tuple[int, ...]:
        strides = [1] * len(shape)
        for i_axis in range(len(shape) - 2, -1, -1):
            strides[i_axis] = strides[i_axis + 1] * shape[i_axis + 1]
        return tuple(strides)

    def _evaluate(self, function: Callable[[tuple[float, ...]], float]) -> None:
        num_non_finite = 0
        for index in range(self._point_number):
            value = float(function(self.coordinates_at_index_unchecked(index)))
            self._values[index] = value
            if not math.isfinite(value):
                num_non_finite += 1

        if num_non_finite:
            warnings.warn(
                f"The function returned non-finite values at {num_non_finite} of "
                + f"{self._point_number} grid points.",
                RuntimeWarning,
                stacklevel=3,
            )

    @property
    def axes(self) -> tuple[CoordinateAxis, ...]:
        """Coordinate axes spanning the grid."""
        return self._axes

    @property
    def dimension(self) -> int:
        """Number of coordinate axes."""
        return self._dimension

    @property
    def shape(self) -> tuple[int, ...]:
        """Number of axis points of each coordinate axis."""
        return self._shape

    @property
    def index_strides(self) -> tuple[int, ...]:
        """Index differences between neighbouring grid points along each coordinate axis.

        Useful to work with grid point indices instead of the grid points themselves.
        """
        return self._index_strides

    @property
    def point_number(self) -> int:
        """Total number of grid points."""
        return self._point_number

    @property
    def values(self) -> NDArray[np.float64]:
        """Read-only view of the function values as ``(point_number,)`` array.

        Use `set_value` or `set_value_at_index` to modify the values.
        """
        view = self._values.view()
        view.setflags(write=False)
        return view

    def as_array(self) -> NDArray[np.float64]:
        """Return a copy of the function values as an array of shape `shape`."""
        return self._values.reshape(self._shape).copy()

    # Grid point <-> index

    def index(self, grid_point: Sequence[int]) -> int:
        """Return the index of the grid point ``grid_point``.

        Raises
        ------
        ValueError
            If ``grid_point`` does not have one component per axis.
        RangeError
            If a component of ``grid_point`` is out of range of its axis.
        """
        self._check_grid_point(grid_point, "index")
        return self.index_unchecked(grid_point)

    def index_unchecked(self, grid_point: Sequence[int]) -> int:
        """Return the index of the grid point ``grid_point`` without a range check."""
        index = 0
        for axis_point, stride in zip(grid_point, self._index_strides):
            index += axis_point * stride
        return index

    def grid_point(self, index: int) -> tuple[int, ...]:
        """Return the grid point with the index ``index``.

        Raises
        ------
        GridIndexError
            If ``index`` is not within ``[0, point_number)``.
        """
        self._check_index(index, "grid_point")
        return self.grid_point_unchecked(index)

    def grid_point_unchecked(self, index: int) -> tuple[int, ...]:
        """Return the grid point with the index ``index`` without a range check."""
        grid_point = []
        for stride in self._index_strides:
            axis_point, index = divmod(index, stride)
            grid_point.append(axis_point)
        return tuple(grid_point)

    # Coordinates

    def coordinates(self, grid_point: Sequence[int]) -> tuple[float, ...]:
        """Return the coordinates of the grid point ``grid_point``."""
        self._check_grid_point(grid_point, "coordinates")
        return self.coordinates_unchecked(grid_point)

    def coordinates_unchecked(self, grid_point: Sequence[int]) -> tuple[float, ...]:
        """Return the coordinates of the grid point ``grid_point`` without a range check."""
        return tuple(
            axis.coordinate_unchecked(axis_point)
            for axis, axis_point in zip(self._axes, grid_point)
        )

    def coordinates_at_index(self, index: int) -> tuple[float, ...]:
        """Return the coordinates of the grid point with the index ``index``."""
        self._check_index(index, "coordinates_at_index")
        return self.coordinates_at_index_unchecked(index)

    def coordinates_at_index_unchecked(self, index: int) -> tuple[float, ...]:
        """Return the coordinates at the index ``index`` without a range check."""
        coords = []
        for axis, stride in zip(self._axes, self._index_strides):
            axis_point = index // stride
            coords.append(axis.coordinate_unchecked(axis_point))
            index -= axis_point * stride
        return tuple(coords)

    # Integration weights

    def integration_weights(self, grid_point: Sequence[int]) -> tuple[float, ...]:
        """Return the integration weights of the individual axes at the grid point ``grid_point``.

        The weight of the grid point in a multi-dimensional quadrature is the product of these
        weights.
        """
        self._check_grid_point(grid_point, "integration_weights")
        return self.integration_weights_unchecked(grid_point)

    def integration_weights_unchecked(self, grid_point: Sequence[int]) -> tuple[float, ...]:
        """Return the integration weights at the grid point ``grid_point`` without a range check."""
        return tuple(
            axis.integration_weight_unchecked(axis_point)
            for axis, axis_point in zip(self._axes, grid_point)
        )

    def integration_weights_at_index(self, index: int) -> tuple[float, ...]:
        """Return the integration weights of the individual axes at the index ``index``."""
        self._check_index(index, "integration_weights_at_index")
        return self.integration_weights_at_index_unchecked(index)

    def integration_weights_at_index_unchecked(self, index: int) -> tuple[float, ...]:
        """Return the integration weights at the index ``index`` without a range check."""
        return self.integration_weights_unchecked(self.grid_point_unchecked(index))

    def integrate(self) -> float:
        """Estimate the integral of the function over the whole grid.

        The estimate is the sum of the function values multiplied by the products of the
        integration weights of the individual axes. Single-point axes have vanishing integration
        weights, so the integral of a grid function having one of them is 0.

        Returns
        -------
        float
            The estimated integral.
        """
        weights = self._axes[0].integration_weights
        for axis in self._axes[1:]:
            weights = np.multiply.outer(weights, axis.integration_weights).ravel()
        return float(np.dot(weights, self._values))

    # Function values

    def value(self, grid_point: Sequence[int]) -> float:
        """Return the function value at the grid point ``grid_point``."""
        self._check_grid_point(grid_point, "value")
        return self.value_unchecked(grid_point)

    def value_unchecked(self, grid_point: Sequence[int]) -> float:
        """Return the function value at the grid point ``grid_point`` without a range check."""
        return float(self._values[self.index_unchecked(grid_point)])

    def value_at_index(self, index: int) -> float:
        """Return the function value at the grid point with the index ``index``."""
        self._check_index(index, "value_at_index")
        return self.value_at_index_unchecked(index)

    def value_at_index_unchecked(self, index: int) -> float:
        """Return the function value at the index ``index`` without a range check."""
        return float(self._values[index])

    def set_value(self, grid_point: Sequence[int], value: float) -> None:
        """Set the function value at the grid point ``grid_point``."""
        self._check_grid_point(grid_point, "set_value")
        self.set_value_unchecked(grid_point, value)

    def set_value_unchecked(self, grid_point: Sequence[int], value: float) -> None:
        """Set the function value at the grid point ``grid_point`` without a range check."""
        self._values[self.index_unchecked(grid_point)] = value

    def set_value_at_index(self, index: int, value: float) -> None:
        """Set the function value at the grid point with the index ``index``."""
        self._check_index(index, "set_value_at_index")
        self.set_value_at_index_unchecked(index, value)

    def set_value_at_index_unchecked(self, index: int, value: float) -> None:
        """Set the function value at the index ``index`` without a range check."""
        self._values[index] = value

    def __getitem__(self, key: int | Sequence[int]) -> float:
        if isinstance(key, Integral):
            return self.value_at_index(key)
        return self.value(key)

    def __setitem__(self, key: int | Sequence[int], value: float) -> None:
        if isinstance(key, Integral):
            self.set_value_at_index(key, value)
        else:
            self.set_value(key, value)

    # Interpolation

    def interpolate(self, coordinates: Sequence[float]) -> float:
        """Return the interpolated function value at the coordinates ``coordinates``.

        The interpolation is multi-linear in the coordinate spacings of the axes, e.g. linear in
        :math:`\\log_{10}(x)` along a logarithmic axis. At the coordinates of a grid point it
        returns exactly the value stored there.

        Parameters
        ----------
        coordinates
            One coordinate per axis.

        Returns
        -------
        float
            The interpolated value.

        Raises
        ------
        ValueError
            If ``coordinates`` does not have one component per axis.
        RangeError
            If a coordinate is outside the range of its axis.
        """
        self._check_coordinates(coordinates, "interpolate")
        return self.interpolate_unchecked(coordinates)

    def interpolate_unchecked(self, coordinates: Sequence[float]) -> float:
        """Return the interpolated function value at ``coordinates`` without a range check."""
        return self._recursive_interpolation(coordinates, 0, 0)

    def __call__(self, *coordinates: float) -> float:
        return self.interpolate(coordinates)

    def _recursive_interpolation(
        self, coordinates: Sequence[float], index: int, i_axis: int
    ) -> float:
        """Interpolate along the axis ``i_axis`` and all the following ones.

        ``index`` is the partial index of the grid point whose components along the preceding
        axes are already fixed. Every level fixes one more component at the nearest lower and
        nearest higher axis point and combines the two branches linearly, so the recursion visits
        the ``2**dimension`` corners of the grid cell enclosing ``coordinates``.
        """
        if i_axis == self._dimension:
            return float(self._values[index])

        axis = self._axes[i_axis]
        coord = coordinates[i_axis]
        stride = self._index_strides[i_axis]

        lower = axis.nearest_lower_axis_point_unchecked(coord)
        higher = axis.nearest_higher_axis_point_unchecked(coord)

        lower_value = self._recursive_interpolation(coordinates, index + lower * stride, i_axis + 1)
        if higher == lower:
            return lower_value

        weight = axis.interpolation_weight_unchecked(coord)
        higher_value = self._recursive_interpolation(
            coordinates, index + higher * stride, i_axis + 1
        )

        return lower_value * (1.0 - weight) + higher_value * weight

    # Copying

    def copy(self) -> GridFunction:
        """Return a copy of this grid function with copies of its axes and values."""
        other = type(self).__new__(type(self))
        other.__dict__.update(self.__dict__)
        other._axes = tuple(axis.clone() for axis in self._axes)
        other._values = self._values.copy()
        return other

    def __copy__(self) -> GridFunction:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> GridFunction:
        return self.copy()

    # Plotting

    def plot(
        self, ax: matplotlib.axes.Axes | None = None, **styles: str | float
    ) -> matplotlib.axes.Axes:
        """Plot a 1D or 2D grid function to a matplotlib figure.

        A 1D function is plotted as a line through the grid points, a 2D function as a
        pseudocolor plot with axis 0 along the horizontal direction. Logarithmic axes are shown on
        a logarithmic scale, linear-logarithmic axes on a symmetric logarithmic scale that is linear
        below the threshold.

        Parameters
        ----------
        ax
            Matplotlib axes to plot on. If None, a new figure and axes are created.
        **styles
            Keyword arguments passed to `~matplotlib.axes.Axes.plot` or
            `~matplotlib.axes.Axes.pcolormesh`.

        Returns
        -------
        `~matplotlib.axes.Axes`
            The matplotlib axes with the plotted function.

        Raises
        ------
        ValueError
            If the grid function is neither 1D nor 2D.
        """
        if self._dimension not in (1, 2):
            raise ValueError(
                f"Only 1D and 2D grid functions can be plotted (dimension {self._dimension})."
            )

        if ax is None:
            _, ax = plt.subplots(constrained_layout=True)

        x_axis = self._axes[0]
        if self._dimension == 1:
            styles.setdefault("marker", ".")
            ax.plot(x_axis.coordinates, self._values, **styles)
            ax.set_xlabel("x0")
        else:
            y_axis = self._axes[1]
            styles.setdefault("shading", "nearest")
            # pcolormesh expects values indexed as (y, x)
            mesh = ax.pcolormesh(
                x_axis.coordinates, y_axis.coordinates, self.as_array().T, **styles
            )
            ax.figure.colorbar(mesh, ax=ax)
            ax.set_xlabel("x0")
            ax.set_ylabel("x1")
            _set_scale(ax.set_yscale, y_axis)

        _set_scale(ax.set_xscale, x_axis)

        return ax

    # Checks

    def _check_grid_point(self, grid_point: Sequence[int], location: str) -> None:
        if len(grid_point) != self._dimension:
            raise ValueError(
                f"Grid point {tuple(grid_point)} must have {self._dimension} components "
                + f"in '{location}'."
            )
        for i_axis, (axis_point, point_number) in enumerate(zip(grid_point, self._shape)):
            if isinstance(axis_point, bool) or not isinstance(axis_point, Integral):
                raise TypeError(
                    f"Axis point {axis_point!r} of axis {i_axis} must be an integer "
                    + f"in '{location}'."
                )
            if not 0 <= axis_point < point_number:
                raise RangeError(
                    f"Axis point {axis_point} of axis {i_axis} is not within the range "
                    + f"[0, {point_number}) in '{location}'."
                )

    def _check_index(self, index: int, location: str) -> None:
        if isinstance(index, bool) or not isinstance(index, Integral):
            raise TypeError(f"Index must be an integer ({index!r}) in '{location}'.")
        if not 0 <= index < self._point_number:
            raise GridIndexError(
                f"Index {index} is not within the range [0, {self._point_number}) "
                + f"in '{location}'."
            )

    def _check_coordinates(self, coordinates: Sequence[float], location: str) -> None:
        if len(coordinates) != self._dimension:
            raise ValueError(
                f"Coordinates {tuple(coordinates)} must have {self._dimension} components "
                + f"in '{location}'."
            )
        for i_axis, (coord, axis) in enumerate(zip(coordinates, self._axes)):
            if not axis.lower_limit <= coord <= axis.upper_limit:
                raise RangeError(
                    f"Coordinate {coord} of axis {i_axis} is not within the range "
                    + f"[{axis.lower_limit}, {axis.upper_limit}] in '{location}'."
                )

    def __repr__(self) -> str:
        return f"GridFunction({list(self._axes)!r}, shape={self._shape})"


def _set_scale(set_scale: Callable[..., None], axis: CoordinateAxis) -> None:
    """Set the scale of a plot direction matching the coordinate spacing of ``axis``."""
    if isinstance(axis, LogarithmicCoordinateAxis):
        set_scale("log")
    elif isinstance(axis, LinearLogarithmicCoordinateAxis):
        # linear below the threshold, logarithmic above
        set_scale("symlog", linthresh=axis.threshold)
