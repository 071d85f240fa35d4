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
"""Module defining the base class for coordinate axes."""

from __future__ import annotations

import math
from collections.abc import Iterator
from numbers import Integral, Real

import numpy as np
from numpy.typing import NDArray

from ..errors import AxisConstructionError, RangeError

__all__ = ["CoordinateAxis"]


class CoordinateAxis:
    """Base class for coordinate axes.

    A coordinate axis consists of a fixed number of axis points describing specifically spaced
    coordinate values in a certain range. The axis provides the coordinate of each axis point,
    determines the axis points nearest to any coordinate within its range, and supplies the
    interpolation weights of an interpolation linear in the coordinate spacing as well as the
    integration weights of a trapezoidal quadrature rule.

    Every query comes in two forms. The checked form validates its argument and raises
    `.RangeError` if it is out of range. The ``*_unchecked`` form assumes a valid argument and is
    what the grid functions use internally.

    Axes with specific coordinate spacings are implemented as subclasses.

    Parameters
    ----------
    lower_limit
        Lower coordinate limit.
    upper_limit
        Upper coordinate limit.
    interval_number
        Number of axis intervals. The axis has ``interval_number + 1`` axis points.

    Raises
    ------
    AxisConstructionError
        If the limits are not finite, ``upper_limit < lower_limit``, ``interval_number`` is not a
        non-negative integer, or the limits do not agree with the number of axis points.
    """

    def __init__(self, lower_limit: float, upper_limit: float, interval_number: int):
        if not isinstance(lower_limit, Real) or not math.isfinite(lower_limit):
            raise AxisConstructionError(
                f"Attribute 'lower_limit' must be a finite real number ({lower_limit})."
            )
        if not isinstance(upper_limit, Real) or not math.isfinite(upper_limit):
            raise AxisConstructionError(
                f"Attribute 'upper_limit' must be a finite real number ({upper_limit})."
            )
        if isinstance(interval_number, bool) or not isinstance(interval_number, Integral):
            raise AxisConstructionError(
                f"Attribute 'interval_number' must be an integer ({interval_number!r})."
            )

        lower_limit = float(lower_limit)
        upper_limit = float(upper_limit)
        interval_number = int(interval_number)

        if upper_limit < lower_limit:
            raise AxisConstructionError(
                f"Upper coordinate limit ({upper_limit}) is smaller than "
                + f"lower coordinate limit ({lower_limit})."
            )
        if interval_number < 0:
            raise AxisConstructionError(
                f"Number of axis intervals must be >= 0 ({interval_number})."
            )
        if interval_number == 0 and lower_limit != upper_limit:
            raise AxisConstructionError(
                "For a single-point axis the lower and upper coordinate limits have to agree "
                + f"({lower_limit} != {upper_limit})."
            )
        if interval_number > 0 and lower_limit == upper_limit:
            raise AxisConstructionError(
                "For an axis with more than one axis point the upper coordinate limit has to be "
                + f"larger than the lower coordinate limit ({lower_limit} == {upper_limit})."
            )

        self._lower_limit: float = lower_limit
        self._upper_limit: float = upper_limit
        self._interval_number: int = interval_number
        self._point_number: int = interval_number + 1

        self._coordinates: NDArray[np.float64] | None = None
        self._integration_weights: NDArray[np.float64] | None = None

        self._initial_setup()

    def _initial_setup(self) -> None:
        raise NotImplementedError("To be defined in subclass.")

    @property
    def lower_limit(self) -> float:
        """Lower coordinate limit."""
        return self._lower_limit

    @property
    def upper_limit(self) -> float:
        """Upper coordinate limit."""
        return self._upper_limit

    @property
    def interval_number(self) -> int:
        """Number of axis intervals."""
        return self._interval_number

    @property
    def point_number(self) -> int:
        """Number of axis points."""
        return self._point_number

    @property
    def coordinates(self) -> NDArray[np.float64]:
        """Coordinates of all axis points as ``(point_number,)`` array."""
        return self._coordinates

    @property
    def integration_weights(self) -> NDArray[np.float64]:
        """Integration weights of all axis points as ``(point_number,)`` array."""
        return self._integration_weights

    def coordinate(self, axis_point: int) -> float:
        """Return the coordinate of the axis point ``axis_point``.

        Raises
        ------
        RangeError
            If ``axis_point`` is not within ``[0, point_number)``.
        """
        self._check_axis_point(axis_point, "coordinate")
        return self.coordinate_unchecked(axis_point)

    def coordinate_unchecked(self, axis_point: int) -> float:
        """Return the coordinate of the axis point ``axis_point`` without a range check."""
        raise NotImplementedError("To be defined in subclass.")

    def integration_weight(self, axis_point: int) -> float:
        """Return the integration weight of the axis point ``axis_point``.

        Raises
        ------
        RangeError
            If ``axis_point`` is not within ``[0, point_number)``.
        """
        self._check_axis_point(axis_point, "integration_weight")
        return self.integration_weight_unchecked(axis_point)

    def integration_weight_unchecked(self, axis_point: int) -> float:
        """Return the integration weight of the axis point ``axis_point`` without a range check."""
        raise NotImplementedError("To be defined in subclass.")

    def interpolation_weight(self, coord: float) -> float:
        """Return the interpolation weight of the coordinate ``coord``.

        The weight is the relative distance of ``coord`` from the nearest lower axis point,
        measured in the space in which the axis is uniformly spaced. It is 0 if the nearest lower
        and higher axis points coincide.

        Raises
        ------
        RangeError
            If ``coord`` is outside the coordinate limits.
        """
        self._check_coordinate(coord, "interpolation_weight")
        return self.interpolation_weight_unchecked(coord)

    def interpolation_weight_unchecked(self, coord: float) -> float:
        """Return the interpolation weight of the coordinate ``coord`` without a range check."""
        raise NotImplementedError("To be defined in subclass.")

    def nearest_lower_axis_point(self, coord: float) -> int:
        """Return the nearest axis point with a coordinate smaller than or equal to ``coord``.

        Raises
        ------
        RangeError
            If ``coord`` is outside the coordinate limits.
        """
        self._check_coordinate(coord, "nearest_lower_axis_point")
        return self.nearest_lower_axis_point_unchecked(coord)

    def nearest_lower_axis_point_unchecked(self, coord: float) -> int:
        """Return the nearest lower axis point of ``coord`` without a range check."""
        raise NotImplementedError("To be defined in subclass.")

    def nearest_higher_axis_point(self, coord: float) -> int:
        """Return the nearest axis point with a coordinate larger than or equal to ``coord``.

        Raises
        ------
        RangeError
            If ``coord`` is outside the coordinate limits.
        """
        self._check_coordinate(coord, "nearest_higher_axis_point")
        return self.nearest_higher_axis_point_unchecked(coord)

    def nearest_higher_axis_point_unchecked(self, coord: float) -> int:
        """Return the nearest higher axis point of ``coord`` without a range check."""
        raise NotImplementedError("To be defined in subclass.")

    def clone(self) -> CoordinateAxis:
        """Return an independent copy of this axis."""
        raise NotImplementedError("To be defined in subclass.")

    def __getitem__(self, axis_point: int) -> float:
        return self.coordinate(axis_point)

    def __len__(self) -> int:
        return self._point_number

    def __iter__(self) -> Iterator[float]:
        for axis_point in range(self._point_number):
            yield self.coordinate_unchecked(axis_point)

    def __copy__(self) -> CoordinateAxis:
        return self.clone()

    def __deepcopy__(self, memo: dict) -> CoordinateAxis:
        return self.clone()

    def _lower_bracket(self, position: float, coord: float) -> int:
        """Round the fractional axis point ``position`` of ``coord`` down.

        The inverse coordinate mapping is subject to rounding errors, so the result is corrected
        against the axis coordinates until it is the largest axis point not above ``coord``.
        """
        last = self._interval_number
        axis_point = min(max(math.floor(position), 0), last)
        while axis_point < last and self.coordinate_unchecked(axis_point + 1) <= coord:
            axis_point += 1
        while axis_point > 0 and self.coordinate_unchecked(axis_point) > coord:
            axis_point -= 1
        return axis_point

    def _higher_bracket(self, position: float, coord: float) -> int:
        """Round the fractional axis point ``position`` of ``coord`` up.

        Counterpart of `_lower_bracket`: the result is the smallest axis point not below
        ``coord``.
        """
        last = self._interval_number
        axis_point = min(max(math.ceil(position), 0), last)
        while axis_point > 0 and self.coordinate_unchecked(axis_point - 1) >= coord:
            axis_point -= 1
        while axis_point < last and self.coordinate_unchecked(axis_point) < coord:
            axis_point += 1
        return axis_point

    def _check_axis_point(self, axis_point: int, location: str) -> None:
        if isinstance(axis_point, bool) or not isinstance(axis_point, Integral):
            raise TypeError(f"Axis point must be an integer ({axis_point!r}) in '{location}'.")
        if not 0 <= axis_point < self._point_number:
            raise RangeError(
                f"Axis point {axis_point} is not within the range [0, {self._point_number}) "
                + f"of the axis in '{location}'."
            )

    def _check_coordinate(self, coord: float, location: str) -> None:
        if not self._lower_limit <= coord <= self._upper_limit:
            raise RangeError(
                f"Coordinate {coord} is not within the range [{self._lower_limit}, "
                + f"{self._upper_limit}] of the axis in '{location}'."
            )
