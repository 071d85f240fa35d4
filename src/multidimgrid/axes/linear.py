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
"""Module defining the linearly spaced coordinate axis."""

from __future__ import annotations

import sys

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override  # pyright: ignore[reportUnreachable]
import numpy as np

from ..errors import AxisConstructionError
from .base import CoordinateAxis

__all__ = ["LinearCoordinateAxis"]


class LinearCoordinateAxis(CoordinateAxis):
    """Linearly spaced coordinate axis.

    The interpolation weights correspond to a linear interpolation and the integration weights to
    a summed trapezoidal quadrature rule.

    Parameters
    ----------
    lower_limit
        Lower coordinate limit.
    upper_limit
        Upper coordinate limit.
    interval_number
        Number of axis intervals, must be >= 1. Use `.SinglePointCoordinateAxis` for an axis
        consisting of a single point.

    Examples
    --------
    >>> axis = LinearCoordinateAxis(1, 1000, 10)
    >>> axis.point_number
    11
    >>> axis.coordinate(10)
    1000.0
    """

    @override
    def _initial_setup(self) -> None:
        if self._interval_number == 0:
            raise AxisConstructionError(
                "Number of axis intervals of a linear axis must be >= 1 (0)."
            )

        step = (self._upper_limit - self._lower_limit) / self._interval_number

        coordinates = self._lower_limit + np.arange(self._point_number) * step
        # Pin the end points to the limits to avoid rounding errors.
        coordinates[0] = self._lower_limit
        coordinates[-1] = self._upper_limit

        weights = np.full(self._point_number, step)
        weights[0] /= 2
        weights[-1] /= 2

        coordinates.setflags(write=False)
        weights.setflags(write=False)
        self._step: float = step
        self._coordinates = coordinates
        self._integration_weights = weights

    @property
    def step(self) -> float:
        """Distance between neighbouring axis points."""
        return self._step

    @override
    def coordinate_unchecked(self, axis_point: int) -> float:
        return float(self._coordinates[axis_point])

    @override
    def integration_weight_unchecked(self, axis_point: int) -> float:
        return float(self._integration_weights[axis_point])

    @override
    def interpolation_weight_unchecked(self, coord: float) -> float:
        lower = self.coordinate_unchecked(self.nearest_lower_axis_point_unchecked(coord))
        higher = self.coordinate_unchecked(self.nearest_higher_axis_point_unchecked(coord))

        if lower < higher:
            return (coord - lower) / (higher - lower)
        return 0.0

    @override
    def nearest_lower_axis_point_unchecked(self, coord: float) -> int:
        return self._lower_bracket(self._position(coord), coord)

    @override
    def nearest_higher_axis_point_unchecked(self, coord: float) -> int:
        return self._higher_bracket(self._position(coord), coord)

    @override
    def clone(self) -> LinearCoordinateAxis:
        return LinearCoordinateAxis(self._lower_limit, self._upper_limit, self._interval_number)

    def _position(self, coord: float) -> float:
        # Inverse of the mapping from axis points to coordinates.
        return (
            (coord - self._lower_limit)
            / (self._upper_limit - self._lower_limit)
            * self._interval_number
        )

    def __repr__(self) -> str:
        return (
            f"LinearCoordinateAxis({self._lower_limit!r}, {self._upper_limit!r}, "
            + f"{self._interval_number!r})"
        )
