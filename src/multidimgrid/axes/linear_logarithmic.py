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
"""Module defining the partially linearly and partially logarithmically spaced coordinate axis."""

from __future__ import annotations

import sys

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override  # pyright: ignore[reportUnreachable]
import numpy as np

from .base import CoordinateAxis
from .linear import LinearCoordinateAxis
from .logarithmic import LogarithmicCoordinateAxis

__all__ = ["LinearLogarithmicCoordinateAxis"]


class LinearLogarithmicCoordinateAxis(CoordinateAxis):
    """Coordinate axis that is linearly spaced below and logarithmically spaced above a threshold.

    This is handy if a logarithmic axis is needed but has to be extended down to 0 or to some
    negative coordinate value. The axis delegates every query to an embedded
    `.LinearCoordinateAxis` spanning ``[lower_limit, threshold]`` or to an embedded
    `.LogarithmicCoordinateAxis` spanning ``[threshold, upper_limit]``. The axis point at the
    threshold is shared by both parts and its integration weight is the sum of the two boundary
    half-weights.

    Parameters
    ----------
    lower_limit
        Lower coordinate limit.
    threshold
        Coordinate separating the linear from the logarithmic part, must be positive.
    upper_limit
        Upper coordinate limit.
    linear_interval_number
        Number of axis intervals in the linear part, must be >= 1.
    logarithmic_interval_number
        Number of axis intervals in the logarithmic part, must be >= 1.

    Raises
    ------
    AxisConstructionError
        If the parameters are not valid for the whole axis or for one of its parts.
    """

    def __init__(
        self,
        lower_limit: float,
        threshold: float,
        upper_limit: float,
        linear_interval_number: int,
        logarithmic_interval_number: int,
    ):
        self._linear_axis = LinearCoordinateAxis(lower_limit, threshold, linear_interval_number)
        self._logarithmic_axis = LogarithmicCoordinateAxis(
            threshold, upper_limit, logarithmic_interval_number
        )
        self._threshold: float = self._linear_axis.upper_limit
        self._linear_interval_number: int = self._linear_axis.interval_number
        self._logarithmic_interval_number: int = self._logarithmic_axis.interval_number

        super().__init__(
            lower_limit,
            upper_limit,
            self._linear_interval_number + self._logarithmic_interval_number,
        )

    @override
    def _initial_setup(self) -> None:
        seam = self._linear_interval_number

        coordinates = np.concatenate(
            (self._linear_axis.coordinates, self._logarithmic_axis.coordinates[1:])
        )
        weights = np.concatenate(
            (self._linear_axis.integration_weights, self._logarithmic_axis.integration_weights[1:])
        )
        weights[seam] += self._logarithmic_axis.integration_weights[0]

        coordinates.setflags(write=False)
        weights.setflags(write=False)
        self._coordinates = coordinates
        self._integration_weights = weights

    @property
    def threshold(self) -> float:
        """Coordinate separating the linear from the logarithmic part."""
        return self._threshold

    @property
    def linear_interval_number(self) -> int:
        """Number of axis intervals in the linear part."""
        return self._linear_interval_number

    @property
    def logarithmic_interval_number(self) -> int:
        """Number of axis intervals in the logarithmic part."""
        return self._logarithmic_interval_number

    @property
    def linear_axis(self) -> LinearCoordinateAxis:
        """Linear part of the axis."""
        return self._linear_axis

    @property
    def logarithmic_axis(self) -> LogarithmicCoordinateAxis:
        """Logarithmic part of the axis."""
        return self._logarithmic_axis

    @override
    def coordinate_unchecked(self, axis_point: int) -> float:
        if axis_point > self._linear_interval_number:
            return self._logarithmic_axis.coordinate_unchecked(
                axis_point - self._linear_interval_number
            )
        return self._linear_axis.coordinate_unchecked(axis_point)

    @override
    def integration_weight_unchecked(self, axis_point: int) -> float:
        seam = self._linear_interval_number
        if axis_point > seam:
            return self._logarithmic_axis.integration_weight_unchecked(axis_point - seam)
        if axis_point < seam:
            return self._linear_axis.integration_weight_unchecked(axis_point)
        return self._linear_axis.integration_weight_unchecked(
            seam
        ) + self._logarithmic_axis.integration_weight_unchecked(0)

    @override
    def interpolation_weight_unchecked(self, coord: float) -> float:
        if coord > self._threshold:
            return self._logarithmic_axis.interpolation_weight_unchecked(coord)
        return self._linear_axis.interpolation_weight_unchecked(coord)

    @override
    def nearest_lower_axis_point_unchecked(self, coord: float) -> int:
        if coord > self._threshold:
            return (
                self._logarithmic_axis.nearest_lower_axis_point_unchecked(coord)
                + self._linear_interval_number
            )
        return self._linear_axis.nearest_lower_axis_point_unchecked(coord)

    @override
    def nearest_higher_axis_point_unchecked(self, coord: float) -> int:
        if coord > self._threshold:
            return (
                self._logarithmic_axis.nearest_higher_axis_point_unchecked(coord)
                + self._linear_interval_number
            )
        return self._linear_axis.nearest_higher_axis_point_unchecked(coord)

    @override
    def clone(self) -> LinearLogarithmicCoordinateAxis:
        return LinearLogarithmicCoordinateAxis(
            self._lower_limit,
            self._threshold,
            self._upper_limit,
            self._linear_interval_number,
            self._logarithmic_interval_number,
        )

    def __repr__(self) -> str:
        return (
            f"LinearLogarithmicCoordinateAxis({self._lower_limit!r}, {self._threshold!r}, "
            + f"{self._upper_limit!r}, {self._linear_interval_number!r}, "
            + f"{self._logarithmic_interval_number!r})"
        )
