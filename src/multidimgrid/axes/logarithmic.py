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
"""Module defining the logarithmically spaced coordinate axis."""

from __future__ import annotations

import math
import sys

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override  # pyright: ignore[reportUnreachable]
import numpy as np

from ..errors import AxisConstructionError
from .base import CoordinateAxis

__all__ = ["LogarithmicCoordinateAxis"]


class LogarithmicCoordinateAxis(CoordinateAxis):
    """Logarithmically spaced coordinate axis.

    The axis points are equidistant in :math:`u = \\log_{10}(x)`. Interpolation is linear in
    :math:`u` and the integration weights correspond to a summed trapezoidal quadrature rule in
    :math:`u`, multiplied by the Jacobian :math:`dx/du = x \\ln(10)` of the change of variables.

    Parameters
    ----------
    lower_limit
        Lower coordinate limit, must be positive.
    upper_limit
        Upper coordinate limit.
    interval_number
        Number of axis intervals, must be >= 1.
    """

    @override
    def _initial_setup(self) -> None:
        if self._lower_limit <= 0:
            raise AxisConstructionError(
                "Lower coordinate limit of a logarithmic axis must be positive "
                + f"({self._lower_limit})."
            )
        if self._interval_number == 0:
            raise AxisConstructionError(
                "Number of axis intervals of a logarithmic axis must be >= 1 (0)."
            )

        self._lower_log_limit: float = math.log10(self._lower_limit)
        self._upper_log_limit: float = math.log10(self._upper_limit)
        log_step = (self._upper_log_limit - self._lower_log_limit) / self._interval_number

        coordinates = 10 ** (self._lower_log_limit + np.arange(self._point_number) * log_step)
        coordinates[0] = self._lower_limit
        coordinates[-1] = self._upper_limit

        weights = log_step * coordinates * math.log(10)
        weights[0] /= 2
        weights[-1] /= 2

        coordinates.setflags(write=False)
        weights.setflags(write=False)
        self._log_step: float = log_step
        self._coordinates = coordinates
        self._integration_weights = weights

    @property
    def log_step(self) -> float:
        """Distance between neighbouring axis points in :math:`\\log_{10}` space."""
        return self._log_step

    @override
    def coordinate_unchecked(self, axis_point: int) -> float:
        return float(self._coordinates[axis_point])

    @override
    def integration_weight_unchecked(self, axis_point: int) -> float:
        return float(self._integration_weights[axis_point])

    @override
    def interpolation_weight_unchecked(self, coord: float) -> float:
        log_coord = math.log10(coord)
        lower = math.log10(
            self.coordinate_unchecked(self.nearest_lower_axis_point_unchecked(coord))
        )
        higher = math.log10(
            self.coordinate_unchecked(self.nearest_higher_axis_point_unchecked(coord))
        )

        if lower < higher:
            return (log_coord - lower) / (higher - lower)
        return 0.0

    @override
    def nearest_lower_axis_point_unchecked(self, coord: float) -> int:
        return self._lower_bracket(self._position(coord), coord)

    @override
    def nearest_higher_axis_point_unchecked(self, coord: float) -> int:
        return self._higher_bracket(self._position(coord), coord)

    @override
    def clone(self) -> LogarithmicCoordinateAxis:
        return LogarithmicCoordinateAxis(
            self._lower_limit, self._upper_limit, self._interval_number
        )

    def _position(self, coord: float) -> float:
        return (
            (math.log10(coord) - self._lower_log_limit)
            / (self._upper_log_limit - self._lower_log_limit)
            * self._interval_number
        )

    def __repr__(self) -> str:
        return (
            f"LogarithmicCoordinateAxis({self._lower_limit!r}, {self._upper_limit!r}, "
            + f"{self._interval_number!r})"
        )
