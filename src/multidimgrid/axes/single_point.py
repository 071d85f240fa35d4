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
"""Module defining the coordinate axis consisting of a single point."""

from __future__ import annotations

import sys

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override  # pyright: ignore[reportUnreachable]
import numpy as np

from .base import CoordinateAxis

__all__ = ["SinglePointCoordinateAxis"]


class SinglePointCoordinateAxis(CoordinateAxis):
    """Degenerate coordinate axis consisting of a single axis point.

    It can be used to fix one coordinate of a grid function to a constant value. The integration
    and interpolation weights always vanish.

    Parameters
    ----------
    value
        Coordinate of the single axis point.
    """

    def __init__(self, value: float):
        super().__init__(value, value, 0)

    @override
    def _initial_setup(self) -> None:
        self._value: float = self._lower_limit

        coordinates = np.array([self._value])
        weights = np.zeros(1)
        coordinates.setflags(write=False)
        weights.setflags(write=False)
        self._coordinates = coordinates
        self._integration_weights = weights

    @property
    def value(self) -> float:
        """Coordinate of the single axis point."""
        return self._value

    @override
    def coordinate_unchecked(self, axis_point: int) -> float:
        return self._value

    @override
    def integration_weight_unchecked(self, axis_point: int) -> float:
        # the integral over a single point vanishes
        return 0.0

    @override
    def interpolation_weight_unchecked(self, coord: float) -> float:
        return 0.0

    @override
    def nearest_lower_axis_point_unchecked(self, coord: float) -> int:
        return 0

    @override
    def nearest_higher_axis_point_unchecked(self, coord: float) -> int:
        return 0

    @override
    def clone(self) -> SinglePointCoordinateAxis:
        return SinglePointCoordinateAxis(self._value)

    def __repr__(self) -> str:
        return f"SinglePointCoordinateAxis({self._value!r})"
