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
"""Discrete functions on multi-dimensional grids spanned by arbitrarily spaced coordinate axes.

A `.GridFunction` discretizes a scalar function on the tensor product of coordinate axes. Each
axis has its own coordinate spacing: linear (`.LinearCoordinateAxis`), logarithmic
(`.LogarithmicCoordinateAxis`), linear below and logarithmic above a threshold
(`.LinearLogarithmicCoordinateAxis`) or a single point (`.SinglePointCoordinateAxis`).
"""

from .axes import (
    CoordinateAxis,
    LinearCoordinateAxis,
    LinearLogarithmicCoordinateAxis,
    LogarithmicCoordinateAxis,
    SinglePointCoordinateAxis,
)
from .errors import AxisConstructionError, GridIndexError, MultiDimGridError, RangeError
from .grid_function import GridFunction

__version__ = "0.1.0"

__all__ = [
    "CoordinateAxis",
    "LinearCoordinateAxis",
    "LinearLogarithmicCoordinateAxis",
    "LogarithmicCoordinateAxis",
    "SinglePointCoordinateAxis",
    "GridFunction",
    "MultiDimGridError",
    "AxisConstructionError",
    "RangeError",
    "GridIndexError",
]
