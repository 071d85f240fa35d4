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
"""Exceptions raised by coordinate axes and grid functions."""

__all__ = ["MultiDimGridError", "AxisConstructionError", "RangeError", "GridIndexError"]


class MultiDimGridError(Exception):
    """Base class for all errors raised by this package."""


class AxisConstructionError(MultiDimGridError, ValueError):
    """Raised when a coordinate axis is created with invalid parameters."""


class RangeError(MultiDimGridError, ValueError):
    """Raised when an axis point or a coordinate is outside the range of an axis."""


class GridIndexError(MultiDimGridError, IndexError):
    """Raised when a flattened grid index is outside the range of a grid function."""
