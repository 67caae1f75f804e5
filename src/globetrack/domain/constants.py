# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Globe and angle constants.

Shared by the orientation and visibility calculations.
"""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class _GlobeConstants:
    """Constants for the globe scene and spherical-Earth geometry."""
    R_EARTH_KM: float = 6371.0              # km — mean radius
    DEG_TO_RAD: float = math.pi / 180.0
    RAD_TO_DEG: float = 180.0 / math.pi
    ONE_EIGHTY_DEG: float = 180.0           # scene/geodetic convention bridge
    MAX_ABS_LATITUDE_DEG: float = 90.0


GlobeConstants: _GlobeConstants = _GlobeConstants()
