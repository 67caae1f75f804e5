# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Ground visibility circle.

Diameter of the region on a spherical Earth from which an orbiting body
is seen above a minimum elevation angle. Infeasible geometry, where
cos(alpha) falls outside [-1, 1], returns 0.0 rather than raising.
"""
import math

from globetrack.domain.bodies import OrbitingBody, get_profile
from globetrack.domain.constants import GlobeConstants


def visibility_diameter_km(altitude_km: float, min_elevation_deg: float) -> float:
    """
    Visibility circle diameter along the ground.

    Args:
        altitude_km: Altitude of the body above the mean Earth radius.
        min_elevation_deg: Minimum elevation above the local horizon.

    Returns:
        Diameter in km, or 0.0 when cos(alpha) lies outside [-1, 1].
    """
    earth_radius_km = GlobeConstants.R_EARTH_KM
    sat_radius_km = earth_radius_km + altitude_km
    elevation_rad = min_elevation_deg * math.pi / 180.0

    # Central angle alpha
    cos_alpha = (math.cos(elevation_rad) * sat_radius_km) / earth_radius_km
    if cos_alpha > 1.0 or cos_alpha < -1.0:
        return 0.0

    alpha = math.acos(cos_alpha)
    arc_distance_km = earth_radius_km * alpha
    return 2.0 * arc_distance_km


def visibility_radius_km(altitude_km: float, min_elevation_deg: float) -> float:
    """Ground arc from the sub-point to the edge of the visibility circle."""
    return visibility_diameter_km(altitude_km, min_elevation_deg) / 2.0


def body_visibility_diameter_km(body: OrbitingBody | str, min_elevation_deg: float) -> float:
    """Visibility diameter for a built-in body at its nominal altitude."""
    profile = get_profile(body)
    return visibility_diameter_km(profile.altitude_km, min_elevation_deg)
