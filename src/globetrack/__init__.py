"""
globetrack

Orientation of orbit track rings drawn around a rotating 3D globe.
Computes, once per update tick, the rotation that keeps a body's ring at
its orbital inclination while passing through the body's current
sub-point, plus the ground visibility circle diameter for a body at a
given altitude and minimum elevation.
"""

from globetrack.domain.constants import GlobeConstants
from globetrack.domain.bodies import (
    BODY_PROFILES,
    OrbitingBody,
    OrbitingBodyProfile,
    ProfileConfigurationError,
    get_profile,
    resolve_profile,
)
from globetrack.domain.inclination_correction import (
    correction_exponent,
    corrected_inclination,
    latitude_band,
    select_correction_power,
)
from globetrack.domain.rotation import (
    OrientationTransform,
    composite_rotation,
    rotation_x,
    rotation_y,
    rotation_z,
)
from globetrack.domain.orbit_track import (
    GeodeticSample,
    heading_factor,
    orbit_track_transform,
    scene_offsets,
    signed_inclination,
    update_orbit_track,
)
from globetrack.domain.visibility import (
    body_visibility_diameter_km,
    visibility_diameter_km,
    visibility_radius_km,
)

__version__ = "1.0.0"

__all__ = [
    "GlobeConstants",
    "BODY_PROFILES",
    "OrbitingBody",
    "OrbitingBodyProfile",
    "ProfileConfigurationError",
    "get_profile",
    "resolve_profile",
    "correction_exponent",
    "corrected_inclination",
    "latitude_band",
    "select_correction_power",
    "OrientationTransform",
    "composite_rotation",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "GeodeticSample",
    "heading_factor",
    "orbit_track_transform",
    "scene_offsets",
    "signed_inclination",
    "update_orbit_track",
    "body_visibility_diameter_km",
    "visibility_diameter_km",
    "visibility_radius_km",
]
