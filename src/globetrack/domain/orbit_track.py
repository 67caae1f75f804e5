# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Per-frame orbit track orientation.

Ties the inclination correction and the composite rotation together:
given a body and its current sub-point, produce the transform for the
body's ring node. Nothing is cached between frames.
"""
from dataclasses import dataclass

from globetrack.domain.bodies import OrbitingBody, OrbitingBodyProfile, resolve_profile
from globetrack.domain.constants import GlobeConstants
from globetrack.domain.inclination_correction import corrected_inclination
from globetrack.domain.rotation import OrientationTransform, composite_rotation


@dataclass(frozen=True)
class GeodeticSample:
    """Sub-point of a body at one update tick."""
    lat_deg: float
    lon_deg: float
    heading_factor: float = 1.0

    def __post_init__(self) -> None:
        if self.heading_factor not in (-1.0, 1.0):
            raise ValueError(
                f"heading_factor must be +1 or -1, got {self.heading_factor}"
            )


def heading_factor(previous_lat_deg: float, current_lat_deg: float) -> float:
    """+1.0 while latitude is increasing or unchanged, -1.0 while decreasing."""
    return -1.0 if current_lat_deg < previous_lat_deg else 1.0


def scene_offsets(lat_deg: float, lon_deg: float) -> tuple[float, float]:
    """
    Convert a geodetic sub-point to the scene's rotation offsets.

    Longitude is shifted by -180° and latitude by +180°; the asymmetry
    matches the globe node's axis convention.

    Returns:
        (lon_offset_rad, lat_offset_rad)
    """
    adjusted_lat = lat_deg + GlobeConstants.ONE_EIGHTY_DEG
    adjusted_lon = lon_deg - GlobeConstants.ONE_EIGHTY_DEG
    return (
        adjusted_lon * GlobeConstants.DEG_TO_RAD,
        adjusted_lat * GlobeConstants.DEG_TO_RAD,
    )


def signed_inclination(profile: OrbitingBodyProfile, sample: GeodeticSample) -> float:
    """Corrected inclination with the heading factor applied."""
    return corrected_inclination(profile, sample.lat_deg) * sample.heading_factor


def orbit_track_transform(
    body_or_profile: OrbitingBody | str | OrbitingBodyProfile,
    sample: GeodeticSample,
) -> OrientationTransform:
    """
    Ring orientation for a body at the given sub-point.

    Args:
        body_or_profile: OrbitingBody, its short name, or a profile.
        sample: Current sub-point and heading.

    Raises:
        ValueError: If a body name is unknown.
    """
    profile = resolve_profile(body_or_profile)
    lon_offset_rad, lat_offset_rad = scene_offsets(sample.lat_deg, sample.lon_deg)
    return composite_rotation(
        signed_inclination(profile, sample),
        lon_offset_rad,
        lat_offset_rad,
    )


def update_orbit_track(
    node,
    body_or_profile: OrbitingBody | str | OrbitingBodyProfile,
    sample: GeodeticSample,
) -> OrientationTransform:
    """
    Compute the ring orientation and assign it to node.transform.

    The previous transform is replaced, never accumulated onto.
    """
    transform = orbit_track_transform(body_or_profile, sample)
    node.transform = transform
    return transform
