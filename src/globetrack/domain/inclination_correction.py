# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Latitude-dependent inclination correction for orbit track rings.

A ring tilted by the nominal inclination only looks right while the
sub-point is near the equator. The correction raises the nominal
inclination to a latitude-dependent exponent so the apparent tilt stays
stable as the sub-point moves toward its maximum latitude.

The exponent is computed in two stages:

    base  = π / multiplier + |lat|·(π/180) / inclination
    power = correction_powers[band(|lat|)]
    corrected = inclination ** (base ** power)

The band lookup is a step function over latitude, not an interpolation.
The constants are empirically tuned; the formula is kept exactly as is.
"""
import logging
import math

from globetrack.domain.bodies import OrbitingBodyProfile
from globetrack.domain.constants import GlobeConstants

logger = logging.getLogger(__name__)


def latitude_band(profile: OrbitingBodyProfile, abs_lat_deg: float) -> int:
    """
    Index of the latitude band containing abs_lat_deg.

    Linear scan of the ascending thresholds: the first threshold that
    abs_lat_deg does not exceed wins, so a threshold value belongs to the
    band below it. Latitudes above every threshold fall in the last band.
    """
    for index, threshold in enumerate(profile.latitude_thresholds_deg):
        if abs_lat_deg <= threshold:
            return index
    return len(profile.correction_powers) - 1


def select_correction_power(profile: OrbitingBodyProfile, abs_lat_deg: float) -> float:
    """Correction power for the latitude band containing abs_lat_deg."""
    return profile.correction_powers[latitude_band(profile, abs_lat_deg)]


def exponent_base(profile: OrbitingBodyProfile, abs_lat_deg: float) -> float:
    """First stage of the correction: grows linearly with |latitude|."""
    return (
        math.pi / profile.correction_multiplier
        + abs_lat_deg * GlobeConstants.DEG_TO_RAD / profile.inclination_rad
    )


def correction_exponent(profile: OrbitingBodyProfile, lat_deg: float) -> float:
    """
    Exponent applied to the nominal inclination at a given latitude.

    Args:
        profile: Body profile with the band table.
        lat_deg: Sub-point latitude in degrees (sign ignored).

    Returns:
        base ** power for the band containing |lat_deg|, or inf when that
        overflows a float.
    """
    abs_lat = abs(lat_deg)
    if abs_lat > GlobeConstants.MAX_ABS_LATITUDE_DEG:
        logger.warning(
            "Latitude %.4f deg is outside [-90, 90]; using the last correction band for %s",
            lat_deg,
            profile.name,
        )
    base = exponent_base(profile, abs_lat)
    power = select_correction_power(profile, abs_lat)
    try:
        return base ** power
    except OverflowError:
        return math.inf


def corrected_inclination(profile: OrbitingBodyProfile, lat_deg: float) -> float:
    """
    Corrected ring inclination in radians for the current sub-point latitude.

    The heading factor is not applied here; multiply the result by +1 or
    -1 for the body's current heading before composing the rotation.
    """
    try:
        return profile.inclination_rad ** correction_exponent(profile, lat_deg)
    except OverflowError:
        return math.inf
