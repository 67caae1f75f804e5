# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbiting body profiles.

Each supported body has one immutable profile holding its nominal
inclination and the empirically tuned latitude-band table used by the
inclination correction. Profiles are validated once, at construction;
per-frame code assumes a valid profile.

Built-in bodies:
    ISS — International Space Station (51.6°)
    TSS — Tiangong space station (41.5°)
    HST — Hubble Space Telescope (28.5°)
"""
import math
from dataclasses import dataclass
from enum import Enum

from globetrack.domain.constants import GlobeConstants


class ProfileConfigurationError(ValueError):
    """Raised when an orbiting body profile violates its invariants."""


GLOBE_RADIUS_SCENE = 5.0


def ring_radius_for_altitude(altitude_km: float) -> float:
    """Scene radius of an orbit ring for a body at the given altitude."""
    return GLOBE_RADIUS_SCENE * (GlobeConstants.R_EARTH_KM + altitude_km) / GlobeConstants.R_EARTH_KM


@dataclass(frozen=True)
class OrbitingBodyProfile:
    """
    Immutable orbital parameters for one orbiting body.

    Attributes:
        name: Display name.
        inclination_rad: Nominal orbital inclination in radians.
        correction_multiplier: Divisor in the correction exponent base.
        latitude_thresholds_deg: Strictly ascending band breakpoints in
            degrees, within [0, 90].
        correction_powers: One power per latitude band; one more entry
            than there are thresholds.
        ring_radius_scene: Ring radius in scene units (mesh builder only).
        ring_color: RGB colour of the ring (mesh builder only).
        altitude_km: Nominal altitude above the mean Earth radius.
    """
    name: str
    inclination_rad: float
    correction_multiplier: float
    latitude_thresholds_deg: tuple[float, ...]
    correction_powers: tuple[float, ...]
    ring_radius_scene: float
    ring_color: tuple[int, int, int]
    altitude_km: float = 0.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.inclination_rad) or self.inclination_rad <= 0.0:
            raise ProfileConfigurationError(
                f"{self.name}: inclination must be positive and finite, "
                f"got {self.inclination_rad}"
            )
        if not math.isfinite(self.correction_multiplier) or self.correction_multiplier <= 0.0:
            raise ProfileConfigurationError(
                f"{self.name}: correction multiplier must be positive and finite, "
                f"got {self.correction_multiplier}"
            )

        thresholds = self.latitude_thresholds_deg
        if len(thresholds) == 0:
            raise ProfileConfigurationError(f"{self.name}: at least one latitude threshold is required")
        if len(self.correction_powers) != len(thresholds) + 1:
            raise ProfileConfigurationError(
                f"{self.name}: expected {len(thresholds) + 1} correction powers "
                f"for {len(thresholds)} thresholds, got {len(self.correction_powers)}"
            )
        for lower, upper in zip(thresholds, thresholds[1:]):
            if upper <= lower:
                raise ProfileConfigurationError(
                    f"{self.name}: latitude thresholds must be strictly ascending "
                    f"({lower} then {upper})"
                )
        if thresholds[0] < 0.0 or thresholds[-1] > GlobeConstants.MAX_ABS_LATITUDE_DEG:
            raise ProfileConfigurationError(
                f"{self.name}: latitude thresholds must lie within [0, 90] degrees"
            )
        if not all(math.isfinite(p) for p in self.correction_powers):
            raise ProfileConfigurationError(f"{self.name}: correction powers must be finite")

    @property
    def inclination_deg(self) -> float:
        return self.inclination_rad * GlobeConstants.RAD_TO_DEG

    @property
    def band_count(self) -> int:
        return len(self.correction_powers)


class OrbitingBody(Enum):
    """Closed set of bodies with a built-in profile."""
    ISS = "iss"
    TSS = "tss"
    HST = "hst"

    @classmethod
    def from_name(cls, name: str) -> "OrbitingBody":
        """
        Look up a body by its short name, case-insensitively.

        Raises:
            ValueError: If no body has that name.
        """
        key = name.strip().lower()
        for body in cls:
            if body.value == key:
                return body
        known = ", ".join(b.value for b in cls)
        raise ValueError(f"Unknown orbiting body '{name}' (known: {known})")


_ISS_ALTITUDE_KM = 420.0
_TSS_ALTITUDE_KM = 390.0
_HST_ALTITUDE_KM = 540.0

BODY_PROFILES: dict[OrbitingBody, OrbitingBodyProfile] = {
    OrbitingBody.ISS: OrbitingBodyProfile(
        name="ISS",
        inclination_rad=51.6 * GlobeConstants.DEG_TO_RAD,
        correction_multiplier=3.84,
        latitude_thresholds_deg=(12.0, 17.0, 25.0, 33.0, 40.0, 45.0, 49.0, 51.0),
        correction_powers=(0.80, 0.85, 1.00, 1.25, 1.60, 2.00, 2.50, 3.20, 4.00),
        ring_radius_scene=ring_radius_for_altitude(_ISS_ALTITUDE_KM),
        ring_color=(237, 28, 36),
        altitude_km=_ISS_ALTITUDE_KM,
    ),
    OrbitingBody.TSS: OrbitingBodyProfile(
        name="Tiangong",
        inclination_rad=41.5 * GlobeConstants.DEG_TO_RAD,
        correction_multiplier=3.1,
        latitude_thresholds_deg=(15.0, 20.0, 25.0, 30.0, 35.0, 38.0, 40.0, 41.0, 41.5),
        correction_powers=(0.75, 0.85, 1.00, 1.20, 1.45, 1.70, 2.00, 2.30, 2.50, 2.80),
        ring_radius_scene=ring_radius_for_altitude(_TSS_ALTITUDE_KM),
        ring_color=(255, 196, 0),
        altitude_km=_TSS_ALTITUDE_KM,
    ),
    OrbitingBody.HST: OrbitingBodyProfile(
        name="Hubble",
        inclination_rad=28.5 * GlobeConstants.DEG_TO_RAD,
        correction_multiplier=2.3,
        latitude_thresholds_deg=(10.0, 15.0, 18.0, 20.0, 22.0, 24.0, 26.0, 27.0),
        correction_powers=(0.35, 0.50, 0.65, 0.80, 1.00, 1.30, 1.75, 2.10, 3.00),
        ring_radius_scene=ring_radius_for_altitude(_HST_ALTITUDE_KM),
        ring_color=(92, 160, 255),
        altitude_km=_HST_ALTITUDE_KM,
    ),
}


def get_profile(body: OrbitingBody | str) -> OrbitingBodyProfile:
    """
    Return the built-in profile for a body.

    Args:
        body: OrbitingBody member or its short name (e.g. 'iss').

    Raises:
        ValueError: If a name does not match any body.
        KeyError: If the body has no profile in the table.
    """
    if isinstance(body, str):
        body = OrbitingBody.from_name(body)
    try:
        return BODY_PROFILES[body]
    except KeyError:
        raise KeyError(f"No profile registered for {body!r}") from None


def resolve_profile(body_or_profile: "OrbitingBody | str | OrbitingBodyProfile") -> OrbitingBodyProfile:
    """Accept a profile as-is, otherwise look it up by body identity."""
    if isinstance(body_or_profile, OrbitingBodyProfile):
        return body_or_profile
    return get_profile(body_or_profile)
