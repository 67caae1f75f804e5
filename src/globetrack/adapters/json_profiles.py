# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON profile table reader.

File format — an object keyed by body name:

    {
      "iss": {
        "inclination_deg": 51.6,
        "correction_multiplier": 3.84,
        "latitude_thresholds_deg": [12, 17, 25, 33, 40, 45, 49, 51],
        "correction_powers": [0.8, 0.85, 1.0, 1.25, 1.6, 2.0, 2.5, 3.2, 4.0],
        "ring_radius_scene": 5.33,
        "ring_color": [237, 28, 36],
        "altitude_km": 420
      }
    }

"name" and "altitude_km" are optional. Profiles are validated as they
are built; a malformed entry raises ProfileConfigurationError naming
the offending body.
"""
import json
import logging
from typing import Any

from globetrack.domain.bodies import (
    OrbitingBody,
    OrbitingBodyProfile,
    ProfileConfigurationError,
)
from globetrack.domain.constants import GlobeConstants
from globetrack.ports import ProfileSource

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = (
    'inclination_deg',
    'correction_multiplier',
    'latitude_thresholds_deg',
    'correction_powers',
    'ring_radius_scene',
    'ring_color',
)

_BUILTIN_NAMES = frozenset(body.value for body in OrbitingBody)


def parse_profile(key: str, entry: dict[str, Any]) -> OrbitingBodyProfile:
    """
    Build a profile from one JSON entry.

    Raises:
        ProfileConfigurationError: Missing fields, wrong types, or a
            profile that violates its invariants.
    """
    if not isinstance(entry, dict):
        raise ProfileConfigurationError(
            f"Profile '{key}': expected an object, got {type(entry).__name__}"
        )
    missing = [f for f in _REQUIRED_FIELDS if f not in entry]
    if missing:
        raise ProfileConfigurationError(
            f"Profile '{key}': missing field(s) {', '.join(missing)}"
        )

    try:
        color = tuple(int(c) for c in entry['ring_color'])
        if len(color) != 3:
            raise ValueError(f"ring_color needs 3 components, got {len(color)}")
        return OrbitingBodyProfile(
            name=str(entry.get('name', key.upper())),
            inclination_rad=float(entry['inclination_deg']) * GlobeConstants.DEG_TO_RAD,
            correction_multiplier=float(entry['correction_multiplier']),
            latitude_thresholds_deg=tuple(float(t) for t in entry['latitude_thresholds_deg']),
            correction_powers=tuple(float(p) for p in entry['correction_powers']),
            ring_radius_scene=float(entry['ring_radius_scene']),
            ring_color=color,
            altitude_km=float(entry.get('altitude_km', 0.0)),
        )
    except (TypeError, ValueError) as e:
        raise ProfileConfigurationError(f"Profile '{key}': {e}") from e


class JsonProfileReader(ProfileSource):
    """Reads orbiting body profiles from JSON files."""

    def read_profiles(self, path: str) -> dict[str, OrbitingBodyProfile]:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ProfileConfigurationError(
                f"{path}: expected an object keyed by body name"
            )

        profiles: dict[str, OrbitingBodyProfile] = {}
        for raw_key, entry in data.items():
            key = raw_key.strip().lower()
            if key in _BUILTIN_NAMES:
                logger.warning("Profile file %s overrides built-in body '%s'", path, key)
            profiles[key] = parse_profile(key, entry)
        return profiles
