# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the ground visibility circle."""
import ast
import math

import pytest

from globetrack.domain.bodies import OrbitingBody, get_profile
from globetrack.domain.visibility import (
    body_visibility_diameter_km,
    visibility_diameter_km,
    visibility_radius_km,
)


R_EARTH_KM = 6371.0


class TestVisibilityDiameter:

    def test_surface_at_horizon_is_zero(self):
        """Altitude 0, elevation 0: cos(alpha) is exactly 1."""
        assert visibility_diameter_km(0.0, 0.0) == 0.0

    def test_zenith_with_altitude_follows_formula(self):
        """Elevation 90°: cos(alpha) is about 6e-17, inside [-1, 1], so not the sentinel."""
        expected = 2 * R_EARTH_KM * math.acos(math.cos(math.pi / 2) * 6771.0 / R_EARTH_KM)
        assert visibility_diameter_km(400.0, 90.0) == pytest.approx(expected)
        assert visibility_diameter_km(400.0, 90.0) > 0.0

    def test_cos_alpha_below_minus_one_is_infeasible(self):
        """Elevation 180°: cos(alpha) = -r/R < -1 returns the sentinel."""
        assert visibility_diameter_km(400.0, 180.0) == 0.0

    def test_deep_negative_altitude_is_infeasible(self):
        assert visibility_diameter_km(-3.0 * R_EARTH_KM, 0.0) == 0.0

    def test_iss_altitude_at_ten_degrees_is_infeasible(self):
        """cos(10°)·6779/6371 ≈ 1.048 > 1."""
        assert visibility_diameter_km(408.0, 10.0) == 0.0

    def test_surface_zenith_is_half_circumference(self):
        """Altitude 0, elevation 90°: alpha = π/2."""
        assert visibility_diameter_km(0.0, 90.0) == pytest.approx(math.pi * R_EARTH_KM)

    def test_feasible_case_matches_formula(self):
        altitude, elevation = 408.0, 30.0
        cos_alpha = math.cos(math.radians(elevation)) * (R_EARTH_KM + altitude) / R_EARTH_KM
        expected = 2.0 * R_EARTH_KM * math.acos(cos_alpha)
        result = visibility_diameter_km(altitude, elevation)
        assert result == pytest.approx(expected)
        assert 4000.0 < result < 6000.0

    def test_feasibility_boundary(self):
        """Visibility starts once cos(elevation) drops to R / (R + h)."""
        altitude = 408.0
        limit_deg = math.degrees(math.acos(R_EARTH_KM / (R_EARTH_KM + altitude)))
        assert visibility_diameter_km(altitude, limit_deg - 0.01) == 0.0
        assert visibility_diameter_km(altitude, limit_deg + 0.01) > 0.0

    def test_never_exceeds_circumference(self):
        for altitude in (0.0, 400.0, 2000.0, 35786.0):
            for elevation in (0.0, 30.0, 60.0, 90.0):
                assert 0.0 <= visibility_diameter_km(altitude, elevation) <= 2 * math.pi * R_EARTH_KM

    def test_radius_is_half_diameter(self):
        assert visibility_radius_km(540.0, 45.0) == pytest.approx(
            visibility_diameter_km(540.0, 45.0) / 2.0
        )

    def test_body_uses_nominal_altitude(self):
        profile = get_profile(OrbitingBody.HST)
        assert body_visibility_diameter_km(OrbitingBody.HST, 50.0) == visibility_diameter_km(
            profile.altitude_km, 50.0
        )

    def test_body_by_name(self):
        assert body_visibility_diameter_km("iss", 40.0) == body_visibility_diameter_km(OrbitingBody.ISS, 40.0)

    def test_unknown_body_raises(self):
        with pytest.raises(ValueError):
            body_visibility_diameter_km("mir", 10.0)


class TestVisibilityPurity:

    def test_visibility_module_pure(self):
        """visibility.py must only import stdlib modules."""
        import globetrack.domain.visibility as mod

        allowed = {'math', 'dataclasses', 'typing', '__future__'}
        with open(mod.__file__) as f:
            tree = ast.parse(f.read())

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    root = alias.name.split('.')[0]
                    if root not in allowed and root != 'globetrack':
                        assert False, f"Disallowed import '{alias.name}'"
            if isinstance(node, ast.ImportFrom):
                if node.module and node.level == 0:
                    root = node.module.split('.')[0]
                    if root not in allowed and root != 'globetrack':
                        assert False, f"Disallowed import from '{node.module}'"
