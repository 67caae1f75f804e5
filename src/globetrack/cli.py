# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for orbit track orientation.

Usage:
    # Ring orientation for a body at its current sub-point
    globetrack orientation --body iss --lat 40 --lon -75
    globetrack orientation --body hst --lat -12.5 --lon 130 --heading -1

    # Custom profile table
    globetrack orientation --body demo --lat 10 --lon 0 --profiles profiles.json

    # Ground visibility circle
    globetrack visibility --altitude 408 --min-elevation 30
    globetrack visibility --body iss --min-elevation 25

    # Built-in profiles
    globetrack bodies
"""
import argparse
import sys

from globetrack.adapters import JsonProfileReader
from globetrack.domain.bodies import BODY_PROFILES, OrbitingBodyProfile, get_profile
from globetrack.domain.inclination_correction import latitude_band
from globetrack.domain.orbit_track import GeodeticSample, orbit_track_transform, signed_inclination
from globetrack.domain.visibility import visibility_diameter_km


def load_profile(body: str, profiles_path: str | None = None) -> OrbitingBodyProfile:
    """
    Profile for a body name, preferring entries from a profile file.

    Raises:
        FileNotFoundError: If profiles_path does not exist.
        ValueError: If the body is unknown or the file is malformed.
    """
    if profiles_path is not None:
        profiles = JsonProfileReader().read_profiles(profiles_path)
        key = body.strip().lower()
        if key in profiles:
            return profiles[key]
    return get_profile(body)


def run_orientation(
    body: str,
    lat_deg: float,
    lon_deg: float,
    heading: float = 1.0,
    profiles_path: str | None = None,
) -> list[str]:
    """Report lines for the ring orientation of one body."""
    profile = load_profile(body, profiles_path)
    sample = GeodeticSample(lat_deg=lat_deg, lon_deg=lon_deg, heading_factor=heading)
    inclination = signed_inclination(profile, sample)
    transform = orbit_track_transform(profile, sample)

    lines = [
        f"{profile.name}: lat={lat_deg:.4f} lon={lon_deg:.4f} heading={heading:+.0f}",
        f"Latitude band: {latitude_band(profile, abs(lat_deg))} of {profile.band_count}",
        f"Corrected inclination: {inclination:.6f} rad",
        "Transform:",
    ]
    for row in transform.to_nested():
        lines.append("  " + " ".join(f"{v: .6f}" for v in row))
    return lines


def run_visibility(
    min_elevation_deg: float,
    altitude_km: float | None = None,
    body: str | None = None,
) -> list[str]:
    """Report lines for a visibility diameter, by altitude or by body."""
    if body is not None:
        profile = get_profile(body)
        altitude_km = profile.altitude_km
        label = f"{profile.name} ({altitude_km:.1f} km)"
    else:
        label = f"{altitude_km:.1f} km"

    diameter = visibility_diameter_km(altitude_km, min_elevation_deg)
    lines = [f"Visibility diameter for {label} above {min_elevation_deg:.1f} deg: {diameter:.1f} km"]
    if diameter == 0.0:
        lines.append("No visibility circle for this altitude and elevation.")
    return lines


def run_bodies() -> list[str]:
    """One line per built-in profile."""
    lines = []
    for body, profile in BODY_PROFILES.items():
        lines.append(
            f"{body.value:<4} {profile.name:<10} inc={profile.inclination_deg:.1f} deg "
            f"alt={profile.altitude_km:.0f} km bands={profile.band_count}"
        )
    return lines


def main():
    parser = argparse.ArgumentParser(
        description="Orbit track ring orientation and visibility for a 3D globe"
    )
    sub = parser.add_subparsers(dest='command', required=True)

    orient = sub.add_parser('orientation', help="Ring transform for a body's sub-point")
    orient.add_argument('--body', required=True, help="Body name (iss, tss, hst, or from --profiles)")
    orient.add_argument('--lat', type=float, required=True, help="Sub-point latitude in degrees")
    orient.add_argument('--lon', type=float, required=True, help="Sub-point longitude in degrees")
    orient.add_argument(
        '--heading', type=float, default=1.0, choices=[1.0, -1.0],
        help="+1 heading north, -1 heading south (default: +1)"
    )
    orient.add_argument('--profiles', help="JSON profile table overriding the built-in bodies")

    vis = sub.add_parser('visibility', help="Ground visibility circle diameter")
    source = vis.add_mutually_exclusive_group(required=True)
    source.add_argument('--altitude', type=float, help="Altitude in km")
    source.add_argument('--body', help="Use a built-in body's nominal altitude")
    vis.add_argument(
        '--min-elevation', type=float, default=10.0,
        help="Minimum elevation in degrees (default: 10)"
    )

    sub.add_parser('bodies', help="List built-in body profiles")

    args = parser.parse_args()

    try:
        if args.command == 'orientation':
            lines = run_orientation(
                body=args.body,
                lat_deg=args.lat,
                lon_deg=args.lon,
                heading=args.heading,
                profiles_path=args.profiles,
            )
        elif args.command == 'visibility':
            lines = run_visibility(
                min_elevation_deg=args.min_elevation,
                altitude_km=args.altitude,
                body=args.body,
            )
        else:
            lines = run_bodies()
        print("\n".join(lines))

    except FileNotFoundError as e:
        print(f"Error: profile file not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except (ValueError, KeyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
