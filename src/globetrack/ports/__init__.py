# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for profile configuration and scene nodes.

Adapters implement these to load profile tables from different sources;
renderers supply objects satisfying TransformTarget.
"""
from typing import Any, Protocol, runtime_checkable

from globetrack.domain.bodies import OrbitingBodyProfile


@runtime_checkable
class ProfileSource(Protocol):
    """Port for reading orbiting body profiles at startup."""

    def read_profiles(self, path: str) -> dict[str, OrbitingBodyProfile]:
        """Read profiles keyed by lower-case body name."""
        ...


@runtime_checkable
class TransformTarget(Protocol):
    """Scene node whose transform is replaced every frame."""

    transform: Any
