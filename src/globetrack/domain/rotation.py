# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Composite ring rotation.

Builds the orientation transform of an orbit track ring from three
elementary rotations about the scene axes:

    R1 — corrected inclination about Z
    R2 — longitude offset about Y
    R3 — latitude offset about X

combined as R1 · (R3 · R2). Matrix products are not commutative; the
order is fixed.

Matrices are 4×4 homogeneous transforms in row-vector convention
(v' = v · M), the layout scene graphs store node transforms in. There is
no translation component.
"""
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class OrientationTransform:
    """
    Homogeneous rotation transform for a ring node.

    The wrapped matrix is copied on construction and made read-only.
    """
    matrix: np.ndarray

    def __post_init__(self) -> None:
        m = np.array(self.matrix, dtype=np.float64)
        if m.shape != (4, 4):
            raise ValueError(f"Orientation transform must be 4x4, got shape {m.shape}")
        m.setflags(write=False)
        object.__setattr__(self, 'matrix', m)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrientationTransform):
            return NotImplemented
        return bool(np.array_equal(self.matrix, other.matrix))

    @classmethod
    def identity(cls) -> "OrientationTransform":
        return cls(np.eye(4))

    @property
    def rotation(self) -> np.ndarray:
        """Upper-left 3×3 rotation block."""
        return self.matrix[:3, :3]

    def apply(self, points: np.ndarray | list | tuple) -> np.ndarray:
        """
        Rotate one point (shape (3,)) or many points (shape (N, 3)).

        Points are treated as row vectors: p' = p · R.
        """
        pts = np.asarray(points, dtype=np.float64)
        if pts.shape[-1] != 3:
            raise ValueError(f"Points must have 3 components, got shape {pts.shape}")
        return pts @ self.rotation

    def is_rotation(self, atol: float = 1e-9) -> bool:
        """True if the 3×3 block is orthonormal with determinant +1."""
        r = self.rotation
        if not np.allclose(r @ r.T, np.eye(3), atol=atol):
            return False
        return bool(abs(np.linalg.det(r) - 1.0) <= atol)

    def to_nested(self) -> list[list[float]]:
        """Row-major list of lists, for renderers that do not take numpy arrays."""
        return [[float(v) for v in row] for row in self.matrix]


def rotation_x(angle_rad: float) -> np.ndarray:
    """4×4 rotation about the scene X axis."""
    c = np.cos(angle_rad)
    s = np.sin(angle_rad)
    m = np.eye(4)
    m[1, 1] = c
    m[1, 2] = s
    m[2, 1] = -s
    m[2, 2] = c
    return m


def rotation_y(angle_rad: float) -> np.ndarray:
    """4×4 rotation about the scene Y axis."""
    c = np.cos(angle_rad)
    s = np.sin(angle_rad)
    m = np.eye(4)
    m[0, 0] = c
    m[0, 2] = -s
    m[2, 0] = s
    m[2, 2] = c
    return m


def rotation_z(angle_rad: float) -> np.ndarray:
    """4×4 rotation about the scene Z axis."""
    c = np.cos(angle_rad)
    s = np.sin(angle_rad)
    m = np.eye(4)
    m[0, 0] = c
    m[0, 1] = s
    m[1, 0] = -s
    m[1, 1] = c
    return m


def composite_rotation(
    corrected_inclination_rad: float,
    lon_offset_rad: float,
    lat_offset_rad: float,
) -> OrientationTransform:
    """
    Orientation of an orbit track ring.

    Args:
        corrected_inclination_rad: Corrected inclination with the heading
            factor already applied.
        lon_offset_rad: Longitude in scene convention, (lon - 180°) in radians.
        lat_offset_rad: Latitude in scene convention, (lat + 180°) in radians.

    Returns:
        OrientationTransform equal to R1 · (R3 · R2). It replaces any
        previous transform on the ring node.
    """
    r1 = rotation_z(corrected_inclination_rad)
    r2 = rotation_y(lon_offset_rad)
    r3 = rotation_x(lat_offset_rad)

    first_product = r3 @ r2
    return OrientationTransform(r1 @ first_product)
