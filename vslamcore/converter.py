"""Conversions between pose matrices, vectors, quaternions and descriptor rows."""

from __future__ import annotations

import math

import numpy as np


def _as_matrix(value, rows: int, cols: int, name: str) -> np.ndarray:
    array = np.asarray(value, dtype=np.float64)
    if array.ndim != 2 or array.shape[0] < rows or array.shape[1] < cols:
        raise ValueError(f"{name} must be at least {rows}x{cols}, got shape {array.shape}")
    return array


def to_descriptor_vector(descriptors) -> list[np.ndarray]:
    """Split a descriptor matrix into a list of its rows."""
    array = np.asarray(descriptors)
    if array.ndim != 2:
        raise ValueError("descriptors must be a 2-D matrix")
    return [row for row in array]


def to_se3(rotation, translation) -> np.ndarray:
    """Build a 4x4 single-precision rigid transform from ``R`` and ``t``."""
    r = _as_matrix(rotation, 3, 3, "rotation")[:3, :3]
    t = np.asarray(translation, dtype=np.float64).reshape(-1)
    if t.size != 3:
        raise ValueError("translation must have three elements")
    transform = np.eye(4, dtype=np.float32)
    transform[:3, :3] = r
    transform[:3, 3] = t
    return transform


def split_se3(transform) -> tuple[np.ndarray, np.ndarray]:
    """Return the rotation (3x3) and translation (3,) of a 4x4 transform in double precision."""
    m = _as_matrix(transform, 3, 4, "transform")
    return m[:3, :3].copy(), m[:3, 3].copy()


def sim3_to_matrix(rotation, translation, scale: float) -> np.ndarray:
    """Build a 4x4 similarity transform ``[sR | t]``."""
    r = _as_matrix(rotation, 3, 3, "rotation")[:3, :3]
    return to_se3(scale * r, translation)


def to_matrix3d(matrix) -> np.ndarray:
    """Return the upper-left 3x3 block as a double-precision matrix."""
    return _as_matrix(matrix, 3, 3, "matrix")[:3, :3].copy()


def to_vector3d(vector) -> np.ndarray:
    """Return a 3-vector (from a point, row or column) in double precision."""
    v = np.asarray(vector, dtype=np.float64).reshape(-1)
    if v.size < 3:
        raise ValueError("vector must have at least three elements")
    return v[:3].copy()


def to_quaternion(matrix) -> list[float]:
    """Convert a rotation matrix into a quaternion ordered ``[x, y, z, w]``."""
    m = to_matrix3d(matrix)
    trace = m[0, 0] + m[1, 1] + m[2, 2]
    q = [0.0, 0.0, 0.0]
    if trace > 0.0:
        t = math.sqrt(trace + 1.0)
        w = 0.5 * t
        t = 0.5 / t
        q = [(m[2, 1] - m[1, 2]) * t, (m[0, 2] - m[2, 0]) * t, (m[1, 0] - m[0, 1]) * t]
    else:
        i = 0
        if m[1, 1] > m[0, 0]:
            i = 1
        if m[2, 2] > m[i, i]:
            i = 2
        j = (i + 1) % 3
        k = (j + 1) % 3
        t = math.sqrt(m[i, i] - m[j, j] - m[k, k] + 1.0)
        q[i] = 0.5 * t
        t = 0.5 / t
        w = (m[k, j] - m[j, k]) * t
        q[j] = (m[j, i] + m[i, j]) * t
        q[k] = (m[k, i] + m[i, k]) * t
    return [float(np.float32(value)) for value in (*q, w)]