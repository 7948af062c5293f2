"""Plane detection among map points and the plane frames that virtual objects rest on.

Map points are duck-typed: anything with a ``world_pos`` (3 coordinates),
an integer ``observations`` count and a boolean ``is_bad`` flag will do.
"""

from __future__ import annotations

import math
import random
from typing import Optional, Sequence

import numpy as np

_EPS = 1e-4
_HALF_TURN = 3.14 / 2
_UP = np.array([0.0, 1.0, 0.0])
_MIN_OBSERVATIONS = 5
_MIN_POINTS = 50


def _skew(x: float, y: float, z: float) -> np.ndarray:
    return np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])


def exp_so3(x: float, y: float, z: float) -> np.ndarray:
    """Rotation matrix of the axis-angle vector ``(x, y, z)``."""
    identity = np.eye(3)
    d2 = x * x + y * y + z * z
    d = math.sqrt(d2)
    w = _skew(x, y, z)
    if d < _EPS:
        return identity + w + 0.5 * (w @ w)
    return identity + w * math.sin(d) / d + (w @ w) * (1.0 - math.cos(d)) / d2


def exp_so3_vector(v) -> np.ndarray:
    """Rotation matrix of an axis-angle vector given as a sequence or array."""
    values = np.asarray(v, dtype=np.float64).reshape(-1)
    if values.size < 3:
        raise ValueError("axis-angle vector must have three elements")
    return exp_so3(float(values[0]), float(values[1]), float(values[2]))


def _random_rang(rng: Optional[random.Random]) -> float:
    source = rng if rng is not None else random
    return source.uniform(-_HALF_TURN, _HALF_TURN)


class Plane:
    """A plane fitted to map points, with a frame whose y axis is the plane normal."""

    def __init__(self, map_points: Sequence, tcw, rang: Optional[float] = None,
                 rng: Optional[random.Random] = None) -> None:
        pose = np.array(tcw, dtype=np.float64, copy=True)
        if pose.ndim != 2 or pose.shape[0] < 3 or pose.shape[1] < 4:
            raise ValueError("camera pose must be at least 3x4")
        self.map_points = list(map_points)
        self.tcw: Optional[np.ndarray] = pose
        self.rang = float(rang) if rang is not None else _random_rang(rng)
        self.xc: Optional[np.ndarray] = None
        self.normal = np.zeros(3)
        self.origin = np.zeros(3)
        self.tpw = np.eye(4)
        self.recompute()

    @classmethod
    def from_normal(cls, normal, origin, rang: Optional[float] = None) -> "Plane":
        """Build a plane directly from a normal and an origin, without map points."""
        plane = cls.__new__(cls)
        plane.map_points = []
        plane.tcw = None
        plane.xc = None
        plane.rang = float(rang) if rang is not None else _random_rang(None)
        n = np.asarray(normal, dtype=np.float64).reshape(-1)
        o = np.asarray(origin, dtype=np.float64).reshape(-1)
        if n.size != 3 or o.size != 3:
            raise ValueError("normal and origin must have three elements")
        plane._set_frame(n.copy(), o.copy())
        return plane

    def recompute(self) -> None:
        """Refit the plane to all map points that are still good."""
        if self.tcw is None or not self.map_points:
            raise ValueError("plane has no supporting map points")
        positions = [
            np.asarray(point.world_pos, dtype=np.float64).reshape(-1)[:3]
            for point in self.map_points
            if not point.is_bad
        ]
        if not positions:
            raise ValueError("no good map points left to fit the plane")
        points = np.vstack(positions)
        design = np.hstack([points, np.ones((len(points), 1))])
        _, _, vt = np.linalg.svd(design, full_matrices=True)
        abc = vt[3, :3].copy()
        norm = float(np.linalg.norm(abc))
        if norm == 0.0:
            raise ValueError("map points do not define a plane")
        origin = points.mean(axis=0)

        if self.xc is None:
            rotation = self.tcw[:3, :3]
            translation = self.tcw[:3, 3]
            camera_centre = -rotation.T @ translation
            self.xc = camera_centre - origin

        if float(self.xc @ abc) > 0:
            abc = -abc
        self._set_frame(abc / norm, origin)

    def _set_frame(self, normal: np.ndarray, origin: np.ndarray) -> None:
        self.normal = normal
        self.origin = origin
        v = np.cross(_UP, normal)
        sa = float(np.linalg.norm(v))
        ca = float(_UP @ normal)
        angle = math.atan2(sa, ca)
        if sa > 0.0:
            axis = v * angle / sa
        elif ca >= 0.0:
            axis = np.zeros(3)
        else:
            axis = np.array([math.pi, 0.0, 0.0])
        tpw = np.eye(4)
        tpw[:3, :3] = exp_so3_vector(axis) @ exp_so3_vector(_UP * self.rang)
        tpw[:3, 3] = origin
        self.tpw = tpw

    def gl_matrix(self) -> tuple[float, ...]:
        """The plane transform as 16 values in column-major order."""
        return tuple(float(value) for value in self.tpw.flatten(order="F"))


def detect_plane(camera_pose, map_points: Sequence, iterations: int = 50,
                 rng: Optional[random.Random] = None) -> Optional[Plane]:
    """Find the dominant plane among well-observed map points by RANSAC.

    Returns ``None`` when fewer than 50 points have more than five observations.
    """
    if iterations < 1:
        raise ValueError("iterations must be at least 1")
    rng = rng if rng is not None else random.Random()
    eligible = [
        point for point in map_points
        if point is not None and point.observations > _MIN_OBSERVATIONS
    ]
    n = len(eligible)
    if n < _MIN_POINTS:
        return None

    points = np.vstack([
        np.asarray(point.world_pos, dtype=np.float64).reshape(-1)[:3] for point in eligible
    ])
    nth = max(int(0.2 * n), 20)
    best_dist = 1e10
    best_distances: Optional[np.ndarray] = None

    for _ in range(iterations):
        chosen = rng.sample(range(n), 3)
        design = np.hstack([points[chosen], np.ones((3, 1))])
        _, _, vt = np.linalg.svd(design, full_matrices=True)
        a, b, c, d = vt[3]
        f = 1.0 / math.sqrt(a * a + b * b + c * c + d * d)
        distances = np.abs(points @ np.array([a, b, c]) + d) * f
        median = float(np.sort(distances)[nth])
        if median < best_dist:
            best_dist = median
            best_distances = distances

    if best_distances is None:
        return None
    threshold = 1.4 * best_dist
    inliers = [point for point, dist in zip(eligible, best_distances) if dist < threshold]
    return Plane(inliers, camera_pose, rng=rng)