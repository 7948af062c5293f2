import math

import numpy as np
import pytest

from vslamcore.converter import (
    sim3_to_matrix,
    split_se3,
    to_descriptor_vector,
    to_matrix3d,
    to_quaternion,
    to_se3,
    to_vector3d,
)


def _rot_x(angle):
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[1, 0, 0], [0, c, -s], [0, s, c]])


def _rot_z(angle):
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]])


def _quat_to_matrix(q):
    x, y, z, w = q
    return np.array(
        [
            [1 - 2 * (y * y + z * z), 2 * (x * y - z * w), 2 * (x * z + y * w)],
            [2 * (x * y + z * w), 1 - 2 * (x * x + z * z), 2 * (y * z - x * w)],
            [2 * (x * z - y * w), 2 * (y * z + x * w), 1 - 2 * (x * x + y * y)],
        ]
    )


def test_descriptor_vector_splits_rows():
    desc = np.arange(12, dtype=np.uint8).reshape(3, 4)
    rows = to_descriptor_vector(desc)
    assert len(rows) == 3
    for i, row in enumerate(rows):
        assert np.array_equal(row, desc[i])


def test_descriptor_vector_rejects_flat_input():
    with pytest.raises(ValueError):
        to_descriptor_vector(np.zeros(5))


def test_se3_round_trip():
    r = _rot_z(0.3) @ _rot_x(-0.7)
    t = np.array([1.0, -2.0, 0.5])
    transform = to_se3(r, t)
    assert transform.dtype == np.float32
    assert np.allclose(transform[3], [0, 0, 0, 1])
    r2, t2 = split_se3(transform)
    assert np.allclose(r2, r, atol=1e-6)
    assert np.allclose(t2, t, atol=1e-6)


def test_to_se3_rejects_bad_translation():
    with pytest.raises(ValueError):
        to_se3(np.eye(3), [1.0, 2.0])


def test_sim3_scales_rotation_not_translation():
    r = _rot_z(1.1)
    t = np.array([0.2, 0.4, -1.0])
    m = sim3_to_matrix(r, t, 2.5)
    assert np.allclose(m[:3, :3], 2.5 * r, atol=1e-6)
    assert np.allclose(m[:3, 3], t, atol=1e-6)
    assert np.allclose(m[3], [0, 0, 0, 1])


def test_matrix3d_takes_upper_left_block():
    m = np.arange(16, dtype=np.float32).reshape(4, 4)
    assert np.array_equal(to_matrix3d(m), m[:3, :3].astype(np.float64))


def test_vector3d_accepts_column():
    v = np.array([[1.0], [2.0], [3.0]], dtype=np.float32)
    assert np.array_equal(to_vector3d(v), np.array([1.0, 2.0, 3.0]))


def test_vector3d_rejects_short_input():
    with pytest.raises(ValueError):
        to_vector3d([1.0, 2.0])


def test_quaternion_identity():
    assert to_quaternion(np.eye(3)) == [0.0, 0.0, 0.0, 1.0]


def test_quaternion_half_turn_about_z():
    q = to_quaternion(np.diag([-1.0, -1.0, 1.0]))
    assert np.allclose(q, [0.0, 0.0, 1.0, 0.0])


@pytest.mark.parametrize("angle", [0.2, 1.3, 2.9, -2.5])
def test_quaternion_reconstructs_rotation(angle):
    r = _rot_x(angle) @ _rot_z(angle / 2)
    q = to_quaternion(r)
    assert math.isclose(sum(c * c for c in q), 1.0, rel_tol=1e-5)
    assert np.allclose(_quat_to_matrix(q), r, atol=1e-5)