# -*- coding: utf-8 -*-
import numpy as np
from game_engine_math.math.vec3 import Vec3
from game_engine_math.math.mat3 import Mat3
from game_engine_math.math.quat import Quat

def test_vec3_ops():
    a = Vec3(1, 2, 3)
    b = Vec3(4, -1, 0)
    assert (a + b).to_list() == [5, 1, 3]
    assert (a - b).to_list() == [-3, 3, 3]
    assert (a * 2).to_list() == [2, 4, 6]

def test_mat3_identity():
    I = Mat3.identity()
    assert np.allclose(I.to_np(), np.eye(3))

def test_mat3_scale():
    M = Mat3.diagonal(1, 2, 3)
    res = M.to_np() @ np.array([1, 1, 1], dtype=np.float64)
    assert np.allclose(res, (M * Vec3(1, 1, 1)).as_np())

def test_quat_rotation():
    q = Quat.rotation(Vec3(0, 1, 0), np.radians(90))
    v = Vec3(1, 0, 0)
    rotated = (q * v * q.conjugate()).vector
    assert np.allclose(rotated.as_np(), np.array([0, 0, -1], dtype=np.float64)), rotated
