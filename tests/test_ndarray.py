import math

import numpy as np
import pytest

import vectorious as vs
from vectorious import NDArray, Vector


def _cube():
    return NDArray([[[1, 2], [3, 4]], [[5, 6], [7, 8]]])


def test_nested_shape():
    a = _cube()
    assert a.shape == (2, 2, 2)
    assert a.ndim == 3
    assert a.length == 8
    assert a.get(1, 0, 1) == 6.0
    assert a[0, 1, 1] == 4.0


def test_explicit_shape():
    a = NDArray([1, 2, 3, 4, 5, 6], shape=(2, 3))
    assert a.to_array() == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
    with pytest.raises(vs.ShapeMismatch):
        NDArray([1, 2, 3], shape=(2, 2))


def test_ragged_rejected():
    with pytest.raises(vs.InvalidArgument):
        NDArray([[1, 2], [3, 4, 5]])
    with pytest.raises(vs.InvalidArgument):
        NDArray([[1, 2], 3])


def test_set_and_bounds():
    a = _cube()
    assert a.set(0, 0, 1, 20) is a
    assert a.get(0, 0, 1) == 20.0
    a[1, 1, 1] = -1
    assert a.get(1, 1, 1) == -1.0
    with pytest.raises(vs.IndexOutOfBounds):
        a.get(0, 2, 0)
    with pytest.raises(vs.IndexOutOfBounds):
        a.set(-1, 0, 0, 1.0)
    with pytest.raises(vs.InvalidArgument):
        a.get(0, 0)


def test_zeros_ones_fill():
    assert NDArray.zeros((2, 1, 2)).to_array() == [[[0.0, 0.0]], [[0.0, 0.0]]]
    assert NDArray.ones(3).to_array() == [1.0, 1.0, 1.0]
    assert NDArray.fill((1, 2), 7).to_array() == [[7.0, 7.0]]
    with pytest.raises(vs.InvalidArgument):
        NDArray.zeros((2, -1))


def test_reshape_is_view():
    a = NDArray([1, 2, 3, 4, 5, 6])
    b = a.reshape(2, 3)
    assert b.shape == (2, 3)
    b.set(1, 2, 60)
    assert a.get(5) == 60.0
    assert a.reshape((3, -1)).shape == (3, 2)
    assert a.reshape(-1, 1).shape == (6, 1)


@pytest.mark.parametrize('shape', [(4, 2), (-1, 4), (5,)])
def test_reshape_mismatch(shape):
    with pytest.raises(vs.ShapeMismatch):
        NDArray([1, 2, 3, 4, 5, 6]).reshape(*shape)


def test_flatten():
    flat = _cube().flatten()
    assert isinstance(flat, Vector)
    assert flat.to_array() == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]


def test_arithmetic(kernel_path):
    a = _cube()
    a.add(NDArray.ones((2, 2, 2))).scale(0.5)
    assert a.get(1, 1, 1) == 4.5
    with pytest.raises(vs.ShapeMismatch):
        a.add(NDArray.ones((2, 4)))
    assert _cube().dot(_cube()) == pytest.approx(204.0)
    assert NDArray([[3, 0], [0, 4]]).magnitude() == pytest.approx(5.0)


def test_reductions():
    a = _cube()
    assert a.sum() == 36.0
    assert a.mean() == 4.5
    assert a.min() == 1.0
    assert a.max() == 8.0
    assert math.isnan(NDArray.zeros(0).mean())


def test_math_maps():
    a = NDArray([[1, 4], [9, 16]])
    assert a.sqrt() is a
    assert a.to_array() == [[1.0, 2.0], [3.0, 4.0]]
    assert NDArray([-1.5, 2.5]).abs().to_array() == [1.5, 2.5]
    assert NDArray([1.2, -1.2]).floor().to_array() == [1.0, -2.0]
    assert NDArray([1.2, -1.2]).ceil().to_array() == [2.0, -1.0]
    assert NDArray([3.0]).square().to_array() == [9.0]
    np.testing.assert_allclose(NDArray([0.0, 1.0]).exp().to_array(), [1.0, math.e])
    np.testing.assert_allclose(NDArray([1.0]).acosh().to_array(), [0.0])


def test_domain_errors_are_nan():
    a = NDArray([-1.0, 2.0]).sqrt()
    assert math.isnan(a.get(0))
    assert math.isnan(NDArray([2.0]).acos().get(0))
    assert NDArray([0.0]).log().get(0) == -math.inf


def test_numpy_round_trip_copy():
    a = _cube()
    arr = a.numpy()
    assert arr.shape == (2, 2, 2)
    arr[0, 0, 0] = 100
    assert a.get(0, 0, 0) == 1.0


def test_to_string_nested():
    assert NDArray([[1, 2], [3, 4]]).to_string() == "[[1.0, 2.0], [3.0, 4.0]]"


def test_astype_and_copy():
    a = NDArray([[1, 2]])
    b = a.astype(vs.float32)
    assert b.dtype is vs.float32
    assert b.shape == (1, 2)
    c = a.copy()
    c.set(0, 0, 5)
    assert a.get(0, 0) == 1.0
    assert not c.shares_memory(a)
