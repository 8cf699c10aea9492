import pytest

import vectorious as vs
import vectorious.functional as F
from vectorious import Matrix, Vector


def test_add_subtract_leave_operands_untouched():
    a = Vector([1, 2])
    b = Vector([3, 4])
    assert F.add(a, b).to_array() == [4.0, 6.0]
    assert vs.subtract(a, b).to_array() == [-2.0, -2.0]
    assert a.to_array() == [1.0, 2.0]
    assert b.to_array() == [3.0, 4.0]


def test_scale_and_normalize_clone():
    a = Vector([3, 4])
    assert vs.scale(a, 2).to_array() == [6.0, 8.0]
    n = vs.normalize(a)
    assert n.magnitude() == pytest.approx(1.0)
    assert a.to_array() == [3.0, 4.0]


def test_combine_clones_receiver():
    a = Vector([1, 2, 3])
    c = vs.combine(a, Vector([4, 5]))
    assert c.to_array() == [1.0, 2.0, 3.0, 4.0, 5.0]
    assert a.length == 3


def test_scalar_forms():
    a = Vector([1, 0])
    b = Vector([0, 2])
    assert vs.dot(a, b) == 0.0
    assert vs.magnitude(b) == pytest.approx(2.0)
    assert vs.angle(a, b) == pytest.approx(1.5707963267948966)
    assert vs.equals(a, Vector([1, 0]))


def test_matrix_forms():
    m = Matrix([[1, 2], [3, 4]])
    assert vs.multiply(m, Vector([1, 0])).to_array() == pytest.approx([1.0, 3.0])
    assert vs.transpose(m).to_array() == [[1.0, 3.0], [2.0, 4.0]]
    assert m.to_array() == [[1.0, 2.0], [3.0, 4.0]]


def test_map_clones():
    a = Vector([1, 2])
    assert F.map(a, lambda x: x + 1).to_array() == [2.0, 3.0]
    assert a.to_array() == [1.0, 2.0]


def test_free_functions_validate_shapes():
    with pytest.raises(vs.ShapeMismatch):
        vs.add(Vector([1]), Vector([1, 2]))
