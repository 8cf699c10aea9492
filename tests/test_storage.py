import numpy as np
import pytest

import vectorious as vs
from vectorious.storage import Storage


def test_from_values_copies():
    values = [1, 2, 3]
    s = Storage.from_values(values)
    values[0] = 99
    assert s.length == 3
    assert s.dtype is vs.float64
    assert s.data.tolist() == [1.0, 2.0, 3.0]
    assert not s.is_view
    assert s.base is None


@pytest.mark.parametrize('bad', [[[1, 2], [3, 4]], "abc", [1, "a"], 5, None, [1, None]])
def test_from_values_rejects_non_flat(bad):
    with pytest.raises(vs.InvalidArgument):
        Storage.from_values(bad)


def test_from_values_rejects_2d_array():
    with pytest.raises(vs.InvalidArgument):
        Storage.from_values(np.zeros((2, 2)))


@pytest.mark.parametrize('count', [-1, 1.5, True, "3"])
def test_allocate_rejects_bad_count(count):
    with pytest.raises(vs.InvalidSize):
        Storage.zeros(count)


def test_zero_length_is_valid():
    s = Storage.ones(0, vs.float32)
    assert s.length == 0
    assert s.dtype is vs.float32


def test_view_aliases_owner():
    owner = Storage.from_values([0, 1, 2, 3, 4, 5])
    col = owner.view(1, 3, stride=2)
    assert col.data.tolist() == [1.0, 3.0, 5.0]
    col.data[0] = 9.0
    assert owner.data[1] == 9.0
    assert col.is_view
    assert col.base is owner
    assert (col.offset, col.stride) == (1, 2)
    assert col.shares_memory(owner)


def test_view_of_view_records_owner_relation():
    owner = Storage.from_values(list(range(10)))
    v = owner.view(1, 4, stride=2)          # 1, 3, 5, 7
    vv = v.view(1, 2, stride=2)             # 3, 7
    assert vv.data.tolist() == [3.0, 7.0]
    assert vv.base is owner
    assert vv.offset == 3
    assert vv.stride == 4


def test_view_out_of_bounds():
    owner = Storage.zeros(4)
    with pytest.raises(vs.IndexOutOfBounds):
        owner.view(2, 3)
    with pytest.raises(vs.IndexOutOfBounds):
        owner.view(0, 3, stride=2)


def test_astype_rematerializes():
    s = Storage.from_values([1.5, 2.5])
    t = s.astype(vs.float32)
    assert t.dtype is vs.float32
    assert not t.shares_memory(s)
    assert t.base is None


def test_wrap_aliases_float_arrays_and_copies_ints():
    arr = np.arange(4, dtype=np.float32)
    s = Storage.wrap(arr)
    s.data[0] = 7
    assert arr[0] == 7
    assert s.dtype is vs.float32

    ints = np.arange(3)
    t = Storage.wrap(ints)
    assert t.dtype is vs.float64
    assert not np.shares_memory(t.data, ints)


def test_contiguous():
    owner = Storage.from_values([1, 2, 3, 4])
    assert owner.contiguous() is owner
    strided = owner.view(0, 2, stride=2)
    compact = strided.contiguous()
    assert compact is not strided
    assert compact.data.tolist() == [1.0, 3.0]


@pytest.mark.parametrize('arr', [
    np.arange(3),
    np.zeros(3, dtype=np.float16),
    np.zeros(3, dtype='>f8'),
    np.array([True, False]),
])
def test_init_rejects_non_native_float_buffers(arr):
    with pytest.raises(vs.InvalidArgument):
        Storage(arr)


def test_init_rejects_reversed_buffer():
    with pytest.raises(vs.InvalidArgument):
        Storage(np.arange(4.0)[::-1])


def test_wrap_copies_reversed_arrays():
    arr = np.arange(1.0, 6.0)[::-1]
    s = Storage.wrap(arr)
    assert s.data.tolist() == [5.0, 4.0, 3.0, 2.0, 1.0]
    assert s.data.strides[0] == s.data.itemsize
    assert not np.shares_memory(s.data, arr)


def test_wrap_converts_half_and_big_endian_floats():
    for arr in (np.arange(3, dtype=np.float16), np.arange(3, dtype='>f8')):
        s = Storage.wrap(arr)
        assert s.dtype is vs.float64
        assert s.data.dtype == np.float64
        assert s.data.tolist() == [0.0, 1.0, 2.0]
