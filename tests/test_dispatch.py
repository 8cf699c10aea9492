import pytest

import vectorious as vs
from vectorious.backends import blas, portable
from vectorious.backends.dispatch import (
    ACCELERATED_OPS, Dispatcher, default_dispatcher, get_dispatcher,
    select_kernel, set_dispatcher, use_dispatcher, use_portable,
)


def _fake_dot(n, x, y):
    return 42.0


class FakeKernels:
    """Accelerated set that only provides ``dot`` for float64."""

    name = 'fake'

    def lookup(self, op, dtype):
        if op == 'dot' and dtype is vs.float64:
            return _fake_dot
        return None


def test_portable_without_accelerator():
    for op in ACCELERATED_OPS:
        assert select_kernel(vs.float64, op, None) is getattr(portable, op)


def test_accelerated_entry_point_wins():
    fake = FakeKernels()
    assert select_kernel(vs.float64, 'dot', fake) is _fake_dot


def test_missing_entry_point_falls_back():
    fake = FakeKernels()
    assert select_kernel(vs.float32, 'dot', fake) is portable.dot
    assert select_kernel(vs.float64, 'axpy', fake) is portable.axpy


def test_unknown_op():
    with pytest.raises(KeyError):
        select_kernel(vs.float64, 'map', None)


def test_dispatcher_path_names():
    d = Dispatcher(FakeKernels())
    assert d.path(vs.float64, 'dot') == 'fake'
    assert d.path(vs.float64, 'nrm2') == 'portable'
    assert Dispatcher(None).path(vs.float64, 'dot') == 'portable'


def test_containers_route_through_active_dispatcher():
    a = vs.Vector([1, 2])
    b = vs.Vector([3, 4])
    with use_dispatcher(Dispatcher(FakeKernels())):
        assert a.dot(b) == 42.0
        # float32 receiver has no fake entry point
        assert a.astype(vs.float32).dot(b) == 11.0
    assert a.dot(b) == pytest.approx(11.0)


def test_use_portable_restores_previous():
    before = get_dispatcher()
    with use_portable() as d:
        assert get_dispatcher() is d
        assert d.accelerated is None
    assert get_dispatcher() is before


def test_use_portable_as_decorator():
    @use_portable()
    def inner():
        return get_dispatcher().accelerated

    assert inner() is None


def test_set_dispatcher_none_restores_default():
    set_dispatcher(Dispatcher(None))
    try:
        assert get_dispatcher() is not default_dispatcher()
    finally:
        set_dispatcher(None)
    assert get_dispatcher() is default_dispatcher()


def test_default_dispatcher_reflects_probe():
    assert default_dispatcher().accelerated is blas.kernels()
    assert isinstance(blas.is_available(), bool)


def test_empty_operands_never_reach_a_kernel(no_kernels):
    a = vs.Vector.zeros(0)
    b = vs.Vector.ones(0)
    assert a.add(b) is a
    assert a.subtract(b) is a
    assert a.length == 0
    assert a.magnitude() == 0.0
