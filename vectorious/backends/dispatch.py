# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Vectorious — Dense Linear Algebra Kernels                           ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
vectorious.backends.dispatch — Kernel selection policy.

:func:`select_kernel` is a pure function of ``(dtype, op, accelerated)``:
the accelerated kernel set is used when it was injected, the dtype is one
of the float types and the set has an entry point for *op*; otherwise the
portable routine is returned.

Containers never consult the BLAS probe directly.  They go through the
active :class:`Dispatcher`, which holds the probe result and can be
swapped for tests::

    with use_portable():
        v.dot(w)            # always the Python loops
"""
from __future__ import annotations

import functools

from ..dtype import FLOAT_TYPES, dtype as Dtype
from . import blas
from .portable import PORTABLE

#: Operations that have (or may have) a native entry point.
ACCELERATED_OPS = frozenset({'axpy', 'dot', 'scal', 'nrm2', 'amax', 'gemv', 'gemm'})


def select_kernel(dtype: Dtype, op: str, accelerated=None):
    """Return the kernel that services *op* for *dtype*."""
    if accelerated is not None and dtype in FLOAT_TYPES and op in ACCELERATED_OPS:
        fn = accelerated.lookup(op, dtype)
        if fn is not None:
            return fn
    fn = PORTABLE.lookup(op, dtype)
    if fn is None:
        raise KeyError(f"no kernel named {op!r}")
    return fn


class Dispatcher:
    """Binds :func:`select_kernel` to an injected accelerated kernel set."""

    __slots__ = ('_accelerated',)

    def __init__(self, accelerated=None):
        self._accelerated = accelerated

    @property
    def accelerated(self):
        return self._accelerated

    def select(self, dtype: Dtype, op: str):
        return select_kernel(dtype, op, self._accelerated)

    def path(self, dtype: Dtype, op: str) -> str:
        """Name of the kernel set that would service *op* (for diagnostics)."""
        if self.select(dtype, op) is PORTABLE.lookup(op, dtype):
            return PORTABLE.name
        return self._accelerated.name

    def __repr__(self) -> str:
        return f"Dispatcher(accelerated={self._accelerated!r})"


_default = Dispatcher(blas.kernels())
_active = _default


def get_dispatcher() -> Dispatcher:
    return _active


def set_dispatcher(dispatcher: Dispatcher | None) -> None:
    """Install *dispatcher*; ``None`` restores the process default."""
    global _active
    _active = dispatcher if dispatcher is not None else _default


def default_dispatcher() -> Dispatcher:
    return _default


class use_dispatcher:
    """Context manager / decorator that activates a dispatcher temporarily."""

    def __init__(self, dispatcher: Dispatcher):
        self._dispatcher = dispatcher

    def __enter__(self):
        self._prev = _active
        set_dispatcher(self._dispatcher)
        return self._dispatcher

    def __exit__(self, *args):
        set_dispatcher(self._prev)

    def __call__(self, fn):
        @functools.wraps(fn)
        def wrapper(*a, **kw):
            with self:
                return fn(*a, **kw)
        return wrapper


class use_portable(use_dispatcher):
    """Force the portable kernel set for the duration of the block."""

    def __init__(self):
        super().__init__(Dispatcher(None))


def kernel(dtype: Dtype, op: str):
    """Select *op* for *dtype* through the active dispatcher."""
    return _active.select(dtype, op)


__all__ = [
    'ACCELERATED_OPS', 'select_kernel', 'Dispatcher',
    'get_dispatcher', 'set_dispatcher', 'default_dispatcher',
    'use_dispatcher', 'use_portable', 'kernel',
]
