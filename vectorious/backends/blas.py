# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Vectorious — Dense Linear Algebra Kernels                           ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
vectorious.backends.blas — Native CBLAS kernel adapter.

Loads a CBLAS shared library through ``ctypes`` (no compiled extension
required) and exposes the same kernel set as
:mod:`vectorious.backends.portable`, with distinct ``cblas_s*`` /
``cblas_d*`` entry points per element type.

Runtime detection logic
-----------------------
The probe runs once, at import:

1.  ``VECTORIOUS_NO_BLAS=1`` disables it entirely.
2.  ``VECTORIOUS_BLAS_LIB`` — explicit library path(s), ``os.pathsep``
    separated, tried first.
3.  System libraries found by :func:`ctypes.util.find_library`
    (OpenBLAS, CBLAS, BLAS, MKL, Accelerate).
4.  The OpenBLAS bundled inside the NumPy wheel, whose symbols carry a
    ``scipy_`` prefix and an ILP64 ``64_`` suffix.

A library is accepted once ``cblas_ddot`` resolves under one of the
known symbol styles.  Any individually missing routine simply has no
accelerated entry point.  Failure to find a library is not an error:
:func:`is_available` returns ``False`` and every call takes the portable
path.
"""
from __future__ import annotations

import ctypes
import ctypes.util
import glob
import logging
import os
import platform

import numpy as np

from ..dtype import dtype as Dtype

logger = logging.getLogger(__name__)

_CBLAS_ROW_MAJOR = 101
_CBLAS_NO_TRANS = 111

# (prefix, suffix, integer type)
_SYMBOL_STYLES = (
    ('', '', ctypes.c_int),
    ('scipy_', '64_', ctypes.c_int64),
    ('', '64_', ctypes.c_int64),
    ('scipy_', '', ctypes.c_int),
)

_SYSTEM_NAMES = ('openblas', 'cblas', 'blas', 'mkl_rt', 'Accelerate')

# ── Module-level caches ──
_lib: ctypes.CDLL | None = None
_lib_path: str | None = None
_kernels: 'BlasKernels | None' = None


# ──────────────────────────────────────────────────────────────────────
#  Library discovery
# ──────────────────────────────────────────────────────────────────────

def _numpy_bundled_paths() -> list[str]:
    """OpenBLAS copies vendored by NumPy wheels (``numpy.libs`` / ``.dylibs``)."""
    np_dir = os.path.dirname(np.__file__)
    patterns = [
        os.path.join(os.path.dirname(np_dir), 'numpy.libs', '*openblas*'),
        os.path.join(np_dir, '.dylibs', '*openblas*'),
        os.path.join(np_dir, '.libs', '*openblas*'),
    ]
    found: list[str] = []
    for pattern in patterns:
        found.extend(sorted(glob.glob(pattern)))
    return found


def _candidate_paths() -> list[str]:
    paths: list[str] = []
    hint = os.environ.get('VECTORIOUS_BLAS_LIB', '').strip()
    if hint:
        paths.extend(p.strip() for p in hint.split(os.pathsep) if p.strip())
    for name in _SYSTEM_NAMES:
        path = ctypes.util.find_library(name)
        if path:
            paths.append(path)
    if platform.system() == 'Darwin':
        paths.append(
            '/System/Library/Frameworks/Accelerate.framework/Accelerate')
    paths.extend(_numpy_bundled_paths())
    # de-duplicate, keep order
    seen: set[str] = set()
    return [p for p in paths if not (p in seen or seen.add(p))]


def _resolve_style(lib: ctypes.CDLL):
    for prefix, suffix, int_t in _SYMBOL_STYLES:
        if hasattr(lib, f'{prefix}cblas_ddot{suffix}'):
            return prefix, suffix, int_t
    return None


def _probe() -> 'BlasKernels | None':
    global _lib, _lib_path
    if os.environ.get('VECTORIOUS_NO_BLAS', '0') == '1':
        logger.debug("native BLAS disabled by VECTORIOUS_NO_BLAS")
        return None
    for path in _candidate_paths():
        try:
            lib = ctypes.CDLL(path)
        except OSError as exc:
            logger.debug("could not load %s: %s", path, exc)
            continue
        style = _resolve_style(lib)
        if style is None:
            logger.debug("%s has no CBLAS symbols", path)
            continue
        _lib, _lib_path = lib, path
        kernels = BlasKernels(lib, *style)
        logger.info("native BLAS loaded from %s (%d entry points)",
                    path, len(kernels.entries()))
        return kernels
    logger.debug("no native BLAS found; using portable kernels")
    return None


# ──────────────────────────────────────────────────────────────────────
#  Typed entry-point wrappers
# ──────────────────────────────────────────────────────────────────────

def _inc(arr: np.ndarray) -> int:
    return arr.strides[0] // arr.itemsize


class BlasKernels:
    """Kernel set whose routines call into a loaded CBLAS library."""

    name = 'blas'

    def __init__(self, lib: ctypes.CDLL, prefix: str = '', suffix: str = '',
                 int_t=ctypes.c_int):
        self._lib = lib
        self._prefix = prefix
        self._suffix = suffix
        self._int = int_t
        self._table: dict[tuple[str, Dtype], object] = {}
        for dt in (Dtype.float32, Dtype.float64):
            self._bind(dt)

    def _symbol(self, name: str):
        return getattr(self._lib, f'{self._prefix}cblas_{name}{self._suffix}', None)

    def _bind(self, dt: Dtype) -> None:
        p = dt.blas_prefix
        real = ctypes.c_float if dt is Dtype.float32 else ctypes.c_double
        I = self._int
        ptr = ctypes.c_void_p

        fn = self._symbol(f'{p}axpy')
        if fn is not None:
            fn.argtypes = [I, real, ptr, I, ptr, I]
            fn.restype = None

            def axpy(n, alpha, x, y, _fn=fn):
                _fn(n, alpha, x.ctypes.data, _inc(x), y.ctypes.data, _inc(y))
            self._table['axpy', dt] = axpy

        fn = self._symbol(f'{p}dot')
        if fn is not None:
            fn.argtypes = [I, ptr, I, ptr, I]
            fn.restype = real

            def dot(n, x, y, _fn=fn):
                return float(_fn(n, x.ctypes.data, _inc(x), y.ctypes.data, _inc(y)))
            self._table['dot', dt] = dot

        fn = self._symbol(f'{p}scal')
        if fn is not None:
            fn.argtypes = [I, real, ptr, I]
            fn.restype = None

            def scal(n, alpha, x, _fn=fn):
                _fn(n, alpha, x.ctypes.data, _inc(x))
            self._table['scal', dt] = scal

        fn = self._symbol(f'{p}nrm2')
        if fn is not None:
            fn.argtypes = [I, ptr, I]
            fn.restype = real

            def nrm2(n, x, _fn=fn):
                return float(_fn(n, x.ctypes.data, _inc(x)))
            self._table['nrm2', dt] = nrm2

        fn = self._symbol(f'i{p}amax')
        if fn is not None:
            fn.argtypes = [I, ptr, I]
            fn.restype = ctypes.c_size_t

            def amax(n, x, _fn=fn):
                if n == 0:
                    return -1
                return int(_fn(n, x.ctypes.data, _inc(x)))
            self._table['amax', dt] = amax

        fn = self._symbol(f'{p}gemv')
        if fn is not None:
            fn.argtypes = [ctypes.c_int, ctypes.c_int, I, I, real, ptr, I,
                           ptr, I, real, ptr, I]
            fn.restype = None

            def gemv(m, n, alpha, a, x, beta, y, _fn=fn):
                _fn(_CBLAS_ROW_MAJOR, _CBLAS_NO_TRANS, m, n, alpha,
                    a.ctypes.data, max(1, n), x.ctypes.data, _inc(x),
                    beta, y.ctypes.data, _inc(y))
            self._table['gemv', dt] = gemv

        fn = self._symbol(f'{p}gemm')
        if fn is not None:
            fn.argtypes = [ctypes.c_int, ctypes.c_int, ctypes.c_int, I, I, I,
                           real, ptr, I, ptr, I, real, ptr, I]
            fn.restype = None

            def gemm(m, n, k, alpha, a, b, beta, c, _fn=fn):
                _fn(_CBLAS_ROW_MAJOR, _CBLAS_NO_TRANS, _CBLAS_NO_TRANS,
                    m, n, k, alpha, a.ctypes.data, max(1, k),
                    b.ctypes.data, max(1, n), beta, c.ctypes.data, max(1, n))
            self._table['gemm', dt] = gemm

    def lookup(self, op: str, dtype: Dtype):
        return self._table.get((op, dtype))

    def entries(self) -> list[tuple[str, Dtype]]:
        return sorted(self._table, key=lambda e: (e[0], e[1].value))

    def ops(self) -> frozenset[str]:
        return frozenset(op for op, _ in self._table)

    def __repr__(self) -> str:
        return f"BlasKernels({_lib_path!r})"


# ──────────────────────────────────────────────────────────────────────
#  Public API
# ──────────────────────────────────────────────────────────────────────

def kernels() -> BlasKernels | None:
    """The accelerated kernel set, or ``None`` when no library loaded."""
    return _kernels


def is_available() -> bool:
    """Return ``True`` when a CBLAS library was loaded at import."""
    return _kernels is not None


def library_path() -> str | None:
    """Path of the loaded CBLAS library (``None`` when unavailable)."""
    return _lib_path


_kernels = _probe()


__all__ = ['BlasKernels', 'kernels', 'is_available', 'library_path']
