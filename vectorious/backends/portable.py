# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Vectorious — Dense Linear Algebra Kernels                           ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
vectorious.backends.portable — Elementwise kernel set.

Straightforward per-element loops implementing the BLAS level-1/2/3
subset used by the containers.  This is the always-available fallback
and the only path for operations without a native entry point.

All routines take 1-D ``numpy.ndarray`` buffers (any stride) and iterate
index-ascending.  Arithmetic is done on Python floats, so IEEE special
values propagate silently instead of raising or warning.  Matrices are
flat row-major buffers.
"""
from __future__ import annotations

import math

import numpy as np


def axpy(n: int, alpha: float, x: np.ndarray, y: np.ndarray) -> None:
    """``y[i] += alpha * x[i]``"""
    alpha = float(alpha)
    for i in range(n):
        y[i] = float(y[i]) + alpha * float(x[i])


def dot(n: int, x: np.ndarray, y: np.ndarray) -> float:
    """Sum of pairwise products."""
    result = 0.0
    for i in range(n):
        result += float(x[i]) * float(y[i])
    return result


def scal(n: int, alpha: float, x: np.ndarray) -> None:
    """``x[i] *= alpha``"""
    alpha = float(alpha)
    for i in range(n):
        x[i] = float(x[i]) * alpha


def nrm2(n: int, x: np.ndarray) -> float:
    """Euclidean norm by plain accumulation of squares."""
    result = 0.0
    for i in range(n):
        v = float(x[i])
        result += v * v
    return math.sqrt(result)


def amax(n: int, x: np.ndarray) -> int:
    """Index of the largest ``|x[i]|``; ties go to the lowest index.

    Returns ``-1`` when ``n == 0``.
    """
    best = -1
    best_val = -1.0
    for i in range(n):
        v = abs(float(x[i]))
        # NaN compares false, so it is only picked when nothing else was
        if v > best_val or best < 0:
            best = i
            best_val = v
    return best


def gemv(m: int, n: int, alpha: float, a: np.ndarray, x: np.ndarray,
         beta: float, y: np.ndarray) -> None:
    """``y = alpha * A @ x + beta * y`` with A an m×n row-major buffer."""
    alpha = float(alpha)
    beta = float(beta)
    for i in range(m):
        acc = 0.0
        row = i * n
        for j in range(n):
            acc += float(a[row + j]) * float(x[j])
        y[i] = alpha * acc + (beta * float(y[i]) if beta != 0.0 else 0.0)


def gemm(m: int, n: int, k: int, alpha: float, a: np.ndarray, b: np.ndarray,
         beta: float, c: np.ndarray) -> None:
    """``C = alpha * A @ B + beta * C``; A is m×k, B is k×n, C is m×n."""
    alpha = float(alpha)
    beta = float(beta)
    for i in range(m):
        for j in range(n):
            acc = 0.0
            for p in range(k):
                acc += float(a[i * k + p]) * float(b[p * n + j])
            idx = i * n + j
            c[idx] = alpha * acc + (beta * float(c[idx]) if beta != 0.0 else 0.0)


# ──────────────────────────────────────────────────────────────────────
#  Kernel-set interface (see backends.dispatch)
# ──────────────────────────────────────────────────────────────────────

_KERNELS = {
    'axpy': axpy,
    'dot': dot,
    'scal': scal,
    'nrm2': nrm2,
    'amax': amax,
    'gemv': gemv,
    'gemm': gemm,
}


class PortableKernels:
    """Kernel set backed by the loops above; one routine serves every dtype."""

    name = 'portable'

    def lookup(self, op: str, dtype=None):
        return _KERNELS.get(op)

    def ops(self) -> frozenset[str]:
        return frozenset(_KERNELS)

    def __repr__(self) -> str:
        return "PortableKernels()"


PORTABLE = PortableKernels()


__all__ = ['axpy', 'dot', 'scal', 'nrm2', 'amax', 'gemv', 'gemm',
           'PortableKernels', 'PORTABLE']
