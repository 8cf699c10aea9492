# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Vectorious — Dense Linear Algebra Kernels                           ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""vectorious.functional — Non-mutating free-function forms.

Each function that corresponds to a mutating method first clones its
first argument, then delegates to the instance method, so the caller's
containers are left untouched::

    import vectorious.functional as F
    c = F.add(a, b)          # a and b unchanged
"""
from __future__ import annotations

from .ndarray import NDArray
from .vector import Vector
from .matrix import Matrix


def add(a: NDArray, b) -> NDArray:
    return a.copy().add(b)


def subtract(a: NDArray, b) -> NDArray:
    return a.copy().subtract(b)


def scale(a: NDArray, scalar: float) -> NDArray:
    return a.copy().scale(scalar)


def normalize(a: NDArray) -> NDArray:
    return a.copy().normalize()


def project(a: Vector, b: Vector) -> Vector:
    """Project *a* onto *b*; returns a new vector derived from a copy of *b*."""
    return a.project(b.copy())


def combine(a: Vector, b) -> Vector:
    return a.copy().combine(b)


def dot(a: NDArray, b) -> float:
    return a.dot(b)


def angle(a: Vector, b) -> float:
    return a.angle(b)


def magnitude(a: NDArray) -> float:
    return a.magnitude()


def equals(a: NDArray, b) -> bool:
    return a.equals(b)


def multiply(a: Matrix, b):
    return a.multiply(b)


def transpose(a: Matrix) -> Matrix:
    return a.transpose()


def map(a: NDArray, fn) -> NDArray:
    return a.copy().map(fn)


__all__ = [
    'add', 'subtract', 'scale', 'normalize', 'project', 'combine',
    'dot', 'angle', 'magnitude', 'equals', 'multiply', 'transpose', 'map',
]
