# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Vectorious — Dense Linear Algebra Kernels                           ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""1-D vector container.

Usage::

    >>> from vectorious import Vector
    >>> v = Vector([1, 2, 3])
    >>> v.add(Vector([4, 5, 6])).scale(2)
    Vector([10.0, 14.0, 18.0], dtype=vectorious.float64)

Arithmetic methods mutate the receiver and return it so calls chain.  Use
the free functions in :mod:`vectorious.functional` (or the ``+``/``-``/``*``
operators) to leave operands untouched.
"""
from __future__ import annotations

import math
import numbers
from typing import Any, Iterator

import numpy as np

from .dtype import is_dtype_like, resolve as _resolve_dtype
from .errors import IndexOutOfBounds, InvalidArgument, InvalidRange
from .ndarray import NDArray, _ieee_div, _index
from .storage import Storage


class Vector(NDArray):
    """Dense 1-D vector of float32 or float64 elements.

    ``Vector(data)`` accepts:

    * a flat sequence of numbers: copied into a new buffer;
    * another container: copied (flattened);
    * a :class:`Storage` or a float ``numpy.ndarray``: **aliased**, no
      copy, so writes are shared with the source buffer;
    * ``None``: an empty vector.
    """

    __slots__ = ()

    def __init__(self, data: Any = None, dtype=None):
        if data is None:
            storage = Storage.zeros(0, dtype)
        elif isinstance(data, NDArray):
            storage = data._storage.astype(dtype or data.dtype)
        elif isinstance(data, Storage):
            storage = data if dtype is None or _resolve_dtype(dtype) is data.dtype \
                else data.astype(dtype)
        elif isinstance(data, np.ndarray):
            if dtype is not None and data.dtype != _resolve_dtype(dtype).to_numpy():
                storage = Storage.from_values(data.reshape(-1), dtype)
            elif data.ndim > 1:
                storage = Storage.wrap(np.ascontiguousarray(data))
            else:
                storage = Storage.wrap(data)
        else:
            storage = Storage.from_values(data, dtype)
        self._storage = storage
        self._shape = (storage.length,)

    # ------------------------------------------------------------------ #
    #  Factories                                                         #
    # ------------------------------------------------------------------ #

    @classmethod
    def from_values(cls, values, dtype=None) -> 'Vector':
        return cls._wrap(Storage.from_values(values, dtype), None)

    @classmethod
    def zeros(cls, count, dtype=None) -> 'Vector':
        return cls._wrap(Storage.zeros(count, dtype), None)

    @classmethod
    def ones(cls, count, dtype=None) -> 'Vector':
        return cls._wrap(Storage.ones(count, dtype), None)

    @classmethod
    def fill(cls, count, value: float, dtype=None) -> 'Vector':
        return cls._wrap(Storage.allocate(count, dtype, fill=value), None)

    @classmethod
    def range(cls, *args, dtype=None) -> 'Vector':
        """``range(start, [step,] end[, dtype])``.

        Produces ``start, start±step, ...`` up to but excluding ``end``.
        When ``end < start`` the sequence descends, e.g.
        ``range(5, 1, 0) -> [5, 4, 3, 2, 1]``.  ``step`` is a positive
        magnitude; the direction comes from the bounds.
        """
        args = list(args)
        if args and is_dtype_like(args[-1]):
            dtype = args.pop()
        if len(args) == 2:
            start, end = args
            step = 1
        elif len(args) == 3:
            start, step, end = args
        else:
            raise InvalidRange(f"range() takes 2 or 3 numbers, got {len(args)}")
        for value in (start, step, end):
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidRange(f"non-numeric range argument {value!r}")

        backwards = end < start
        lo, hi = (end, start) if backwards else (start, end)
        if step <= 0 or step > hi - lo:
            raise InvalidRange(f"invalid range ({start}, {step}, {end})")

        count = math.ceil((hi - lo) / step)
        storage = Storage.allocate(count, dtype)
        d = storage.data
        for j in range(count):
            d[j] = hi - j * step if backwards else lo + j * step
        return cls._wrap(storage, None)

    @classmethod
    def _wrap(cls, storage: Storage, shape=None) -> 'Vector':
        obj = cls.__new__(cls)
        obj._storage = storage
        obj._shape = (storage.length,)
        return obj

    # ------------------------------------------------------------------ #
    #  Element access                                                    #
    # ------------------------------------------------------------------ #

    def _check_index(self, index) -> int:
        index = _index(index)
        if index < 0 or index >= self.length:
            raise IndexOutOfBounds(index, self.length)
        return index

    def get(self, index) -> float:
        return float(self._storage.data[self._check_index(index)])

    def set(self, index, value) -> 'Vector':
        index = self._check_index(index)
        if not isinstance(value, numbers.Real):
            raise InvalidArgument(f"numeric value expected, got {value!r}")
        self._storage.data[index] = value
        return self

    def __getitem__(self, key):
        if isinstance(key, slice):
            return self.slice(key)
        return self.get(key)

    def __setitem__(self, key, value):
        self.set(key, value)

    def slice(self, key: slice) -> 'Vector':
        """Aliasing view for a forward slice (``v[1:5:2]``)."""
        start, stop, step = key.indices(self.length)
        if step < 1:
            raise InvalidArgument("only forward slices can be viewed")
        count = max(0, (stop - start + step - 1) // step)
        return Vector._wrap(self._storage.view(start, count, stride=step))

    def __iter__(self) -> Iterator[float]:
        d = self._storage.data
        for i in range(self.length):
            yield float(d[i])

    # ------------------------------------------------------------------ #
    #  Vector algebra                                                    #
    # ------------------------------------------------------------------ #

    def project(self, other: 'Vector') -> 'Vector':
        """Project the receiver onto *other*.

        Note the asymmetry: *other* is scaled in place by
        ``self.dot(other) / other.dot(other)`` and returned.  Use
        :func:`vectorious.functional.project` to keep *other* intact.
        """
        other = self._operand(other)
        factor = _ieee_div(self.dot(other), other.dot(other))
        return other.scale(factor)

    def angle(self, other: 'Vector') -> float:
        """Angle between the two vectors in radians.

        ``acos(dot / (|self| * |other|))``; NaN if either is zero.
        """
        other = self._operand(other)
        cos = _ieee_div(self.dot(other), self.magnitude() * other.magnitude())
        if not math.isnan(cos):
            cos = max(-1.0, min(1.0, cos))
        return math.acos(cos)

    def combine(self, other) -> 'Vector':
        """Append *other*, replacing the receiver's buffer.

        A new buffer of ``len(self) + len(other)`` is allocated, so a
        receiver that was a view no longer aliases its former source.
        """
        other = self._operand(other)
        l1 = self.length
        l2 = other.length
        storage = Storage.allocate(l1 + l2, self.dtype)
        r = storage.data
        a = self._storage.data
        b = other._storage.data
        for i in range(l1):
            r[i] = a[i]
        for j in range(l2):
            r[l1 + j] = b[j]
        self._storage = storage
        self._shape = (l1 + l2,)
        return self

    def push(self, value: float) -> 'Vector':
        return self.combine(Vector([value], dtype=self.dtype))

    def to_array(self) -> list:
        return self._storage.data.tolist()

    tolist = to_array
