# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Vectorious — Dense Linear Algebra Kernels                           ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Typed, strided, shared-buffer element storage.

A :class:`Storage` is a 1-D :class:`numpy.ndarray` of one of the two
supported float types plus its aliasing relation.  An *owning* storage has
``base is None``.  A *view* keeps a reference to the owning storage
together with the ``offset`` and ``stride`` (in elements) of the region it
covers, so the sharing relation can always be inspected::

    owner = Storage.from_values([1, 2, 3, 4, 5, 6])
    col = owner.view(1, 3, stride=2)      # elements 1, 3, 5
    col.data[0] = 9.0                     # owner.data[1] is now 9.0
    col.base is owner                     # True

Storage carries no arithmetic; containers and kernels operate on
``Storage.data`` directly.
"""
from __future__ import annotations

import numbers
from collections.abc import Iterable

import numpy as np

from .dtype import dtype as Dtype, resolve as _resolve_dtype
from .errors import IndexOutOfBounds, InvalidArgument, InvalidSize


def _check_count(count) -> int:
    if isinstance(count, (bool, np.bool_)) or not isinstance(count, numbers.Integral):
        raise InvalidSize(f"invalid size: {count!r}")
    if count < 0:
        raise InvalidSize(f"invalid size: {count}")
    return int(count)


def _flat_values(values) -> np.ndarray | list:
    """Return *values* if it is a flat sequence of reals, else raise."""
    if isinstance(values, np.ndarray):
        if values.ndim != 1 or values.dtype.kind not in 'biuf':
            raise InvalidArgument(
                f"expected a flat numeric array, got shape {values.shape} "
                f"of {values.dtype}")
        return values
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise InvalidArgument(f"expected a flat numeric sequence, got {type(values).__name__}")
    values = list(values)
    for v in values:
        if not isinstance(v, numbers.Real):
            raise InvalidArgument(f"expected a flat numeric sequence, found {v!r}")
    return values


_NATIVE_FLOATS = (np.dtype(np.float32), np.dtype(np.float64))


def _forward_strided(arr: np.ndarray) -> bool:
    """True when a 1-D array steps forward by whole elements."""
    if arr.shape[0] <= 1:
        return True
    step = arr.strides[0]
    return step > 0 and step % arr.itemsize == 0


class Storage:
    """Contiguous (or strided view of a contiguous) element buffer."""

    __slots__ = ('_data', '_dtype', '_base', '_offset', '_stride')

    def __init__(self, data: np.ndarray, base: 'Storage | None' = None,
                 offset: int = 0, stride: int = 1):
        if data.ndim != 1:
            raise InvalidArgument(f"storage must be 1-D, got shape {data.shape}")
        if data.dtype not in _NATIVE_FLOATS:
            raise InvalidArgument(
                f"storage buffer must be native float32 or float64, got {data.dtype}")
        if not _forward_strided(data):
            raise InvalidArgument(
                f"storage buffer needs a positive element stride, got {data.strides[0]} bytes")
        self._data: np.ndarray = data
        self._dtype: Dtype = Dtype.from_numpy(data.dtype)
        self._base: Storage | None = base
        self._offset: int = offset
        self._stride: int = stride

    # ------------------------------------------------------------------ #
    #  Allocation                                                         #
    # ------------------------------------------------------------------ #

    @classmethod
    def allocate(cls, count, dtype=None, fill: float | None = None) -> 'Storage':
        """Allocate an owning buffer of *count* elements."""
        n = _check_count(count)
        dt = _resolve_dtype(dtype).to_numpy()
        if fill is None:
            arr = np.empty(n, dtype=dt)
        else:
            arr = np.full(n, fill, dtype=dt)
        return cls(arr)

    @classmethod
    def zeros(cls, count, dtype=None) -> 'Storage':
        return cls.allocate(count, dtype, fill=0.0)

    @classmethod
    def ones(cls, count, dtype=None) -> 'Storage':
        return cls.allocate(count, dtype, fill=1.0)

    @classmethod
    def from_values(cls, values, dtype=None) -> 'Storage':
        """Copy a flat numeric sequence into a new owning buffer."""
        values = _flat_values(values)
        dt = _resolve_dtype(dtype).to_numpy()
        return cls(np.array(values, dtype=dt).reshape(-1))

    @classmethod
    def wrap(cls, arr: np.ndarray) -> 'Storage':
        """Alias an existing float32/float64 ndarray without copying.

        Other numeric arrays cannot be aliased and are copied into a
        ``float64`` buffer, as are 1-D arrays with reversed strides.
        Multi-dimensional arrays must be C-contiguous.
        """
        if arr.dtype not in (np.float32, np.float64):
            return cls.from_values(np.asarray(arr).reshape(-1), Dtype.float64)
        if arr.ndim != 1:
            if not arr.flags.c_contiguous:
                raise InvalidArgument("cannot alias a non-contiguous array")
            arr = arr.reshape(-1)
        elif not _forward_strided(arr):
            # CBLAS needs a forward stride in whole elements
            arr = np.ascontiguousarray(arr)
        return cls(arr)

    # ------------------------------------------------------------------ #
    #  Views & conversion                                                 #
    # ------------------------------------------------------------------ #

    def view(self, offset: int, length: int, stride: int = 1) -> 'Storage':
        """Return an aliasing storage over ``length`` elements.

        ``offset`` and ``stride`` are relative to this storage; the
        returned view records them relative to the owning storage.
        """
        length = _check_count(length)
        if stride < 1:
            raise InvalidArgument(f"stride must be positive, got {stride}")
        if offset < 0 or offset > len(self._data):
            raise IndexOutOfBounds(offset, len(self._data))
        if length:
            last = offset + (length - 1) * stride
            if last >= len(self._data):
                raise IndexOutOfBounds(last, len(self._data))
            data = self._data[offset:last + 1:stride]
        else:
            data = self._data[offset:offset]
        owner = self.owner
        return Storage(data, base=owner,
                       offset=self._offset + offset * self._stride,
                       stride=self._stride * stride)

    def astype(self, dtype) -> 'Storage':
        """Re-materialize into a new owning buffer of *dtype*."""
        dt = _resolve_dtype(dtype)
        return Storage(self._data.astype(dt.to_numpy(), copy=True))

    def copy(self) -> 'Storage':
        return Storage(self._data.copy())

    def contiguous(self) -> 'Storage':
        """Return self when unit-stride, else a compacted copy."""
        if self._data.flags.c_contiguous:
            return self
        return self.copy()

    def shares_memory(self, other: 'Storage') -> bool:
        return bool(np.shares_memory(self._data, other._data))

    # ------------------------------------------------------------------ #
    #  Properties                                                         #
    # ------------------------------------------------------------------ #

    @property
    def data(self) -> np.ndarray:
        return self._data

    @property
    def dtype(self) -> Dtype:
        return self._dtype

    @property
    def length(self) -> int:
        return self._data.shape[0]

    @property
    def base(self) -> 'Storage | None':
        return self._base

    @property
    def owner(self) -> 'Storage':
        """The storage that owns the underlying buffer."""
        return self._base if self._base is not None else self

    @property
    def is_view(self) -> bool:
        return self._base is not None

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def stride(self) -> int:
        return self._stride

    def __len__(self) -> int:
        return self._data.shape[0]

    def __repr__(self) -> str:
        if self._base is None:
            return f"Storage(length={self.length}, dtype={self._dtype!r})"
        return (f"Storage(length={self.length}, dtype={self._dtype!r}, "
                f"view offset={self._offset} stride={self._stride})")
