# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Vectorious — Dense Linear Algebra Kernels                           ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""N-dimensional array container and the shared container machinery.

:class:`NDArray` owns the operation contracts common to every container:
operands are validated first, the right-hand operand is re-materialized
into the receiver's dtype, then the kernel chosen by the active
dispatcher runs against the storage buffers.  Arithmetic mutates the
receiver and returns it.
"""
from __future__ import annotations

import math
import numbers
from typing import Any, Callable

import numpy as np

from .backends.dispatch import kernel
from .dtype import dtype as Dtype, resolve as _resolve_dtype
from .errors import IndexOutOfBounds, InvalidArgument, ShapeMismatch
from .storage import Storage


def _is_nested(value) -> bool:
    return isinstance(value, (list, tuple, np.ndarray))


def _flatten_nested(data) -> tuple[tuple[int, ...], list]:
    """Resolve the full static shape of a rectangular nested sequence."""
    if not _is_nested(data):
        raise InvalidArgument(f"expected a nested numeric sequence, got {type(data).__name__}")
    shape: list[int] = []
    level = [data]
    while level and _is_nested(level[0]):
        n = len(level[0])
        for item in level:
            if not _is_nested(item) or len(item) != n:
                raise InvalidArgument("ragged nested sequence")
        shape.append(n)
        level = [x for item in level for x in item]
    for v in level:
        if not isinstance(v, numbers.Real):
            raise InvalidArgument(f"expected numeric elements, found {v!r}")
    return tuple(shape), level


def _check_shape(shape) -> tuple[int, ...]:
    if isinstance(shape, numbers.Integral):
        shape = (shape,)
    shape = tuple(shape)
    if not shape:
        raise InvalidArgument("shape must have at least one axis")
    for n in shape:
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 0:
            raise InvalidArgument(f"invalid shape {shape}")
    return tuple(int(n) for n in shape)


def _ieee_div(a: float, b: float) -> float:
    """``a / b`` with IEEE semantics (inf / NaN instead of ZeroDivisionError)."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(a) / np.float64(b))


def _index(value) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"index must be an integer, got {value!r}")
    return int(value)


class NDArray:
    """Dense N-dimensional array over a :class:`Storage` buffer (row-major)."""

    __slots__ = ('_storage', '_shape')

    # ------------------------------------------------------------------ #
    #  Construction                                                      #
    # ------------------------------------------------------------------ #

    def __init__(self, data: Any = None, shape=None, dtype=None):
        if data is None:
            shape = _check_shape(shape) if shape is not None else (0,)
            storage = Storage.zeros(math.prod(shape), dtype)
        elif isinstance(data, NDArray):
            storage = data._storage.astype(dtype or data.dtype)
            shape = data._shape if shape is None else _check_shape(shape)
        elif isinstance(data, Storage):
            storage = data if dtype is None or _resolve_dtype(dtype) is data.dtype \
                else data.astype(dtype)
            shape = (data.length,) if shape is None else _check_shape(shape)
        elif isinstance(data, np.ndarray):
            arr = data
            if dtype is not None and arr.dtype != _resolve_dtype(dtype).to_numpy():
                arr = arr.astype(_resolve_dtype(dtype).to_numpy())
            elif arr.ndim > 1 and not arr.flags.c_contiguous:
                arr = np.ascontiguousarray(arr)
            storage = Storage.wrap(arr)
            shape = (arr.shape if arr.ndim else (1,)) if shape is None else _check_shape(shape)
        else:
            inferred, flat = _flatten_nested(data)
            storage = Storage.from_values(flat, dtype)
            shape = inferred if shape is None else _check_shape(shape)
        if math.prod(shape) != storage.length:
            raise ShapeMismatch(storage.length, shape, 'construct')
        self._storage: Storage = storage
        self._shape: tuple[int, ...] = tuple(shape)

    @classmethod
    def _wrap(cls, storage: Storage, shape) -> 'NDArray':
        obj = cls.__new__(cls)
        obj._storage = storage
        obj._shape = tuple(shape)
        return obj

    @classmethod
    def zeros(cls, shape, dtype=None) -> 'NDArray':
        shape = _check_shape(shape)
        return cls._wrap(Storage.zeros(math.prod(shape), dtype), shape)

    @classmethod
    def ones(cls, shape, dtype=None) -> 'NDArray':
        shape = _check_shape(shape)
        return cls._wrap(Storage.ones(math.prod(shape), dtype), shape)

    @classmethod
    def fill(cls, shape, value: float, dtype=None) -> 'NDArray':
        shape = _check_shape(shape)
        return cls._wrap(Storage.allocate(math.prod(shape), dtype, fill=value), shape)

    # ------------------------------------------------------------------ #
    #  Properties                                                        #
    # ------------------------------------------------------------------ #

    @property
    def storage(self) -> Storage:
        return self._storage

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def length(self) -> int:
        """Total number of elements."""
        return self._storage.length

    @property
    def dtype(self) -> Dtype:
        return self._storage.dtype

    @property
    def is_view(self) -> bool:
        return self._storage.is_view

    def shares_memory(self, other: 'NDArray') -> bool:
        return self._storage.shares_memory(other._storage)

    def __len__(self) -> int:
        return self._shape[0]

    # ------------------------------------------------------------------ #
    #  Operand helpers                                                   #
    # ------------------------------------------------------------------ #

    def _operand(self, other) -> 'NDArray':
        if isinstance(other, NDArray):
            return other
        return type(self)(other, dtype=self.dtype)

    def _require_same_shape(self, other: 'NDArray', op: str) -> None:
        if self._shape != other._shape:
            raise ShapeMismatch(self._shape, other._shape, op)

    def _rhs(self, other: 'NDArray') -> np.ndarray:
        """``other``'s buffer in the receiver's dtype.

        Copied when the dtype differs, or when it partially overlaps the
        receiver's buffer (e.g. two shifted slices of one vector), so every
        kernel reads the operand's values from before the call.
        """
        s = other._storage
        if s.dtype is not self._storage.dtype:
            return s.astype(self._storage.dtype).data
        rhs = s.data
        mine = self._storage.data
        if rhs is not mine and np.shares_memory(rhs, mine):
            return rhs.copy()
        return rhs

    def _flat_index(self, indices) -> int:
        if len(indices) != len(self._shape):
            raise InvalidArgument(
                f"expected {len(self._shape)} indices, got {len(indices)}")
        flat = 0
        for idx, size in zip(indices, self._shape):
            idx = _index(idx)
            if idx < 0 or idx >= size:
                raise IndexOutOfBounds(idx, size)
            flat = flat * size + idx
        return flat

    # ------------------------------------------------------------------ #
    #  Element access                                                    #
    # ------------------------------------------------------------------ #

    def get(self, *indices) -> float:
        return float(self._storage.data[self._flat_index(indices)])

    def set(self, *args) -> 'NDArray':
        """``set(i, j, ..., value)``; returns self."""
        if len(args) < 2:
            raise InvalidArgument("set() needs indices and a value")
        *indices, value = args
        if not isinstance(value, numbers.Real):
            raise InvalidArgument(f"numeric value expected, got {value!r}")
        self._storage.data[self._flat_index(indices)] = value
        return self

    def __getitem__(self, key):
        key = key if isinstance(key, tuple) else (key,)
        return self.get(*key)

    def __setitem__(self, key, value):
        key = key if isinstance(key, tuple) else (key,)
        self.set(*key, value)

    # ------------------------------------------------------------------ #
    #  Dispatched arithmetic                                             #
    # ------------------------------------------------------------------ #

    def _axpy(self, alpha: float, other, op: str) -> 'NDArray':
        other = self._operand(other)
        self._require_same_shape(other, op)
        n = self.length
        if n == 0:
            return self
        kernel(self.dtype, 'axpy')(n, alpha, self._rhs(other), self._storage.data)
        return self

    def add(self, other) -> 'NDArray':
        """Add *other* elementwise in place."""
        return self._axpy(1.0, other, 'add')

    def subtract(self, other) -> 'NDArray':
        """Subtract *other* elementwise in place."""
        return self._axpy(-1.0, other, 'subtract')

    def scale(self, scalar: float) -> 'NDArray':
        """Multiply every element by *scalar* in place."""
        if not isinstance(scalar, numbers.Real):
            raise InvalidArgument(f"scalar expected, got {scalar!r}")
        n = self.length
        if n:
            kernel(self.dtype, 'scal')(n, float(scalar), self._storage.data)
        return self

    def dot(self, other) -> float:
        """Sum of elementwise products (over the flattened buffers)."""
        other = self._operand(other)
        self._require_same_shape(other, 'dot')
        n = self.length
        if n == 0:
            return 0.0
        return kernel(self.dtype, 'dot')(n, self._storage.data, self._rhs(other))

    def magnitude(self) -> float:
        """Euclidean (L2) norm; 0 for an empty container."""
        n = self.length
        if n == 0:
            return 0.0
        return kernel(self.dtype, 'nrm2')(n, self._storage.data)

    def normalize(self) -> 'NDArray':
        """Divide by the magnitude in place.

        A zero-magnitude receiver ends up with inf/NaN elements; check
        :meth:`magnitude` first if that is not acceptable.
        """
        return self.scale(_ieee_div(1.0, self.magnitude()))

    def absmax_index(self) -> int:
        """Flat index of the largest-magnitude element (-1 when empty)."""
        return kernel(self.dtype, 'amax')(self.length, self._storage.data)

    # ------------------------------------------------------------------ #
    #  Portable operations                                               #
    # ------------------------------------------------------------------ #

    def equals(self, other) -> bool:
        """Exact elementwise equality; False when shapes differ."""
        if other is self:
            return True
        if not isinstance(other, NDArray) or self._shape != other._shape:
            return False
        a = self._storage.data
        b = other._storage.data
        for i in range(self.length):
            if a[i] != b[i]:
                return False
        return True

    def min(self) -> float:
        result = math.inf
        d = self._storage.data
        for i in range(self.length):
            v = float(d[i])
            if v < result:
                result = v
        return result

    def max(self) -> float:
        """True maximum (``-inf`` when empty) on every kernel path."""
        result = -math.inf
        d = self._storage.data
        for i in range(self.length):
            v = float(d[i])
            if v > result:
                result = v
        return result

    def sum(self) -> float:
        result = 0.0
        d = self._storage.data
        for i in range(self.length):
            result += float(d[i])
        return result

    def mean(self) -> float:
        return _ieee_div(self.sum(), self.length)

    def map(self, fn: Callable[[float], float]) -> 'NDArray':
        """Replace each element with ``fn(element)``, index-ascending."""
        d = self._storage.data
        for i in range(self.length):
            d[i] = fn(float(d[i]))
        return self

    def each(self, fn: Callable[[float, int], Any]) -> 'NDArray':
        """Call ``fn(element, flat_index)`` for every element; no mutation."""
        d = self._storage.data
        for i in range(self.length):
            fn(float(d[i]), i)
        return self

    def _ufunc(self, ufunc) -> 'NDArray':
        with np.errstate(all='ignore'):
            return self.map(ufunc)

    def abs(self): return self._ufunc(np.abs)
    def sqrt(self): return self._ufunc(np.sqrt)
    def exp(self): return self._ufunc(np.exp)
    def log(self): return self._ufunc(np.log)
    def sin(self): return self._ufunc(np.sin)
    def cos(self): return self._ufunc(np.cos)
    def tan(self): return self._ufunc(np.tan)
    def asin(self): return self._ufunc(np.arcsin)
    def acos(self): return self._ufunc(np.arccos)
    def atan(self): return self._ufunc(np.arctan)
    def sinh(self): return self._ufunc(np.sinh)
    def cosh(self): return self._ufunc(np.cosh)
    def tanh(self): return self._ufunc(np.tanh)
    def asinh(self): return self._ufunc(np.arcsinh)
    def acosh(self): return self._ufunc(np.arccosh)
    def atanh(self): return self._ufunc(np.arctanh)
    def square(self): return self._ufunc(np.square)
    def ceil(self): return self._ufunc(np.ceil)
    def floor(self): return self._ufunc(np.floor)
    def round(self): return self._ufunc(np.round)

    # ------------------------------------------------------------------ #
    #  Shape & copies                                                    #
    # ------------------------------------------------------------------ #

    def copy(self) -> 'NDArray':
        """Owning copy of the same container type."""
        return type(self)._wrap(self._storage.copy(), self._shape)

    def astype(self, dtype) -> 'NDArray':
        return type(self)._wrap(self._storage.astype(dtype), self._shape)

    def reshape(self, *shape) -> 'NDArray':
        """Aliasing view with a new shape (one axis may be ``-1``)."""
        if len(shape) == 1 and isinstance(shape[0], (tuple, list)):
            shape = tuple(shape[0])
        if list(shape).count(-1) == 1:
            known = math.prod(n for n in shape if n != -1)
            if known == 0 or self.length % known:
                raise ShapeMismatch(self.length, shape, 'reshape')
            shape = tuple(self.length // known if n == -1 else n for n in shape)
        shape = _check_shape(shape)
        if math.prod(shape) != self.length:
            raise ShapeMismatch(self.length, shape, 'reshape')
        return NDArray._wrap(self._storage, shape)

    def flatten(self) -> 'NDArray':
        """1-D Vector view over the same buffer."""
        from .vector import Vector
        return Vector._wrap(self._storage, (self.length,))

    def numpy(self) -> np.ndarray:
        return self._storage.data.reshape(self._shape).copy()

    def to_array(self) -> list:
        """Nested Python lists matching :attr:`shape`."""
        return self._storage.data.reshape(self._shape).tolist()

    tolist = to_array

    def to_string(self) -> str:
        d = self._storage.data

        def render(axis: int, offset: int) -> str:
            size = self._shape[axis]
            if axis == len(self._shape) - 1:
                return '[' + ', '.join(str(d[offset + i]) for i in range(size)) + ']'
            step = math.prod(self._shape[axis + 1:])
            return '[' + ', '.join(
                render(axis + 1, offset + i * step) for i in range(size)) + ']'

        return render(0, 0)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()}, dtype={self.dtype!r})"

    # ------------------------------------------------------------------ #
    #  Operators (non-mutating forms allocate from the left operand)     #
    # ------------------------------------------------------------------ #

    def __add__(self, other):
        return self.copy().add(other)

    def __iadd__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.copy().subtract(other)

    def __isub__(self, other):
        return self.subtract(other)

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.copy().scale(scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __imul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.scale(scalar)

    def __neg__(self):
        return self.copy().scale(-1.0)

    def __matmul__(self, other):
        return self.dot(other)
