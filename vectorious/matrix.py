# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Vectorious — Dense Linear Algebra Kernels                           ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""2-D row-major matrix container.

Element ``(r, c)`` lives at flat index ``r * columns + c``.  Products go
through the ``gemm`` / ``gemv`` kernels selected by the dispatcher; the
LU family (:meth:`Matrix.lu`, :meth:`Matrix.solve`, :meth:`Matrix.inverse`,
:meth:`Matrix.determinant`) runs on the portable path only.
"""
from __future__ import annotations

import numbers
from typing import Any

from .backends.dispatch import kernel
from .errors import IndexOutOfBounds, InvalidArgument, ShapeMismatch, SingularMatrix
from .ndarray import NDArray, _index
from .storage import Storage
from .vector import Vector


def _shape2(rows, columns) -> tuple[int, int]:
    for n in (rows, columns):
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 0:
            raise InvalidArgument(f"invalid matrix shape ({rows}, {columns})")
    return int(rows), int(columns)


class Matrix(NDArray):
    """Dense ``rows × columns`` matrix.

    ``Matrix(data)`` accepts nested rows (copied; must be rectangular),
    another container (copied), a 2-D float ``numpy.ndarray`` (aliased), or
    a :class:`Storage` / flat sequence together with ``shape=(r, c)``.
    """

    __slots__ = ()

    def __init__(self, data: Any = None, shape=None, dtype=None):
        if data is None and shape is None:
            shape = (0, 0)
        super().__init__(data, shape=shape, dtype=dtype)
        if len(self._shape) == 1 and shape is None:
            # a flat list is a single row
            self._shape = (1, self._shape[0])
        if len(self._shape) != 2:
            raise InvalidArgument(f"matrix must be 2-D, got shape {self._shape}")

    # ------------------------------------------------------------------ #
    #  Factories                                                         #
    # ------------------------------------------------------------------ #

    @classmethod
    def zeros(cls, rows, columns, dtype=None) -> 'Matrix':
        r, c = _shape2(rows, columns)
        return cls._wrap(Storage.zeros(r * c, dtype), (r, c))

    @classmethod
    def ones(cls, rows, columns, dtype=None) -> 'Matrix':
        r, c = _shape2(rows, columns)
        return cls._wrap(Storage.ones(r * c, dtype), (r, c))

    @classmethod
    def fill(cls, rows, columns, value: float, dtype=None) -> 'Matrix':
        r, c = _shape2(rows, columns)
        return cls._wrap(Storage.allocate(r * c, dtype, fill=value), (r, c))

    @classmethod
    def identity(cls, size, dtype=None) -> 'Matrix':
        m = cls.zeros(size, size, dtype)
        d = m._storage.data
        for i in range(m.rows):
            d[i * size + i] = 1.0
        return m

    @classmethod
    def from_values(cls, rows, dtype=None) -> 'Matrix':
        return cls(rows, dtype=dtype)

    # ------------------------------------------------------------------ #
    #  Shape & element access                                            #
    # ------------------------------------------------------------------ #

    @property
    def rows(self) -> int:
        return self._shape[0]

    @property
    def columns(self) -> int:
        return self._shape[1]

    def is_square(self) -> bool:
        return self._shape[0] == self._shape[1]

    def _offset(self, row, column) -> int:
        row = _index(row)
        column = _index(column)
        if row < 0 or row >= self.rows:
            raise IndexOutOfBounds(row, self.rows)
        if column < 0 or column >= self.columns:
            raise IndexOutOfBounds(column, self.columns)
        return row * self.columns + column

    def get(self, row, column) -> float:
        return float(self._storage.data[self._offset(row, column)])

    def set(self, row, column, value) -> 'Matrix':
        offset = self._offset(row, column)
        if not isinstance(value, numbers.Real):
            raise InvalidArgument(f"numeric value expected, got {value!r}")
        self._storage.data[offset] = value
        return self

    def __getitem__(self, key):
        if isinstance(key, tuple):
            return self.get(*key)
        return self.row(key)

    def __setitem__(self, key, value):
        """``m[r, c] = x`` sets one element; ``m[r] = values`` copies a row."""
        if isinstance(key, tuple):
            self.set(*key, value)
            return
        row = self.row(key)
        values = row._operand(value)
        row._require_same_shape(values, 'setitem')
        row._storage.data[:] = row._rhs(values)

    def row(self, index) -> Vector:
        """Row *index* as a Vector view (writes go to the matrix)."""
        index = _index(index)
        if index < 0 or index >= self.rows:
            raise IndexOutOfBounds(index, self.rows)
        return Vector._wrap(self._storage.view(index * self.columns, self.columns))

    def column(self, index) -> Vector:
        """Column *index* as a strided Vector view."""
        index = _index(index)
        if index < 0 or index >= self.columns:
            raise IndexOutOfBounds(index, self.columns)
        return Vector._wrap(
            self._storage.view(index, self.rows, stride=self.columns))

    def diagonal(self) -> Vector:
        """Main diagonal as a strided Vector view."""
        n = min(self.rows, self.columns)
        return Vector._wrap(self._storage.view(0, n, stride=self.columns + 1))

    # ------------------------------------------------------------------ #
    #  Products                                                          #
    # ------------------------------------------------------------------ #

    def multiply(self, other):
        """Matrix product; returns a new Matrix (or Vector for a Vector operand)."""
        if isinstance(other, Vector):
            return self._gemv(other)
        other = self._operand(other)
        if not isinstance(other, Matrix):
            other = Matrix(other, dtype=self.dtype)
        if self.columns != other.rows:
            raise ShapeMismatch(self.columns, other.rows, 'multiply')
        m, k, n = self.rows, self.columns, other.columns
        result = Matrix.zeros(m, n, self.dtype)
        if m and n and k:
            a = self._storage.contiguous().data
            b = other._storage.contiguous()
            if b.dtype is not self.dtype:
                b = b.astype(self.dtype)
            kernel(self.dtype, 'gemm')(m, n, k, 1.0, a, b.data, 0.0,
                                       result._storage.data)
        return result

    def _gemv(self, vector: Vector) -> Vector:
        if self.columns != vector.length:
            raise ShapeMismatch(self.columns, vector.length, 'multiply')
        m, n = self.rows, self.columns
        result = Vector.zeros(m, self.dtype)
        if m and n:
            a = self._storage.contiguous().data
            kernel(self.dtype, 'gemv')(m, n, 1.0, a, self._rhs(vector), 0.0,
                                       result._storage.data)
        return result

    def __matmul__(self, other):
        return self.multiply(other)

    def transpose(self) -> 'Matrix':
        """Allocating transpose."""
        r, c = self._shape
        result = Matrix.zeros(c, r, self.dtype)
        src = self._storage.data
        dst = result._storage.data
        for i in range(r):
            for j in range(c):
                dst[j * r + i] = src[i * c + j]
        return result

    @property
    def T(self) -> 'Matrix':
        return self.transpose()

    def trace(self) -> float:
        self._require_square('trace')
        d = self._storage.data
        n = self.rows
        result = 0.0
        for i in range(n):
            result += float(d[i * n + i])
        return result

    # ------------------------------------------------------------------ #
    #  LU decomposition                                                  #
    # ------------------------------------------------------------------ #

    def _require_square(self, op: str) -> None:
        if not self.is_square():
            raise ShapeMismatch(self.rows, self.columns, op)

    def lu(self) -> tuple['Matrix', 'Matrix', list[int]]:
        """LU decomposition with partial pivoting: ``P·A = L·U``.

        Returns ``(L, U, perm)`` where ``perm[i]`` is the row of ``A`` that
        ended up in row ``i``.  ``L`` is unit lower triangular.  Singular
        input is factored anyway (``U`` gets a zero on its diagonal).
        """
        self._require_square('lu')
        n = self.rows
        lu = [[float(x) for x in row] for row in self.to_array()]
        perm = list(range(n))
        for k in range(n):
            pivot = max(range(k, n), key=lambda i: abs(lu[i][k]))
            if pivot != k:
                lu[k], lu[pivot] = lu[pivot], lu[k]
                perm[k], perm[pivot] = perm[pivot], perm[k]
            if lu[k][k] == 0.0:
                continue
            for i in range(k + 1, n):
                factor = lu[i][k] / lu[k][k]
                lu[i][k] = factor
                for j in range(k + 1, n):
                    lu[i][j] -= factor * lu[k][j]
        lower = Matrix.identity(n, self.dtype)
        upper = Matrix.zeros(n, n, self.dtype)
        for i in range(n):
            for j in range(n):
                if j < i:
                    lower.set(i, j, lu[i][j])
                else:
                    upper.set(i, j, lu[i][j])
        return lower, upper, perm

    def determinant(self) -> float:
        lower, upper, perm = self.lu()
        det = 1.0
        for i in range(self.rows):
            det *= upper.get(i, i)
        # permutation parity
        seen = [False] * len(perm)
        for i in range(len(perm)):
            if seen[i]:
                continue
            j, cycle = i, 0
            while not seen[j]:
                seen[j] = True
                j = perm[j]
                cycle += 1
            if cycle % 2 == 0:
                det = -det
        return det

    def solve(self, b):
        """Solve ``A·x = b`` for a Vector or Matrix right-hand side."""
        self._require_square('solve')
        n = self.rows
        if isinstance(b, Vector):
            if b.length != n:
                raise ShapeMismatch(n, b.length, 'solve')
            columns = [b.to_array()]
        else:
            b = b if isinstance(b, Matrix) else Matrix(b, dtype=self.dtype)
            if b.rows != n:
                raise ShapeMismatch(n, b.rows, 'solve')
            columns = [b.column(j).to_array() for j in range(b.columns)]
        lower, upper, perm = self.lu()
        L, U = lower.to_array(), upper.to_array()
        for i in range(n):
            if U[i][i] == 0.0:
                raise SingularMatrix("matrix is singular")

        solutions = []
        for rhs in columns:
            y = [0.0] * n
            for i in range(n):
                acc = float(rhs[perm[i]])
                for j in range(i):
                    acc -= L[i][j] * y[j]
                y[i] = acc
            x = [0.0] * n
            for i in reversed(range(n)):
                acc = y[i]
                for j in range(i + 1, n):
                    acc -= U[i][j] * x[j]
                x[i] = acc / U[i][i]
            solutions.append(x)

        if isinstance(b, Vector):
            return Vector(solutions[0], dtype=self.dtype)
        result = Matrix.zeros(n, len(solutions), self.dtype)
        for j, x in enumerate(solutions):
            for i in range(n):
                result.set(i, j, x[i])
        return result

    def inverse(self) -> 'Matrix':
        self._require_square('inverse')
        return self.solve(Matrix.identity(self.rows, self.dtype))
