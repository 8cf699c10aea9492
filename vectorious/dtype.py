# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Vectorious — Dense Linear Algebra Kernels                           ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Element type definitions for container storage."""
from __future__ import annotations

import enum
import numpy as np

from .errors import InvalidArgument


class dtype(enum.Enum):
    """Vectorious element types — 32- and 64-bit IEEE floats."""
    float32 = "float32"
    float64 = "float64"

    def to_numpy(self) -> np.dtype:
        """Convert to numpy dtype."""
        return np.dtype(self.value)

    @property
    def itemsize(self) -> int:
        return self.to_numpy().itemsize

    @property
    def blas_prefix(self) -> str:
        """BLAS routine prefix (``s`` or ``d``)."""
        return 's' if self is dtype.float32 else 'd'

    @staticmethod
    def from_numpy(np_dtype: np.dtype) -> 'dtype':
        """Convert numpy dtype to vectorious dtype.

        Integer and boolean inputs are materialized as ``float64``.
        """
        np_dtype = np.dtype(np_dtype)
        if np_dtype == np.float32:
            return dtype.float32
        if np_dtype == np.float64:
            return dtype.float64
        if np_dtype.kind in 'biuf':
            return dtype.float64
        raise InvalidArgument(f"unsupported element type: {np_dtype}")

    def __repr__(self) -> str:
        return f"vectorious.{self.name}"


def resolve(value) -> dtype:
    """Normalize ``None`` / str / numpy dtype / :class:`dtype` to a dtype."""
    if value is None:
        return dtype.float64
    if isinstance(value, dtype):
        return value
    if isinstance(value, str):
        try:
            return dtype(value)
        except ValueError:
            raise InvalidArgument(f"unsupported element type: {value!r}") from None
    try:
        return dtype.from_numpy(value)
    except TypeError:
        raise InvalidArgument(f"unsupported element type: {value!r}") from None


def is_dtype_like(value) -> bool:
    """True for values accepted as a trailing element-type argument."""
    if isinstance(value, dtype):
        return True
    if isinstance(value, str):
        return value in (dtype.float32.value, dtype.float64.value)
    if isinstance(value, type) and issubclass(value, np.floating):
        return True
    return isinstance(value, np.dtype)


# Convenience aliases (vectorious.float32, vectorious.float64)
float32 = dtype.float32
float64 = dtype.float64

FLOAT_TYPES = frozenset({dtype.float32, dtype.float64})
