# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Vectorious — Dense Linear Algebra Kernels                           ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
Vectorious — dense linear algebra on typed, strided buffers.

Every BLAS-shaped kernel (axpy, dot, scal, nrm2, amax, gemv, gemm) has two
implementations: a native CBLAS routine, loaded through ``ctypes`` when a
library is found at import, and a portable pure-Python loop.  Containers
pick one per call through :mod:`vectorious.backends.dispatch`.

Usage::

    import vectorious as vs

    v = vs.Vector([1, 2, 3])
    w = vs.Vector.range(0, 1, 3, vs.float32)
    m = vs.Matrix([[1, 2], [3, 4]])
    m.multiply(vs.Vector([1, 1]))          # gemv
    vs.add(v, vs.Vector([1, 1, 1]))        # non-mutating free form

    vs.backends.blas.is_available()        # native path loaded?
"""
from __future__ import annotations

import logging as _logging

__version__ = "5.5.0"
__author__ = "Pictofeed, LLC"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# ── Dtype constants ──
from .dtype import dtype, float32, float64

# ── Errors ──
from .errors import (
    VectoriousError,
    InvalidArgument,
    InvalidSize,
    InvalidRange,
    ShapeMismatch,
    IndexOutOfBounds,
    SingularMatrix,
)

# ── Containers ──
from .storage import Storage
from .ndarray import NDArray
from .vector import Vector
from .matrix import Matrix

# ── Free-function forms ──
from .functional import (
    add, subtract, scale, normalize, project, combine,
    dot, angle, magnitude, equals, multiply, transpose,
)

# ── Sub-packages ──
from . import backends
from . import functional

__all__ = [
    "__version__",
    "__author__",
    # Dtypes
    'dtype', 'float32', 'float64',
    # Errors
    'VectoriousError', 'InvalidArgument', 'InvalidSize', 'InvalidRange',
    'ShapeMismatch', 'IndexOutOfBounds', 'SingularMatrix',
    # Containers
    'Storage', 'NDArray', 'Vector', 'Matrix',
    # Free functions
    'add', 'subtract', 'scale', 'normalize', 'project', 'combine',
    'dot', 'angle', 'magnitude', 'equals', 'multiply', 'transpose',
    # Sub-packages
    'backends', 'functional',
]
