# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Vectorious — Dense Linear Algebra Kernels                           ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Exception hierarchy.

Every exception is raised synchronously at the violated precondition,
before any state is mutated.  Each also derives from the closest builtin
(``ValueError``, ``IndexError``, ``ArithmeticError``) so callers that
don't know about vectorious can still catch them.
"""
from __future__ import annotations


class VectoriousError(Exception):
    """Base class for all vectorious errors."""


class InvalidArgument(VectoriousError, ValueError):
    """Malformed construction input (not a flat/rectangular numeric sequence)."""


class InvalidSize(VectoriousError, ValueError):
    """Negative or non-integer element count."""


class InvalidRange(VectoriousError, ValueError):
    """Range parameters that cannot produce a sequence."""


class ShapeMismatch(VectoriousError, ValueError):
    """Operand shapes disagree."""

    def __init__(self, expected, got, op: str | None = None):
        self.expected = expected
        self.got = got
        where = f"{op}: " if op else ""
        super().__init__(f"{where}sizes do not match ({expected} vs {got})")


class IndexOutOfBounds(VectoriousError, IndexError):
    """Element access outside the container."""

    def __init__(self, index, bound):
        self.index = index
        self.bound = bound
        super().__init__(f"index {index} out of bounds for size {bound}")


class SingularMatrix(VectoriousError, ArithmeticError):
    """Matrix has no LU factorization with non-zero pivots."""


__all__ = [
    'VectoriousError', 'InvalidArgument', 'InvalidSize', 'InvalidRange',
    'ShapeMismatch', 'IndexOutOfBounds', 'SingularMatrix',
]
