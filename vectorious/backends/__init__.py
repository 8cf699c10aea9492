# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Vectorious — Dense Linear Algebra Kernels                           ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""vectorious.backends — Kernel sets and the dispatch policy."""
from __future__ import annotations

from . import portable
from . import blas
from . import dispatch

__all__ = ['portable', 'blas', 'dispatch']
