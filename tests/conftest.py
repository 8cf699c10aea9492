"""Shared fixtures: kernel-path parametrization and a fixed-seed RNG."""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest

from vectorious.backends import blas
from vectorious.backends.dispatch import Dispatcher, use_dispatcher


@pytest.fixture(params=['portable', 'blas'])
def kernel_path(request):
    """Run the test once per kernel set (blas skipped when not loaded)."""
    if request.param == 'blas':
        if not blas.is_available():
            pytest.skip("native BLAS not available")
        dispatcher = Dispatcher(blas.kernels())
    else:
        dispatcher = Dispatcher(None)
    with use_dispatcher(dispatcher):
        yield request.param


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


class ExplodingDispatcher(Dispatcher):
    """Fails the test if any kernel gets selected."""

    __slots__ = ()

    def select(self, dtype, op):
        raise AssertionError(f"kernel {op!r} was selected")


@pytest.fixture
def no_kernels():
    with use_dispatcher(ExplodingDispatcher(None)):
        yield
