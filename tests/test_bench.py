"""Micro-benchmarks for the dispatched kernels (``pytest --benchmark-only``)."""
import pytest

pytest.importorskip('pytest_benchmark')

from vectorious import Matrix, Vector

N = 2048


@pytest.fixture
def pair(rng):
    return Vector(rng.standard_normal(N)), Vector(rng.standard_normal(N))


def test_bench_dot(benchmark, kernel_path, pair):
    a, b = pair
    result = benchmark(a.dot, b)
    assert isinstance(result, float)


def test_bench_axpy(benchmark, kernel_path, pair):
    a, b = pair
    benchmark(a.add, b)
    assert a.length == N


def test_bench_nrm2(benchmark, kernel_path, pair):
    a, _ = pair
    assert benchmark(a.magnitude) > 0.0


def test_bench_gemm(benchmark, kernel_path, rng):
    a = Matrix(rng.standard_normal((24, 24)))
    b = Matrix(rng.standard_normal((24, 24)))
    c = benchmark(a.multiply, b)
    assert c.shape == (24, 24)
