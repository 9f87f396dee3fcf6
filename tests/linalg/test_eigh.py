"""
Tests for Hessenberg reduction and the Hermitian eigensolver.
"""

import numpy as np
import pytest

from pydecomp.core.exceptions import NotHermitianError
from pydecomp.core.compute.linalg.eigh import eigh, hessenberg


EPS = 1e-12


def _max_residual(a, values, vectors):
    return np.max(np.abs(a @ vectors - vectors * values))


# ═══════════════════════════════════════════════════════════════════════
# Hessenberg reduction
# ═══════════════════════════════════════════════════════════════════════


class TestHessenberg:

    def test_general_matrix(self, rng):
        a = rng.standard_normal((5, 5))
        h, q = hessenberg(a, eps=EPS)
        np.testing.assert_allclose(np.tril(h, -2), 0.0, atol=EPS)
        np.testing.assert_allclose(q @ q.T, np.eye(5), atol=1e-9)
        np.testing.assert_allclose(q @ h @ q.T, a, atol=1e-9)

    def test_symmetric_becomes_tridiagonal(self, spd_3x3):
        h, q = hessenberg(spd_3x3, eps=EPS)
        assert h[2, 0] == 0.0
        np.testing.assert_allclose(h[0, 2], 0.0, atol=1e-9)
        np.testing.assert_allclose(q @ h @ q.T, spd_3x3, atol=1e-9)

    def test_complex(self, hermitian_3x3):
        h, q = hessenberg(hermitian_3x3, eps=EPS)
        np.testing.assert_allclose(q @ h @ q.conj().T, hermitian_3x3, atol=1e-9)

    def test_one_by_one(self):
        h, q = hessenberg(np.array([[7.0]]), eps=EPS)
        np.testing.assert_array_equal(h, [[7.0]])
        np.testing.assert_array_equal(q, [[1.0]])


# ═══════════════════════════════════════════════════════════════════════
# Eigendecomposition
# ═══════════════════════════════════════════════════════════════════════


class TestEigh:

    def test_two_by_two(self):
        a = np.array([[2.0, 1.0], [1.0, 2.0]])
        result = eigh(a, eps=EPS, max_iter=1000)
        assert result.converged
        np.testing.assert_allclose(np.sort(result.eigenvalues), [1.0, 3.0], atol=1e-6)
        assert _max_residual(a, result.eigenvalues, result.eigenvectors) < 1e-5

    def test_matches_numpy(self, spd_3x3):
        result = eigh(spd_3x3, eps=EPS, max_iter=1000)
        np.testing.assert_allclose(
            np.sort(result.eigenvalues), np.linalg.eigvalsh(spd_3x3), rtol=1e-6, atol=1e-6,
        )
        assert _max_residual(spd_3x3, result.eigenvalues, result.eigenvectors) < 1e-4

    def test_complex_hermitian(self, hermitian_3x3):
        result = eigh(hermitian_3x3, eps=EPS, max_iter=500)
        assert result.eigenvalues.dtype == np.float64
        np.testing.assert_allclose(
            np.sort(result.eigenvalues), np.linalg.eigvalsh(hermitian_3x3), atol=1e-6,
        )
        assert _max_residual(hermitian_3x3, result.eigenvalues, result.eigenvectors) < 1e-5

    def test_diagonal_input(self):
        result = eigh(np.diag([3.0, 2.0, 1.0]), eps=EPS, max_iter=10)
        assert result.converged
        assert result.iterations == 1
        np.testing.assert_array_equal(result.eigenvalues, [3.0, 2.0, 1.0])
        np.testing.assert_array_equal(result.eigenvectors, np.eye(3))

    def test_one_by_one(self):
        result = eigh(np.array([[5.0]]), eps=EPS, max_iter=1)
        np.testing.assert_array_equal(result.eigenvalues, [5.0])
        np.testing.assert_array_equal(result.eigenvectors, [[1.0]])
        assert result.converged

    def test_iteration_cap(self):
        result = eigh(np.array([[2.0, 1.0], [1.0, 2.0]]), eps=EPS, max_iter=1)
        assert result.iterations == 1
        assert result.converged is False

    def test_not_hermitian(self):
        with pytest.raises(NotHermitianError) as exc_info:
            eigh(np.array([[1.0, 2.0], [0.0, 1.0]]), eps=EPS, max_iter=10)
        assert exc_info.value.tolerance == EPS
