"""
Tests for the public decomposition entry points.

Covers the full pipeline: design construction, option validation,
backend execution and solution wrapping.
"""

import numpy as np
import pytest
from scipy import linalg as sla

import pydecomp
from pydecomp.core.exceptions import (
    DimensionError,
    NotHermitianError,
    SingularMatrixError,
    ValidationError,
)
from pydecomp.decomposition import (
    CholeskySolution,
    EighSolution,
    HessenbergSolution,
    LUSolution,
    MatrixDesign,
    QRSolution,
    TriangularSolveSolution,
    cholesky,
    eigh,
    hessenberg,
    lu,
    qr,
    triangular_solve,
)


# ═══════════════════════════════════════════════════════════════════════
# triangular_solve
# ═══════════════════════════════════════════════════════════════════════


class TestTriangularSolve:

    @pytest.mark.parametrize("lower, left_side, transform_a", [
        (True, True, 'none'),
        (False, True, 'none'),
        (True, False, 'none'),
        (False, False, 'none'),
        (True, True, 'transpose'),
        (False, False, 'transpose'),
    ])
    def test_all_variants(self, lower_4x4, rng, lower, left_side, transform_a):
        a = lower_4x4 if lower else lower_4x4.T.copy()
        b = rng.standard_normal((4, 3) if left_side else (3, 4))
        solution = triangular_solve(
            a, b, lower=lower, left_side=left_side, transform_a=transform_a,
        )
        assert isinstance(solution, TriangularSolveSolution)
        op_a = a.T if transform_a == 'transpose' else a
        product = op_a @ solution.x if left_side else solution.x @ op_a
        np.testing.assert_allclose(product, b, atol=1e-9)
        assert solution.verify()

    def test_matches_scipy(self, lower_4x4, rng):
        b = rng.standard_normal(4)
        solution = triangular_solve(lower_4x4, b)
        np.testing.assert_allclose(
            solution.x, sla.solve_triangular(lower_4x4, b, lower=True), atol=1e-9,
        )

    def test_info(self, lower_4x4):
        solution = triangular_solve(lower_4x4, np.ones(4), lower=True)
        assert solution.backend_name == 'cpu_triangular_solve'
        assert solution.lower is True
        assert solution.left_side is True
        assert solution.transform_a == 'none'
        assert 'substitution' in solution.timing

    def test_singular(self):
        with pytest.raises(SingularMatrixError):
            triangular_solve([[0.0, 1.0], [0.0, 2.0]], [1.0, 1.0])

    def test_nonconforming_b(self, lower_4x4):
        with pytest.raises(DimensionError, match="rows"):
            triangular_solve(lower_4x4, np.ones((3, 2)))
        with pytest.raises(DimensionError, match="columns"):
            triangular_solve(lower_4x4, np.ones((4, 3)), left_side=False)

    def test_non_square_a(self):
        with pytest.raises(DimensionError, match="square"):
            triangular_solve(np.ones((2, 3)), np.ones(2))


# ═══════════════════════════════════════════════════════════════════════
# qr
# ═══════════════════════════════════════════════════════════════════════


class TestQR:

    def test_reduced(self, rng):
        a = rng.standard_normal((4, 3))
        solution = qr(a, eps=1e-10)
        assert isinstance(solution, QRSolution)
        assert solution.mode == 'reduced'
        np.testing.assert_allclose(solution.q @ solution.r, a, atol=1e-9)
        np.testing.assert_allclose(solution.q.T @ solution.q, np.eye(3), atol=1e-9)
        assert solution.verify()

    def test_complete(self, rng):
        a = rng.standard_normal((4, 3))
        solution = qr(a, eps=1e-10, mode='complete')
        assert solution.q.shape == (4, 4)
        assert solution.r.shape == (4, 3)
        assert solution.reconstruction_error() < 1e-9

    def test_wide_rejected(self):
        with pytest.raises(DimensionError):
            qr(np.ones((2, 3)), eps=1e-10)

    def test_eps_required(self):
        with pytest.raises(TypeError):
            qr(np.eye(2))

    def test_bad_mode(self):
        with pytest.raises(ValidationError, match="mode"):
            qr(np.eye(2), eps=1e-10, mode='r')


# ═══════════════════════════════════════════════════════════════════════
# cholesky
# ═══════════════════════════════════════════════════════════════════════


class TestCholesky:

    def test_spd(self, spd_3x3):
        solution = cholesky(spd_3x3)
        assert isinstance(solution, CholeskySolution)
        np.testing.assert_allclose(solution.l @ solution.l.T, spd_3x3, atol=1e-9)
        assert solution.info['hermitian_tolerance'] == 1e-10
        assert solution.verify()

    def test_complex(self, hermitian_3x3):
        solution = cholesky(hermitian_3x3)
        assert solution.kind.name == 'c128'
        assert solution.verify()

    def test_not_hermitian(self):
        with pytest.raises(NotHermitianError):
            cholesky([[1.0, 2.0], [3.0, 4.0]])

    def test_not_square(self):
        with pytest.raises(DimensionError):
            cholesky(np.ones((2, 3)))


# ═══════════════════════════════════════════════════════════════════════
# lu
# ═══════════════════════════════════════════════════════════════════════


class TestLU:

    def test_two_by_two(self):
        solution = lu([[4, 3], [6, 3]], eps=1e-10)
        assert isinstance(solution, LUSolution)
        np.testing.assert_array_equal(solution.p, [[0, 1], [1, 0]])
        np.testing.assert_allclose(solution.l, [[1, 0], [2 / 3, 1]], atol=1e-12)
        np.testing.assert_allclose(solution.u, [[6, 3], [0, 1]], atol=1e-12)
        np.testing.assert_array_equal(solution.row_order, [1, 0])
        assert solution.kind.family == "s"

    def test_reconstruction(self, rng):
        a = rng.standard_normal((6, 6))
        assert lu(a, eps=1e-12).verify()

    def test_singular(self):
        with pytest.raises(SingularMatrixError):
            lu(np.zeros((3, 3)), eps=1e-10)


# ═══════════════════════════════════════════════════════════════════════
# hessenberg and eigh
# ═══════════════════════════════════════════════════════════════════════


class TestHessenberg:

    def test_reduction(self, rng):
        a = rng.standard_normal((4, 4))
        solution = hessenberg(a, eps=1e-12)
        assert isinstance(solution, HessenbergSolution)
        np.testing.assert_allclose(np.tril(solution.h, -2), 0.0, atol=1e-12)
        assert solution.verify()


class TestEigh:

    def test_two_by_two(self):
        a = np.array([[2.0, 1.0], [1.0, 2.0]])
        solution = eigh(a, eps=1e-12, max_iter=1000)
        assert isinstance(solution, EighSolution)
        assert solution.converged
        assert solution.warnings == ()
        np.testing.assert_allclose(np.sort(solution.eigenvalues), [1.0, 3.0], atol=1e-6)
        for i in range(2):
            v = solution.eigenvectors[:, i]
            np.testing.assert_allclose(a @ v, solution.eigenvalues[i] * v, atol=1e-5)

    def test_non_convergence_is_reported(self):
        solution = eigh([[2.0, 1.0], [1.0, 2.0]], eps=1e-12, max_iter=2)
        assert solution.converged is False
        assert solution.iterations == 2
        assert any("did not converge" in w for w in solution.warnings)
        assert solution.info["max_iter"] == 2

    def test_not_hermitian(self):
        with pytest.raises(NotHermitianError):
            eigh([[1.0, 2.0], [3.0, 4.0]], eps=1e-10, max_iter=10)

    def test_max_iter_validated(self):
        with pytest.raises(ValidationError, match="max_iter"):
            eigh(np.eye(2), eps=1e-10, max_iter=0)


# ═══════════════════════════════════════════════════════════════════════
# Package surface
# ═══════════════════════════════════════════════════════════════════════


class TestPackageSurface:

    def test_top_level_entry_points(self):
        assert pydecomp.lu is lu
        assert pydecomp.eigh is eigh

    def test_design_accepted(self, spd_3x3):
        design = MatrixDesign.from_array(spd_3x3)
        assert cholesky(design).verify()
