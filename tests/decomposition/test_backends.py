"""
Tests for the CPU backends: protocol conformance, metadata and timing.
"""

import numpy as np
import pytest

from pydecomp.core import Backend, Result
from pydecomp.core.exceptions import DimensionError
from pydecomp.decomposition import (
    EighOptions,
    LUOptions,
    MatrixDesign,
    QROptions,
    TriangularSolveOptions,
)
from pydecomp.decomposition.backends import (
    CPUCholeskyBackend,
    CPUEighBackend,
    CPUHessenbergBackend,
    CPULUBackend,
    CPUQRBackend,
    CPUTriangularSolveBackend,
)


ALL_BACKENDS = [
    (CPUTriangularSolveBackend, 'cpu_triangular_solve'),
    (CPUQRBackend, 'cpu_householder_qr'),
    (CPUCholeskyBackend, 'cpu_cholesky'),
    (CPULUBackend, 'cpu_doolittle_lu'),
    (CPUHessenbergBackend, 'cpu_householder_hessenberg'),
    (CPUEighBackend, 'cpu_eigh'),
]


class TestProtocol:

    @pytest.mark.parametrize("cls, name", ALL_BACKENDS)
    def test_satisfies_backend_protocol(self, cls, name):
        backend = cls()
        assert isinstance(backend, Backend)
        assert backend.name == name


class TestResults:

    def test_qr_result(self, rng):
        design = MatrixDesign.from_array(rng.standard_normal((3, 2)))
        result = CPUQRBackend().solve(design, QROptions(eps=1e-10, mode='complete'))
        assert isinstance(result, Result)
        assert result.params.q.shape == (3, 3)
        assert result.info == {'method': 'householder', 'mode': 'complete', 'eps': 1e-10}
        assert set(result.timing) == {'total_seconds', 'householder'}

    def test_lu_result(self):
        design = MatrixDesign.from_array([[4.0, 3.0], [6.0, 3.0]])
        result = CPULUBackend().solve(design, LUOptions(eps=1e-10))
        assert result.info['pivoting'] == 'partial'
        assert 'elimination' in result.timing
        assert result.warnings == ()

    def test_eigh_warning_on_iteration_limit(self):
        design = MatrixDesign.from_array([[2.0, 1.0], [1.0, 2.0]])
        result = CPUEighBackend().solve(design, EighOptions(eps=1e-12, max_iter=1))
        assert result.info['converged'] is False
        assert result.info['iterations'] == 1
        assert result.has_warning("max_iter=1")

    def test_eigh_no_warning_when_converged(self):
        design = MatrixDesign.from_array(np.diag([1.0, 2.0]))
        result = CPUEighBackend().solve(design, EighOptions(eps=1e-12, max_iter=10))
        assert result.info['converged'] is True
        assert result.warnings == ()


class TestShapeChecks:

    def test_cholesky_rejects_vector(self):
        with pytest.raises(DimensionError):
            CPUCholeskyBackend().solve(MatrixDesign.from_array([1.0, 2.0]))

    def test_triangular_right_side_vector_uses_length(self, lower_4x4):
        a = MatrixDesign.from_array(lower_4x4)
        b = MatrixDesign.from_array(np.ones(4))
        result = CPUTriangularSolveBackend().solve(a, b, TriangularSolveOptions(left_side=False))
        np.testing.assert_allclose(result.params.x @ lower_4x4, np.ones(4), atol=1e-9)
