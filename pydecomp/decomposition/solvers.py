"""
Solver dispatch for matrix decompositions.

Public entry points: triangular_solve(), qr(), cholesky(), lu(),
hessenberg(), eigh(). Each accepts an array-like or a MatrixDesign,
builds the options record, runs the CPU backend and wraps the result.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pydecomp.core.compute.linalg import QRMode, TransformA
from pydecomp.decomposition.backends.cpu import (
    CPUCholeskyBackend,
    CPUEighBackend,
    CPUHessenbergBackend,
    CPULUBackend,
    CPUQRBackend,
    CPUTriangularSolveBackend,
)
from pydecomp.decomposition.design import MatrixDesign
from pydecomp.decomposition.options import (
    EighOptions,
    HessenbergOptions,
    LUOptions,
    QROptions,
    TriangularSolveOptions,
)
from pydecomp.decomposition.solution import (
    CholeskySolution,
    EighSolution,
    HessenbergSolution,
    LUSolution,
    QRSolution,
    TriangularSolveSolution,
)


def _ensure_design(data: ArrayLike | MatrixDesign) -> MatrixDesign:
    """Convert raw array to MatrixDesign if needed."""
    if isinstance(data, MatrixDesign):
        return data
    return MatrixDesign.from_array(data)


def triangular_solve(
    a: ArrayLike | MatrixDesign,
    b: ArrayLike | MatrixDesign,
    *,
    transform_a: TransformA = 'none',
    lower: bool = True,
    left_side: bool = True,
) -> TriangularSolveSolution:
    """
    Solve a triangular linear system.

    Parameters
    ----------
    a : array-like or MatrixDesign
        Square triangular matrix (n x n). Only the relevant triangle is
        read by the substitution, but the layout transforms use all of A.
    b : array-like or MatrixDesign
        Right-hand side: vector (n,) or matrix, (n x k) for left_side=True,
        (k x n) for left_side=False.
    transform_a : str
        'none' or 'transpose'.
    lower : bool
        Whether A is lower triangular.
    left_side : bool
        True solves A·X = B, False solves X·A = B.

    Returns
    -------
    TriangularSolveSolution with X shaped like B.

    Raises
    ------
    SingularMatrixError
        If a diagonal entry of A has modulus exactly zero.
    """
    a_design = _ensure_design(a)
    b_design = _ensure_design(b)
    options = TriangularSolveOptions(
        transform_a=transform_a, lower=lower, left_side=left_side,
    )

    result = CPUTriangularSolveBackend().solve(a_design, b_design, options)
    return TriangularSolveSolution(_result=result, _design=b_design, _a=a_design.data)


def qr(
    a: ArrayLike | MatrixDesign,
    *,
    eps: float,
    mode: QRMode = 'reduced',
) -> QRSolution:
    """
    Householder QR decomposition, A = Q·R.

    Parameters
    ----------
    a : array-like or MatrixDesign
        Matrix (m x n) with m >= n.
    eps : float
        Reflector tolerance and zero-snapping threshold.
    mode : str
        'reduced': Q is (m x n), R is (n x n).
        'complete': Q is (m x m), R is (m x n).

    Returns
    -------
    QRSolution

    Raises
    ------
    DimensionError
        If m < n (underdetermined systems are not supported).
    """
    design = _ensure_design(a)
    options = QROptions(eps=eps, mode=mode)
    result = CPUQRBackend().solve(design, options)
    return QRSolution(_result=result, _design=design)


def cholesky(a: ArrayLike | MatrixDesign) -> CholeskySolution:
    """
    Cholesky decomposition, A = L·Lᴴ.

    The Hermitian precondition is checked at the fixed tolerance
    HERMITIAN_TOLERANCE (1e-10).

    Returns
    -------
    CholeskySolution with lower triangular L.

    Raises
    ------
    NotHermitianError
        If A is not Hermitian.
    NotPositiveDefiniteError
        If a real-kind diagonal radicand is negative.
    """
    design = _ensure_design(a)
    result = CPUCholeskyBackend().solve(design)
    return CholeskySolution(_result=result, _design=design)


def lu(a: ArrayLike | MatrixDesign, *, eps: float) -> LUSolution:
    """
    LU decomposition with partial pivoting, A = P·L·U.

    Parameters
    ----------
    a : array-like or MatrixDesign
        Square matrix.
    eps : float
        Entries of L and U with modulus below eps are snapped to zero.

    Returns
    -------
    LUSolution with permutation P, unit lower triangular L and upper
    triangular U.

    Raises
    ------
    SingularMatrixError
        If elimination must divide by a zero pivot.
    """
    design = _ensure_design(a)
    options = LUOptions(eps=eps)
    result = CPULUBackend().solve(design, options)
    return LUSolution(_result=result, _design=design)


def hessenberg(a: ArrayLike | MatrixDesign, *, eps: float) -> HessenbergSolution:
    """
    Householder reduction to upper Hessenberg form, A = Q·H·Qᴴ.

    Returns
    -------
    HessenbergSolution with H (zeros below the first subdiagonal) and
    unitary Q.
    """
    design = _ensure_design(a)
    options = HessenbergOptions(eps=eps)
    result = CPUHessenbergBackend().solve(design, options)
    return HessenbergSolution(_result=result, _design=design)


def eigh(
    a: ArrayLike | MatrixDesign,
    *,
    eps: float,
    max_iter: int,
) -> EighSolution:
    """
    Eigendecomposition of a Hermitian matrix.

    Parameters
    ----------
    a : array-like or MatrixDesign
        Square Hermitian matrix.
    eps : float
        Hermitian check tolerance, convergence threshold and
        zero-snapping threshold.
    max_iter : int
        Cap on QR iterations. Exhausting it is not an error: the last
        iterate is returned with converged=False.

    Returns
    -------
    EighSolution with real eigenvalues and eigenvectors as columns.

    Raises
    ------
    NotHermitianError
        If A differs from its adjoint by more than eps.
    """
    design = _ensure_design(a)
    options = EighOptions(eps=eps, max_iter=max_iter)
    result = CPUEighBackend().solve(design, options)
    return EighSolution(_result=result, _design=design)
