"""
Hermitian eigendecomposition.

Two stages:

1. Hessenberg reduction. Householder similarity transforms H_i·A·H_iᴴ zero
   each column below its first subdiagonal; the reflectors accumulate
   into Q_h, so A = Q_h·H·Q_hᴴ. A Hermitian input becomes tridiagonal.

2. Unshifted QR iteration. A_k = Q_k·R_k, A_{k+1} = R_k·Q_k converges to a
   diagonal matrix holding the eigenvalues, and the product of the Q_k
   (starting from Q_h) converges to the eigenvectors.

The iteration stops once two successive eigenvector iterates agree within
eps. Running out of iterations is not an error: the last iterate is
returned and EighKernelResult.converged says so.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydecomp.core.exceptions import NotHermitianError
from pydecomp.core.compute.linalg.householder import householder_reflector
from pydecomp.core.compute.linalg.primitives import (
    adjoint,
    approximate_zeros,
    dot_real,
    is_approximately_same,
    is_hermitian,
)
from pydecomp.core.compute.linalg.qr import qr_decomposition


@dataclass(frozen=True)
class EighKernelResult:
    """Raw output of the QR iteration."""
    eigenvalues: NDArray[np.floating[Any]]
    eigenvectors: NDArray[Any]
    iterations: int
    converged: bool


def hessenberg(
    a: NDArray[Any],
    *,
    eps: float,
) -> tuple[NDArray[Any], NDArray[Any]]:
    """
    Reduce a square matrix to upper Hessenberg form, A = Q·H·Qᴴ.

    Returns:
        (H, Q), both epsilon-cleaned
    """
    n = a.shape[0]
    q = None
    hess = a

    for i in range(n - 1):
        h = householder_reflector(hess[i + 1:, i], n, eps)
        q = h if q is None else dot_real(q, h)
        hess = dot_real(dot_real(h, hess), adjoint(h))

    if q is None:
        q = np.eye(n, dtype=a.dtype)

    return approximate_zeros(hess, eps), approximate_zeros(q, eps)


def eigh(
    a: NDArray[Any],
    *,
    eps: float,
    max_iter: int,
) -> EighKernelResult:
    """
    Eigenvalues and eigenvectors of a Hermitian matrix.

    Args:
        a: Square Hermitian matrix (n x n)
        eps: Hermitian check tolerance, reflector tolerance, convergence
             threshold and clean-up threshold
        max_iter: Maximum number of QR iterations (>= 1)

    Returns:
        EighKernelResult with real eigenvalues (diagonal order of the
        converged iterate) and eigenvectors as columns

    Raises:
        NotHermitianError: If |A - adjoint(A)| > eps anywhere
    """
    if not is_hermitian(a, eps):
        raise NotHermitianError(matrix_name='a', tolerance=eps)

    a_k, q = hessenberg(a, eps=eps)

    iterations = 0
    converged = False
    while iterations < max_iter:
        iterations += 1
        q_k, r_k = qr_decomposition(a_k, eps)
        a_k = dot_real(r_k, q_k)
        q_next = dot_real(q, q_k)
        converged = is_approximately_same(q, q_next, eps)
        q = q_next
        if converged:
            break

    # Hermitian spectra are real; the imaginary residue is discarded
    eigenvalues = np.real(np.diagonal(a_k)).copy()

    return EighKernelResult(
        eigenvalues=approximate_zeros(eigenvalues, eps),
        eigenvectors=approximate_zeros(q, eps),
        iterations=iterations,
        converged=converged,
    )
