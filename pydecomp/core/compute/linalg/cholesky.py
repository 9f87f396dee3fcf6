"""
Cholesky decomposition.

Factors a Hermitian positive definite matrix as A = L·Lᴴ with L lower
triangular, using the Cholesky–Banachiewicz (row by row) recurrence:

    L[i, j] = (A[i, j] - sum_{k<j} L[i, k] conj(L[j, k])) / L[j, j]    j < i
    L[i, i] = sqrt(A[i, i] - sum_{k<i} |L[i, k]|²)
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydecomp.core.exceptions import (
    NotHermitianError,
    NotPositiveDefiniteError,
    SingularMatrixError,
)
from pydecomp.core.compute.linalg.primitives import transpose


# Fixed tolerance of the Hermitian precondition
HERMITIAN_TOLERANCE: float = 1e-10


def cholesky(a: NDArray[Any]) -> NDArray[Any]:
    """
    Lower-triangular Cholesky factor of a square Hermitian matrix.

    Raises:
        NotHermitianError: If a real part of A differs from its mirror, or an
            imaginary part fails to cancel its mirror, by more than
            HERMITIAN_TOLERANCE
        NotPositiveDefiniteError: If a real diagonal radicand is negative
        SingularMatrixError: If a diagonal entry of L used as a divisor is
            exactly zero
    """
    if not _is_hermitian_componentwise(a, HERMITIAN_TOLERANCE):
        raise NotHermitianError(matrix_name='a', tolerance=HERMITIAN_TOLERANCE)

    n = a.shape[0]
    is_complex = np.iscomplexobj(a)
    l = np.zeros((n, n), dtype=a.dtype)

    for i in range(n):
        for j in range(i):
            l_jj = l[j, j]
            if np.abs(l_jj) == 0:
                raise SingularMatrixError(
                    f"zero diagonal entry L[{j}, {j}] in Cholesky factor",
                    matrix_name='a',
                    pivot_index=j,
                )
            total = np.sum(l[i, :j] * np.conj(l[j, :j]))
            l[i, j] = (a[i, j] - total) / l_jj

        radicand = a[i, i] - np.sum(l[i, :i] * np.conj(l[i, :i]))
        if not is_complex and radicand < 0:
            raise NotPositiveDefiniteError(
                f"matrix is not positive definite: negative radicand {radicand} "
                f"at diagonal {i}",
                matrix_name='a',
                pivot_index=i,
                radicand=float(radicand),
            )
        l[i, i] = np.sqrt(radicand)

    return l


def _is_hermitian_componentwise(a: NDArray[Any], eps: float) -> bool:
    """
    Hermitian test on real and imaginary parts separately.

    Real parts of A[i, j] and A[j, i] must agree within eps; a NaN matches
    only another NaN. Imaginary parts must cancel within eps; opposite
    infinities and NaN pairs are accepted.
    """
    a_t = transpose(a)
    re, re_t = np.real(a), np.real(a_t)
    im, im_t = np.imag(a), np.imag(a_t)

    with np.errstate(invalid='ignore'):
        real_ok = (np.abs(re - re_t) <= eps) | (np.isnan(re) & np.isnan(re_t))
        imag_ok = (
            (np.abs(im + im_t) <= eps)
            | (np.isnan(im) & np.isnan(im_t))
            | (np.isinf(im) & np.isinf(im_t) & (np.sign(im) != np.sign(im_t)))
        )
    return bool(np.all(real_ok & imag_ok))
