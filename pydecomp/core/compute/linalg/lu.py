"""
LU decomposition with partial pivoting.

Rows are first permuted so that, column by column, the candidate of
largest modulus sits on the diagonal. The permuted matrix A' is then
factored A' = L·U by Doolittle elimination (unit diagonal on L).
The permutation is returned transposed, so the factors satisfy A = P·L·U.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydecomp.core.exceptions import SingularMatrixError
from pydecomp.core.compute.linalg.primitives import approximate_zeros, transpose


def partial_pivot(a: NDArray[Any]) -> tuple[NDArray[np.floating[Any]], NDArray[Any]]:
    """
    Row permutation bringing the largest-modulus candidates onto the diagonal.

    For each column j except the last, rows j..n-1 of the working copy are
    searched; the first row of maximal modulus wins ties. NaN candidates
    rank above every number, infinities included.

    Returns:
        (perm, a_prime) where perm is the row permutation matrix with
        perm·A = A'
    """
    n = a.shape[0]
    perm = np.eye(n)
    a_prime = a.copy()

    for j in range(n - 1):
        with np.errstate(invalid='ignore'):
            magnitudes = np.abs(a_prime[j:, j])
        is_nan = np.isnan(magnitudes)
        ranked = is_nan if is_nan.any() else magnitudes
        max_idx = j + int(np.argmax(ranked))
        if max_idx != j:
            perm[[j, max_idx]] = perm[[max_idx, j]]
            a_prime[[j, max_idx]] = a_prime[[max_idx, j]]

    return perm, a_prime


def lu(
    a: NDArray[Any],
    *,
    eps: float,
) -> tuple[NDArray[np.floating[Any]], NDArray[Any], NDArray[Any]]:
    """
    Pivoted LU decomposition A = P·L·U of a square matrix.

    Args:
        a: Square matrix (n x n)
        eps: Entries of L and U with modulus below eps are snapped to zero

    Returns:
        (P, L, U): permutation matrix, unit lower triangular L, upper
        triangular U

    Raises:
        SingularMatrixError: If a diagonal entry of U that must be divided
            by is exactly zero (after snapping)
    """
    n = a.shape[0]
    perm, a_prime = partial_pivot(a)

    l = np.zeros((n, n), dtype=a.dtype)
    u = np.zeros((n, n), dtype=a.dtype)

    for j in range(n):
        l[j, j] = 1.0

        for i in range(j + 1):
            value = a_prime[i, j] - u[:i, j] @ l[i, :i]
            u[i, j] = 0 if np.abs(value) < eps else value

        if j + 1 < n and np.abs(u[j, j]) == 0:
            raise SingularMatrixError(
                f"can't factor singular matrix: zero pivot U[{j}, {j}]",
                matrix_name='a',
                pivot_index=j,
            )

        for i in range(j + 1, n):
            value = (a_prime[i, j] - u[:j, j] @ l[i, :j]) / u[j, j]
            l[i, j] = 0 if np.abs(value) < eps else value

    return transpose(perm), approximate_zeros(l, eps), approximate_zeros(u, eps)
