"""
QR decomposition by Householder reduction.

Each step reflects one column of the working R onto its diagonal entry;
the reflectors are accumulated into Q. Both factors are epsilon-cleaned
so that reduced entries come back as exact zeros.
"""

from __future__ import annotations

from typing import Any, Literal
import numpy as np
from numpy.typing import NDArray

from pydecomp.core.exceptions import DimensionError
from pydecomp.core.compute.linalg.householder import householder_reflector
from pydecomp.core.compute.linalg.primitives import (
    approximate_zeros,
    dot_real,
)


QRMode = Literal['reduced', 'complete']


def qr_decomposition(
    a: NDArray[Any],
    eps: float,
) -> tuple[NDArray[Any], NDArray[Any]]:
    """
    Complete QR decomposition A = Q·R.

    Args:
        a: Matrix (m x n) with m >= n
        eps: Reflector tolerance and clean-up threshold

    Returns:
        (Q, R) with Q of shape (m, m) and R of shape (m, n)

    Raises:
        DimensionError: If m < n
    """
    m, n = a.shape
    if m < n:
        raise DimensionError(
            "tensor must have at least as many rows as columns, "
            f"got shape {a.shape}"
        )

    # The last column of a square matrix has nothing below the diagonal
    last = n - 2 if m == n else n - 1

    q = None
    r = a
    for i in range(last + 1):
        h = householder_reflector(r[i:, i], m, eps)
        q = h if q is None else dot_real(q, h)
        r = dot_real(h, r)

    if q is None:
        q = np.eye(m, dtype=a.dtype)

    return approximate_zeros(q, eps), approximate_zeros(r, eps)


def qr(
    a: NDArray[Any],
    *,
    mode: QRMode,
    eps: float,
) -> tuple[NDArray[Any], NDArray[Any]]:
    """
    QR decomposition with complete or reduced output.

    In reduced mode a tall (m x n, m > n) input returns Q as (m x n) and R
    as (n x n); the dropped trailing rows of R are all zero.
    """
    q, r = qr_decomposition(a, eps)
    m, k = a.shape
    if mode == 'reduced' and m > k:
        q = q[:, :k].copy()
        r = r[:k, :].copy()
    return q, r
