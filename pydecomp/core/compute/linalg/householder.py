"""
Householder reflector construction.

Builds the k x k orthogonal (real) or unitary (complex) matrix H that maps
a column vector onto a multiple of its first coordinate axis. QR
decomposition and Hessenberg reduction both apply one reflector per
column, embedded into the bottom-right window of a full-size identity.

The branch is chosen by dtype, not by value: a complex working matrix
always takes the complex branch, even when imaginary parts are zero.

References:
    Golub, G. H., & Van Loan, C. F. (2013). Matrix Computations (4th ed.),
    Section 5.1.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def householder_reflector(
    column: NDArray[Any],
    target_k: int,
    eps: float,
) -> NDArray[Any]:
    """
    Reflector zeroing every entry of `column` but the first.

    Args:
        column: Sub-column of the active panel (any shape, read flat)
        target_k: Size of the returned matrix; `column` is left-padded with
                  zeros to this length so H acts on the trailing window
        eps: Tail squared norms below this are treated as already reduced

    Returns:
        H of shape (target_k, target_k), dtype of `column` (float64 for
        an empty column)
    """
    column = np.asarray(column).ravel()
    if column.size == 0:
        return np.eye(target_k)

    if np.iscomplexobj(column):
        v, scale = _complex_pivot(column)
    else:
        v, scale = _real_pivot(column, eps)

    if v is None:
        return np.eye(target_k, dtype=column.dtype)

    padded = np.zeros(target_k, dtype=v.dtype)
    padded[target_k - v.shape[0]:] = v

    # I - scale * v vᴴ; the zero prefix leaves the leading window as identity
    return np.eye(target_k, dtype=v.dtype) - scale * np.outer(padded, np.conj(padded))


def _real_pivot(a: NDArray[np.floating[Any]], eps: float):
    a_0 = a[0]
    norm_a_sq = np.sum(a * a)
    tail_norm_sq = norm_a_sq - a_0 * a_0

    if tail_norm_sq < eps:
        return None, 0.0

    # Both branches equal a_0 - ‖a‖; the second avoids cancellation when a_0 > 0
    if a_0 <= 0:
        v_0 = a_0 - np.sqrt(norm_a_sq)
    else:
        v_0 = -tail_norm_sq / (a_0 + np.sqrt(norm_a_sq))

    v_0_sq = v_0 * v_0
    scale = 2 * v_0_sq / (tail_norm_sq + v_0_sq)
    v = np.concatenate(([1.0], a[1:] / v_0))
    return v, scale


def _complex_pivot(a: NDArray[np.complexfloating[Any]]):
    a_0 = a[0]
    tail_norm_sq = np.sum(np.abs(a[1:]) ** 2)
    norm_a = np.sqrt(tail_norm_sq + np.abs(a_0) ** 2)

    alpha = np.exp(1j * np.angle(a_0)) * norm_a
    u = a.copy()
    u[0] = a_0 + alpha
    norm_u = np.sqrt(tail_norm_sq + np.abs(u[0]) ** 2)

    if norm_u == 0:
        return None, 0.0

    return u / norm_u, 2.0
