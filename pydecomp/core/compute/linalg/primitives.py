"""
Matrix primitives shared by every decomposition kernel.

All functions take numpy arrays and return new arrays; no input is ever
modified in place. A 1D array is a vector and, where a matrix shape is
needed, is read as a column.
"""

from __future__ import annotations

from typing import Any, Sequence
import numpy as np
from numpy.typing import NDArray

from pydecomp.core.exceptions import ElementIndexError


def transpose(m: NDArray[Any]) -> NDArray[Any]:
    """Swap rows and columns. A vector becomes a column of singleton rows."""
    if m.ndim == 1:
        return m.reshape(-1, 1).copy()
    return m.T.copy()


def adjoint(m: NDArray[Any]) -> NDArray[Any]:
    """Conjugate transpose. Identity on conjugation for real dtypes."""
    return np.conj(transpose(m))


def dot(m1: NDArray[Any], m2: NDArray[Any]) -> Any:
    """
    Hermitian-style product.

    For two matrices, each output element is sum_k m1[i, k] * conj(m2[k, j]).
    For two vectors, the plain (non-conjugating) inner product over the
    overlapping prefix; an empty operand yields 0.
    """
    if m1.size == 0 or m2.size == 0:
        return 0
    if m1.ndim == 1 and m2.ndim == 1:
        n = min(m1.shape[0], m2.shape[0])
        return np.sum(m1[:n] * m2[:n])
    return m1 @ np.conj(m2)


def dot_real(m1: NDArray[Any], m2: NDArray[Any]) -> NDArray[Any]:
    """Plain matrix product, no conjugation."""
    return m1 @ m2


def slice_matrix(
    m: NDArray[Any],
    start: Sequence[int],
    lengths: Sequence[int],
) -> NDArray[Any]:
    """Sub-matrix of `lengths` rows x cols starting at `start`."""
    r0, c0 = start
    rlen, clen = lengths
    return m[r0:r0 + rlen, c0:c0 + clen].copy()


def column(m: NDArray[Any], idx: int) -> NDArray[Any]:
    """Column `idx` as a vector."""
    return m[:, idx].copy()


def columns(m: NDArray[Any], indices: Sequence[int]) -> NDArray[Any]:
    """Columns in the order given by `indices`."""
    return m[:, list(indices)].copy()


def rows(m: NDArray[Any], indices: Sequence[int]) -> NDArray[Any]:
    """Rows in the order given by `indices`."""
    return m[list(indices), :].copy()


def elements_at(m: NDArray[Any], coords: Sequence[Sequence[int]]) -> list[Any]:
    """
    Elements at the given [row, col] coordinates.

    Raises:
        ElementIndexError: If any coordinate falls outside the matrix
    """
    n_rows, n_cols = m.shape
    out = []
    for row, col in coords:
        if not (0 <= row < n_rows and 0 <= col < n_cols):
            raise ElementIndexError(
                f"invalid index [{row},{col}] for matrix of shape {m.shape}",
                row=row, col=col, shape=m.shape,
            )
        out.append(m[row, col])
    return out


def replace_element(m: NDArray[Any], row: int, col: int, value: Any) -> NDArray[Any]:
    """Copy of `m` with element (row, col) set to `value`."""
    out = m.copy()
    out[row, col] = value
    return out


def approximate_zeros(m: NDArray[Any], eps: float) -> NDArray[Any]:
    """
    Snap every element with modulus below `eps` to an exact zero.

    The zero keeps the dtype of `m`; NaN compares false and is kept.
    """
    m = np.asarray(m)
    with np.errstate(invalid='ignore'):
        mask = np.abs(m) < eps
    return np.where(mask, np.zeros((), dtype=m.dtype), m)


def is_approximately_same(a: NDArray[Any], b: NDArray[Any], eps: float) -> bool:
    """
    True when |a - b| <= eps elementwise.

    A NaN difference (NaN operands, or matching infinities) counts as equal.
    """
    with np.errstate(invalid='ignore'):
        diff = np.abs(np.asarray(a) - np.asarray(b))
        return bool(np.all(np.isnan(diff) | (diff <= eps)))


def is_hermitian(m: NDArray[Any], eps: float) -> bool:
    """True when `m` equals its adjoint within `eps`."""
    return is_approximately_same(adjoint(m), m, eps)
