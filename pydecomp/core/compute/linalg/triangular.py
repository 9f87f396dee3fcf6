"""
Triangular solve.

Solves A·X = B (left side) or X·A = B (right side) for triangular A. Every
combination of (lower, left_side, transform_a) is rewritten into the single
canonical problem "lower-triangular A on the left", which is solved by
forward substitution:

    upper, left:   reverse rows and columns of A and rows of B; the
                   solution comes out row-reversed
    any, right:    transpose both sides (Aᵀ·Xᵀ = Bᵀ), which flips the
                   triangle; solve that on the left and transpose back

transform_a='transpose' transposes A up front, which also flips the
triangle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal
import numpy as np
from numpy.typing import NDArray

from pydecomp.core.exceptions import SingularMatrixError
from pydecomp.core.compute.linalg.primitives import transpose


TransformA = Literal['none', 'transpose']

Transform = Callable[[NDArray[Any]], NDArray[Any]]


def _identity(m: NDArray[Any]) -> NDArray[Any]:
    return m


def _reverse_rows(m: NDArray[Any]) -> NDArray[Any]:
    return m[::-1].copy()


def _reverse_rows_and_columns(m: NDArray[Any]) -> NDArray[Any]:
    return m[::-1, ::-1].copy()


@dataclass(frozen=True)
class Layout:
    """Pre/post transforms that turn one solve variant into the canonical one."""
    prepare_a: Transform
    prepare_b: Transform
    finish: Transform


def layout_for(lower: bool, left_side: bool, b_is_matrix: bool) -> Layout:
    """
    Canonicalizing transforms for a (lower, left_side) variant.

    `lower` is the triangle of A after any transform_a has been applied.
    """
    if left_side:
        return _LEFT_LAYOUTS[bool(lower)]

    # Transposing A flips its triangle
    inner = _LEFT_LAYOUTS[not lower]

    def prepare_a(a: NDArray[Any]) -> NDArray[Any]:
        return inner.prepare_a(transpose(a))

    if not b_is_matrix:
        return Layout(
            prepare_a=prepare_a,
            prepare_b=inner.prepare_b,
            finish=_reverse_rows if lower else _identity,
        )

    def prepare_b(b: NDArray[Any]) -> NDArray[Any]:
        return inner.prepare_b(transpose(b))

    def finish(x: NDArray[Any]) -> NDArray[Any]:
        return transpose(_reverse_rows(x)) if lower else transpose(x)

    return Layout(prepare_a=prepare_a, prepare_b=prepare_b, finish=finish)


_LEFT_LAYOUTS: dict[bool, Layout] = {
    True: Layout(prepare_a=_identity, prepare_b=_identity, finish=_identity),
    False: Layout(
        prepare_a=_reverse_rows_and_columns,
        prepare_b=_reverse_rows,
        finish=_reverse_rows,
    ),
}


def triangular_solve(
    a: NDArray[Any],
    b: NDArray[Any],
    *,
    transform_a: TransformA,
    lower: bool,
    left_side: bool,
) -> NDArray[Any]:
    """
    Solve a triangular system.

    Args:
        a: Square triangular matrix (n x n)
        b: Right-hand side; vector (n,) or matrix. For left_side=True the
           matrix is (n x k), for left_side=False it is (k x n)
        transform_a: 'none' or 'transpose' (solve with Aᵀ instead of A)
        lower: Whether `a` (before transform_a) is lower triangular
        left_side: Solve A·X = B when True, X·A = B when False

    Returns:
        X with the shape of `b`

    Raises:
        SingularMatrixError: If a diagonal entry has modulus exactly zero
    """
    if transform_a == 'transpose':
        a = transpose(a)
        lower = not lower

    layout = layout_for(lower, left_side, b.ndim == 2)
    x = forward_substitution(layout.prepare_a(a), layout.prepare_b(b))
    return layout.finish(x)


def forward_substitution(a: NDArray[Any], b: NDArray[Any]) -> NDArray[Any]:
    """
    Solve lower-triangular A·X = B row by row.

    x_i = (b_i - sum_{j<i} A[i, j] x_j) / A[i, i]. Matrix right-hand sides
    are solved for every column at once; each column is independent.

    Raises:
        SingularMatrixError: If a pivot has modulus exactly zero
    """
    n = a.shape[0]
    x = np.zeros(b.shape, dtype=np.result_type(a, b, np.float64))

    for i in range(n):
        pivot = a[i, i]
        if np.abs(pivot) == 0:
            raise SingularMatrixError(
                "can't solve for singular matrix",
                matrix_name='a',
                pivot_index=i,
            )
        x[i] = (b[i] - a[i, :i] @ x[:i]) / pivot

    return x
