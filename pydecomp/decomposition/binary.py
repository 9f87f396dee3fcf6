"""
Flat-buffer entry points.

These are the boundary a host tensor runtime calls into: row-major element
buffers plus shape and kind descriptors in, row-major buffers in the
requested output kinds out. Result arity is fixed per operation; output
shapes follow from the algorithm and mode and are not returned.
"""

from __future__ import annotations

from typing import Any

from pydecomp.core.compute.linalg import QRMode, TransformA
from pydecomp.decomposition import solvers
from pydecomp.decomposition.design import MatrixDesign

Buffer = bytes | bytearray | memoryview


def triangular_solve_binary(
    a_data: Buffer,
    a_kind: Any,
    a_shape: tuple[int, int],
    b_data: Buffer,
    b_kind: Any,
    b_shape: tuple[int, ...],
    output_kind: Any,
    *,
    transform_a: TransformA = 'none',
    lower: bool = True,
    left_side: bool = True,
) -> bytes:
    """Solve a triangular system; returns X shaped like B."""
    a = MatrixDesign.from_buffer(a_data, kind=a_kind, shape=a_shape)
    b = MatrixDesign.from_buffer(b_data, kind=b_kind, shape=b_shape)
    solution = solvers.triangular_solve(
        a, b, transform_a=transform_a, lower=lower, left_side=left_side,
    )
    (x,) = solution.to_buffers(output_kind)
    return x


def qr_binary(
    data: Buffer,
    kind: Any,
    shape: tuple[int, int],
    output_kind: Any,
    *,
    eps: float,
    mode: QRMode = 'reduced',
) -> tuple[bytes, bytes]:
    """QR decomposition; returns (Q, R)."""
    design = MatrixDesign.from_buffer(data, kind=kind, shape=shape)
    return solvers.qr(design, eps=eps, mode=mode).to_buffers(output_kind)


def cholesky_binary(
    data: Buffer,
    kind: Any,
    shape: tuple[int, int],
    output_kind: Any,
) -> bytes:
    """Cholesky decomposition; returns L."""
    design = MatrixDesign.from_buffer(data, kind=kind, shape=shape)
    (l,) = solvers.cholesky(design).to_buffers(output_kind)
    return l


def lu_binary(
    data: Buffer,
    kind: Any,
    shape: tuple[int, int],
    p_kind: Any,
    l_kind: Any,
    u_kind: Any,
    *,
    eps: float,
) -> tuple[bytes, bytes, bytes]:
    """
    Pivoted LU decomposition; returns (P, L, U).

    P holds only 0 and 1, so `p_kind` may be an integer kind. L and U must
    use float or complex kinds unless their values happen to be integral.
    """
    design = MatrixDesign.from_buffer(data, kind=kind, shape=shape)
    return solvers.lu(design, eps=eps).to_buffers(p_kind, l_kind, u_kind)


def hessenberg_binary(
    data: Buffer,
    kind: Any,
    shape: tuple[int, int],
    output_kind: Any,
    *,
    eps: float,
) -> tuple[bytes, bytes]:
    """Hessenberg reduction; returns (H, Q)."""
    design = MatrixDesign.from_buffer(data, kind=kind, shape=shape)
    return solvers.hessenberg(design, eps=eps).to_buffers(output_kind)


def eigh_binary(
    data: Buffer,
    kind: Any,
    shape: tuple[int, int],
    output_kind: Any,
    *,
    eps: float,
    max_iter: int,
) -> tuple[bytes, bytes]:
    """Hermitian eigendecomposition; returns (eigenvalues, eigenvectors)."""
    design = MatrixDesign.from_buffer(data, kind=kind, shape=shape)
    return solvers.eigh(design, eps=eps, max_iter=max_iter).to_buffers(output_kind)
