"""
Dense matrix decompositions.

Public API:
    triangular_solve(a, b, ...) -> TriangularSolveSolution
    qr(a, eps=..., mode=...) -> QRSolution
    cholesky(a) -> CholeskySolution
    lu(a, eps=...) -> LUSolution
    hessenberg(a, eps=...) -> HessenbergSolution
    eigh(a, eps=..., max_iter=...) -> EighSolution

Each entry point handles:
    - Input validation
    - Design construction
    - Backend execution
    - Result wrapping

The *_binary functions in pydecomp.decomposition.binary expose the same
operations over flat row-major buffers.

Example:
    >>> from pydecomp.decomposition import lu
    >>> solution = lu([[4.0, 3.0], [6.0, 3.0]], eps=1e-10)
    >>> solution.u
    >>> print(solution.summary())
"""

from pydecomp.decomposition.design import MatrixDesign
from pydecomp.decomposition.options import (
    EighOptions,
    HessenbergOptions,
    LUOptions,
    QROptions,
    TriangularSolveOptions,
)
from pydecomp.decomposition.solution import (
    CholeskyParams,
    CholeskySolution,
    EighParams,
    EighSolution,
    HessenbergParams,
    HessenbergSolution,
    LUParams,
    LUSolution,
    QRParams,
    QRSolution,
    TriangularSolveParams,
    TriangularSolveSolution,
)
from pydecomp.decomposition.solvers import (
    cholesky,
    eigh,
    hessenberg,
    lu,
    qr,
    triangular_solve,
)
from pydecomp.decomposition.binary import (
    cholesky_binary,
    eigh_binary,
    hessenberg_binary,
    lu_binary,
    qr_binary,
    triangular_solve_binary,
)

__all__ = [
    # Entry points
    "triangular_solve",
    "qr",
    "cholesky",
    "lu",
    "hessenberg",
    "eigh",
    # Buffer entry points
    "triangular_solve_binary",
    "qr_binary",
    "cholesky_binary",
    "lu_binary",
    "hessenberg_binary",
    "eigh_binary",
    # Design and options
    "MatrixDesign",
    "TriangularSolveOptions",
    "QROptions",
    "LUOptions",
    "HessenbergOptions",
    "EighOptions",
    # Payloads and solutions
    "TriangularSolveParams",
    "TriangularSolveSolution",
    "QRParams",
    "QRSolution",
    "CholeskyParams",
    "CholeskySolution",
    "LUParams",
    "LUSolution",
    "HessenbergParams",
    "HessenbergSolution",
    "EighParams",
    "EighSolution",
]
