"""
PyDecomp: dense matrix decompositions in numpy.

Triangular solve, QR, Cholesky, pivoted LU, Hessenberg reduction and
Hermitian eigendecomposition over one real or complex matrix per call,
with a flat-buffer boundary for host tensor runtimes.

Submodules:
    decomposition: Public solvers, options, solutions, buffer entry points
    core: Exceptions, element kinds, codec, numeric kernels
"""

__version__ = "0.1.0"

from pydecomp import decomposition
from pydecomp.decomposition import (
    cholesky,
    eigh,
    hessenberg,
    lu,
    qr,
    triangular_solve,
)
from pydecomp.core.exceptions import (
    PyDecompError,
    ValidationError,
    DimensionError,
    ElementIndexError,
    NumericalError,
    SingularMatrixError,
    NotHermitianError,
    NotPositiveDefiniteError,
)

__all__ = [
    "__version__",
    "decomposition",
    # Entry points
    "triangular_solve",
    "qr",
    "cholesky",
    "lu",
    "hessenberg",
    "eigh",
    # Exceptions
    "PyDecompError",
    "ValidationError",
    "DimensionError",
    "ElementIndexError",
    "NumericalError",
    "SingularMatrixError",
    "NotHermitianError",
    "NotPositiveDefiniteError",
]
