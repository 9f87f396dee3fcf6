"""
Dense linear algebra kernels for PyDecomp.

Pure numpy implementations operating on one matrix (or vector) per call at
working precision (float64 or complex128). Kernels assume validated
inputs; shape and option validation happens in the decomposition layer.

All functions follow these conventions:
    - Inputs are never modified; every transform returns a new array
    - Tolerances and iteration caps are explicit keyword arguments
    - Errors are raised immediately with clear messages

Submodules:
    primitives: transpose, adjoint, products, slicing, zero snapping
    householder: Householder reflector construction
    triangular: Triangular solve for every side/triangle/transpose variant
    qr: Householder QR decomposition
    cholesky: Cholesky–Banachiewicz decomposition
    lu: Partial pivoting + Doolittle LU decomposition
    eigh: Hessenberg reduction + QR iteration eigendecomposition
"""

from pydecomp.core.compute.linalg.cholesky import HERMITIAN_TOLERANCE, cholesky
from pydecomp.core.compute.linalg.eigh import EighKernelResult, eigh, hessenberg
from pydecomp.core.compute.linalg.householder import householder_reflector
from pydecomp.core.compute.linalg.lu import lu, partial_pivot
from pydecomp.core.compute.linalg.qr import QRMode, qr, qr_decomposition
from pydecomp.core.compute.linalg.triangular import (
    TransformA,
    forward_substitution,
    triangular_solve,
)

__all__ = [
    # Reflectors
    "householder_reflector",
    # Triangular solve
    "TransformA",
    "forward_substitution",
    "triangular_solve",
    # Factorizations
    "QRMode",
    "qr",
    "qr_decomposition",
    "HERMITIAN_TOLERANCE",
    "cholesky",
    "lu",
    "partial_pivot",
    # Eigenproblems
    "EighKernelResult",
    "eigh",
    "hessenberg",
]
