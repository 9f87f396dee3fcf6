"""CPU backends for matrix decompositions."""

from pydecomp.decomposition.backends.cpu import (
    CPUCholeskyBackend,
    CPUEighBackend,
    CPUHessenbergBackend,
    CPULUBackend,
    CPUQRBackend,
    CPUTriangularSolveBackend,
)

__all__ = [
    "CPUCholeskyBackend",
    "CPUEighBackend",
    "CPUHessenbergBackend",
    "CPULUBackend",
    "CPUQRBackend",
    "CPUTriangularSolveBackend",
]
