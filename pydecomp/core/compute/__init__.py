"""
Shared compute infrastructure for PyDecomp.

IMPORTANT: This is NOT where operation backends live. Those go in
decomposition/backends/. This module contains shared NUMERIC
infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Reconstruction tolerance tiers per storage precision
    linalg: Linear algebra kernels (triangular solve, QR, Cholesky, LU, eigh)
"""

from pydecomp.core.compute.timing import Timer, timed
from pydecomp.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
