"""
Core infrastructure for PyDecomp.

This module provides shared abstractions, utilities, and numeric kernels
used by the decomposition layer.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    kinds: Element kinds of flat buffers
    codec: Buffer <-> matrix conversion
    compute: Timing, tolerance tiers, linear algebra kernels
"""

from pydecomp.core.protocols import Backend
from pydecomp.core.result import Result
from pydecomp.core.kinds import ElementKind
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
    # Protocols
    "Backend",
    # Result
    "Result",
    # Kinds
    "ElementKind",
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
