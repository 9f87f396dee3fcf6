"""
Per-operation option records.

Each decomposition takes one immutable options record, validated when it
is built. Tolerances and iteration caps have no defaults: callers always
state them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import get_args

from pydecomp.core.compute.linalg import QRMode, TransformA
from pydecomp.core.validation import (
    check_choice,
    check_flag,
    check_max_iter,
    check_tolerance,
)


@dataclass(frozen=True)
class TriangularSolveOptions:
    """
    Options for triangular_solve.

    Attributes
    ----------
    transform_a : str
        'none' to solve with A, 'transpose' to solve with Aᵀ.
    lower : bool
        Whether A is lower triangular (before transform_a).
    left_side : bool
        True solves A·X = B, False solves X·A = B.
    """
    transform_a: TransformA = 'none'
    lower: bool = True
    left_side: bool = True

    def __post_init__(self) -> None:
        check_choice(self.transform_a, get_args(TransformA), 'transform_a')
        check_flag(self.lower, 'lower')
        check_flag(self.left_side, 'left_side')


@dataclass(frozen=True)
class QROptions:
    """
    Options for qr.

    Attributes
    ----------
    eps : float
        Reflector tolerance and zero-snapping threshold.
    mode : str
        'reduced' (economy factors) or 'complete'.
    """
    eps: float
    mode: QRMode = 'reduced'

    def __post_init__(self) -> None:
        object.__setattr__(self, 'eps', check_tolerance(self.eps))
        check_choice(self.mode, get_args(QRMode), 'mode')


@dataclass(frozen=True)
class LUOptions:
    """Options for lu: `eps` is the zero-snapping threshold for L and U."""
    eps: float

    def __post_init__(self) -> None:
        object.__setattr__(self, 'eps', check_tolerance(self.eps))


@dataclass(frozen=True)
class HessenbergOptions:
    """Options for hessenberg: `eps` is the reflector and zero-snapping threshold."""
    eps: float

    def __post_init__(self) -> None:
        object.__setattr__(self, 'eps', check_tolerance(self.eps))


@dataclass(frozen=True)
class EighOptions:
    """
    Options for eigh.

    Attributes
    ----------
    eps : float
        Tolerance for the Hermitian check, the reflectors, the convergence
        test and the final zero snapping.
    max_iter : int
        Maximum number of QR iterations. Reaching it is not an error.
    """
    eps: float
    max_iter: int

    def __post_init__(self) -> None:
        object.__setattr__(self, 'eps', check_tolerance(self.eps))
        object.__setattr__(self, 'max_iter', check_max_iter(self.max_iter))
