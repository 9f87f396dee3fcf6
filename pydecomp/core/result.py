"""
Generic result container for all PyDecomp computations.

Every backend wraps its factors in the same envelope so that timing,
convergence diagnostics and non-fatal notes travel with the numbers.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (eps, iterations, converged)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True): no factor outlives or aliases its call
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The operation-specific payload type (factors, solution, spectrum)

    Attributes:
        params: Operation-specific payload
        info: Structured metadata (method, tolerance, convergence)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> # Direct method (no convergence notion)
        >>> Result(
        ...     params=LUParams(p=p, l=l, u=u),
        ...     info={'method': 'doolittle', 'eps': 1e-10},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_lu'
        ... )

        >>> # Iterative method
        >>> Result(
        ...     params=EighParams(eigenvalues=w, eigenvectors=v),
        ...     info={'method': 'qr_iteration', 'converged': True, 'iterations': 23},
        ...     timing={'total_seconds': 0.02, 'hessenberg': 0.001},
        ...     backend_name='cpu_eigh'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
