"""
Core protocols for PyDecomp.

These define structural interfaces that operation-specific backends must
satisfy. We use Protocol (structural typing) rather than ABC (nominal
typing) so that a backend is anything with the right shape.
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated MatrixDesign (plus an options record) and
    produces one operation's payload wrapped in a Result. Backends are
    stateless: everything they need arrives through the arguments.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_householder_qr', 'cpu_doolittle_lu', 'cpu_eigh'
        """
        ...

    def solve(self, design: D, *args: Any, **kwargs: Any) -> 'Result[P]':
        """
        Execute the computation.

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If the design is invalid for this backend
        """
        ...
