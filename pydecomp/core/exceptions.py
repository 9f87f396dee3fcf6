"""
Exception hierarchy for PyDecomp.

All exceptions inherit from PyDecompError to allow catching any
library-specific error. Kernel-specific exceptions inherit from the
appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages state the violated condition
    - Never catch and re-raise with less information
"""


class PyDecompError(Exception):
    """Base exception for all PyDecomp errors."""
    pass


class ValidationError(PyDecompError):
    """
    Input validation failed.

    Raised when user-provided inputs (arrays, kinds, options) fail
    validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions, when a buffer
    length does not match its declared shape, or when a decomposition
    precondition on the shape is violated (e.g. QR with rows < cols).
    """
    pass


class ElementIndexError(ValidationError, IndexError):
    """
    Element coordinate outside the matrix.

    Attributes:
        row: Requested row index
        col: Requested column index
        shape: Shape of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        col: int | None = None,
        shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.shape = shape


class NumericalError(PyDecompError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when a substitution or elimination step must divide by a pivot
    whose magnitude is exactly zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Diagonal position of the zero pivot, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index


class NotHermitianError(NumericalError):
    """
    Matrix is not Hermitian.

    Raised when an operation requires X = adjoint(X) (Cholesky,
    eigendecomposition) and the input violates it beyond the tolerance.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        tolerance: Tolerance the check was performed with
    """

    def __init__(
        self,
        message: str = (
            "matrix must be hermitian, a matrix is hermitian iff X = adjoint(X)"
        ),
        matrix_name: str | None = None,
        tolerance: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.tolerance = tolerance


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised when the Cholesky recurrence meets a negative diagonal radicand
    on a real element kind.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Diagonal position where the radicand went negative
        radicand: The offending radicand value
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        radicand: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.radicand = radicand
