"""
CPU reference backends for matrix decompositions.

One backend per operation. Each validates the shape preconditions of its
design, runs the numpy kernel at working precision, and wraps the factors
in a Result with timing and metadata.
"""

from __future__ import annotations

from typing import Any

from pydecomp.core.result import Result
from pydecomp.core.compute.timing import Timer
from pydecomp.core.compute.linalg import (
    HERMITIAN_TOLERANCE,
    cholesky,
    eigh,
    hessenberg,
    lu,
    qr,
    triangular_solve,
)
from pydecomp.core.exceptions import DimensionError
from pydecomp.core.validation import check_square, check_tall
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
    EighParams,
    HessenbergParams,
    LUParams,
    QRParams,
    TriangularSolveParams,
)


class CPUTriangularSolveBackend:
    """Forward substitution after canonicalizing the system layout."""

    @property
    def name(self) -> str:
        return 'cpu_triangular_solve'

    def solve(
        self,
        a: MatrixDesign,
        b: MatrixDesign,
        options: TriangularSolveOptions,
    ) -> Result[TriangularSolveParams]:
        """
        Solve A·X = B or X·A = B for triangular A.

        Raises:
            DimensionError: If A is not square or B does not conform to A
            SingularMatrixError: If A has an exactly-zero diagonal entry
        """
        timer = Timer()
        timer.start()

        check_square(a.data, 'a')
        n = a.n_rows
        if b.is_vector or options.left_side:
            b_len = b.shape[0]
        else:
            b_len = b.shape[1]
        if b_len != n:
            side = 'rows' if options.left_side or b.is_vector else 'columns'
            raise DimensionError(
                f"b: expected {n} {side} to match a of shape {a.shape}, got shape {b.shape}"
            )

        with timer.section('substitution'):
            x = triangular_solve(
                a.data,
                b.data,
                transform_a=options.transform_a,
                lower=options.lower,
                left_side=options.left_side,
            )

        timer.stop()

        info: dict[str, Any] = {
            'method': 'forward_substitution',
            'transform_a': options.transform_a,
            'lower': options.lower,
            'left_side': options.left_side,
        }

        return Result(
            params=TriangularSolveParams(x=x),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )


class CPUQRBackend:
    """Householder QR decomposition."""

    @property
    def name(self) -> str:
        return 'cpu_householder_qr'

    def solve(self, design: MatrixDesign, options: QROptions) -> Result[QRParams]:
        """
        Compute A = Q·R.

        Raises:
            DimensionError: If A is not 2D or has fewer rows than columns
        """
        timer = Timer()
        timer.start()

        check_tall(design.data, 'a')

        with timer.section('householder'):
            q, r = qr(design.data, mode=options.mode, eps=options.eps)

        timer.stop()

        info: dict[str, Any] = {
            'method': 'householder',
            'mode': options.mode,
            'eps': options.eps,
        }

        return Result(
            params=QRParams(q=q, r=r),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )


class CPUCholeskyBackend:
    """Cholesky–Banachiewicz decomposition."""

    @property
    def name(self) -> str:
        return 'cpu_cholesky'

    def solve(self, design: MatrixDesign) -> Result[CholeskyParams]:
        """
        Compute A = L·Lᴴ.

        Raises:
            DimensionError: If A is not square
            NotHermitianError: If A is not Hermitian
            NotPositiveDefiniteError: If a real radicand is negative
        """
        timer = Timer()
        timer.start()

        check_square(design.data, 'a')

        with timer.section('banachiewicz'):
            l = cholesky(design.data)

        timer.stop()

        info: dict[str, Any] = {
            'method': 'cholesky_banachiewicz',
            'hermitian_tolerance': HERMITIAN_TOLERANCE,
        }

        return Result(
            params=CholeskyParams(l=l),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )


class CPULUBackend:
    """Partial pivoting + Doolittle elimination."""

    @property
    def name(self) -> str:
        return 'cpu_doolittle_lu'

    def solve(self, design: MatrixDesign, options: LUOptions) -> Result[LUParams]:
        """
        Compute A = P·L·U.

        Raises:
            DimensionError: If A is not square
            SingularMatrixError: If elimination meets a zero pivot
        """
        timer = Timer()
        timer.start()

        check_square(design.data, 'a')

        with timer.section('elimination'):
            p, l, u = lu(design.data, eps=options.eps)

        timer.stop()

        info: dict[str, Any] = {
            'method': 'doolittle',
            'pivoting': 'partial',
            'eps': options.eps,
        }

        return Result(
            params=LUParams(p=p, l=l, u=u),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )


class CPUHessenbergBackend:
    """Householder reduction to upper Hessenberg form."""

    @property
    def name(self) -> str:
        return 'cpu_householder_hessenberg'

    def solve(
        self,
        design: MatrixDesign,
        options: HessenbergOptions,
    ) -> Result[HessenbergParams]:
        """
        Compute A = Q·H·Qᴴ.

        Raises:
            DimensionError: If A is not square
        """
        timer = Timer()
        timer.start()

        check_square(design.data, 'a')

        with timer.section('householder'):
            h, q = hessenberg(design.data, eps=options.eps)

        timer.stop()

        info: dict[str, Any] = {
            'method': 'householder',
            'eps': options.eps,
        }

        return Result(
            params=HessenbergParams(h=h, q=q),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )


class CPUEighBackend:
    """Hessenberg reduction followed by unshifted QR iteration."""

    @property
    def name(self) -> str:
        return 'cpu_eigh'

    def solve(self, design: MatrixDesign, options: EighOptions) -> Result[EighParams]:
        """
        Compute eigenvalues and eigenvectors of a Hermitian matrix.

        Reaching max_iter without convergence is reported through
        info['converged'] and a warning string, never raised.

        Raises:
            DimensionError: If A is not square
            NotHermitianError: If A is not Hermitian within eps
        """
        timer = Timer()
        timer.start()

        check_square(design.data, 'a')

        with timer.section('qr_iteration'):
            kernel = eigh(design.data, eps=options.eps, max_iter=options.max_iter)

        timer.stop()

        warnings_list: list[str] = []
        if not kernel.converged:
            warnings_list.append(
                f"QR iteration did not converge within max_iter={options.max_iter}; "
                f"returning the last iterate"
            )

        info: dict[str, Any] = {
            'method': 'hessenberg_qr_iteration',
            'eps': options.eps,
            'max_iter': options.max_iter,
            'iterations': kernel.iterations,
            'converged': kernel.converged,
        }

        return Result(
            params=EighParams(
                eigenvalues=kernel.eigenvalues,
                eigenvectors=kernel.eigenvectors,
            ),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
