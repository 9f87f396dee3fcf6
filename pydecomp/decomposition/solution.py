"""
Decomposition solution types.

Contains the parameter payloads produced by backends and the user-facing
solution wrappers around Result[...Params].
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pydecomp.core.codec import encode
from pydecomp.core.compute.tolerances import ToleranceTier, select_tolerance
from pydecomp.core.kinds import ElementKind
from pydecomp.core.result import Result

if TYPE_CHECKING:
    from pydecomp.decomposition.design import MatrixDesign


# ═══════════════════════════════════════════════════════════════════════
# Parameter payloads
# ═══════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class TriangularSolveParams:
    """Solution X of A·X = B or X·A = B, shaped like B."""
    x: NDArray[Any]


@dataclass(frozen=True)
class QRParams:
    """Orthogonal/unitary Q and upper triangular R with A = Q·R."""
    q: NDArray[Any]
    r: NDArray[Any]


@dataclass(frozen=True)
class CholeskyParams:
    """Lower triangular L with A = L·Lᴴ."""
    l: NDArray[Any]


@dataclass(frozen=True)
class LUParams:
    """Permutation P, unit lower triangular L, upper triangular U with A = P·L·U."""
    p: NDArray[np.floating[Any]]
    l: NDArray[Any]
    u: NDArray[Any]


@dataclass(frozen=True)
class HessenbergParams:
    """Upper Hessenberg H and unitary Q with A = Q·H·Qᴴ."""
    h: NDArray[Any]
    q: NDArray[Any]


@dataclass(frozen=True)
class EighParams:
    """Real eigenvalues (n,) and eigenvectors as columns (n, n)."""
    eigenvalues: NDArray[np.floating[Any]]
    eigenvectors: NDArray[Any]


# ═══════════════════════════════════════════════════════════════════════
# Solutions
# ═══════════════════════════════════════════════════════════════════════


@dataclass
class _DecompositionSolution(ABC):
    """Accessors shared by every solution wrapper."""
    _result: Result[Any]
    _design: 'MatrixDesign'

    # --- Metadata ---

    @property
    def kind(self) -> ElementKind:
        """Element kind of the input."""
        return self._design.kind

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Checks ---

    @abstractmethod
    def reconstruct(self) -> NDArray[Any]:
        """Rebuild the input from the factors."""

    def reconstruction_error(self) -> float:
        """Largest elementwise modulus of reconstruct() - input."""
        target = self._reconstruction_target()
        return float(np.max(np.abs(self.reconstruct() - target), initial=0.0))

    def verify(self, tolerance: ToleranceTier | None = None) -> bool:
        """
        Check the factors reproduce the input.

        Args:
            tolerance: Tier to compare with; defaults to the tier of the
                       input's element kind

        Returns:
            True if reconstruct() matches the input within the tier
        """
        tier = tolerance or select_tolerance(self.kind)
        return bool(np.allclose(
            self.reconstruct(), self._reconstruction_target(),
            rtol=tier.rtol, atol=tier.atol,
        ))

    def _reconstruction_target(self) -> NDArray[Any]:
        return self._design.data


@dataclass
class TriangularSolveSolution(_DecompositionSolution):
    """
    User-facing triangular solve result.

    reconstruct() returns the right-hand side implied by X.
    """
    _a: NDArray[Any] | None = None

    @property
    def x(self) -> NDArray[Any]:
        return self._result.params.x

    @property
    def lower(self) -> bool:
        return self.info['lower']

    @property
    def left_side(self) -> bool:
        return self.info['left_side']

    @property
    def transform_a(self) -> str:
        return self.info['transform_a']

    def reconstruct(self) -> NDArray[Any]:
        a = self._a.T if self.transform_a == 'transpose' else self._a
        return a @ self.x if self.left_side else self.x @ a

    def to_buffers(self, kind: Any) -> tuple[bytes]:
        """Encode X row-major in the given output kind."""
        return (encode(self.x, kind),)

    def summary(self) -> str:
        side = "A·X = B" if self.left_side else "X·A = B"
        triangle = "lower" if self.lower else "upper"
        lines = [
            "Triangular solve",
            f"  system:      {side} ({triangle}, transform_a={self.transform_a!r})",
            f"  solution:    shape {self.x.shape}",
            f"  backend:     {self.backend_name}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"TriangularSolveSolution(shape={self.x.shape}, lower={self.lower}, "
            f"left_side={self.left_side}, transform_a={self.transform_a!r})"
        )


@dataclass
class QRSolution(_DecompositionSolution):
    """User-facing QR decomposition result."""

    @property
    def q(self) -> NDArray[Any]:
        return self._result.params.q

    @property
    def r(self) -> NDArray[Any]:
        return self._result.params.r

    @property
    def mode(self) -> str:
        return self.info['mode']

    def reconstruct(self) -> NDArray[Any]:
        return self.q @ self.r

    def to_buffers(self, kind: Any) -> tuple[bytes, bytes]:
        """Encode (Q, R) row-major in the given output kind."""
        return encode(self.q, kind), encode(self.r, kind)

    def summary(self) -> str:
        lines = [
            f"QR decomposition ({self.mode})",
            f"  Q:           shape {self.q.shape}",
            f"  R:           shape {self.r.shape}",
            f"  max |QR-A|:  {self.reconstruction_error():.3e}",
            f"  backend:     {self.backend_name}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"QRSolution(q_shape={self.q.shape}, r_shape={self.r.shape}, "
            f"mode={self.mode!r})"
        )


@dataclass
class CholeskySolution(_DecompositionSolution):
    """User-facing Cholesky decomposition result."""

    @property
    def l(self) -> NDArray[Any]:
        return self._result.params.l

    def reconstruct(self) -> NDArray[Any]:
        return self.l @ np.conj(self.l).T

    def to_buffers(self, kind: Any) -> tuple[bytes]:
        """Encode L row-major in the given output kind."""
        return (encode(self.l, kind),)

    def summary(self) -> str:
        lines = [
            "Cholesky decomposition",
            f"  L:           shape {self.l.shape}",
            f"  max |LLᴴ-A|: {self.reconstruction_error():.3e}",
            f"  backend:     {self.backend_name}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"CholeskySolution(n={self.l.shape[0]}, kind={self.kind.name!r})"


@dataclass
class LUSolution(_DecompositionSolution):
    """User-facing pivoted LU decomposition result."""

    @property
    def p(self) -> NDArray[np.floating[Any]]:
        return self._result.params.p

    @property
    def l(self) -> NDArray[Any]:
        return self._result.params.l

    @property
    def u(self) -> NDArray[Any]:
        return self._result.params.u

    @property
    def row_order(self) -> NDArray[np.integer[Any]]:
        """Source row of A placed at each row of the pivoted matrix."""
        return np.argmax(self.p, axis=0)

    def reconstruct(self) -> NDArray[Any]:
        return self.p @ self.l @ self.u

    def to_buffers(
        self,
        p_kind: Any,
        l_kind: Any | None = None,
        u_kind: Any | None = None,
    ) -> tuple[bytes, bytes, bytes]:
        """Encode (P, L, U); L and U default to the kind of P."""
        return (
            encode(self.p, p_kind),
            encode(self.l, l_kind or p_kind),
            encode(self.u, u_kind or p_kind),
        )

    def summary(self) -> str:
        lines = [
            "LU decomposition (partial pivoting)",
            f"  n:           {self.l.shape[0]}",
            f"  row order:   {self.row_order.tolist()}",
            f"  max |PLU-A|: {self.reconstruction_error():.3e}",
            f"  backend:     {self.backend_name}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"LUSolution(n={self.l.shape[0]}, kind={self.kind.name!r})"


@dataclass
class HessenbergSolution(_DecompositionSolution):
    """User-facing Hessenberg reduction result."""

    @property
    def h(self) -> NDArray[Any]:
        return self._result.params.h

    @property
    def q(self) -> NDArray[Any]:
        return self._result.params.q

    def reconstruct(self) -> NDArray[Any]:
        return self.q @ self.h @ np.conj(self.q).T

    def to_buffers(self, kind: Any) -> tuple[bytes, bytes]:
        """Encode (H, Q) row-major in the given output kind."""
        return encode(self.h, kind), encode(self.q, kind)

    def summary(self) -> str:
        lines = [
            "Hessenberg reduction",
            f"  n:             {self.h.shape[0]}",
            f"  max |QHQᴴ-A|:  {self.reconstruction_error():.3e}",
            f"  backend:       {self.backend_name}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"HessenbergSolution(n={self.h.shape[0]}, kind={self.kind.name!r})"


@dataclass
class EighSolution(_DecompositionSolution):
    """
    User-facing Hermitian eigendecomposition result.

    Eigenvalues come in the diagonal order of the converged iterate
    (not sorted); column i of `eigenvectors` belongs to eigenvalue i.
    """

    @property
    def eigenvalues(self) -> NDArray[np.floating[Any]]:
        return self._result.params.eigenvalues

    @property
    def eigenvectors(self) -> NDArray[Any]:
        return self._result.params.eigenvectors

    @property
    def converged(self) -> bool:
        return self.info['converged']

    @property
    def iterations(self) -> int:
        return self.info['iterations']

    def reconstruct(self) -> NDArray[Any]:
        v = self.eigenvectors
        return (v * self.eigenvalues) @ np.conj(v).T

    def to_buffers(self, kind: Any) -> tuple[bytes, bytes]:
        """Encode (eigenvalues, eigenvectors) row-major in the given output kind."""
        return encode(self.eigenvalues, kind), encode(self.eigenvectors, kind)

    def summary(self) -> str:
        values = ", ".join(f"{w:.6g}" for w in self.eigenvalues)
        status = "converged" if self.converged else "iteration limit reached"
        lines = [
            "Hermitian eigendecomposition",
            f"  eigenvalues: [{values}]",
            f"  iterations:  {self.iterations} ({status})",
            f"  backend:     {self.backend_name}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EighSolution(n={self.eigenvalues.shape[0]}, "
            f"iterations={self.iterations}, converged={self.converged})"
        )
