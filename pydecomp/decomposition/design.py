"""
MatrixDesign: input wrapper for every decomposition.

Wraps a single matrix or vector together with its declared element kind.
Values are lifted to the kind's working dtype once, at construction, and
the design is immutable afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydecomp.core.codec import decode
from pydecomp.core.exceptions import ValidationError
from pydecomp.core.kinds import ElementKind, to_working
from pydecomp.core.validation import check_array, check_ndim


@dataclass(frozen=True)
class MatrixDesign:
    """
    Design for one decomposition call.

    Construction:
        MatrixDesign.from_array([[4, 3], [6, 3]])
        MatrixDesign.from_array(x, kind='c128')
        MatrixDesign.from_buffer(buffer, kind='f32', shape=(3, 3))
    """
    _data: NDArray[Any]
    _kind: ElementKind

    @classmethod
    def from_array(cls, data: ArrayLike, *, kind: Any = None) -> MatrixDesign:
        """
        Build a design from array-like data.

        Parameters
        ----------
        data : array-like
            1D (vector) or 2D (matrix) numeric data.
        kind : element kind, optional
            Declared kind; inferred from the array dtype when omitted.
            Python floats infer f64, Python complex numbers c128.
        """
        array = check_array(data, 'data')
        check_ndim(array, (1, 2), 'data')

        if kind is None:
            element_kind = ElementKind.from_dtype(array.dtype)
        else:
            element_kind = ElementKind.parse(kind)
            if np.iscomplexobj(array) and not element_kind.is_complex:
                raise ValidationError(
                    f"data: complex values cannot be declared as real kind {element_kind}"
                )

        return cls(_data=to_working(array, element_kind), _kind=element_kind)

    @classmethod
    def from_buffer(
        cls,
        buffer: bytes | bytearray | memoryview,
        *,
        kind: Any,
        shape: tuple[int, ...],
    ) -> MatrixDesign:
        """Build a design from a flat row-major buffer."""
        element_kind = ElementKind.parse(kind)
        array = decode(buffer, element_kind, shape)
        return cls(_data=to_working(array, element_kind), _kind=element_kind)

    # --- Properties ---

    @property
    def data(self) -> NDArray[Any]:
        """Values at working precision. Treat as read-only."""
        return self._data

    @property
    def kind(self) -> ElementKind:
        return self._kind

    @property
    def shape(self) -> tuple[int, ...]:
        return self._data.shape

    @property
    def is_vector(self) -> bool:
        return self._data.ndim == 1

    @property
    def n_rows(self) -> int:
        return self._data.shape[0]

    @property
    def n_cols(self) -> int:
        return 1 if self.is_vector else self._data.shape[1]

    @property
    def is_square(self) -> bool:
        return not self.is_vector and self.n_rows == self.n_cols

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            'shape': self.shape,
            'kind': self._kind.name,
            'is_complex': self._kind.is_complex,
        }

    def __repr__(self) -> str:
        return f"MatrixDesign(shape={self.shape}, kind={self._kind.name!r})"
