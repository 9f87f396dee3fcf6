"""
Element kinds for flat buffers.

A kind is the caller-declared numeric type of every element in a buffer:
a family (signed, unsigned, float, complex) and a bit width. Kinds map
one-to-one onto little-endian numpy dtypes. Arithmetic never runs in the
storage kind; values are lifted to a working dtype (float64 or complex128)
on decode and narrowed again on encode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal
import numpy as np
from numpy.typing import NDArray

from pydecomp.core.exceptions import ValidationError


Family = Literal['s', 'u', 'f', 'c']

_NUMPY_CODES = {'s': 'i', 'u': 'u', 'f': 'f', 'c': 'c'}

SUPPORTED_WIDTHS: dict[str, tuple[int, ...]] = {
    's': (8, 16, 32, 64),
    'u': (8, 16, 32, 64),
    'f': (16, 32, 64),
    'c': (64, 128),
}


@dataclass(frozen=True)
class ElementKind:
    """
    Numeric kind of buffer elements.

    Attributes:
        family: 's' (signed int), 'u' (unsigned int), 'f' (float), 'c' (complex)
        bits: Width of one element in bits (complex counts both parts)

    Construction:
        ElementKind('f', 64)
        ElementKind.parse('c128')
        ElementKind.parse(('f', 32))
        ElementKind.parse(np.dtype(np.float32))
    """
    family: Family
    bits: int

    def __post_init__(self) -> None:
        if self.family not in SUPPORTED_WIDTHS:
            raise ValidationError(
                f"kind: unknown family {self.family!r}, "
                f"expected one of {sorted(SUPPORTED_WIDTHS)}"
            )
        if self.bits not in SUPPORTED_WIDTHS[self.family]:
            raise ValidationError(
                f"kind: unsupported width {self.bits} for family {self.family!r}, "
                f"expected one of {SUPPORTED_WIDTHS[self.family]}"
            )

    @classmethod
    def parse(cls, value: Any) -> ElementKind:
        """Build a kind from a kind, a name like 'f64', a tuple or a dtype."""
        if isinstance(value, ElementKind):
            return value
        if isinstance(value, tuple) and len(value) == 2:
            family, bits = value
            return cls(str(family), int(bits))
        if isinstance(value, str) and len(value) >= 2 and value[0] in SUPPORTED_WIDTHS:
            try:
                bits = int(value[1:])
            except ValueError as e:
                raise ValidationError(f"kind: cannot parse {value!r}") from e
            return cls(value[0], bits)
        try:
            dtype = np.dtype(value)
        except TypeError as e:
            raise ValidationError(f"kind: cannot interpret {value!r} as an element kind") from e
        return cls.from_dtype(dtype)

    @classmethod
    def from_dtype(cls, dtype: np.dtype) -> ElementKind:
        """Kind matching a numpy dtype. Booleans and objects are rejected."""
        for family, code in _NUMPY_CODES.items():
            if dtype.kind == code:
                return cls(family, dtype.itemsize * 8)
        raise ValidationError(f"kind: dtype {dtype} has no element kind")

    @property
    def name(self) -> str:
        return f"{self.family}{self.bits}"

    @property
    def dtype(self) -> np.dtype:
        """Little-endian storage dtype."""
        return np.dtype(f"<{_NUMPY_CODES[self.family]}{self.bits // 8}")

    @property
    def itemsize(self) -> int:
        return self.bits // 8

    @property
    def is_complex(self) -> bool:
        return self.family == 'c'

    @property
    def is_float(self) -> bool:
        return self.family in ('f', 'c')

    @property
    def working_dtype(self) -> np.dtype:
        """Dtype all kernels compute in for this kind."""
        return np.dtype(np.complex128) if self.is_complex else np.dtype(np.float64)

    def __str__(self) -> str:
        return self.name


def kind_of(array: NDArray[Any]) -> ElementKind:
    """Infer the element kind of a numpy array."""
    return ElementKind.from_dtype(np.asarray(array).dtype)


def to_working(array: NDArray[Any], kind: ElementKind) -> NDArray[Any]:
    """Copy of `array` lifted to the working dtype of `kind`."""
    return np.array(array, dtype=kind.working_dtype, copy=True)
