"""
Binary element codec.

Converts between flat row-major buffers of a declared element kind and
numpy matrices/vectors. The buffer is the only boundary the engine shares
with its caller: shape and kind travel beside it as plain descriptors.
"""

from __future__ import annotations

from math import prod
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pydecomp.core.exceptions import DimensionError, ValidationError
from pydecomp.core.kinds import ElementKind


def decode(
    buffer: bytes | bytearray | memoryview,
    kind: Any,
    shape: tuple[int, ...],
) -> NDArray[Any]:
    """
    Read a row-major buffer into a matrix or vector.

    Args:
        buffer: Raw element bytes
        kind: Element kind of the buffer (anything ElementKind.parse accepts)
        shape: (rows, cols) for a matrix or (length,) for a vector

    Returns:
        Writable array in the storage dtype of `kind`, shaped `shape`

    Raises:
        DimensionError: If the buffer length does not match shape x width
    """
    kind = ElementKind.parse(kind)
    shape = tuple(int(s) for s in shape)
    if len(shape) not in (1, 2):
        raise DimensionError(f"shape: expected (rows, cols) or (length,), got {shape}")

    expected = prod(shape) * kind.itemsize
    if len(buffer) != expected:
        raise DimensionError(
            f"buffer: expected {expected} bytes for shape {shape} of kind {kind}, "
            f"got {len(buffer)}"
        )

    return np.frombuffer(buffer, dtype=kind.dtype).reshape(shape).copy()


def encode(values: NDArray[Any], kind: Any) -> bytes:
    """
    Write a matrix or vector row-major in the given output kind.

    Args:
        values: Matrix or vector (any numeric dtype)
        kind: Output element kind. Integer kinds accept only values that are
              exact integers within the kind's range (e.g. permutations)

    Returns:
        Flat buffer of values.size * kind.itemsize bytes

    Raises:
        ValidationError: If complex values with non-zero imaginary parts are
            written to a real kind, or non-integral or out-of-range values
            are written to an integer kind
    """
    kind = ElementKind.parse(kind)
    values = np.asarray(values)
    if np.iscomplexobj(values) and not kind.is_complex:
        if np.any(values.imag != 0):
            raise ValidationError(
                f"cannot encode complex values into real kind {kind}"
            )
        values = values.real

    if not kind.is_float:
        _check_exact_integers(values, kind)

    with np.errstate(over='ignore', invalid='ignore'):
        return np.ascontiguousarray(values, dtype=kind.dtype).tobytes()


def _check_exact_integers(values: NDArray[Any], kind: ElementKind) -> None:
    limits = np.iinfo(kind.dtype)
    with np.errstate(invalid='ignore'):
        exact = (
            np.isfinite(values)
            & (values == np.round(values))
            & (values >= limits.min)
            & (values <= limits.max)
        )
    if not np.all(exact):
        raise ValidationError(
            f"cannot encode non-integral or out-of-range values into integer kind {kind}"
        )
