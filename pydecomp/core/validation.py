"""
Input validation utilities for PyDecomp.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - NaN and Inf are legal matrix elements; only structure is validated
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any, Iterable

from pydecomp.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and booleans.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with integer, floating or complex dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_ndim(array: NDArray[Any], ndim: int | tuple[int, ...], name: str) -> None:
    """
    Verify array has one of the allowed numbers of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions, or a tuple of allowed values
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    allowed = (ndim,) if isinstance(ndim, int) else ndim
    if array.ndim not in allowed:
        expected = " or ".join(f"{d}D" for d in allowed)
        raise DimensionError(
            f"{name}: expected {expected} array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_square(array: NDArray[Any], name: str) -> None:
    """
    Verify array is a non-empty square matrix.

    Raises:
        DimensionError: If array is not 2D or rows != cols
    """
    check_2d(array, name)
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(f"{name}: must be square, got shape {array.shape}")
    if rows == 0:
        raise DimensionError(f"{name}: must not be empty, got shape {array.shape}")


def check_tall(array: NDArray[Any], name: str) -> None:
    """
    Verify a matrix has at least as many rows as columns.

    Raises:
        DimensionError: If rows < cols
    """
    check_2d(array, name)
    rows, cols = array.shape
    if rows < cols:
        raise DimensionError(
            f"{name}: must have at least as many rows as columns, got shape {array.shape}"
        )


def check_tolerance(eps: float, name: str = 'eps') -> float:
    """
    Verify a tolerance is a finite, positive real number.

    Returns:
        The tolerance as a Python float

    Raises:
        ValidationError: If eps is not a finite number > 0
    """
    try:
        value = float(eps)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: must be a real number, got {eps!r}") from e
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(f"{name}: must be finite and > 0, got {value}")
    return value


def check_max_iter(max_iter: int, name: str = 'max_iter') -> int:
    """
    Verify an iteration cap is a positive integer.

    Raises:
        ValidationError: If max_iter is not an integer >= 1
    """
    if isinstance(max_iter, bool) or not isinstance(max_iter, (int, np.integer)):
        raise ValidationError(f"{name}: must be an integer, got {max_iter!r}")
    if max_iter < 1:
        raise ValidationError(f"{name}: must be >= 1, got {max_iter}")
    return int(max_iter)


def check_choice(value: Any, choices: Iterable[Any], name: str) -> None:
    """
    Verify a value is one of the allowed choices.

    Raises:
        ValidationError: If value is not in choices
    """
    choices = tuple(choices)
    if value not in choices:
        raise ValidationError(f"{name}: expected one of {choices}, got {value!r}")


def check_flag(value: Any, name: str) -> None:
    """
    Verify a value is a real bool (not a truthy int or string).

    Raises:
        ValidationError: If value is not a bool
    """
    if not isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: must be a bool, got {value!r}")
