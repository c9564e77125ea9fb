"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.array on sequences)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from math import isqrt
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.numerics import numeric_kind


def check_flat(
    values: ArrayLike,
    name: str,
    dtype: DTypeLike | None = None,
) -> NDArray[Any]:
    """
    Validate and copy input into a flat numeric array.

    The result never aliases ``values``: matrices own their storage.

    Args:
        values: Sequence or array of numbers
        name: Parameter name for error messages
        dtype: Element type to convert to. If None, the dtype numpy infers
            from ``values`` is kept (Python ints become int64, floats
            float64). Floating values are never truncated into an
            integer type

    Returns:
        1-D numpy.ndarray with a supported numeric dtype

    Raises:
        ValidationError: If input cannot be converted, is not 1-D, or has
            an unsupported element type, or would lose its fractional
            part in the requested ``dtype``
    """
    try:
        source = np.array(values, copy=True)
    except (ValueError, TypeError, OverflowError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if dtype is None:
        result = source
    else:
        try:
            target = numeric_kind(dtype).dtype
        except ValidationError as e:
            raise ValidationError(f"{name}: {e}") from e
        if source.size and not _castable(source.dtype, target):
            raise ValidationError(
                f"{name}: cannot store {source.dtype} values as {target} without loss"
            )
        try:
            result = np.array(values, dtype=target, copy=True)
        except (ValueError, TypeError, OverflowError) as e:
            raise ValidationError(f"{name}: cannot convert to {target}: {e}") from e

    if result.ndim != 1:
        raise ValidationError(
            f"{name}: expected a flat sequence, got {result.ndim}D with shape {result.shape}"
        )

    check_element_type(result, name)
    return result


def check_element_type(array: NDArray[Any], name: str) -> None:
    """
    Verify array holds a supported primitive numeric element type.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If the dtype is object, bool, complex, string, etc.
    """
    if array.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    try:
        numeric_kind(array.dtype)
    except ValidationError as e:
        raise ValidationError(f"{name}: {e}") from e


def check_dimensions(length: int, m: int, n: int, name: str) -> None:
    """
    Verify a flat sequence holds exactly m * n values.

    Args:
        length: Number of values in the flat sequence
        m: Row count
        n: Column count
        name: Parameter name for error messages

    Raises:
        DimensionError: If a dimension is negative or m * n != length
    """
    if m < 0 or n < 0:
        raise DimensionError(f"{name}: dimensions must be non-negative, got {m}x{n}")
    if m * n != length:
        raise DimensionError(
            f"{name}: {m}x{n} matrix needs {m * n} values, got {length}"
        )


def triangular_side(length: int, name: str) -> int:
    """
    Recover n from a triangular count n * (n + 1) / 2.

    Args:
        length: Number of stored values
        name: Parameter name for error messages

    Returns:
        n such that n * (n + 1) // 2 == length

    Raises:
        DimensionError: If length is not a triangular number
    """
    n = (isqrt(8 * length + 1) - 1) // 2
    if n * (n + 1) // 2 != length:
        raise DimensionError(
            f"{name}: {length} values is not a triangular number n*(n+1)/2"
        )
    return n


def check_same_element_type(left: Any, right: Any, operation: str) -> None:
    """
    Verify two matrices share one element type.

    Args:
        left: Left operand (anything with ``.dtype``)
        right: Right operand (anything with ``.dtype``)
        operation: Operation name for error messages

    Raises:
        ValidationError: If the dtypes differ
    """
    if left.dtype != right.dtype:
        raise ValidationError(
            f"{operation}: element types differ ({left.dtype} vs {right.dtype})"
        )


def _castable(source: np.dtype, target: np.dtype) -> bool:
    # integers move freely between widths and signedness; out-of-range
    # Python ints are rejected by the conversion itself
    if np.issubdtype(source, np.integer) and np.issubdtype(target, np.integer):
        return True
    return bool(np.can_cast(source, target, casting='same_kind'))
