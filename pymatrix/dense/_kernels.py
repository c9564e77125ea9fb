"""
Shape checks and reference kernels for binary matrix operations.

Every public binary operation (Dense, transpose views, Symmetric) funnels
through here so that all of them check dimensions the same way, raise the
same IncompatibilityError, and only allocate a result once the check has
passed.

The multiplication kernel is the naive i-k-j triple loop. It is the
reference implementation: no blocking, no BLAS.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import IncompatibilityError
from pymatrix.core.protocols import Matrix
from pymatrix.core.validation import check_same_element_type


def as_grid(matrix: Matrix) -> NDArray[Any]:
    """2-D (rows, columns) array for any Matrix, a view where possible."""
    grid = getattr(matrix, '_grid', None)
    if grid is not None:
        return grid()
    return as_grid(matrix.to_dense())


def check_multiply(left: Matrix, right: Matrix) -> tuple[int, int, int]:
    """
    Verify ``left * right`` is defined.

    Returns:
        (m, inner, k) of an m x inner by inner x k product

    Raises:
        ValidationError: If element types differ
        IncompatibilityError: If left columns != right rows
    """
    check_same_element_type(left, right, 'multiply')
    m, inner = left.size()
    right_m, k = right.size()
    if inner != right_m:
        raise IncompatibilityError(
            f"multiply: inner dimensions differ ({m}x{inner} * {right_m}x{k})",
            operation='multiply',
            left_shape=(m, inner),
            right_shape=(right_m, k),
        )
    return m, inner, k


def multiply(
    left_at: Callable[[int, int], Any],
    m: int,
    inner: int,
    right: NDArray[Any],
) -> NDArray[Any]:
    """
    Naive product accumulated row by row.

    ``out[i, :] += left_at(i, k) * right[k, :]`` for every i, k, starting
    from a ZERO-filled output, so every output cell is the sum over k of
    ``left[i, k] * right[k, j]``.

    Args:
        left_at: Element accessor for the left operand
        m: Rows of the left operand
        inner: Columns of the left operand == rows of ``right``
        right: Right operand as an (inner, k) array

    Returns:
        Flat row-major (m * k) result in ``right.dtype``
    """
    out = np.zeros((m, right.shape[1]), dtype=right.dtype)
    for i in range(m):
        row = out[i]
        for k in range(inner):
            row += left_at(i, k) * right[k]
    return out.reshape(-1)


def concatenate(left: Matrix, right: Matrix) -> NDArray[Any]:
    """
    Join two matrices horizontally.

    Returns:
        Flat row-major data of the joined (m, left.n + right.n) matrix

    Raises:
        ValidationError: If element types differ
        IncompatibilityError: If row counts differ
    """
    check_same_element_type(left, right, 'concatenate')
    left_shape, right_shape = left.size(), right.size()
    if left_shape[0] != right_shape[0]:
        raise IncompatibilityError(
            f"concatenate: row counts differ ({left_shape[0]} vs {right_shape[0]})",
            operation='concatenate',
            left_shape=left_shape,
            right_shape=right_shape,
        )
    return np.hstack([as_grid(left), as_grid(right)]).reshape(-1)


def append_column(left: Matrix, column: NDArray[Any]) -> NDArray[Any]:
    """
    Append a single column to a matrix.

    Raises:
        IncompatibilityError: If ``len(column)`` != rows of ``left``
    """
    left_shape = left.size()
    if len(column) != left_shape[0]:
        raise IncompatibilityError(
            f"concatenate_vec: column has {len(column)} values, matrix has {left_shape[0]} rows",
            operation='concatenate_vec',
            left_shape=left_shape,
            right_shape=(len(column),),
        )
    return np.hstack([as_grid(left), column.reshape(-1, 1)]).reshape(-1)


def equal(left: Matrix, right: Matrix) -> bool:
    """Same (rows, columns) and equal elements."""
    if left.size() != right.size():
        return False
    return bool(np.array_equal(as_grid(left), as_grid(right)))
