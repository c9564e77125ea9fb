"""
Concise construction of literal matrices.

Rows are given either as sequences or as a MATLAB-like string where a
semicolon starts a new row:

    >>> mat([0, 1, 2], [3, 4, 5])
    >>> mat("0, 1, 2; 3, 4, 5")          # same 2 x 3 matrix
    >>> mat("1; 2; 3")                   # 3 x 1 column
    >>> mat()                            # empty, 1 x 0
    >>> fill(0.0, 5, 1)                  # 5 x 1 column of zeros
    >>> symmat([1], [2, 4], [3, 5, 6])   # lower triangle, row by row

These are thin wrappers: every helper maps onto a Dense or Symmetric
builder.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.dense.matrix import Dense
from pymatrix.symmetric.matrix import Symmetric


def _parse_number(token: str) -> int | float:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError:
        raise ValidationError(f"literal: {token!r} is not a number") from None


def parse_rows(literal: str) -> list[list[int | float]]:
    """
    Split ``"a, b; c, d"`` into ``[[a, b], [c, d]]``.

    Raises:
        ValidationError: On empty entries or non-numeric tokens
    """
    rows = []
    for row in literal.split(';'):
        tokens = [token.strip() for token in row.split(',')]
        if any(not token for token in tokens):
            raise ValidationError(f"literal: empty entry in row {row.strip()!r}")
        rows.append([_parse_number(token) for token in tokens])
    return rows


def mat(*rows: ArrayLike | str, dtype: DTypeLike | None = None) -> Dense:
    """
    Dense matrix from literal rows.

    Args:
        *rows: Row sequences, or a single string in ``"a, b; c, d"`` form.
            No arguments gives the empty 1 x 0 matrix.
        dtype: Element type; inferred from the values when omitted

    Raises:
        DimensionError: If rows have different lengths
        ValidationError: If the string literal cannot be parsed
    """
    if not rows:
        return Dense(dtype=dtype)
    if len(rows) == 1 and isinstance(rows[0], str):
        rows = tuple(parse_rows(rows[0]))
    return Dense.from_rows(rows, dtype=dtype)


def fill(value: Any, m: int, n: int, dtype: DTypeLike | None = None) -> Dense:
    """m x n matrix with every element set to ``value``."""
    return Dense.full(value, m, n, dtype=dtype)


def symmat(*rows: ArrayLike | str, dtype: DTypeLike | None = None) -> Symmetric:
    """
    Symmetric matrix from the rows of its lower triangle.

    Row ``k`` holds elements ``(k, 0) .. (k, k)``, so it must have k + 1
    entries.

    Raises:
        DimensionError: If a row has the wrong length
    """
    if len(rows) == 1 and isinstance(rows[0], str):
        rows = tuple(parse_rows(rows[0]))

    flats = [np.asarray(row) for row in rows]
    for k, row in enumerate(flats):
        if row.ndim != 1 or len(row) != k + 1:
            raise DimensionError(
                f"symmat: row {k} must have {k + 1} entries, got shape {row.shape}"
            )
    data = np.concatenate(flats) if flats else np.empty(0, dtype=dtype or np.float64)
    return Symmetric(data, len(flats), dtype=dtype)
