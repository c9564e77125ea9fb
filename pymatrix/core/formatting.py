"""
Display rendering shared by every matrix variant.

A matrix renders as one line per row. Each element is formatted, the
widest formatted element sets the field width (plus 2), and every field is
right-aligned in that width:

    >>> print(mat([1, 2, 3], [4, 5, 6]))
      1  2  3
      4  5  6

Floating elements use a fixed number of decimals (DEFAULT_PRECISION unless
overridden through a format spec such as ``f"{m:.3}"``); integer elements
are rendered as-is.
"""

from __future__ import annotations

import re
from typing import Any, Iterable

import numpy as np

from pymatrix.core.precision import DEFAULT_PRECISION

_FORMAT_SPEC = re.compile(r"^\.(\d+)$")


def parse_precision(format_spec: str) -> int:
    """
    Read the decimal precision out of a ``__format__`` spec.

    Args:
        format_spec: ``""`` for the default, or ``".N"``

    Returns:
        Number of decimals to render

    Raises:
        ValueError: For any other format spec
    """
    if not format_spec:
        return DEFAULT_PRECISION
    match = _FORMAT_SPEC.match(format_spec)
    if match is None:
        raise ValueError(
            f"invalid format spec {format_spec!r} for a matrix, expected '' or '.N'"
        )
    return int(match.group(1))


def format_element(x: Any, precision: int) -> str:
    if isinstance(x, (float, np.floating)):
        return f"{x:.{precision}f}"
    return str(x)


def render(values: Iterable[Any], n: int, precision: int = DEFAULT_PRECISION) -> str:
    """
    Render elements given in row-major order as an aligned grid.

    Args:
        values: Elements in row-major reading order
        n: Number of columns (fields per line)
        precision: Decimals for floating elements

    Returns:
        The grid, lines joined by ``\\n`` with no trailing newline
    """
    strings = [format_element(x, precision) for x in values]
    if not strings:
        return ""

    width = max(len(s) for s in strings) + 2
    lines = []
    for start in range(0, len(strings), n):
        lines.append("".join(f"{s:>{width}}" for s in strings[start:start + n]))
    return "\n".join(lines)
