"""
Non-owning transpose views of a Dense matrix.

A view holds a reference to its Dense matrix plus swapped dimensions
(``m = inner.n``, ``n = inner.m``) and never copies storage: view element
(i, j) *is* inner element (j, i).

    >>> a = mat([1, 2, 3], [4, 5, 6])
    >>> a.t()[0, 1]
    4
    >>> a.t_mut()[2, 0] = 7
    >>> a[0, 2]
    7

Borrowing is a caller convention, not a runtime check: a view is only
meaningful while its matrix keeps its shape (no swap_mn), and a writable
view should be the only writer of its matrix while it is in use.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.formatting import parse_precision, render
from pymatrix.core.protocols import Matrix
from pymatrix.dense import _kernels
from pymatrix.dense.matrix import Dense


class DenseTranspose:
    """
    Read-only transpose view.

    Attributes:
        inner: The viewed Dense matrix (borrowed, not owned)
        m: Rows of the view (columns of ``inner``)
        n: Columns of the view (rows of ``inner``)
    """

    __slots__ = ('inner', 'm', 'n')

    def __init__(self, inner: Dense):
        self.inner = inner
        self.m = inner.n
        self.n = inner.m

    @property
    def dtype(self) -> np.dtype:
        return self.inner.dtype

    def length(self) -> int:
        return self.inner.length()

    def size(self) -> tuple[int, int]:
        return (self.m, self.n)

    def is_empty(self) -> bool:
        return self.inner.is_empty()

    def into_flat(self) -> NDArray[Any]:
        """
        Elements in the row-major order of the transposed shape.

        Walks the inner storage with a stride of ``self.m``, once from each
        starting offset ``0 .. self.m - 1``.
        """
        data = self.inner.data
        parts = [data[start::self.m] for start in range(self.m)]
        if not parts:
            return np.empty(0, dtype=data.dtype)
        return np.concatenate(parts)

    def to_dense(self) -> Dense:
        """Materialize the transpose as a new Dense matrix."""
        return Dense._wrap(self.into_flat(), self.m, self.n)

    def _grid(self) -> NDArray[Any]:
        return self.inner._grid().T

    def __getitem__(self, key: tuple[int, int]) -> Any:
        i, j = key
        return self.inner[j, i]

    def __mul__(self, other: Any) -> Dense:
        if not isinstance(other, Matrix):
            raise TypeError(
                f"transpose views only multiply with matrices, got {type(other).__name__}"
            )
        return self.__matmul__(other)

    def __matmul__(self, other: Any) -> Dense:
        if not isinstance(other, Matrix):
            return NotImplemented
        m, inner, k = _kernels.check_multiply(self, other)
        grid = self._grid()
        flat = _kernels.multiply(lambda i, j: grid[i, j], m, inner, _kernels.as_grid(other))
        return Dense._wrap(flat, m, k)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return _kernels.equal(self, other)

    __hash__ = None

    def __str__(self) -> str:
        return render(self.into_flat(), self.n)

    def __format__(self, format_spec: str) -> str:
        return render(self.into_flat(), self.n, parse_precision(format_spec))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inner!r})"


class DenseTransposeMut(DenseTranspose):
    """Writable transpose view; writes pass through to ``inner``."""

    __slots__ = ()

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        i, j = key
        self.inner[j, i] = value
