"""
Dense: row-major matrix over a flat numpy array.

A Dense matrix is a flat array with dimensional properties (m x n):
    m: number of rows
    n: number of columns

Element (i, j) lives at flat offset ``j + i * n``; indices are zero-based.
The invariant ``len(data) == m * n`` is checked on construction and kept by
every mutating method (none of them resize).

Indexing:
    >>> a = mat([0, 1, 2], [3, 4, 5])
    >>> a[1, 2]           # element
    5
    >>> a[1]              # row, as a writable view
    array([3, 4, 5])
    >>> a[1][2]
    5
    >>> a[0, 1] = -9
    >>> a[1] = [6, 7, 8]

Bounds are only checked at the flat-storage level: the computed offset (or
row slice) must fall inside ``data``. A negative row or column index is
rejected instead of wrapping around.
"""

from __future__ import annotations

import operator
import warnings
from typing import Any, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.exceptions import DimensionError
from pymatrix.core.formatting import parse_precision, render
from pymatrix.core.numerics import Float, Numeric, numeric_kind
from pymatrix.core.precision import DEFAULT_DTYPE
from pymatrix.core.protocols import Matrix
from pymatrix.core.validation import check_dimensions, check_flat
from pymatrix.dense import _kernels


class Dense:
    """
    Dense matrix storing every element explicitly, row-major.

    Construction:
        Dense()                         # empty, 1 x 0
        Dense(data)                     # single row
        Dense(data, m, n)               # explicit dimensions
        Dense.from_vec(seq)             # single row
        Dense.col_from_vec(seq)         # single column
        Dense.from_rows(rows)
        Dense.zeros(m, n) / Dense.eye(size) / Dense.full(value, m, n)

    Builders copy their input; a Dense never aliases caller storage.
    Binary operations never mutate their operands and always return a
    new matrix.

    Attributes:
        data: Flat row-major element array, length m * n
        m: Row count
        n: Column count
    """

    __slots__ = ('data', 'm', 'n')

    # numpy scalars on the left defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    def __init__(
        self,
        data: ArrayLike | None = None,
        m: int | None = None,
        n: int | None = None,
        dtype: DTypeLike | None = None,
    ):
        if data is None:
            data = []
            if dtype is None:
                dtype = DEFAULT_DTYPE
        flat = check_flat(data, 'data', dtype=dtype)

        if m is None and n is None:
            m, n = 1, len(flat)
        elif m is None or n is None:
            raise TypeError("Dense() needs both m and n, or neither")

        check_dimensions(len(flat), m, n, 'data')
        self.data = flat
        self.m = m
        self.n = n

    @classmethod
    def _wrap(cls, flat: NDArray[Any], m: int, n: int) -> Dense:
        """Adopt an already validated array without copying."""
        out = cls.__new__(cls)
        out.data = flat
        out.m = m
        out.n = n
        return out

    # === Builders ===

    @classmethod
    def new(cls) -> Dense:
        """Empty matrix, 1 x 0."""
        return cls()

    @classmethod
    def from_vec(cls, values: ArrayLike, dtype: DTypeLike | None = None) -> Dense:
        """Single-row matrix (1 x len)."""
        return cls(values, dtype=dtype)

    @classmethod
    def col_from_vec(cls, values: ArrayLike, dtype: DTypeLike | None = None) -> Dense:
        """Single-column matrix (len x 1)."""
        flat = check_flat(values, 'values', dtype=dtype)
        return cls._wrap(flat, len(flat), 1)

    @classmethod
    def from_rows(cls, rows: Sequence[ArrayLike], dtype: DTypeLike | None = None) -> Dense:
        """
        Matrix from a sequence of equally long rows.

        Raises:
            DimensionError: If rows have different lengths
        """
        if len(rows) == 0:
            return cls(dtype=dtype)
        flats = [check_flat(row, f'rows[{i}]', dtype=dtype) for i, row in enumerate(rows)]
        n = len(flats[0])
        lengths = [len(f) for f in flats]
        if any(length != n for length in lengths):
            raise DimensionError(f"rows: inconsistent row lengths {lengths}")
        return cls._wrap(np.concatenate(flats), len(flats), n)

    @classmethod
    def zeros(cls, m: int, n: int, dtype: DTypeLike = DEFAULT_DTYPE) -> Dense:
        """m x n matrix of ZERO."""
        return cls.full(numeric_kind(dtype).ZERO, m, n, dtype=dtype)

    @classmethod
    def full(cls, value: Any, m: int, n: int, dtype: DTypeLike | None = None) -> Dense:
        """m x n matrix with every element set to ``value``."""
        check_dimensions(m * n, m, n, 'full')
        if dtype is None:
            dtype = np.asarray(value).dtype
        kind = numeric_kind(dtype)
        return cls._wrap(np.full(m * n, value, dtype=kind.dtype), m, n)

    @classmethod
    def eye(cls, size: int, dtype: DTypeLike = DEFAULT_DTYPE) -> Dense:
        """size x size identity matrix."""
        out = cls.zeros(size, size, dtype=dtype)
        out.data[::size + 1] = numeric_kind(dtype).ONE
        return out

    # === Matrix protocol ===

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    @property
    def kind(self) -> Numeric:
        """Numeric capability of the element type."""
        return numeric_kind(self.data.dtype)

    def length(self) -> int:
        return len(self.data)

    def size(self) -> tuple[int, int]:
        return (self.m, self.n)

    def is_empty(self) -> bool:
        return len(self.data) == 0

    def into_flat(self) -> NDArray[Any]:
        """The underlying row-major storage (not a copy)."""
        return self.data

    def to_dense(self) -> Dense:
        return Dense._wrap(self.data.copy(), self.m, self.n)

    def _grid(self) -> NDArray[Any]:
        return self.data.reshape(self.m, self.n)

    # === Indexing ===

    def _offset(self, i: Any, j: Any) -> int:
        i, j = operator.index(i), operator.index(j)
        offset = j + i * self.n
        if i < 0 or j < 0 or offset >= len(self.data):
            raise IndexError(
                f"index [{i}, {j}] -> offset {offset} out of bounds for {len(self.data)} elements"
            )
        return offset

    def _row_slice(self, i: Any) -> slice:
        start = operator.index(i) * self.n
        if start < 0 or start + self.n > len(self.data):
            raise IndexError(f"row {i} out of bounds for {self.m} rows")
        return slice(start, start + self.n)

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple):
            i, j = key
            return self.data[self._offset(i, j)]
        return self.data[self._row_slice(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        if isinstance(key, tuple):
            i, j = key
            self.data[self._offset(i, j)] = value
        else:
            self.data[self._row_slice(key)] = value

    def __iter__(self) -> Iterator[NDArray[Any]]:
        """Rows in order, each a read-write view."""
        for i in range(self.m):
            yield self[i]

    # === Row operations ===

    def scale_row(self, i: int, factor: Any) -> None:
        """Multiply every element of row ``i`` by ``factor``, in place."""
        row = self[i]
        row *= factor

    def add_rows(self, base: int, source: int, factor: Any) -> None:
        """
        Add ``factor`` times row ``source`` to row ``base``, in place.

        The scaled source row is computed in full before ``base`` is
        written, so ``base == source`` is well defined and leaves the row
        multiplied by ``1 + factor``.
        """
        row = self[base]
        row += self[source] * factor

    def swap_rows(self, a: int, b: int) -> None:
        """
        Exchange rows ``a`` and ``b`` in place.

        Both rows must exist; anything else is a caller bug and fails the
        assertion.
        """
        assert 0 <= a < self.m and 0 <= b < self.m, (
            f"swap_rows({a}, {b}) out of range for {self.m} rows"
        )
        cols = np.arange(self.n)
        first, second = a * self.n + cols, b * self.n + cols
        # fancy indexing reads the right-hand side before writing
        self.data[np.concatenate([first, second])] = self.data[np.concatenate([second, first])]

    def swap_mn(self) -> None:
        """
        Swap m and n without touching the data.

        This toggles a vector between row and column orientation. For a
        matrix with both dimensions greater than one it reinterprets the
        storage and is NOT a transpose; use ``t()`` or ``to_dense()`` of a
        view for that.
        """
        if self.m > 1 and self.n > 1:
            warnings.warn(
                f"swap_mn on a {self.m}x{self.n} matrix reinterprets storage; "
                f"it is not a transpose",
                stacklevel=2,
            )
        self.m, self.n = self.n, self.m

    # === Concatenation ===

    def concatenate(self, other: Matrix) -> Dense:
        """
        Join ``other`` to the right of this matrix.

        Raises:
            IncompatibilityError: If row counts differ
            ValidationError: If element types differ
        """
        flat = _kernels.concatenate(self, other)
        return Dense._wrap(flat, self.m, self.n + other.size()[1])

    def concatenate_vec(self, values: ArrayLike) -> Dense:
        """
        Append a single column built from a flat sequence.

        Values are converted to this matrix's element type.

        Raises:
            IncompatibilityError: If ``len(values)`` != m
        """
        column = check_flat(values, 'values', dtype=self.dtype)
        flat = _kernels.append_column(self, column)
        return Dense._wrap(flat, self.m, self.n + 1)

    # === Transpose views ===

    def t(self):
        """Read-only transpose view (no copy)."""
        from pymatrix.dense.transpose import DenseTranspose
        return DenseTranspose(self)

    def t_mut(self):
        """
        Writable transpose view (no copy).

        Writes through the view land in this matrix. Do not swap_mn() this
        matrix while the view is in use, and keep a single writer.
        """
        from pymatrix.dense.transpose import DenseTransposeMut
        return DenseTransposeMut(self)

    # === Arithmetic ===

    def __mul__(self, other: Any) -> Dense:
        if isinstance(other, Matrix):
            return self.__matmul__(other)
        return Dense._wrap(
            np.multiply(self.data, other, dtype=self.dtype, casting='same_kind'),
            self.m,
            self.n,
        )

    def __rmul__(self, other: Any) -> Dense:
        if isinstance(other, Matrix):
            return NotImplemented
        return self.__mul__(other)

    def __imul__(self, other: Any) -> Dense:
        if isinstance(other, Matrix):
            return NotImplemented
        self.data *= other
        return self

    def __matmul__(self, other: Any) -> Dense:
        """
        Matrix product.

        Raises:
            IncompatibilityError: If self.n != other rows
            ValidationError: If element types differ
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        m, inner, k = _kernels.check_multiply(self, other)
        grid = self._grid()
        flat = _kernels.multiply(lambda i, k: grid[i, k], m, inner, _kernels.as_grid(other))
        return Dense._wrap(flat, m, k)

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return _kernels.equal(self, other)

    __hash__ = None

    def approx_eq(self, other: Matrix, tolerance: Any) -> bool:
        """
        True when shapes match and every element pair differs by at most
        ``tolerance`` (inclusive). Floating element types only.

        Raises:
            TypeError: If either matrix has a non-floating element type
        """
        return _first_violation(self, other, tolerance) is None

    def assert_approx_eq(self, other: Matrix, tolerance: Any = None) -> None:
        """
        Assert approximate equality, reporting the first violating element.

        Args:
            other: Matrix to compare against
            tolerance: Inclusive absolute tolerance; defaults to the
                element type's EPSILON

        Raises:
            AssertionError: On shape mismatch, or with the indices, both
                values and the delta of the first violating element
        """
        if tolerance is None:
            tolerance = _float_kind(self).EPSILON
        violation = _first_violation(self, other, tolerance)
        if violation is None:
            return
        if violation == 'shape':
            (lm, ln), (rm, rn) = self.size(), other.size()
            raise AssertionError(
                "assertion failed: dimension inequality\n"
                f"    left  m x n: {lm}x{ln}\n"
                f"    right m x n: {rm}x{rn}"
            )
        i, j, left, right, delta = violation
        raise AssertionError(
            f"assertion failed at element [{i}, {j}]: ± {tolerance}\n"
            f"    left: {left}\n"
            f"    right: {right}\n"
            f"    delta = {delta}"
        )

    # === Display ===

    def __str__(self) -> str:
        return render(self.data, self.n)

    def __format__(self, format_spec: str) -> str:
        return render(self.data, self.n, parse_precision(format_spec))

    def __repr__(self) -> str:
        return f"Dense({self.data.tolist()!r}, m={self.m}, n={self.n}, dtype={self.dtype.name})"


def _float_kind(matrix: Matrix) -> Float:
    kind = numeric_kind(matrix.dtype)
    if not isinstance(kind, Float):
        raise TypeError(
            f"approximate comparison needs a floating element type, got {kind.dtype}"
        )
    return kind


def _first_violation(left: Matrix, right: Matrix, tolerance: Any):
    """
    'shape' on shape mismatch, (i, j, left, right, delta) for the first
    element beyond tolerance, or None when approximately equal.
    """
    _float_kind(left)
    _float_kind(right)
    if left.size() != right.size():
        return 'shape'

    a, b = _kernels.as_grid(left), _kernels.as_grid(right)
    delta = np.abs(a - b)
    bad = np.argwhere(delta > tolerance)
    if len(bad) == 0:
        return None
    i, j = (int(x) for x in bad[0])
    return i, j, a[i, j], b[i, j], delta[i, j]
