"""
Numeric capability set.

Every matrix operation is generic over the element type of its flat
storage. An element type is admitted when it is one of the primitive numpy
dtypes registered here; each registered dtype is described by a capability
object carrying its identity constants and derived arithmetic:

    Numeric                 ZERO, ONE, TWO, is_even, is_odd, divide
    ├── Integer             exact arithmetic, floor division
    │   ├── SignedInt       + negate
    │   └── Unsigned        never negative (required by gcd/lcm)
    └── Float               + negate, EPSILON, abs, from_f32

Capability objects are singletons per dtype (INT8 ... FLOAT64). Look one up
with numeric_kind(), which accepts a dtype, a scalar type, a numpy scalar or
an array.

Usage:
    from pymatrix.core.numerics import numeric_kind, gcd, lcm

    kind = numeric_kind(np.uint32)
    kind.is_even(kind.TWO)   # True
    gcd(np.uint32(21), np.uint32(49))   # 7
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.precision import machine_epsilon


class Numeric:
    """
    Arithmetic capability of one primitive numpy dtype.

    Attributes:
        dtype: The numpy dtype described by this capability
        ZERO: Additive identity, as a scalar of ``dtype``
        ONE: Multiplicative identity, as a scalar of ``dtype``
        TWO: The value two, used for parity tests
    """

    def __init__(self, dtype: np.dtype | type):
        self.dtype = np.dtype(dtype)
        self.ZERO = self.dtype.type(0)
        self.ONE = self.dtype.type(1)
        self.TWO = self.dtype.type(2)

    @property
    def type(self) -> type:
        """The numpy scalar type (e.g. ``np.uint32``)."""
        return self.dtype.type

    def cast(self, value: Any) -> Any:
        """Convert ``value`` to a scalar of this dtype."""
        return self.dtype.type(value)

    def is_even(self, x: Any) -> bool:
        return bool(x % self.TWO == self.ZERO)

    def is_odd(self, x: Any) -> bool:
        return bool(x % self.TWO == self.ONE)

    def divide(self, a: Any, b: Any) -> Any:
        """Divide in this type's own arithmetic."""
        return a / b

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.dtype.name})"


class Integer(Numeric):
    """Integer dtypes: exact arithmetic, division truncates toward floor."""

    def divide(self, a: Any, b: Any) -> Any:
        return a // b


class SignedInt(Integer):
    """Signed integer dtypes."""

    def negate(self, x: Any) -> Any:
        return -x


class Unsigned(Integer):
    """Unsigned integer dtypes. Subtraction must never go below ZERO."""
    pass


class Float(Numeric):
    """
    Floating dtypes.

    Attributes:
        EPSILON: Machine epsilon of the dtype, used as the default
            tolerance for approximate comparisons
    """

    def __init__(self, dtype: np.dtype | type):
        super().__init__(dtype)
        self.EPSILON = self.dtype.type(machine_epsilon(self.dtype))

    def negate(self, x: Any) -> Any:
        return -x

    def abs(self, x: Any) -> Any:
        return np.abs(x)

    def from_f32(self, f: float) -> Any:
        """Lossy conversion from a 32-bit float."""
        return self.dtype.type(np.float32(f))


INT8 = SignedInt(np.int8)
INT16 = SignedInt(np.int16)
INT32 = SignedInt(np.int32)
INT64 = SignedInt(np.int64)
UINT8 = Unsigned(np.uint8)
UINT16 = Unsigned(np.uint16)
UINT32 = Unsigned(np.uint32)
UINT64 = Unsigned(np.uint64)
FLOAT32 = Float(np.float32)
FLOAT64 = Float(np.float64)

_REGISTRY: dict[np.dtype, Numeric] = {
    kind.dtype: kind
    for kind in (
        INT8, INT16, INT32, INT64,
        UINT8, UINT16, UINT32, UINT64,
        FLOAT32, FLOAT64,
    )
}

SUPPORTED_DTYPES = frozenset(_REGISTRY)


def numeric_kind(obj: Any) -> Numeric:
    """
    Look up the numeric capability of a dtype, scalar or array.

    Args:
        obj: A numpy dtype, a scalar type (``np.int32``, ``float``), a dtype
            name, a numpy scalar, an array, or a Python int/float value

    Returns:
        The registered capability object for the resolved dtype

    Raises:
        ValidationError: If the dtype is not a supported primitive numeric
            type (bool, complex, object and string dtypes are rejected)
    """
    if isinstance(obj, Numeric):
        return obj

    if isinstance(obj, np.dtype):
        dtype = obj
    elif isinstance(obj, (np.ndarray, np.generic)):
        dtype = obj.dtype
    elif isinstance(obj, (bool, int, float, complex)):
        dtype = np.asarray(obj).dtype
    else:
        # scalar types such as np.uint32 carry a class-level ``dtype``
        # descriptor, so only instances are asked for their dtype
        source = obj if isinstance(obj, type) else getattr(obj, 'dtype', obj)
        try:
            dtype = np.dtype(source)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"cannot interpret {obj!r} as a dtype: {e}") from e

    kind = _REGISTRY.get(dtype)
    if kind is None:
        supported = sorted(d.name for d in SUPPORTED_DTYPES)
        raise ValidationError(
            f"unsupported element type {dtype}, expected one of {supported}"
        )
    return kind


def _unsigned_operands(a: Any, b: Any) -> tuple[Unsigned, Any, Any]:
    """Resolve a common Unsigned capability for a gcd/lcm operand pair."""
    for value in (a, b):
        if isinstance(value, int) and not isinstance(value, bool):
            if value < 0:
                raise ValidationError(
                    f"operands must be non-negative, got {value}"
                )
        elif not isinstance(value, np.unsignedinteger):
            raise TypeError(
                f"unsigned integer operands required, got {type(value).__name__}"
            )

    dtypes = [v.dtype for v in (a, b) if isinstance(v, np.unsignedinteger)]
    kind = numeric_kind(np.result_type(*dtypes) if dtypes else np.uint64)
    if not isinstance(kind, Unsigned):
        raise TypeError(f"operands promote to {kind.dtype}, which is not unsigned")
    return kind, kind.cast(a), kind.cast(b)


def _stein(kind: Unsigned, a: Any, b: Any) -> Any:
    # every branch strictly decreases a + b
    if a == b or b == kind.ZERO:
        return a
    if a == kind.ZERO:
        return b

    half = kind.divide
    if kind.is_even(a):
        if kind.is_odd(b):
            return _stein(kind, half(a, kind.TWO), b)
        return kind.TWO * _stein(kind, half(a, kind.TWO), half(b, kind.TWO))
    if kind.is_even(b):
        return _stein(kind, a, half(b, kind.TWO))
    if a > b:
        return _stein(kind, half(a - b, kind.TWO), b)
    return _stein(kind, half(b - a, kind.TWO), a)


def gcd(a: Any, b: Any) -> Any:
    """
    Greatest common divisor of two unsigned integers (Stein's algorithm).

    Recursion depth is bounded by the bit width of the dtype.

    Args:
        a: numpy unsigned scalar or non-negative Python int
        b: numpy unsigned scalar or non-negative Python int

    Returns:
        The gcd as a scalar of the operands' common unsigned dtype
        (uint64 when both operands are Python ints)

    Raises:
        TypeError: If an operand is signed, floating or otherwise not an
            unsigned integer
        ValidationError: If a Python int operand is negative

    Examples:
        >>> gcd(np.uint32(2599), np.uint32(791))
        113
    """
    kind, a, b = _unsigned_operands(a, b)
    return _stein(kind, a, b)


def lcm(a: Any, b: Any) -> Any:
    """
    Lowest common multiple: ``(a * b) / gcd(a, b)``.

    The caller must ensure ``a * b`` fits in the operand dtype; overflow is
    not checked (numpy wraps and emits a RuntimeWarning).
    """
    kind, a, b = _unsigned_operands(a, b)
    return kind.divide(a * b, _stein(kind, a, b))
