"""Numeric element types.

Python numbers are unbounded (``int``) or double precision (``float``).
A ``NumericType`` describes the element type a range is declared over and
knows how to convert a value into it the way a C ``static_cast`` would:
truncation toward zero for float-to-integer, modulo wrap-around for
fixed-width integers, and IEEE single-precision rounding for ``float32``.
"""

from __future__ import annotations

import math
import numbers
import struct
from dataclasses import dataclass
from typing import Union

from steprange.errors import NarrowingError

_INT = "int"
_UINT = "uint"
_FLOAT = "float"


@dataclass(frozen=True)
class NumericType:
    """Descriptor of a numeric element type.

    Attributes:
        name: Canonical name, e.g. ``"int8"`` or ``"float64"``.
        kind: One of ``"int"``, ``"uint"`` or ``"float"``.
        bits: Storage width; ``0`` means unbounded (Python ``int``).
    """

    name: str
    kind: str
    bits: int

    # ---- Classification ----

    @property
    def is_float(self) -> bool:
        return self.kind == _FLOAT

    @property
    def is_integer(self) -> bool:
        return self.kind != _FLOAT

    @property
    def is_signed(self) -> bool:
        return self.kind != _UINT

    @property
    def is_bounded(self) -> bool:
        """True for fixed-width integer types."""
        return self.is_integer and self.bits > 0

    @property
    def min_value(self) -> int | None:
        if not self.is_bounded:
            return None
        return -(1 << (self.bits - 1)) if self.is_signed else 0

    @property
    def max_value(self) -> int | None:
        if not self.is_bounded:
            return None
        return (1 << (self.bits - 1)) - 1 if self.is_signed else (1 << self.bits) - 1

    # ---- Conversion ----

    def cast(self, value: numbers.Real) -> int | float:
        """Convert *value* into this type without any range checking.

        Raises:
            TypeError: If *value* is not a real number.
            NarrowingError: If a NaN or infinity is cast to an integer type.
        """
        if not isinstance(value, numbers.Real):
            raise TypeError(f"expected a real number, got {type(value).__name__}")

        if self.is_float:
            result = _to_float(value)
            return _round_float32(result) if self.bits == 32 else result

        if isinstance(value, numbers.Integral):
            result = int(value)
        else:
            if not math.isfinite(value):
                raise NarrowingError(f"cannot cast {value!r} to {self.name}")
            result = math.trunc(value)

        if self.bits:
            modulus = 1 << self.bits
            result %= modulus
            if self.is_signed and result >= modulus >> 1:
                result -= modulus
        return result

    def __repr__(self) -> str:
        return f"NumericType({self.name})"


def _to_float(value: numbers.Real) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _round_float32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.inf if value > 0 else -math.inf


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

INT = NumericType("int", _INT, 0)
INT8 = NumericType("int8", _INT, 8)
INT16 = NumericType("int16", _INT, 16)
INT32 = NumericType("int32", _INT, 32)
INT64 = NumericType("int64", _INT, 64)
UINT8 = NumericType("uint8", _UINT, 8)
UINT16 = NumericType("uint16", _UINT, 16)
UINT32 = NumericType("uint32", _UINT, 32)
UINT64 = NumericType("uint64", _UINT, 64)
FLOAT32 = NumericType("float32", _FLOAT, 32)
FLOAT64 = NumericType("float64", _FLOAT, 64)

DTYPES: dict[str, NumericType] = {
    dtype.name: dtype
    for dtype in (
        INT, INT8, INT16, INT32, INT64,
        UINT8, UINT16, UINT32, UINT64,
        FLOAT32, FLOAT64,
    )
}

_ALIASES: dict[str, NumericType] = {
    "float": FLOAT64,
    "double": FLOAT64,
    "single": FLOAT32,
}

DTypeLike = Union[NumericType, str, type]


def resolve_dtype(spec: DTypeLike) -> NumericType:
    """Resolve a dtype specification to a ``NumericType``.

    Accepts a ``NumericType``, a type name such as ``"int8"`` (case
    insensitive), or one of the Python types ``int`` and ``float``.

    Raises:
        ValueError: If a name does not match any known type.
        TypeError: For any other kind of specification.
    """
    if isinstance(spec, NumericType):
        return spec
    if spec is int:
        return INT
    if spec is float:
        return FLOAT64
    if isinstance(spec, str):
        key = spec.strip().lower()
        dtype = DTYPES.get(key) or _ALIASES.get(key)
        if dtype is None:
            raise ValueError(
                f"Unknown numeric type {spec!r}; expected one of {', '.join(DTYPES)}"
            )
        return dtype
    raise TypeError(f"Cannot interpret {spec!r} as a numeric type")
