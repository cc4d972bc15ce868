"""steprange -- lazily evaluated numeric ranges with checked conversions."""

from steprange.config import RangeSettings, get_settings
from steprange.core import (
    RangeCursor,
    ReverseRangeCursor,
    StepRange,
    enum_range,
    min_range,
)
from steprange.errors import (
    InvalidRangeError,
    NarrowingError,
    RangeError,
    RangeIndexError,
)
from steprange.numeric import (
    DTYPES,
    FLOAT32,
    FLOAT64,
    INT,
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    NumericType,
    is_narrowing,
    narrow,
    resolve_dtype,
)

__all__ = [
    "DTYPES",
    "FLOAT32",
    "FLOAT64",
    "INT",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "InvalidRangeError",
    "NarrowingError",
    "NumericType",
    "RangeCursor",
    "RangeError",
    "RangeIndexError",
    "RangeSettings",
    "ReverseRangeCursor",
    "StepRange",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "enum_range",
    "get_settings",
    "is_narrowing",
    "min_range",
    "narrow",
    "resolve_dtype",
]
