"""Numeric element types and checked conversions."""

from steprange.numeric.dtypes import (
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
    DTypeLike,
    NumericType,
    resolve_dtype,
)
from steprange.numeric.narrowing import is_narrowing, narrow

__all__ = [
    "DTYPES",
    "DTypeLike",
    "FLOAT32",
    "FLOAT64",
    "INT",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "NumericType",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "is_narrowing",
    "narrow",
    "resolve_dtype",
]
