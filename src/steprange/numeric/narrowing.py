"""Checked numeric conversions.

``narrow`` is the safe-cast primitive used wherever a value crosses a type
boundary: range bounds converted into a declared element type, and sizes
converted into a signed position.
"""

from __future__ import annotations

import logging
import math
import numbers

from steprange.errors import NarrowingError
from steprange.numeric.dtypes import DTypeLike, NumericType, resolve_dtype

logger = logging.getLogger(__name__)


def is_narrowing(
    dtype: DTypeLike,
    value: numbers.Real,
    source: DTypeLike | None = None,
) -> bool:
    """Return True if converting *value* to *dtype* loses information.

    The conversion narrows when the converted value no longer compares
    equal to the original, or when the two types disagree in signedness
    and the sign of the value changed on the way.

    Args:
        dtype: Target element type.
        value: Value to convert.
        source: Type *value* is held in. Python numbers are signed, so
            this only matters when the caller tracks an unsigned source.
    """
    target = resolve_dtype(dtype)
    source_signed = True if source is None else resolve_dtype(source).is_signed

    try:
        converted = target.cast(value)
    except NarrowingError:
        return True

    if _is_nan(value) and _is_nan(converted):
        return False
    if converted != value:
        return True
    return target.is_signed != source_signed and (converted < 0) != (value < 0)


def narrow(
    dtype: DTypeLike,
    value: numbers.Real,
    source: DTypeLike | None = None,
) -> int | float:
    """Convert *value* to *dtype*, refusing lossy conversions.

    Raises:
        NarrowingError: If ``is_narrowing(dtype, value, source)`` holds.
    """
    target: NumericType = resolve_dtype(dtype)
    if is_narrowing(target, value, source):
        logger.debug("Rejected narrowing conversion of %r to %s", value, target.name)
        raise NarrowingError(f"narrowing error: {value!r} is not representable as {target.name}")
    return target.cast(value)


def _is_nan(value: numbers.Real) -> bool:
    return isinstance(value, float) and math.isnan(value)
