"""Convenience constructors for ``StepRange``."""

from __future__ import annotations

import numbers
from collections.abc import Sized
from enum import Enum
from typing import Optional

from steprange.core.step_range import StepRange
from steprange.numeric.dtypes import DTypeLike, resolve_dtype
from steprange.numeric.narrowing import narrow


def enum_range(member: Enum, dtype: Optional[DTypeLike] = None) -> StepRange:
    """Range over every integer encoding below *member*.

    ``enum_range(Colour.BLUE)`` is ``StepRange(0, Colour.BLUE.value)``,
    which covers the enumerators declared before ``BLUE`` when the enum
    numbers its members from zero.

    Raises:
        TypeError: If *member* is not an enum member with an integer value.
    """
    if not isinstance(member, Enum):
        raise TypeError(f"enum_range() expects an enum member, got {type(member).__name__}")
    encoding = member.value
    if not isinstance(encoding, numbers.Integral):
        raise TypeError(
            f"enum_range() needs an integer-valued enum, {member!r} has value {encoding!r}"
        )
    return StepRange(0, int(encoding), dtype=dtype)


def min_range(
    container: Sized,
    count: numbers.Integral,
    dtype: Optional[DTypeLike] = None,
) -> StepRange:
    """Range over at most *count* positions of *container*.

    The container size is narrowed into *dtype* first when one is given.
    """
    size = len(container)
    if dtype is not None:
        size = narrow(resolve_dtype(dtype), size)
    return StepRange(min(size, count), dtype=dtype)
