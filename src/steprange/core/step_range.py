"""Lazily evaluated numeric range.

A ``StepRange`` describes the progression ``start, start + step, ...`` up
to but excluding ``stop``, in the manner of the builtin ``range`` but over
any real element type. Nothing is materialized: size, indexed access and
iteration are all computed from the three bounds on demand.

Example::

    >>> r = StepRange(0, 10, 2)
    >>> len(r), r[0], r[-1]
    (5, 0, 8)
    >>> list(reversed(r))
    [8, 6, 4, 2, 0]
"""

from __future__ import annotations

import logging
import math
import numbers
import operator
from dataclasses import dataclass
from typing import Optional, Union

from steprange.config import get_settings
from steprange.core.iterators import RangeCursor, ReverseRangeCursor
from steprange.errors import InvalidRangeError, RangeIndexError
from steprange.numeric.dtypes import INT, INT64, DTypeLike, NumericType, resolve_dtype
from steprange.numeric.narrowing import is_narrowing, narrow

logger = logging.getLogger(__name__)

Number = Union[int, float]


@dataclass(frozen=True)
class StepRange:
    """Immutable arithmetic progression bounded by ``[start, stop)``.

    ``StepRange(stop)`` is shorthand for ``StepRange(0, stop, 1)``. When
    *dtype* is given every bound is converted into it and a lossy
    conversion raises ``NarrowingError``; otherwise the element type is
    the configured default for integer or floating-point bounds.

    Attributes:
        start: First value (inclusive).
        stop: Exclusive bound the progression never reaches or passes.
        step: Non-zero increment; its sign sets the direction.
        dtype: Element type every value is converted into.

    Raises:
        InvalidRangeError: If ``step`` is zero or points away from ``stop``.
        NarrowingError: If a bound is not representable in *dtype*.
        TypeError: If a bound is not a real number.
    """

    start: Number
    stop: Optional[Number] = None
    step: Number = 1
    dtype: Optional[DTypeLike] = None

    # ---- Validation ----

    def __post_init__(self) -> None:
        start, stop, step = self.start, self.stop, self.step
        if stop is None:
            start, stop = 0, start

        for name, value in (("start", start), ("stop", stop), ("step", step)):
            if not isinstance(value, numbers.Real):
                raise TypeError(
                    f"StepRange {name} must be a real number, got {type(value).__name__}"
                )

        dtype = (
            resolve_dtype(self.dtype)
            if self.dtype is not None
            else _infer_dtype(start, stop, step)
        )
        start, stop, step = (narrow(dtype, v) for v in (start, stop, step))

        if dtype.is_float and not all(math.isfinite(v) for v in (start, stop, step)):
            logger.debug("Rejected StepRange(%r, %r, %r): non-finite bound", start, stop, step)
            raise InvalidRangeError(
                f"StepRange bounds must be finite, got ({start!r}, {stop!r}, {step!r})"
            )
        if step == 0:
            logger.debug("Rejected StepRange(%r, %r, %r): zero step", start, stop, step)
            raise InvalidRangeError("StepRange cannot have a step of 0")
        if not ((start <= stop and step > 0) or (start >= stop and step < 0)):
            logger.debug("Rejected StepRange(%r, %r, %r): step points away from stop", start, stop, step)
            raise InvalidRangeError(
                f"Invalid range: step {step!r} never reaches stop {stop!r} from start {start!r}"
            )

        object.__setattr__(self, "start", start)
        object.__setattr__(self, "stop", stop)
        object.__setattr__(self, "step", step)
        object.__setattr__(self, "dtype", dtype)

    # ---- Size ----

    def size(self) -> int:
        """Number of values in the range.

        ``StepRange(5).size() == 5``, ``StepRange(2, 5, 3).size() == 1``,
        ``StepRange(1, 2, 10).size() == 1``.
        """
        span = self.stop - self.start
        if not self.dtype.is_float:
            # span and step share a sign, so floor division truncates
            steps = span // self.step
            return steps if self._raw_at(steps) == self.stop else steps + 1

        # the size is the first position whose value leaves [start, stop);
        # rounding can put the quotient off by one either way
        steps = math.trunc(span / self.step)
        while steps > 0 and not self._within_bounds(self._raw_at(steps - 1)):
            steps -= 1
        while self._within_bounds(self._raw_at(steps)):
            steps += 1
        return steps

    def empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    # ---- Indexed access ----

    def __getitem__(self, index):
        """Value at *index*, or a sub-range for a slice.

        Negative indices count from the end: ``r[-1]`` is the last value
        before ``stop``. ``r[0]`` is always ``start``.

        Raises:
            RangeIndexError: If the index resolves outside ``[start, stop)``.
        """
        if isinstance(index, slice):
            return self._slice(index)
        try:
            position = operator.index(index)
        except TypeError:
            raise TypeError(
                f"StepRange indices must be integers or slices, not {type(index).__name__}"
            ) from None

        if position < 0:
            position += self.size()
        value = self._raw_at(position)
        if not self._within_bounds(value):
            logger.debug("Rejected index %s into %r", index, self)
            raise RangeIndexError(f"StepRange index out of range: {index}")
        return self.dtype.cast(value)

    @property
    def first(self) -> Number:
        return self[0]

    @property
    def last(self) -> Number:
        return self[-1]

    def _raw_at(self, position: int) -> Number:
        # multiply then add; never accumulate
        return self.start + self.step * position

    def _within_bounds(self, value: Number) -> bool:
        if self.step > 0:
            return self.start <= value < self.stop
        return self.stop < value <= self.start

    def _slice(self, selection: slice) -> StepRange:
        size = self.size()
        first, last, stride = selection.indices(size)
        count = len(range(first, last, stride))
        step = self.step * stride

        if count == 0:
            origin = self[first] if 0 <= first < size else self.start
            stop = origin
        else:
            origin = self[first]
            if self.dtype.is_float:
                stop = origin + step * count
            else:
                final = origin + step * (count - 1)
                stop = final + (1 if step > 0 else -1)

        dtype = self.dtype
        if dtype.is_bounded and (is_narrowing(dtype, step) or is_narrowing(dtype, stop)):
            # values still fit; only the stride or the exclusive bound does not
            logger.debug("Slicing %r with %r widens the element type to int", self, selection)
            dtype = INT
        return StepRange(origin, stop, step, dtype=dtype)

    # ---- Sequence protocol ----

    def __contains__(self, value: object) -> bool:
        return self._position_of(value) is not None

    def index(self, value: Number) -> int:
        """Position of *value* in the range.

        Raises:
            ValueError: If *value* is not one of the range's values.
        """
        position = self._position_of(value)
        if position is None:
            raise ValueError(f"{value!r} is not in range")
        return position

    def count(self, value: Number) -> int:
        return 0 if self._position_of(value) is None else 1

    def _position_of(self, value: object) -> Optional[int]:
        if not isinstance(value, numbers.Real) or not self._within_bounds(value):
            return None
        offset = value - self.start
        if self.dtype.is_float:
            position = round(offset / self.step)
        else:
            position, remainder = divmod(offset, self.step)
            if remainder:
                return None
        if not 0 <= position < self.size():
            return None
        return int(position) if self[int(position)] == value else None

    # ---- Iteration ----

    def begin(self) -> RangeCursor:
        return RangeCursor(self, 0)

    def end(self) -> RangeCursor:
        return RangeCursor(self, narrow(INT64, self.size()))

    def rbegin(self) -> ReverseRangeCursor:
        return ReverseRangeCursor(self.end())

    def rend(self) -> ReverseRangeCursor:
        return ReverseRangeCursor(self.begin())

    def __iter__(self) -> RangeCursor:
        return self.begin()

    def __reversed__(self) -> ReverseRangeCursor:
        return self.rbegin()

    # ---- Display ----

    def __repr__(self) -> str:
        return f"StepRange({self.start!r}, {self.stop!r}, {self.step!r}, dtype={self.dtype.name})"


def _infer_dtype(*values: numbers.Real) -> NumericType:
    settings = get_settings()
    if all(isinstance(v, numbers.Integral) for v in values):
        return settings.int_dtype
    return settings.float_dtype
