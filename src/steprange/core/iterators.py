"""Bidirectional cursors over a ``StepRange``.

A cursor is a range reference plus a signed position. It stores no value:
reading ``cursor.value`` goes through the range's indexed access every
time. Positions may sit outside the range transiently (the end sentinel is
``len(range)``); reading the value there raises ``RangeIndexError``.

Cursors also implement the iterator protocol, so ``for v in r`` and
``for v in reversed(r)`` walk them from their current position to the end
sentinel.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from steprange.errors import RangeIndexError

if TYPE_CHECKING:
    from steprange.core.step_range import StepRange

Number = Union[int, float]


class RangeCursor:
    """Forward cursor at *position* within *source*."""

    __slots__ = ("_range", "_position")

    def __init__(self, source: StepRange, position: int = 0) -> None:
        self._range = source
        self._position = position

    @property
    def range(self) -> StepRange:
        return self._range

    @property
    def position(self) -> int:
        return self._position

    # ---- Comparison ----

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeCursor):
            return NotImplemented
        return self._range is other._range and self._position == other._position

    __hash__ = None  # mutable

    # ---- Movement ----

    def advance(self) -> RangeCursor:
        """Step forward one position and return this cursor."""
        self._position += 1
        return self

    def retreat(self) -> RangeCursor:
        """Step back one position and return this cursor."""
        self._position -= 1
        return self

    def post_advance(self) -> RangeCursor:
        """Step forward, returning a copy at the previous position."""
        previous = self.copy()
        self._position += 1
        return previous

    def post_retreat(self) -> RangeCursor:
        """Step back, returning a copy at the previous position."""
        previous = self.copy()
        self._position -= 1
        return previous

    def copy(self) -> RangeCursor:
        return RangeCursor(self._range, self._position)

    # ---- Dereference ----

    @property
    def value(self) -> Number:
        """Range value at the current position.

        Raises:
            RangeIndexError: If the position is outside ``[0, len(range))``.
        """
        if self._position < 0:
            # negative positions are sentinels, not from-the-end indices
            raise RangeIndexError(f"cursor position out of range: {self._position}")
        return self._range[self._position]

    # ---- Iterator protocol ----

    def __iter__(self) -> RangeCursor:
        return self

    def __next__(self) -> Number:
        if not 0 <= self._position < len(self._range):
            raise StopIteration
        return self.post_advance().value

    def __repr__(self) -> str:
        return f"RangeCursor({self._range!r}, position={self._position})"


class ReverseRangeCursor:
    """Reverse adapter over a forward cursor.

    Wrapping forward position ``p`` reads the value at ``p - 1``, so
    ``ReverseRangeCursor(r.end())`` starts at the last value and
    ``ReverseRangeCursor(r.begin())`` is the reverse end sentinel.
    """

    __slots__ = ("_base",)

    def __init__(self, base: RangeCursor) -> None:
        self._base = base.copy()

    @property
    def base(self) -> RangeCursor:
        """Copy of the wrapped forward cursor."""
        return self._base.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReverseRangeCursor):
            return NotImplemented
        return self._base == other._base

    __hash__ = None

    def advance(self) -> ReverseRangeCursor:
        self._base.retreat()
        return self

    def retreat(self) -> ReverseRangeCursor:
        self._base.advance()
        return self

    def post_advance(self) -> ReverseRangeCursor:
        previous = self.copy()
        self._base.retreat()
        return previous

    def post_retreat(self) -> ReverseRangeCursor:
        previous = self.copy()
        self._base.advance()
        return previous

    def copy(self) -> ReverseRangeCursor:
        return ReverseRangeCursor(self._base)

    @property
    def value(self) -> Number:
        return self._base.copy().retreat().value

    def __iter__(self) -> ReverseRangeCursor:
        return self

    def __next__(self) -> Number:
        if not 0 < self._base.position <= len(self._base.range):
            raise StopIteration
        return self.post_advance().value

    def __repr__(self) -> str:
        return f"ReverseRangeCursor({self._base!r})"
