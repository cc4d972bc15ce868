"""Range value type, cursors and convenience constructors."""

from steprange.core.factories import enum_range, min_range
from steprange.core.iterators import RangeCursor, ReverseRangeCursor
from steprange.core.step_range import StepRange

__all__ = [
    "RangeCursor",
    "ReverseRangeCursor",
    "StepRange",
    "enum_range",
    "min_range",
]
