"""Error types raised by steprange.

Every failure is a programmer error detected at a fixed point: range
construction, numeric conversion, or indexed access. Each error also
derives from the matching builtin so callers can catch ``ValueError`` or
``IndexError`` the way they would for the builtin ``range``.
"""

from __future__ import annotations


class RangeError(Exception):
    """Base class for all steprange errors."""


class InvalidRangeError(RangeError, ValueError):
    """The step is zero or points away from ``stop``."""


class NarrowingError(RangeError, ValueError):
    """A value cannot be represented exactly in the target element type."""


class RangeIndexError(RangeError, IndexError):
    """An index resolves to a value outside ``[start, stop)``."""
