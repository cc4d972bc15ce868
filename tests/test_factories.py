"""Tests for steprange.core.factories (enum_range, min_range)."""

from __future__ import annotations

from enum import Enum

import pytest

from steprange import UINT8, NarrowingError, StepRange, enum_range, min_range


class Colour(Enum):
    RED = 0
    GREEN = 1
    BLUE = 2


class Suit(Enum):
    HEARTS = "hearts"


# ---------------------------------------------------------------------------
# enum_range
# ---------------------------------------------------------------------------

class TestEnumRange:
    """Ranges over the integer encoding of an enum member."""

    def test_size(self, numbers_enum):
        assert enum_range(numbers_enum.FOUR).size() == 4

    def test_first_and_last(self, numbers_enum):
        r = enum_range(numbers_enum.FOUR)
        assert r[0] == 0
        assert r[-1] == 3

    def test_inner_indices(self, numbers_enum):
        r = enum_range(numbers_enum.FOUR)
        assert r[1] == 1
        assert r[-2] == 2

    def test_values_are_plain_ints(self, numbers_enum):
        r = enum_range(numbers_enum.THREE)
        assert [type(v) for v in r] == [int, int, int]

    def test_first_member_is_empty(self, numbers_enum):
        assert enum_range(numbers_enum.ZERO).empty()

    def test_plain_enum_with_int_values(self):
        assert list(enum_range(Colour.BLUE)) == [0, 1]

    def test_explicit_dtype(self, numbers_enum):
        assert enum_range(numbers_enum.TWO, dtype="uint8").dtype is UINT8

    def test_equivalent_to_stop_only(self, numbers_enum):
        assert enum_range(numbers_enum.FOUR) == StepRange(4)

    def test_non_integer_enum(self):
        with pytest.raises(TypeError, match="integer-valued"):
            enum_range(Suit.HEARTS)

    def test_not_an_enum(self):
        with pytest.raises(TypeError, match="enum member"):
            enum_range(4)


# ---------------------------------------------------------------------------
# min_range
# ---------------------------------------------------------------------------

class TestMinRange:
    """At most *count* positions of a container."""

    def test_count_larger_than_container(self):
        assert min_range([1, 2, 3], 5) == StepRange(3)

    def test_count_smaller_than_container(self):
        assert list(min_range([1, 2, 3], 2)) == [0, 1]

    def test_empty_container(self):
        assert min_range([], 3).empty()

    def test_narrowed_size(self):
        r = min_range("abc" * 10, 10, dtype="int8")
        assert list(r) == list(range(10))

    def test_size_not_representable(self):
        with pytest.raises(NarrowingError):
            min_range([0] * 300, 10, dtype="int8")
