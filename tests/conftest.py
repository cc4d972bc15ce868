"""Shared fixtures for steprange tests.

Provides the reference ranges used across test modules and a fixture that
isolates environment-driven settings.
"""

from __future__ import annotations

import os
from enum import IntEnum

import pytest

from steprange import StepRange, get_settings

_SETTINGS_ENV = (
    "STEPRANGE_DEFAULT_INT_DTYPE",
    "STEPRANGE_DEFAULT_FLOAT_DTYPE",
    "STEPRANGE_LOG_LEVEL",
)


# ---------------------------------------------------------------------------
# Settings isolation
# ---------------------------------------------------------------------------

@pytest.fixture()
def clean_settings():
    """Reset cached settings and drop ``STEPRANGE_*`` variables afterwards.

    ``load_dotenv`` writes straight into ``os.environ``, so monkeypatch
    alone cannot undo what the CLI loads from an env file.
    """
    get_settings.cache_clear()
    yield
    for name in _SETTINGS_ENV:
        os.environ.pop(name, None)
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Reference ranges
# ---------------------------------------------------------------------------

@pytest.fixture()
def exact_range() -> StepRange:
    """0..10 step 2 -- the step divides the span exactly."""
    return StepRange(0, 10, 2)


@pytest.fixture()
def remainder_range() -> StepRange:
    """2..5 step 3 -- a single value, the step overshoots stop."""
    return StepRange(2, 5, 3)


@pytest.fixture()
def oversized_range() -> StepRange:
    """1..2 step 10."""
    return StepRange(1, 2, 10)


@pytest.fixture()
def cross_zero_range() -> StepRange:
    """-5..5 step 3: -5, -2, 1, 4."""
    return StepRange(-5, 5, 3)


@pytest.fixture()
def negative_step_range() -> StepRange:
    """9..-6 step -3: 9, 6, 3, 0, -3."""
    return StepRange(9, -6, -3, dtype="int64")


@pytest.fixture()
def float_range() -> StepRange:
    """-3.2..8.0 step 0.8."""
    return StepRange(-3.2, 8.0, 0.8)


# ---------------------------------------------------------------------------
# Enum
# ---------------------------------------------------------------------------

class Numbers(IntEnum):
    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4


@pytest.fixture()
def numbers_enum() -> type[Numbers]:
    return Numbers
