"""Configuration management for steprange.

Loads settings from environment variables and/or a ``.env`` file using
pydantic-settings (Pydantic v2). The settings only choose defaults: the
element type a range falls back to when none is given, and the log level
the CLI configures.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from steprange.numeric.dtypes import NumericType, resolve_dtype

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class RangeSettings(BaseSettings):
    """steprange configuration.

    Values are loaded in priority order:
      1. Explicit constructor arguments
      2. Environment variables (``STEPRANGE_`` prefix)
      3. ``.env`` file
    """

    model_config = SettingsConfigDict(
        env_prefix="STEPRANGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---- Element types ----
    default_int_dtype: str = Field(
        default="int",
        description="Element type for ranges built from integer bounds",
    )
    default_float_dtype: str = Field(
        default="float64",
        description="Element type for ranges built from floating-point bounds",
    )

    # ---- Logging ----
    log_level: str = Field(
        default="WARNING",
        description="Log level configured by the CLI when not verbose",
    )

    # ---- Validators ----

    @field_validator("default_int_dtype")
    @classmethod
    def _check_int_dtype(cls, v: str) -> str:
        dtype = resolve_dtype(v)
        if not dtype.is_integer:
            raise ValueError(f"default_int_dtype must name an integer type, got {v!r}")
        return dtype.name

    @field_validator("default_float_dtype")
    @classmethod
    def _check_float_dtype(cls, v: str) -> str:
        dtype = resolve_dtype(v)
        if not dtype.is_float:
            raise ValueError(f"default_float_dtype must name a float type, got {v!r}")
        return dtype.name

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {v!r}")
        return v

    # ---- Resolved values ----

    @property
    def int_dtype(self) -> NumericType:
        return resolve_dtype(self.default_int_dtype)

    @property
    def float_dtype(self) -> NumericType:
        return resolve_dtype(self.default_float_dtype)

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> RangeSettings:
    """Return the process-wide settings, loading them on first use."""
    return RangeSettings()
