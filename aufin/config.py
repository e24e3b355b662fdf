from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from aufin.core.tax_years import DEFAULT_FINANCIAL_YEAR

ENV_BOOL_TRUE = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ENV_BOOL_TRUE


class Settings(BaseModel):
    financial_year: str = Field(default_factory=lambda: os.getenv("AUFIN_FINANCIAL_YEAR", DEFAULT_FINANCIAL_YEAR))
    default_frequency: str = Field(default_factory=lambda: os.getenv("AUFIN_DEFAULT_FREQUENCY", "monthly"))
    log_level: str = Field(default_factory=lambda: os.getenv("AUFIN_LOG_LEVEL", "WARNING"))
    strict_tables: bool = Field(default_factory=lambda: _env_bool("AUFIN_STRICT_TABLES", True))

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("financial_year", mode="before")
    @classmethod
    def _normalize_year(cls, value: str) -> str:
        return (value or DEFAULT_FINANCIAL_YEAR).strip()

    @field_validator("default_frequency", mode="before")
    @classmethod
    def _validate_frequency(cls, value: str) -> str:
        from aufin.core.frequency import Frequency

        normalized = (value or "monthly").strip().lower()
        if normalized not in {member.value for member in Frequency}:
            raise ValueError(f"AUFIN_DEFAULT_FREQUENCY must be one of the payment frequencies, got {value!r}")
        return normalized

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        upper = (value or "WARNING").upper()
        if upper not in _LOG_LEVELS:
            raise ValueError(f"AUFIN_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {upper}")
        return upper

    @model_validator(mode="after")
    def _require_tables(self) -> "Settings":
        if self.strict_tables:
            from aufin.core.tax_years import UnknownFinancialYearError, get_tables

            try:
                get_tables(self.financial_year)
            except UnknownFinancialYearError as exc:
                raise ValueError(f"AUFIN_FINANCIAL_YEAR {self.financial_year!r} has no bracket tables") from exc
        return self

    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level, logging.WARNING)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
