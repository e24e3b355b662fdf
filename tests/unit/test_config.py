import pytest
from pydantic import ValidationError

from aufin.config import Settings, get_settings
from aufin.core.tax_years import (
    UnknownFinancialYearError,
    default_tables,
    get_tables,
    list_financial_years,
)


def test_settings_defaults() -> None:
    settings = Settings()
    assert settings.financial_year == "2025-26"
    assert settings.default_frequency == "monthly"
    assert settings.log_level == "WARNING"
    assert settings.strict_tables is True


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("AUFIN_DEFAULT_FREQUENCY", " Fortnightly ")
    monkeypatch.setenv("AUFIN_LOG_LEVEL", "debug")
    get_settings.cache_clear()
    settings = get_settings()
    assert settings.default_frequency == "fortnightly"
    assert settings.log_level == "DEBUG"
    assert settings.numeric_log_level() == 10


def test_unknown_financial_year_rejected(monkeypatch) -> None:
    monkeypatch.setenv("AUFIN_FINANCIAL_YEAR", "1999-00")
    with pytest.raises(ValidationError, match="no bracket tables"):
        Settings()


def test_lenient_tables_defer_lookup_error(monkeypatch) -> None:
    monkeypatch.setenv("AUFIN_FINANCIAL_YEAR", "1999-00")
    monkeypatch.setenv("AUFIN_STRICT_TABLES", "false")
    get_settings.cache_clear()
    assert get_settings().financial_year == "1999-00"
    with pytest.raises(UnknownFinancialYearError):
        default_tables()


@pytest.mark.parametrize("name, value", [("AUFIN_LOG_LEVEL", "chatty"), ("AUFIN_DEFAULT_FREQUENCY", "hourly")])
def test_invalid_settings_rejected(monkeypatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()


def test_settings_are_frozen() -> None:
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.financial_year = "2026-27"


def test_registry_lookup() -> None:
    assert "2025-26" in list_financial_years()
    assert get_tables(" 2025-26 ").financial_year == "2025-26"
    assert default_tables() is get_tables("2025-26")
    with pytest.raises(UnknownFinancialYearError):
        get_tables("2031-32")
    with pytest.raises(KeyError):
        get_tables("")
