from __future__ import annotations

from typing import Dict, Iterable, List

from aufin.core.schedules import FinancialYearTables
from aufin.core.tax_years.fy2025_26 import TABLES as fy2025_26

_REGISTRY: Dict[str, FinancialYearTables] = {}

DEFAULT_FINANCIAL_YEAR = "2025-26"


class UnknownFinancialYearError(KeyError):
    pass


def register_financial_years(tables: Iterable[FinancialYearTables]) -> None:
    for entry in tables:
        _REGISTRY[entry.financial_year] = entry


register_financial_years((fy2025_26,))


def get_tables(financial_year: str) -> FinancialYearTables:
    key = (financial_year or "").strip()
    try:
        return _REGISTRY[key]
    except KeyError as exc:
        raise UnknownFinancialYearError(f"No bracket tables registered for financial year {key!r}") from exc


def list_financial_years() -> List[str]:
    return sorted(_REGISTRY)


def default_tables() -> FinancialYearTables:
    from aufin.config import get_settings

    return get_tables(get_settings().financial_year)


__all__ = [
    "DEFAULT_FINANCIAL_YEAR",
    "UnknownFinancialYearError",
    "default_tables",
    "get_tables",
    "list_financial_years",
    "register_financial_years",
]
