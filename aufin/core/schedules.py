from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from aufin.core._brackets import BracketTable

D = Decimal


@dataclass(frozen=True)
class TaxSchedule:
    brackets: BracketTable
    levy_rate: D


@dataclass(frozen=True)
class HecsSchedule:
    brackets: BracketTable
    repayment_threshold: D
    fallback_rate: D
    cpi_rate: D


@dataclass(frozen=True)
class FinancialYearTables:
    """Every statutory constant needed for one financial year.

    Calculators accept an instance of this (or one of its schedules) so a new
    year's figures can be swapped in without touching call sites.
    """

    financial_year: str
    income_tax: TaxSchedule
    hecs: HecsSchedule
    franking_factor: D


__all__ = ["FinancialYearTables", "HecsSchedule", "TaxSchedule"]
