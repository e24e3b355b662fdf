"""HECS/HELP compulsory repayment calculations.

Repayments are driven by repayment income and the bracket table of the
configured financial year. From 2025-26 the middle brackets are marginal
(a base amount plus a rate on income over the bracket's threshold) while the
top bracket applies a flat rate to the whole income.
"""
from __future__ import annotations

from decimal import Decimal

from aufin.core._brackets import round_whole, to_decimal
from aufin.core.models import HecsProjectionYear
from aufin.core.schedules import HecsSchedule
from aufin.log import get_logger

D = Decimal
_ZERO = D("0")
_ONE = D("1")
DEFAULT_MAX_YEARS = 50

logger = get_logger("hecs")


def _schedule(schedule: HecsSchedule | None) -> HecsSchedule:
    if schedule is not None:
        return schedule
    from aufin.core.tax_years import default_tables

    return default_tables().hecs


def calculate_hecs_repayment(annual_income: int | float | Decimal, schedule: HecsSchedule | None = None) -> int:
    """Compulsory annual repayment for the given repayment income, in whole dollars."""
    sched = _schedule(schedule)
    income = to_decimal(annual_income)
    if income <= _ZERO or income <= sched.repayment_threshold:
        return 0

    found = sched.brackets.find(income)
    if found is None:
        logger.debug("No HECS bracket for income %s; applying fallback rate %s", income, sched.fallback_rate)
        return round_whole(income * sched.fallback_rate)
    if found.rate == _ZERO:
        return 0
    if found.is_marginal:
        threshold_base = found.lower_bound - _ONE
        return round_whole(found.base_amount + (income - threshold_base) * found.rate)
    return round_whole(income * found.rate)


def calculate_capped_hecs_repayment(
    annual_income: int | float | Decimal,
    hecs_balance: int | float | Decimal,
    schedule: HecsSchedule | None = None,
) -> Decimal:
    """Repayment limited to the outstanding balance."""
    balance = to_decimal(hecs_balance)
    if balance <= _ZERO:
        return _ZERO
    return min(D(calculate_hecs_repayment(annual_income, schedule)), balance)


def index_balance(
    hecs_balance: int | float | Decimal,
    cpi_rate: int | float | Decimal | None = None,
    schedule: HecsSchedule | None = None,
) -> Decimal:
    balance = to_decimal(hecs_balance)
    if balance <= _ZERO:
        return _ZERO
    rate = _schedule(schedule).cpi_rate if cpi_rate is None else to_decimal(cpi_rate)
    return balance * (_ONE + rate)


def project_repayments(
    hecs_balance: int | float | Decimal,
    annual_income: int | float | Decimal,
    *,
    income_growth: int | float | Decimal = 0,
    cpi_rate: int | float | Decimal | None = None,
    max_years: int = DEFAULT_MAX_YEARS,
    schedule: HecsSchedule | None = None,
) -> list[HecsProjectionYear]:
    """Year-by-year payoff schedule.

    Each year the opening balance is indexed by CPI, then the compulsory
    repayment (capped at the indexed balance) is deducted. Income grows by
    ``income_growth`` between years. Stops once the balance is cleared or
    after ``max_years`` years, whichever comes first; the bracket table itself
    is not indexed.
    """
    sched = _schedule(schedule)
    rate = sched.cpi_rate if cpi_rate is None else to_decimal(cpi_rate)
    growth = to_decimal(income_growth)
    balance = to_decimal(hecs_balance)
    income = to_decimal(annual_income)

    rows: list[HecsProjectionYear] = []
    year = 1
    while balance > _ZERO and year <= max_years:
        indexed = index_balance(balance, rate, sched)
        repayment = calculate_capped_hecs_repayment(income, indexed, sched)
        closing = indexed - repayment
        rows.append(
            HecsProjectionYear(
                year=year,
                opening_balance=balance,
                indexation=indexed - balance,
                repayment_income=income,
                repayment=repayment,
                closing_balance=closing,
            )
        )
        balance = closing
        income = income * (_ONE + growth)
        year += 1

    if balance > _ZERO:
        logger.info("HECS balance %s not repaid within %s years", balance.quantize(D("0.01")), max_years)
    return rows


__all__ = [
    "calculate_capped_hecs_repayment",
    "calculate_hecs_repayment",
    "index_balance",
    "project_repayments",
]
