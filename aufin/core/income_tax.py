from __future__ import annotations

from decimal import Decimal

from aufin.core._brackets import Bracket, round_whole, to_decimal
from aufin.core.models import TaxBreakdown
from aufin.core.schedules import TaxSchedule

D = Decimal
_ZERO = D("0")
_ONE = D("1")


def _schedule(schedule: TaxSchedule | None) -> TaxSchedule:
    if schedule is not None:
        return schedule
    from aufin.core.tax_years import default_tables

    return default_tables().income_tax


def bracket_tax(income: D, bracket: Bracket) -> D:
    # Offset of one dollar on the income above the lower bound is intentional;
    # published figures depend on it.
    return bracket.base_amount + bracket.rate * (income - bracket.lower_bound + _ONE)


def _components(income: D, schedule: TaxSchedule) -> tuple[D, D, Bracket | None]:
    if income <= _ZERO:
        return _ZERO, _ZERO, None
    # Cents above a whole-dollar upper bound are still taxed at that bracket.
    found = schedule.brackets.find(income) or schedule.brackets.floor(income)
    tax = bracket_tax(income, found) if found is not None else _ZERO
    levy = income * schedule.levy_rate
    return tax, levy, found


def calculate_tax(annual_income: int | float | Decimal, schedule: TaxSchedule | None = None) -> int:
    """Annual income tax plus the flat Medicare levy, in whole dollars.

    Incomes at or below zero pay nothing. The levy has no low-income
    phase-in.
    """
    tax, levy, _ = _components(to_decimal(annual_income), _schedule(schedule))
    return round_whole(tax + levy)


def tax_breakdown(annual_income: int | float | Decimal, schedule: TaxSchedule | None = None) -> TaxBreakdown:
    income = to_decimal(annual_income)
    tax, levy, found = _components(income, _schedule(schedule))
    total = round_whole(tax + levy)
    return TaxBreakdown(
        taxable_income=max(_ZERO, income),
        bracket_tax=tax,
        levy=levy,
        total_tax=total,
        marginal_rate=found.rate if found is not None else _ZERO,
        effective_rate=(D(total) / income) if income > _ZERO else _ZERO,
    )


__all__ = ["bracket_tax", "calculate_tax", "tax_breakdown"]
