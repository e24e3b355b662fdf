from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from aufin.core.frequency import Frequency, from_annual, to_annual
from aufin.core.hecs import calculate_capped_hecs_repayment
from aufin.core.income_tax import calculate_tax
from aufin.core.models import ExpenseItem, ExpenseSummary, IncomeSource, TakeHomeSummary
from aufin.core.schedules import FinancialYearTables
from aufin.log import get_logger

D = Decimal
_ZERO = D("0")

logger = get_logger("cash_flow")


def annualised_income(sources: Iterable[IncomeSource]) -> Decimal:
    return sum((s.annualised_amount for s in sources if s.is_active), _ZERO)


def summarise_expenses(expenses: Iterable[ExpenseItem]) -> ExpenseSummary:
    recurring = _ZERO
    one_off = _ZERO
    for item in expenses:
        if item.is_one_off:
            one_off += item.amount
            continue
        recurring += to_annual(item.amount, item.frequency)
    return ExpenseSummary(
        recurring_annual=recurring,
        recurring_monthly=from_annual(recurring, Frequency.MONTHLY),
        one_off_total=one_off,
    )


def take_home(
    sources: Iterable[IncomeSource],
    hecs_balance: int | float | Decimal = 0,
    tables: FinancialYearTables | None = None,
) -> TakeHomeSummary:
    """Net-of-tax income for a set of income sources.

    Gross income is annualised, then income tax and the balance-capped HECS
    repayment are deducted. Tax already withheld is reported but does not
    change the net figure.
    """
    if tables is None:
        from aufin.core.tax_years import default_tables

        tables = default_tables()

    active = [s for s in sources if s.is_active]
    gross = annualised_income(active)
    tax = calculate_tax(gross, tables.income_tax)
    hecs = calculate_capped_hecs_repayment(gross, hecs_balance, tables.hecs)
    withheld = sum(
        (to_annual(s.tax_withheld, s.frequency) for s in active if s.tax_withheld is not None),
        _ZERO,
    )
    net = gross - D(tax) - hecs
    logger.debug("take_home gross=%s tax=%s hecs=%s net=%s", gross, tax, hecs, net)
    return TakeHomeSummary(
        financial_year=tables.financial_year,
        gross_annual=gross,
        income_tax=tax,
        hecs_repayment=hecs,
        tax_withheld=withheld,
        net_annual=net,
        net_by_frequency={freq: from_annual(net, freq) for freq in Frequency},
    )


__all__ = ["annualised_income", "summarise_expenses", "take_home"]
