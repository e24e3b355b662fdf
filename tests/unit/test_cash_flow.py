from decimal import Decimal as D

from aufin.core.cash_flow import annualised_income, summarise_expenses, take_home
from aufin.core.frequency import Frequency
from aufin.core.tax_years import get_tables
from tests.fixtures.sample_inputs import make_expenses, make_salary


def test_annualised_income_skips_inactive_sources() -> None:
    sources = [
        make_salary("10000"),
        make_salary("500", name="Side gig", frequency="weekly"),
        make_salary("9999", name="Old job", is_active=False),
    ]
    assert annualised_income(sources) == D("146000")


def test_summarise_expenses_excludes_one_off_items() -> None:
    summary = summarise_expenses(make_expenses())
    assert summary.recurring_annual == D("27200")
    assert summary.recurring_monthly == D("27200") / 12
    assert summary.one_off_total == D("1200")


def test_take_home_with_hecs() -> None:
    result = take_home([make_salary("10000", tax_withheld=D("2500"))], hecs_balance=50000)
    assert result.financial_year == "2025-26"
    assert result.gross_annual == D("120000")
    assert result.income_tax == 29188
    assert result.hecs_repayment == D("7950")
    assert result.tax_withheld == D("30000")
    assert result.net_annual == D("82862")
    assert result.net_by_frequency[Frequency.ANNUALLY] == D("82862")
    assert result.net_by_frequency[Frequency.MONTHLY] == D("82862") / 12


def test_take_home_hecs_capped_by_balance() -> None:
    result = take_home([make_salary("10000")], hecs_balance=D("1000.50"), tables=get_tables("2025-26"))
    assert result.hecs_repayment == D("1000.50")
    assert result.net_annual == D("120000") - 29188 - D("1000.50")


def test_take_home_without_income() -> None:
    result = take_home([])
    assert result.gross_annual == 0
    assert result.income_tax == 0
    assert result.net_annual == 0
