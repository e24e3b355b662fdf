from decimal import Decimal as D

import hypothesis.strategies as st
import pytest
from hypothesis import given

from aufin.core._brackets import BracketTable, bracket
from aufin.core.hecs import (
    calculate_capped_hecs_repayment,
    calculate_hecs_repayment,
    index_balance,
    project_repayments,
)
from aufin.core.schedules import HecsSchedule


@pytest.mark.parametrize(
    "income, expected",
    [
        (-100, 0),
        (0, 0),
        (50000, 0),
        (67000, 0),
        (67001, 0),
        (67004, 1),
        (67010, 2),
        (70000, 450),
        (125000, 8700),
        (125001, 8700),
        (125100, 8717),
        (179285, 17928),
        (179286, 17929),
        (200000, 20000),
    ],
)
def test_repayment_2025_26(income: int, expected: int) -> None:
    assert calculate_hecs_repayment(income) == expected


def test_threshold_boundary() -> None:
    assert calculate_hecs_repayment(67000) == 0
    # 1 x 0.15 rounds to nothing
    assert calculate_hecs_repayment(67001) == 0
    assert calculate_hecs_repayment(67004) > 0


def test_fractional_income_between_bounds_uses_fallback_rate() -> None:
    assert calculate_hecs_repayment(67000.5) == 6700
    assert calculate_hecs_repayment(125000.5) == 12500
    assert calculate_hecs_repayment(D("179285.40")) == 17929


def test_top_bracket_is_flat_on_whole_income() -> None:
    assert calculate_hecs_repayment(179286) == round(179286 * 0.10)
    assert calculate_hecs_repayment(250000) == 25000


def test_fallback_rate_when_no_bracket_matches() -> None:
    schedule = HecsSchedule(
        brackets=BracketTable((bracket(1000, None, "0.05", marginal=False),)),
        repayment_threshold=D("0"),
        fallback_rate=D("0.10"),
        cpi_rate=D("0"),
    )
    assert calculate_hecs_repayment(500, schedule) == 50
    assert calculate_hecs_repayment(2000, schedule) == 100


@pytest.mark.parametrize(
    "income, balance, expected",
    [
        (70000, 0, D("0")),
        (70000, -10, D("0")),
        (70000, 10000, D("450")),
        (200000, 5000, D("5000")),
        (70000, D("300.50"), D("300.50")),
        (40000, 10000, D("0")),
    ],
)
def test_capped_repayment(income, balance, expected) -> None:
    assert calculate_capped_hecs_repayment(income, balance) == expected


@given(
    st.integers(min_value=0, max_value=500_000),
    st.decimals(min_value=-1000, max_value=100_000, places=2, allow_nan=False, allow_infinity=False),
)
def test_capped_repayment_never_exceeds_balance(income: int, balance: D) -> None:
    repayment = calculate_capped_hecs_repayment(income, balance)
    assert repayment >= 0
    assert repayment <= max(balance, D("0"))


@given(st.integers(min_value=0, max_value=500_000))
def test_zero_balance_means_no_repayment(income: int) -> None:
    assert calculate_capped_hecs_repayment(income, 0) == 0


def test_index_balance_uses_default_cpi() -> None:
    assert index_balance(10000) == D("10300.00")
    assert index_balance(10000, D("0.05")) == D("10500.00")
    assert index_balance(0) == 0


def test_projection_clears_balance() -> None:
    rows = project_repayments(20000, 100000, cpi_rate=0)
    assert [row.repayment for row in rows] == [D("4950.00")] * 4 + [D("200.00")]
    assert rows[-1].closing_balance == D("0.00")
    assert rows[0].opening_balance == D("20000.00")


def test_projection_single_year_when_repayment_covers_indexed_balance() -> None:
    rows = project_repayments(1000, 200000)
    assert len(rows) == 1
    assert rows[0].indexation == D("30.00")
    assert rows[0].repayment == D("1030.00")
    assert rows[0].closing_balance == D("0.00")


def test_projection_below_threshold_stops_at_max_years() -> None:
    rows = project_repayments(10000, 60000, max_years=3)
    assert len(rows) == 3
    assert all(row.repayment == 0 for row in rows)
    assert rows[-1].closing_balance == (D("10000") * D("1.03") ** 3).quantize(D("0.01"))


def test_projection_income_growth_crosses_threshold() -> None:
    rows = project_repayments(50000, 66000, income_growth=D("0.05"), cpi_rate=0, max_years=2)
    assert rows[0].repayment == 0
    assert rows[1].repayment_income == D("69300.00")
    assert rows[1].repayment == D("345.00")


def test_projection_empty_for_cleared_balance() -> None:
    assert project_repayments(0, 100000) == []
