from __future__ import annotations

from decimal import Decimal

from aufin.core._brackets import BracketTable, bracket
from aufin.core.schedules import FinancialYearTables, HecsSchedule, TaxSchedule

D = Decimal

FINANCIAL_YEAR = "2025-26"

INCOME_TAX_BRACKETS = BracketTable(
    (
        bracket(0, 18_200, "0"),
        bracket(18_201, 45_000, "0.16"),
        bracket(45_001, 135_000, "0.30", 4_288),
        bracket(135_001, 190_000, "0.37", 31_288),
        bracket(190_001, None, "0.45", 51_638),
    )
)
MEDICARE_LEVY_RATE = D("0.02")

# $0 - $67,000: nil
# $67,001 - $125,000: 15c per $1 over $67,000
# $125,001 - $179,285: $8,700 plus 17c per $1 over $125,000
# $179,286+: 10% of total repayment income
HECS_REPAYMENT_BRACKETS = BracketTable(
    (
        bracket(0, 67_000, "0", marginal=False),
        bracket(67_001, 125_000, "0.15"),
        bracket(125_001, 179_285, "0.17", 8_700),
        bracket(179_286, None, "0.10", marginal=False),
    )
)
HECS_REPAYMENT_THRESHOLD = D("67000")
HECS_FALLBACK_RATE = D("0.10")
DEFAULT_CPI_RATE = D("0.03")

FRANKING_FACTOR = D("0.4286")

TABLES = FinancialYearTables(
    financial_year=FINANCIAL_YEAR,
    income_tax=TaxSchedule(brackets=INCOME_TAX_BRACKETS, levy_rate=MEDICARE_LEVY_RATE),
    hecs=HecsSchedule(
        brackets=HECS_REPAYMENT_BRACKETS,
        repayment_threshold=HECS_REPAYMENT_THRESHOLD,
        fallback_rate=HECS_FALLBACK_RATE,
        cpi_rate=DEFAULT_CPI_RATE,
    ),
    franking_factor=FRANKING_FACTOR,
)
