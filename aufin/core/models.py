from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from aufin.core.frequency import Frequency, coerce_frequency, convert, to_annual

_CENT = Decimal("0.01")

DistributionType = Literal["dividend", "distribution", "drp", "special"]
OneOff = Literal["one_off"]


def _frequency_or_default(value):
    return coerce_frequency(value)


def _coerce_frequency_field(value):
    if value is None or isinstance(value, Frequency):
        return coerce_frequency(value)
    if str(value).strip().lower() == "one_off":
        return "one_off"
    return coerce_frequency(value)


class FrequencyAmount(BaseModel):
    amount: Decimal = Field(..., ge=0)
    frequency: Frequency = Frequency.MONTHLY

    model_config = ConfigDict(frozen=True, extra="forbid")

    _coerce = field_validator("frequency", mode="before")(_frequency_or_default)

    def annual(self) -> "FrequencyAmount":
        return FrequencyAmount(amount=to_annual(self.amount, self.frequency), frequency=Frequency.ANNUALLY)

    def to(self, frequency: Frequency) -> "FrequencyAmount":
        return FrequencyAmount(amount=convert(self.amount, self.frequency, frequency), frequency=frequency)


class IncomeSource(BaseModel):
    name: str
    source_type: str = "salary"
    gross_amount: Decimal = Field(..., ge=0)
    frequency: Frequency = Frequency.MONTHLY
    tax_withheld: Decimal | None = Field(default=None, ge=0)
    is_active: bool = True

    model_config = ConfigDict(frozen=True, extra="forbid")

    _coerce = field_validator("frequency", mode="before")(_frequency_or_default)

    @property
    def annualised_amount(self) -> Decimal:
        return to_annual(self.gross_amount, self.frequency)

    @property
    def monthly_amount(self) -> Decimal:
        return convert(self.gross_amount, self.frequency, Frequency.MONTHLY)


class ExpenseItem(BaseModel):
    name: str
    amount: Decimal = Field(..., ge=0)
    frequency: Frequency | OneOff = Frequency.MONTHLY
    category: str | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    _coerce = field_validator("frequency", mode="before")(_coerce_frequency_field)

    @property
    def is_one_off(self) -> bool:
        return self.frequency == "one_off"


class DividendDistribution(BaseModel):
    holding_id: str
    ticker: str
    security_name: str | None = None
    distribution_type: DistributionType = "dividend"
    distribution_date: date
    amount_per_unit: Decimal = Field(..., ge=0)
    units_held: Decimal = Field(..., ge=0)
    franking_percentage: Decimal = Field(Decimal("1"), ge=0, le=1)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def gross_amount(self) -> Decimal:
        return self.amount_per_unit * self.units_held


class HoldingDividendSummary(BaseModel):
    holding_id: str
    ticker: str
    security_name: str | None = None
    total_dividends: Decimal = Decimal("0")
    total_franking_credits: Decimal = Decimal("0")
    distribution_count: int = 0
    average_franking_percentage: Decimal = Decimal("0")

    model_config = ConfigDict(frozen=True)

    def franked_portion(self, franking_factor: Decimal | None = None) -> Decimal:
        from aufin.core.franking import franked_dividends

        return franked_dividends(self.total_franking_credits, franking_factor)

    def unfranked_portion(self, franking_factor: Decimal | None = None) -> Decimal:
        from aufin.core.franking import unfranked_dividends

        return unfranked_dividends(self.total_dividends, self.total_franking_credits, franking_factor)


class PortfolioDividendSummary(BaseModel):
    total_dividends: Decimal
    total_franking_credits: Decimal
    total_grossed_up: Decimal
    franked_dividends: Decimal
    unfranked_dividends: Decimal
    distribution_count: int
    holdings: list[HoldingDividendSummary] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class TaxBreakdown(BaseModel):
    taxable_income: Decimal
    bracket_tax: Decimal
    levy: Decimal
    total_tax: int
    marginal_rate: Decimal
    effective_rate: Decimal

    model_config = ConfigDict(frozen=True)


class HecsProjectionYear(BaseModel):
    year: int
    opening_balance: Decimal
    indexation: Decimal
    repayment_income: Decimal
    repayment: Decimal
    closing_balance: Decimal

    model_config = ConfigDict(frozen=True)

    @field_validator("opening_balance", "indexation", "repayment_income", "repayment", "closing_balance")
    @classmethod
    def _quantize(cls, value: Decimal) -> Decimal:
        return value.quantize(_CENT)


class ExpenseSummary(BaseModel):
    recurring_annual: Decimal
    recurring_monthly: Decimal
    one_off_total: Decimal

    model_config = ConfigDict(frozen=True)


class TakeHomeSummary(BaseModel):
    financial_year: str
    gross_annual: Decimal
    income_tax: int
    hecs_repayment: Decimal
    tax_withheld: Decimal
    net_annual: Decimal
    net_by_frequency: dict[Frequency, Decimal]

    model_config = ConfigDict(frozen=True)


__all__ = [
    "DividendDistribution",
    "ExpenseItem",
    "ExpenseSummary",
    "FrequencyAmount",
    "HecsProjectionYear",
    "HoldingDividendSummary",
    "IncomeSource",
    "PortfolioDividendSummary",
    "TakeHomeSummary",
    "TaxBreakdown",
]
