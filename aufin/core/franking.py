from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from aufin.core._brackets import to_decimal
from aufin.core.models import DividendDistribution, HoldingDividendSummary, PortfolioDividendSummary
from aufin.core.tax_years.fy2025_26 import FRANKING_FACTOR

D = Decimal
_ZERO = D("0")


def _factor(franking_factor: Decimal | None) -> Decimal:
    if franking_factor is not None:
        return to_decimal(franking_factor)
    from aufin.core.tax_years import default_tables

    return default_tables().franking_factor


def franked_dividends(
    total_franking_credits: int | float | Decimal,
    franking_factor: Decimal | None = None,
) -> Decimal:
    """Cash dividend that carried the given franking credits."""
    credits = to_decimal(total_franking_credits)
    if credits == _ZERO:
        return _ZERO
    return credits / _factor(franking_factor)


def unfranked_dividends(
    total_dividends: int | float | Decimal,
    total_franking_credits: int | float | Decimal,
    franking_factor: Decimal | None = None,
) -> Decimal:
    return to_decimal(total_dividends) - franked_dividends(total_franking_credits, franking_factor)


def franking_credits(
    cash_amount: int | float | Decimal,
    franking_percentage: int | float | Decimal = 1,
    franking_factor: Decimal | None = None,
) -> Decimal:
    return to_decimal(cash_amount) * to_decimal(franking_percentage) * _factor(franking_factor)


def grossed_up(
    cash_amount: int | float | Decimal,
    franking_percentage: int | float | Decimal = 1,
    franking_factor: Decimal | None = None,
) -> Decimal:
    return to_decimal(cash_amount) + franking_credits(cash_amount, franking_percentage, franking_factor)


def distribution_credits(distribution: DividendDistribution, franking_factor: Decimal | None = None) -> Decimal:
    return franking_credits(distribution.gross_amount, distribution.franking_percentage, franking_factor)


def summarise_holdings(
    distributions: Iterable[DividendDistribution],
    franking_factor: Decimal | None = None,
) -> list[HoldingDividendSummary]:
    grouped: dict[str, list[DividendDistribution]] = {}
    for item in distributions:
        grouped.setdefault(item.holding_id, []).append(item)

    summaries: list[HoldingDividendSummary] = []
    for holding_id, items in grouped.items():
        first = items[0]
        total = sum((d.gross_amount for d in items), _ZERO)
        credits = sum((distribution_credits(d, franking_factor) for d in items), _ZERO)
        average = sum((d.franking_percentage for d in items), _ZERO) / len(items)
        summaries.append(
            HoldingDividendSummary(
                holding_id=holding_id,
                ticker=first.ticker,
                security_name=first.security_name,
                total_dividends=total,
                total_franking_credits=credits,
                distribution_count=len(items),
                average_franking_percentage=average,
            )
        )
    return summaries


def summarise_portfolio(
    distributions: Iterable[DividendDistribution],
    franking_factor: Decimal | None = None,
) -> PortfolioDividendSummary:
    holdings = summarise_holdings(distributions, franking_factor)
    total = sum((h.total_dividends for h in holdings), _ZERO)
    credits = sum((h.total_franking_credits for h in holdings), _ZERO)
    franked = franked_dividends(credits, franking_factor)
    return PortfolioDividendSummary(
        total_dividends=total,
        total_franking_credits=credits,
        total_grossed_up=total + credits,
        franked_dividends=franked,
        unfranked_dividends=total - franked,
        distribution_count=sum(h.distribution_count for h in holdings),
        holdings=holdings,
    )


__all__ = [
    "FRANKING_FACTOR",
    "distribution_credits",
    "franked_dividends",
    "franking_credits",
    "grossed_up",
    "summarise_holdings",
    "summarise_portfolio",
    "unfranked_dividends",
]
