#!/usr/bin/env python
from __future__ import annotations

import argparse
import json
import sys
from decimal import Decimal, InvalidOperation
from typing import Any, Sequence

from pydantic import ValidationError

from aufin.config import get_settings
from aufin.core.cash_flow import take_home
from aufin.core.frequency import Frequency, coerce_frequency, convert
from aufin.core.franking import franked_dividends, unfranked_dividends
from aufin.core.hecs import calculate_capped_hecs_repayment, calculate_hecs_repayment, project_repayments
from aufin.core.income_tax import tax_breakdown
from aufin.core.models import IncomeSource
from aufin.core.tax_years import UnknownFinancialYearError, get_tables, list_financial_years
from aufin.log import configure_logging, get_logger

LOGGER = get_logger("cli")
_FREQUENCIES = [f.value for f in Frequency]


def _amount(value: str) -> Decimal:
    try:
        return Decimal(value.replace(",", "").replace("$", ""))
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aufin", description="Australian personal finance calculators")
    parser.add_argument(
        "--financial-year",
        default=None,
        help="Bracket tables to use (default: AUFIN_FINANCIAL_YEAR or 2025-26)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices={"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
        help="Logging verbosity (default: AUFIN_LOG_LEVEL)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    tax = sub.add_parser("tax", help="Income tax plus Medicare levy on an annual income")
    tax.add_argument("income", type=_amount)

    hecs = sub.add_parser("hecs", help="Compulsory HECS/HELP repayment")
    hecs.add_argument("income", type=_amount)
    hecs.add_argument("--balance", type=_amount, default=None, help="Outstanding balance to cap the repayment at")
    hecs.add_argument("--project", action="store_true", help="Show a year-by-year payoff projection")
    hecs.add_argument("--income-growth", type=_amount, default=Decimal("0"))

    conv = sub.add_parser("convert", help="Convert an amount between payment frequencies")
    conv.add_argument("amount", type=_amount)
    conv.add_argument("--from", dest="source", default="monthly", choices=_FREQUENCIES)
    conv.add_argument("--to", dest="target", default="annually", choices=_FREQUENCIES)

    frank = sub.add_parser("franking", help="Split dividends into franked and unfranked portions")
    frank.add_argument("--dividends", type=_amount, required=True)
    frank.add_argument("--credits", type=_amount, required=True)

    home = sub.add_parser("take-home", help="Net income after tax and HECS")
    home.add_argument("amount", type=_amount)
    home.add_argument("--frequency", default="annually", choices=_FREQUENCIES)
    home.add_argument("--hecs-balance", type=_amount, default=Decimal("0"))

    sub.add_parser("years", help="List financial years with bracket tables")
    return parser


def _run(args: argparse.Namespace) -> Any:
    if args.command == "years":
        return {"financial_years": list_financial_years()}

    year = args.financial_year or get_settings().financial_year
    tables = get_tables(year)
    if args.command == "tax":
        return tax_breakdown(args.income, tables.income_tax).model_dump(mode="json")
    if args.command == "hecs":
        result: dict[str, Any] = {
            "financial_year": tables.financial_year,
            "income": args.income,
            "repayment": calculate_hecs_repayment(args.income, tables.hecs),
        }
        if args.balance is not None:
            result["capped_repayment"] = calculate_capped_hecs_repayment(args.income, args.balance, tables.hecs)
            if args.project:
                rows = project_repayments(args.balance, args.income, income_growth=args.income_growth, schedule=tables.hecs)
                result["projection"] = [row.model_dump(mode="json") for row in rows]
        return result
    if args.command == "convert":
        return {
            "amount": args.amount,
            "from": args.source,
            "to": args.target,
            "converted": convert(args.amount, args.source, args.target),
        }
    if args.command == "franking":
        return {
            "total_dividends": args.dividends,
            "total_franking_credits": args.credits,
            "franked": franked_dividends(args.credits, tables.franking_factor),
            "unfranked": unfranked_dividends(args.dividends, args.credits, tables.franking_factor),
        }
    if args.command == "take-home":
        source = IncomeSource(name="cli", gross_amount=args.amount, frequency=coerce_frequency(args.frequency))
        return take_home([source], args.hecs_balance, tables).model_dump(mode="json")
    raise ValueError(f"Unknown command {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level or get_settings().log_level)
        payload = _run(args)
    except (UnknownFinancialYearError, ValidationError, ValueError) as exc:
        LOGGER.debug("Command %s failed", args.command, exc_info=True)
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else str(exc)
        print(f"error: {message}", file=sys.stderr)
        return 2
    print(json.dumps(payload, indent=2, default=str))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
