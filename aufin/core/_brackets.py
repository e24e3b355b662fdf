from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Iterator

D = Decimal

_ONE = D("1")


def to_decimal(value: int | float | Decimal) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def round_whole(value: int | float | Decimal) -> int:
    """Round to whole currency units, ties away from zero."""
    return int(to_decimal(value).quantize(_ONE, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Bracket:
    lower_bound: D
    upper_bound: D | None
    rate: D
    base_amount: D = D("0")
    is_marginal: bool = True

    def contains(self, income: D) -> bool:
        if income < self.lower_bound:
            return False
        return self.upper_bound is None or income <= self.upper_bound


def bracket(
    lower: int | str,
    upper: int | str | None,
    rate: str,
    base: int | str = 0,
    *,
    marginal: bool = True,
) -> Bracket:
    return Bracket(
        lower_bound=D(str(lower)),
        upper_bound=None if upper is None else D(str(upper)),
        rate=D(rate),
        base_amount=D(str(base)),
        is_marginal=marginal,
    )


@dataclass(frozen=True)
class BracketTable:
    brackets: tuple[Bracket, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "brackets", tuple(self.brackets))
        _validate(self.brackets)

    def __iter__(self) -> Iterator[Bracket]:
        return iter(self.brackets)

    def __len__(self) -> int:
        return len(self.brackets)

    def find(self, income: D) -> Bracket | None:
        """Bracket with ``lower_bound <= income <= upper_bound``, else None.

        Fractional incomes inside the one-unit gap between whole-dollar bounds
        match nothing; callers decide what that means.
        """
        for candidate in self.brackets:
            if candidate.contains(income):
                return candidate
        return None

    def floor(self, income: D) -> Bracket | None:
        """Highest bracket whose lower bound is at or below ``income``."""
        found: Bracket | None = None
        for candidate in self.brackets:
            if candidate.lower_bound > income:
                break
            found = candidate
        return found


def _validate(brackets: Iterable[Bracket]) -> None:
    items = list(brackets)
    if not items:
        raise ValueError("Bracket table must contain at least one bracket")
    for index, current in enumerate(items):
        if not D("0") <= current.rate <= _ONE:
            raise ValueError(f"Bracket {index} rate {current.rate} outside 0..1")
        is_last = index == len(items) - 1
        if current.upper_bound is None:
            if not is_last:
                raise ValueError(f"Only the final bracket may be unbounded (bracket {index})")
            continue
        if is_last:
            raise ValueError("Final bracket must be unbounded")
        if current.upper_bound < current.lower_bound:
            raise ValueError(f"Bracket {index} upper bound below lower bound")
        following = items[index + 1]
        if following.lower_bound != current.upper_bound + _ONE:
            raise ValueError(
                f"Brackets {index} and {index + 1} are not contiguous: "
                f"{current.upper_bound} -> {following.lower_bound}"
            )


__all__ = [
    "Bracket",
    "BracketTable",
    "bracket",
    "round_whole",
    "to_decimal",
]
