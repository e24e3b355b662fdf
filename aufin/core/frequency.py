from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Mapping

from aufin.core._brackets import to_decimal
from aufin.log import get_logger

logger = get_logger("frequency")


class Frequency(str, Enum):
    WEEKLY = "weekly"
    FORTNIGHTLY = "fortnightly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"


_MULTIPLIERS: Mapping[Frequency, int] = {
    Frequency.WEEKLY: 52,
    Frequency.FORTNIGHTLY: 26,
    Frequency.MONTHLY: 12,
    Frequency.QUARTERLY: 4,
    Frequency.ANNUALLY: 1,
}

_unmapped = set(Frequency) - set(_MULTIPLIERS)
if _unmapped:  # pragma: no cover - guards enum edits
    raise RuntimeError(f"Frequencies without an annual multiplier: {sorted(f.value for f in _unmapped)}")

FrequencyLike = Frequency | str | None


def multiplier(frequency: Frequency) -> int:
    return _MULTIPLIERS[frequency]


def coerce_frequency(value: FrequencyLike, default: Frequency | None = None) -> Frequency:
    """Turn an optional or untyped cadence into a Frequency.

    Missing or unrecognised values fall back to ``default`` (the configured
    default frequency, monthly unless overridden) rather than failing.
    """
    if isinstance(value, Frequency):
        return value
    if default is None:
        from aufin.config import get_settings

        default = Frequency(get_settings().default_frequency)
    if value is None:
        return default
    normalized = str(value).strip().lower()
    try:
        return Frequency(normalized)
    except ValueError:
        logger.debug("Unknown frequency %r; using %s", value, default.value)
        return default


def to_annual(amount: int | float | Decimal, frequency: FrequencyLike) -> Decimal:
    return to_decimal(amount) * multiplier(coerce_frequency(frequency))


def from_annual(annual_amount: int | float | Decimal, frequency: FrequencyLike) -> Decimal:
    return to_decimal(annual_amount) / multiplier(coerce_frequency(frequency))


def convert(amount: int | float | Decimal, source: FrequencyLike, target: FrequencyLike) -> Decimal:
    source_freq = coerce_frequency(source)
    target_freq = coerce_frequency(target)
    if source_freq is target_freq:
        return to_decimal(amount)
    return from_annual(to_annual(amount, source_freq), target_freq)


def to_monthly(amount: int | float | Decimal, frequency: FrequencyLike) -> Decimal:
    return convert(amount, frequency, Frequency.MONTHLY)


__all__ = [
    "Frequency",
    "FrequencyLike",
    "coerce_frequency",
    "convert",
    "from_annual",
    "multiplier",
    "to_annual",
    "to_monthly",
]
