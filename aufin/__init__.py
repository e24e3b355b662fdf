from aufin.core.franking import franked_dividends, unfranked_dividends
from aufin.core.frequency import Frequency, from_annual, to_annual
from aufin.core.hecs import calculate_capped_hecs_repayment, calculate_hecs_repayment
from aufin.core.income_tax import calculate_tax

__version__ = "0.1.0"

__all__ = [
    "Frequency",
    "calculate_capped_hecs_repayment",
    "calculate_hecs_repayment",
    "calculate_tax",
    "franked_dividends",
    "from_annual",
    "to_annual",
    "unfranked_dividends",
]
