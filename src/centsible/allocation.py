"""Budget allocation of reward income."""

from __future__ import annotations

from decimal import Decimal
from typing import Mapping

from .models import AllocationBreakdown, BonusResult
from .money import ZERO, AmountLike, require_non_negative, to_decimal

TAX_RATE = Decimal("0.15")
RETIREMENT_RATE = Decimal("0.10")
SAVINGS_RATE = Decimal("0.25")
DISCRETIONARY_RATE = Decimal("1") - TAX_RATE - RETIREMENT_RATE - SAVINGS_RATE

ALLOCATION_RATES: Mapping[str, Decimal] = {
    "taxes": TAX_RATE,
    "retirement": RETIREMENT_RATE,
    "savings": SAVINGS_RATE,
    "discretionary": DISCRETIONARY_RATE,
}


def allocate(total: AmountLike) -> AllocationBreakdown:
    """Split ``total`` into taxes, retirement, savings and discretionary money.

    Discretionary takes whatever is left after the other three buckets, so
    the four amounts always add back up to ``total`` exactly.
    """

    amount = require_non_negative(to_decimal(total), name="total")
    taxes = amount * TAX_RATE
    retirement = amount * RETIREMENT_RATE
    savings = amount * SAVINGS_RATE
    discretionary = amount - taxes - retirement - savings
    return AllocationBreakdown(
        taxes=taxes,
        retirement=retirement,
        savings=savings,
        discretionary=discretionary,
    )


def allocate_income(grade_income: AmountLike, *bonuses: BonusResult) -> AllocationBreakdown:
    """Allocate grade income plus every bonus amount in ``bonuses``."""

    income = require_non_negative(to_decimal(grade_income), name="grade_income")
    income += sum((bonus.amount for bonus in bonuses), ZERO)
    return allocate(income)


__all__ = [
    "ALLOCATION_RATES",
    "DISCRETIONARY_RATE",
    "RETIREMENT_RATE",
    "SAVINGS_RATE",
    "TAX_RATE",
    "allocate",
    "allocate_income",
]
