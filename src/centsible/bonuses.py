"""Tiered behaviour and education bonuses.

Both bonuses work the same way: a performance metric is looked up in a
:class:`TierSchedule`, whose tiers are walked from the highest minimum down
until one is satisfied, and the tier's percentage is applied to the base
reward. A metric below every tier earns nothing and has no tier label.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from .exceptions import InvalidInputError
from .models import BonusResult, BonusTier
from .money import ZERO, AmountLike, require_non_negative, require_range, to_decimal


class TierSchedule:
    """Ordered set of bonus tiers for one metric."""

    __slots__ = ("name", "_tiers", "_floor", "_ceiling")

    def __init__(self, name: str, tiers: Iterable[BonusTier], *, floor: Decimal, ceiling: Decimal) -> None:
        self.name = name
        self._tiers: tuple[BonusTier, ...] = tuple(sorted(tiers, key=lambda tier: tier.minimum, reverse=True))
        self._floor = floor
        self._ceiling = ceiling

    @property
    def tiers(self) -> tuple[BonusTier, ...]:
        """Tiers ordered from the highest minimum to the lowest."""

        return self._tiers

    def tier_for(self, metric: AmountLike) -> Optional[BonusTier]:
        value = require_range(to_decimal(metric), self._floor, self._ceiling, name=self.name)
        for tier in self._tiers:
            if value >= tier.minimum:
                return tier
        return None

    def evaluate(self, metric: AmountLike, base_reward_amount: AmountLike) -> BonusResult:
        base = require_non_negative(to_decimal(base_reward_amount), name="base_reward_amount")
        tier = self.tier_for(metric)
        if tier is None:
            return BonusResult(percentage=ZERO, amount=ZERO, tier_label=None)
        return BonusResult(percentage=tier.percentage, amount=base * tier.percentage, tier_label=tier.label)


BEHAVIOR_MINIMUM_QUALIFICATION = Decimal("3.0")

BEHAVIOR_TIERS = TierSchedule(
    "average_score",
    (
        BonusTier("4.5-5.0 (20%)", Decimal("4.5"), Decimal("0.20")),
        BonusTier("4.0-4.49 (15%)", Decimal("4.0"), Decimal("0.15")),
        BonusTier("3.5-3.99 (10%)", Decimal("3.5"), Decimal("0.10")),
        BonusTier("3.0-3.49 (5%)", BEHAVIOR_MINIMUM_QUALIFICATION, Decimal("0.05")),
    ),
    floor=ZERO,
    ceiling=Decimal("5"),
)

EDUCATION_TIERS = TierSchedule(
    "accuracy_percentage",
    (
        BonusTier("90%+ (5%)", Decimal("90"), Decimal("0.05")),
        BonusTier("80-89% (4%)", Decimal("80"), Decimal("0.04")),
        BonusTier("70-79% (3%)", Decimal("70"), Decimal("0.03")),
        BonusTier("60-69% (2%)", Decimal("60"), Decimal("0.02")),
        BonusTier("50-59% (1%)", Decimal("50"), Decimal("0.01")),
    ),
    floor=ZERO,
    ceiling=Decimal("100"),
)


def behavior_bonus(average_score: AmountLike, base_reward_amount: AmountLike) -> BonusResult:
    """Return the behaviour bonus earned by ``average_score`` (0-5 scale)."""

    return BEHAVIOR_TIERS.evaluate(average_score, base_reward_amount)


def education_bonus(accuracy_percentage: AmountLike, base_reward_amount: AmountLike) -> BonusResult:
    """Return the education bonus earned by a question-of-the-day accuracy (0-100)."""

    return EDUCATION_TIERS.evaluate(accuracy_percentage, base_reward_amount)


def accuracy_percentage(correct_answers: int, total_questions: int) -> int:
    """Return ``correct_answers / total_questions`` as a whole percentage.

    Halves round up. No questions answered yields ``0``.
    """

    for name, count in (("correct_answers", correct_answers), ("total_questions", total_questions)):
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidInputError(f"{name} must be an integer, got {count!r}.")
        if count < 0:
            raise InvalidInputError(f"{name} cannot be negative, got {count}.")
    if correct_answers > total_questions:
        raise InvalidInputError("correct_answers cannot exceed total_questions.")
    if total_questions == 0:
        return 0
    ratio = Decimal(correct_answers * 100) / Decimal(total_questions)
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def education_bonus_for_results(
    correct_answers: int, total_questions: int, base_reward_amount: AmountLike
) -> BonusResult:
    return education_bonus(accuracy_percentage(correct_answers, total_questions), base_reward_amount)


__all__ = [
    "BEHAVIOR_MINIMUM_QUALIFICATION",
    "BEHAVIOR_TIERS",
    "EDUCATION_TIERS",
    "TierSchedule",
    "accuracy_percentage",
    "behavior_bonus",
    "education_bonus",
    "education_bonus_for_results",
]
