"""Domain models used by the Centsible reward engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional

from .exceptions import InvalidInputError
from .money import ZERO, AmountLike, require_non_negative, to_decimal


class Grade(str, Enum):
    """Letter grades accepted by the reward calculators."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @classmethod
    def parse(cls, value: "Grade | str") -> "Grade":
        """Return the :class:`Grade` for ``value`` or raise :class:`InvalidInputError`."""

        if isinstance(value, Grade):
            return value
        if not isinstance(value, str):
            raise InvalidInputError(f"Grade must be a letter, got {value!r}.")
        try:
            return cls(value.strip().upper())
        except ValueError as exc:
            raise InvalidInputError(f"Unknown grade {value!r}; expected one of A, B, C, D, F.") from exc

    @property
    def multiplier(self) -> Decimal:
        return GRADE_MULTIPLIERS[self]

    @property
    def points(self) -> Decimal:
        return GRADE_POINTS[self]


GRADE_MULTIPLIERS: Mapping[Grade, Decimal] = {
    Grade.A: Decimal("1.00"),
    Grade.B: Decimal("0.75"),
    Grade.C: Decimal("0.50"),
    Grade.D: Decimal("0.25"),
    Grade.F: Decimal("0.00"),
}

GRADE_POINTS: Mapping[Grade, Decimal] = {
    Grade.A: Decimal("4.0"),
    Grade.B: Decimal("3.0"),
    Grade.C: Decimal("2.0"),
    Grade.D: Decimal("1.0"),
    Grade.F: Decimal("0.0"),
}


@dataclass(frozen=True, slots=True)
class GradeEntry:
    """A graded class and the reward it earns."""

    grade: Grade
    base_amount: Decimal
    class_name: str = ""
    reward_amount: Decimal = field(init=False)

    def __post_init__(self) -> None:
        grade = Grade.parse(self.grade)
        base_amount = require_non_negative(to_decimal(self.base_amount), name="base_amount")
        object.__setattr__(self, "grade", grade)
        object.__setattr__(self, "base_amount", base_amount)
        object.__setattr__(self, "reward_amount", base_amount * grade.multiplier)


BEHAVIOR_CATEGORIES: tuple[str, ...] = (
    "diet",
    "exercise",
    "work",
    "hygiene",
    "respect",
    "responsibilities",
    "attitude",
    "cooperation",
    "courtesy",
    "service",
)

UNSET_SCORE = 0
MIN_SCORE = 1
MAX_SCORE = 5


def _score_from_raw(category: str, raw: Any) -> int:
    if raw is None:
        return UNSET_SCORE
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    value = to_decimal(raw)
    if value != value.to_integral_value():
        raise InvalidInputError(f"{category} must be a whole number, got {raw!r}.")
    return int(value)


@dataclass(frozen=True, slots=True)
class BehaviorScores:
    """One day's behaviour ratings across the ten tracked categories.

    A category left at ``0`` is unset. :attr:`is_complete` tells callers
    whether every category was rated before the set is averaged.
    """

    diet: int = UNSET_SCORE
    exercise: int = UNSET_SCORE
    work: int = UNSET_SCORE
    hygiene: int = UNSET_SCORE
    respect: int = UNSET_SCORE
    responsibilities: int = UNSET_SCORE
    attitude: int = UNSET_SCORE
    cooperation: int = UNSET_SCORE
    courtesy: int = UNSET_SCORE
    service: int = UNSET_SCORE

    def __post_init__(self) -> None:
        for category in BEHAVIOR_CATEGORIES:
            value = getattr(self, category)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInputError(f"{category} must be an integer, got {value!r}.")
            if value != UNSET_SCORE and not MIN_SCORE <= value <= MAX_SCORE:
                raise InvalidInputError(
                    f"{category} must be between {MIN_SCORE} and {MAX_SCORE}, got {value}."
                )

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "BehaviorScores":
        """Build a score set from a stored assessment row, ignoring unrelated keys."""

        return cls(**{category: _score_from_raw(category, row.get(category)) for category in BEHAVIOR_CATEGORIES})

    def values(self) -> tuple[int, ...]:
        return tuple(getattr(self, category) for category in BEHAVIOR_CATEGORIES)

    @property
    def missing_categories(self) -> tuple[str, ...]:
        return tuple(category for category in BEHAVIOR_CATEGORIES if getattr(self, category) == UNSET_SCORE)

    @property
    def is_complete(self) -> bool:
        """True when all ten categories carry a rating."""

        return not self.missing_categories


@dataclass(frozen=True, slots=True)
class BonusTier:
    """A named bonus level unlocked once a metric reaches ``minimum``."""

    label: str
    minimum: Decimal
    percentage: Decimal


@dataclass(frozen=True, slots=True)
class BonusResult:
    """Outcome of a bonus tier lookup applied to a base reward."""

    percentage: Decimal
    amount: Decimal
    tier_label: Optional[str] = None

    @property
    def qualifies(self) -> bool:
        return self.tier_label is not None


@dataclass(frozen=True, slots=True)
class AllocationBreakdown:
    """Budget buckets produced from a single income total."""

    taxes: Decimal
    retirement: Decimal
    savings: Decimal
    discretionary: Decimal

    @property
    def total(self) -> Decimal:
        return self.taxes + self.retirement + self.savings + self.discretionary

    @property
    def tax_qualified_total(self) -> Decimal:
        """Money set aside for taxes and retirement combined."""

        return self.taxes + self.retirement


@dataclass(frozen=True, slots=True)
class RewardStatement:
    """Everything a reward summary screen shows for one student."""

    grade_income: Decimal
    gpa: Decimal
    grade_count: int
    behavior_average: Decimal
    assessment_count: int
    behavior_bonus: BonusResult
    accuracy_percentage: int
    education_bonus: BonusResult
    allocation: AllocationBreakdown

    @property
    def bonus_income(self) -> Decimal:
        return self.behavior_bonus.amount + self.education_bonus.amount

    @property
    def total_income(self) -> Decimal:
        return self.grade_income + self.bonus_income


def amount_or_zero(value: Optional[AmountLike]) -> Decimal:
    """Return ``value`` as a Decimal, treating ``None`` as zero."""

    return ZERO if value is None else to_decimal(value)


__all__ = [
    "AllocationBreakdown",
    "BEHAVIOR_CATEGORIES",
    "BehaviorScores",
    "BonusResult",
    "BonusTier",
    "GRADE_MULTIPLIERS",
    "GRADE_POINTS",
    "Grade",
    "GradeEntry",
    "MAX_SCORE",
    "MIN_SCORE",
    "RewardStatement",
    "UNSET_SCORE",
    "amount_or_zero",
]
