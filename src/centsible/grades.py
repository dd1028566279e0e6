"""Grade reward and GPA calculations."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Iterable, Union

from .models import Grade, GradeEntry
from .money import ZERO, AmountLike, require_non_negative, require_range, to_decimal

GradeLike = Union[Grade, str]

# Minimum percentage for each letter on the standard 100 point scale.
LETTER_CUTOFFS: tuple[tuple[Decimal, Grade], ...] = (
    (Decimal("90"), Grade.A),
    (Decimal("80"), Grade.B),
    (Decimal("70"), Grade.C),
    (Decimal("60"), Grade.D),
)


def reward_for(grade: GradeLike, base_amount: AmountLike) -> Decimal:
    """Return the reward earned for ``grade`` on a class worth ``base_amount``.

    The result is not rounded. Rounding to cents is left to the display
    layer so summing many grades does not accumulate rounding error.
    """

    letter = Grade.parse(grade)
    base = require_non_negative(to_decimal(base_amount), name="base_amount")
    return base * letter.multiplier


def total_reward(entries: Iterable[GradeEntry]) -> Decimal:
    """Sum the reward amounts of ``entries``."""

    return sum((entry.reward_amount for entry in entries), ZERO)


def gpa(grades: Iterable[Union[GradeLike, GradeEntry]]) -> Decimal:
    """Return the 4.0 scale grade point average of ``grades``.

    An empty sequence yields ``0.0``. Callers that need to show "no grades
    yet" should check the length of their input rather than the result.
    """

    points = [_letter_of(item).points for item in grades]
    if not points:
        return Decimal("0.0")
    return sum(points, ZERO) / Decimal(len(points))


def _letter_of(item: Union[GradeLike, GradeEntry]) -> Grade:
    if isinstance(item, GradeEntry):
        return item.grade
    return Grade.parse(item)


def letter_for_score(score: AmountLike) -> Grade:
    """Convert a 0-100 percentage score into a letter grade."""

    value = require_range(to_decimal(score), ZERO, Decimal("100"), name="score")
    for cutoff, letter in LETTER_CUTOFFS:
        if value >= cutoff:
            return letter
    return Grade.F


def is_numerical_grade(value: object) -> bool:
    """Return ``True`` when ``value`` is a numeric score rather than a letter grade."""

    if isinstance(value, Grade) or isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, (float, Decimal)):
        return Decimal(str(value)).is_finite()
    if not isinstance(value, str):
        return False
    if value.strip().upper() in Grade.__members__:
        return False
    try:
        return Decimal(value.strip()).is_finite()
    except InvalidOperation:
        return False


def coerce_grade(value: Union[GradeLike, AmountLike]) -> Grade:
    """Return a letter grade for ``value``, converting numeric scores as needed."""

    if is_numerical_grade(value):
        return letter_for_score(value)  # type: ignore[arg-type]
    return Grade.parse(value)  # type: ignore[arg-type]


__all__ = [
    "GradeLike",
    "LETTER_CUTOFFS",
    "coerce_grade",
    "gpa",
    "is_numerical_grade",
    "letter_for_score",
    "reward_for",
    "total_reward",
]
