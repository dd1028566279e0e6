"""High level service composing the Centsible reward calculators."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from . import config
from .allocation import allocate_income
from .behavior import overall_average
from .bonuses import accuracy_percentage, behavior_bonus, education_bonus
from .exceptions import InvalidInputError
from .grades import GradeLike, gpa, total_reward
from .models import BehaviorScores, GradeEntry, RewardStatement
from .money import ZERO, AmountLike, to_decimal
from .ops import StructuredLogger


class RewardEngine:
    """Build reward statements from grades, behaviour assessments and quiz results.

    The calculators in :mod:`centsible.grades`, :mod:`centsible.behavior`,
    :mod:`centsible.bonuses` and :mod:`centsible.allocation` are pure. This
    class adds the data-entry limits the app enforces on base amounts and
    records what it computed in a :class:`~centsible.ops.StructuredLogger`.
    """

    __slots__ = (
        "_logger",
        "_min_base_amount",
        "_max_base_amount",
        "_low_amount_warning",
        "_high_amount_warning",
    )

    def __init__(
        self,
        *,
        logger: Optional[StructuredLogger] = None,
        min_base_amount: AmountLike = config.MIN_BASE_AMOUNT,
        max_base_amount: AmountLike = config.MAX_BASE_AMOUNT,
        low_amount_warning: AmountLike = config.LOW_AMOUNT_WARNING,
        high_amount_warning: AmountLike = config.HIGH_AMOUNT_WARNING,
    ) -> None:
        self._logger = logger or StructuredLogger(path=config.LOG_PATH)
        self._min_base_amount = to_decimal(min_base_amount)
        self._max_base_amount = to_decimal(max_base_amount)
        self._low_amount_warning = to_decimal(low_amount_warning)
        self._high_amount_warning = to_decimal(high_amount_warning)

    @property
    def logger(self) -> StructuredLogger:
        return self._logger

    def grade_entry(self, grade: GradeLike, base_amount: AmountLike, class_name: str = "") -> GradeEntry:
        """Create a :class:`GradeEntry` after checking the base amount limits.

        A zero base is allowed for classes that carry no reward. Any other
        base must lie between the minimum and maximum; amounts outside the
        warning band are accepted but logged.
        """

        base = to_decimal(base_amount)
        if base > self._max_base_amount:
            raise InvalidInputError(
                f"base_amount {base} exceeds the maximum of {self._max_base_amount}."
            )
        if ZERO < base < self._min_base_amount:
            raise InvalidInputError(
                f"base_amount {base} is below the minimum of {self._min_base_amount}."
            )
        entry = GradeEntry(grade=grade, base_amount=base, class_name=class_name)
        if base > self._high_amount_warning:
            self._logger.log(
                "high_base_amount",
                class_name=class_name,
                base_amount=float(base),
                threshold=float(self._high_amount_warning),
            )
        elif base < self._low_amount_warning:
            self._logger.log(
                "low_base_amount",
                class_name=class_name,
                base_amount=float(base),
                threshold=float(self._low_amount_warning),
            )
        return entry

    def statement(
        self,
        entries: Sequence[GradeEntry],
        assessments: Iterable[BehaviorScores] = (),
        *,
        correct_answers: int = 0,
        total_questions: int = 0,
    ) -> RewardStatement:
        """Compute grade income, both bonuses and the budget split for one student.

        Both bonuses are percentages of the grade income. The allocation
        covers grade income plus the two bonus amounts.
        """

        assessment_list = list(assessments)
        grade_income = total_reward(entries)
        behavior_average = overall_average(assessment_list)
        accuracy = accuracy_percentage(correct_answers, total_questions)
        behavior = behavior_bonus(behavior_average, grade_income)
        education = education_bonus(accuracy, grade_income)
        statement = RewardStatement(
            grade_income=grade_income,
            gpa=gpa(entries),
            grade_count=len(entries),
            behavior_average=behavior_average,
            assessment_count=len(assessment_list),
            behavior_bonus=behavior,
            accuracy_percentage=accuracy,
            education_bonus=education,
            allocation=allocate_income(grade_income, behavior, education),
        )
        self._logger.log(
            "statement_computed",
            grades=statement.grade_count,
            assessments=statement.assessment_count,
            grade_income=float(grade_income),
            behavior_tier=behavior.tier_label,
            education_tier=education.tier_label,
            total_income=float(statement.total_income),
        )
        return statement


__all__ = ["RewardEngine"]
