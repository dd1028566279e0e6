"""Term windows, progress and cumulative term statistics."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from .config import DEFAULT_TERM_WEEKS
from .exceptions import InvalidInputError
from .models import AllocationBreakdown, RewardStatement, amount_or_zero
from .money import ZERO, require_non_negative, require_range, to_decimal

HUNDRED = Decimal("100")
MAX_GPA = Decimal("4.0")


@dataclass(frozen=True, slots=True)
class TermSnapshot:
    """Earnings recorded when a term closes."""

    term_number: int
    term_start: date
    term_end: date
    total_earnings: Decimal = ZERO
    grade_earnings: Decimal = ZERO
    behavior_earnings: Decimal = ZERO
    gpa: Optional[Decimal] = None
    allocation: Optional[AllocationBreakdown] = None

    def __post_init__(self) -> None:
        if self.term_number < 1:
            raise InvalidInputError("term_number must be 1 or greater.")
        if self.term_end < self.term_start:
            raise InvalidInputError("term_end cannot be before term_start.")
        for name in ("total_earnings", "grade_earnings", "behavior_earnings"):
            value = require_non_negative(amount_or_zero(getattr(self, name)), name=name)
            object.__setattr__(self, name, value)
        if self.gpa is not None:
            object.__setattr__(self, "gpa", require_range(to_decimal(self.gpa), ZERO, MAX_GPA, name="gpa"))


@dataclass(frozen=True, slots=True)
class TermTotals:
    """Earnings summed over every closed term."""

    total_earnings: Decimal
    grade_earnings: Decimal
    behavior_earnings: Decimal
    average_gpa: Optional[Decimal]
    term_count: int


@dataclass(frozen=True, slots=True)
class TermProgress:
    total_days: int
    elapsed_days: int
    remaining_days: int
    progress_percent: Decimal
    is_active: bool
    has_ended: bool
    has_not_started: bool


def term_window(start: date, weeks: int = DEFAULT_TERM_WEEKS) -> tuple[date, date]:
    """Return the ``(start, end)`` dates of a term lasting ``weeks`` weeks."""

    if weeks <= 0:
        raise InvalidInputError("weeks must be positive.")
    return start, start + timedelta(weeks=weeks)


def term_progress(start: date, end: date, *, today: date) -> TermProgress:
    """Describe how far ``today`` is through the term running from ``start`` to ``end``."""

    if end < start:
        raise InvalidInputError("end cannot be before start.")
    total_days = (end - start).days
    elapsed_days = (today - start).days
    remaining_days = (end - today).days

    if total_days == 0:
        percent = HUNDRED if today >= start else ZERO
    else:
        percent = Decimal(elapsed_days) * HUNDRED / Decimal(total_days)
        percent = min(max(percent, ZERO), HUNDRED)

    return TermProgress(
        total_days=total_days,
        elapsed_days=max(0, elapsed_days),
        remaining_days=max(0, remaining_days),
        progress_percent=percent,
        is_active=start <= today <= end,
        has_ended=today > end,
        has_not_started=today < start,
    )


def next_term_number(snapshots: Sequence[TermSnapshot]) -> int:
    if not snapshots:
        return 1
    return max(snapshot.term_number for snapshot in snapshots) + 1


def cumulative_totals(snapshots: Iterable[TermSnapshot]) -> TermTotals:
    """Sum earnings across ``snapshots`` and average the GPAs that were recorded."""

    total = grade = behavior = gpa_sum = ZERO
    count = terms_with_gpa = 0
    for snapshot in snapshots:
        count += 1
        total += snapshot.total_earnings
        grade += snapshot.grade_earnings
        behavior += snapshot.behavior_earnings
        if snapshot.gpa is not None:
            gpa_sum += snapshot.gpa
            terms_with_gpa += 1
    average = gpa_sum / Decimal(terms_with_gpa) if terms_with_gpa else None
    return TermTotals(
        total_earnings=total,
        grade_earnings=grade,
        behavior_earnings=behavior,
        average_gpa=average,
        term_count=count,
    )


def snapshot_from_statement(
    statement: RewardStatement,
    *,
    term_number: int,
    term_start: date,
    term_end: date,
) -> TermSnapshot:
    """Freeze a reward statement into the snapshot stored when a term closes.

    Terms without any graded class record no GPA.
    """

    return TermSnapshot(
        term_number=term_number,
        term_start=term_start,
        term_end=term_end,
        total_earnings=statement.total_income,
        grade_earnings=statement.grade_income,
        behavior_earnings=statement.bonus_income,
        gpa=statement.gpa if statement.grade_count else None,
        allocation=statement.allocation,
    )


__all__ = [
    "TermProgress",
    "TermSnapshot",
    "TermTotals",
    "cumulative_totals",
    "next_term_number",
    "snapshot_from_statement",
    "term_progress",
    "term_window",
]
