"""Behaviour score aggregation."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Mapping

from .exceptions import InvalidInputError
from .models import BEHAVIOR_CATEGORIES, MAX_SCORE, MIN_SCORE, BehaviorScores
from .money import ZERO

SCORE_DESCRIPTIONS: Mapping[int, str] = {
    1: "Poor",
    2: "Needs Improvement",
    3: "Satisfactory",
    4: "Good",
    5: "Excellent",
}


def average_score(scores: BehaviorScores) -> Decimal:
    """Return the mean rating of a single assessment.

    Every category counts, so an unset (``0``) category drags the average
    down. Check :attr:`BehaviorScores.is_complete` before averaging when a
    partial assessment should not be scored.
    """

    return Decimal(sum(scores.values())) / Decimal(len(BEHAVIOR_CATEGORIES))


def overall_average(assessments: Iterable[BehaviorScores]) -> Decimal:
    """Return the mean of each assessment's own average.

    This is a mean of means rather than a pooled mean over every rating.
    The order of ``assessments`` does not matter and an empty input yields
    ``0.0``.
    """

    averages = [average_score(assessment) for assessment in assessments]
    if not averages:
        return Decimal("0.0")
    return sum(averages, ZERO) / Decimal(len(averages))


def score_description(score: int) -> str:
    """Return the label shown next to a single 1-5 rating."""

    if score not in SCORE_DESCRIPTIONS:
        raise InvalidInputError(f"Score must be between {MIN_SCORE} and {MAX_SCORE}, got {score!r}.")
    return SCORE_DESCRIPTIONS[score]


__all__ = ["SCORE_DESCRIPTIONS", "average_score", "overall_average", "score_description"]
