from decimal import Decimal

import pytest

from centsible.behavior import average_score, overall_average, score_description
from centsible.exceptions import InvalidInputError
from centsible.models import BEHAVIOR_CATEGORIES, BehaviorScores


def _uniform(score: int) -> BehaviorScores:
    return BehaviorScores(**{category: score for category in BEHAVIOR_CATEGORIES})


def test_average_score_of_uniform_sets() -> None:
    assert average_score(_uniform(5)) == Decimal("5.0")
    assert average_score(_uniform(1)) == Decimal("1.0")


def test_average_score_of_mixed_set() -> None:
    scores = BehaviorScores(5, 5, 5, 5, 5, 1, 1, 1, 1, 1)

    assert average_score(scores) == Decimal("3.0")
    assert scores.is_complete


def test_unset_categories_count_as_zero() -> None:
    scores = BehaviorScores(diet=5, exercise=5)

    assert not scores.is_complete
    assert len(scores.missing_categories) == 8
    assert "diet" not in scores.missing_categories
    assert average_score(scores) == Decimal("1.0")


@pytest.mark.parametrize("bad", [6, -1, True, 3.5, "4"])
def test_scores_must_be_unset_or_one_to_five(bad: object) -> None:
    with pytest.raises(InvalidInputError):
        BehaviorScores(diet=bad)  # type: ignore[arg-type]


def test_from_mapping_ignores_unrelated_columns() -> None:
    row = {category: 4 for category in BEHAVIOR_CATEGORIES}
    row.update({"id": "abc", "status": "approved", "service": None, "courtesy": "3", "work": 2.0})

    scores = BehaviorScores.from_mapping(row)

    assert scores.service == 0
    assert scores.courtesy == 3
    assert scores.work == 2
    assert scores.missing_categories == ("service",)

    with pytest.raises(InvalidInputError):
        BehaviorScores.from_mapping({"diet": 2.5})


def test_overall_average_is_mean_of_means() -> None:
    good = _uniform(4)
    poor = _uniform(2)

    assert overall_average([good, poor]) == Decimal("3.0")
    assert overall_average([poor, good]) == overall_average([good, poor])
    assert overall_average(iter([good, good, poor, poor])) == Decimal("3.0")


def test_overall_average_of_nothing_is_zero() -> None:
    assert overall_average([]) == Decimal("0.0")


def test_score_description_labels() -> None:
    assert score_description(1) == "Poor"
    assert score_description(3) == "Satisfactory"
    assert score_description(5) == "Excellent"

    with pytest.raises(InvalidInputError):
        score_description(0)
