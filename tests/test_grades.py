import random
from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from centsible.exceptions import InvalidInputError
from centsible.grades import (
    coerce_grade,
    gpa,
    is_numerical_grade,
    letter_for_score,
    reward_for,
    total_reward,
)
from centsible.models import Grade, GradeEntry


@pytest.mark.parametrize(
    ("grade", "expected"),
    [("A", "100"), ("B", "75"), ("C", "50"), ("D", "25"), ("F", "0")],
)
def test_reward_for_applies_multiplier_table(grade: str, expected: str) -> None:
    assert reward_for(grade, 100) == Decimal(expected)


def test_reward_for_is_not_rounded() -> None:
    assert reward_for(Grade.B, "0.05") == Decimal("0.0375")
    assert reward_for("d", Decimal("10.10")) == Decimal("2.525")


def test_reward_for_rejects_bad_input() -> None:
    with pytest.raises(InvalidInputError):
        reward_for("A", -1)

    with pytest.raises(InvalidInputError):
        reward_for("E", 10)

    with pytest.raises(InvalidInputError):
        reward_for("", 10)

    with pytest.raises(ValueError):
        reward_for(4, 10)  # type: ignore[arg-type]


def test_grade_entry_derives_reward_and_is_immutable() -> None:
    entry = GradeEntry(grade="c", base_amount="40", class_name="Biology")

    assert entry.grade is Grade.C
    assert entry.base_amount == Decimal("40")
    assert entry.reward_amount == Decimal("20")

    with pytest.raises(FrozenInstanceError):
        entry.base_amount = Decimal("50")  # type: ignore[misc]

    with pytest.raises(InvalidInputError):
        GradeEntry(grade="A", base_amount=-5)


def test_total_reward_sums_entries() -> None:
    entries = [
        GradeEntry(grade="A", base_amount=50),
        GradeEntry(grade="B", base_amount=50),
        GradeEntry(grade="F", base_amount=50),
    ]

    assert total_reward(entries) == Decimal("87.5")
    assert total_reward([]) == Decimal("0")


def test_total_reward_is_additive() -> None:
    rng = random.Random(20240915)
    letters = list(Grade)
    for _ in range(200):
        first = [
            GradeEntry(grade=rng.choice(letters), base_amount=Decimal(rng.randrange(0, 100_000)) / 100)
            for _ in range(rng.randrange(0, 6))
        ]
        second = [
            GradeEntry(grade=rng.choice(letters), base_amount=Decimal(rng.randrange(0, 100_000)) / 100)
            for _ in range(rng.randrange(0, 6))
        ]
        assert total_reward(first + second) == total_reward(first) + total_reward(second)


def test_gpa_averages_grade_points() -> None:
    assert gpa([]) == Decimal("0.0")
    assert gpa(["A", "A"]) == Decimal("4.0")
    assert gpa(["A", "F"]) == Decimal("2.0")
    assert gpa([Grade.B, "c", GradeEntry(grade="D", base_amount=10)]) == Decimal("2")

    with pytest.raises(InvalidInputError):
        gpa(["A", "Z"])


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (100, Grade.A),
        (90, Grade.A),
        ("89.99", Grade.B),
        (80, Grade.B),
        (79.5, Grade.C),
        (60, Grade.D),
        (59, Grade.F),
        (0, Grade.F),
    ],
)
def test_letter_for_score_uses_standard_scale(score: object, expected: Grade) -> None:
    assert letter_for_score(score) is expected  # type: ignore[arg-type]


def test_letter_for_score_rejects_out_of_range() -> None:
    with pytest.raises(InvalidInputError):
        letter_for_score(101)

    with pytest.raises(InvalidInputError):
        letter_for_score(-0.5)


def test_numeric_grades_are_detected_and_converted() -> None:
    assert is_numerical_grade("85")
    assert is_numerical_grade(72.5)
    assert not is_numerical_grade("A")
    assert not is_numerical_grade("b")
    assert not is_numerical_grade(Grade.C)
    assert not is_numerical_grade("excellent")

    assert coerce_grade("92") is Grade.A
    assert coerce_grade(65) is Grade.D
    assert coerce_grade("c") is Grade.C

    with pytest.raises(InvalidInputError):
        coerce_grade("excellent")


def test_non_finite_numbers_are_not_numerical_grades() -> None:
    assert not is_numerical_grade(float("nan"))
    assert not is_numerical_grade(float("inf"))
    assert not is_numerical_grade(Decimal("NaN"))
    assert not is_numerical_grade("nan")
    assert is_numerical_grade(Decimal("88.5"))
