from datetime import date

import pytest

from centsible.exceptions import InvalidInputError
from centsible.levels import (
    LEVEL_THRESHOLDS,
    StreakOutcome,
    StreakState,
    advance_streak,
    level_for,
    level_info,
    level_title,
    level_up,
    streak_outcome,
)


@pytest.mark.parametrize(
    ("xp", "level", "title"),
    [
        (0, 1, "Centsible Starter"),
        (99, 1, "Centsible Starter"),
        (100, 2, "Habit Builder"),
        (299, 2, "Habit Builder"),
        (300, 3, "Progress Tracker"),
        (600, 4, "Balance Seeker"),
        (1000, 5, "Growth Champion"),
        (1500, 6, "Achievement Hunter"),
        (2500, 7, "Success Strategist"),
        (4000, 8, "Mastery Builder"),
        (5999, 8, "Mastery Builder"),
        (6000, 9, "Excellence Expert"),
        (9999, 9, "Excellence Expert"),
        (10000, 10, "Centsible Scholar Supreme"),
    ],
)
def test_level_thresholds(xp: int, level: int, title: str) -> None:
    assert level_for(xp) == level
    assert level_title(xp) == title


def test_level_table_is_ascending() -> None:
    assert [threshold.level for threshold in LEVEL_THRESHOLDS] == list(range(1, 11))
    minimums = [threshold.min_xp for threshold in LEVEL_THRESHOLDS]
    assert minimums == sorted(minimums)
    assert minimums[0] == 0


def test_level_info_progress_within_level() -> None:
    info = level_info(450)

    assert info.level == 3
    assert info.current_xp == 450
    assert info.xp_for_current_level == 300
    assert info.xp_for_next_level == 600
    assert info.progress_percent == 50
    assert info.xp_to_next_level == 150
    assert not info.is_max_level


def test_level_info_rounds_progress_half_up() -> None:
    # 1 of 200 XP between levels 2 and 3 is 0.5%.
    assert level_info(101).progress_percent == 1
    assert level_info(100).progress_percent == 0
    assert level_info(299).progress_percent == 100


def test_level_info_at_max_level() -> None:
    info = level_info(25000)

    assert info.level == 10
    assert info.is_max_level
    assert info.progress_percent == 100
    assert info.xp_to_next_level == 0
    assert info.xp_for_next_level == info.xp_for_current_level == 10000


def test_level_info_rejects_bad_xp() -> None:
    with pytest.raises(InvalidInputError):
        level_info(-1)

    with pytest.raises(InvalidInputError):
        level_info(12.5)  # type: ignore[arg-type]


def test_level_up_crossing() -> None:
    reached = level_up(90, 320)

    assert reached is not None
    assert reached.level == 3
    assert reached.title == "Progress Tracker"
    assert level_up(100, 250) is None
    assert level_up(500, 400) is None
    assert level_up(9000, 10000).level == 10  # type: ignore[union-attr]


def test_streak_outcomes() -> None:
    today = date(2026, 10, 18)

    assert streak_outcome(None, today) is StreakOutcome.RESET
    assert streak_outcome(today, today) is StreakOutcome.UNCHANGED
    assert streak_outcome(date(2026, 10, 17), today) is StreakOutcome.CONTINUED
    assert streak_outcome(date(2026, 10, 15), today) is StreakOutcome.RESET

    with pytest.raises(InvalidInputError):
        streak_outcome(date(2026, 10, 19), today)


def test_advance_streak_same_day_keeps_state() -> None:
    state = StreakState(streak_count=4, longest_streak=6, last_answered=date(2026, 10, 18))

    assert advance_streak(state, date(2026, 10, 18)) is state


def test_advance_streak_consecutive_day_extends_longest() -> None:
    state = StreakState(streak_count=6, longest_streak=6, last_answered=date(2026, 10, 17))

    advanced = advance_streak(state, date(2026, 10, 18))

    assert advanced.streak_count == 7
    assert advanced.longest_streak == 7
    assert advanced.last_answered == date(2026, 10, 18)


def test_advance_streak_missed_day_resets_but_keeps_longest() -> None:
    state = StreakState(streak_count=5, longest_streak=9, last_answered=date(2026, 10, 10))

    advanced = advance_streak(state, date(2026, 10, 18))

    assert advanced.streak_count == 1
    assert advanced.longest_streak == 9

    first = advance_streak(StreakState(), date(2026, 10, 18))
    assert first == StreakState(streak_count=1, longest_streak=1, last_answered=date(2026, 10, 18))

    with pytest.raises(InvalidInputError):
        StreakState(streak_count=-1)
