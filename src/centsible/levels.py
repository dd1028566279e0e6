"""Question-of-the-day XP levels and answer streaks."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Optional

from .exceptions import InvalidInputError


@dataclass(frozen=True, slots=True)
class LevelThreshold:
    level: int
    min_xp: int
    title: str


LEVEL_THRESHOLDS: tuple[LevelThreshold, ...] = (
    LevelThreshold(1, 0, "Centsible Starter"),
    LevelThreshold(2, 100, "Habit Builder"),
    LevelThreshold(3, 300, "Progress Tracker"),
    LevelThreshold(4, 600, "Balance Seeker"),
    LevelThreshold(5, 1000, "Growth Champion"),
    LevelThreshold(6, 1500, "Achievement Hunter"),
    LevelThreshold(7, 2500, "Success Strategist"),
    LevelThreshold(8, 4000, "Mastery Builder"),
    LevelThreshold(9, 6000, "Excellence Expert"),
    LevelThreshold(10, 10000, "Centsible Scholar Supreme"),
)


@dataclass(frozen=True, slots=True)
class LevelInfo:
    """Where a student's total XP sits on the level ladder."""

    level: int
    title: str
    current_xp: int
    xp_for_current_level: int
    xp_for_next_level: int
    progress_percent: int
    xp_to_next_level: int
    is_max_level: bool


def _require_xp(total_xp: int) -> int:
    if isinstance(total_xp, bool) or not isinstance(total_xp, int):
        raise InvalidInputError(f"XP must be a whole number, got {total_xp!r}.")
    if total_xp < 0:
        raise InvalidInputError(f"XP cannot be negative, got {total_xp}.")
    return total_xp


def _threshold_for(xp: int) -> int:
    index = 0
    for position, threshold in enumerate(LEVEL_THRESHOLDS):
        if xp < threshold.min_xp:
            break
        index = position
    return index


def level_info(total_xp: int) -> LevelInfo:
    """Return the level, title and progress towards the next level for ``total_xp``.

    At the top level progress is reported as 100 and no XP is owed.
    """

    xp = _require_xp(total_xp)
    index = _threshold_for(xp)
    current = LEVEL_THRESHOLDS[index]
    if index + 1 == len(LEVEL_THRESHOLDS):
        return LevelInfo(
            level=current.level,
            title=current.title,
            current_xp=xp,
            xp_for_current_level=current.min_xp,
            xp_for_next_level=current.min_xp,
            progress_percent=100,
            xp_to_next_level=0,
            is_max_level=True,
        )

    following = LEVEL_THRESHOLDS[index + 1]
    ratio = Decimal((xp - current.min_xp) * 100) / Decimal(following.min_xp - current.min_xp)
    percent = min(100, int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP)))
    return LevelInfo(
        level=current.level,
        title=current.title,
        current_xp=xp,
        xp_for_current_level=current.min_xp,
        xp_for_next_level=following.min_xp,
        progress_percent=percent,
        xp_to_next_level=following.min_xp - xp,
        is_max_level=False,
    )


def level_for(total_xp: int) -> int:
    return level_info(total_xp).level


def level_title(total_xp: int) -> str:
    return level_info(total_xp).title


def level_up(previous_xp: int, new_xp: int) -> Optional[LevelThreshold]:
    """Return the level reached when going from ``previous_xp`` to ``new_xp``, if it is higher."""

    before = _threshold_for(_require_xp(previous_xp))
    after = _threshold_for(_require_xp(new_xp))
    if after > before:
        return LEVEL_THRESHOLDS[after]
    return None


class StreakOutcome(str, Enum):
    """How answering today changes a daily streak."""

    CONTINUED = "continued"
    UNCHANGED = "unchanged"
    RESET = "reset"


@dataclass(frozen=True, slots=True)
class StreakState:
    streak_count: int = 0
    longest_streak: int = 0
    last_answered: Optional[date] = None

    def __post_init__(self) -> None:
        if self.streak_count < 0 or self.longest_streak < 0:
            raise InvalidInputError("Streak counts cannot be negative.")


def streak_outcome(last_answered: Optional[date], today: date) -> StreakOutcome:
    """Classify ``today`` against the last day a question was answered.

    A first answer or a gap of more than one day starts a new streak.
    """

    if last_answered is None:
        return StreakOutcome.RESET
    gap = (today - last_answered).days
    if gap < 0:
        raise InvalidInputError("today cannot be before the last answered date.")
    if gap == 0:
        return StreakOutcome.UNCHANGED
    if gap == 1:
        return StreakOutcome.CONTINUED
    return StreakOutcome.RESET


def advance_streak(state: StreakState, today: date) -> StreakState:
    """Return the streak after answering on ``today``; the longest streak never shrinks."""

    outcome = streak_outcome(state.last_answered, today)
    if outcome is StreakOutcome.UNCHANGED:
        return state
    count = state.streak_count + 1 if outcome is StreakOutcome.CONTINUED else 1
    return StreakState(
        streak_count=count,
        longest_streak=max(state.longest_streak, count),
        last_answered=today,
    )


__all__ = [
    "LEVEL_THRESHOLDS",
    "LevelInfo",
    "LevelThreshold",
    "StreakOutcome",
    "StreakState",
    "advance_streak",
    "level_for",
    "level_info",
    "level_title",
    "level_up",
    "streak_outcome",
]
