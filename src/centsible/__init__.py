"""Centsible reward engine: grade rewards, behaviour and education bonuses and budget allocation."""

from .allocation import allocate, allocate_income
from .api import ApiExporter
from .behavior import average_score, overall_average, score_description
from .bonuses import (
    BEHAVIOR_TIERS,
    EDUCATION_TIERS,
    TierSchedule,
    accuracy_percentage,
    behavior_bonus,
    education_bonus,
    education_bonus_for_results,
)
from .exceptions import CentsibleError, InvalidInputError
from .grades import coerce_grade, gpa, is_numerical_grade, letter_for_score, reward_for, total_reward
from .levels import (
    LEVEL_THRESHOLDS,
    LevelInfo,
    LevelThreshold,
    StreakOutcome,
    StreakState,
    advance_streak,
    level_for,
    level_info,
    level_title,
    level_up,
    streak_outcome,
)
from .models import (
    AllocationBreakdown,
    BehaviorScores,
    BonusResult,
    BonusTier,
    Grade,
    GradeEntry,
    RewardStatement,
)
from .money import format_currency
from .ops import StructuredLogger
from .service import RewardEngine
from .terms import (
    TermProgress,
    TermSnapshot,
    TermTotals,
    cumulative_totals,
    next_term_number,
    snapshot_from_statement,
    term_progress,
    term_window,
)

__all__ = [
    "AllocationBreakdown",
    "ApiExporter",
    "BEHAVIOR_TIERS",
    "BehaviorScores",
    "BonusResult",
    "BonusTier",
    "CentsibleError",
    "EDUCATION_TIERS",
    "Grade",
    "GradeEntry",
    "InvalidInputError",
    "LEVEL_THRESHOLDS",
    "LevelInfo",
    "LevelThreshold",
    "RewardEngine",
    "RewardStatement",
    "StreakOutcome",
    "StreakState",
    "StructuredLogger",
    "TermProgress",
    "TermSnapshot",
    "TermTotals",
    "TierSchedule",
    "accuracy_percentage",
    "advance_streak",
    "allocate",
    "allocate_income",
    "average_score",
    "behavior_bonus",
    "coerce_grade",
    "cumulative_totals",
    "education_bonus",
    "education_bonus_for_results",
    "format_currency",
    "gpa",
    "is_numerical_grade",
    "letter_for_score",
    "level_for",
    "level_info",
    "level_title",
    "level_up",
    "next_term_number",
    "overall_average",
    "reward_for",
    "score_description",
    "snapshot_from_statement",
    "streak_outcome",
    "term_progress",
    "term_window",
    "total_reward",
]
