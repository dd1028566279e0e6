"""Configuration constants for the Centsible reward engine.

Values are read from the environment, after loading a ``.env`` file from
the working directory when one exists. The reward formulas themselves are
fixed and are not configurable here.
"""
from __future__ import annotations

import os
from decimal import Decimal
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

_log_path = os.environ.get("CENTSIBLE_LOG_PATH", "").strip()
LOG_PATH: Optional[Path] = Path(_log_path) if _log_path else None
MIN_BASE_AMOUNT = Decimal(os.environ.get("CENTSIBLE_MIN_BASE_AMOUNT", "0.01"))
MAX_BASE_AMOUNT = Decimal(os.environ.get("CENTSIBLE_MAX_BASE_AMOUNT", "10000"))
LOW_AMOUNT_WARNING = Decimal(os.environ.get("CENTSIBLE_LOW_AMOUNT_WARNING", "1"))
HIGH_AMOUNT_WARNING = Decimal(os.environ.get("CENTSIBLE_HIGH_AMOUNT_WARNING", "1000"))
DEFAULT_TERM_WEEKS = int(os.environ.get("CENTSIBLE_TERM_WEEKS", "9"))

__all__ = [
    "DEFAULT_TERM_WEEKS",
    "HIGH_AMOUNT_WARNING",
    "LOG_PATH",
    "LOW_AMOUNT_WARNING",
    "MAX_BASE_AMOUNT",
    "MIN_BASE_AMOUNT",
]
