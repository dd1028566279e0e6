"""Utilities for working with monetary values in Centsible."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from .exceptions import InvalidInputError

CENT = Decimal("0.01")
ZERO = Decimal("0")

AmountLike = Union[Decimal, int, float, str]


def to_decimal(value: AmountLike) -> Decimal:
    """Convert ``value`` to a :class:`~decimal.Decimal` without rounding it.

    Floats go through :func:`str` so ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.
    """

    if isinstance(value, bool):
        raise InvalidInputError(f"Unsupported amount type: {type(value)!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise InvalidInputError(f"Not a number: {value!r}") from exc
    else:
        raise InvalidInputError(f"Unsupported amount type: {type(value)!r}")

    if not result.is_finite():
        raise InvalidInputError(f"Amount must be finite, got {value!r}")
    return result


def require_non_negative(amount: Decimal, *, name: str = "amount") -> Decimal:
    """Ensure ``amount`` is zero or greater."""

    if amount < ZERO:
        raise InvalidInputError(f"{name} must be zero or greater, got {amount}.")
    return amount


def require_range(value: Decimal, low: Decimal, high: Decimal, *, name: str) -> Decimal:
    """Ensure ``low <= value <= high``."""

    if value < low or value > high:
        raise InvalidInputError(f"{name} must be between {low} and {high}, got {value}.")
    return value


def to_cents(amount: Decimal) -> Decimal:
    """Round ``amount`` to whole cents for display."""

    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal) -> str:
    """Return ``amount`` as a currency formatted string (e.g. ``$12.34``)."""

    return f"${to_cents(amount):,.2f}"
