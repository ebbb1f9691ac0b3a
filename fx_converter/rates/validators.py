"""
Validators for user-entered conversion input.
"""

import math

from ..shared.errors import (
    AmountParseError,
    EmptyAmountError,
    InvalidAmountError,
    MissingCurrencyError,
)


def parse_amount(text: str | None) -> float:
    """
    Parse an amount typed by the user.

    Thousands separators (commas) and whitespace are removed; the period is
    the only decimal separator.

    Args:
        text: Raw amount text

    Returns:
        float: The positive amount

    Raises:
        EmptyAmountError: If nothing was entered
        AmountParseError: If the text is not a number
        InvalidAmountError: If the number is not greater than zero
    """
    if text is None or not (stripped := text.strip()):
        raise EmptyAmountError("Please enter an amount.")

    cleaned = "".join(stripped.replace(",", "").split())
    if not cleaned:
        raise EmptyAmountError("Please enter an amount.")

    try:
        amount = float(cleaned)
    except ValueError as e:
        raise AmountParseError(
            f"Invalid amount '{text}'. Please enter a valid number."
        ) from e

    if math.isnan(amount) or math.isinf(amount):
        raise AmountParseError(f"Invalid amount '{text}'. Please enter a valid number.")

    if amount <= 0:
        raise InvalidAmountError(f"Amount must be greater than zero, got {amount}")

    return amount


def normalize_currency(code: str | None) -> str:
    """
    Normalize a currency selection to an upper-case code.

    Raises:
        MissingCurrencyError: If no currency was given
    """
    if code is None or not code.strip():
        raise MissingCurrencyError("Please select both currencies.")
    return code.strip().upper()
