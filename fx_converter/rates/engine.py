"""
Currency conversion bridged through the base currency.
"""

import logging
import math

from ..shared.errors import InvalidAmountError
from .rate_table import RateTable

logger = logging.getLogger(__name__)


class ConversionEngine:
    """Pure converter over a RateTable."""

    def __init__(self, rate_table: RateTable) -> None:
        self.rate_table = rate_table

    def convert(self, amount: float, from_code: str, to_code: str) -> float:
        """
        Convert an amount between two currencies.

        The amount is first converted to the base currency and then to the
        target, so converting a currency to itself is exact only up to
        floating-point rounding.

        Args:
            amount: Positive amount in the source currency
            from_code: Source currency code
            to_code: Target currency code

        Returns:
            float: Amount in the target currency

        Raises:
            InvalidAmountError: If amount is not greater than zero,
                or the result is zero or not finite
            UnknownCurrencyError: If either code is not in the rate table
        """
        if not amount > 0:
            raise InvalidAmountError(f"Amount must be greater than zero, got {amount}")

        from_rate = self.rate_table.rate(from_code)
        to_rate = self.rate_table.rate(to_code)

        amount_in_base = amount / from_rate
        converted = amount_in_base * to_rate
        if not (converted > 0 and math.isfinite(converted)):
            raise InvalidAmountError(
                f"Amount {amount} {from_code} is out of range for {to_code}"
            )

        logger.debug(f"Converted {amount} {from_code} -> {converted} {to_code}")
        return converted
