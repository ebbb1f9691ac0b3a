"""
Static exchange rate table.

Rates are expressed per one unit of the base currency (USD).
"""

from collections.abc import Mapping
from typing import Final

from ..shared.errors import UnknownCurrencyError
from .models import Currency

BASE_CURRENCY: Final[str] = "USD"

# Sample rates, not market data
DEFAULT_RATES: Final[dict[str, float]] = {
    "USD": 1.0000,
    "EUR": 0.85,
    "GBP": 0.73,
    "JPY": 155.8,
    "CAD": 1.38,
    "AUD": 0.66,
    "CHF": 0.80,
    "CNY": 7.08,
    "SEK": 10.6,
    "NZD": 1.51,
    "MXN": 18.3,
    "SGD": 1.37,
    "HKD": 7.79,
    "NOK": 8.50,
    "KRW": 1310.0,
    "TRY": 42.7,
    "PHP": 59.1,
}

CURRENCY_NAMES: Final[dict[str, str]] = {
    "USD": "US Dollar",
    "EUR": "Euro",
    "GBP": "British Pound",
    "JPY": "Japanese Yen",
    "CAD": "Canadian Dollar",
    "AUD": "Australian Dollar",
    "CHF": "Swiss Franc",
    "CNY": "Chinese Yuan",
    "SEK": "Swedish Krona",
    "NZD": "New Zealand Dollar",
    "MXN": "Mexican Peso",
    "SGD": "Singapore Dollar",
    "HKD": "Hong Kong Dollar",
    "NOK": "Norwegian Krone",
    "KRW": "South Korean Won",
    "TRY": "Turkish Lira",
    "PHP": "Philippine Peso",
}


class RateTable:
    """Read-only mapping of currency code to rate and display name."""

    def __init__(
        self,
        rates: Mapping[str, float],
        names: Mapping[str, str] | None = None,
    ) -> None:
        """
        Build the table.

        Args:
            rates: Rate per base unit for each code, in display order
            names: Optional display names keyed by code

        Raises:
            ValueError: If any rate is not positive
        """
        for code, rate in rates.items():
            if not rate > 0:
                raise ValueError(f"Rate for {code} must be > 0, got {rate}")

        self._rates: dict[str, float] = dict(rates)
        self._names: dict[str, str] = dict(names or {})

    def rate(self, code: str) -> float:
        """Return the rate for a currency code."""
        try:
            return self._rates[code]
        except KeyError:
            raise UnknownCurrencyError(code) from None

    def display_name(self, code: str) -> str:
        """Return the display name, or the code itself when none is registered."""
        return self._names.get(code, code)

    def codes(self) -> tuple[str, ...]:
        """Return all codes in insertion order."""
        return tuple(self._rates)

    def currencies(self) -> list[Currency]:
        """Return every currency with its name and rate, in insertion order."""
        return [
            Currency(code=code, name=self.display_name(code), rate=rate)
            for code, rate in self._rates.items()
        ]

    def __contains__(self, code: object) -> bool:
        return code in self._rates

    def __len__(self) -> int:
        return len(self._rates)


def default_rate_table() -> RateTable:
    """Build the table of the 17 built-in currencies."""
    return RateTable(DEFAULT_RATES, CURRENCY_NAMES)
