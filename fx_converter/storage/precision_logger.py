"""
High-precision audit log for large or volatile conversions.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated, Final

from pydantic import BaseModel, ConfigDict, Field

from ..shared.timestamps import Clock
from .error_log import ErrorLog
from .models import PrecisionLogEntry, PrecisionReason
from .settings import storage_settings

PRECISION_THRESHOLD: Final[float] = 10000.0

# ARS and VES are not in the rate table; only membership is checked
VOLATILE_CURRENCIES: Final[frozenset[str]] = frozenset(
    {"TRY", "MXN", "PHP", "KRW", "ARS", "VES"}
)

ERROR_PRECISION_LOG: Final[str] = "PRECISION_LOG"

logger = logging.getLogger(__name__)


class PrecisionPolicy(BaseModel):
    """Threshold and volatile set deciding what reaches the precision log."""

    model_config = ConfigDict(frozen=True)

    threshold: Annotated[
        float, Field(gt=0, description="Amounts above this are always logged")
    ] = PRECISION_THRESHOLD
    volatile_currencies: Annotated[
        frozenset[str], Field(description="Codes that are always logged")
    ] = VOLATILE_CURRENCIES

    def is_large(self, amount: float) -> bool:
        return amount > self.threshold

    def is_volatile(self, from_currency: str, to_currency: str) -> bool:
        return (
            from_currency in self.volatile_currencies
            or to_currency in self.volatile_currencies
        )

    def should_record(self, amount: float, from_currency: str, to_currency: str) -> bool:
        return self.is_large(amount) or self.is_volatile(from_currency, to_currency)

    def reason(self, amount: float) -> PrecisionReason:
        """LARGE_AMOUNT whenever the amount is over the threshold, even if volatile."""
        if self.is_large(amount):
            return PrecisionReason.LARGE_AMOUNT
        return PrecisionReason.VOLATILE_CURRENCY


class PrecisionLogger:
    """Append-only precision log."""

    def __init__(
        self,
        error_log: ErrorLog,
        path: str | Path | None = None,
        policy: PrecisionPolicy | None = None,
        clock: Clock | None = None,
    ):
        """Initialize the precision logger."""
        self.path = (
            Path(path) if path is not None else storage_settings.precision_log_path
        )
        self.error_log = error_log
        self.policy = policy or PrecisionPolicy()
        self._clock = clock or datetime.now

    def maybe_record(
        self,
        amount: float,
        from_currency: str,
        to_currency: str,
        converted_amount: float,
    ) -> PrecisionLogEntry | None:
        """
        Append a ten-decimal record if the conversion is large or volatile.

        Args:
            amount: Original amount
            from_currency: Source currency code
            to_currency: Target currency code
            converted_amount: Result of the conversion

        Returns:
            PrecisionLogEntry | None: The entry, or None if nothing triggered
        """
        if not self.policy.should_record(amount, from_currency, to_currency):
            return None

        entry = PrecisionLogEntry(
            timestamp=self._clock(),
            reason=self.policy.reason(amount),
            amount=amount,
            from_currency=from_currency,
            converted_amount=converted_amount,
            to_currency=to_currency,
        )

        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(entry.to_line() + "\n")
        except OSError as e:
            self.error_log.record(
                ERROR_PRECISION_LOG, f"Error saving precision conversion: {e}"
            )
        else:
            logger.info(
                f"Precision log {entry.reason.value}: "
                f"{amount} {from_currency} -> {to_currency}"
            )

        return entry
