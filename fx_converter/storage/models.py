"""
Storage data models for the FX converter.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Final

from pydantic import BaseModel, ConfigDict, Field

from ..shared.timestamps import format_timestamp

PAIR_SEPARATOR: Final[str] = "->"
HISTORY_FIELD_SEPARATOR: Final[str] = ","
LOG_FIELD_SEPARATOR: Final[str] = " | "


def pair_key(from_currency: str, to_currency: str) -> str:
    """Key identifying one ordered currency pair."""
    return f"{from_currency}{PAIR_SEPARATOR}{to_currency}"


class ConversionRecord(BaseModel):
    """One completed conversion, as kept in the history file."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        frozen=True,
    )

    amount: Annotated[float, Field(gt=0, description="Original amount")]
    from_currency: Annotated[str, Field(min_length=1, description="Source currency")]
    to_currency: Annotated[str, Field(min_length=1, description="Target currency")]
    converted_amount: Annotated[float, Field(gt=0, description="Converted amount")]

    def to_line(self) -> str:
        """Serialize as ``amount,from,to,converted``.

        ``repr`` of a float never inserts grouping separators, so the four
        fields stay comma-delimited regardless of locale.
        """
        return HISTORY_FIELD_SEPARATOR.join(
            (
                repr(self.amount),
                self.from_currency,
                self.to_currency,
                repr(self.converted_amount),
            )
        )


class UsagePairCount(BaseModel):
    """Cumulative usage of one ordered currency pair."""

    model_config = ConfigDict(frozen=True)

    pair_key: Annotated[str, Field(description="Pair key such as USD->EUR")]
    count: Annotated[int, Field(ge=0, description="Number of conversions")]

    def to_line(self) -> str:
        """Render as ``USD->EUR: 3 conversions``."""
        return f"{self.pair_key}: {self.count} conversions"


class PrecisionReason(str, Enum):
    """Why a conversion was written to the precision log."""

    LARGE_AMOUNT = "LARGE_AMOUNT"
    VOLATILE_CURRENCY = "VOLATILE_CURRENCY"


class PrecisionLogEntry(BaseModel):
    """A conversion recorded at ten decimal places."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    reason: PrecisionReason
    amount: float
    from_currency: str
    converted_amount: float
    to_currency: str

    def to_line(self) -> str:
        """Render the pipe-separated precision line with ten decimal places."""
        reason = self.reason.value
        return (
            f"{format_timestamp(self.timestamp)} | {reason} | "
            f"{self.amount:.10f} {self.from_currency} -> "
            f"{self.converted_amount:.10f} {self.to_currency} | Reason: {reason}"
        )


class ErrorLogEntry(BaseModel):
    """A diagnostic line in the error log."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    error_type: str
    details: str

    def to_line(self) -> str:
        """Render as ``timestamp | TAG | details``."""
        return LOG_FIELD_SEPARATOR.join(
            (format_timestamp(self.timestamp), self.error_type, self.details)
        )
