"""
Conversion workflow tying the engine to the persistence stores.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from ..rates.engine import ConversionEngine
from ..rates.models import Currency
from ..rates.rate_table import RateTable, default_rate_table
from ..rates.validators import normalize_currency, parse_amount
from ..shared.errors import (
    ConversionFailedError,
    ConverterError,
    UnknownCurrencyError,
)
from ..storage.error_log import ErrorLog
from ..storage.history_store import HistoryStore
from ..storage.models import ConversionRecord, PrecisionLogEntry, UsagePairCount
from ..storage.precision_logger import PrecisionLogger
from ..storage.settings import StorageSettings, storage_settings
from ..storage.usage_tracker import UsageTracker

logger = logging.getLogger(__name__)


class ConversionResult(BaseModel):
    """Outcome of one conversion and its side records."""

    model_config = ConfigDict(frozen=True)

    record: ConversionRecord
    usage_count: int
    precision_entry: PrecisionLogEntry | None = None


class ConverterService:
    """Runs conversions and keeps history, usage and precision logs up to date."""

    def __init__(
        self,
        engine: ConversionEngine,
        history: HistoryStore,
        usage: UsageTracker,
        precision: PrecisionLogger,
        error_log: ErrorLog,
    ) -> None:
        self.engine = engine
        self.history_store = history
        self.usage_tracker = usage
        self.precision_logger = precision
        self.error_log = error_log

    @classmethod
    def from_settings(
        cls,
        settings: StorageSettings | None = None,
        rate_table: RateTable | None = None,
    ) -> "ConverterService":
        """Wire every component to the files named in the settings."""
        settings = settings or storage_settings
        Path(settings.data_dir).mkdir(parents=True, exist_ok=True)

        error_log = ErrorLog(settings.error_log_path)
        return cls(
            engine=ConversionEngine(rate_table or default_rate_table()),
            history=HistoryStore(error_log, settings.history_path),
            usage=UsageTracker(error_log, settings.usage_path),
            precision=PrecisionLogger(error_log, settings.precision_log_path),
            error_log=error_log,
        )

    @property
    def rate_table(self) -> RateTable:
        return self.engine.rate_table

    def load(self) -> list[ConversionRecord]:
        """Reload usage counts and return the history newest first."""
        self.usage_tracker.load_all()
        return self.history_store.load_all()

    def convert(
        self, amount: float, from_currency: str, to_currency: str
    ) -> ConversionResult:
        """
        Convert an amount and persist the conversion.

        Persistence failures are logged by the stores and never fail the
        conversion.

        Raises:
            InvalidAmountError: If amount is not greater than zero
            UnknownCurrencyError: If either code is not in the rate table
        """
        converted = self.engine.convert(amount, from_currency, to_currency)

        record = ConversionRecord(
            amount=amount,
            from_currency=from_currency,
            to_currency=to_currency,
            converted_amount=converted,
        )

        self.history_store.append(record)
        usage_count = self.usage_tracker.record(from_currency, to_currency)
        precision_entry = self.precision_logger.maybe_record(
            amount, from_currency, to_currency, converted
        )

        logger.info(
            f"Converted {amount} {from_currency} to {converted} {to_currency}"
        )
        return ConversionResult(
            record=record,
            usage_count=usage_count,
            precision_entry=precision_entry,
        )

    def convert_text(
        self,
        amount_text: str | None,
        from_currency: str | None,
        to_currency: str | None,
    ) -> ConversionResult:
        """
        Convert raw user input.

        Every rejected input is written to the error log under its error code
        before the typed error is raised.

        Raises:
            ConverterError: Subclass describing why the input was rejected
        """
        try:
            amount = parse_amount(amount_text)
            from_code = normalize_currency(from_currency)
            to_code = normalize_currency(to_currency)
            return self.convert(amount, from_code, to_code)
        except UnknownCurrencyError as e:
            self.error_log.record(e.error, f"Unknown currency selected: {e.code}")
            raise
        except ConverterError as e:
            self.error_log.record(e.error, f"{e.message} (input: {amount_text!r})")
            raise
        except Exception as e:
            self.error_log.record(
                ConversionFailedError.error, f"Unexpected error: {e}"
            )
            raise ConversionFailedError(
                "An error occurred during conversion."
            ) from e

    def history(self) -> list[ConversionRecord]:
        return self.history_store.load_all()

    def clear_history(self) -> None:
        self.history_store.clear()

    def usage(self) -> list[UsagePairCount]:
        return self.usage_tracker.ranked()

    def currencies(self) -> list[Currency]:
        return self.rate_table.currencies()
