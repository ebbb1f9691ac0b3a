"""
Append-only conversion history stored as comma-separated lines.
"""

import logging
from pathlib import Path
from typing import Final

from pydantic import ValidationError

from .error_log import ErrorLog
from .models import HISTORY_FIELD_SEPARATOR, ConversionRecord
from .settings import storage_settings

HISTORY_FIELD_COUNT: Final[int] = 4

ERROR_SAVE_HISTORY: Final[str] = "SAVE_HISTORY"
ERROR_LOAD_HISTORY_PARSE: Final[str] = "LOAD_HISTORY_PARSE"
ERROR_LOAD_HISTORY_IO: Final[str] = "LOAD_HISTORY_IO"
ERROR_CLEAR_HISTORY: Final[str] = "CLEAR_HISTORY"

logger = logging.getLogger(__name__)


class HistoryStore:
    """File-backed conversion history.

    The file is ordered oldest first; ``load_all`` returns newest first.
    """

    def __init__(self, error_log: ErrorLog, path: str | Path | None = None):
        """Initialize the history store."""
        self.path = Path(path) if path is not None else storage_settings.history_path
        self.error_log = error_log

    def append(self, record: ConversionRecord) -> None:
        """Append one record to the end of the history file."""
        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(record.to_line() + "\n")
        except OSError as e:
            self.error_log.record(ERROR_SAVE_HISTORY, f"Error saving history: {e}")
            return

        logger.debug(f"Appended history record {record.to_line()}")

    def load_all(self) -> list[ConversionRecord]:
        """
        Read every record, newest first.

        Malformed lines are skipped one by one and reported to the error log.
        A missing file means an empty history.

        Returns:
            list[ConversionRecord]: Records in reverse append order
        """
        if not self.path.exists():
            return []

        try:
            with self.path.open("r", encoding="utf-8", errors="replace") as f:
                lines = f.read().splitlines()
        except OSError as e:
            self.error_log.record(ERROR_LOAD_HISTORY_IO, f"Error loading history: {e}")
            return []

        records = [
            record
            for line in lines
            if line.strip() and (record := self._parse_line(line)) is not None
        ]
        records.reverse()

        logger.info(f"Loaded {len(records)} history records from {self.path}")
        return records

    def clear(self) -> None:
        """Truncate the history file. Does nothing when the file is absent."""
        if not self.path.exists():
            return

        try:
            with self.path.open("w", encoding="utf-8"):
                pass
        except OSError as e:
            self.error_log.record(
                ERROR_CLEAR_HISTORY, f"Error clearing history file: {e}"
            )
            return

        logger.info(f"Cleared history file {self.path}")

    def _parse_line(self, line: str) -> ConversionRecord | None:
        """Parse one ``amount,from,to,converted`` line, logging failures."""
        parts = line.split(HISTORY_FIELD_SEPARATOR)
        if len(parts) != HISTORY_FIELD_COUNT:
            self.error_log.record(
                ERROR_LOAD_HISTORY_PARSE, f"Invalid history line: {line}"
            )
            return None

        try:
            return ConversionRecord(
                amount=float(parts[0].strip()),
                from_currency=parts[1],
                to_currency=parts[2],
                converted_amount=float(parts[3].strip()),
            )
        except (ValueError, ValidationError):
            self.error_log.record(
                ERROR_LOAD_HISTORY_PARSE, f"Invalid history line: {line}"
            )
            return None
