"""
Append-only diagnostic log shared by every other store.
"""

import logging
from datetime import datetime
from pathlib import Path

from ..shared.timestamps import Clock
from .models import ErrorLogEntry
from .settings import storage_settings

logger = logging.getLogger(__name__)


def _printable(text: str) -> str:
    """Escape characters that cannot be encoded as UTF-8, such as lone surrogates."""
    return text.encode("utf-8", errors="backslashreplace").decode("utf-8")


class ErrorLog:
    """Best-effort error log. Never raises."""

    def __init__(self, path: str | Path | None = None, clock: Clock | None = None):
        """Initialize the error log."""
        self.path = Path(path) if path is not None else storage_settings.error_log_path
        self._clock = clock or datetime.now

    def record(self, error_type: str, details: str) -> ErrorLogEntry:
        """
        Append one ``timestamp | TAG | details`` line.

        If the file cannot be written the failure is reported through the
        logging module and otherwise dropped.

        Args:
            error_type: Free-form tag, e.g. SAVE_HISTORY
            details: Human-readable description

        Returns:
            ErrorLogEntry: The entry that was (or would have been) written
        """
        entry = ErrorLogEntry(
            timestamp=self._clock(),
            error_type=_printable(error_type),
            details=_printable(details),
        )

        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(entry.to_line() + "\n")
        except OSError as e:
            logger.error(f"Error logging error: {e}")
            logger.error(f"Unlogged error {entry.error_type}: {entry.details}")
        else:
            logger.warning(f"{entry.error_type}: {entry.details}")

        return entry
