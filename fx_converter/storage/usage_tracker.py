"""
Currency pair usage statistics, rewritten in full on every update.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Final

from ..shared.timestamps import Clock, format_timestamp
from .error_log import ErrorLog
from .models import PAIR_SEPARATOR, UsagePairCount, pair_key
from .settings import storage_settings

USAGE_HEADER: Final[str] = "=== Currency Pair Usage Statistics ==="
COUNT_SEPARATOR: Final[str] = ":"

ERROR_USER_BEHAVIOR: Final[str] = "USER_BEHAVIOR"
ERROR_LOAD_BEHAVIOR: Final[str] = "LOAD_BEHAVIOR"

logger = logging.getLogger(__name__)


class UsageTracker:
    """In-memory pair counts persisted by overwriting a text report."""

    def __init__(
        self,
        error_log: ErrorLog,
        path: str | Path | None = None,
        clock: Clock | None = None,
    ):
        """Initialize the tracker with no counts; call ``load_all`` at startup."""
        self.path = Path(path) if path is not None else storage_settings.usage_path
        self.error_log = error_log
        self._clock = clock or datetime.now
        self._counts: dict[str, int] = {}

    def record(self, from_currency: str, to_currency: str) -> int:
        """
        Count one conversion of an ordered pair and rewrite the report.

        Returns:
            int: The new count for the pair
        """
        key = pair_key(from_currency, to_currency)
        self._counts[key] = self._counts.get(key, 0) + 1
        self._save()
        return self._counts[key]

    def ranked(self) -> list[UsagePairCount]:
        """Pairs by descending count; equal counts keep first-seen order."""
        ordered = sorted(self._counts.items(), key=lambda item: item[1], reverse=True)
        return [UsagePairCount(pair_key=key, count=count) for key, count in ordered]

    def snapshot(self) -> dict[str, int]:
        """Copy of the current counts."""
        return dict(self._counts)

    def load_all(self) -> None:
        """
        Replace the in-memory counts with those stored in the report.

        Only lines containing both ``->`` and ``:`` are read, which skips the
        header, timestamp and blank lines. Lines whose count is not a
        non-negative integer are ignored without logging.
        """
        self._counts = {}

        if not self.path.exists():
            return

        try:
            with self.path.open("r", encoding="utf-8", errors="replace") as f:
                lines = f.read().splitlines()
        except OSError as e:
            self.error_log.record(
                ERROR_LOAD_BEHAVIOR, f"Error loading user behavior: {e}"
            )
            return

        for line in lines:
            if PAIR_SEPARATOR not in line or COUNT_SEPARATOR not in line:
                continue

            parts = line.split(COUNT_SEPARATOR)
            if len(parts) != 2:
                continue

            try:
                count = int(parts[1].strip().split(" ")[0])
            except ValueError:
                continue

            if count < 0:
                continue

            self._counts[parts[0].strip()] = count

        logger.info(f"Loaded usage for {len(self._counts)} currency pairs")

    def _save(self) -> None:
        lines = [
            USAGE_HEADER,
            f"Updated: {format_timestamp(self._clock())}",
            "",
            *(usage.to_line() for usage in self.ranked()),
        ]

        try:
            with self.path.open("w", encoding="utf-8") as f:
                f.write("\n".join(lines) + "\n")
        except OSError as e:
            self.error_log.record(
                ERROR_USER_BEHAVIOR, f"Error saving user behavior: {e}"
            )
            return

        logger.debug(f"Saved usage for {len(self._counts)} currency pairs")
