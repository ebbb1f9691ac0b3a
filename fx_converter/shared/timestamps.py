"""
Timestamp formatting shared by all persisted logs.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Final

TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

Clock = Callable[[], datetime]


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ``yyyy-MM-dd HH:mm:ss``."""
    return value.strftime(TIMESTAMP_FORMAT)
