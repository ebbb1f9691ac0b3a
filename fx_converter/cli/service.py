"""
Command-line front end for the FX converter.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Final

from ..service.converter import ConverterService
from ..service.formatting import format_amount, format_conversion, format_rate
from ..shared.errors import ConverterError

EXIT_OK: Final[int] = 0
EXIT_ERROR: Final[int] = 1

USAGE: Final[str] = """Usage: python run.py <command> [args]
  convert AMOUNT FROM TO - Convert AMOUNT from currency FROM to currency TO
  history                - Show conversion history, newest first
  clear-history          - Delete all conversion history
  stats                  - Show how often each currency pair was converted
  rates                  - Show the exchange rates per 1 USD"""

logger = logging.getLogger(__name__)


def _convert(service: ConverterService, args: Sequence[str]) -> int:
    if len(args) != 3:
        print("Usage: python run.py convert AMOUNT FROM TO")
        return EXIT_ERROR

    amount_text, from_currency, to_currency = args
    try:
        result = service.convert_text(amount_text, from_currency, to_currency)
    except ConverterError as e:
        print(e.message)
        return EXIT_ERROR

    print(format_conversion(result.record))
    return EXIT_OK


def _history(service: ConverterService, args: Sequence[str]) -> int:
    if not (records := service.history()):
        print("No conversions yet.")
        return EXIT_OK

    for record in records:
        print(
            f"{format_amount(record.amount)} {record.from_currency}   --->   "
            f"{format_amount(record.converted_amount)} {record.to_currency}"
        )
    return EXIT_OK


def _clear_history(service: ConverterService, args: Sequence[str]) -> int:
    service.clear_history()
    print("History cleared.")
    return EXIT_OK


def _stats(service: ConverterService, args: Sequence[str]) -> int:
    if not (usage := service.usage()):
        print("No conversions yet.")
        return EXIT_OK

    for pair in usage:
        print(pair.to_line())
    return EXIT_OK


def _rates(service: ConverterService, args: Sequence[str]) -> int:
    for currency in service.currencies():
        print(f"{currency.code:<4} {currency.name:<20} {format_rate(currency.rate):>10}")
    return EXIT_OK


COMMANDS: Final[dict[str, Callable[[ConverterService, Sequence[str]], int]]] = {
    "convert": _convert,
    "history": _history,
    "clear-history": _clear_history,
    "stats": _stats,
    "rates": _rates,
}


def main(argv: Sequence[str], service: ConverterService | None = None) -> int:
    """
    Run one CLI command.

    Args:
        argv: Command name followed by its arguments
        service: Pre-built service; built from the storage settings if omitted

    Returns:
        int: Process exit status
    """
    if not argv:
        print(USAGE)
        return EXIT_ERROR

    command, *args = argv
    if (handler := COMMANDS.get(command.lower())) is None:
        print(f"Unknown command: {command}")
        print(USAGE)
        return EXIT_ERROR

    if service is None:
        service = ConverterService.from_settings()
    service.load()

    logger.debug(f"Running command {command}")
    return handler(service, args)
