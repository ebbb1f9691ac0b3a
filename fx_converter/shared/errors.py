"""
Exception hierarchy for the FX converter.
"""

from typing import Final

ERROR_CONVERSION: Final[str] = "CONVERSION_ERROR"
ERROR_INVALID_AMOUNT: Final[str] = "INVALID_AMOUNT"
ERROR_EMPTY_INPUT: Final[str] = "EMPTY_INPUT"
ERROR_PARSE: Final[str] = "PARSE_ERROR"
ERROR_MISSING_CURRENCY: Final[str] = "MISSING_CURRENCY"
ERROR_UNKNOWN_CURRENCY: Final[str] = "UNKNOWN_CURRENCY"


class ConverterError(Exception):
    """Base class for errors reported back to the caller of a conversion."""

    error: str = ERROR_CONVERSION

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidAmountError(ConverterError):
    """Amount is zero, negative or not a number."""

    error = ERROR_INVALID_AMOUNT


class EmptyAmountError(ConverterError):
    """No amount was entered."""

    error = ERROR_EMPTY_INPUT


class AmountParseError(ConverterError):
    """Amount text could not be read as a number."""

    error = ERROR_PARSE


class MissingCurrencyError(ConverterError):
    """Source or target currency was not selected."""

    error = ERROR_MISSING_CURRENCY


class UnknownCurrencyError(ConverterError):
    """Currency code is not present in the rate table."""

    error = ERROR_UNKNOWN_CURRENCY

    def __init__(self, code: str):
        super().__init__(f"Unknown currency: {code}")
        self.code = code


class ConversionFailedError(ConverterError):
    """Unexpected failure while converting."""
