"""
Display formatting for amounts and rates.
"""

from ..storage.models import ConversionRecord


def format_amount(value: float) -> str:
    """Two decimal places with thousands separators, e.g. ``1,234.50``."""
    return f"{value:,.2f}"


def format_rate(value: float) -> str:
    """Four decimal places, as shown in the rates listing."""
    return f"{value:.4f}"


def format_conversion(record: ConversionRecord) -> str:
    """Render ``1,000.00 USD = 850.00 EUR``."""
    return (
        f"{format_amount(record.amount)} {record.from_currency} = "
        f"{format_amount(record.converted_amount)} {record.to_currency}"
    )
