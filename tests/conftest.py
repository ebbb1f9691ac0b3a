"""
Test configuration for the FX converter tests.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add project root to path before importing our modules
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Import our modules after path setup
from fx_converter.rates.engine import ConversionEngine  # noqa: E402
from fx_converter.rates.rate_table import default_rate_table  # noqa: E402
from fx_converter.service.converter import ConverterService  # noqa: E402
from fx_converter.storage.error_log import ErrorLog  # noqa: E402
from fx_converter.storage.history_store import HistoryStore  # noqa: E402
from fx_converter.storage.models import ConversionRecord  # noqa: E402
from fx_converter.storage.precision_logger import PrecisionLogger  # noqa: E402
from fx_converter.storage.usage_tracker import UsageTracker  # noqa: E402

FIXED_NOW = datetime(2025, 1, 15, 12, 30, 45)


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same moment."""
    return lambda: FIXED_NOW


@pytest.fixture
def rate_table():
    return default_rate_table()


@pytest.fixture
def engine(rate_table):
    return ConversionEngine(rate_table)


@pytest.fixture
def error_log(tmp_path, fixed_clock):
    return ErrorLog(tmp_path / "error_log.txt", clock=fixed_clock)


@pytest.fixture
def history_store(tmp_path, error_log):
    return HistoryStore(error_log, tmp_path / "history.txt")


@pytest.fixture
def usage_tracker(tmp_path, error_log, fixed_clock):
    return UsageTracker(error_log, tmp_path / "user_behavior.txt", clock=fixed_clock)


@pytest.fixture
def precision_logger(tmp_path, error_log, fixed_clock):
    return PrecisionLogger(error_log, tmp_path / "precision_log.txt", clock=fixed_clock)


@pytest.fixture
def service(engine, history_store, usage_tracker, precision_logger, error_log):
    """Converter service with every store in a temporary directory."""
    return ConverterService(
        engine=engine,
        history=history_store,
        usage=usage_tracker,
        precision=precision_logger,
        error_log=error_log,
    )


@pytest.fixture
def sample_records():
    """Provide sample conversion records in append order."""
    return [
        ConversionRecord(
            amount=100.0, from_currency="USD", to_currency="EUR", converted_amount=85.0
        ),
        ConversionRecord(
            amount=50.0, from_currency="GBP", to_currency="JPY", converted_amount=10671.23
        ),
        ConversionRecord(
            amount=1234567.5,
            from_currency="CAD",
            to_currency="USD",
            converted_amount=894613.4,
        ),
    ]
