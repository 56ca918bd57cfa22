"""
Pytest Configuration

Global test configuration, fixtures, and utilities for the
sqlbench test suite.
"""

import io
import logging
import logging.handlers
import sys
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

# Add src to Python path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlbench.benchmark.reporting import ConsoleReporter
from sqlbench.benchmark.types import BackendHandle
from sqlbench.core.config import AppConfig, DatabaseConfig, LoggingConfig, set_config


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def test_config(temp_dir):
    """Provide test configuration."""
    return AppConfig(
        name="Test sqlbench",
        version="test",
        debug=True,
        database=DatabaseConfig(echo=False, pool_size=1),
        logging=LoggingConfig(
            level="DEBUG",
            file=str(temp_dir / "test.log")
        ),
    )


@pytest.fixture
def report_buffer():
    """Text buffer the reporter writes into."""
    return io.StringIO()


@pytest.fixture
def reporter(report_buffer):
    """Reporter writing plain text into ``report_buffer``."""
    return ConsoleReporter(Console(file=report_buffer, width=200, color_system=None))


@pytest.fixture
def report_lines(report_buffer):
    """Callable returning the report written so far, one entry per line."""
    def lines():
        return report_buffer.getvalue().splitlines()
    return lines


@pytest.fixture
def make_backend():
    """Factory for backend handles around arbitrary connection objects."""
    def create(name: str, connection=None) -> BackendHandle:
        return BackendHandle(name=name, connection=connection if connection is not None else object())
    return create


# Pytest markers for test categorization

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external dependencies"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that use real SQLite engines"
    )


# Test environment setup

@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, test_config):
    """Isolate global configuration, environment and logging handlers."""
    for env_var in ("LOG_LEVEL", "DEBUG", "ENVIRONMENT", "SQLBENCH_DB_ECHO"):
        monkeypatch.delenv(env_var, raising=False)

    set_config(test_config)

    root_logger = logging.getLogger()
    level = root_logger.level

    yield

    # Drop handlers installed by setup_logging; pytest manages its own
    for handler in list(root_logger.handlers):
        if type(handler) in (logging.StreamHandler, logging.handlers.RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
    set_config(None)
