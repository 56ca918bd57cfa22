"""
Logging Configuration

Centralized logging setup with configurable levels, file rotation,
and structured logging for the benchmark harness.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
import json
from datetime import datetime, timezone

from ..core.config import get_config


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        # Add trial context if present
        if hasattr(record, 'workload'):
            log_entry['workload'] = record.workload
        if hasattr(record, 'backend'):
            log_entry['backend'] = record.backend

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


class TrialLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds workload/backend context to log records."""

    def process(self, msg: str, kwargs: dict) -> tuple:
        """Add extra context to log record."""
        extra = kwargs.get('extra', {})
        extra.update(self.extra)
        kwargs['extra'] = extra
        return msg, kwargs


def setup_logging(config=None, enable_json: bool = False) -> None:
    """
    Set up logging configuration for the application.

    Args:
        config: Optional configuration object (uses default if None)
        enable_json: Enable JSON formatted logging
    """
    if config is None:
        config = get_config()

    log_file = Path(config.logging.file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.logging.level.upper()))
    root_logger.handlers.clear()

    # Console output goes to stderr so it never interleaves with the report
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, config.logging.console_level.upper()))

    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file,
        maxBytes=_parse_size(config.logging.max_size),
        backupCount=config.logging.backup_count,
        encoding='utf-8'
    )
    file_handler.setLevel(getattr(logging, config.logging.level.upper()))

    if enable_json:
        json_formatter = JSONFormatter()
        console_handler.setFormatter(json_formatter)
        file_handler.setFormatter(json_formatter)
    else:
        console_handler.setFormatter(logging.Formatter(config.logging.format))
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s'
        ))

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    _configure_third_party_loggers()

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured - Console: {config.logging.console_level}, File: {config.logging.level}, Path: {log_file}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name."""
    return logging.getLogger(name)


def get_trial_logger(workload: str, backend: str) -> TrialLoggerAdapter:
    """
    Get a logger adapter with trial context.

    Args:
        workload: Name of the workload being run
        backend: Name of the backend it runs against

    Returns:
        Logger adapter with trial context
    """
    return TrialLoggerAdapter(get_logger('sqlbench.trial'), {
        'workload': workload,
        'backend': backend,
    })


def _parse_size(size_str: str) -> int:
    """
    Parse size string (e.g., '10MB') to bytes.

    Falls back to 10MB when the string cannot be parsed.
    """
    size_str = size_str.upper().strip()

    multipliers = {
        'KB': 1024,
        'MB': 1024 ** 2,
        'GB': 1024 ** 3,
        'B': 1,
    }

    for unit, multiplier in multipliers.items():
        if size_str.endswith(unit):
            number_str = size_str[:-len(unit)].strip()
            try:
                return int(float(number_str) * multiplier)
            except ValueError:
                break

    return 10 * 1024 * 1024


def _configure_third_party_loggers() -> None:
    """Reduce noise from third-party libraries."""
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.pool').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.dialects').setLevel(logging.WARNING)
