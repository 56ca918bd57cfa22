"""
Utils Module

Logging configuration helpers.
"""

from .logging import setup_logging, get_logger, get_trial_logger

__all__ = [
    "setup_logging",
    "get_logger",
    "get_trial_logger",
]
