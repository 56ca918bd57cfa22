"""
Core Module

Foundational components used across the harness including configuration
management, backend connections, and custom exceptions.
"""

from .config import get_config, AppConfig
from .exceptions import (
    SqlBenchException,
    ConfigurationError,
    RegistrationError,
    RegistrationPhase,
    WorkloadError,
)

__all__ = [
    "get_config",
    "AppConfig",
    "SqlBenchException",
    "ConfigurationError",
    "RegistrationError",
    "RegistrationPhase",
    "WorkloadError",
]
