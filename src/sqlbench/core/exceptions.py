"""
Custom Exception Classes

Application-specific exception classes for backend registration,
workload execution and configuration handling.
"""

from enum import Enum
from typing import Optional, Any, Dict


class SqlBenchException(Exception):
    """Base exception class for all sqlbench errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(SqlBenchException):
    """Raised when there's an issue with configuration setup or validation."""
    pass


class RegistrationPhase(str, Enum):
    """Stage of backend registration that failed."""
    OPEN = "open"
    LIVENESS = "liveness"


class RegistrationError(SqlBenchException):
    """Raised when a backend cannot be opened or does not answer a ping."""

    def __init__(self, message: str, backend_name: Optional[str] = None,
                 phase: RegistrationPhase = RegistrationPhase.OPEN, **kwargs):
        super().__init__(message, kwargs)
        self.backend_name = backend_name
        self.phase = phase


class WorkloadError(SqlBenchException):
    """Raised by a workload operation when a trial fails."""

    def __init__(self, message: str, workload_name: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.workload_name = workload_name
