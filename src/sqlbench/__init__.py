"""
sqlbench - Throughput benchmarks for interchangeable database backends.
"""

from .benchmark import BenchmarkSuite, TrialResult
from .core.exceptions import RegistrationError, RegistrationPhase, WorkloadError

__version__ = "1.0.0"

__all__ = [
    "BenchmarkSuite",
    "TrialResult",
    "RegistrationError",
    "RegistrationPhase",
    "WorkloadError",
]
