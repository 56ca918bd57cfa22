"""
Benchmark Module

Registries, runner and reporting for the workload x backend matrix.
"""

from .types import BackendHandle, Workload, TrialResult
from .registry import BackendRegistry, WorkloadRegistry
from .reporting import ConsoleReporter, format_duration, format_throughput
from .runner import BenchmarkRunner, run_trial
from .suite import BenchmarkSuite
from .loader import build_suite, resolve_operation

__all__ = [
    "BackendHandle",
    "Workload",
    "TrialResult",
    "BackendRegistry",
    "WorkloadRegistry",
    "ConsoleReporter",
    "format_duration",
    "format_throughput",
    "BenchmarkRunner",
    "run_trial",
    "BenchmarkSuite",
    "build_suite",
    "resolve_operation",
]
