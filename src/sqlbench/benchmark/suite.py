"""
Benchmark Suite

The object callers build a benchmark around: register backends and
workloads, then run the matrix.
"""

from typing import Optional

from ..core.config import DatabaseConfig
from .registry import BackendRegistry, WorkloadRegistry
from .reporting import ConsoleReporter
from .runner import BenchmarkRunner
from .types import BackendHandle, Workload, WorkloadOperation


class BenchmarkSuite:
    """Owns the backend and workload registries of one benchmark."""

    def __init__(self, database_config: Optional[DatabaseConfig] = None,
                 reporter: Optional[ConsoleReporter] = None):
        self.backends = BackendRegistry(database_config)
        self.workloads = WorkloadRegistry()
        self.reporter = reporter or ConsoleReporter()

    def add_backend(self, name: str, driver_kind: str, connection_target: str) -> BackendHandle:
        """Register a backend; raises RegistrationError if it cannot be opened or pinged."""
        return self.backends.register(name, driver_kind, connection_target)

    def add_workload(self, name: str, iterations: int, operation: WorkloadOperation) -> Workload:
        return self.workloads.register(name, iterations, operation)

    def run(self) -> None:
        BenchmarkRunner(self.backends, self.workloads, self.reporter).run()

    def close(self) -> None:
        self.backends.close()

    def __enter__(self) -> "BenchmarkSuite":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
