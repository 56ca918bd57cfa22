"""
Benchmark Types

Record types shared by the registries, the runner and the reporter.
"""

import math
from typing import Any, Callable, Optional
from dataclasses import dataclass

# operation(connection, iterations); raises to signal failure
WorkloadOperation = Callable[[Any, int], Any]


@dataclass(frozen=True)
class BackendHandle:
    """A named backend whose connection passed its liveness check."""
    name: str
    connection: Any


@dataclass(frozen=True)
class Workload:
    """A named workload and the iteration count passed to every backend."""
    name: str
    iterations: int
    operation: WorkloadOperation


@dataclass(frozen=True)
class TrialResult:
    """Outcome of one workload run against one backend."""
    error: Optional[BaseException]
    iterations: int
    duration: float  # seconds

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def queries_per_second(self) -> float:
        """Iterations per second; NaN when the duration is not positive."""
        if self.duration <= 0:
            return math.nan
        return self.iterations / self.duration
