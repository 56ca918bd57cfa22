"""
Benchmark Runner

Executes the workload x backend matrix one trial at a time and hands
every result to the reporter.
"""

import gc
import time
from typing import Iterable, Optional

from ..utils.logging import get_logger, get_trial_logger
from .reporting import ConsoleReporter
from .types import BackendHandle, TrialResult, Workload

logger = get_logger(__name__)


def run_trial(workload: Workload, backend: BackendHandle) -> TrialResult:
    """
    Run one workload against one backend and time it.

    Unreachable memory is collected before the timer starts so that garbage
    left by an earlier trial is not billed to this one. Exceptions raised by
    the operation are captured in the result, never propagated.
    """
    trial_logger = get_trial_logger(workload.name, backend.name)
    error: Optional[BaseException] = None

    gc.collect()

    start = time.perf_counter()
    try:
        workload.operation(backend.connection, workload.iterations)
    except Exception as e:
        error = e
    end = time.perf_counter()

    if error is not None:
        trial_logger.warning(f"Trial failed: {type(error).__name__}: {error}", exc_info=error)

    result = TrialResult(error=error, iterations=workload.iterations, duration=end - start)
    trial_logger.debug(f"Trial finished in {result.duration:.6f}s")
    return result


class BenchmarkRunner:
    """Runs every registered workload against every registered backend."""

    def __init__(self, backends: Iterable[BackendHandle], workloads: Iterable[Workload],
                 reporter: Optional[ConsoleReporter] = None):
        self.backends = list(backends)
        self.workloads = list(workloads)
        self.reporter = reporter or ConsoleReporter()

    def run(self) -> None:
        """Execute the full matrix: workloads outer, backends inner, in registration order."""
        if not self.backends:
            logger.info("Nothing to run: no backends registered")
            self.reporter.no_backends()
            return

        if not self.workloads:
            logger.info("Nothing to run: no workloads registered")
            self.reporter.no_workloads()
            return

        logger.info(f"Running {len(self.workloads)} workload(s) against {len(self.backends)} backend(s)")
        self.reporter.run_started()

        for workload in self.workloads:
            self.reporter.workload_started(workload)
            for backend in self.backends:
                self.reporter.backend_started(backend)
                result = run_trial(workload, backend)
                self.reporter.trial_finished(result)
            self.reporter.workload_finished()
