"""
Benchmark Report Output

Line-oriented text report of a benchmark run, written to the terminal
through a Rich console.
"""

import math
from typing import Optional

from rich.console import Console

from .types import BackendHandle, TrialResult, Workload

NO_BACKENDS_MESSAGE = "No backends registered to run benchmarks with!"
NO_WORKLOADS_MESSAGE = "No workloads registered!"

_NANOSECOND = 1
_MICROSECOND = 1000 * _NANOSECOND
_MILLISECOND = 1000 * _MICROSECOND
_SECOND = 1000 * _MILLISECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE


def _decimal(value: int, unit: int) -> str:
    """Render value/unit with trailing zeros trimmed."""
    whole, fraction = divmod(value, unit)
    if not fraction:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{str(fraction).zfill(digits).rstrip('0')}"


def format_duration(seconds: float) -> str:
    """
    Format a duration compactly, e.g. ``250ns``, ``1.5µs``, ``12.3ms``, ``1m30.5s``.

    Resolution is one nanosecond.
    """
    nanoseconds = int(round(seconds * 1e9))
    if nanoseconds == 0:
        return "0s"

    sign = "-" if nanoseconds < 0 else ""
    nanoseconds = abs(nanoseconds)

    if nanoseconds < _MICROSECOND:
        return f"{sign}{nanoseconds}ns"
    if nanoseconds < _MILLISECOND:
        return f"{sign}{_decimal(nanoseconds, _MICROSECOND)}µs"
    if nanoseconds < _SECOND:
        return f"{sign}{_decimal(nanoseconds, _MILLISECOND)}ms"

    hours, remainder = divmod(nanoseconds, _HOUR)
    minutes, remainder = divmod(remainder, _MINUTE)
    text = f"{_decimal(remainder, _SECOND)}s"
    if hours:
        return f"{sign}{hours}h{minutes}m{text}"
    if minutes:
        return f"{sign}{minutes}m{text}"
    return f"{sign}{text}"


def format_throughput(queries_per_second: float) -> str:
    """Format queries per second; the undefined (NaN) value prints as ``n/a``."""
    if math.isnan(queries_per_second):
        return "n/a"
    return f"{queries_per_second:.2f}"


def format_error(error: BaseException) -> str:
    message = str(error)
    return message if message else type(error).__name__


class ConsoleReporter:
    """Writes the run report line by line."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def _line(self, text: str = "", style: Optional[str] = None) -> None:
        self.console.out(text, style=style, highlight=False)

    def no_backends(self) -> None:
        self._line(NO_BACKENDS_MESSAGE, style="yellow")

    def no_workloads(self) -> None:
        self._line(NO_WORKLOADS_MESSAGE, style="yellow")

    def run_started(self) -> None:
        self._line("Run..")

    def workload_started(self, workload: Workload) -> None:
        self._line(f"{workload.name} {workload.iterations} iterations", style="bold")

    def backend_started(self, backend: BackendHandle) -> None:
        self._line(backend.name)

    def trial_finished(self, result: TrialResult) -> None:
        if result.error is not None:
            self._line(format_error(result.error), style="red")
        else:
            self._line(
                f"{format_duration(result.duration)}     {format_throughput(result.queries_per_second)}"
            )

    def workload_finished(self) -> None:
        self._line()
