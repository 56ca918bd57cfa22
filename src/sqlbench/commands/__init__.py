"""
Commands Package

CLI command implementations:
- run.py - Run the benchmark matrix
- health.py - Backend connectivity checks
- workloads.py - List built-in workloads
"""

from .run import run
from .health import health
from .workloads import workloads

__all__ = [
    'run',
    'health',
    'workloads',
]
