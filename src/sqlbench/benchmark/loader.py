"""
Suite Loader

Builds a BenchmarkSuite from the ``suite`` section of the configuration.
"""

import importlib
from typing import Callable, Optional

from ..core.config import DatabaseConfig, SuiteConfig
from ..core.exceptions import ConfigurationError, RegistrationError
from ..utils.logging import get_logger
from ..workloads import BUILTIN_WORKLOADS
from .reporting import ConsoleReporter
from .suite import BenchmarkSuite
from .types import WorkloadOperation

logger = get_logger(__name__)


def resolve_operation(reference: str) -> WorkloadOperation:
    """
    Resolve a workload operation reference.

    Args:
        reference: A built-in workload name or ``module:attribute``

    Returns:
        The operation callable

    Raises:
        ConfigurationError: if the reference cannot be resolved to a callable
    """
    if reference in BUILTIN_WORKLOADS:
        return BUILTIN_WORKLOADS[reference]

    if ":" not in reference:
        raise ConfigurationError(
            f"Unknown workload '{reference}'",
            {"builtin": sorted(BUILTIN_WORKLOADS)}
        )

    module_path, attribute = reference.split(":", 1)
    try:
        module = importlib.import_module(module_path)
        operation = getattr(module, attribute)
    except (ImportError, AttributeError) as e:
        raise ConfigurationError(f"Cannot load workload '{reference}': {str(e)}") from e

    if not callable(operation):
        raise ConfigurationError(f"Workload '{reference}' is not callable")

    return operation


def build_suite(suite_config: SuiteConfig,
                database_config: Optional[DatabaseConfig] = None,
                reporter: Optional[ConsoleReporter] = None,
                on_error: Optional[Callable[[RegistrationError], None]] = None) -> BenchmarkSuite:
    """
    Register every configured backend and workload on a new suite.

    Workload references are resolved before any backend is opened, so a
    configuration mistake fails without touching a database. Backends that
    fail to register are passed to ``on_error`` and left out; the suite keeps
    whatever registered successfully.
    """
    operations = [
        (workload, resolve_operation(workload.operation))
        for workload in suite_config.workloads
    ]

    suite = BenchmarkSuite(database_config=database_config, reporter=reporter)

    for backend in suite_config.backends:
        try:
            suite.add_backend(backend.name, backend.driver, backend.target)
        except RegistrationError as e:
            logger.error(f"Skipping backend '{backend.name}' ({e.phase.value} failed): {str(e)}")
            if on_error is not None:
                on_error(e)

    for workload, operation in operations:
        suite.add_workload(workload.name, workload.iterations, operation)

    return suite
