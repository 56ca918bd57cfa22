"""
Backend and Workload Registries

Append-only, insertion-ordered collections of the backends and workloads
taking part in a benchmark suite.
"""

from typing import Iterator, List, Optional

from ..core.config import DatabaseConfig
from ..core.database import open_engine, ping_engine, close_engine
from ..core.exceptions import RegistrationError, RegistrationPhase
from ..utils.logging import get_logger
from .types import BackendHandle, Workload, WorkloadOperation

logger = get_logger(__name__)


class BackendRegistry:
    """Registry of validated backends, kept in registration order."""

    def __init__(self, database_config: Optional[DatabaseConfig] = None):
        self.database_config = database_config
        self._backends: List[BackendHandle] = []

    def register(self, name: str, driver_kind: str, connection_target: str) -> BackendHandle:
        """
        Open a backend and add it once it answers a ping.

        Duplicate names are accepted; keeping them unique is up to the caller.

        Args:
            name: Name used in reports
            driver_kind: SQLAlchemy dialect, optionally with DB-API
            connection_target: Everything after ``://`` in the engine URL

        Returns:
            The registered backend handle

        Raises:
            RegistrationError: if the engine cannot be opened (phase ``open``)
                or does not answer a ping (phase ``liveness``)
        """
        if name in self.names():
            logger.warning(f"Backend name '{name}' is already registered; reports will be ambiguous")

        try:
            engine = open_engine(driver_kind, connection_target, self.database_config)
        except Exception as e:
            raise RegistrationError(
                f"Error registering backend '{name}': {str(e)}",
                backend_name=name,
                phase=RegistrationPhase.OPEN,
            ) from e

        try:
            ping_engine(engine)
        except Exception as e:
            close_engine(engine)
            raise RegistrationError(
                f"Error on backend '{name}': {str(e)}",
                backend_name=name,
                phase=RegistrationPhase.LIVENESS,
            ) from e

        handle = BackendHandle(name=name, connection=engine)
        self._backends.append(handle)
        logger.info(f"Registered backend '{name}' ({driver_kind})")
        return handle

    def names(self) -> List[str]:
        return [backend.name for backend in self._backends]

    def close(self) -> None:
        """Dispose every held engine. Handles stay registered."""
        for backend in self._backends:
            close_engine(backend.connection)

    def __iter__(self) -> Iterator[BackendHandle]:
        return iter(list(self._backends))

    def __len__(self) -> int:
        return len(self._backends)


class WorkloadRegistry:
    """Registry of workloads, kept in registration order."""

    def __init__(self):
        self._workloads: List[Workload] = []

    def register(self, name: str, iterations: int, operation: WorkloadOperation) -> Workload:
        """Append a workload. The iteration count is taken as given."""
        workload = Workload(name=name, iterations=iterations, operation=operation)
        self._workloads.append(workload)
        logger.debug(f"Registered workload '{name}' with {iterations} iterations")
        return workload

    def names(self) -> List[str]:
        return [workload.name for workload in self._workloads]

    def __iter__(self) -> Iterator[Workload]:
        return iter(list(self._workloads))

    def __len__(self) -> int:
        return len(self._workloads)
