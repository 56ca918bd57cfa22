"""
Backend Connections

Opening SQLAlchemy engines for benchmark backends and probing them for
liveness before they take part in a run.
"""

from typing import Optional

from sqlalchemy import create_engine, Engine, text
from sqlalchemy.engine import make_url, URL
from sqlalchemy.pool import StaticPool

from .config import DatabaseConfig, get_config
from ..utils.logging import get_logger

logger = get_logger(__name__)


def build_url(driver_kind: str, connection_target: str) -> URL:
    """Combine a driver kind (dialect[+dbapi]) and a target into an engine URL."""
    return make_url(f"{driver_kind}://{connection_target}")


def open_engine(driver_kind: str, connection_target: str,
                config: Optional[DatabaseConfig] = None) -> Engine:
    """
    Open an engine for the given driver kind and connection target.

    Like most pooled drivers the engine connects lazily, so a successful
    open says nothing about reachability; see ``ping_engine``.

    Args:
        driver_kind: SQLAlchemy dialect, optionally with DB-API, e.g. ``postgresql+psycopg2``
        connection_target: Everything after ``://`` in the URL
        config: Engine options (uses the global configuration if None)

    Returns:
        SQLAlchemy engine
    """
    if config is None:
        config = get_config().database

    url = build_url(driver_kind, connection_target)
    logger.info(f"Opening engine for {url.render_as_string(hide_password=True)}")

    if url.get_backend_name() == 'sqlite':
        return _create_sqlite_engine(url, config)
    return _create_generic_engine(url, config)


def _create_sqlite_engine(url: URL, config: DatabaseConfig) -> Engine:
    """Create a SQLAlchemy engine for SQLite databases."""
    # A single shared connection keeps in-memory databases alive between trials
    return create_engine(
        url,
        echo=config.echo,
        poolclass=StaticPool,
        connect_args={
            'check_same_thread': False,
            'timeout': config.sqlite_timeout,
        }
    )


def _create_generic_engine(url: URL, config: DatabaseConfig) -> Engine:
    """Create a SQLAlchemy engine for generic databases (PostgreSQL, etc.)."""
    return create_engine(
        url,
        echo=config.echo,
        pool_size=config.pool_size,
    )


def ping_engine(engine: Engine) -> None:
    """Check the engine can reach its database; raises on failure."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1")).scalar_one()


def close_engine(engine: Engine) -> None:
    """Release all pooled connections held by the engine."""
    engine.dispose()
