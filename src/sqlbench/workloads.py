"""
Built-in Workloads

Portable SQLAlchemy Core workloads that run against any registered
backend. Each takes ``(engine, iterations)`` and raises on failure.
"""

from typing import Callable, Dict

from sqlalchemy import Column, Engine, Integer, MetaData, String, Table, bindparam, func, insert, select, text

from .core.exceptions import WorkloadError

SCRATCH_TABLE = "sqlbench_rows"


def select_one(engine: Engine, iterations: int) -> None:
    """Round-trip ``SELECT 1`` once per iteration on a single connection."""
    with engine.connect() as conn:
        for _ in range(iterations):
            conn.execute(text("SELECT 1")).scalar_one()


def select_param(engine: Engine, iterations: int) -> None:
    """Echo a bound parameter back through the database and check it."""
    statement = select(bindparam("value", type_=Integer))
    with engine.connect() as conn:
        for i in range(iterations):
            value = conn.execute(statement, {"value": i}).scalar_one()
            if value != i:
                raise WorkloadError(
                    f"Expected {i}, got {value!r}",
                    workload_name="select_param",
                )


def insert_rows(engine: Engine, iterations: int) -> None:
    """Insert ``iterations`` rows into a scratch table, one statement each."""
    metadata = MetaData()
    table = Table(
        SCRATCH_TABLE, metadata,
        Column("id", Integer, primary_key=True),
        Column("value", String(32), nullable=False),
    )
    metadata.drop_all(engine)
    metadata.create_all(engine)
    try:
        with engine.begin() as conn:
            for i in range(iterations):
                conn.execute(insert(table).values(id=i, value=f"row-{i}"))
            count = conn.execute(select(func.count()).select_from(table)).scalar_one()
        if count != max(iterations, 0):
            raise WorkloadError(
                f"Expected {iterations} rows, found {count}",
                workload_name="insert_rows",
            )
    finally:
        metadata.drop_all(engine)


BUILTIN_WORKLOADS: Dict[str, Callable[[Engine, int], None]] = {
    "select_one": select_one,
    "select_param": select_param,
    "insert_rows": insert_rows,
}
