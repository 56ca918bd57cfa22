#!/usr/bin/env python3
"""
Sample Benchmark Script

Demonstrates building a benchmark suite programmatically: two SQLite
backends, the built-in workloads and one custom workload.
"""

import sys
import tempfile
from pathlib import Path

from sqlalchemy import text

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlbench import BenchmarkSuite, RegistrationError, WorkloadError
from sqlbench.workloads import insert_rows, select_one, select_param


def count_tables(engine, iterations):
    """Query the catalog repeatedly; fails on databases without sqlite_master."""
    with engine.connect() as conn:
        for _ in range(iterations):
            tables = conn.execute(text("SELECT count(*) FROM sqlite_master")).scalar_one()
            if tables < 0:
                raise WorkloadError("Negative table count", workload_name="count_tables")


def main():
    with tempfile.TemporaryDirectory() as work_dir:
        with BenchmarkSuite() as suite:
            suite.add_backend("sqlite-memory", "sqlite", "/:memory:")
            suite.add_backend("sqlite-file", "sqlite", f"/{Path(work_dir) / 'sample.db'}")

            try:
                suite.add_backend("postgres", "postgresql+psycopg2", "bench:bench@localhost:5432/bench")
            except RegistrationError as e:
                print(f"Skipping postgres ({e.phase.value}): {e}")

            suite.add_workload("select_one", 10000, select_one)
            suite.add_workload("select_param", 10000, select_param)
            suite.add_workload("insert_rows", 2000, insert_rows)
            suite.add_workload("count_tables", 5000, count_tables)

            suite.run()


if __name__ == "__main__":
    main()
