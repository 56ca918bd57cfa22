"""
Run Command

Builds the benchmark suite from configuration and runs the matrix.
"""

from dataclasses import replace

import click
from rich.console import Console
from rich.markup import escape

from ..benchmark.loader import build_suite
from ..benchmark.reporting import ConsoleReporter
from ..core.exceptions import RegistrationError
from ..utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


@click.command()
@click.option('--backend', '-b', 'backend_names', multiple=True,
              help='Only run against this backend (repeatable)')
@click.option('--workload', '-w', 'workload_names', multiple=True,
              help='Only run this workload (repeatable)')
@click.pass_context
def run(ctx, backend_names, workload_names):
    """Run every configured workload against every configured backend.

    \b
    EXAMPLES:

    sqlbench run
    sqlbench -c bench.yaml run --backend sqlite --workload select_one
    """
    config = ctx.obj['config']
    suite_config = config.suite

    if backend_names:
        suite_config = replace(suite_config, backends=[
            backend for backend in suite_config.backends if backend.name in backend_names
        ])
    if workload_names:
        suite_config = replace(suite_config, workloads=[
            workload for workload in suite_config.workloads if workload.name in workload_names
        ])

    def report_registration_error(error: RegistrationError) -> None:
        console.print(f"[red]{escape(str(error))}[/red]", soft_wrap=True)

    suite = build_suite(
        suite_config,
        database_config=config.database,
        reporter=ConsoleReporter(console),
        on_error=report_registration_error,
    )
    with suite:
        suite.run()
