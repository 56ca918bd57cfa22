"""
Health Command

Connectivity checks for the configured backends.
"""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..benchmark.registry import BackendRegistry
from ..core.exceptions import RegistrationError
from ..utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


@click.command()
@click.pass_context
def health(ctx):
    """Open and ping every configured backend.

    \b
    Exits with status 1 if any backend fails to open or answer.
    """
    config = ctx.obj['config']
    backends = config.suite.backends

    if not backends:
        console.print("[yellow]No backends configured[/yellow]")
        return

    registry = BackendRegistry(config.database)
    table = Table(title="Backend Health", show_header=True, header_style="bold blue")
    table.add_column("Backend", style="cyan", no_wrap=True)
    table.add_column("Driver", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Details", style="dim")

    all_checks_passed = True
    try:
        for backend in backends:
            try:
                registry.register(backend.name, backend.driver, backend.target)
                table.add_row(backend.name, backend.driver, "[green]OK[/green]", "")
            except RegistrationError as e:
                all_checks_passed = False
                logger.warning(f"Health check failed for '{backend.name}': {str(e)}")
                table.add_row(backend.name, backend.driver,
                              f"[red]FAILED ({e.phase.value})[/red]", escape(str(e.__cause__ or e)))
    finally:
        registry.close()

    console.print(table)

    if not all_checks_passed:
        ctx.exit(1)
