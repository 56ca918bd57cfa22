"""
Workloads Command

Lists the workloads shipped with sqlbench.
"""

import click
from rich.console import Console
from rich.table import Table

from ..workloads import BUILTIN_WORKLOADS

console = Console()


@click.command()
def workloads():
    """List built-in workloads usable by name in the configuration."""
    table = Table(title="Built-in Workloads", show_header=True, header_style="bold blue")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")

    for name, operation in BUILTIN_WORKLOADS.items():
        summary = (operation.__doc__ or "").strip().split("\n")[0]
        table.add_row(name, summary)

    console.print(table)
