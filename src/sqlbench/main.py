"""
CLI Entry Point

Main command-line interface for sqlbench using Click with rich output.
"""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from .core.config import get_config, reload_config
from .core.exceptions import SqlBenchException
from .utils.logging import setup_logging, get_logger
from .commands.run import run
from .commands.health import health
from .commands.workloads import workloads

console = Console(stderr=True)
logger = get_logger(__name__)


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False), help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--debug', is_flag=True, help='Enable debug mode')
@click.pass_context
def cli(ctx, config, verbose, debug):
    """sqlbench - compare query throughput across database backends."""
    ctx.ensure_object(dict)

    if config:
        app_config = reload_config(Path(config))
    else:
        app_config = get_config()

    if debug:
        app_config.debug = debug

    if verbose or debug:
        app_config.logging.level = 'DEBUG'
        app_config.logging.console_level = 'DEBUG'
    setup_logging(app_config)

    ctx.obj['config'] = app_config


cli.add_command(run)
cli.add_command(health)
cli.add_command(workloads)


def main():
    """Main entry point with top-level error handling."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)
    except SqlBenchException as e:
        logger.error(f"Application error: {str(e)}")
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error: {escape(str(e))}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
