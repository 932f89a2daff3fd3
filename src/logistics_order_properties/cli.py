"""Command-line interface for the order property catalog."""

import json
import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import get_version
from .application.project_config import load_project_config
from .domain.exceptions import OrderPropertyError
from .domain.property_names import (
    get_capacity_property_index,
    get_capacity_property_name,
    get_custom_property_index,
    get_custom_property_name,
)
from .logging_config import configure_logging, get_logger

console = Console()
logger = get_logger("cli")

NAME_BUILDERS = {
    "custom": get_custom_property_name,
    "capacity": get_capacity_property_name,
}


def _fail(action: str, error: Exception) -> None:
    logger.error(f"{action} failed: {error}")
    logger.debug(f"{action} error details", exc_info=True)
    console.print(f"❌ {action} failed: {escape(str(error))}", style="red")
    sys.exit(1)


@click.group()
@click.version_option(version=get_version(), prog_name="order-properties")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Order properties - inspect the order property catalog of a project."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    logger.info("=== Order properties CLI started ===")


@cli.command(name="list")
@click.option(
    "--project",
    "project_path",
    type=click.Path(dir_okay=False),
    help="Project definition file (defaults to $ORDER_PROPERTIES_PROJECT)",
)
@click.option(
    "--exclude",
    multiple=True,
    help="Property name to leave out; may be repeated",
)
@click.option("--json", "as_json", is_flag=True, help="Print the catalog as JSON")
def list_properties(project_path: str | None, exclude: tuple[str, ...], as_json: bool):
    """List the exported order properties of a project."""
    logger.info("=== Starting list command ===")

    try:
        config = load_project_config(project_path)
        excluded = set(exclude)
        properties = config.export_order_properties(
            exclude=lambda name: name in excluded
        )
    except OrderPropertyError as e:
        _fail("Listing order properties", e)
        return

    if as_json:
        click.echo(json.dumps([info.model_dump() for info in properties], indent=2))
    else:
        table = Table(title="Order Properties")
        table.add_column("Name", style="cyan")
        table.add_column("Title", style="magenta")
        for info in properties:
            table.add_row(info.name, info.title)
        console.print(table)

    logger.info(f"=== List command completed: {len(properties)} properties ===")


@cli.command()
@click.argument("kind", type=click.Choice(sorted(NAME_BUILDERS)))
@click.argument("index", type=int)
def name(kind: str, index: int):
    """Print the order property name of a custom property or capacity INDEX."""
    try:
        click.echo(NAME_BUILDERS[kind](index))
    except OrderPropertyError as e:
        _fail("Building property name", e)


@cli.command()
@click.argument("property_name")
def parse(property_name: str):
    """Show which indexed collection PROPERTY_NAME refers to."""
    custom_index = get_custom_property_index(property_name)
    if custom_index >= 0:
        click.echo(f"Custom order property #{custom_index}")
        return

    capacity_index = get_capacity_property_index(property_name)
    if capacity_index >= 0:
        click.echo(f"Capacity #{capacity_index}")
        return

    click.echo(f"{property_name} is not an indexed order property")


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n👋 Goodbye!", style="yellow")
        logger.info("CLI terminated by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unexpected error in main: {e}")
        logger.debug("Main error details", exc_info=True)
        console.print(f"❌ Unexpected error: {e}", style="red")
        sys.exit(1)


if __name__ == "__main__":
    main()
