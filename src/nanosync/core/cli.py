"""Command line interface for nanosync."""

import sys
import json
import asyncio
from typing import Any, Dict, Optional

import click

from .config import LOG_LEVEL_ENV, setup_logging, load_environment, load_mapping
from .exceptions import ConfigurationError
from ..exceptions import ConstructionError
from ..engine import create_process, create_query_string, sync as sync_process


@click.group()
@click.option('--log-level', default='INFO', envvar=LOG_LEVEL_ENV,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Set the logging level')
@click.option('--env-file', type=click.Path(exists=True), help='Path to .env file')
def cli(log_level: str, env_file: Optional[str]) -> None:
    """Sync field data between two integrations."""
    setup_logging(log_level)
    load_environment(env_file)


@cli.command()
@click.argument('mapping_file', type=click.Path(exists=True))
def inspect(mapping_file: str) -> None:
    """Show the query text and slots generated for a mapping file."""
    try:
        process = create_process(load_mapping(mapping_file).to_process_options())
    except (ConfigurationError, ConstructionError) as e:
        click.echo(f"Configuration Error: {e}", err=True)
        sys.exit(1)

    click.echo(create_query_string(process.schema))
    click.echo()
    click.echo(f"{'Kind':<10} {'Slot':<24} {'Paired With':<24} {'Integration':<20}")
    click.echo("-" * 80)
    for kind, slots in process.schema.describe().items():
        for slot in slots:
            click.echo(f"{kind:<10} {slot['name']:<24} {slot['pairedKey']:<24} {str(slot['integrationName']):<20}")


@cli.command()
@click.argument('mapping_file', type=click.Path(exists=True))
@click.option('--output', type=click.Choice(['table', 'json']), default='table',
              help='Output format')
def sync(mapping_file: str, output: str) -> None:
    """Sync the source record of a mapping file into its target record."""
    try:
        process = create_process(load_mapping(mapping_file).to_process_options())
    except (ConfigurationError, ConstructionError) as e:
        click.echo(f"Configuration Error: {e}", err=True)
        sys.exit(1)

    results = asyncio.run(sync_process(process, triggered_by="cli"))
    if results is None:
        click.echo("Sync failed, see log output for details", err=True)
        sys.exit(1)

    if output == 'json':
        click.echo(json.dumps(results, indent=2, default=str))
    else:
        _display_results_table(results)


def _display_results_table(results: Dict[str, Any]) -> None:
    """Display mutation results in a table format."""
    click.echo(f"{'Target Field':<24} {'Value':<40}")
    click.echo("-" * 65)
    for key, value in results.items():
        click.echo(f"{key:<24} {str(value):<40}")
    click.echo(f"\nFields synced: {len(results)}")


def main() -> None:
    cli()


if __name__ == '__main__':
    main()
