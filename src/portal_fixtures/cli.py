#!/usr/bin/env python3
"""
Portal Fixtures CLI

Command-line interface for regenerating and inspecting the Portal Hive beacon
test fixtures.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .api.beacon_client import BeaconAPIClient
from .config import BEACON_GENESIS_TIME, DEFAULT_FIXTURE_PATH, load_settings
from .content.keys import decode_content_key
from .content.periods import expected_current_period, expected_current_slot
from .content.values import ForkVersionedValue, LightClientUpdatesByRange, decode_content_value
from .exceptions import FixtureError
from .main import parse_fixture_document, update_fixtures
from .ssz.utils.hex_helpers import hex_to_bytes

# Configure rich console
console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def _shorten(hex_str: str, width: int = 24) -> str:
    if len(hex_str) <= 2 * width:
        return hex_str
    return f"{hex_str[:width]}...{hex_str[-8:]}"


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--api-url", envvar="BEACON_API_URL", help="Beacon API URL")
@click.pass_context
def cli(ctx, verbose: bool, api_url: Optional[str]):
    """
    Portal Fixtures CLI - Generate Portal Hive beacon test data.

    Fetches light client data and the finalized beacon state from a consensus
    layer node and writes the derived content keys and values.
    """
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["api_url"] = api_url


@cli.command()
@click.option(
    "--fixture-path",
    type=click.Path(path_type=Path),
    help=f"Fixture file to overwrite (defaults to FIXTURE_PATH or {DEFAULT_FIXTURE_PATH})",
)
@click.pass_context
def update(ctx, fixture_path: Optional[Path]):
    """Fetch fresh beacon data and rewrite the fixture file."""
    try:
        settings = load_settings(base_url=ctx.obj.get("api_url"), fixture_path=fixture_path)
        entries = update_fixtures(settings)
    except (FixtureError, ValueError) as e:
        logger.error(f"Fixture update failed: {e}")
        raise click.ClickException(str(e))

    table = Table(title=f"Updated {settings.fixture_path}")
    table.add_column("Entry", style="cyan")
    table.add_column("Content Key", style="green")
    table.add_column("Value Size", justify="right")

    for entry in entries:
        value_size = (len(entry.content_value) - 2) // 2
        table.add_row(entry.label, entry.content_key, f"{value_size} bytes")

    console.print(table)


@cli.command()
@click.argument(
    "fixture_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=str(DEFAULT_FIXTURE_PATH),
)
@click.pass_context
def show(ctx, fixture_path: Path):
    """Decode and summarize the entries of a fixture file."""
    try:
        entries = parse_fixture_document(fixture_path.read_text())
        table = Table(title=f"Fixture Entries in {fixture_path}")
        table.add_column("Entry", style="cyan")
        table.add_column("Key Type", style="green")
        table.add_column("Content Key")
        table.add_column("Content Id")
        table.add_column("Fork", style="yellow")
        table.add_column("Value Size", justify="right")

        for entry in entries:
            key = decode_content_key(hex_to_bytes(entry.content_key))
            value_bytes = hex_to_bytes(entry.content_value)
            value = decode_content_value(key, value_bytes)

            if isinstance(value, ForkVersionedValue):
                fork = value.fork_name.value
            elif isinstance(value, LightClientUpdatesByRange):
                fork = ", ".join(sorted({u.fork_name.value for u in value.updates}))
            else:
                fork = "-"

            table.add_row(
                entry.label,
                type(key).__name__,
                _shorten(entry.content_key),
                _shorten(key.content_id().hex()),
                fork,
                f"{len(value_bytes)} bytes",
            )

        console.print(table)

    except FixtureError as e:
        console.print(f"[red]Could not decode {fixture_path}: {e}[/red]", style="bold")
        if ctx.obj.get("verbose"):
            console.print_exception()
        sys.exit(1)


@cli.command()
@click.option("--now", type=int, help="Unix time to evaluate at (defaults to the current time)")
def period(now: Optional[int]):
    """Show the expected current slot and sync committee period."""
    if now is None:
        now = int(time.time())
    try:
        slot = expected_current_slot(BEACON_GENESIS_TIME, now)
        current_period = expected_current_period(BEACON_GENESIS_TIME, now)
    except ValueError as e:
        raise click.ClickException(str(e))

    console.print(
        Panel(
            f"Time: {now}\n"
            f"Slot: {slot}\n"
            f"Sync committee period: {current_period}\n\n"
            f"Estimated from the wall clock; near a period boundary the node\n"
            f"may still be serving the previous period.",
            title="Expected Period",
            border_style="blue",
        )
    )


@cli.command()
@click.pass_context
def health(ctx):
    """Check that the beacon API is reachable with the configured credentials."""
    console.print("[cyan]Checking beacon API health...[/cyan]")

    try:
        settings = load_settings(base_url=ctx.obj.get("api_url"))
    except ValueError as e:
        raise click.ClickException(str(e))

    client = BeaconAPIClient(
        client_id=settings.client_id,
        client_secret=settings.client_secret,
        base_url=settings.base_url,
        timeout=settings.timeout,
    )
    api_status = client.health_check()

    table = Table(title="Health Check")
    table.add_column("Component", style="cyan")
    table.add_column("Status", style="green")
    table.add_column("Details")
    table.add_row(
        "Beacon API", "✅ Healthy" if api_status else "❌ Unhealthy", client.base_url
    )
    console.print(table)

    if not api_status:
        sys.exit(1)


if __name__ == "__main__":
    cli()
