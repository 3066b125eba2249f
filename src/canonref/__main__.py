"""CLI entry point for canonref."""

from __future__ import annotations

import json
import logging
import sys
from datetime import date

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from canonref.config import Settings
from canonref.liturgical import Season, easter_date, season_interval, season_intervals
from canonref.references import (
    ScriptureRefError,
    decode_deep_link_ref,
    deep_link_url,
    expand_range,
    parse_reference,
    reference_formats,
    to_human_readable,
)
from canonref.schemas import ReferenceResponse, SeasonIntervalModel

console = Console()


@click.group()
@click.version_option(version="0.1.0")
@click.option(
    "--log-level",
    default=None,
    help="Logging level (DEBUG, INFO, WARNING, ...)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """canonref - Scripture references and liturgical seasons."""
    try:
        settings = Settings.from_env()
    except ValueError as e:
        _fail(str(e))
    ctx.obj = settings

    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(message: str) -> None:
    console.print(f"[red]Error: {message}[/red]")
    sys.exit(1)


@cli.command()
@click.argument("reference")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def parse(reference: str, output_json: bool):
    """Parse a reference and show every encoding.

    Example: canonref parse "1 Cor 13:4-7"
    """
    try:
        ref = parse_reference(reference)
    except ScriptureRefError as e:
        _fail(str(e))

    response = ReferenceResponse.build(reference, ref)

    if output_json:
        click.echo(response.model_dump_json(indent=2))
        return

    console.print(Panel(f"[bold]{response.formats.human}[/bold]", title="Reference"))

    table = Table(show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for key, value in ref.to_dict().items():
        table.add_row(key, str(value))
    table.add_row("deep link", response.formats.deep_link)
    table.add_row("api path", response.formats.api_path)
    console.print(table)


@cli.command()
@click.argument("reference")
@click.pass_obj
def link(settings: Settings, reference: str):
    """Print the app URL for a reference.

    Example: canonref link "John 3:16"
    """
    try:
        ref = parse_reference(reference)
    except ScriptureRefError as e:
        _fail(str(e))

    click.echo(deep_link_url(ref, settings.deep_link_scheme))


@cli.command()
@click.argument("deep_link")
def decode(deep_link: str):
    """Decode a deep-link reference such as "1Jn3.16".

    Example: canonref decode Ge1.1-2.3
    """
    try:
        ref = decode_deep_link_ref(deep_link)
    except ScriptureRefError as e:
        _fail(str(e))

    click.echo(to_human_readable(ref))


@cli.command()
@click.argument("reference")
@click.option(
    "--context",
    "-c",
    type=click.IntRange(min=0),
    default=None,
    help="Verses of context on each side (default 5)",
)
@click.pass_obj
def expand(settings: Settings, reference: str, context: int | None):
    """Widen a verse reference with surrounding context.

    Example: canonref expand "John 3:16" --context 3
    """
    margin = context if context is not None else settings.context_verses
    try:
        expanded = expand_range(reference, margin)
    except ScriptureRefError as e:
        _fail(str(e))

    click.echo(expanded)


@cli.command()
@click.argument("year", type=int)
def easter(year: int):
    """Show the date of Easter Sunday for YEAR."""
    try:
        sunday = easter_date(year)
    except ValueError as e:
        _fail(f"No Easter date for year {year}: {e}")

    click.echo(sunday.isoformat())


@cli.command()
@click.argument("name")
@click.option("--year", "-y", type=int, default=None, help="Civil year (default: current)")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def season(name: str, year: int | None, output_json: bool):
    """Show the date range of a liturgical season.

    Seasons: advent, christmas, epiphany, lent, holy_week, easter,
    pentecost, ordinary.

    Example: canonref season lent --year 2025
    """
    year = year if year is not None else date.today().year
    try:
        interval = season_interval(year, name)
    except ValueError as e:
        _fail(f"No season dates for year {year}: {e}")
    if interval is None:
        valid = ", ".join(s.value for s in Season)
        _fail(f"Unknown liturgical season: '{name}'. Expected one of: {valid}")

    if output_json:
        click.echo(SeasonIntervalModel.build(year, interval).model_dump_json(indent=2))
        return

    start, end = interval.as_iso()
    click.echo(f"{interval.season.label} {year}: {start} to {end}")


@cli.command()
@click.option("--year", "-y", type=int, default=None, help="Civil year (default: current)")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def calendar(year: int | None, output_json: bool):
    """Show every liturgical season for a year."""
    year = year if year is not None else date.today().year
    try:
        intervals = season_intervals(year)
    except ValueError as e:
        _fail(f"No season dates for year {year}: {e}")

    if output_json:
        data = [
            SeasonIntervalModel.build(year, i).model_dump(mode="json")
            for i in intervals.values()
        ]
        click.echo(json.dumps(data, indent=2))
        return

    table = Table(title=f"Liturgical seasons {year} (Easter {easter_date(year)})")
    table.add_column("Season", style="cyan")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Days", justify="right")
    for interval in intervals.values():
        start, end = interval.as_iso()
        table.add_row(interval.season.label, start, end, str(interval.days))
    console.print(table)


@cli.command()
@click.argument("reference")
def formats(reference: str):
    """Print the deep-link, API and human forms, one per line."""
    try:
        result = reference_formats(reference)
    except ScriptureRefError as e:
        _fail(str(e))

    click.echo(result.deep_link)
    click.echo(result.api_path)
    click.echo(result.human)


if __name__ == "__main__":
    cli()
