from collections.abc import Iterator
from contextlib import contextmanager
from typing import Annotated

import httpx
import typer

from banzuke_delta.cli._logging import configure_logging
from banzuke_delta.cli._output import (
    console,
    print_basho_schedule,
    print_error,
    print_presentation_table,
    print_presentation_text,
)
from banzuke_delta.config import create_config, load_api_settings, load_month_names
from banzuke_delta.domain.errors import BanzukeDeltaError
from banzuke_delta.ingest.context import load_target_basho, resolve_target_id
from banzuke_delta.ingest.protocols import BanzukeSource
from banzuke_delta.ingest.sumo_api_source import SumoApiSource
from banzuke_delta.pipeline import compare_banzuke
from banzuke_delta.services.basho_schedule import build_basho_schedule
from banzuke_delta.tournament import BASHO_MONTHS, upcoming_basho_id, utc_today, validate_basho_id

app = typer.Typer(name="banzuke", help="Banzuke delta: rank movement between sumo tournaments")

_ConfigOpt = Annotated[str, typer.Option("--config", help="Path to a YAML config file")]


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only log errors")] = False,
) -> None:
    """Banzuke delta: rank movement between sumo tournaments."""
    configure_logging(verbose=verbose, quiet=quiet)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


@contextmanager
def build_source(config_path: str) -> Iterator[BanzukeSource]:
    settings = load_api_settings(create_config(yaml_path=config_path))
    with httpx.Client(timeout=httpx.Timeout(settings.timeout, connect=10.0)) as client:
        yield SumoApiSource(client=client, base_url=settings.base_url)


def _check_basho_id(basho_id: str | None) -> None:
    if basho_id is None:
        return
    problem = validate_basho_id(basho_id)
    if problem is not None:
        print_error(problem)
        raise typer.Exit(code=1)


@app.command()
def diff(
    basho_id: Annotated[str | None, typer.Argument(help="Basho id (YYYYMM); defaults to the upcoming basho")] = None,
    previous: Annotated[str | None, typer.Option("--previous", help="Previous basho id (YYYYMM)")] = None,
    table: Annotated[bool, typer.Option("--table", help="Render as a table instead of Markdown")] = False,
    start_date: Annotated[
        bool, typer.Option("--start-date/--no-start-date", help="Title from the basho start date")
    ] = True,
    config: _ConfigOpt = "banzuke.yaml",
) -> None:
    """Show each Makuuchi wrestler's movement since the previous basho."""
    _check_basho_id(basho_id)

    try:
        month_names = load_month_names(create_config(yaml_path=config))
        with build_source(config) as source:
            target_id = resolve_target_id(source, basho_id, utc_today())
            comparison = compare_banzuke(
                source, target_id, previous, use_start_date=start_date, month_names=month_names
            )
    except (BanzukeDeltaError, httpx.HTTPError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if table:
        print_presentation_table(comparison.presentation)
    else:
        print_presentation_text(comparison.presentation)


@app.command()
def basho(
    basho_id: Annotated[str | None, typer.Argument(help="Basho id (YYYYMM); defaults to the upcoming basho")] = None,
    config: _ConfigOpt = "banzuke.yaml",
) -> None:
    """Show the banzuke release date, schedule and venue of a basho."""
    _check_basho_id(basho_id)

    try:
        month_names = load_month_names(create_config(yaml_path=config))
        with build_source(config) as source:
            today = utc_today()
            target_id = resolve_target_id(source, basho_id, today)
            found = load_target_basho(source, target_id, today)
    except (BanzukeDeltaError, httpx.HTTPError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if found is None:
        months = ", ".join(f"{m:02d}" for m in BASHO_MONTHS)
        print_error(f"Basho not found for {target_id}. Valid months: {months}.")
        raise typer.Exit(code=1)

    print_basho_schedule(build_basho_schedule(found, month_names=month_names))


@app.command()
def upcoming(
    offline: Annotated[bool, typer.Option("--offline", help="Use the odd-month calendar only")] = False,
    config: _ConfigOpt = "banzuke.yaml",
) -> None:
    """Print the id of the current or next basho."""
    if offline:
        console.print(upcoming_basho_id(utc_today()))
        return

    try:
        with build_source(config) as source:
            target_id = resolve_target_id(source, None, utc_today())
    except (BanzukeDeltaError, httpx.HTTPError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    console.print(target_id)
