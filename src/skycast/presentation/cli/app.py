"""Skycast CLI application using Typer.

Streams result envelopes as they arrive: the cached value first, then the
refreshed (or fallback) value once the background fetch completes.
"""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, Awaitable, Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncEngine

from skycast.application.queries.weather import GetForecastQuery, SearchLocationsQuery
from skycast.config import get_settings
from skycast.domain.shared import DomainException, Failure, Loading, ResultState, Success
from skycast.domain.weather.value_objects import Forecast, Location
from skycast.infrastructure.persistence.sqlalchemy import (
    create_engine_for_url,
    create_tables,
    reset_tables,
)
from skycast.infrastructure.weather import WeatherRepositoryFactory

T = TypeVar("T")

app = typer.Typer(
    name="skycast",
    help="Skycast - cache-first weather search and forecasts",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(
    name="db",
    help="Local cache database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


def configure_logging(level: str) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Set level for our package specifically
    logging.getLogger("skycast").setLevel(log_level)

    # Quiet noisy third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging("DEBUG" if verbose else get_settings().log_level)


def _location_table(locations: list[Location]) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Name")
    table.add_column("Region")
    table.add_column("Country")
    table.add_column("Lat/Lon", justify="right")
    for location in locations:
        coords = (
            f"{location.lat:.2f}, {location.lon:.2f}"
            if location.lat is not None and location.lon is not None
            else "-"
        )
        table.add_row(location.name, location.region or "-", location.country, coords)
    return table


def _forecast_table(forecast: Forecast) -> Table:
    table = Table(title=forecast.location_name, show_header=True, header_style="bold")
    table.add_column("Date")
    table.add_column("Avg °C", justify="right")
    table.add_column("Condition")
    for day in forecast.days:
        table.add_row(day.date, f"{day.avg_temp_c:.1f}", day.condition_text)
    return table


def render_state(state: ResultState[T], render: Callable[[T], Table]) -> None:
    """Print one envelope."""
    if isinstance(state, Loading):
        if state.data is None:
            console.print("[dim]Loading...[/dim]")
        else:
            console.print("[dim]Loading (showing cached data)...[/dim]")
            console.print(render(state.data))
    elif isinstance(state, Success):
        console.print("[green]Up to date[/green]")
        console.print(render(state.data))
    elif isinstance(state, Failure):
        console.print(f"[red]Error ({state.error.kind.value}):[/red] {state.error.describe()}")


async def _consume(
    factory: WeatherRepositoryFactory,
    stream: AsyncIterator[ResultState[T]],
    render: Callable[[T], Table],
) -> bool:
    ok = True
    async for state in stream:
        render_state(state, render)
        ok = not isinstance(state, Failure)
    await factory.wait_for_refreshes()
    return ok


async def _search(query: str) -> bool:
    async with WeatherRepositoryFactory(get_settings()) as factory:
        stream = SearchLocationsQuery.from_factory(factory).execute(query)
        return await _consume(factory, stream, _location_table)


async def _forecast(location: str, days: int) -> bool:
    async with WeatherRepositoryFactory(get_settings()) as factory:
        stream = GetForecastQuery.from_factory(factory).execute(location, days)
        return await _consume(factory, stream, _forecast_table)


@app.command("search")
def search(query: str = typer.Argument(..., help="Location name or prefix")) -> None:
    """Search locations, showing cached matches first."""
    if not asyncio.run(_search(query)):
        raise typer.Exit(code=1)


@app.command("forecast")
def forecast(
    location: str = typer.Argument(..., help="Location name"),
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Number of forecast days"),
) -> None:
    """Show the daily forecast, showing the cached forecast first."""
    if days is None:
        days = get_settings().forecast_days
    try:
        ok = asyncio.run(_forecast(location, days))
    except DomainException as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=2) from e
    if not ok:
        raise typer.Exit(code=1)


async def _run_on_engine(action: Callable[[AsyncEngine], Awaitable[None]]) -> None:
    settings = get_settings()
    engine = create_engine_for_url(settings.database_url, echo=settings.database_echo)
    try:
        await action(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def db_init() -> None:
    """Create the cache tables (idempotent)."""
    asyncio.run(_run_on_engine(create_tables))
    console.print("[green]Cache database ready[/green]")


@db_app.command("reset")
def db_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop and recreate the cache tables."""
    if not force:
        typer.confirm("This will delete all cached locations and forecasts. Continue?", abort=True)
    asyncio.run(_run_on_engine(reset_tables))
    console.print("[green]Cache database recreated[/green]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
