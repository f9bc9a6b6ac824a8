"""Typer CLI entrypoint for flparser."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.table import Table

from .config import SORT_OPTIONS, RunConfig, ScraperSettings, load_run_config, save_run_config
from .engine import QueryBuilder
from .engine.exporter import known_formats
from .errors import FetchError
from .logging_conf import configure_logging
from .orchestrator import Orchestrator

app = typer.Typer(
    help="Scrape projects from Freelancer.com and export them to Markdown, CSV or JSON.",
    no_args_is_help=True,
    rich_markup_mode=None,
)

console = Console()


@dataclass
class AppState:
    verbose: bool = False
    log_file: Path | None = None


ConfigOption = Annotated[
    Optional[Path],
    typer.Option(
        "--config",
        envvar="FLPARSER_CONFIG",
        help="YAML/JSON file with `settings` and `filters` sections.",
        show_default=False,
    ),
]
TypesOption = Annotated[
    Optional[str],
    typer.Option("--types", help="Project types: 'hourly,fixed', 'hourly' or 'fixed'.", show_default=False),
]
CountriesOption = Annotated[
    Optional[str],
    typer.Option("--clientCountries", help="Comma separated client country codes.", show_default=False),
]
FixedMinOption = Annotated[Optional[int], typer.Option("--fixedMin", help="Minimum fixed price.", show_default=False)]
FixedMaxOption = Annotated[Optional[int], typer.Option("--fixedMax", help="Maximum fixed price.", show_default=False)]
HourlyMinOption = Annotated[Optional[int], typer.Option("--hourlyMin", help="Minimum hourly rate.", show_default=False)]
HourlyMaxOption = Annotated[Optional[int], typer.Option("--hourlyMax", help="Maximum hourly rate.", show_default=False)]
SkillsOption = Annotated[
    Optional[str],
    typer.Option("--skills", help="Skill IDs comma separated, or 'all'.", show_default=False),
]
SortOption = Annotated[
    Optional[str],
    typer.Option("--sort", help=f"Sort: {', '.join(SORT_OPTIONS)}.", show_default=False),
]
QueryOption = Annotated[Optional[str], typer.Option("--q", help="Search query text.", show_default=False)]
PageOption = Annotated[Optional[int], typer.Option("--page", help="Page number.", show_default=False)]


def build_orchestrator(settings: ScraperSettings) -> Orchestrator:
    return Orchestrator(settings)


def _get_state(ctx: typer.Context) -> AppState:
    state = ctx.obj
    if not isinstance(state, AppState):
        state = AppState()
        ctx.obj = state
    return state


def _resolve_config(config_path: Path | None, **filter_overrides: object) -> RunConfig:
    try:
        run_config = load_run_config(config_path)
        filters = run_config.filters.with_overrides(**filter_overrides)
    except FileNotFoundError as exc:
        console.print(str(exc), style="red")
        raise typer.Exit(code=1)
    except (ValidationError, ValueError) as exc:
        console.print(f"Invalid configuration: {exc}", style="red")
        raise typer.Exit(code=1)
    return RunConfig(settings=run_config.settings, filters=filters)


def _render_params_table(params: dict[str, str]) -> Table:
    table = Table(title="Search Parameters", box=box.SIMPLE_HEAD)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green")
    for key, value in params.items():
        table.add_row(key, value)
    return table


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write JSON logs to this file."),
) -> None:
    ctx.obj = AppState(verbose=verbose, log_file=log_file)


@app.command("run", help="Fetch one search results page and export the projects.")
def run(
    ctx: typer.Context,
    types: TypesOption = None,
    client_countries: CountriesOption = None,
    fixed_min: FixedMinOption = None,
    fixed_max: FixedMaxOption = None,
    hourly_min: HourlyMinOption = None,
    hourly_max: HourlyMaxOption = None,
    skills: SkillsOption = None,
    sort: SortOption = None,
    query: QueryOption = None,
    page: PageOption = None,
    output: Annotated[
        Optional[str],
        typer.Option("--output", "-O", help="Output filename (e.g. results.json).", show_default=False),
    ] = None,
    extension: Annotated[
        Optional[str],
        typer.Option("--extension", "-X", help=f"Output format when -O has no extension ({', '.join(known_formats())}).", show_default=False),
    ] = None,
    config: ConfigOption = None,
) -> None:
    state = _get_state(ctx)
    configure_logging(verbose=state.verbose, log_file=state.log_file)
    run_config = _resolve_config(
        config,
        types=types,
        client_countries=client_countries,
        fixed_price_min=fixed_min,
        fixed_price_max=fixed_max,
        hourly_rate_min=hourly_min,
        hourly_rate_max=hourly_max,
        skills=skills,
        sort=sort,
        query=query,
        page=page,
    )

    orchestrator = build_orchestrator(run_config.settings)
    console.print("Fetching Freelancer.com...")
    try:
        summary = orchestrator.run(run_config.filters, filename=output, fmt=extension)
    except FetchError as exc:
        console.print(f"Error scraping: {exc}", style="red")
        raise typer.Exit(code=1)

    console.print(f"Found {summary.record_count} projects.")
    for path, _fmt in summary.written:
        console.print(f"Generated: {path}", style="green")
    for path, fmt, error in summary.failures:
        console.print(f"Skipped {fmt} output ({path}): {error.reason}", style="yellow")


@app.command("url", help="Print the search URL and parameters without fetching.")
def url(
    types: TypesOption = None,
    client_countries: CountriesOption = None,
    fixed_min: FixedMinOption = None,
    fixed_max: FixedMaxOption = None,
    hourly_min: HourlyMinOption = None,
    hourly_max: HourlyMaxOption = None,
    skills: SkillsOption = None,
    sort: SortOption = None,
    query: QueryOption = None,
    page: PageOption = None,
    config: ConfigOption = None,
    save: Annotated[
        Optional[Path],
        typer.Option("--save", help="Write the resolved configuration as a reusable preset.", show_default=False),
    ] = None,
) -> None:
    run_config = _resolve_config(
        config,
        types=types,
        client_countries=client_countries,
        fixed_price_min=fixed_min,
        fixed_price_max=fixed_max,
        hourly_rate_min=hourly_min,
        hourly_rate_max=hourly_max,
        skills=skills,
        sort=sort,
        query=query,
        page=page,
    )
    built = QueryBuilder(run_config.settings).build(run_config.filters)
    console.print(built.url, soft_wrap=True, markup=False)
    console.print(_render_params_table(dict(built.params)))
    if save is not None:
        try:
            path = save_run_config(save, run_config)
        except ValueError as exc:
            console.print(str(exc), style="red")
            raise typer.Exit(code=1)
        console.print(f"Preset saved: {path}", style="green")


def cli() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    cli()
