"""Typer CLI for building records and probing their aliasing."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from review_records.analysis import (
    DEFAULT_LATE_REVIEW,
    DEFAULT_SEED,
    AliasingReport,
    ConstructionStrategy,
    probe,
    run_all_probes,
)
from review_records.domain import (
    FlexibleRecordBuilder,
    InvalidArgumentError,
    StrictRecordBuilder,
)

from .deps import configure_cli, get_settings

app = typer.Typer(help="Review records command-line interface")


@app.callback()
def main() -> None:
    configure_cli()


def _parse_strategy(value: str) -> ConstructionStrategy:
    try:
        return ConstructionStrategy(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(strategy.value for strategy in ConstructionStrategy)
        raise typer.BadParameter(f"strategy must be one of: {choices}") from exc


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def _render_table(reports: list[AliasingReport]) -> Table:
    table = Table(title="Review aliasing by construction strategy")
    table.add_column("Strategy", style="cyan")
    table.add_column("Container")
    table.add_column("Direct write")
    table.add_column("Sees source edits")
    table.add_column("Reviews after")
    for report in reports:
        table.add_row(
            report.strategy.value,
            report.container_type,
            _yes_no(report.direct_write_allowed),
            _yes_no(report.reflects_source_mutation),
            ", ".join(report.reviews_after) or "[dim]-[/dim]",
        )
    return table


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_settings()
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Log Level:\t" + settings.log_level)
    typer.echo("Demo Title:\t" + settings.demo_title)
    typer.echo("Rich Output:\t" + _yes_no(settings.rich_output))


@app.command("probe")
def probe_command(
    strategy: str | None = typer.Option(None, help="Probe a single construction strategy"),
    seed: list[str] = typer.Option(list(DEFAULT_SEED), "--seed", help="Initial reviews"),
    late: str = typer.Option(DEFAULT_LATE_REVIEW, help="Review added after construction"),
) -> None:
    """Show which strategies share storage with their source."""

    settings = get_settings()
    if strategy is not None:
        reports = [
            probe(_parse_strategy(strategy), title=settings.demo_title, seed=seed, late_review=late)
        ]
    else:
        reports = run_all_probes(title=settings.demo_title, seed=seed, late_review=late)

    if not settings.rich_output:
        for report in reports:
            typer.echo(
                f"{report.strategy.value}\t{report.container_type}\t"
                f"write={_yes_no(report.direct_write_allowed)}\t"
                f"aliased={_yes_no(report.reflects_source_mutation)}\t"
                f"{list(report.reviews_after)}"
            )
        return
    Console().print(_render_table(reports))


@app.command("build")
def build_record(
    title: str = typer.Option(..., help="Record title"),
    review: list[str] = typer.Option([], "--review", help="Review text; repeat for more"),
    strict: bool = typer.Option(True, "--strict/--flexible", help="Record variant to build"),
) -> None:
    """Build a record from the command line and print it."""

    try:
        builder = StrictRecordBuilder(title) if strict else FlexibleRecordBuilder(title)
    except InvalidArgumentError as exc:
        typer.echo(f"Invalid title: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    for text in review:
        builder.add_review(text)
    record = builder.build()
    typer.echo(f"{type(record).__name__}\t{record.title}")
    for text in record.reviews or ():
        typer.echo(f"- {text}")
