"""Analyze command: project metrics for a result document."""

import json
from pathlib import Path
from typing import Optional

import numpy as np
import typer
from rich.markup import escape
from rich.table import Table

from ..config import MetricsConfig, load_config
from ..engine import ProjectMetricsEngine
from ..exceptions import ProjectMetricsError
from ..logging_config import setup_logging
from ..metrics.averages import AVERAGED_METRICS
from ..models import ProjectResult
from . import app
from ._common import console, format_percent, read_result_document

_FORMATS = ("rich", "json")


@app.command()
def analyze(
    results: Path = typer.Argument(
        ...,
        help="JSON file with module reports (a list, or an object with 'reports')",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    no_core_size: Optional[bool] = typer.Option(
        None,
        "--no-core-size/--core-size",
        help="Skip visibility matrix, change cost and core size",
    ),
    path_style: Optional[str] = typer.Option(
        None,
        "--path-style",
        help="Path convention for module paths: native, posix or windows",
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (human-readable) or json (result document)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the JSON result document to this file",
        dir_okay=False,
    ),
    matrices: Optional[bool] = typer.Option(
        None,
        "--matrices/--no-matrices",
        help="Show adjacency and visibility matrices in rich output",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all but ERROR logging",
    ),
):
    """
    Compute dependency and complexity metrics for a project.

    [bold cyan]Examples:[/bold cyan]

      project-metrics analyze results.json

      project-metrics analyze results.json --format json -o metrics.json

      project-metrics analyze results.json --no-core-size --path-style posix
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    if fmt not in _FORMATS:
        console.print(f"[red]Error:[/red] unknown format '{escape(fmt)}' (use {' or '.join(_FORMATS)})")
        raise typer.Exit(1)

    try:
        settings = load_config(
            config_file=config,
            no_core_size=no_core_size,
            path_style=path_style,
            show_matrices=matrices,
        )
        result = read_result_document(results)
        ProjectMetricsEngine(settings).run(result)
    except ProjectMetricsError as e:
        logger.debug("Analysis failed", exc_info=True)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    document = json.dumps(result.to_dict(), indent=2)
    if output is not None:
        try:
            output.write_text(document + "\n", encoding="utf-8")
        except OSError as e:
            logger.debug("Writing %s failed", output, exc_info=True)
            console.print(f"[red]Error:[/red] cannot write {escape(str(output))}: {escape(str(e))}")
            raise typer.Exit(1) from e
        if fmt == "rich" and not quiet:
            console.print(f"[dim]Result document written to {escape(str(output))}[/dim]")

    if fmt == "json":
        if output is None:
            typer.echo(document)
        return

    _print_summary(result, settings)


def _print_summary(result: ProjectResult, settings: MetricsConfig) -> None:
    console.print()
    console.print("[bold cyan]PROJECT METRICS[/bold cyan]")
    console.print()

    table = Table(show_header=True, header_style="bold")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Modules", str(len(result.reports)))
    table.add_row("First-order density", format_percent(result.first_order_density))
    table.add_row("Change cost", format_percent(result.change_cost))
    table.add_row("Core size", format_percent(result.core_size))
    for name, _ in AVERAGED_METRICS:
        value = getattr(result, name)
        table.add_row(f"Average {name}", "-" if value is None else f"{value:.2f}")
    console.print(table)

    if settings.show_matrices and result.reports:
        console.print()
        for index, report in enumerate(result.reports):
            console.print(f"  [dim]{index:>3}[/dim]  {escape(report.path)}")
        _print_matrix("Adjacency matrix", result.adjacency_matrix)
        _print_matrix("Visibility matrix", result.visibility_matrix)


def _print_matrix(title: str, matrix: Optional[np.ndarray]) -> None:
    if matrix is None:
        return
    table = Table(title=title, show_header=True, header_style="dim")
    table.add_column("")
    for column in range(matrix.shape[1]):
        table.add_column(str(column), justify="center")
    for row_index, row in enumerate(matrix):
        cells = ["[bold green]1[/bold green]" if value else "[dim]·[/dim]" for value in row]
        table.add_row(str(row_index), *cells)
    console.print()
    console.print(table)
