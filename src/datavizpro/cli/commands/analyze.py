"""Analyze command - profile a CSV/JSON file and recommend charts."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table as RichTable

from datavizpro.analysis import AnalysisReport, analyze as run_analysis
from datavizpro.analysis.typing import PatternConfigError
from datavizpro.cli.common import JsonFlag, LogFormatOption, VerboseOption, console, setup_logging
from datavizpro.core.config import get_settings
from datavizpro.core.logging import log_context
from datavizpro.sources import load_dataset


def _fmt(value: float | None) -> str:
    return "-" if value is None else f"{value:,.4g}"


def analyze(
    source: Annotated[
        Path,
        typer.Argument(
            help="Path to a CSV or JSON file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    top: Annotated[
        int,
        typer.Option(
            "--top",
            "-t",
            min=0,
            help="Number of chart recommendations to show",
        ),
    ] = 10,
    sample_rows: Annotated[
        int | None,
        typer.Option(
            "--sample-rows",
            "-s",
            min=0,
            help="Analyze only the first N rows (0 = all; default from DATAVIZPRO_SAMPLE_ROWS)",
        ),
    ] = None,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
    log_format: LogFormatOption = None,
) -> None:
    """Profile a dataset and recommend charts.

    Examples:

        datavizpro analyze sales.csv

        datavizpro analyze sales.json --top 5

        datavizpro analyze sales.csv --json > report.json
    """
    settings = get_settings()
    setup_logging(
        verbosity=verbose,
        log_format=log_format or settings.log_format,
        default_level=settings.log_level,
    )

    with log_context(dataset=source.name):
        if sample_rows is None:
            sample_rows = settings.sample_rows
        loaded = load_dataset(source, sample_rows)
        if not loaded.success:
            console.print(f"[red]Error: {escape(loaded.error or '')}[/red]")
            raise typer.Exit(1)
        dataset = loaded.unwrap()

        try:
            report = run_analysis(dataset.rows, dataset.columns, settings.to_analysis_config())
        except (PatternConfigError, ValidationError) as e:
            console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
            raise typer.Exit(1) from e

    if json_output:
        typer.echo(json.dumps(report.to_dict(), indent=2))
        return

    console.print(f"\n[bold]Dataset[/bold]: {dataset.name} ({dataset.source_format})")
    console.print(f"Rows: {dataset.row_count:,}  Columns: {len(dataset.columns)}")
    _print_report(report, top)


def _print_report(report: AnalysisReport, top: int) -> None:
    types_table = RichTable(title="Column Types", show_header=True, header_style="bold")
    types_table.add_column("Column")
    types_table.add_column("Type")
    for name, column_type in report.column_types.items():
        types_table.add_row(name or "(blank)", column_type.value)
    console.print(types_table)

    if report.statistics:
        stats_table = RichTable(title="Statistics", show_header=True, header_style="bold")
        for heading in ("Column", "Min", "Max", "Mean", "Median", "Count"):
            stats_table.add_column(heading, justify="left" if heading == "Column" else "right")
        for name, stats in report.statistics.items():
            stats_table.add_row(
                name,
                _fmt(stats.min),
                _fmt(stats.max),
                _fmt(stats.mean),
                _fmt(stats.median),
                str(stats.count),
            )
        console.print(stats_table)

    if report.correlations:
        corr_table = RichTable(title="Correlations", show_header=True, header_style="bold")
        for heading in ("Columns", "r", "Strength", "Direction", "n"):
            corr_table.add_column(heading)
        for corr in report.correlations:
            corr_table.add_row(
                f"{corr.column_a} / {corr.column_b}",
                f"{corr.coefficient:.2f}",
                corr.strength.value,
                corr.direction.value,
                str(corr.sample_size),
            )
        console.print(corr_table)

    recommendations = report.top_recommendations(top)
    if not recommendations:
        console.print("[yellow]No chart recommendations for this dataset.[/yellow]")
        return

    chart_table = RichTable(title="Recommended Charts", show_header=True, header_style="bold")
    for heading in ("#", "Chart", "Columns", "Priority", "Reason"):
        chart_table.add_column(heading)
    for rank, rec in enumerate(recommendations, start=1):
        chart_table.add_row(
            str(rank),
            rec.chart_type.value,
            ", ".join(rec.columns),
            f"{rec.priority:.2f}",
            rec.reason,
        )
    console.print(chart_table)
