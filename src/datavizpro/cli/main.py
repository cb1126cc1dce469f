"""Main CLI application entry point."""

from __future__ import annotations

import typer

from datavizpro.cli.commands import analyze

app = typer.Typer(
    name="datavizpro",
    help="DataVizPro - profile tabular datasets and recommend charts.",
    no_args_is_help=True,
)

# Register commands
app.command()(analyze.analyze)


@app.callback()
def _callback() -> None:
    """Keep subcommand syntax even with a single command."""


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
