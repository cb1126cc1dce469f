"""Shared CLI utilities and constants."""

from __future__ import annotations

from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console

from datavizpro.core.logging import configure_logging

# Load .env file from current directory (DATAVIZPRO_* settings)
load_dotenv()

# Shared console instance
console = Console()

JsonFlag = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Output the full report as JSON for scripting",
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-v=INFO, -vv=DEBUG)",
    ),
]

LogFormatOption = Annotated[
    str | None,
    typer.Option(
        "--log-format",
        help="Log output format (console or json)",
    ),
]


def setup_logging(
    verbosity: int = 0,
    log_format: str = "console",
    default_level: str = "WARNING",
) -> None:
    """Configure structured logging based on verbosity level.

    Args:
        verbosity: 0=default_level, 1=INFO, 2+=DEBUG
        log_format: "console" for development, "json" for services
        default_level: Level used when no -v flag is given
    """
    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity >= 1:
        level = "INFO"
    else:
        level = default_level

    configure_logging(
        log_level=level,
        log_format=log_format,
        show_timestamps=verbosity >= 1,
        color=log_format == "console",
    )
