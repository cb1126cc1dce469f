"""CLI for datavizpro.

Usage:
    datavizpro analyze /path/to/data.csv
    datavizpro analyze /path/to/data.json --json

Environment:
    Loads .env file from current directory if present.
    DATAVIZPRO_* variables override analysis and logging settings.
"""

from datavizpro.cli.main import app, main

__all__ = ["app", "main"]
