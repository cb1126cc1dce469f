"""Permissive value parsers shared by every analysis stage.

Each function is pure and never raises for cell content: a value that
does not fit simply yields None / False.
"""

from __future__ import annotations

import math
from datetime import datetime

from datavizpro.analysis.typing.patterns import ValuePatterns
from datavizpro.core.models.base import CellValue


def is_missing(value: CellValue) -> bool:
    """True for null, blank strings and float NaN."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, float):
        return math.isnan(value)
    return False


def cell_text(value: CellValue) -> str:
    """String form of a cell, stripped of surrounding whitespace.

    Integral floats print without the fraction, so 1.0 reads as "1".
    Integers too long to print give an empty string.
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    try:
        return str(value).strip()
    except ValueError:
        return ""


def parse_number(value: CellValue) -> float | None:
    """Parse a cell to a finite float.

    Booleans are not numbers. Strings may carry surrounding whitespace;
    digit-group underscores, infinities and NaN are rejected, and so are
    integers beyond the float range.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, int | float):
            number = float(value)
        else:
            text = cell_text(value)
            if not text or "_" in text:
                return None
            number = float(text)
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def is_boolean_like(value: CellValue, patterns: ValuePatterns) -> bool:
    """True when the lower-cased string form is a boolean token."""
    if value is None:
        return False
    return cell_text(value).lower() in patterns.boolean_tokens


def parse_date(value: CellValue, patterns: ValuePatterns) -> datetime | None:
    """Parse a cell as a calendar date or timestamp.

    ISO-8601 is tried first, then each configured free-form layout.
    Anything that parses as a number (plain digit runs included) is not a date.
    """
    if value is None or isinstance(value, bool) or parse_number(value) is not None:
        return None

    text = cell_text(value)
    if not text:
        return None

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    for fmt in patterns.date_formats:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None
