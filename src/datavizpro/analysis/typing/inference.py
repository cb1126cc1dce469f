"""Column type inference by scanning cell values.

Each typed rule (boolean, date, numeric) starts out as a candidate for
every column. The first non-null value that fails a rule's test drops the
rule for that column for good; scanning continues over all rows. The
surviving rule that comes first in the priority order decides the type.
A column with no surviving rule is a string column, and a column with no
non-null values at all is unknown.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from datavizpro.analysis.inputs import check_column_names, check_rows
from datavizpro.analysis.typing.patterns import ValuePatterns, load_value_patterns
from datavizpro.analysis.typing.values import (
    is_boolean_like,
    is_missing,
    parse_date,
    parse_number,
)
from datavizpro.core.config import AnalysisConfig
from datavizpro.core.models.base import CellValue, ColumnType, Row


@dataclass(frozen=True)
class TypeRule:
    """A column type together with the test every non-null value must pass."""

    column_type: ColumnType
    test: Callable[[CellValue], bool]


def build_type_rules(
    priority: Sequence[ColumnType],
    patterns: ValuePatterns,
) -> list[TypeRule]:
    """Build the ordered rule list for a type priority.

    Args:
        priority: Typed column types, highest priority first
        patterns: Value patterns for the boolean and date tests

    Returns:
        List of TypeRule in priority order
    """
    tests: dict[ColumnType, Callable[[CellValue], bool]] = {
        ColumnType.BOOLEAN: lambda v: is_boolean_like(v, patterns),
        ColumnType.DATE: lambda v: parse_date(v, patterns) is not None,
        ColumnType.NUMERIC: lambda v: parse_number(v) is not None,
    }
    return [TypeRule(column_type=t, test=tests[t]) for t in priority]


def infer_column_type(
    rows: Sequence[Row],
    column_name: str,
    rules: Sequence[TypeRule],
) -> ColumnType:
    """Infer the type of one column.

    Args:
        rows: Records to scan; a missing key reads as null
        column_name: Column to classify
        rules: Typed rules in priority order

    Returns:
        The inferred ColumnType
    """
    if not column_name.strip():
        return ColumnType.UNKNOWN

    candidates = list(rules)
    non_null = 0

    for row in rows:
        value = row.get(column_name)
        if is_missing(value):
            continue
        non_null += 1
        if candidates:
            candidates = [rule for rule in candidates if rule.test(value)]

    if non_null == 0:
        return ColumnType.UNKNOWN
    if candidates:
        return candidates[0].column_type
    return ColumnType.STRING


def infer_types(
    rows: Sequence[Row],
    column_names: Sequence[str],
    config: AnalysisConfig | None = None,
) -> dict[str, ColumnType]:
    """Classify every listed column.

    The column list is authoritative: names absent from every row are
    unknown, and keys present in rows but not listed are ignored.

    Args:
        rows: Parsed records
        column_names: Ordered column names
        config: Analysis configuration (defaults apply when None)

    Returns:
        Mapping of column name to ColumnType, in column_names order
    """
    check_rows(rows)
    check_column_names(column_names)
    config = config or AnalysisConfig()

    patterns = load_value_patterns(config.patterns_path)
    rules = build_type_rules(config.type_priority, patterns)

    column_types: dict[str, ColumnType] = {}
    for name in column_names:
        if name not in column_types:
            column_types[name] = infer_column_type(rows, name, rules)
    return column_types
