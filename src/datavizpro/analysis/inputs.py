"""Structural checks on engine input.

Only the SHAPE of the input is checked here. Cell content is never
rejected; the stages tolerate any value by skipping it.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from datavizpro.core.models.base import ColumnType, InvalidDatasetError, Row


def _is_list_shaped(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes)


def check_rows(rows: Any) -> Sequence[Row]:
    """Ensure rows is a list of mappings."""
    if not _is_list_shaped(rows):
        raise InvalidDatasetError("rows", f"expected a list of records, got {type(rows).__name__}")
    for index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            raise InvalidDatasetError(
                "rows", f"record {index} is {type(row).__name__}, expected a mapping"
            )
    return rows


def check_column_names(column_names: Any) -> Sequence[str]:
    """Ensure column_names is a list of strings."""
    if not _is_list_shaped(column_names):
        raise InvalidDatasetError(
            "column_names", f"expected a list of names, got {type(column_names).__name__}"
        )
    for index, name in enumerate(column_names):
        if not isinstance(name, str):
            raise InvalidDatasetError(
                "column_names", f"entry {index} is {type(name).__name__}, expected str"
            )
    return column_names


def check_column_types(column_types: Any) -> Mapping[str, ColumnType]:
    """Ensure column_types maps names to ColumnType values."""
    if not isinstance(column_types, Mapping):
        raise InvalidDatasetError(
            "column_types", f"expected a mapping, got {type(column_types).__name__}"
        )
    for name, column_type in column_types.items():
        if not isinstance(column_type, ColumnType):
            raise InvalidDatasetError(
                "column_types", f"{name!r} has type {column_type!r}, expected a ColumnType"
            )
    return column_types
