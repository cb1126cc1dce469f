"""Core data models used across all modules.

This module defines the fundamental types that form the contract between
the analysis stages. All inter-stage communication uses these types.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel

# Generic type for Result
T = TypeVar("T")

# A single cell: the closed set of scalar shapes a parsed record may hold.
# A key missing from a row is read as None.
CellValue = str | int | float | bool | None
Row = Mapping[str, CellValue]


class Result(BaseModel, Generic[T]):
    """Result type for operations that can fail.

    Use this instead of exceptions for expected failures.
    Exceptions are reserved for unexpected/programming errors.
    """

    success: bool
    value: T | None = None
    error: str | None = None

    @classmethod
    def ok(cls, value: T) -> Result[T]:
        """Create a successful result."""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str) -> Result[T]:
        """Create a failed result."""
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Get the value or raise if failed."""
        if not self.success:
            raise ValueError(f"Result failed: {self.error}")
        assert self.value is not None
        return self.value


# === Enums ===


class ColumnType(str, Enum):
    """Inferred semantic type of a column."""

    NUMERIC = "numeric"
    DATE = "date"
    BOOLEAN = "boolean"
    STRING = "string"
    UNKNOWN = "unknown"

    @property
    def is_categorical(self) -> bool:
        """String and boolean columns are grouped as categories."""
        return self in (ColumnType.STRING, ColumnType.BOOLEAN)


class CorrelationStrength(str, Enum):
    """Qualitative strength of a correlation coefficient."""

    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"


class CorrelationDirection(str, Enum):
    """Sign of a correlation coefficient."""

    POSITIVE = "positive"
    NEGATIVE = "negative"


class ChartType(str, Enum):
    """Chart types the recommender can suggest."""

    HISTOGRAM = "histogram"
    BOXPLOT = "boxplot"
    PIE = "pie"
    BAR = "bar"
    LINE = "line"
    GROUPED_BAR = "groupedBar"
    SCATTER = "scatter"


# === Errors ===


class InvalidDatasetError(ValueError):
    """Structurally invalid input handed to the analysis engine."""

    def __init__(self, argument: str, message: str):
        self.argument = argument
        self.message = message
        super().__init__(f"{argument}: {message}")
