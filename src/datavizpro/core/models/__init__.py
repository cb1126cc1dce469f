"""Core models shared by all analysis stages."""

from datavizpro.core.models.base import (
    CellValue,
    ChartType,
    ColumnType,
    CorrelationDirection,
    CorrelationStrength,
    InvalidDatasetError,
    Result,
    Row,
)

__all__ = [
    "CellValue",
    "ChartType",
    "ColumnType",
    "CorrelationDirection",
    "CorrelationStrength",
    "InvalidDatasetError",
    "Result",
    "Row",
]
