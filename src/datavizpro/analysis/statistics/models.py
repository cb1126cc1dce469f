"""Statistics Pydantic Models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ColumnStatistics(BaseModel):
    """Descriptive statistics of a numeric column.

    All fields are None when no value in the column parses as a number.
    """

    model_config = ConfigDict(frozen=True)

    min: float | None = None
    max: float | None = None
    mean: float | None = None
    median: float | None = None
    count: int = 0

    @property
    def is_empty(self) -> bool:
        return self.count == 0
