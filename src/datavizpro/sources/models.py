"""Source Pydantic Models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class Dataset(BaseModel):
    """Parsed tabular data ready for analysis."""

    name: str
    source_format: Literal["csv", "json"]
    columns: list[str]
    rows: list[dict[str, Any]] = Field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)
