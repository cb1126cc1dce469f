"""File loaders - turn CSV and JSON files into records for analysis.

CSV files are untyped: every value is read as text (VARCHAR-first) and
type inference decides later. Empty CSV cells become None.

JSON files may hold:
- a top-level array of objects
- an object whose first non-empty array property holds the records
- a single object, treated as one record
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import duckdb

from datavizpro.core.logging import get_logger
from datavizpro.core.models.base import Result
from datavizpro.sources.models import Dataset

logger = get_logger(__name__)

SUPPORTED_EXTENSIONS = (".csv", ".json")


def _load_csv(path: Path, sample_rows: int) -> Result[Dataset]:
    conn = duckdb.connect(":memory:")
    try:
        quoted = str(path).replace("'", "''")
        limit = f" LIMIT {sample_rows}" if sample_rows > 0 else ""
        cursor = conn.execute(
            f"SELECT * FROM read_csv('{quoted}', header = true, all_varchar = true){limit}"
        )
        columns = [desc[0] for desc in cursor.description]
        rows = [dict(zip(columns, record, strict=True)) for record in cursor.fetchall()]
    except duckdb.Error as e:
        return Result.fail(f"Failed to read CSV {path.name}: {e}")
    finally:
        conn.close()

    return Result.ok(Dataset(name=path.stem, source_format="csv", columns=columns, rows=rows))


def _find_records(data: Any) -> list[Any]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for value in data.values():
            if isinstance(value, list) and value:
                return value
    return [data]


def _flatten_cell(value: Any) -> Any:
    # Nested structures are kept as their JSON text
    if isinstance(value, dict | list):
        return json.dumps(value, sort_keys=True)
    return value


def _load_json(path: Path, sample_rows: int) -> Result[Dataset]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        return Result.fail(f"Failed to read JSON {path.name}: {e}")
    except json.JSONDecodeError as e:
        return Result.fail(f"Invalid JSON in {path.name}: {e}")

    records = _find_records(data)
    if sample_rows > 0:
        records = records[:sample_rows]

    columns: dict[str, None] = {}
    rows = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            return Result.fail(
                f"JSON record {index} in {path.name} is {type(record).__name__}, expected an object"
            )
        for key in record:
            columns.setdefault(str(key), None)
        rows.append({str(k): _flatten_cell(v) for k, v in record.items()})

    return Result.ok(
        Dataset(name=path.stem, source_format="json", columns=list(columns), rows=rows)
    )


def load_dataset(path: Path | str, sample_rows: int = 0) -> Result[Dataset]:
    """Load a CSV or JSON file into a Dataset.

    Args:
        path: File to load; the extension selects the format
        sample_rows: Keep only the first N records (0 = all)

    Returns:
        Result containing the Dataset
    """
    path = Path(path)
    if not path.is_file():
        return Result.fail(f"File not found: {path}")

    extension = path.suffix.lower()
    if extension not in SUPPORTED_EXTENSIONS:
        return Result.fail(f"Unsupported file format: {extension or '(none)'}")

    if extension == ".csv":
        result = _load_csv(path, sample_rows)
    else:
        result = _load_json(path, sample_rows)

    if result.success:
        dataset = result.unwrap()
        logger.info(
            "dataset_loaded",
            path=str(path),
            format=dataset.source_format,
            rows=dataset.row_count,
            columns=len(dataset.columns),
        )
    else:
        logger.warning("dataset_load_failed", path=str(path), error=result.error)
    return result
