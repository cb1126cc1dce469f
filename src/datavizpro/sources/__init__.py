"""Data sources: CSV and JSON file loading."""

from datavizpro.sources.loader import SUPPORTED_EXTENSIONS, load_dataset
from datavizpro.sources.models import Dataset

__all__ = [
    "load_dataset",
    "Dataset",
    "SUPPORTED_EXTENSIONS",
]
