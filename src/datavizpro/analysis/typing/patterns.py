"""Value pattern configuration for type inference.

Patterns are defined in config/patterns.yaml, bundled with the package.

IMPORTANT: Type inference is based ONLY on cell values, NOT column names.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

DEFAULT_PATTERNS_PATH = Path(__file__).resolve().parent.parent.parent / "config" / "patterns.yaml"


class PatternConfigError(Exception):
    """Error loading the value pattern configuration."""

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


@dataclass(frozen=True)
class ValuePatterns:
    """Tokens and layouts the value tests accept."""

    boolean_tokens: frozenset[str]
    date_formats: tuple[str, ...]

    @classmethod
    def from_dict(
        cls, config_dict: dict[str, Any], path: Path = DEFAULT_PATTERNS_PATH
    ) -> ValuePatterns:
        """Build patterns from a parsed YAML mapping.

        Args:
            config_dict: Mapping with ``boolean_tokens`` and ``date_formats`` lists
            path: Source path, used in error messages

        Returns:
            ValuePatterns instance
        """
        tokens = config_dict.get("boolean_tokens", [])
        formats = config_dict.get("date_formats", [])
        if not isinstance(tokens, list) or not isinstance(formats, list):
            raise PatternConfigError(path, "boolean_tokens and date_formats must be lists")

        return cls(
            boolean_tokens=frozenset(str(t).strip().lower() for t in tokens),
            date_formats=tuple(str(f) for f in formats),
        )


@lru_cache(maxsize=8)
def _load_cached(path: Path) -> ValuePatterns:
    try:
        with open(path) as f:
            config_dict = yaml.safe_load(f)
    except OSError as e:
        raise PatternConfigError(path, f"cannot read pattern file ({e})") from e
    except yaml.YAMLError as e:
        raise PatternConfigError(path, f"invalid YAML ({e})") from e

    if not isinstance(config_dict, dict):
        raise PatternConfigError(path, "pattern file must contain a mapping")
    return ValuePatterns.from_dict(config_dict, path)


def load_value_patterns(config_path: Path | None = None) -> ValuePatterns:
    """Load value patterns from YAML.

    Args:
        config_path: Optional path to a pattern file. If None, uses the bundled default.

    Returns:
        ValuePatterns instance
    """
    return _load_cached((config_path or DEFAULT_PATTERNS_PATH).resolve())
