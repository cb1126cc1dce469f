"""Column type inference.

Classifies each column as numeric, date, boolean, string or unknown
from its values, using the shared permissive parsers in ``values``.
"""

from datavizpro.analysis.typing.inference import (
    TypeRule,
    build_type_rules,
    infer_column_type,
    infer_types,
)
from datavizpro.analysis.typing.patterns import (
    PatternConfigError,
    ValuePatterns,
    load_value_patterns,
)
from datavizpro.analysis.typing.values import (
    cell_text,
    is_boolean_like,
    is_missing,
    parse_date,
    parse_number,
)

__all__ = [
    # Main entry point
    "infer_types",
    "infer_column_type",
    "build_type_rules",
    "TypeRule",
    # Patterns
    "ValuePatterns",
    "PatternConfigError",
    "load_value_patterns",
    # Value parsers
    "cell_text",
    "is_missing",
    "parse_number",
    "parse_date",
    "is_boolean_like",
]
