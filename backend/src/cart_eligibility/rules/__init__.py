"""Rule evaluation primitives: path extraction, coercion, operator conditions."""

from .paths import MISSING, extract_value, is_sequence
from .coercion import loose_equals, to_number
from .conditions import OPERATORS, evaluate_condition, evaluate_operator

__all__ = [
    "MISSING",
    "extract_value",
    "is_sequence",
    "loose_equals",
    "to_number",
    "OPERATORS",
    "evaluate_condition",
    "evaluate_operator",
]
