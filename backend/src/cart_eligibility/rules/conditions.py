"""Condition evaluation: implicit equality or an operator mapping."""

from __future__ import annotations

import operator
from collections.abc import Mapping
from typing import Any, Callable, Iterable

from ..log import get_logger
from .coercion import loose_equals, to_number
from .paths import is_sequence

logger = get_logger(__name__)

_COMPARATORS: dict[str, Callable[[float, float], bool]] = {
    "gt": operator.gt,
    "lt": operator.lt,
    "gte": operator.ge,
    "lte": operator.le,
}

OPERATORS = frozenset({*_COMPARATORS, "in", "and", "or"})


def _combine(value: Any, name: str, expected: Any, quantifier: Callable[[Iterable[bool]], bool]) -> bool:
    if not isinstance(expected, Mapping):
        logger.warning("Operator %r expects a mapping of sub-operators, got %s", name, type(expected).__name__)
        return False
    return quantifier(evaluate_condition(value, {op: arg}) for op, arg in expected.items())


def evaluate_operator(value: Any, name: str, expected: Any) -> bool:
    """Apply a single ``name: expected`` check to ``value``. Unknown operators never match."""
    if name not in OPERATORS:
        logger.warning("Unknown operator %r in condition; treating as no match", name)
        return False
    compare = _COMPARATORS.get(name)
    if compare is not None:
        return compare(to_number(value), to_number(expected))
    if name == "in":
        if not is_sequence(expected):
            logger.warning("Operator 'in' expects a list, got %s", type(expected).__name__)
            return False
        return any(loose_equals(value, item) for item in expected)
    if name == "and":
        return _combine(value, name, expected, all)
    return _combine(value, name, expected, any)


def evaluate_condition(value: Any, condition: Any) -> bool:
    """
    A mapping condition holds when every operator in it holds (``{"gt": 10, "lt": 20}``
    is a range). Anything else is compared with loose equality.
    """
    if isinstance(condition, Mapping):
        for name, expected in condition.items():
            if not evaluate_operator(value, name, expected):
                return False
        return True
    return loose_equals(value, condition)
