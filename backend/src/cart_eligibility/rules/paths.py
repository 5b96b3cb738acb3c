"""Dotted key-path extraction with implicit fan-out across arrays."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class _Missing:
    """Marker for a path that does not resolve. Distinct from ``None`` (JSON null)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def is_sequence(value: Any) -> bool:
    """Arrays are lists or tuples; strings are scalars."""
    return isinstance(value, (list, tuple))


def _lookup(node: Any, segment: str) -> Any:
    if isinstance(node, Mapping) and segment in node:
        return node[segment]
    return MISSING


def extract_value(cart: Any, key_path: str) -> Any:
    """
    Resolve ``key_path`` (e.g. ``"products.productId"``) against ``cart``.

    Once a segment lands on an array, every following segment is applied to each
    element and elements without the key are dropped, so the result is a list.
    Returns ``MISSING`` when a non-array step cannot be resolved.
    """
    acc = cart
    for segment in str(key_path).split("."):
        if is_sequence(acc):
            found = (_lookup(item, segment) for item in acc)
            acc = [v for v in found if v is not MISSING]
        else:
            acc = _lookup(acc, segment)
    return acc
