"""Shared coercion helpers: numeric coercion and loose equality.

Existing criteria rely on coercive comparisons (``"5"`` equals ``5``, ``"abc"``
is not a number), so these rules are spelled out here rather than taken from
Python's own ``==`` and ``float()``.
"""

from __future__ import annotations

import math
import numbers
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from .paths import MISSING, is_sequence

NAN = float("nan")

_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)
_PREFIXED_RE = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$", re.ASCII)
_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_object(value: Any) -> bool:
    return isinstance(value, Mapping) or is_sequence(value)


def _string_to_number(text: str) -> float:
    s = text.strip()
    if not s:
        return 0.0
    if s in _INFINITY:
        return _INFINITY[s]
    if _DECIMAL_RE.match(s):
        return float(s)
    if _PREFIXED_RE.match(s):
        return float(int(s, 0))
    return NAN


def _format_number(f: float) -> str:
    """
    Shortest round-trip digits of a finite float, laid out as plain digits when the
    decimal point falls within 21 places (down to 1e-7), otherwise as ``1.5e+21`` /
    ``1e-7`` with an unpadded exponent.
    """
    if f == 0:
        return "0"
    sign = "-" if f < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(f))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k  # position of the decimal point relative to the first digit

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits
    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def to_display_string(value: Any) -> str:
    """String form used when an object or scalar is compared as a primitive."""
    if value is None or value is MISSING:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        f = to_number(value)
        if math.isnan(f):
            return "NaN"
        if math.isinf(f):
            return "Infinity" if f > 0 else "-Infinity"
        return _format_number(f)
    if isinstance(value, Mapping):
        return "[object Object]"
    if is_sequence(value):
        return ",".join(to_display_string(item) for item in value)
    return str(value)


def to_number(value: Any) -> float:
    """Coerce ``value`` to a float. Unparseable input becomes NaN, which fails every comparison."""
    if value is MISSING:
        return NAN
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if is_number(value):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        return _string_to_number(value)
    if is_sequence(value):
        return _string_to_number(to_display_string(value))
    return NAN


def loose_equals(left: Any, right: Any) -> bool:
    """Coercive equality: ``5 == "5"``, ``True == 1``, ``[3] == "3"``, ``None`` only equals ``None``."""
    left_nullish = left is None or left is MISSING
    right_nullish = right is None or right is MISSING
    if left_nullish or right_nullish:
        return left_nullish and right_nullish

    if isinstance(left, bool) and isinstance(right, bool):
        return left == right
    if isinstance(left, bool):
        return loose_equals(to_number(left), right)
    if isinstance(right, bool):
        return loose_equals(left, to_number(right))

    if is_number(left) and is_number(right):
        return left == right
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    if is_number(left) and isinstance(right, str):
        return to_number(left) == to_number(right)
    if isinstance(left, str) and is_number(right):
        return to_number(left) == to_number(right)

    left_obj, right_obj = _is_object(left), _is_object(right)
    if left_obj and right_obj:
        return left is right
    if left_obj:
        return loose_equals(to_display_string(left), right)
    if right_obj:
        return loose_equals(left, to_display_string(right))
    return left == right
