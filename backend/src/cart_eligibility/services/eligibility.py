"""Eligibility service: check a cart against key-path criteria."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..log import get_logger
from ..models import EligibilityCheck
from ..rules import MISSING, evaluate_condition, extract_value, is_sequence

logger = get_logger(__name__)


class EligibilityService:
    """Stateless evaluator; one instance can be shared freely."""

    def is_eligible(self, cart: Any, criteria: Mapping[str, Any]) -> bool:
        """
        True when every ``key_path: condition`` entry in ``criteria`` matches ``cart``.
        Empty criteria are always satisfied. Never raises: missing paths and malformed
        conditions make the cart ineligible.
        """
        if not isinstance(criteria, Mapping):
            logger.warning("Criteria must be a mapping, got %s; cart is ineligible", type(criteria).__name__)
            return False
        for key_path, condition in criteria.items():
            if not self._criterion_matches(cart, key_path, condition):
                return False
        return True

    def check(self, request: EligibilityCheck) -> bool:
        return self.is_eligible(request.cart, request.criteria)

    def _criterion_matches(self, cart: Any, key_path: str, condition: Any) -> bool:
        data = extract_value(cart, key_path)
        if data is MISSING:
            logger.debug("Criterion %r failed: path not found in cart", key_path)
            return False

        # Values collected across an array: one matching element is enough.
        if is_sequence(data):
            matched = any(evaluate_condition(item, condition) for item in data)
        else:
            matched = evaluate_condition(data, condition)

        if not matched:
            logger.debug("Criterion %r failed: %r does not satisfy %r", key_path, data, condition)
        return matched


_default_service = EligibilityService()


def is_eligible(cart: Any, criteria: Mapping[str, Any]) -> bool:
    """Module-level shortcut for ``EligibilityService().is_eligible``."""
    return _default_service.is_eligible(cart, criteria)
