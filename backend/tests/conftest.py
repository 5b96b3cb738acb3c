import copy
import logging

import pytest


@pytest.fixture()
def service():
    from cart_eligibility.services.eligibility import EligibilityService

    return EligibilityService()


@pytest.fixture()
def cart() -> dict:
    return {
        "total": 120.5,
        "currency": "EUR",
        "itemCount": "3",
        "customer": {"id": "c-42", "tier": "gold", "country": None},
        "products": [
            {"productId": "p-1", "price": 20, "category": "books", "tags": ["new"]},
            {"productId": "p-2", "price": 80.5, "category": "games"},
            {"productId": "p-3", "price": 20, "category": "books", "supplier": {"name": "acme"}},
        ],
        "coupon": None,
    }


@pytest.fixture()
def frozen(cart):
    """Deep snapshot of the cart fixture, for checking the evaluator never mutates it."""
    return copy.deepcopy(cart)


@pytest.fixture()
def eligibility_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="cart_eligibility")
    return caplog
