"""Pydantic models for eligibility requests."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class EligibilityCheck(BaseModel):
    """A cart and the criteria it is checked against, e.g. decoded from one JSON document.

    Criteria contents are not validated here; malformed operators fail closed at evaluation.
    """

    cart: dict[str, Any] = Field(default_factory=dict)
    criteria: dict[str, Any] = Field(default_factory=dict)
