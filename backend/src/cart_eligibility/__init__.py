"""Cart eligibility: evaluate declarative key-path criteria against a cart."""

from .models import EligibilityCheck
from .services.eligibility import EligibilityService, is_eligible

__all__ = [
    "EligibilityCheck",
    "EligibilityService",
    "is_eligible",
]
