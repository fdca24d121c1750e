"""
Purchases component.

Per (buyer, content) purchase/subscription records, the purchase and
termination flows, and the access predicate.
"""

from .component import PurchaseEngine, is_active
from .models import AccessCheck
from .ports import PurchaseStorePort

__all__ = [
    # Service
    "PurchaseEngine",
    # Functions
    "is_active",
    # Models
    "AccessCheck",
    # Ports
    "PurchaseStorePort",
]
