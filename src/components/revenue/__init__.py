"""
Revenue component.

Pure revenue-split computation between platform fee and creator earnings.
"""

from .component import split_revenue
from .models import PERMILLE_BASE, RevenueSplit

__all__ = [
    # Functions
    "split_revenue",
    # Models
    "RevenueSplit",
    "PERMILLE_BASE",
]
