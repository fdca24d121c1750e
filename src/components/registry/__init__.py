"""
Content registry component.

Content metadata and pricing, written once per content id and read by every
purchase and access check.
"""

from .component import ContentRegistry, validate_registration
from .models import MAX_METADATA_URI_LENGTH, RegisterContentInput
from .ports import RegistryStorePort

__all__ = [
    # Service
    "ContentRegistry",
    "validate_registration",
    # Models
    "RegisterContentInput",
    "MAX_METADATA_URI_LENGTH",
    # Ports
    "RegistryStorePort",
]
