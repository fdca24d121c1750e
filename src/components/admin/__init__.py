"""
Administration component.

Commission rate and administrator identity, held in an explicit
LedgerConfig row and mutated only by the current administrator.
"""

from .component import Administration, initialize_config
from .ports import ConfigStorePort

__all__ = [
    # Service
    "Administration",
    "initialize_config",
    # Ports
    "ConfigStorePort",
]
