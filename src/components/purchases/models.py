"""
Purchases component models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AccessCheck:
    """Access predicate result and the block height it was evaluated at."""

    accessible: bool
    block_height: int
