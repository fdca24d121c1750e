"""
Content registry models.
"""

from __future__ import annotations

from dataclasses import dataclass

MAX_METADATA_URI_LENGTH = 256


@dataclass(frozen=True)
class RegisterContentInput:
    """Input for registering (or re-registering) content."""

    content_id: int
    price: int
    creator_share_permille: int
    metadata_uri: str
    subscription_enabled: bool = False
    subscription_period_blocks: int = 0
