"""
Content registry component.

Validates pricing/subscription parameters and upserts content records.

Key behaviors:
- The first registrant of an id is its creator forever
- Re-registration silently overwrites every other field, by any caller
"""

from __future__ import annotations

import logging

from src.components.revenue import PERMILLE_BASE
from src.domain.entities import Content, Principal
from src.domain.errors import ErrorCause, LedgerError

from .models import MAX_METADATA_URI_LENGTH, RegisterContentInput
from .ports import RegistryStorePort

logger = logging.getLogger(__name__)


# --- Validation Functions ---


def validate_registration(
    data: RegisterContentInput,
    max_metadata_uri_length: int = MAX_METADATA_URI_LENGTH,
) -> LedgerError | None:
    """Return the first validation failure for a registration, or None."""
    if data.content_id < 0:
        return LedgerError(ErrorCause.INVALID_CONTENT_ID, "Content id must be non-negative")

    if data.price <= 0:
        return LedgerError(ErrorCause.INVALID_PRICE, "Price must be positive")

    if not 0 <= data.creator_share_permille <= PERMILLE_BASE:
        return LedgerError(
            ErrorCause.INVALID_CREATOR_SHARE,
            f"Creator share must be between 0 and {PERMILLE_BASE} permille",
        )

    if len(data.metadata_uri) > max_metadata_uri_length:
        return LedgerError(
            ErrorCause.METADATA_TOO_LONG,
            f"Metadata URI must be {max_metadata_uri_length} characters or less",
        )

    if data.subscription_enabled and data.subscription_period_blocks <= 0:
        return LedgerError(
            ErrorCause.INVALID_SUBSCRIPTION_PERIOD,
            "Subscription period must be positive when subscriptions are enabled",
        )

    return None


# --- Registry Service ---


class ContentRegistry:
    """Content registry over a transactional store."""

    def __init__(
        self,
        store: RegistryStorePort,
        max_metadata_uri_length: int = MAX_METADATA_URI_LENGTH,
    ) -> None:
        self._store = store
        self._max_metadata_uri_length = max_metadata_uri_length

    def register(self, data: RegisterContentInput, caller: Principal) -> Content:
        """
        Register content, or overwrite an existing registration.

        Raises:
            LedgerError: InvalidPricingParameters or InvalidSubscriptionDuration
        """
        error = validate_registration(data, self._max_metadata_uri_length)
        if error:
            raise error

        with self._store.transaction():
            existing = self._store.get_content(data.content_id)
            creator = existing.creator if existing else caller

            content = Content(
                content_id=data.content_id,
                creator=creator,
                price=data.price,
                creator_share_permille=data.creator_share_permille,
                metadata_uri=data.metadata_uri,
                subscription_enabled=data.subscription_enabled,
                subscription_period_blocks=data.subscription_period_blocks,
            )
            self._store.save_content(content)

        if existing:
            logger.info(
                f"Content {data.content_id} re-registered by {caller} (creator {creator})"
            )
        else:
            logger.info(f"Content {data.content_id} registered by {caller}")
        return content

    def get(self, content_id: int) -> Content | None:
        """Read-only lookup."""
        return self._store.get_content(content_id)
