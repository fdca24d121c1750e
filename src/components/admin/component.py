"""
Administration component.

Guards every mutation of LedgerConfig with an administrator check.
"""

from __future__ import annotations

import logging

from src.components.revenue import PERMILLE_BASE
from src.domain.entities import LedgerConfig, Principal
from src.domain.errors import ErrorCause, LedgerError

from .ports import ConfigStorePort

logger = logging.getLogger(__name__)


def initialize_config(
    store: ConfigStorePort,
    deployer: Principal,
    commission_permille: int = 0,
) -> LedgerConfig:
    """
    Create the config row on first deployment.

    An existing row is returned untouched, so restarting against a
    persistent store never resets the administrator or rate.
    """
    if not 0 <= commission_permille <= PERMILLE_BASE:
        raise ValueError(f"Initial commission must be between 0 and {PERMILLE_BASE}")

    with store.transaction():
        existing = store.get_config()
        if existing is not None:
            return existing
        config = LedgerConfig(administrator=deployer, commission_permille=commission_permille)
        store.save_config(config)

    logger.info(f"Ledger initialized: administrator={deployer}, commission={commission_permille}")
    return config


class Administration:
    """Administrative controls over the ledger config."""

    def __init__(self, store: ConfigStorePort) -> None:
        self._store = store

    def get_config(self) -> LedgerConfig:
        config = self._store.get_config()
        if config is None:
            raise RuntimeError("Ledger config not initialized")
        return config

    def _require_admin(self, caller: Principal) -> LedgerConfig:
        config = self.get_config()
        if caller != config.administrator:
            raise LedgerError(ErrorCause.NOT_ADMINISTRATOR, f"{caller} is not the administrator")
        return config

    def set_commission_rate(self, new_rate: int, caller: Principal) -> LedgerConfig:
        """
        Set the platform commission.

        Raises:
            LedgerError: Unauthorized, InvalidPricingParameters
        """
        with self._store.transaction():
            config = self._require_admin(caller)
            if not 0 <= new_rate <= PERMILLE_BASE:
                raise LedgerError(
                    ErrorCause.INVALID_COMMISSION_RATE,
                    f"Commission must be between 0 and {PERMILLE_BASE} permille",
                )
            updated = config.model_copy(update={"commission_permille": new_rate})
            self._store.save_config(updated)

        logger.info(f"Commission rate set to {new_rate} by {caller}")
        return updated

    def transfer_administration(self, new_admin: Principal, caller: Principal) -> LedgerConfig:
        """
        Hand the administrator role to new_admin (not validated).

        Raises:
            LedgerError: Unauthorized
        """
        with self._store.transaction():
            config = self._require_admin(caller)
            updated = config.model_copy(update={"administrator": new_admin})
            self._store.save_config(updated)

        logger.info(f"Administration transferred from {caller} to {new_admin}")
        return updated
