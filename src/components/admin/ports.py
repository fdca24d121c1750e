"""
Administration component ports.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from src.domain.entities import LedgerConfig


class ConfigStorePort(Protocol):
    """Store surface the administration controls need."""

    def transaction(self) -> AbstractContextManager[None]: ...

    def get_config(self) -> LedgerConfig | None: ...

    def save_config(self, config: LedgerConfig) -> LedgerConfig: ...
