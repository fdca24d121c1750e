"""
Content registry ports.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from src.domain.entities import Content


class RegistryStorePort(Protocol):
    """Store surface the registry needs."""

    def transaction(self) -> AbstractContextManager[None]: ...

    def get_content(self, content_id: int) -> Content | None: ...

    def save_content(self, content: Content) -> Content: ...
