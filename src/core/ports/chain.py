"""
Host chain port interfaces.

External collaborators the ledger consumes but does not implement:
- value transfer between accounts
- monotonic block height (the ledger's logical clock)

Caller identity is not a port: the host supplies an unforgeable principal
with every call and the ledger receives it as an explicit argument.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import Principal


class ValueTransferPort(Protocol):
    """
    Port for moving value between accounts.

    Implementations:
    - InMemoryValueTransfer: balance map (dev/tests)
    """

    def transfer(self, amount: int, sender: Principal, recipient: Principal) -> bool:
        """
        Atomically send amount units from sender to recipient.

        Args:
            amount: Units to move (smallest currency unit)
            sender: Account debited
            recipient: Account credited

        Returns:
            True if the transfer was applied, False if it was rejected
            (e.g. sender balance insufficient). A rejected transfer
            changes no balances.
        """
        ...


class BlockHeightPort(Protocol):
    """
    Port for the host chain's block height.

    Implementations:
    - ManualBlockHeight: settable counter (dev/tests)
    """

    def current_block_height(self) -> int:
        """Return the current block height (monotonic, non-negative)."""
        ...
