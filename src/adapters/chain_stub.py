"""
Host chain stub adapters (dev/tests).

In-process stand-ins for the host chain collaborators:
- InMemoryValueTransfer: account balance map with atomic transfers
- ManualBlockHeight: block counter advanced explicitly
- OfflineHost: refuses both ports (no chain attached)

Both satisfy the ports in src.core.ports.chain.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from src.core.ports.chain import BlockHeightPort, ValueTransferPort
from src.domain.entities import Principal

logger = logging.getLogger(__name__)

# Invoked after a successful transfer with (amount, sender, recipient).
TransferHook = Callable[[int, Principal, Principal], None]


@dataclass
class InMemoryValueTransfer:
    """
    Balance-map value transfer adapter.

    A transfer is rejected (returns False, no balances change) when the
    amount is not positive or the sender holds less than the amount.
    """

    balances: dict[Principal, int] = field(default_factory=dict)
    # Testing hook, e.g. to simulate a recipient that re-enters the ledger
    _on_transfer: TransferHook | None = None
    _fail_next: bool = False

    def transfer(self, amount: int, sender: Principal, recipient: Principal) -> bool:
        """Move amount from sender to recipient if sender can cover it."""
        if self._fail_next:
            self._fail_next = False
            logger.debug(f"InMemoryValueTransfer: forced rejection {sender} -> {recipient}")
            return False

        available = self.balances.get(sender, 0)
        if amount <= 0 or available < amount:
            logger.debug(
                f"InMemoryValueTransfer: rejected {amount} from {sender} "
                f"(available={available})"
            )
            return False

        self.balances[sender] = available - amount
        self.balances[recipient] = self.balances.get(recipient, 0) + amount

        if self._on_transfer is not None:
            self._on_transfer(amount, sender, recipient)
        return True

    def balance_of(self, account: Principal) -> int:
        """Current balance of an account (0 if unknown)."""
        return self.balances.get(account, 0)

    # --- Testing Helpers ---

    def mint(self, account: Principal, amount: int) -> None:
        """Credit an account out of thin air (testing)."""
        self.balances[account] = self.balances.get(account, 0) + amount

    def set_on_transfer(self, hook: TransferHook | None) -> None:
        """Install a post-transfer callback (testing)."""
        self._on_transfer = hook

    def fail_next_transfer(self) -> None:
        """Reject the next transfer regardless of balances (testing)."""
        self._fail_next = True


@dataclass
class ManualBlockHeight:
    """Block height counter that only moves when told to."""

    height: int = 0

    def current_block_height(self) -> int:
        return self.height

    def advance(self, blocks: int = 1) -> int:
        """Mine blocks; returns the new height."""
        if blocks < 0:
            raise ValueError("Block height is monotonic")
        self.height += blocks
        return self.height

    def set_height(self, height: int) -> None:
        if height < self.height:
            raise ValueError("Block height is monotonic")
        self.height = height


class HostUnavailableError(RuntimeError):
    """Raised when a ledger operation needs the host chain and none is attached."""


class OfflineHost:
    """
    Host stand-in for processes with no chain attached (operator CLI).

    Both ports raise instead of answering. A purchase or withdrawal run
    against it fails inside the store transaction and rolls back, so
    persisted earnings are never zeroed without a payout.
    """

    def transfer(self, amount: int, sender: Principal, recipient: Principal) -> bool:
        raise HostUnavailableError(f"No host chain attached; cannot move {amount}")

    def current_block_height(self) -> int:
        raise HostUnavailableError("No host chain attached; block height unknown")


# Verify protocol compliance at module load time
def _verify_protocol_compliance() -> None:
    """Verify stub adapters satisfy the host chain ports."""
    transfer: ValueTransferPort = InMemoryValueTransfer()
    blocks: BlockHeightPort = ManualBlockHeight()
    _ = transfer.transfer(1, "a", "b")
    _ = blocks.current_block_height()
    offline_transfer: ValueTransferPort = OfflineHost()
    offline_blocks: BlockHeightPort = OfflineHost()
    _ = (offline_transfer, offline_blocks)


_verify_protocol_compliance()
