import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from src.app_shell.context import LedgerContext
from src.components.ledger import Ledger
from src.core.ports.chain import BlockHeightPort, ValueTransferPort
from src.domain.entities import Principal
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("LEDGER_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "ledger.db")
        self.rules_path = Path(os.environ.get("LEDGER_RULES_PATH", self.base_dir / "rules.yaml"))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_settings().rules_path)


# --- Ledger ---

# Host chain adapters, attached by the embedding process before startup
_host: tuple[ValueTransferPort, BlockHeightPort] | None = None

# Ledger context singleton (one store connection per process)
_context_instance: LedgerContext | None = None


def attach_host(transfer: ValueTransferPort, blocks: BlockHeightPort) -> None:
    """Attach the host chain the API moves value and reads block height through."""
    global _host
    _host = (transfer, blocks)


def detach_host() -> None:
    global _host
    _host = None


def get_ledger_context() -> LedgerContext:
    """
    Get ledger context singleton.

    Raises:
        RuntimeError: no host chain attached (see attach_host)
    """
    global _context_instance
    if _context_instance is None:
        if _host is None:
            raise RuntimeError(
                "No host chain attached; call attach_host() before serving the ledger"
            )
        transfer, blocks = _host
        settings = get_settings()
        _context_instance = LedgerContext.create(
            settings.db_path, get_rules(), transfer=transfer, blocks=blocks
        )
    return _context_instance


def reset_ledger_context() -> None:
    """Close and drop the ledger context (shutdown/testing)."""
    global _context_instance
    if _context_instance is not None:
        _context_instance.close()
        _context_instance = None


def get_ledger(context: LedgerContext = Depends(get_ledger_context)) -> Ledger:
    return context.ledger


# --- Caller identity ---


def get_current_caller(
    x_caller: Annotated[str | None, Header()] = None,
) -> Principal:
    """
    Caller principal for the request.

    The host environment authenticates the X-Caller header before it
    reaches the ledger; here it is only required to be present.
    """
    if not x_caller or not x_caller.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing caller identity",
        )
    return x_caller.strip()
