from pydantic import BaseModel

# --- Identities ---

# Opaque principal identifier (account, caller, creator).
Principal = str

# --- Content ---


class Content(BaseModel):
    content_id: int
    creator: Principal
    price: int
    creator_share_permille: int
    metadata_uri: str
    subscription_enabled: bool = False
    subscription_period_blocks: int = 0


# --- Purchases ---


class PurchaseRecord(BaseModel):
    buyer: Principal
    content_id: int
    purchased_at_block: int
    subscription_end_block: int = 0  # 0 means no subscription window
    active: bool = True


# --- Process-wide configuration ---


class LedgerConfig(BaseModel):
    administrator: Principal
    commission_permille: int = 0
