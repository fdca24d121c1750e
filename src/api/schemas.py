from pydantic import BaseModel, ConfigDict


# --- Content ---
class RegisterContentRequest(BaseModel):
    price: int
    creator_share_permille: int
    metadata_uri: str
    subscription_enabled: bool = False
    subscription_period_blocks: int = 0


class ContentResponse(BaseModel):
    content_id: int
    creator: str
    price: int
    creator_share_permille: int
    metadata_uri: str
    subscription_enabled: bool
    subscription_period_blocks: int

    model_config = ConfigDict(from_attributes=True)


# --- Purchases ---
class PurchaseResponse(BaseModel):
    buyer: str
    content_id: int
    purchased_at_block: int
    subscription_end_block: int
    active: bool

    model_config = ConfigDict(from_attributes=True)


class AccessResponse(BaseModel):
    buyer: str
    content_id: int
    accessible: bool
    block_height: int


# --- Earnings ---
class BalanceResponse(BaseModel):
    creator: str
    balance: int


class WithdrawResponse(BaseModel):
    creator: str
    amount: int


# --- Administration ---
class CommissionRequest(BaseModel):
    new_rate: int


class CommissionResponse(BaseModel):
    commission_permille: int


class AdministratorRequest(BaseModel):
    new_admin: str


class AdministratorResponse(BaseModel):
    administrator: str


# --- Errors ---
class LedgerErrorResponse(BaseModel):
    detail: str
    code: int
    error: str
    cause: str
