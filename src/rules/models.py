from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class LedgerRules(BaseModel):
    max_metadata_uri_length: int = Field(default=256, gt=0)
    # Thousandths, 1000 = 100%
    initial_commission_permille: int = Field(default=0, ge=0, le=1000)


class AccountsRules(BaseModel):
    escrow: str = Field(min_length=1)
    deployer: str = Field(min_length=1)


class OpsRules(BaseModel):
    data_dir_required: bool = True
    required_env: list[str] = Field(default_factory=list)


class Rules(BaseModel):
    project: ProjectRules
    ledger: LedgerRules
    accounts: AccountsRules
    ops: OpsRules = Field(default_factory=OpsRules)
