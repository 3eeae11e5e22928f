"""
Pydantic schemas for chart of accounts documents.

The document schemas describe the nested JSON shape that a
chart is parsed from. The response schemas define what the
API returns. They are kept apart because the input tree and
the flattened output are different shapes.
"""

from pydantic import BaseModel, Field, field_validator

from cratchit.models.enums import AccountType


# --- Document Schemas ---

class AccountNode(BaseModel):
    """One account in the input tree, with its nested sub-accounts."""

    model_config = {"populate_by_name": True}

    id: str
    name: str
    description: str = ""
    account_type: AccountType = Field(alias="type")
    currency: str = "USD"
    placeholder: bool = False
    subaccounts: list["AccountNode"] = Field(default_factory=list)

    @field_validator("account_type", mode="before")
    @classmethod
    def parse_account_type(cls, v) -> AccountType:
        return AccountType.parse(v)


class ChartDocument(BaseModel):
    """Top level of a chart document: {"accounts": [...]}."""
    accounts: list[AccountNode]


# --- Response Schemas ---

class AccountResponse(BaseModel):
    """Account in API responses."""
    id: str
    name: str
    description: str
    account_type: AccountType
    currency: str
    is_placeholder: bool
    subaccount_ids: list[str]

    model_config = {"from_attributes": True}


class AccountIdsResponse(BaseModel):
    account_ids: list[str]
    duplicates: list[str]


class AccountIdUsageResponse(BaseModel):
    account_id: str
    used: bool


class ChartSummaryResponse(BaseModel):
    """Result of validating a posted document."""
    num_accounts: int
    account_ids: list[str]
    duplicates: list[str]
