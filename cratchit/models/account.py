"""
Account value model.

One entry in a chart of accounts. Parent/child links are kept
as identifier lists rather than object references, so an
Account never points back into the chart that produced it.
"""

from pydantic import BaseModel

from cratchit.models.enums import AccountType, Currency


class Account(BaseModel):
    """
    Immutable identity and classification of a single account.

    No format or uniqueness checks happen here. Duplicate or
    oddly shaped ids are a chart-level concern. The currency
    string is stored exactly as given.
    """

    model_config = {"frozen": True}

    id: str
    name: str
    description: str
    account_type: AccountType
    currency: str
    is_placeholder: bool
    subaccount_ids: tuple[str, ...] = ()

    @property
    def currency_code(self) -> Currency:
        return Currency.parse(self.currency)

    @property
    def has_subaccounts(self) -> bool:
        return bool(self.subaccount_ids)

    def __repr__(self) -> str:
        return f"<Account {self.id} {self.name} ({self.account_type.value})>"
