"""Account models package."""

from cratchit.models.enums import AccountType, Currency
from cratchit.models.account import Account

__all__ = [
    "AccountType",
    "Currency",
    "Account",
]
