"""
Shared enumerations for account models.

Account types form a closed set. A document naming any other
type is rejected when the chart is parsed, not carried along
as an "other" bucket.
"""

import enum


class AccountType(str, enum.Enum):
    """The five fundamental accounting categories."""
    ASSET = "ASSET"
    EQUITY = "EQUITY"
    EXPENSE = "EXPENSE"
    INCOME = "INCOME"
    LIABILITY = "LIABILITY"

    @property
    def code(self) -> int:
        """Numeric code used by documents that store types as integers."""
        return _TYPE_CODES[self]

    @classmethod
    def parse(cls, value) -> "AccountType":
        """
        Resolve a document value to an AccountType.

        Accepts member instances, names in any letter case
        ("asset", "LiaBilIty") and the integer codes 1-5.
        Raises ValueError for anything else.
        """
        if isinstance(value, cls):
            return value
        # bool is an int subclass; True must not read as ASSET
        if isinstance(value, int) and not isinstance(value, bool):
            for member, code in _TYPE_CODES.items():
                if code == value:
                    return member
            raise ValueError(f"unknown account type code {value}")
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                raise ValueError(f"unknown account type '{value}'") from None
        raise ValueError(f"account type must be a string or integer, got {value!r}")


_TYPE_CODES: dict[AccountType, int] = {
    AccountType.ASSET: 1,
    AccountType.EQUITY: 2,
    AccountType.EXPENSE: 3,
    AccountType.INCOME: 4,
    AccountType.LIABILITY: 5,
}


class Currency(str, enum.Enum):
    """Currencies the tool knows how to handle."""
    USD = "USD"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, code: str) -> "Currency":
        """Map a document currency code; unrecognized codes are UNKNOWN."""
        if code == cls.USD.value:
            return cls.USD
        return cls.UNKNOWN
