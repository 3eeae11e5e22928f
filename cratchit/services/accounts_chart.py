"""
Accounts chart: flattens a nested account document into
a queryable collection.

Parsing walks each top-level node depth-first, post-order:
every sub-account is built and appended before its parent.
The whole document is validated before any account is built,
so a malformed document never yields a partial chart.

Duplicate ids are permitted. Lookups resolve to the first
account in post-order; the duplicates are logged and can be
listed with get_duplicate_ids().
"""

import json
import logging
from collections import Counter
from typing import Iterator

from pydantic import ValidationError

from cratchit.models.account import Account
from cratchit.schemas.chart import AccountNode, ChartDocument

logger = logging.getLogger(__name__)


class MalformedDocument(ValueError):
    """The document does not describe a valid chart of accounts."""


class _ChartBuilder:
    """
    Accumulator threaded through the recursive walk.

    Each account's position in `accounts` is its handle; the
    children mapping keys on that position so sub-account
    queries follow the real tree even when ids repeat.
    """

    def __init__(self):
        self.accounts: list[Account] = []
        self.account_ids: list[str] = []
        self.children: dict[int, tuple[int, ...]] = {}

    def add_node(self, node: AccountNode) -> int:
        child_positions = []
        subaccount_ids = []

        # Sub-accounts first, in document order
        for child in node.subaccounts:
            child_positions.append(self.add_node(child))
            subaccount_ids.append(child.id)

        account = Account(
            id=node.id,
            name=node.name,
            description=node.description,
            account_type=node.account_type,
            currency=node.currency,
            is_placeholder=node.placeholder,
            subaccount_ids=tuple(subaccount_ids),
        )
        position = len(self.accounts)
        self.accounts.append(account)
        self.children[position] = tuple(child_positions)
        self.account_ids.append(node.id)
        return position


class AccountsChart:
    """
    Read-only chart of accounts built from a parsed document.

    The chart is constructed in one pass and never mutated,
    so it can be shared between callers without locking.
    """

    def __init__(self, document):
        parsed = self._validate(document)

        builder = _ChartBuilder()
        top_level = [builder.add_node(node) for node in parsed.accounts]

        self._accounts: tuple[Account, ...] = tuple(builder.accounts)
        self._account_ids: tuple[str, ...] = tuple(builder.account_ids)
        self._used_ids = frozenset(builder.account_ids)
        self._children = builder.children
        self._top_level = tuple(top_level)

        # First occurrence in post-order wins
        self._index: dict[str, int] = {}
        for position, account in enumerate(self._accounts):
            self._index.setdefault(account.id, position)

        counts = Counter(self._account_ids)
        self._duplicates = tuple(sorted(i for i, n in counts.items() if n > 1))
        if self._duplicates:
            logger.warning(
                "Chart contains duplicate account ids: %s",
                ", ".join(self._duplicates),
            )

        logger.debug(
            "Built chart with %d accounts (%d top-level)",
            len(self._accounts), len(self._top_level),
        )

    @classmethod
    def from_json(cls, text: str) -> "AccountsChart":
        """Build a chart from a JSON string."""
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedDocument(f"invalid JSON: {e}") from e
        return cls(document)

    @staticmethod
    def _validate(document) -> ChartDocument:
        if isinstance(document, ChartDocument):
            return document
        try:
            return ChartDocument.model_validate(document)
        except ValidationError as e:
            raise MalformedDocument(
                f"malformed chart document: {e.error_count()} error(s)\n{e}"
            ) from e

    # --- Queries ---

    @property
    def accounts(self) -> tuple[Account, ...]:
        """All accounts in post-order."""
        return self._accounts

    def get_num_accounts(self) -> int:
        return len(self._accounts)

    def get_account_by_id(self, account_id: str) -> Account | None:
        """
        Return the first account in post-order with this id.

        Returns None when no account matches. A miss is an
        ordinary outcome, not an error.
        """
        position = self._index.get(account_id)
        if position is None:
            return None
        return self._accounts[position]

    def get_account_ids(self) -> list[str]:
        """Every id seen at any depth, one entry per account, post-order."""
        return list(self._account_ids)

    def is_account_id_used(self, account_id: str) -> bool:
        return account_id in self._used_ids

    def get_duplicate_ids(self) -> list[str]:
        return list(self._duplicates)

    def get_top_level_accounts(self) -> list[Account]:
        """Root accounts in document order."""
        return [self._accounts[p] for p in self._top_level]

    def get_subaccounts(self, account_id: str) -> list[Account]:
        """Direct children of an account, in document order."""
        position = self._index.get(account_id)
        if position is None:
            return []
        return [self._accounts[p] for p in self._children[position]]

    def get_subtree(self, account_id: str) -> list[Account]:
        """
        Every descendant of an account, in post-order.

        The account itself is not included. Unknown ids give
        an empty list.
        """
        position = self._index.get(account_id)
        if position is None:
            return []
        result: list[Account] = []
        self._collect_subtree(position, result)
        return result

    def _collect_subtree(self, position: int, result: list[Account]) -> None:
        for child in self._children[position]:
            self._collect_subtree(child, result)
            result.append(self._accounts[child])

    # --- Python protocols ---

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_id) -> bool:
        return account_id in self._used_ids

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts)

    def __repr__(self) -> str:
        return f"<AccountsChart {len(self._accounts)} accounts>"
