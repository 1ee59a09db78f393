"""
Navigation over the parent-pointer chart of accounts.

Accounts may be camelCase mappings from a document or objects exposing
``id``, ``name``, ``parent_account_id`` and ``account_category``. Every
function takes the full account list and is safe on malformed trees: a
missing parent ends a walk and a cycle is never followed twice.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, TypeVar

A = TypeVar("A")

__all__ = [
    "get_account_ancestors",
    "get_account_descendants",
    "get_account_children",
    "get_account_path",
    "get_account_depth",
    "get_root_accounts",
    "is_leaf_account",
    "get_accounts_by_category",
]


def _get(account: Any, wire_key: str, attr: str) -> Any:
    if isinstance(account, Mapping):
        return account.get(wire_key)
    return getattr(account, attr, None)


def _id(account: Any) -> Any:
    return _get(account, "id", "id")


def _parent_id(account: Any) -> Any:
    return _get(account, "parentAccountId", "parent_account_id")


def get_account_ancestors(account_id: str, accounts: Sequence[A]) -> list[A]:
    """Ancestors ordered from the immediate parent up to the root."""
    by_id = {_id(a): a for a in accounts}
    ancestors: list[A] = []
    seen = {account_id}

    current = by_id.get(account_id)
    while current is not None:
        parent_id = _parent_id(current)
        if not parent_id or parent_id in seen:
            break
        parent = by_id.get(parent_id)
        if parent is None:
            break
        ancestors.append(parent)
        seen.add(parent_id)
        current = parent
    return ancestors


def get_account_descendants(account_id: str, accounts: Sequence[A]) -> list[A]:
    """All descendants at any depth, depth-first in pre-order."""
    descendants: list[A] = []
    visited = {account_id}

    def walk(parent_id: Any) -> None:
        for account in accounts:
            child_id = _id(account)
            if _parent_id(account) == parent_id and child_id not in visited:
                visited.add(child_id)
                descendants.append(account)
                walk(child_id)

    walk(account_id)
    return descendants


def get_account_children(account_id: str, accounts: Sequence[A]) -> list[A]:
    return [a for a in accounts if _parent_id(a) == account_id]


def get_account_path(account_id: str, accounts: Sequence[A]) -> list[str]:
    """
    Account names from the root down to the account itself.

    Returns [] when the account is not in the list.
    """
    account = next((a for a in accounts if _id(a) == account_id), None)
    if account is None:
        return []
    ancestors = get_account_ancestors(account_id, accounts)
    names = [_get(a, "name", "name") for a in reversed(ancestors)]
    names.append(_get(account, "name", "name"))
    return names


def get_account_depth(account_id: str, accounts: Sequence[A]) -> int:
    """0 for a root account, 1 for its children, and so on."""
    return len(get_account_ancestors(account_id, accounts))


def get_root_accounts(accounts: Sequence[A]) -> list[A]:
    return [a for a in accounts if not _parent_id(a)]


def is_leaf_account(account_id: str, accounts: Sequence[A]) -> bool:
    return not any(_parent_id(a) == account_id for a in accounts)


def get_accounts_by_category(category: str | Enum, accounts: Sequence[A]) -> list[A]:
    wanted = category.value if isinstance(category, Enum) else category
    matches = []
    for account in accounts:
        value = _get(account, "accountCategory", "account_category")
        if isinstance(value, Enum):
            value = value.value
        if value == wanted:
            matches.append(account)
    return matches
