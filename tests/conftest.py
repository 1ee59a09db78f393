"""
Pytest fixtures for the luca_schema test suite.

Provides:
- Structured logging configured for the whole session
- A shared LucaValidator
- Record factories that build schema-valid camelCase records; keyword
  overrides replace fields and ``_drop=("name", ...)`` removes them
"""

import json
import logging
from io import StringIO
from typing import Any, Callable

import pytest

from luca_schema.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from luca_schema.validator import LucaValidator

ACCOUNT_ID = "123e4567-e89b-12d3-a456-426614174000"
PAYOR_ID = "123e4567-e89b-12d3-a456-426614174001"
PAYEE_ID = "123e4567-e89b-12d3-a456-426614174002"
CATEGORY_ID = "123e4567-e89b-12d3-a456-426614174003"
TRANSACTION_ID = "123e4567-e89b-12d3-a456-426614174004"
RECURRING_ID = "123e4567-e89b-12d3-a456-426614174005"
EVENT_ID = "123e4567-e89b-12d3-a456-426614174006"
PARENT_ACCOUNT_ID = "123e4567-e89b-12d3-a456-426614174007"
JOURNAL_ENTRY_ID = "123e4567-e89b-12d3-a456-426614174008"
CREATED_AT = "2024-01-01T00:00:00Z"


def _build(defaults: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    drop = overrides.pop("_drop", ())
    record = {**defaults, **overrides}
    for key in drop:
        record.pop(key, None)
    return record


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture luca_schema logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs, validator):
            validator.validate("transaction", {})
            logs = captured_logs()
            assert any(r["message"] == "schema_validation_failed" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("luca_schema")
    previous_level = root.level
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Validator
# =============================================================================


@pytest.fixture(scope="session")
def validator() -> LucaValidator:
    return LucaValidator()


# =============================================================================
# Record factories
# =============================================================================


@pytest.fixture(scope="session")
def make_transaction() -> Callable[..., dict[str, Any]]:
    def _make(**overrides: Any) -> dict[str, Any]:
        return _build(
            {
                "id": TRANSACTION_ID,
                "payorId": PAYOR_ID,
                "payeeId": PAYEE_ID,
                "categoryId": CATEGORY_ID,
                "amount": 10000,
                "date": "2024-01-01",
                "description": "Test transaction",
                "transactionState": "COMPLETED",
                "entryType": "DEBIT",
                "journalEntryId": JOURNAL_ENTRY_ID,
                "createdAt": CREATED_AT,
                "updatedAt": None,
            },
            overrides,
        )

    return _make


@pytest.fixture(scope="session")
def make_posting() -> Callable[..., dict[str, Any]]:
    """Minimal posting for the journal core: only the fields it reads."""

    def _make(entry_type: str, amount: int, journal_entry_id: Any = None, **extra: Any):
        return {
            "entryType": entry_type,
            "amount": amount,
            "journalEntryId": journal_entry_id,
            **extra,
        }

    return _make


@pytest.fixture(scope="session")
def make_account() -> Callable[..., dict[str, Any]]:
    def _make(**overrides: Any) -> dict[str, Any]:
        return _build(
            {
                "id": ACCOUNT_ID,
                "name": "Checking",
                "description": None,
                "accountNumber": "1010",
                "accountCategory": "ASSETS",
                "normalBalance": "DEBIT",
                "accountStatus": "ACTIVE",
                "parentAccountId": None,
                "createdAt": CREATED_AT,
                "updatedAt": None,
            },
            overrides,
        )

    return _make


@pytest.fixture(scope="session")
def make_entity() -> Callable[..., dict[str, Any]]:
    def _make(**overrides: Any) -> dict[str, Any]:
        return _build(
            {
                "id": PAYOR_ID,
                "name": "Main Street Grocer",
                "description": None,
                "entityType": "RETAILER",
                "entityStatus": "ACTIVE",
                "createdAt": CREATED_AT,
                "updatedAt": None,
            },
            overrides,
        )

    return _make


@pytest.fixture(scope="session")
def make_category() -> Callable[..., dict[str, Any]]:
    def _make(**overrides: Any) -> dict[str, Any]:
        return _build(
            {
                "id": CATEGORY_ID,
                "name": "Groceries",
                "description": "Food and household supplies",
                "parentId": None,
                "categoryType": "DEFAULT",
                "createdAt": CREATED_AT,
                "updatedAt": None,
            },
            overrides,
        )

    return _make


@pytest.fixture(scope="session")
def make_recurring_transaction() -> Callable[..., dict[str, Any]]:
    def _make(**overrides: Any) -> dict[str, Any]:
        return _build(
            {
                "id": RECURRING_ID,
                "payorId": PAYOR_ID,
                "payeeId": PAYEE_ID,
                "categoryId": CATEGORY_ID,
                "amount": 150000,
                "description": "Monthly rent",
                "frequency": "MONTH",
                "interval": 1,
                "occurrences": None,
                "startOn": "2024-01-01",
                "endOn": None,
                "recurringTransactionState": "ACTIVE",
                "createdAt": CREATED_AT,
                "updatedAt": None,
            },
            overrides,
        )

    return _make


@pytest.fixture(scope="session")
def make_recurring_transaction_event() -> Callable[..., dict[str, Any]]:
    def _make(**overrides: Any) -> dict[str, Any]:
        return _build(
            {
                "id": EVENT_ID,
                "transactionId": TRANSACTION_ID,
                "recurringTransactionId": RECURRING_ID,
                "expectedDate": "2024-02-01",
                "eventState": "MODIFIED",
                "createdAt": CREATED_AT,
                "updatedAt": None,
            },
            overrides,
        )

    return _make


@pytest.fixture(scope="session")
def make_document(
    make_account,
    make_entity,
    make_category,
    make_transaction,
    make_recurring_transaction,
    make_recurring_transaction_event,
) -> Callable[..., dict[str, Any]]:
    """A small valid document holding one balanced journal entry."""

    def _make(**overrides: Any) -> dict[str, Any]:
        return _build(
            {
                "schemaVersion": "2.0.0",
                "accounts": [make_account()],
                "entities": [make_entity()],
                "categories": [make_category()],
                "transactions": [
                    make_transaction(
                        id="123e4567-e89b-12d3-a456-426614174010",
                        entryType="DEBIT",
                    ),
                    make_transaction(
                        id="123e4567-e89b-12d3-a456-426614174011",
                        entryType="CREDIT",
                    ),
                ],
                "recurringTransactions": [make_recurring_transaction()],
                "recurringTransactionEvents": [make_recurring_transaction_event()],
            },
            overrides,
        )

    return _make
