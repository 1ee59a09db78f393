"""
Journal -- double-entry balance validation and grouping of postings.

Responsibility:
    Partitions a flat list of postings into journal entries by their
    journalEntryId and checks each entry for double-entry balance: at least
    one debit, at least one credit, and debit total == credit total.

Architecture position:
    Functional core -- pure functions, no I/O, no shared state. Callers may
    invoke these from any number of threads as long as the input collection
    is not mutated concurrently.

Sign convention:
    Every posting carries an explicit entryType. total_debits and
    total_credits are plain integer sums of ``amount`` over the DEBIT and
    CREDIT postings respectively. Amounts are used as given.

Invariants enforced:
    - A valid entry has difference == 0, debit_count > 0, credit_count > 0.
    - Exactly one error is reported per invalid entry, in priority order:
      no postings, no debits, no credits, imbalance.
    - Grouping is a partition: every posting lands in exactly one bucket.

Failure modes:
    - Imbalance is returned as a JournalEntryValidationResult with
      is_valid=False. Nothing here raises for well-typed input.
    - An entryType other than DEBIT/CREDIT is counted on neither side; the
      schema validator is expected to have rejected it upstream.

Postings may be ``Posting`` DTOs or camelCase mappings straight from a
document (``{"entryType": "DEBIT", "amount": 100, "journalEntryId": ...}``).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar
from uuid import UUID

from luca_schema.dtos import JournalEntryErrorCode, JournalEntryValidationResult
from luca_schema.enums import EntryType
from luca_schema.logging_config import LogContext, get_logger

logger = get_logger("journal")

P = TypeVar("P")

__all__ = [
    "validate_journal_entry",
    "group_postings_by_journal_entry",
    "group_transactions_by_journal_entry",
    "validate_all_journal_entries",
]


def _read(posting: Any, wire_key: str, attr: str) -> Any:
    if isinstance(posting, Mapping):
        return posting.get(wire_key)
    return getattr(posting, attr, None)


def _entry_type(posting: Any) -> str | None:
    value = _read(posting, "entryType", "entry_type")
    if isinstance(value, EntryType):
        return value.value
    return value if isinstance(value, str) else None


def _group_key(posting: Any) -> str | None:
    value = _read(posting, "journalEntryId", "journal_entry_id")
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, str) and value:
        return value
    return None


def validate_journal_entry(postings: Iterable[Any]) -> JournalEntryValidationResult:
    """
    Check one group of postings for double-entry balance.

    Args:
        postings: The postings of a single journal entry.

    Returns:
        JournalEntryValidationResult. Never raises for well-typed input.
    """
    postings = list(postings)
    if not postings:
        return JournalEntryValidationResult(
            is_valid=False,
            total_debits=0,
            total_credits=0,
            difference=0,
            debit_count=0,
            credit_count=0,
            error="No postings provided",
            error_code=JournalEntryErrorCode.NO_POSTINGS,
        )

    total_debits = 0
    total_credits = 0
    debit_count = 0
    credit_count = 0

    for posting in postings:
        side = _entry_type(posting)
        amount = _read(posting, "amount", "amount")
        if side == EntryType.DEBIT.value:
            total_debits += amount
            debit_count += 1
        elif side == EntryType.CREDIT.value:
            total_credits += amount
            credit_count += 1

    difference = total_debits - total_credits

    error: str | None = None
    error_code: JournalEntryErrorCode | None = None
    if debit_count == 0:
        error = "No debit entries found"
        error_code = JournalEntryErrorCode.NO_DEBITS
    elif credit_count == 0:
        error = "No credit entries found"
        error_code = JournalEntryErrorCode.NO_CREDITS
    elif difference != 0:
        error = (
            f"Debits ({total_debits}) do not equal credits ({total_credits}). "
            f"Difference: {difference}"
        )
        error_code = JournalEntryErrorCode.UNBALANCED

    if error_code is not None:
        logger.debug(
            "journal_entry_invalid",
            extra={
                "error_code": error_code.value,
                "total_debits": total_debits,
                "total_credits": total_credits,
                "posting_count": len(postings),
            },
        )

    return JournalEntryValidationResult(
        is_valid=error_code is None,
        total_debits=total_debits,
        total_credits=total_credits,
        difference=difference,
        debit_count=debit_count,
        credit_count=credit_count,
        error=error,
        error_code=error_code,
    )


def group_postings_by_journal_entry(postings: Iterable[P]) -> dict[str | None, list[P]]:
    """
    Partition postings by journalEntryId.

    Buckets appear in order of first occurrence and keep the postings'
    relative order. Postings without a usable key all share the single
    ``None`` bucket.
    """
    groups: dict[str | None, list[P]] = {}
    for posting in postings:
        groups.setdefault(_group_key(posting), []).append(posting)
    return groups


# The document model calls postings "transactions".
group_transactions_by_journal_entry = group_postings_by_journal_entry


def validate_all_journal_entries(
    postings: Iterable[Any],
) -> dict[str | None, JournalEntryValidationResult]:
    """Group postings and validate each group, keyed as the grouping is."""
    groups = group_postings_by_journal_entry(postings)
    results: dict[str | None, JournalEntryValidationResult] = {}
    for key, group in groups.items():
        with LogContext.bind(journal_entry_id=key):
            results[key] = validate_journal_entry(group)

    invalid = sum(1 for result in results.values() if not result.is_valid)
    logger.debug(
        "journal_entries_validated",
        extra={"entry_count": len(results), "invalid_count": invalid},
    )
    return results
