"""
DTOs -- Pure data transfer objects.

Responsibility:
    Defines the immutable values that flow between the schema validator,
    the journal core and callers: Posting (input), JournalEntryValidationResult
    (journal output), SchemaIssue and SchemaValidationResult (schema output).

Architecture position:
    Functional core -- zero I/O, no dependency on jsonschema. The validator
    converts library errors into SchemaIssue at its boundary.

Wire shape:
    Documents use camelCase keys (``entryType``, ``journalEntryId``).
    ``from_dict()`` / ``to_dict()`` are the only places that know about them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from luca_schema.enums import EntryType


class JournalEntryErrorCode(str, Enum):
    """
    Machine-readable reason a journal entry failed balance validation.

    Exactly one is reported per invalid entry, chosen in declaration order
    after NO_POSTINGS: NO_DEBITS, then NO_CREDITS, then UNBALANCED.
    """

    NO_POSTINGS = "NO_POSTINGS"
    NO_DEBITS = "NO_DEBITS"
    NO_CREDITS = "NO_CREDITS"
    UNBALANCED = "UNBALANCED"


@dataclass(frozen=True)
class Posting:
    """
    A single journal-entry line (a ``transaction`` in the document model).

    Contract:
        amount is an integer in minor units. entry_type is DEBIT or CREDIT.
        journal_entry_id links postings of one journal entry; None means
        the posting is ungrouped.

    Non-goals:
        - Does NOT validate its fields -- the schema validator does that
          before postings reach the journal core.
    """

    id: str
    amount: int
    entry_type: EntryType | str
    journal_entry_id: str | None = None
    payor_id: str | None = None
    payee_id: str | None = None
    category_id: str | None = None
    date: str | None = None
    description: str | None = None
    transaction_state: str | None = None

    _WIRE_KEYS = (
        ("id", "id"),
        ("amount", "amount"),
        ("entry_type", "entryType"),
        ("journal_entry_id", "journalEntryId"),
        ("payor_id", "payorId"),
        ("payee_id", "payeeId"),
        ("category_id", "categoryId"),
        ("date", "date"),
        ("description", "description"),
        ("transaction_state", "transactionState"),
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Posting:
        """Build a Posting from a camelCase document record."""
        values = {attr: data.get(key) for attr, key in cls._WIRE_KEYS}
        entry_type = values["entry_type"]
        if isinstance(entry_type, str) and entry_type in EntryType.__members__:
            values["entry_type"] = EntryType(entry_type)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Render as a camelCase document record, dropping unset fields."""
        out: dict[str, Any] = {}
        for attr, key in self._WIRE_KEYS:
            value = getattr(self, attr)
            if isinstance(value, Enum):
                value = value.value
            if value is not None or attr == "journal_entry_id":
                out[key] = value
        return out


@dataclass(frozen=True)
class JournalEntryValidationResult:
    """
    Outcome of checking one group of postings for double-entry balance.

    Contract:
        is_valid is True iff difference == 0 and both counts are positive.
        error and error_code are set iff is_valid is False.

    Non-goals:
        - Does NOT raise -- an unbalanced entry is an expected business
          outcome, returned for the caller to inspect.
    """

    is_valid: bool
    total_debits: int
    total_credits: int
    difference: int
    debit_count: int
    credit_count: int
    error: str | None = None
    error_code: JournalEntryErrorCode | None = None

    def __bool__(self) -> bool:
        return self.is_valid

    def to_dict(self) -> dict[str, Any]:
        """camelCase representation; ``error`` keys are omitted when valid."""
        out: dict[str, Any] = {
            "isValid": self.is_valid,
            "totalDebits": self.total_debits,
            "totalCredits": self.total_credits,
            "difference": self.difference,
            "debitCount": self.debit_count,
            "creditCount": self.credit_count,
        }
        if self.error is not None:
            out["error"] = self.error
        if self.error_code is not None:
            out["errorCode"] = self.error_code.value
        return out


@dataclass(frozen=True)
class SchemaIssue:
    """
    A single schema violation.

    instance_path is a JSON pointer into the validated data ("" for the
    root, "/transactions/0/amount" for nested values). params carries the
    keyword-specific details used to build suggestions.
    """

    keyword: str
    message: str
    instance_path: str = ""
    schema_path: str = ""
    params: Mapping[str, Any] = field(default_factory=dict)
    value: Any = None

    @property
    def field(self) -> str:
        """Pointer without its leading slash; the missing key for ``required``."""
        path = self.instance_path.lstrip("/")
        if self.keyword == "required" and "missingProperty" in self.params:
            missing = self.params["missingProperty"]
            return f"{path}/{missing}" if path else missing
        return path

    def to_dict(self) -> dict[str, Any]:
        return {
            "keyword": self.keyword,
            "message": self.message,
            "instancePath": self.instance_path,
            "schemaPath": self.schema_path,
            "params": dict(self.params),
        }


@dataclass(frozen=True)
class SchemaValidationResult:
    """
    Result of validating data against one named schema.

    Guarantees:
        - issues is always a tuple (never None)
        - bool(result) == result.is_valid
    """

    schema: str
    is_valid: bool
    issues: tuple[SchemaIssue, ...] = field(default_factory=tuple)

    @classmethod
    def success(cls, schema: str) -> SchemaValidationResult:
        return cls(schema=schema, is_valid=True, issues=())

    @classmethod
    def failure(cls, schema: str, *issues: SchemaIssue) -> SchemaValidationResult:
        return cls(schema=schema, is_valid=False, issues=tuple(issues))

    def __bool__(self) -> bool:
        return self.is_valid

    @property
    def keywords(self) -> frozenset[str]:
        """All failing keywords, for quick membership checks."""
        return frozenset(issue.keyword for issue in self.issues)

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema": self.schema,
            "isValid": self.is_valid,
            "issues": [issue.to_dict() for issue in self.issues],
        }
