"""
Whole-document loading and validation.

A Luca document is the top-level ``lucaSchema`` object bundling accounts,
entities, categories, transactions and recurring data. Validating one runs
two independent checks:

1. the ``lucaSchema`` JSON schema over the whole document, and
2. double-entry balance over ``transactions`` grouped by journalEntryId.

Balance is checked even when the schema check fails, as long as
``transactions`` is a list of mappings, so one run reports both kinds of
problems. Postings without an integer ``amount`` are left out of the
balance check; the schema check reports them.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from luca_schema.dtos import JournalEntryValidationResult, SchemaValidationResult
from luca_schema.enums import SchemaName
from luca_schema.exceptions import DocumentLoadError
from luca_schema.journal import validate_all_journal_entries
from luca_schema.logging_config import get_logger
from luca_schema.validator import LucaValidator

logger = get_logger("document")

_JSON_SUFFIXES = (".json",)
_YAML_SUFFIXES = (".yaml", ".yml")


def load_document(path: str | Path) -> dict[str, Any]:
    """
    Read a document from a .json, .yaml or .yml file.

    Raises:
        DocumentLoadError: If the file is missing, unreadable, malformed,
            has an unsupported suffix, or does not hold a mapping.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in _JSON_SUFFIXES + _YAML_SUFFIXES:
        raise DocumentLoadError(str(path), f"unsupported file type {suffix!r}")

    try:
        with open(path, encoding="utf-8") as f:
            if suffix in _JSON_SUFFIXES:
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except OSError as exc:
        raise DocumentLoadError(str(path), exc.strerror or str(exc)) from exc
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DocumentLoadError(str(path), f"malformed content: {exc}") from exc

    if not isinstance(data, dict):
        raise DocumentLoadError(str(path), "top level must be an object")

    logger.debug("document_loaded", extra={"path": str(path), "format": suffix[1:]})
    return data


@dataclass(frozen=True)
class DocumentReport:
    """Outcome of validating one document."""

    schema_result: SchemaValidationResult
    journal_results: dict[str | None, JournalEntryValidationResult] = field(
        default_factory=dict
    )

    @property
    def invalid_journal_entries(self) -> dict[str | None, JournalEntryValidationResult]:
        return {k: r for k, r in self.journal_results.items() if not r.is_valid}

    @property
    def is_valid(self) -> bool:
        return self.schema_result.is_valid and not self.invalid_journal_entries

    def __bool__(self) -> bool:
        return self.is_valid

    def to_dict(self) -> dict[str, Any]:
        # JSON object keys must be strings; the ungrouped bucket is reported as null.
        return {
            "isValid": self.is_valid,
            "schema": self.schema_result.to_dict(),
            "journalEntries": [
                {"journalEntryId": key, **result.to_dict()}
                for key, result in self.journal_results.items()
            ],
        }


def _has_integer_amount(posting: Mapping[str, Any]) -> bool:
    amount = posting.get("amount")
    return isinstance(amount, int) and not isinstance(amount, bool)


def _postings(document: Mapping[str, Any]) -> list[Mapping[str, Any]] | None:
    transactions = document.get("transactions")
    if not isinstance(transactions, list):
        return None
    if not all(isinstance(t, Mapping) for t in transactions):
        return None

    usable = [t for t in transactions if _has_integer_amount(t)]
    if len(usable) != len(transactions):
        # The schema check already reports these; they cannot be summed.
        logger.warning(
            "document_postings_skipped",
            extra={"skipped_count": len(transactions) - len(usable)},
        )
    return usable


def validate_document(
    document: Mapping[str, Any],
    validator: LucaValidator,
    *,
    skip_ungrouped: bool = False,
) -> DocumentReport:
    """
    Validate a document's shape and the balance of its journal entries.

    Args:
        document: Parsed document mapping.
        validator: Validator holding the ``lucaSchema`` schema.
        skip_ungrouped: Leave postings without a journalEntryId out of the
            balance report.
    """
    schema_result = validator.validate(SchemaName.LUCA_SCHEMA, document)

    journal_results: dict[str | None, JournalEntryValidationResult] = {}
    postings = _postings(document)
    if postings is None:
        logger.warning("document_transactions_unusable")
    else:
        journal_results = validate_all_journal_entries(postings)
        if skip_ungrouped:
            journal_results.pop(None, None)

    report = DocumentReport(schema_result=schema_result, journal_results=journal_results)
    logger.info(
        "document_validated",
        extra={
            "is_valid": report.is_valid,
            "schema_issue_count": len(schema_result.issues),
            "journal_entry_count": len(journal_results),
            "invalid_journal_entry_count": len(report.invalid_journal_entries),
        },
    )
    return report
