"""
luca_schema -- validation for a double-entry personal finance data model.

Schema validation of accounts, entities, categories, transactions and
recurring transactions, plus balance checks for the journal entries formed
by grouping transactions on their journalEntryId.

    from luca_schema import LucaValidator, validate_all_journal_entries

    validator = LucaValidator()
    validator.validate_or_raise("transaction", posting)
    results = validate_all_journal_entries(document["transactions"])
"""

from luca_schema.config import LucaSettings, load_settings
from luca_schema.dates import is_date_string_fixable, normalize_date_string
from luca_schema.document import DocumentReport, load_document, validate_document
from luca_schema.dtos import (
    JournalEntryErrorCode,
    JournalEntryValidationResult,
    Posting,
    SchemaIssue,
    SchemaValidationResult,
)
from luca_schema.enums import (
    AccountCategory,
    AccountStatus,
    CategoryType,
    EntityStatus,
    EntityType,
    EntryType,
    NormalBalance,
    RecurringTransactionEventStatus,
    RecurringTransactionFrequency,
    RecurringTransactionState,
    SchemaName,
    TransactionState,
    enum_values,
)
from luca_schema.error_handling import (
    format_validation_message,
    generate_suggestion,
    get_error_info,
    is_luca_error,
    is_validation_error,
)
from luca_schema.exceptions import (
    ConfigurationError,
    DocumentLoadError,
    ErrorSeverity,
    ErrorType,
    LucaError,
    LucaRuntimeError,
    LucaTypeError,
    LucaValidationError,
    SchemaNotFoundError,
)
from luca_schema.hierarchy import (
    get_account_ancestors,
    get_account_children,
    get_account_depth,
    get_account_descendants,
    get_account_path,
    get_accounts_by_category,
    get_root_accounts,
    is_leaf_account,
)
from luca_schema.journal import (
    group_postings_by_journal_entry,
    group_transactions_by_journal_entry,
    validate_all_journal_entries,
    validate_journal_entry,
)
from luca_schema.money import dollars_to_minor_units, minor_units_to_dollars
from luca_schema.schemas import SCHEMAS, get_schema_definition
from luca_schema.validator import LucaValidator

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Journal
    "validate_journal_entry",
    "group_postings_by_journal_entry",
    "group_transactions_by_journal_entry",
    "validate_all_journal_entries",
    # DTOs
    "Posting",
    "JournalEntryErrorCode",
    "JournalEntryValidationResult",
    "SchemaIssue",
    "SchemaValidationResult",
    # Schemas and validation
    "SCHEMAS",
    "get_schema_definition",
    "LucaValidator",
    # Enums
    "AccountCategory",
    "AccountStatus",
    "CategoryType",
    "EntityStatus",
    "EntityType",
    "EntryType",
    "NormalBalance",
    "RecurringTransactionEventStatus",
    "RecurringTransactionFrequency",
    "RecurringTransactionState",
    "SchemaName",
    "TransactionState",
    "enum_values",
    # Errors
    "ErrorSeverity",
    "ErrorType",
    "LucaError",
    "LucaValidationError",
    "SchemaNotFoundError",
    "LucaTypeError",
    "LucaRuntimeError",
    "DocumentLoadError",
    "ConfigurationError",
    "format_validation_message",
    "generate_suggestion",
    "get_error_info",
    "is_luca_error",
    "is_validation_error",
    # Hierarchy
    "get_account_ancestors",
    "get_account_children",
    "get_account_depth",
    "get_account_descendants",
    "get_account_path",
    "get_accounts_by_category",
    "get_root_accounts",
    "is_leaf_account",
    # Money and dates
    "dollars_to_minor_units",
    "minor_units_to_dollars",
    "normalize_date_string",
    "is_date_string_fixable",
    # Documents and settings
    "DocumentReport",
    "load_document",
    "validate_document",
    "LucaSettings",
    "load_settings",
]
