"""
Closed value sets of the Luca data model.

Every enum is a ``str`` Enum whose values are the exact strings used on the
wire, so members compare equal to the raw document values and serialize
without conversion. The schema definitions derive their ``enum`` constraints
from these classes; adding a member here widens the schema too.
"""

from enum import Enum, unique


@unique
class AccountCategory(str, Enum):
    """Chart-of-accounts categories (Assets = Liabilities + Equity)."""

    ASSETS = "ASSETS"
    LIABILITIES = "LIABILITIES"
    EQUITY = "EQUITY"
    REVENUE = "REVENUE"
    EXPENSES = "EXPENSES"


@unique
class NormalBalance(str, Enum):
    """Side that increases an account: DEBIT for assets/expenses, else CREDIT."""

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


@unique
class AccountStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    CLOSED = "CLOSED"


@unique
class EntityType(str, Enum):
    """Kinds of counterparties a transaction can name as payor or payee."""

    ACCOUNT = "ACCOUNT"
    RETAILER = "RETAILER"
    SERVICE = "SERVICE"
    INDIVIDUAL = "INDIVIDUAL"
    UTILITY = "UTILITY"
    GOVERNMENT = "GOVERNMENT"


@unique
class EntityStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"
    DELETED = "DELETED"
    CLOSED = "CLOSED"


@unique
class CategoryType(str, Enum):
    """Origin of a category: shipped default, edited default, or user-made."""

    DEFAULT = "DEFAULT"
    MODIFIED = "MODIFIED"
    CUSTOM = "CUSTOM"


@unique
class TransactionState(str, Enum):
    PLANNED = "PLANNED"
    SCHEDULED = "SCHEDULED"
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"
    DISPUTED = "DISPUTED"
    REFUNDED = "REFUNDED"
    TENTATIVE = "TENTATIVE"
    UPCOMING = "UPCOMING"
    DELETED = "DELETED"


@unique
class EntryType(str, Enum):
    """
    Side of a posting.

    Exactly two values exist in double-entry bookkeeping. The journal core
    sums amounts per side; a balanced entry has equal totals.
    """

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


@unique
class RecurringTransactionFrequency(str, Enum):
    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"


@unique
class RecurringTransactionState(str, Enum):
    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


@unique
class RecurringTransactionEventStatus(str, Enum):
    """State of one materialised occurrence that diverged from its template."""

    MODIFIED = "MODIFIED"
    DELETED = "DELETED"


@unique
class SchemaName(str, Enum):
    """Names under which schemas are registered with the validator."""

    ACCOUNT = "account"
    CATEGORY = "category"
    ENTITY = "entity"
    LUCA_SCHEMA = "lucaSchema"
    RECURRING_TRANSACTION = "recurringTransaction"
    RECURRING_TRANSACTION_EVENT = "recurringTransactionEvent"
    TRANSACTION = "transaction"


def enum_values(enum_cls: type[Enum]) -> list[str]:
    """Member values in declaration order."""
    return [member.value for member in enum_cls]
