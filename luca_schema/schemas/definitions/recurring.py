"""
Recurring transaction schemas.

A recurring transaction is a template that fires every ``interval`` units of
``frequency`` from ``startOn`` until ``endOn`` or ``occurrences`` runs out.
A recurring transaction event records one occurrence that was edited or
deleted relative to the template.
"""

from luca_schema.enums import (
    RecurringTransactionEventStatus,
    RecurringTransactionFrequency,
    RecurringTransactionState,
    enum_values,
)
from luca_schema.schemas.base import FieldSchema, FieldType, ObjectSchema

# ============================================================================
# recurringTransaction - template for repeating transactions
# ============================================================================
RECURRING_TRANSACTION = ObjectSchema(
    name="recurringTransaction",
    description="Template for a transaction that repeats on a schedule",
    fields=(
        FieldSchema(
            name="id",
            field_type=FieldType.UUID,
        ),
        FieldSchema(
            name="payorId",
            field_type=FieldType.UUID,
        ),
        FieldSchema(
            name="payeeId",
            field_type=FieldType.UUID,
        ),
        FieldSchema(
            name="categoryId",
            field_type=FieldType.UUID,
            nullable=True,
        ),
        FieldSchema(
            name="amount",
            field_type=FieldType.INTEGER,
            description="Amount per occurrence in minor units",
        ),
        FieldSchema(
            name="description",
            field_type=FieldType.STRING,
        ),
        FieldSchema(
            name="frequency",
            field_type=FieldType.STRING,
            allowed_values=tuple(enum_values(RecurringTransactionFrequency)),
        ),
        FieldSchema(
            name="interval",
            field_type=FieldType.INTEGER,
            min_value=1,
            description="Number of frequency units between occurrences",
        ),
        FieldSchema(
            name="occurrences",
            field_type=FieldType.INTEGER,
            nullable=True,
            min_value=1,
            description="Total occurrences; null means unbounded",
        ),
        FieldSchema(
            name="startOn",
            field_type=FieldType.DATE,
        ),
        FieldSchema(
            name="endOn",
            field_type=FieldType.DATE,
            nullable=True,
        ),
        FieldSchema(
            name="recurringTransactionState",
            field_type=FieldType.STRING,
            allowed_values=tuple(enum_values(RecurringTransactionState)),
        ),
        FieldSchema(
            name="createdAt",
            field_type=FieldType.DATETIME,
        ),
        FieldSchema(
            name="updatedAt",
            field_type=FieldType.DATETIME,
            nullable=True,
        ),
    ),
)

# ============================================================================
# recurringTransactionEvent - one diverging occurrence
# ============================================================================
RECURRING_TRANSACTION_EVENT = ObjectSchema(
    name="recurringTransactionEvent",
    description="An occurrence of a recurring transaction that was modified or deleted",
    fields=(
        FieldSchema(
            name="id",
            field_type=FieldType.UUID,
        ),
        FieldSchema(
            name="transactionId",
            field_type=FieldType.UUID,
            nullable=True,
            description="Concrete transaction replacing the occurrence, if any",
        ),
        FieldSchema(
            name="recurringTransactionId",
            field_type=FieldType.UUID,
        ),
        FieldSchema(
            name="expectedDate",
            field_type=FieldType.DATE,
        ),
        FieldSchema(
            name="eventState",
            field_type=FieldType.STRING,
            allowed_values=tuple(enum_values(RecurringTransactionEventStatus)),
        ),
        FieldSchema(
            name="createdAt",
            field_type=FieldType.DATETIME,
        ),
        FieldSchema(
            name="updatedAt",
            field_type=FieldType.DATETIME,
            nullable=True,
        ),
    ),
)
