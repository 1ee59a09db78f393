"""
Transaction (posting) schema.

A transaction record is one journal-entry line. Amounts are signed integers
in minor units and may not be zero; ``entryType`` says which side of the
entry the line is on, and ``journalEntryId`` ties the lines of one journal
entry together. Balance across lines is checked by ``luca_schema.journal``,
not here.
"""

from luca_schema.enums import EntryType, TransactionState, enum_values
from luca_schema.schemas.base import FieldSchema, FieldType, ObjectSchema

TRANSACTION = ObjectSchema(
    name="transaction",
    description="A single posting (journal-entry line)",
    fields=(
        FieldSchema(
            name="id",
            field_type=FieldType.UUID,
        ),
        FieldSchema(
            name="payorId",
            field_type=FieldType.UUID,
            description="Entity the money comes from",
        ),
        FieldSchema(
            name="payeeId",
            field_type=FieldType.UUID,
            description="Entity the money goes to",
        ),
        FieldSchema(
            name="categoryId",
            field_type=FieldType.UUID,
            nullable=True,
        ),
        FieldSchema(
            name="amount",
            field_type=FieldType.INTEGER,
            non_zero=True,
            description="Signed amount in minor units (e.g. cents)",
        ),
        FieldSchema(
            name="date",
            field_type=FieldType.DATE,
        ),
        FieldSchema(
            name="description",
            field_type=FieldType.STRING,
        ),
        FieldSchema(
            name="transactionState",
            field_type=FieldType.STRING,
            allowed_values=tuple(enum_values(TransactionState)),
        ),
        FieldSchema(
            name="entryType",
            field_type=FieldType.STRING,
            allowed_values=tuple(enum_values(EntryType)),
        ),
        FieldSchema(
            name="journalEntryId",
            field_type=FieldType.UUID,
            required=False,
            nullable=True,
            description="Links the postings of one journal entry",
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
