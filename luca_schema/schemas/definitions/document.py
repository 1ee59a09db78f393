"""Top-level document schema bundling every record type."""

from luca_schema.schemas.base import FieldSchema, FieldType, ObjectSchema
from luca_schema.schemas.definitions.account import ACCOUNT
from luca_schema.schemas.definitions.category import CATEGORY
from luca_schema.schemas.definitions.entity import ENTITY
from luca_schema.schemas.definitions.recurring import (
    RECURRING_TRANSACTION,
    RECURRING_TRANSACTION_EVENT,
)
from luca_schema.schemas.definitions.transaction import TRANSACTION

SCHEMA_VERSION_PATTERN = r"^[0-9]+\.[0-9]+\.[0-9]+$"

LUCA_SCHEMA = ObjectSchema(
    name="lucaSchema",
    description="A complete Luca financial data document",
    fields=(
        FieldSchema(
            name="schemaVersion",
            field_type=FieldType.STRING,
            pattern=SCHEMA_VERSION_PATTERN,
            description="Semantic version of the document format",
        ),
        FieldSchema(
            name="accounts",
            field_type=FieldType.ARRAY,
            required=False,
            item_schema=ACCOUNT,
        ),
        FieldSchema(
            name="entities",
            field_type=FieldType.ARRAY,
            item_schema=ENTITY,
        ),
        FieldSchema(
            name="categories",
            field_type=FieldType.ARRAY,
            item_schema=CATEGORY,
        ),
        FieldSchema(
            name="transactions",
            field_type=FieldType.ARRAY,
            item_schema=TRANSACTION,
        ),
        FieldSchema(
            name="recurringTransactions",
            field_type=FieldType.ARRAY,
            item_schema=RECURRING_TRANSACTION,
        ),
        FieldSchema(
            name="recurringTransactionEvents",
            field_type=FieldType.ARRAY,
            item_schema=RECURRING_TRANSACTION_EVENT,
        ),
    ),
)
