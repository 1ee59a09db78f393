"""
Chart-of-accounts schema.

Accounts form a tree through ``parentAccountId``; the hierarchy helpers in
``luca_schema.hierarchy`` walk it. The schema only checks each node.
"""

from luca_schema.enums import (
    AccountCategory,
    AccountStatus,
    NormalBalance,
    enum_values,
)
from luca_schema.schemas.base import FieldSchema, FieldType, ObjectSchema

ACCOUNT_NUMBER_PATTERN = r"^[0-9]{4,10}$"

ACCOUNT = ObjectSchema(
    name="account",
    description="A node in the chart of accounts",
    fields=(
        FieldSchema(
            name="id",
            field_type=FieldType.UUID,
            description="Unique identifier for the account",
        ),
        FieldSchema(
            name="name",
            field_type=FieldType.STRING,
            min_length=1,
            max_length=255,
        ),
        FieldSchema(
            name="description",
            field_type=FieldType.STRING,
            nullable=True,
        ),
        FieldSchema(
            name="accountNumber",
            field_type=FieldType.STRING,
            pattern=ACCOUNT_NUMBER_PATTERN,
            description="Four to ten digit account number",
        ),
        FieldSchema(
            name="accountCategory",
            field_type=FieldType.STRING,
            allowed_values=tuple(enum_values(AccountCategory)),
        ),
        FieldSchema(
            name="normalBalance",
            field_type=FieldType.STRING,
            allowed_values=tuple(enum_values(NormalBalance)),
        ),
        FieldSchema(
            name="accountStatus",
            field_type=FieldType.STRING,
            allowed_values=tuple(enum_values(AccountStatus)),
        ),
        FieldSchema(
            name="parentAccountId",
            field_type=FieldType.UUID,
            nullable=True,
            description="Parent account; null for a root account",
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
