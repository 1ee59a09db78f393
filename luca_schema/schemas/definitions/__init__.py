"""Record type definitions, one module per area of the data model."""

from luca_schema.schemas.definitions.account import ACCOUNT
from luca_schema.schemas.definitions.category import CATEGORY
from luca_schema.schemas.definitions.document import LUCA_SCHEMA
from luca_schema.schemas.definitions.entity import ENTITY
from luca_schema.schemas.definitions.recurring import (
    RECURRING_TRANSACTION,
    RECURRING_TRANSACTION_EVENT,
)
from luca_schema.schemas.definitions.transaction import TRANSACTION

ALL_DEFINITIONS = (
    ACCOUNT,
    CATEGORY,
    ENTITY,
    LUCA_SCHEMA,
    RECURRING_TRANSACTION,
    RECURRING_TRANSACTION_EVENT,
    TRANSACTION,
)

__all__ = [
    "ACCOUNT",
    "ALL_DEFINITIONS",
    "CATEGORY",
    "ENTITY",
    "LUCA_SCHEMA",
    "RECURRING_TRANSACTION",
    "RECURRING_TRANSACTION_EVENT",
    "TRANSACTION",
]
