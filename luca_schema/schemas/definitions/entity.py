"""Entity schema: the payors and payees transactions refer to."""

from luca_schema.enums import EntityStatus, EntityType, enum_values
from luca_schema.schemas.base import FieldSchema, FieldType, ObjectSchema

ENTITY = ObjectSchema(
    name="entity",
    description="A counterparty such as a bank account, retailer or person",
    fields=(
        FieldSchema(
            name="id",
            field_type=FieldType.UUID,
        ),
        FieldSchema(
            name="name",
            field_type=FieldType.STRING,
            min_length=1,
        ),
        FieldSchema(
            name="description",
            field_type=FieldType.STRING,
            nullable=True,
        ),
        FieldSchema(
            name="entityType",
            field_type=FieldType.STRING,
            allowed_values=tuple(enum_values(EntityType)),
        ),
        FieldSchema(
            name="entityStatus",
            field_type=FieldType.STRING,
            allowed_values=tuple(enum_values(EntityStatus)),
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
