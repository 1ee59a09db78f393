"""Category schema."""

from luca_schema.enums import CategoryType, enum_values
from luca_schema.schemas.base import FieldSchema, FieldType, ObjectSchema

CATEGORY = ObjectSchema(
    name="category",
    description="A transaction category, optionally nested under a parent",
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
            name="parentId",
            field_type=FieldType.UUID,
            nullable=True,
        ),
        FieldSchema(
            name="defaultCategoryId",
            field_type=FieldType.UUID,
            required=False,
            nullable=True,
            description="Default category this one was derived from",
        ),
        FieldSchema(
            name="categoryType",
            field_type=FieldType.STRING,
            allowed_values=tuple(enum_values(CategoryType)),
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
