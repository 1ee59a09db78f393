"""
Schema building blocks.

Provides immutable, hashable field and object definitions that render to
JSON Schema (Draft 2020-12). Definitions are written once in Python, with
enum constraints taken from ``luca_schema.enums``, and rendered on import.
This is part of the functional core - no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
SCHEMA_ID_PREFIX = "urn:luca-schema:"


class FieldType(str, Enum):
    """Supported field types in Luca schemas."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    DATE = "date"  # RFC 3339 full-date (YYYY-MM-DD)
    DATETIME = "datetime"  # RFC 3339 date-time
    UUID = "uuid"
    ARRAY = "array"  # Array of objects


_BASE_TYPES: dict[FieldType, dict[str, str]] = {
    FieldType.STRING: {"type": "string"},
    FieldType.INTEGER: {"type": "integer"},
    FieldType.BOOLEAN: {"type": "boolean"},
    FieldType.DATE: {"type": "string", "format": "date"},
    FieldType.DATETIME: {"type": "string", "format": "date-time"},
    FieldType.UUID: {"type": "string", "format": "uuid"},
    FieldType.ARRAY: {"type": "array"},
}


@dataclass(frozen=True)
class FieldSchema:
    """
    Schema definition for a single property.

    ``required`` controls presence of the key; ``nullable`` controls whether
    an explicit null is accepted. The two are independent.
    """

    name: str
    field_type: FieldType
    required: bool = True
    nullable: bool = False
    description: str | None = None

    # Numeric constraints
    min_value: int | None = None
    max_value: int | None = None
    non_zero: bool = False

    # String constraints
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None

    # Enum-like constraint, rendered in declaration order
    allowed_values: tuple[str, ...] | None = None

    # For ARRAY type
    item_schema: ObjectSchema | None = None
    min_items: int | None = None

    def __post_init__(self) -> None:
        if self.field_type == FieldType.ARRAY and self.item_schema is None:
            raise ValueError(
                f"Field '{self.name}' of type ARRAY must have item_schema"
            )
        if self.non_zero and self.field_type != FieldType.INTEGER:
            raise ValueError(f"Field '{self.name}': non_zero applies to INTEGER only")

    def to_json_schema(self) -> dict[str, Any]:
        """Render this field as a JSON Schema property."""
        out: dict[str, Any] = dict(_BASE_TYPES[self.field_type])

        if self.nullable:
            out["type"] = [out["type"], "null"]
        if self.description:
            out["description"] = self.description

        if self.min_value is not None:
            out["minimum"] = self.min_value
        if self.max_value is not None:
            out["maximum"] = self.max_value
        if self.non_zero:
            out["not"] = {"const": 0}

        if self.min_length is not None:
            out["minLength"] = self.min_length
        if self.max_length is not None:
            out["maxLength"] = self.max_length
        if self.pattern is not None:
            out["pattern"] = self.pattern

        if self.allowed_values is not None:
            values: list[Any] = list(self.allowed_values)
            if self.nullable:
                values.append(None)
            out["enum"] = values

        if self.item_schema is not None:
            out["items"] = self.item_schema.to_json_schema(root=False)
        if self.min_items is not None:
            out["minItems"] = self.min_items

        return out


@dataclass(frozen=True)
class ObjectSchema:
    """
    Complete schema definition for one record type.

    Immutable and hashable; ``to_json_schema()`` is deterministic.
    """

    name: str
    fields: tuple[FieldSchema, ...]
    description: str = ""
    additional_properties: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name is required")
        names = [f.name for f in self.fields]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Schema '{self.name}' has duplicate fields: {duplicates}")

    @property
    def schema_id(self) -> str:
        return f"{SCHEMA_ID_PREFIX}{self.name}"

    @property
    def required_fields(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields if f.required)

    def get_field(self, name: str) -> FieldSchema | None:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def to_json_schema(self, root: bool = True) -> dict[str, Any]:
        """
        Render as a JSON Schema object.

        Args:
            root: Include ``$schema``/``$id``/``title``. Embedded item
                schemas are rendered with root=False.
        """
        out: dict[str, Any] = {}
        if root:
            out["$schema"] = JSON_SCHEMA_DIALECT
            out["$id"] = self.schema_id
            out["title"] = self.name
        if self.description:
            out["description"] = self.description
        out["type"] = "object"
        out["properties"] = {f.name: f.to_json_schema() for f in self.fields}
        out["required"] = list(self.required_fields)
        out["additionalProperties"] = self.additional_properties
        return out
