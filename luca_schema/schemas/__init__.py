"""
JSON Schema definitions for the Luca data model.

``SCHEMAS`` maps each schema name (see ``SchemaName``) to its rendered
Draft 2020-12 schema. The mapping is read-only; use
``get_schema_definition()`` for a copy that can be modified.
"""

import copy
from types import MappingProxyType
from typing import Any, Mapping

from luca_schema.enums import SchemaName
from luca_schema.exceptions import SchemaNotFoundError
from luca_schema.schemas.base import (
    JSON_SCHEMA_DIALECT,
    FieldSchema,
    FieldType,
    ObjectSchema,
)
from luca_schema.schemas.definitions import ALL_DEFINITIONS

SCHEMAS: Mapping[str, Mapping[str, Any]] = MappingProxyType(
    {definition.name: definition.to_json_schema() for definition in ALL_DEFINITIONS}
)


def get_schema_definition(name: str | SchemaName) -> dict[str, Any]:
    """
    Return a deep copy of the named schema.

    Raises:
        SchemaNotFoundError: If no schema has that name.
    """
    key = name.value if isinstance(name, SchemaName) else name
    if key not in SCHEMAS:
        raise SchemaNotFoundError(key)
    return copy.deepcopy(dict(SCHEMAS[key]))


__all__ = [
    "JSON_SCHEMA_DIALECT",
    "SCHEMAS",
    "FieldSchema",
    "FieldType",
    "ObjectSchema",
    "get_schema_definition",
]
