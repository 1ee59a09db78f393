"""
LucaValidator -- schema validation over the Luca schema set.

Responsibility:
    Compiles every schema once at construction and validates data against a
    schema chosen by name. Library errors (jsonschema.ValidationError) are
    converted to SchemaIssue values at this boundary so nothing downstream
    depends on jsonschema.

Lifecycle:
    Construct explicitly and pass the instance to whatever needs it. The
    instance holds no mutable state after __init__ and may be shared across
    threads. There is deliberately no module-level default instance.

Failure modes:
    - A schema that fails meta-validation is logged (schema_invalid) and
      left unregistered; later lookups of that name raise SchemaNotFoundError.
    - Unknown schema name -> SchemaNotFoundError.
    - validate_or_raise() on invalid data -> LucaValidationError.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError
from jsonschema.exceptions import ValidationError as JsonSchemaError

from luca_schema.dtos import SchemaIssue, SchemaValidationResult
from luca_schema.enums import SchemaName
from luca_schema.exceptions import LucaValidationError, SchemaNotFoundError
from luca_schema.logging_config import LogContext, get_logger
from luca_schema.schemas import SCHEMAS

if TYPE_CHECKING:
    from luca_schema.config import LucaSettings

logger = get_logger("validator")


def _pointer(parts: Iterable[Any]) -> str:
    """Render a path deque as a JSON pointer ("" for the root)."""
    return "".join(
        "/" + str(part).replace("~", "~0").replace("/", "~1") for part in parts
    )


def _missing_property(error: JsonSchemaError) -> str | None:
    # jsonschema yields one error per missing key, worded "'key' is a required property"
    instance = error.instance if isinstance(error.instance, Mapping) else {}
    for prop in error.validator_value:
        if prop not in instance and error.message.startswith(repr(prop)):
            return prop
    return None


def _params_for(error: JsonSchemaError) -> dict[str, Any]:
    """Keyword-specific details, named after the AJV error params."""
    keyword = error.validator
    value = error.validator_value

    if keyword == "required":
        return {"missingProperty": _missing_property(error)}
    if keyword == "type":
        if isinstance(value, list):
            non_null = [t for t in value if t != "null"]
            value = non_null[0] if len(non_null) == 1 else value
        return {"type": value}
    if keyword == "format":
        return {"format": value}
    if keyword == "enum":
        return {"allowedValues": list(value)}
    if keyword in ("minimum", "maximum", "exclusiveMinimum", "exclusiveMaximum"):
        return {"limit": value}
    if keyword in ("minLength", "maxLength", "minItems", "maxItems"):
        return {"limit": value}
    if keyword == "pattern":
        return {"pattern": value}
    if keyword == "additionalProperties" and isinstance(error.instance, Mapping):
        known = error.schema.get("properties", {})
        return {"unexpected": sorted(k for k in error.instance if k not in known)}
    return {}


def issue_from_error(error: JsonSchemaError) -> SchemaIssue:
    """Convert a jsonschema error into a SchemaIssue."""
    keyword = str(error.validator)
    return SchemaIssue(
        keyword=keyword,
        message=error.message,
        instance_path=_pointer(error.absolute_path),
        schema_path="#" + _pointer(error.absolute_schema_path),
        params=MappingProxyType(_params_for(error)),
        value=None if keyword == "required" else error.instance,
    )


def _schema_key(name: str | SchemaName) -> str:
    return name.value if isinstance(name, SchemaName) else name


class LucaValidator:
    """
    Validates records and documents against named JSON schemas.

    Usage:
        validator = LucaValidator()
        result = validator.validate("transaction", payload)
        if not result:
            for issue in result.issues:
                print(issue.field, issue.message)

        validator.validate_or_raise("account", account, {"userId": uid})
    """

    def __init__(
        self,
        schemas: Mapping[str, Mapping[str, Any]] | None = None,
        *,
        assert_formats: bool = True,
    ):
        source = SCHEMAS if schemas is None else schemas
        format_checker = Draft202012Validator.FORMAT_CHECKER if assert_formats else None

        compiled: dict[str, Draft202012Validator] = {}
        for name, schema in source.items():
            key = _schema_key(name)
            schema_copy = copy.deepcopy(dict(schema))
            try:
                Draft202012Validator.check_schema(schema_copy)
            except SchemaError as exc:
                logger.error(
                    "schema_invalid",
                    extra={"schema_name": key, "reason": exc.message},
                )
                continue
            compiled[key] = Draft202012Validator(
                schema_copy, format_checker=format_checker
            )

        self._validators: Mapping[str, Draft202012Validator] = MappingProxyType(compiled)
        self.assert_formats = assert_formats

        logger.debug(
            "validator_constructed",
            extra={
                "schema_names": sorted(compiled),
                "assert_formats": assert_formats,
            },
        )

    @classmethod
    def from_settings(cls, settings: LucaSettings) -> LucaValidator:
        """Build a validator over the built-in schemas using settings."""
        return cls(assert_formats=settings.assert_formats)

    @property
    def schema_names(self) -> tuple[str, ...]:
        return tuple(sorted(self._validators))

    def has_schema(self, name: str | SchemaName) -> bool:
        return _schema_key(name) in self._validators

    def _get(self, name: str | SchemaName) -> Draft202012Validator:
        key = _schema_key(name)
        try:
            return self._validators[key]
        except KeyError:
            raise SchemaNotFoundError(key) from None

    def validate(self, name: str | SchemaName, data: Any) -> SchemaValidationResult:
        """
        Validate data against the named schema.

        Returns:
            SchemaValidationResult with issues ordered by instance path,
            then schema path.

        Raises:
            SchemaNotFoundError: If no schema is registered under name.
        """
        key = _schema_key(name)
        validator = self._get(key)

        with LogContext.bind(schema=key):
            issues = sorted(
                (issue_from_error(error) for error in validator.iter_errors(data)),
                key=lambda issue: (issue.instance_path, issue.schema_path),
            )

            if issues:
                logger.warning(
                    "schema_validation_failed",
                    extra={
                        "schema_name": key,
                        "issue_count": len(issues),
                        "keywords": sorted({i.keyword for i in issues}),
                    },
                )
                return SchemaValidationResult.failure(key, *issues)

            logger.debug("schema_validation_passed", extra={"schema_name": key})
        return SchemaValidationResult.success(key)

    def is_valid(self, name: str | SchemaName, data: Any) -> bool:
        return self.validate(name, data).is_valid

    def validate_or_raise(
        self,
        name: str | SchemaName,
        data: Any,
        context: Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Validate data and return it unchanged, or raise.

        Raises:
            SchemaNotFoundError: If no schema is registered under name.
            LucaValidationError: If data does not match; its context holds
                the schema name plus the caller's context.
        """
        key = _schema_key(name)
        if key not in self._validators:
            raise SchemaNotFoundError(key, context=context)

        result = self.validate(key, data)
        if not result.is_valid:
            raise LucaValidationError(
                result.issues, {"schema": key, **(context or {})}
            )
        return data

    @staticmethod
    def check_schema(schema: Mapping[str, Any]) -> bool:
        """Whether a raw schema is itself a valid Draft 2020-12 schema."""
        try:
            Draft202012Validator.check_schema(dict(schema))
        except SchemaError:
            return False
        return True
