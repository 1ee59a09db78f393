"""
Typed Exception Hierarchy for luca_schema.

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

All exceptions inherit from LucaError:

    LucaError (base)
    |
    +-- LucaValidationError      data does not match a schema
    +-- SchemaNotFoundError      no schema registered under the given name
    +-- LucaTypeError            a value has the wrong Python/JSON type
    +-- LucaRuntimeError         anything else that stops an operation
        +-- DocumentLoadError
        +-- ConfigurationError

Journal imbalance is NOT in this hierarchy. An unbalanced journal entry is
reported as a JournalEntryValidationResult with is_valid=False.

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Type              | Code                   | When Raised
------------------|------------------------|-----------------------------------
VALIDATION_ERROR  | VALIDATION_FAILED      | validate_or_raise() found issues
SCHEMA_ERROR      | INVALID_SCHEMA         | Unknown schema name
TYPE_ERROR        | TYPE_MISMATCH          | Caller passed a wrongly typed value
RUNTIME_ERROR     | RUNTIME_ERROR          | Generic runtime failure
                  | DOCUMENT_LOAD_FAILED   | Document file unreadable/unparsable
                  | INVALID_CONFIGURATION  | Settings file rejected

===============================================================================
HANDLING PATTERNS
===============================================================================

    try:
        validator.validate_or_raise("transaction", payload, {"userId": uid})
    except LucaValidationError as e:
        return {"error": e.code, "field": e.field, "hint": e.suggestion}

Every exception exposes ``to_dict()`` for structured logs and API bodies.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, Sequence

if TYPE_CHECKING:
    from luca_schema.dtos import SchemaIssue


class ErrorType(str, Enum):
    """Broad category of a LucaError."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    SCHEMA_ERROR = "SCHEMA_ERROR"
    TYPE_ERROR = "TYPE_ERROR"
    RUNTIME_ERROR = "RUNTIME_ERROR"


class ErrorSeverity(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class LucaError(Exception):
    """
    Base exception for all luca_schema errors.

    Subclasses set ``code``, ``error_type`` and ``severity`` as class
    attributes; instances may override ``code`` where one class covers
    several machine-readable reasons.
    """

    code: str = "LUCA_ERROR"
    error_type: ErrorType = ErrorType.RUNTIME_ERROR
    severity: ErrorSeverity = ErrorSeverity.HIGH

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        error_type: ErrorType | None = None,
        severity: ErrorSeverity | None = None,
        field: str | None = None,
        value: Any = None,
        suggestion: str | None = None,
        context: Mapping[str, Any] | None = None,
    ):
        if code is not None:
            self.code = code
        if error_type is not None:
            self.error_type = error_type
        if severity is not None:
            self.severity = severity
        self.message = message
        self.field = field
        self.value = value
        self.suggestion = suggestion
        self.context = dict(context) if context else {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Structured representation for logs and API responses."""
        return {
            "name": type(self).__name__,
            "message": self.message,
            "type": self.error_type.value,
            "severity": self.severity.value,
            "code": self.code,
            "field": self.field,
            "value": self.value,
            "suggestion": self.suggestion,
            "context": self.context,
        }


class LucaValidationError(LucaError):
    """
    Data failed schema validation.

    The first issue determines ``field``, ``value`` and ``suggestion``; the
    message summarises every issue.
    """

    code: str = "VALIDATION_FAILED"
    error_type: ErrorType = ErrorType.VALIDATION_ERROR
    severity: ErrorSeverity = ErrorSeverity.MEDIUM

    def __init__(
        self,
        issues: Sequence[SchemaIssue],
        context: Mapping[str, Any] | None = None,
    ):
        from luca_schema.error_handling import (
            format_validation_message,
            generate_suggestion,
        )

        self.issues: tuple[SchemaIssue, ...] = tuple(issues)
        primary = self.issues[0] if self.issues else None
        field = (primary.field or primary.schema_path) if primary else None
        super().__init__(
            format_validation_message(self.issues),
            field=field or "unknown",
            value=primary.value if primary else None,
            suggestion=generate_suggestion(primary),
            context=context,
        )

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out["issues"] = [issue.to_dict() for issue in self.issues]
        return out


class SchemaNotFoundError(LucaError):
    """No schema registered under the requested name."""

    code: str = "INVALID_SCHEMA"
    error_type: ErrorType = ErrorType.SCHEMA_ERROR
    severity: ErrorSeverity = ErrorSeverity.HIGH

    def __init__(self, schema_name: str, context: Mapping[str, Any] | None = None):
        self.schema_name = schema_name
        super().__init__(
            f"Schema not found: {schema_name}",
            field=schema_name,
            context=context,
        )


class LucaTypeError(LucaError):
    """A value has the wrong type for the operation."""

    code: str = "TYPE_MISMATCH"
    error_type: ErrorType = ErrorType.TYPE_ERROR
    severity: ErrorSeverity = ErrorSeverity.MEDIUM

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        expected_type: str | None = None,
        value: Any = None,
    ):
        self.expected_type = expected_type
        super().__init__(
            message,
            field=field,
            value=value,
            suggestion=f"Expected type: {expected_type}" if expected_type else None,
        )


class LucaRuntimeError(LucaError):
    """Generic runtime failure with a caller-chosen code."""

    code: str = "RUNTIME_ERROR"
    error_type: ErrorType = ErrorType.RUNTIME_ERROR
    severity: ErrorSeverity = ErrorSeverity.HIGH

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: Mapping[str, Any] | None = None,
    ):
        super().__init__(message, code=code, context=context)


class DocumentLoadError(LucaRuntimeError):
    """A document file could not be read or parsed into a mapping."""

    code: str = "DOCUMENT_LOAD_FAILED"

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(
            f"Cannot load document {path}: {reason}",
            context={"path": path},
        )


class ConfigurationError(LucaRuntimeError):
    """A settings file was rejected."""

    code: str = "INVALID_CONFIGURATION"

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message, context={"path": path} if path else None)
