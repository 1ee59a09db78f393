"""Helpers that turn schema issues and exceptions into human-facing text."""

from __future__ import annotations

import traceback
from decimal import Decimal
from typing import Any, Sequence

from luca_schema.dtos import SchemaIssue
from luca_schema.exceptions import LucaError, LucaValidationError

__all__ = [
    "json_type_name",
    "format_validation_message",
    "generate_suggestion",
    "is_luca_error",
    "is_validation_error",
    "get_error_info",
]


def json_type_name(value: Any) -> str:
    """Name of the JSON type a Python value would serialize as."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float, Decimal)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def _is_fractional(value: Any) -> bool:
    if isinstance(value, float):
        return not value.is_integer()
    if isinstance(value, Decimal):
        return value.is_finite() and value != value.to_integral_value()
    return False


def _describe(issue: SchemaIssue) -> str:
    return f"{issue.instance_path.lstrip('/') or 'field'}: {issue.message}"


def format_validation_message(issues: Sequence[SchemaIssue]) -> str:
    """One-line summary of every issue, prefixed by its field path."""
    if not issues:
        return "Validation failed"
    if len(issues) == 1:
        return _describe(issues[0])
    joined = ", ".join(_describe(issue) for issue in issues)
    return f"Validation failed with {len(issues)} errors: {joined}"


def generate_suggestion(issue: SchemaIssue | None) -> str | None:
    """Suggest a fix for a single schema issue, or None if there is no hint."""
    if issue is None:
        return None

    params = issue.params
    value = issue.value

    if issue.keyword == "type":
        expected = params.get("type")
        if expected == "integer":
            if _is_fractional(value):
                return "Convert decimal amount to integer cents (e.g., 100.50 → 10050)"
            return f"Expected integer but received {json_type_name(value)}"
        return f"Expected {expected} but received {json_type_name(value)}"

    if issue.keyword == "format":
        fmt = params.get("format")
        if fmt == "uuid":
            return 'Provide a valid UUID (e.g., "123e4567-e89b-12d3-a456-426614174000")'
        if fmt == "date":
            return 'Provide a valid date in YYYY-MM-DD format (e.g., "2024-01-01")'
        if fmt == "date-time":
            return 'Provide an RFC 3339 timestamp (e.g., "2024-01-01T00:00:00Z")'
        return f"Expected format: {fmt}"

    if issue.keyword == "required":
        return f'The field "{params.get("missingProperty")}" is required'

    if issue.keyword in ("minimum", "exclusiveMinimum"):
        return f"Value must be at least {params.get('limit')}"

    if issue.keyword in ("maximum", "exclusiveMaximum"):
        return f"Value must be at most {params.get('limit')}"

    if issue.keyword == "enum":
        allowed = params.get("allowedValues")
        if isinstance(allowed, (list, tuple)):
            return f"Value must be one of: {', '.join(str(v) for v in allowed)}"
        return "Value must be one of: specified values"

    if issue.keyword == "not" and value == 0:
        return "Amount must be non-zero"

    return None


def is_luca_error(error: object) -> bool:
    return isinstance(error, LucaError)


def is_validation_error(error: object) -> bool:
    return isinstance(error, LucaValidationError)


def get_error_info(error: object) -> dict[str, Any]:
    """Flatten any exception (or other object) into a log-friendly dict."""
    if isinstance(error, LucaError):
        return error.to_dict()
    if isinstance(error, BaseException):
        return {
            "name": type(error).__name__,
            "message": str(error),
            "traceback": "".join(traceback.format_exception(error)),
        }
    return {"error": str(error)}
