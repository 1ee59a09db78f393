"""Date-string normalisation for document ``date`` fields."""

import re
from datetime import date
from typing import Any

_CANONICAL = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_SLASHED = re.compile(r"^(\d{4})/(\d{2})/(\d{2})$")


def _parse(value: str, pattern: re.Pattern[str]) -> date | None:
    match = pattern.match(value)
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def normalize_date_string(value: Any) -> str | None:
    """
    Return ``value`` as a YYYY-MM-DD string, or None.

    Canonical YYYY-MM-DD strings come back unchanged; YYYY/MM/DD strings are
    rewritten with dashes. Anything else, including impossible calendar
    dates such as 2024-02-30, yields None.
    """
    if not isinstance(value, str):
        return None
    if _parse(value, _CANONICAL) is not None:
        return value
    parsed = _parse(value, _SLASHED)
    if parsed is None:
        return None
    return parsed.isoformat()


def is_date_string_fixable(value: Any) -> bool:
    """True only for a valid slash-form date that normalisation would rewrite."""
    normalized = normalize_date_string(value)
    return normalized is not None and normalized != value
