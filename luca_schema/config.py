"""
Settings (``luca_schema.config``).

Responsibility
--------------
Loads the optional YAML settings file used by the CLI and by callers that
build a validator via ``LucaValidator.from_settings()``.

Failure modes
-------------
* Missing or unreadable file  -> ``ConfigurationError``.
* Malformed YAML or a non-mapping top level  -> ``ConfigurationError``.
* Unknown keys or wrongly typed values  -> ``ConfigurationError``; nothing
  is silently ignored.

Example file::

    assert_formats: true
    skip_ungrouped: false
    log_level: DEBUG
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from luca_schema.exceptions import ConfigurationError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LucaSettings:
    """
    Runtime settings.

    assert_formats: enforce ``format`` keywords (uuid, date, date-time).
    skip_ungrouped: leave the ``None`` journal bucket out of document reports.
    log_level: level passed to ``configure_logging()`` by the CLI.
    """

    assert_formats: bool = True
    skip_ungrouped: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, "
                f"got {self.log_level!r}"
            )
        object.__setattr__(self, "log_level", self.log_level.upper())

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level)


def parse_settings(data: dict[str, Any], path: str | None = None) -> LucaSettings:
    """
    Build LucaSettings from a parsed mapping.

    Raises:
        ConfigurationError: On unknown keys or wrongly typed values.
    """
    known = {f.name: f for f in fields(LucaSettings)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        raise ConfigurationError(f"Unknown settings: {', '.join(unknown)}", path)

    for key, value in data.items():
        expected = bool if known[key].type == "bool" else str
        if not isinstance(value, expected):
            raise ConfigurationError(
                f"Setting {key!r} must be {expected.__name__}, "
                f"got {type(value).__name__}",
                path,
            )
    return LucaSettings(**data)


def load_settings(path: str | Path | None = None) -> LucaSettings:
    """
    Load settings from a YAML file, or return defaults when path is None.

    An empty file yields the defaults.
    """
    if path is None:
        return LucaSettings()

    location = str(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigurationError(f"Cannot read settings: {exc}", location) from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Malformed settings YAML: {exc}", location) from exc

    if not isinstance(data, dict):
        raise ConfigurationError("Settings file must contain a mapping", location)
    return parse_settings(data, location)
