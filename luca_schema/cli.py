"""
luca-validate -- validate a Luca document file.

Usage:
    luca-validate budget.json
    luca-validate budget.yaml --format json
    luca-validate budget.json --config settings.yaml --log-level DEBUG

Exit codes:
    0  document is valid
    1  document has schema issues or unbalanced journal entries
    2  document or settings could not be loaded
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from typing import TextIO

from luca_schema.config import LucaSettings, load_settings
from luca_schema.document import DocumentReport, load_document, validate_document
from luca_schema.error_handling import generate_suggestion
from luca_schema.exceptions import ConfigurationError, DocumentLoadError
from luca_schema.logging_config import LogContext, configure_logging, get_logger
from luca_schema.validator import LucaValidator

logger = get_logger("cli")

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_LOAD_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="luca-validate",
        description="Validate a Luca document against its schema and check "
        "that every journal entry balances.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  luca-validate budget.json\n"
            "  luca-validate budget.yaml --format json\n"
        ),
    )
    parser.add_argument("path", help="Document file (.json, .yaml or .yml)")
    parser.add_argument(
        "--config", type=str, default=None,
        help="YAML settings file",
    )
    parser.add_argument(
        "--format", choices=("text", "json"), default="text", dest="output_format",
        help="Report format (default: text)",
    )
    parser.add_argument(
        "--log-level", type=str, default=None,
        help="Override the settings log level (DEBUG, INFO, WARNING, ...)",
    )
    return parser


def _print_text(report: DocumentReport, path: str, out: TextIO) -> None:
    status = "VALID" if report.is_valid else "INVALID"
    print(f"{path}: {status}", file=out)

    for issue in report.schema_result.issues:
        print(f"  SCHEMA  {issue.field or '(root)'}: {issue.message}", file=out)
        hint = generate_suggestion(issue)
        if hint:
            print(f"          hint: {hint}", file=out)

    for key, result in report.invalid_journal_entries.items():
        label = key if key is not None else "(ungrouped)"
        print(f"  JOURNAL {label}: {result.error}", file=out)

    entries = len(report.journal_results)
    invalid = len(report.invalid_journal_entries)
    print(
        f"  {len(report.schema_result.issues)} schema issue(s), "
        f"{invalid} of {entries} journal entr{'y' if entries == 1 else 'ies'} invalid",
        file=out,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config) if args.config else LucaSettings()
        if args.log_level:
            settings = LucaSettings(
                assert_formats=settings.assert_formats,
                skip_ungrouped=settings.skip_ungrouped,
                log_level=args.log_level,
            )
    except ConfigurationError as exc:
        print(f"ERROR: {exc.message}", file=sys.stderr)
        return EXIT_LOAD_FAILED

    configure_logging(level=settings.numeric_log_level)

    with LogContext.bind(document_id=args.path):
        try:
            document = load_document(args.path)
        except DocumentLoadError as exc:
            logger.error("document_load_failed", extra={"reason": exc.reason})
            print(f"ERROR: {exc.message}", file=sys.stderr)
            return EXIT_LOAD_FAILED

        validator = LucaValidator.from_settings(settings)
        report = validate_document(
            document, validator, skip_ungrouped=settings.skip_ungrouped
        )

    if args.output_format == "json":
        print(json.dumps(report.to_dict(), indent=2, default=str))
    else:
        _print_text(report, args.path, sys.stdout)

    return EXIT_VALID if report.is_valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
