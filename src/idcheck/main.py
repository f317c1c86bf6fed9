#!/usr/bin/env python3
"""
idcheck - CLI entry point

Validates one Swedish identifier and reports whether it is a
personnummer, samordningsnummer or organisationsnummer.

Usage:
    idcheck 811218-9876
    idcheck 198112789873 --quiet
    idcheck 165560360793 --json
    python -m idcheck 5560360793 --no-log-file

Exit codes:
    0  valid identifier
    1  well-formed but not a valid identifier
    2  invalid format or missing argument
"""

import argparse
import json
import logging
import sys
from typing import Optional

from idcheck.config import settings
from idcheck.swedish.classifier import Classification, IdentifierValidator
from idcheck.swedish.format import InvalidNumberFormatError
from idcheck.swedish.messages import branch_header, check_line, verdict
from idcheck.validation_log import FileRecorder, NullRecorder, ValidationRecorder

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_FORMAT_ERROR = 2

RULE = "-" * 42
USAGE_HINT = "Argument saknas!\nAnvändning: idcheck <nummer>"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="idcheck",
        description="Validera personnummer, samordningsnummer och organisationsnummer",
    )
    parser.add_argument(
        "number",
        nargs="?",
        help="Number to validate, e.g. YYMMDD-XXXK or YYYYMMDDXXXK",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help=f"Validation log file (default: {settings.log_file})",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Do not write failed checks to a log file",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the verdict",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the classification as JSON",
    )
    return parser


def print_report(classification: Classification, verbose: bool = True) -> None:
    """Print per-check progress lines and the verdict."""
    if verbose:
        for attempt in classification.attempts:
            print(f"\n{branch_header(attempt.kind)}")
            for name, passed in attempt.checks.items():
                print(f"    - {check_line(name, passed)}")
        print()
    print(verdict(classification.raw, classification.kind))


def run(number: str, recorder: ValidationRecorder, verbose: bool, as_json: bool) -> int:
    """Validate number and print the result. Returns the exit code."""
    validator = IdentifierValidator(recorder)

    if verbose and not as_json:
        print(RULE)
        print(f"Påbörjar validering av nummer: {number}")

    try:
        classification = validator.classify(number)
    except InvalidNumberFormatError as e:
        logger.info(f"Format check failed for {number}: {e}")
        recorder.record(f"{e}: {number}")
        if as_json:
            print(json.dumps({"raw": number, "valid": False, "error": str(e)}, ensure_ascii=False))
        else:
            if verbose:
                print("    - Numret är av giltigt format: False")
            print(f"Fel: {e}")
        return EXIT_FORMAT_ERROR

    if as_json:
        print(json.dumps(classification.to_dict(), ensure_ascii=False, indent=2))
    else:
        if verbose:
            print("    - Numret är av giltigt format: True")
        print_report(classification, verbose=verbose)

    return EXIT_VALID if classification.is_valid else EXIT_INVALID


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.number is None:
        print(USAGE_HINT)
        return EXIT_FORMAT_ERROR

    verbose = settings.verbose and not args.quiet

    # An explicit --log-file wins over IDCHECK_LOG_TO_FILE=false
    if args.no_log_file or not (settings.log_to_file or args.log_file):
        return run(args.number, NullRecorder(), verbose, args.json)

    log_file = args.log_file or settings.log_file
    try:
        recorder = FileRecorder(log_file)
    except OSError as e:
        logger.error(f"Could not open log file {log_file}: {e}")
        print("Kunde inte skapa loggfilen.")
        return run(args.number, NullRecorder(), verbose, args.json)

    with recorder:
        return run(args.number, recorder, verbose, args.json)


if __name__ == "__main__":
    sys.exit(main())
