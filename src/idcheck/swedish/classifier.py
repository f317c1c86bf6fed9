"""
Classification of Swedish identifiers.

Tries, in order, and stops at the first match:
1. Personnummer: valid birth date and check digit
2. Samordningsnummer: valid birth date after subtracting 60 from the day,
   and check digit
3. Organisationsnummer: "16" prefix when 12+ characters, third digit group
   >= 20, and check digit

If no branch matches the identifier is INVALID. A malformed input raises
InvalidNumberFormatError before any branch runs.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from idcheck.swedish.dates import validate_date
from idcheck.swedish.format import ParsedIdentifier, parse_identifier
from idcheck.swedish.kinds import FailureReason, IdentifierKind
from idcheck.swedish.luhn import validate_check_digit
from idcheck.swedish.messages import failure_message
from idcheck.validation_log import NullRecorder, ValidationRecorder

logger = logging.getLogger(__name__)

COORDINATION_DAY_SHIFT = 6  # tens digit of day + 60
ORGANISATION_PREFIX = "16"


@dataclass
class BranchResult:
    """Outcome of one classification attempt."""

    kind: IdentifierKind
    checks: dict[str, bool] = field(default_factory=dict)
    reason: Optional[FailureReason] = None

    @property
    def passed(self) -> bool:
        return self.reason is None


@dataclass
class Classification:
    """Result of classifying a raw identifier."""

    raw: str
    kind: IdentifierKind
    attempts: list[BranchResult] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.kind != IdentifierKind.INVALID

    @property
    def failures(self) -> list[tuple[IdentifierKind, FailureReason]]:
        """(kind, reason) for every attempt that failed."""
        return [(a.kind, a.reason) for a in self.attempts if a.reason is not None]

    def to_dict(self) -> dict:
        return {
            "raw": self.raw,
            "kind": self.kind.value,
            "valid": self.is_valid,
            "attempts": [
                {
                    "kind": a.kind.value,
                    "checks": dict(a.checks),
                    "reason": a.reason.value if a.reason else None,
                }
                for a in self.attempts
            ],
        }


def shift_coordination_day(date_part: str, offset: int) -> str:
    """
    Return a copy of date_part with 60 subtracted from the day.

    Only the tens digit of the day is lowered. A day below 60 yields a
    non-digit character, which the date check rejects.
    """
    pos = 4 + offset
    shifted = chr(ord(date_part[pos]) - COORDINATION_DAY_SHIFT)
    return date_part[:pos] + shifted + date_part[pos + 1 :]


class IdentifierValidator:
    """
    Classifies identifiers and reports failed checks to a recorder.

    The validator holds no per-call state, so one instance can be shared.
    """

    def __init__(self, recorder: Optional[ValidationRecorder] = None):
        self.recorder = recorder if recorder is not None else NullRecorder()

    def classify(self, raw: str) -> Classification:
        """
        Determine which identifier kind raw represents.

        Raises:
            InvalidNumberFormatError: If raw fails the format gate
        """
        parsed = parse_identifier(raw)
        logger.debug(f"Classifying {raw} (offset={parsed.offset})")

        attempts = []
        for check in (
            self.check_personnummer,
            self.check_samordningsnummer,
            self.check_organisationsnummer,
        ):
            result = check(parsed)
            attempts.append(result)
            if result.passed:
                logger.debug(f"{raw} classified as {result.kind.value}")
                return Classification(raw=raw, kind=result.kind, attempts=attempts)

        logger.debug(f"{raw} matched no identifier kind")
        return Classification(raw=raw, kind=IdentifierKind.INVALID, attempts=attempts)

    def check_personnummer(self, parsed: ParsedIdentifier) -> BranchResult:
        result = BranchResult(kind=IdentifierKind.PERSONNUMMER)
        return self._check_dated(parsed, result, parsed.date_part, "date")

    def check_samordningsnummer(self, parsed: ParsedIdentifier) -> BranchResult:
        result = BranchResult(kind=IdentifierKind.SAMORDNINGSNUMMER)
        date_part = shift_coordination_day(parsed.date_part, parsed.offset)
        return self._check_dated(parsed, result, date_part, "shifted_date")

    def check_organisationsnummer(self, parsed: ParsedIdentifier) -> BranchResult:
        result = BranchResult(kind=IdentifierKind.ORGANISATIONSNUMMER)
        raw = parsed.raw

        # Only numbers with a century part carry the "16" prefix
        ok = len(raw) < 12 or raw.startswith(ORGANISATION_PREFIX)
        result.checks["leading_pair"] = ok
        if not ok:
            return self._fail(result, FailureReason.LEADING_PAIR_INVALID, raw)

        # Group number (third and fourth digit) must be >= 20
        ok = raw[2 + parsed.offset] not in ("0", "1")
        result.checks["middle_pair"] = ok
        if not ok:
            return self._fail(result, FailureReason.MIDDLE_PAIR_INVALID, raw)

        return self._check_digit(parsed, result)

    def _check_dated(
        self,
        parsed: ParsedIdentifier,
        result: BranchResult,
        date_part: str,
        check_name: str,
    ) -> BranchResult:
        ok = validate_date(date_part)
        result.checks[check_name] = ok
        if not ok:
            return self._fail(result, FailureReason.DATE_INVALID, parsed.raw)
        return self._check_digit(parsed, result)

    def _check_digit(self, parsed: ParsedIdentifier, result: BranchResult) -> BranchResult:
        ok = validate_check_digit(parsed.raw, parsed.offset)
        result.checks["checksum"] = ok
        if not ok:
            return self._fail(result, FailureReason.CHECKSUM_INVALID, parsed.raw)
        return result

    def _fail(self, result: BranchResult, reason: FailureReason, raw: str) -> BranchResult:
        result.reason = reason
        self.recorder.record(failure_message(result.kind, reason, raw))
        return result


def classify(raw: str, recorder: Optional[ValidationRecorder] = None) -> Classification:
    """Classify raw with a one-off validator."""
    return IdentifierValidator(recorder).classify(raw)
