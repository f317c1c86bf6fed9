"""
Structural format checks for Swedish identifiers.

Accepted shapes (K = check digit):
- YYMMDDXXXK      (10 characters)
- YYMMDD-XXXK     (11 characters, '-' or '+')
- YYYYMMDDXXXK    (12 characters)
- YYYYMMDD-XXXK   (13 characters, '-' or '+')

The format gate runs before any date or checksum check.
"""

from dataclasses import dataclass
from typing import Optional

from idcheck.swedish.kinds import FailureReason

MIN_LENGTH = 10
MAX_LENGTH = 13

SEPARATORS = ("-", "+")
DIGITS = "0123456789"

CANONICAL_FORMATS = ("YYMMDDXXXK", "YYMMDD-XXXK", "YYYYMMDDXXXK", "YYYYMMDD-XXXK")

# Separator position by total length
SEPARATOR_POSITIONS = {11: 6, 13: 8}


class InvalidNumberFormatError(ValueError):
    """Raised when the input does not have a valid identifier format."""

    reason = FailureReason.FORMAT_INVALID

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw


LENGTH_MESSAGE = "Ogiltigt format, numret måste innehålla mellan 10 och 13 tecken"
SHAPE_MESSAGE = (
    "Ogiltigt format: Numret måste följa något av formaten "
    f"{CANONICAL_FORMATS[0]}, {CANONICAL_FORMATS[1]}, "
    f"{CANONICAL_FORMATS[2]} eller {CANONICAL_FORMATS[3]}"
)


@dataclass(frozen=True)
class ParsedIdentifier:
    """Format-checked view of a raw identifier."""

    raw: str
    digits: str  # raw without separator
    separator: Optional[str]
    offset: int  # 2 when the year has four digits, else 0

    @property
    def date_part(self) -> str:
        """Leading YYMMDD or YYYYMMDD characters."""
        return self.raw[: 6 + self.offset]

    @property
    def has_century(self) -> bool:
        return self.offset == 2


def compute_offset(raw: str) -> int:
    """Return 2 for inputs with a four-digit year (12-13 chars), else 0."""
    return 2 if len(raw) >= 12 else 0


def validate_format(raw: str) -> None:
    """
    Validate length and character composition of an identifier.

    A '+' or '-' is accepted only directly before the last four characters
    (index 6 for 11 characters, index 8 for 13). A digit in that position is
    also accepted. Every other character must be an ASCII digit.

    Raises:
        InvalidNumberFormatError: If the length or any character is invalid
    """
    if len(raw) < MIN_LENGTH or len(raw) > MAX_LENGTH:
        raise InvalidNumberFormatError(LENGTH_MESSAGE, raw)

    special_pos = SEPARATOR_POSITIONS.get(len(raw))
    for i, char in enumerate(raw):
        if i == special_pos and char in SEPARATORS:
            continue
        if char not in DIGITS:
            raise InvalidNumberFormatError(SHAPE_MESSAGE, raw)


def parse_identifier(raw: str) -> ParsedIdentifier:
    """Run the format gate and build a ParsedIdentifier."""
    validate_format(raw)

    special_pos = SEPARATOR_POSITIONS.get(len(raw))
    separator = None
    if special_pos is not None and raw[special_pos] in SEPARATORS:
        separator = raw[special_pos]

    return ParsedIdentifier(
        raw=raw,
        digits="".join(c for c in raw if c in DIGITS),
        separator=separator,
        offset=compute_offset(raw),
    )
