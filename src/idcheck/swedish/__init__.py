"""Swedish identifier validation: personnummer, samordningsnummer and organisationsnummer."""

from idcheck.swedish.kinds import FailureReason, IdentifierKind
from idcheck.swedish.format import (
    CANONICAL_FORMATS,
    InvalidNumberFormatError,
    ParsedIdentifier,
    compute_offset,
    parse_identifier,
    validate_format,
)
from idcheck.swedish.dates import validate_date
from idcheck.swedish.luhn import luhn_checksum, validate_check_digit
from idcheck.swedish.classifier import (
    BranchResult,
    Classification,
    IdentifierValidator,
    classify,
    shift_coordination_day,
)
from idcheck.swedish.generate import (
    generate_organisationsnummer,
    generate_personnummer,
    generate_samordningsnummer,
)

__all__ = [
    # Kinds
    "FailureReason",
    "IdentifierKind",
    # Format
    "CANONICAL_FORMATS",
    "InvalidNumberFormatError",
    "ParsedIdentifier",
    "compute_offset",
    "parse_identifier",
    "validate_format",
    # Date and checksum
    "validate_date",
    "luhn_checksum",
    "validate_check_digit",
    # Classification
    "BranchResult",
    "Classification",
    "IdentifierValidator",
    "classify",
    "shift_coordination_day",
    # Generation
    "generate_organisationsnummer",
    "generate_personnummer",
    "generate_samordningsnummer",
]
