"""Identifier kinds and failure reasons."""

from enum import Enum


class IdentifierKind(str, Enum):
    """Result of classifying an identifier."""

    PERSONNUMMER = "PERSONNUMMER"
    SAMORDNINGSNUMMER = "SAMORDNINGSNUMMER"  # Coordination number, day + 60
    ORGANISATIONSNUMMER = "ORGANISATIONSNUMMER"
    INVALID = "INVALID"


class FailureReason(str, Enum):
    """Why a check failed."""

    FORMAT_INVALID = "FORMAT_INVALID"
    DATE_INVALID = "DATE_INVALID"
    CHECKSUM_INVALID = "CHECKSUM_INVALID"
    LEADING_PAIR_INVALID = "LEADING_PAIR_INVALID"
    MIDDLE_PAIR_INVALID = "MIDDLE_PAIR_INVALID"
