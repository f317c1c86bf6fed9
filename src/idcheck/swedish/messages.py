"""Swedish message text for console output and the validation log."""

from idcheck.swedish.kinds import FailureReason, IdentifierKind

KIND_NAMES = {
    IdentifierKind.PERSONNUMMER: "personnummer",
    IdentifierKind.SAMORDNINGSNUMMER: "samordningsnummer",
    IdentifierKind.ORGANISATIONSNUMMER: "organisationsnummer",
}

# (check name, passed) -> progress line
CHECK_LINES = {
    ("date", True): "Giltigt datum",
    ("date", False): "Ogiltigt datum",
    ("shifted_date", True): "Giltigt datum",
    ("shifted_date", False): "Ogiltigt datum (-60)",
    ("checksum", True): "Giltig kontrollsiffra",
    ("checksum", False): "Ogiltig kontrollsiffra",
    ("leading_pair", True): "Giltigt inledande sifferpar",
    ("leading_pair", False): "Ogiltigt inledande sifferpar",
    ("middle_pair", True): "Mittersta sifferparet är minst 20",
    ("middle_pair", False): "Mittersta sifferparet är mindre än 20",
}

REASON_TEXT = {
    FailureReason.FORMAT_INVALID: "Ogiltigt format",
    FailureReason.DATE_INVALID: "Ogiltigt datum",
    FailureReason.CHECKSUM_INVALID: "Ogiltig kontrollsiffra",
    FailureReason.LEADING_PAIR_INVALID: "Ogiltigt inledande sifferpar",
    FailureReason.MIDDLE_PAIR_INVALID: "Mittersta sifferparet är mindre än 20",
}


def failure_message(kind: IdentifierKind, reason: FailureReason, raw: str) -> str:
    """Log line for a failed branch, e.g. 'Ogiltigt datum för personnummer: ...'."""
    return f"{REASON_TEXT[reason]} för {KIND_NAMES[kind]}: {raw}"


def check_line(name: str, passed: bool) -> str:
    return CHECK_LINES[(name, passed)]


def branch_header(kind: IdentifierKind) -> str:
    return f"Validerar {KIND_NAMES[kind]}:"


def verdict(raw: str, kind: IdentifierKind) -> str:
    if kind == IdentifierKind.INVALID:
        return f"Nummer {raw} är ogiltigt"
    return f"Nummer {raw} är ett giltigt {KIND_NAMES[kind]}"
