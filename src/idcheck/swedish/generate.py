"""
Generate valid Swedish identifiers for testing purposes.
"""

from datetime import date

from idcheck.swedish.luhn import luhn_checksum


def _assemble(date_part: str, tail: str, separator: str) -> str:
    return f"{date_part}{separator}{tail}"


def generate_personnummer(
    birth_date: date,
    birth_number: int = 1,
    century: bool = True,
    separator: str = "",
    day_shift: int = 0,
) -> str:
    """
    Generate a valid personnummer.

    Args:
        birth_date: Date of birth
        birth_number: Birth number (0-999), odd for male, even for female
        century: Use YYYYMMDD (True) or YYMMDD (False)
        separator: '', '-' or '+'
        day_shift: Added to the day (60 for samordningsnummer)

    Returns:
        Personnummer with correct check digit
    """
    if not 0 <= birth_number <= 999:
        raise ValueError("Birth number must be between 0 and 999")

    date_part = f"{birth_date:%Y%m}{birth_date.day + day_shift:02d}"
    birth_str = f"{birth_number:03d}"

    # Check digit covers YYMMDDNNN regardless of century
    checksum = luhn_checksum(date_part[2:] + birth_str)

    if not century:
        date_part = date_part[2:]
    return _assemble(date_part, f"{birth_str}{checksum}", separator)


def generate_samordningsnummer(
    birth_date: date,
    birth_number: int = 1,
    century: bool = True,
    separator: str = "",
) -> str:
    """Generate a valid samordningsnummer (day + 60)."""
    return generate_personnummer(
        birth_date,
        birth_number=birth_number,
        century=century,
        separator=separator,
        day_shift=60,
    )


def generate_organisationsnummer(
    body: str, prefix: bool = False, separator: str = ""
) -> str:
    """
    Generate a valid organisationsnummer from its first nine digits.

    Args:
        body: Nine digits, third digit 2-9 (group number >= 20)
        prefix: Prepend the '16' century prefix
        separator: '', '-' or '+'

    Returns:
        Organisationsnummer with correct check digit
    """
    if len(body) != 9 or not body.isdigit():
        raise ValueError("Body must be exactly nine digits")

    number = body + str(luhn_checksum(body))
    head = ("16" if prefix else "") + number[:6]
    return _assemble(head, number[6:], separator)
