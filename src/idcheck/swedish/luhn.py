"""
Luhn check digit (kontrollsiffra) for Swedish identifiers.

The digits are weighted 2, 1, 2, 1, ... from the left. A '+' or '-' is
skipped without advancing the weighting.
"""

from idcheck.swedish.format import DIGITS


def luhn_checksum(body: str) -> int:
    """
    Calculate the Luhn check digit for a digit sequence.

    The Luhn algorithm:
    1. Double every other digit, starting with the first
    2. If doubling results in > 9, subtract 9
    3. Sum all digits
    4. Checksum is (10 - (sum % 10)) % 10

    Separators in body are ignored and do not flip the doubling.
    """
    total = 0
    double = True
    for char in body:
        if char not in DIGITS:
            continue
        d = int(char)
        if double:
            d *= 2
            if d > 9:
                d -= 9
        total += d
        double = not double
    return (10 - (total % 10)) % 10


def validate_check_digit(number: str, offset: int = 0) -> bool:
    """
    Verify the final character of number as a Luhn check digit.

    Args:
        number: Identifier including separator and check digit
        offset: Number of leading century digits to skip (0 or 2)

    Returns:
        True if the last character equals the computed check digit
    """
    if len(number) <= offset or number[-1] not in DIGITS:
        return False
    return luhn_checksum(number[offset:-1]) == int(number[-1])
