"""
Strict calendar date validation for the date part of an identifier.

Two-digit years resolve to 2000-2099, so leap years are computed on 20YY
("000229" is valid, "010229" is not). Four-digit years run 0000-9999.
Months and days never roll over.
"""

import calendar

from idcheck.swedish.format import DIGITS


def validate_date(date_digits: str) -> bool:
    """
    Check that 6 (YYMMDD) or 8 (YYYYMMDD) digits form a real calendar date.

    Returns False for any other length, non-digits, or out-of-range
    month/day. Never raises.
    """
    if len(date_digits) not in (6, 8):
        return False
    if any(c not in DIGITS for c in date_digits):
        return False

    if len(date_digits) == 8:
        year = int(date_digits[:4])
    else:
        year = 2000 + int(date_digits[:2])
    month = int(date_digits[-4:-2])
    day = int(date_digits[-2:])

    # Proleptic calendar: year 0000 exists and is a leap year
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= calendar.monthrange(year, month)[1]
