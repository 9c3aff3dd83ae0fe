"""Personal Identity Code Helpers.

The 11-digit personal identity code encodes the applicant's birth date and
a four-digit segment number:

    G YYMMDD SSSC
    | |      |
    | |      +-- last four digits: credit segment (0000-9999)
    | +--------- birth date
    +----------- century digit (5/6 -> 2000s, otherwise 1900s)

Checksum validation is not done here. The engine consumes any object
implementing IdentityCodeValidator; StructuralIdentityCodeValidator is the
default and only checks layout and birth date.
"""

from datetime import date
from typing import Protocol, runtime_checkable

from ..core.constants import CreditSegment, IdentityCodeFormat
from ..core.exceptions import InvalidIdentityCodeError


@runtime_checkable
class IdentityCodeValidator(Protocol):
    """Answers whether an identity code is structurally valid."""

    def is_valid(self, identity_code: str) -> bool:
        ...


def extract_segment(identity_code: str) -> int:
    """Extract the credit segment from the last four digits of the code.

    Args:
        identity_code: Personal identity code

    Returns:
        Segment number 0-9999

    Raises:
        InvalidIdentityCodeError: If the last four characters are not digits
    """
    tail = identity_code[-CreditSegment.SEGMENT_DIGITS:]
    if len(tail) != CreditSegment.SEGMENT_DIGITS or not (tail.isascii() and tail.isdigit()):
        raise InvalidIdentityCodeError()
    return int(tail)


def parse_birth_date(identity_code: str) -> date:
    """Parse the applicant's birth date from the identity code.

    Args:
        identity_code: Personal identity code

    Returns:
        Birth date encoded in the code

    Raises:
        InvalidIdentityCodeError: If the date fields are missing or not a calendar date
    """
    year_digits = identity_code[IdentityCodeFormat.YEAR_SLICE]
    month_digits = identity_code[IdentityCodeFormat.MONTH_SLICE]
    day_digits = identity_code[IdentityCodeFormat.DAY_SLICE]

    fields = (year_digits, month_digits, day_digits)
    if not identity_code or any(len(f) != 2 or not (f.isascii() and f.isdigit()) for f in fields):
        raise InvalidIdentityCodeError()

    if identity_code[0] in IdentityCodeFormat.CENTURY_2000_DIGITS:
        century = IdentityCodeFormat.CENTURY_2000_BASE
    else:
        century = IdentityCodeFormat.CENTURY_1900_BASE

    try:
        return date(century + int(year_digits), int(month_digits), int(day_digits))
    except ValueError as e:
        raise InvalidIdentityCodeError() from e


class StructuralIdentityCodeValidator:
    """Validates identity code layout without checking the check digit.

    A code is accepted when it is exactly 11 ASCII digits, starts with a
    century digit 1-6 and carries a real calendar birth date.
    """

    def is_valid(self, identity_code: str) -> bool:
        if not isinstance(identity_code, str):
            return False

        if len(identity_code) != IdentityCodeFormat.LENGTH:
            return False

        if not (identity_code.isascii() and identity_code.isdigit()):
            return False

        if identity_code[0] not in IdentityCodeFormat.VALID_CENTURY_DIGITS:
            return False

        try:
            parse_birth_date(identity_code)
        except InvalidIdentityCodeError:
            return False

        return True
