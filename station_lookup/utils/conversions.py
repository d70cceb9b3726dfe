"""
Value conversion helpers for reference data read as raw strings.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

FEET_TO_METERS = Decimal('0.3048')

_NON_DIGITS = re.compile(r'[^0-9]')
_DECIMAL = re.compile(r'[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?')


def is_blank(value: Optional[str]) -> bool:
    """True for a missing value or one made only of whitespace."""
    return value is None or not str(value).strip()


def parse_numeric(value: Optional[str]) -> Optional[float]:
    """
    Parse a finite decimal number.

    Only plain ASCII decimal notation with an optional exponent is
    accepted, so forms such as '4_0' or 'nan' are not numeric.

    Args:
        value: Raw cell value

    Returns:
        The number as a float, or None if the value is absent or not numeric
    """
    if is_blank(value):
        return None
    text = str(value).strip()
    if not _DECIMAL.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    return number


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(value.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def feet_to_meters(feet: int) -> int:
    """Convert feet to whole meters."""
    return round_half_up(Decimal(str(feet)) * FEET_TO_METERS)


def heading_from_ident(ident: Optional[str]) -> int:
    """
    Derive a runway end heading from its designator.

    The digits of the designator are read as a number of tens of degrees,
    so '09L' gives 90 and '22R' gives 220. A designator with no digits
    such as 'N' gives 0.

    Args:
        ident: Runway end designator

    Returns:
        Heading in degrees
    """
    digits = _NON_DIGITS.sub('', ident or '')
    if not digits:
        return 0
    return int(digits) * 10
