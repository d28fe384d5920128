"""
Converts raw OFX field strings into typed values.

Both helpers are total: they never raise on bad input.
"""
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional

EIGHT_DIGITS = re.compile(r'([0-9]{4})([0-9]{2})([0-9]{2})')
ASCII_NUMBER = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


def parse_ofx_date(raw: Optional[str]) -> Optional[date]:
    """
    Convert an OFX date such as ``20240131120000[-03:BRST]`` to a calendar date.

    Only the first run of eight digits is read, as YYYYMMDD. Time of day and
    timezone suffixes are ignored and no offset is applied: the civil date in
    the file is authoritative.

    Returns:
        The date, or None if there is no eight digit run or it is not a real date
    """
    if not raw:
        return None
    match = EIGHT_DIGITS.search(str(raw))
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_ofx_amount(raw: Optional[str]) -> Decimal:
    """
    Convert an OFX amount to a signed Decimal.

    A comma decimal separator (``123,45``) is accepted. Anything unparseable,
    including None, becomes zero; callers must check the raw field was present
    before trusting a zero.
    """
    if raw is None:
        return Decimal(0)
    text = str(raw).replace(',', '.', 1).strip()
    # Decimal alone would also take NaN, underscores and non-ASCII digits
    if not ASCII_NUMBER.fullmatch(text):
        return Decimal(0)
    try:
        return Decimal(text)
    except InvalidOperation:
        return Decimal(0)
