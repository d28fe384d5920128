"""
Pulls named scalar fields out of a single raw transaction block.

Both physical forms are supported for every lookup, in this order:

- open tag only (SGML):   <TRNAMT>-45.90
- open and close (XML):   <TRNAMT>-45.90</TRNAMT>

Tag names are matched case-insensitively. Each field is resolved on its own,
so a block that mixes the two forms still yields every field.
"""
import re
from functools import lru_cache
from typing import Optional, Tuple

# Fields read from each <STMTTRN> block
TRANSACTION_TYPE = 'TRNTYPE'
DATE_POSTED = 'DTPOSTED'
DATE_USER = 'DTUSER'
AMOUNT = 'TRNAMT'
MEMO = 'MEMO'
PAYEE_NAME = 'NAME'
EXTERNAL_ID = 'FITID'


@lru_cache(maxsize=64)
def _field_patterns(name: str) -> Tuple[re.Pattern, re.Pattern]:
    tag = re.escape(name)
    open_only = re.compile(rf'<{tag}>([^\r\n<]*)', re.IGNORECASE)
    open_close = re.compile(rf'<{tag}>(.*?)</{tag}>', re.IGNORECASE | re.DOTALL)
    return open_only, open_close


def extract_field(block: str, name: str) -> Optional[str]:
    """
    Return the trimmed value of a field, or None if it is absent or blank.

    A form that matches but yields only whitespace is treated as not found and
    the next form is tried, so XML that puts the value on its own line
    (``<MEMO>\\n  Market\\n</MEMO>``) still resolves.
    """
    for pattern in _field_patterns(name):
        match = pattern.search(block)
        if match:
            value = match.group(1).strip()
            if value:
                return value
    return None


def extract_first_field(block: str, *names: str) -> Optional[str]:
    """Return the first non-blank value among several field names, in preference order."""
    for name in names:
        value = extract_field(block, name)
        if value is not None:
            return value
    return None
