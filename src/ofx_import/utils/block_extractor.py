"""
Splits an OFX document into one raw text block per <STMTTRN> transaction.

Two strategies are tried in order:

1. Well-formed: explicit <STMTTRN>...</STMTTRN> pairs (XML and tidy SGML).
2. Heuristic: legacy SGML never closes <STMTTRN>, so a block runs from its
   opening tag up to whichever comes first of the next <STMTTRN>, the end of
   the <BANKTRANLIST>, the end of the <STMTRS>, or the end of the document.
"""
import logging
import re
from typing import List

from ofx_import.models.errors import NoTransactionsFound
from ofx_import.models.import_result import BlockExtraction, ExtractionStrategy

logger = logging.getLogger(__name__)

TRANSACTION_LIST = re.compile(r'<BANKTRANLIST>(.*?)</BANKTRANLIST>', re.IGNORECASE | re.DOTALL)
WELL_FORMED_TRANSACTION = re.compile(r'<STMTTRN>(.*?)</STMTTRN>', re.IGNORECASE | re.DOTALL)
UNCLOSED_TRANSACTION = re.compile(
    r'<STMTTRN>(.*?)(?=<STMTTRN>|</BANKTRANLIST>|</STMTRS>|\Z)',
    re.IGNORECASE | re.DOTALL
)


def find_transaction_list(text: str) -> str:
    """Return the contents of the first <BANKTRANLIST>, or an empty string if there is none."""
    match = TRANSACTION_LIST.search(text)
    return match.group(1) if match else ''


def split_well_formed(text: str) -> List[str]:
    return WELL_FORMED_TRANSACTION.findall(text)


def split_unclosed(text: str) -> List[str]:
    return UNCLOSED_TRANSACTION.findall(text)


def extract_transaction_blocks(text: str) -> BlockExtraction:
    """
    Extract raw transaction blocks in source order.

    Args:
        text: Decoded OFX document

    Returns:
        BlockExtraction tagged with the strategy that produced the blocks

    Raises:
        NoTransactionsFound: If neither strategy finds a single block
    """
    scope = find_transaction_list(text)
    scoped_to_list = bool(scope)
    if not scoped_to_list:
        logger.debug("No <BANKTRANLIST> container found, scanning whole document")
        scope = text

    blocks = split_well_formed(scope)
    if blocks:
        logger.debug(f"Found {len(blocks)} well-formed transaction blocks")
        return BlockExtraction(ExtractionStrategy.WELL_FORMED, blocks, scoped_to_list)

    blocks = split_unclosed(scope)
    if blocks:
        logger.debug(f"Found {len(blocks)} unclosed transaction blocks")
        return BlockExtraction(ExtractionStrategy.HEURISTIC, blocks, scoped_to_list)

    raise NoTransactionsFound(len(text))
