"""
Turns raw transaction blocks into candidate records and keeps the viable ones.
"""
import logging
from typing import List, Optional, Sequence

from ofx_import.models.errors import AllCandidatesInvalid
from ofx_import.models.transaction import CandidateRecord, NormalizedTransaction
from ofx_import.utils.field_extractor import (
    AMOUNT,
    DATE_POSTED,
    DATE_USER,
    EXTERNAL_ID,
    MEMO,
    PAYEE_NAME,
    TRANSACTION_TYPE,
    extract_field,
    extract_first_field,
)
from ofx_import.utils.normalizers import parse_ofx_amount, parse_ofx_date
from ofx_import.utils.parser_config import DEFAULT_PARSER_CONFIG, ParserConfig

logger = logging.getLogger(__name__)


def build_candidate(block: str) -> CandidateRecord:
    """Extract and normalize the fields of one transaction block."""
    raw_date = extract_first_field(block, DATE_POSTED, DATE_USER)
    raw_amount = extract_field(block, AMOUNT)
    description = extract_first_field(block, MEMO, PAYEE_NAME) or ''

    return CandidateRecord(
        date=parse_ofx_date(raw_date),
        amount=parse_ofx_amount(raw_amount),
        raw_amount=raw_amount,
        description=description,
        transaction_type_code=extract_field(block, TRANSACTION_TYPE) or '',
        external_id=extract_field(block, EXTERNAL_ID),
    )


def validate_candidates(candidates: Sequence[CandidateRecord],
                        config: Optional[ParserConfig] = None) -> List[NormalizedTransaction]:
    """
    Keep candidates with a valid date and a present amount, in order.

    A present amount of zero is valid; an absent amount is not.

    Raises:
        AllCandidatesInvalid: If there were candidates but none survived
    """
    config = config or DEFAULT_PARSER_CONFIG
    transactions: List[NormalizedTransaction] = []
    rejected: List[CandidateRecord] = []

    for candidate in candidates:
        if candidate.is_viable():
            transactions.append(candidate.to_transaction())
        else:
            rejected.append(candidate)

    if rejected:
        logger.debug(f"Rejected {len(rejected)} of {len(candidates)} candidate transactions")

    if candidates and not transactions:
        raise AllCandidatesInvalid(len(candidates), rejected[:config.rejected_sample_size])

    return transactions
