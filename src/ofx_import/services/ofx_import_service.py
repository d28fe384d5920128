"""
Public entry points for OFX/QFX statement parsing.

The pipeline is load -> sniff -> split into blocks -> extract and normalize
fields -> validate. A single pass either returns every validated transaction
in source order or raises one of the typed errors in ofx_import.models.errors.
"""
import logging
from typing import List, Optional

from ofx_import.models.errors import UnrecognizedFormat
from ofx_import.models.import_result import OfxImportResult
from ofx_import.models.transaction import NormalizedTransaction
from ofx_import.services.record_validator import build_candidate, validate_candidates
from ofx_import.utils.block_extractor import extract_transaction_blocks
from ofx_import.utils.format_sniffer import detect_ofx_dialect, is_likely_ofx, preview
from ofx_import.utils.parser_config import DEFAULT_PARSER_CONFIG, ParserConfig
from ofx_import.utils.source_loader import OfxSource, read_as_text

logger = logging.getLogger(__name__)

__all__ = [
    'parse_ofx',
    'parse_ofx_report',
    'parse_ofx_file',
]


def parse_ofx_report(text: str, config: Optional[ParserConfig] = None) -> OfxImportResult:
    """
    Parse decoded OFX text and report how the document was understood.

    Args:
        text: Decoded OFX document (SGML or XML)
        config: Parser configuration, defaults to DEFAULT_PARSER_CONFIG

    Returns:
        OfxImportResult with the validated transactions and parse diagnostics

    Raises:
        UnrecognizedFormat: No top-level <OFX> marker
        NoTransactionsFound: No <STMTTRN> blocks in either form
        AllCandidatesInvalid: Blocks found but none had a usable date and amount
    """
    config = config or DEFAULT_PARSER_CONFIG

    if not is_likely_ofx(text):
        raise UnrecognizedFormat(preview(text, config.preview_length))

    dialect = detect_ofx_dialect(text)
    extraction = extract_transaction_blocks(text)
    candidates = [build_candidate(block) for block in extraction.blocks]
    transactions = validate_candidates(candidates, config)

    logger.debug(
        f"Parsed {len(transactions)} of {len(candidates)} transactions "
        f"(dialect={dialect.value}, strategy={extraction.strategy.value})"
    )
    return OfxImportResult(
        transactions=transactions,
        dialect=dialect,
        strategy=extraction.strategy,
        candidate_count=len(candidates),
        rejected_count=len(candidates) - len(transactions),
    )


def parse_ofx(text: str, config: Optional[ParserConfig] = None) -> List[NormalizedTransaction]:
    """Parse decoded OFX text into normalized transactions, in source order."""
    return parse_ofx_report(text, config).transactions


def parse_ofx_file(source: OfxSource, config: Optional[ParserConfig] = None) -> List[NormalizedTransaction]:
    """
    Read an OFX source (str, bytes, file handle or path) and parse it.

    Raises:
        SourceReadFailure: The source could not be read
        plus everything parse_ofx raises
    """
    config = config or DEFAULT_PARSER_CONFIG
    text = read_as_text(source, config)
    return parse_ofx(text, config)
