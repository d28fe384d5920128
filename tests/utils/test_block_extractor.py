"""
Unit tests for splitting OFX documents into transaction blocks.
"""
import pytest

from ofx_import.models.errors import NoTransactionsFound
from ofx_import.models.import_result import ExtractionStrategy
from ofx_import.utils.block_extractor import (
    extract_transaction_blocks,
    find_transaction_list,
    split_unclosed,
    split_well_formed,
)
from tests.fixtures.ofx_samples import (
    COMPACT_UNCLOSED,
    COMPACT_WELL_FORMED,
    NO_TRANSACTIONS,
    SGML_CLOSED_TRANSACTIONS,
    SGML_STATEMENT,
    XML_STATEMENT,
)


class TestBlockExtractor:
    """Test cases for the well-formed-first, heuristic-fallback block splitter."""

    def test_well_formed_xml(self):
        extraction = extract_transaction_blocks(XML_STATEMENT)

        assert extraction.strategy == ExtractionStrategy.WELL_FORMED
        assert extraction.scoped_to_list is True
        assert len(extraction) == 2
        assert '<FITID>12345</FITID>' in extraction.blocks[0]
        assert '<FITID>12346</FITID>' in extraction.blocks[1]

    def test_sgml_with_closed_transactions_is_well_formed(self):
        extraction = extract_transaction_blocks(SGML_CLOSED_TRANSACTIONS)

        assert extraction.strategy == ExtractionStrategy.WELL_FORMED
        assert len(extraction) == 2

    def test_unclosed_sgml_uses_heuristic(self):
        extraction = extract_transaction_blocks(SGML_STATEMENT)

        assert extraction.strategy == ExtractionStrategy.HEURISTIC
        assert len(extraction) == 3
        assert '<MEMO>Market' in extraction.blocks[0]
        assert 'SALARY DEPOSIT' not in extraction.blocks[0]
        assert 'SALARY DEPOSIT' in extraction.blocks[1]

    def test_heuristic_stops_at_list_end(self):
        extraction = extract_transaction_blocks(SGML_STATEMENT)

        # Last block must not swallow the ledger balance after </BANKTRANLIST>
        assert 'BALAMT' not in extraction.blocks[-1]
        assert '<MEMO>Bus pass' in extraction.blocks[-1]

    def test_blocks_exclude_opening_marker(self):
        extraction = extract_transaction_blocks(COMPACT_UNCLOSED)

        for block in extraction.blocks:
            assert not block.upper().startswith('<STMTTRN>')

    def test_compact_well_formed(self):
        extraction = extract_transaction_blocks(COMPACT_WELL_FORMED)

        assert extraction.strategy == ExtractionStrategy.WELL_FORMED
        assert extraction.blocks == ['<TRNTYPE>DEBIT<DTPOSTED>20240115<TRNAMT>-45.90<MEMO>Market']

    def test_compact_unclosed_no_leakage(self):
        extraction = extract_transaction_blocks(COMPACT_UNCLOSED)

        assert extraction.strategy == ExtractionStrategy.HEURISTIC
        assert extraction.blocks == [
            '<TRNTYPE>DEBIT<DTPOSTED>20240115<TRNAMT>-45.90<MEMO>Market',
            '<TRNTYPE>CREDIT<DTPOSTED>20240116<TRNAMT>100.00<FITID>X2',
        ]

    def test_no_transaction_list_scans_whole_document(self):
        text = "<OFX><STMTRS><STMTTRN><TRNAMT>1.00<DTPOSTED>20240101</STMTRS></OFX>"
        extraction = extract_transaction_blocks(text)

        assert extraction.scoped_to_list is False
        assert extraction.strategy == ExtractionStrategy.HEURISTIC
        assert extraction.blocks == ['<TRNAMT>1.00<DTPOSTED>20240101']

    def test_unclosed_runs_to_end_of_document(self):
        text = "<OFX>\n<STMTTRN>\n<TRNAMT>1.00\n<DTPOSTED>20240101"
        extraction = extract_transaction_blocks(text)

        assert extraction.blocks == ['\n<TRNAMT>1.00\n<DTPOSTED>20240101']

    def test_transactions_outside_list_are_ignored(self):
        text = (
            "<OFX><STMTTRN><TRNAMT>9.99</STMTTRN>"
            "<BANKTRANLIST><STMTTRN><TRNAMT>1.00</STMTTRN></BANKTRANLIST></OFX>"
        )
        extraction = extract_transaction_blocks(text)

        assert extraction.scoped_to_list is True
        assert extraction.blocks == ['<TRNAMT>1.00']

    def test_case_insensitive_markers(self):
        text = "<ofx><banktranlist><stmttrn><trnamt>1.00</stmttrn></banktranlist></ofx>"
        extraction = extract_transaction_blocks(text)

        assert extraction.blocks == ['<trnamt>1.00']

    def test_no_transactions_raises(self):
        with pytest.raises(NoTransactionsFound) as exc_info:
            extract_transaction_blocks(NO_TRANSACTIONS)

        assert exc_info.value.scanned_length == len(NO_TRANSACTIONS)
        assert 'STMTTRN' in str(exc_info.value)


class TestSplitHelpers:
    def test_find_transaction_list_missing(self):
        assert find_transaction_list("<OFX></OFX>") == ''

    def test_split_well_formed_is_non_overlapping(self):
        text = "<STMTTRN>a</STMTTRN><STMTTRN>b</STMTTRN>"
        assert split_well_formed(text) == ['a', 'b']

    def test_split_unclosed_stops_at_statement_end(self):
        text = "<STMTTRN>a</STMTRS><STMTTRN>b"
        assert split_unclosed(text) == ['a', 'b']
