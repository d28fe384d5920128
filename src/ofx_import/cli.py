"""
Command line tool: parse one OFX/QFX statement and print its transactions as JSON.

    ofx-import statement.ofx --direction debit --report
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ofx_import.models.errors import OfxImportError, SourceReadFailure
from ofx_import.models.transaction import NormalizedTransaction
from ofx_import.services.ofx_import_service import parse_ofx_report
from ofx_import.utils.logging_config import configure_logging
from ofx_import.utils.parser_config import ParserConfig
from ofx_import.utils.source_loader import read_as_text

logger = logging.getLogger(__name__)

EXIT_READ_FAILURE = 1
EXIT_PARSE_FAILURE = 2

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def filter_by_direction(transactions: List[NormalizedTransaction], direction: str) -> List[NormalizedTransaction]:
    """Keep outgoing (debit, amount < 0), incoming (credit, amount > 0) or all transactions."""
    if direction == 'debit':
        return [t for t in transactions if t.amount < 0]
    if direction == 'credit':
        return [t for t in transactions if t.amount > 0]
    return list(transactions)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ofx-import',
        description='Parse an OFX/QFX bank statement (.ofx, .qfx, .ofc, .xml, .txt) into JSON transactions'
    )
    parser.add_argument('path', type=Path, help='Statement file to parse')
    parser.add_argument(
        '--direction',
        choices=['all', 'debit', 'credit'],
        default='all',
        help='Only output debits (negative amounts) or credits (positive amounts)'
    )
    parser.add_argument(
        '--report',
        action='store_true',
        help='Wrap the output with dialect, strategy and rejection counts'
    )
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help='Logging level (defaults to LOG_LEVEL or INFO)'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    config = ParserConfig.from_environment()

    try:
        text = read_as_text(args.path, config)
        result = parse_ofx_report(text, config)
    except SourceReadFailure as e:
        logger.error(f"Error reading {args.path}: {e}")
        print(e.user_message, file=sys.stderr)
        return EXIT_READ_FAILURE
    except OfxImportError as e:
        logger.error(f"Error parsing {args.path}: {e}")
        print(e.user_message, file=sys.stderr)
        return EXIT_PARSE_FAILURE

    transactions = filter_by_direction(result.transactions, args.direction)
    logger.info(f"Parsed {len(result.transactions)} transactions from {args.path}, {len(transactions)} after filtering")

    rows = [t.to_flat_map() for t in transactions]
    if args.report:
        output = dict(result.summary(), transactions=rows)
    else:
        output = rows
    print(json.dumps(output, indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
