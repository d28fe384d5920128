"""
OFX/QFX bank statement import parser.

Converts legacy SGML and modern XML OFX exports into an ordered list of
NormalizedTransaction records, or raises a typed OfxImportError.
"""

from .models import (
    NormalizedTransaction,
    OfxImportResult,
    OfxDialect,
    ExtractionStrategy,
    OfxImportError,
    SourceReadFailure,
    UnrecognizedFormat,
    NoTransactionsFound,
    AllCandidatesInvalid,
)

from .services.ofx_import_service import (
    parse_ofx,
    parse_ofx_file,
    parse_ofx_report,
)

from .utils.parser_config import ParserConfig

__all__ = [
    'parse_ofx',
    'parse_ofx_file',
    'parse_ofx_report',
    'ParserConfig',
    'NormalizedTransaction',
    'OfxImportResult',
    'OfxDialect',
    'ExtractionStrategy',
    'OfxImportError',
    'SourceReadFailure',
    'UnrecognizedFormat',
    'NoTransactionsFound',
    'AllCandidatesInvalid',
]
