"""
Models package for the OFX import parser.
"""

from .transaction import (
    NormalizedTransaction,
    CandidateRecord,
)

from .import_result import (
    BlockExtraction,
    ExtractionStrategy,
    OfxDialect,
    OfxImportResult,
)

from .errors import (
    OfxImportError,
    SourceReadFailure,
    UnrecognizedFormat,
    NoTransactionsFound,
    AllCandidatesInvalid,
)

__all__ = [
    'NormalizedTransaction',
    'CandidateRecord',
    'BlockExtraction',
    'ExtractionStrategy',
    'OfxDialect',
    'OfxImportResult',
    'OfxImportError',
    'SourceReadFailure',
    'UnrecognizedFormat',
    'NoTransactionsFound',
    'AllCandidatesInvalid',
]
