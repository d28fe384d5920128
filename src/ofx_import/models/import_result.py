"""
Diagnostic result types for OFX parsing.
"""
import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ofx_import.models.transaction import NormalizedTransaction


class OfxDialect(str, enum.Enum):
    """Physical encoding of an OFX document"""
    SGML = "sgml"
    XML = "xml"
    UNKNOWN = "unknown"


class ExtractionStrategy(str, enum.Enum):
    """How transaction blocks were split out of the document"""
    WELL_FORMED = "well_formed"  # <STMTTRN>...</STMTTRN>
    HEURISTIC = "heuristic"      # unclosed <STMTTRN>, bounded by what follows


@dataclass(frozen=True)
class BlockExtraction:
    """Raw transaction blocks, in source order, tagged with the strategy that found them."""
    strategy: ExtractionStrategy
    blocks: List[str] = field(default_factory=list)
    scoped_to_list: bool = False

    def __len__(self) -> int:
        return len(self.blocks)


@dataclass
class OfxImportResult:
    """Validated transactions plus what the parser learned about the document."""
    transactions: List[NormalizedTransaction]
    dialect: OfxDialect
    strategy: ExtractionStrategy
    candidate_count: int
    rejected_count: int

    def summary(self) -> Dict[str, Any]:
        return {
            'dialect': self.dialect.value,
            'strategy': self.strategy.value,
            'candidateCount': self.candidate_count,
            'rejectedCount': self.rejected_count,
            'transactionCount': len(self.transactions),
        }
