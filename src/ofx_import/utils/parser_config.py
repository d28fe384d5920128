"""
OFX parser configuration settings.

Only diagnostic and decoding knobs live here; parsing semantics are fixed.
Configurations are immutable and owned by the caller: library functions take
an explicit ``config`` and otherwise use ``DEFAULT_PARSER_CONFIG``. Only the
command line tool reads the environment.
"""
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for the OFX import pipeline."""

    preview_length: int = 200  # Characters of input echoed back in UnrecognizedFormat
    rejected_sample_size: int = 3  # Rejected candidates carried by AllCandidatesInvalid
    fallback_encoding: str = "latin-1"  # One byte per character, used when UTF-8 decoding fails

    def __post_init__(self):
        if self.preview_length < 0:
            raise ValueError(f"preview_length must be >= 0, got {self.preview_length}")
        if self.rejected_sample_size < 0:
            raise ValueError(f"rejected_sample_size must be >= 0, got {self.rejected_sample_size}")

    @classmethod
    def from_environment(cls) -> 'ParserConfig':
        """
        Create configuration from environment variables with fallback to defaults.

        Environment variables:
        - OFX_IMPORT_PREVIEW_LENGTH
        - OFX_IMPORT_REJECTED_SAMPLE_SIZE
        - OFX_IMPORT_FALLBACK_ENCODING
        """
        return cls(
            preview_length=int(os.getenv('OFX_IMPORT_PREVIEW_LENGTH', 200)),
            rejected_sample_size=int(os.getenv('OFX_IMPORT_REJECTED_SAMPLE_SIZE', 3)),
            fallback_encoding=os.getenv('OFX_IMPORT_FALLBACK_ENCODING', 'latin-1'),
        )


DEFAULT_PARSER_CONFIG = ParserConfig()
