"""
Typed failures raised by the OFX import pipeline.

Every failure is terminal for a parse attempt. Each class carries a
``user_message`` with the remediation hint shown to the end user, while
``str(error)`` holds the technical detail.
"""
from typing import Any, List, Optional


class OfxImportError(Exception):
    """Base class for all OFX import failures"""
    user_message: str = "The statement file could not be imported."

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SourceReadFailure(OfxImportError):
    """The input could not be read at all (I/O level, not content related)."""
    user_message = "This file could not be read. Check that it exists and try again."

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class UnrecognizedFormat(OfxImportError):
    """The decoded text does not contain the top-level <OFX> marker."""
    user_message = "This does not look like an OFX/QFX statement. Confirm the file is the right export type."

    def __init__(self, preview: str):
        super().__init__(f"Invalid or unrecognized OFX file. Start of input: {preview!r}")
        self.preview = preview


class NoTransactionsFound(OfxImportError):
    """The <OFX> marker is present but no transaction block could be located."""
    user_message = (
        "No transactions were found. The file may be a different statement type "
        "(for example credit card instead of bank account) or it may be empty."
    )

    def __init__(self, scanned_length: int):
        super().__init__(
            f"No <STMTTRN> transaction blocks found in {scanned_length} characters of OFX content"
        )
        self.scanned_length = scanned_length


class AllCandidatesInvalid(OfxImportError):
    """Transaction blocks were found but none had a usable date and amount."""
    user_message = (
        "Transactions were found but none could be read. The file may use an unsupported "
        "dialect of OFX; check that this is really an export from your bank."
    )

    def __init__(self, candidate_count: int, rejected_sample: List[Any]):
        super().__init__(
            f"All {candidate_count} candidate transactions were rejected "
            f"(missing date or amount). Sample: {rejected_sample}"
        )
        self.candidate_count = candidate_count
        self.rejected_sample = rejected_sample
