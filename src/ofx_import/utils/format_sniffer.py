"""
Cheap content checks run before committing to a full OFX parse.
"""
import re

from ofx_import.models.import_result import OfxDialect

OFX_MARKER = re.compile(r'<OFX[>\s]', re.IGNORECASE)
SGML_HEADER = re.compile(r'OFXHEADER\s*:|DATA\s*:\s*OFXSGML', re.IGNORECASE)
XML_DECLARATION = re.compile(r'<\?(?:xml|OFX)\b', re.IGNORECASE)


def is_likely_ofx(text: str) -> bool:
    """
    Return True if the text contains a top-level <OFX> marker.

    Deliberately permissive: the rest of the document is not validated so
    that messy real-world exports are not rejected up front.
    """
    if not text:
        return False
    return OFX_MARKER.search(text) is not None


def detect_ofx_dialect(text: str) -> OfxDialect:
    """
    Classify the physical encoding from the document header.

    Used for diagnostics only; parsing handles both encodings the same way.
    """
    if not text:
        return OfxDialect.UNKNOWN
    if SGML_HEADER.search(text):
        return OfxDialect.SGML
    if XML_DECLARATION.search(text):
        return OfxDialect.XML
    return OfxDialect.UNKNOWN


def preview(text: str, length: int) -> str:
    """Leading slice of the input for error messages."""
    if not text:
        return ''
    snippet = text[:length]
    return snippet + '...' if len(text) > length else snippet
