"""
Turns a string, byte buffer, file handle or path into decoded OFX text.
"""
import logging
import os
from typing import IO, Optional, Union

from ofx_import.models.errors import SourceReadFailure
from ofx_import.utils.parser_config import DEFAULT_PARSER_CONFIG, ParserConfig

logger = logging.getLogger(__name__)

OfxSource = Union[str, bytes, bytearray, memoryview, IO, os.PathLike]


def decode_bytes(content: Union[bytes, bytearray, memoryview], fallback_encoding: str = 'latin-1') -> str:
    """
    Decode raw bytes as UTF-8, falling back to a one-byte-per-character decoding.

    The fallback is safe for parsing because only ASCII tag names and numeric
    literals are inspected downstream.
    """
    raw = bytes(content)
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError as e:
        logger.debug(f"UTF-8 decoding failed at byte {e.start}, falling back to {fallback_encoding}")
        return raw.decode(fallback_encoding, errors='replace')


def read_as_text(source: OfxSource, config: Optional[ParserConfig] = None) -> str:
    """
    Read an OFX source fully into memory as text.

    Args:
        source: A str (returned unchanged), bytes-like buffer, readable file
            handle (text or binary mode) or filesystem path
        config: Parser configuration, defaults to DEFAULT_PARSER_CONFIG

    Returns:
        Decoded document text

    Raises:
        SourceReadFailure: If the source cannot be read or is of an unsupported type
    """
    config = config or DEFAULT_PARSER_CONFIG

    if isinstance(source, str):
        return source

    if isinstance(source, (bytes, bytearray, memoryview)):
        return decode_bytes(source, config.fallback_encoding)

    if isinstance(source, os.PathLike):
        try:
            with open(source, 'rb') as f:
                content = f.read()
        except OSError as e:
            raise SourceReadFailure(f"Could not read OFX file {os.fspath(source)!r}: {e}", cause=e) from e
        logger.debug(f"Read {len(content)} bytes from {os.fspath(source)}")
        return decode_bytes(content, config.fallback_encoding)

    read = getattr(source, 'read', None)
    if callable(read):
        try:
            content = read()
        except (OSError, ValueError) as e:
            # ValueError covers reads on closed handles
            raise SourceReadFailure(f"Could not read OFX file handle: {e}", cause=e) from e
        if isinstance(content, str):
            return content
        if isinstance(content, (bytes, bytearray, memoryview)):
            return decode_bytes(content, config.fallback_encoding)
        raise SourceReadFailure(f"File handle returned unsupported content type {type(content).__name__}")

    raise SourceReadFailure(f"Unsupported OFX source type: {type(source).__name__}")
