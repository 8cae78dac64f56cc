# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Hex text encoding/decoding for LEB128 byte sequences.

Output is upper-case, two characters per byte, with no separators or
prefix. Input is accepted in either case but must otherwise be bare hex.
"""

import logging
import string
from typing import Optional

from .errors import CodecError, InvalidHexDigitError, InvalidHexLengthError

log = logging.getLogger(__name__)

_HEX_DIGITS = frozenset(string.hexdigits)


def bytes_to_hex(data: bytes) -> str:
    """Render bytes as upper-case hex."""
    return bytes(data).hex().upper()


def hex_to_bytes(text: str) -> bytes:
    """
    Decode hex text into bytes.

    Args:
        text: Hex digits, most-significant nibble first, any case

    Returns:
        Decoded bytes, in order

    Raises:
        InvalidHexLengthError: If text has an odd number of characters
        InvalidHexDigitError: If text contains a non-hex character
    """
    if len(text) % 2:
        raise InvalidHexLengthError(f"Hex decode: odd length {len(text)}")

    for index, char in enumerate(text):
        if char not in _HEX_DIGITS:
            raise InvalidHexDigitError(char, index)

    return bytes.fromhex(text)


def encode_hex(data: bytes) -> Optional[str]:
    """Render bytes as upper-case hex. Never fails for bytes input."""
    return bytes_to_hex(data)


def decode_hex(text: str, logger: Optional[logging.Logger] = None) -> Optional[bytes]:
    """Decode hex text, returning None (and logging) on failure."""
    try:
        return hex_to_bytes(text)
    except CodecError as e:
        (logger or log).error("failed to decode hex from %r: %s", text, e)
        return None
