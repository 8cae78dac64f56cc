# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Converter between the two text representations of a LEB128 value.

A value is shown as two fields: its encoded bytes as hex text, and the
decimal number those bytes decode to (signed or unsigned, depending on
the mode). Editing either field produces a byte sequence, from which
both fields are rendered again.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .hexcodec import decode_hex, encode_hex
from .leb128 import U64_MAX, decode_signed, decode_unsigned, encode_signed, encode_unsigned

log = logging.getLogger(__name__)

NAN_TEXT = "NaN"

_NUMBER_RE = re.compile(r"[+-]?[0-9]+")

# Significant digits of the widest value either mode accepts
_MAX_DIGITS = len(str(U64_MAX))


@dataclass(frozen=True)
class Conversion:
    """Both text fields rendered from one byte sequence."""
    data: bytes
    hex_text: str
    number_text: str
    signed: bool

    @property
    def is_number(self) -> bool:
        """Return True if the bytes decoded to a number."""
        return self.number_text != NAN_TEXT


def parse_number(text: str, signed: bool, logger: Optional[logging.Logger] = None) -> Optional[bytes]:
    """
    Parse decimal text and encode it as LEB128.

    Args:
        text: Decimal integer, optionally signed
        signed: Encode as signed (i64) instead of unsigned (u64)
        logger: Diagnostic sink (module logger by default)

    Returns:
        Encoded bytes, or None if text is not a number in range
    """
    logger = logger or log
    text = text.strip()
    if not _NUMBER_RE.fullmatch(text):
        logger.warning("not a decimal integer: %r", text)
        return None

    sign = text[0] if text[0] in "+-" else ""
    digits = text[len(sign):].lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        logger.warning("decimal integer out of 64-bit range: %d digits", len(digits))
        return None

    value = int(sign + digits)
    if signed:
        return encode_signed(value, logger)
    return encode_unsigned(value, logger)


def parse_hex(text: str, logger: Optional[logging.Logger] = None) -> Optional[bytes]:
    """Parse hex text into bytes, or None if it is not valid hex."""
    return decode_hex(text, logger)


def describe(data: bytes, signed: bool, logger: Optional[logging.Logger] = None) -> Conversion:
    """
    Render both fields from a byte sequence.

    The number field is NAN_TEXT when the bytes are not a valid LEB128
    value for the selected mode.
    """
    logger = logger or log
    data = bytes(data)
    logger.info("Updating internal bytes to %r", data)

    if signed:
        number = decode_signed(data, logger)
    else:
        number = decode_unsigned(data, logger)

    if number is None:
        logger.warning("Bytes %r are not a number, showing %s", data, NAN_TEXT)
        number_text = NAN_TEXT
    else:
        number_text = str(number)

    return Conversion(data, encode_hex(data), number_text, signed)


def from_hex(text: str, signed: bool, logger: Optional[logging.Logger] = None) -> Optional[Conversion]:
    """Handle an edit of the hex field. None leaves both fields unchanged."""
    data = parse_hex(text, logger)
    if data is None:
        return None
    return describe(data, signed, logger)


def from_number(text: str, signed: bool, logger: Optional[logging.Logger] = None) -> Optional[Conversion]:
    """Handle an edit of the number field. None leaves both fields unchanged."""
    data = parse_number(text, signed, logger)
    if data is None:
        return None
    return describe(data, signed, logger)


def initial(signed: bool = False) -> Conversion:
    """State shown before any edit: a single zero byte."""
    return describe(b"\x00", signed)
