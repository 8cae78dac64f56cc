# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
LEB128 encoding/decoding for 64-bit unsigned and signed integers.

Two layers are provided:

- read_unsigned/read_signed/write_unsigned/write_signed raise a
  CodecError subclass on malformed input or out-of-range values.
- decode_unsigned/decode_signed/encode_unsigned/encode_signed never
  raise. They return None on failure and report the offending input
  to the given logger (the module logger by default).
"""

import logging
import operator
from typing import Optional, Tuple

from .errors import CodecError, EncodingError, TruncatedError, ValueOverflowError

log = logging.getLogger(__name__)

CONTINUATION_BIT = 0x80
SIGN_BIT = 0x40
LOW_BITS = 0x7F

U64_MAX = (1 << 64) - 1
I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1

# 64 bits in 7-bit groups
MAX_ENCODED_LENGTH = 10
_LAST_SHIFT = 7 * (MAX_ENCODED_LENGTH - 1)


def _next_byte(data: bytes, offset: int) -> int:
    if offset >= len(data):
        raise TruncatedError("LEB128 decode: unexpected end of data")
    return data[offset]


def _as_int(value) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise EncodingError(f"Cannot encode {value!r} as LEB128: not an integer") from None


def _skip_to_end(data: bytes, offset: int, byte: int) -> None:
    """Consume the rest of an overlong value so truncation wins over overflow."""
    while byte & CONTINUATION_BIT:
        byte = _next_byte(data, offset)
        offset += 1


def read_unsigned(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode an unsigned 64-bit LEB128 value.

    Args:
        data: Bytes containing the value
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, offset after the terminating byte)

    Raises:
        TruncatedError: If data ends before the terminating byte
        ValueOverflowError: If the value does not fit in 64 bits
    """
    value = 0
    shift = 0

    while True:
        byte = _next_byte(data, offset)
        offset += 1

        if shift == _LAST_SHIFT and byte not in (0x00, 0x01):
            _skip_to_end(data, offset, byte)
            raise ValueOverflowError("LEB128 decode: value too large for u64")

        value |= (byte & LOW_BITS) << shift

        if not (byte & CONTINUATION_BIT):
            return value, offset

        shift += 7


def read_signed(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a signed (two's complement) 64-bit LEB128 value.

    The sign bit of the last group is extended into all higher bits.

    Raises:
        TruncatedError: If data ends before the terminating byte
        ValueOverflowError: If the value does not fit in 64 bits
    """
    value = 0
    shift = 0

    while True:
        byte = _next_byte(data, offset)
        offset += 1

        # Only bit 63 is left, so the last group is all zeros or all ones
        if shift == _LAST_SHIFT and byte not in (0x00, 0x7F):
            _skip_to_end(data, offset, byte)
            raise ValueOverflowError("LEB128 decode: value out of range for i64")

        value |= (byte & LOW_BITS) << shift
        shift += 7

        if not (byte & CONTINUATION_BIT):
            break

    if shift < 64:
        if byte & SIGN_BIT:
            value -= 1 << shift
    else:
        value &= U64_MAX
        if value > I64_MAX:
            value -= 1 << 64

    return value, offset


def write_unsigned(value: int) -> bytes:
    """
    Encode an unsigned 64-bit integer as canonical LEB128.

    Args:
        value: Integer in [0, 2**64 - 1]

    Returns:
        Minimal-length LEB128 bytes

    Raises:
        EncodingError: If value is not an integer or is outside the u64 range
    """
    value = _as_int(value)
    if not 0 <= value <= U64_MAX:
        raise EncodingError(f"Cannot encode {value} as unsigned LEB128: outside u64 range")

    result = []
    while value >= CONTINUATION_BIT:
        result.append((value & LOW_BITS) | CONTINUATION_BIT)
        value >>= 7
    result.append(value)
    return bytes(result)


def write_signed(value: int) -> bytes:
    """
    Encode a signed 64-bit integer as canonical LEB128.

    Raises:
        EncodingError: If value is not an integer or is outside the i64 range
    """
    value = _as_int(value)
    if not I64_MIN <= value <= I64_MAX:
        raise EncodingError(f"Cannot encode {value} as signed LEB128: outside i64 range")

    result = []
    while True:
        byte = value & LOW_BITS
        value >>= 7
        done = (value == 0 and not byte & SIGN_BIT) or (value == -1 and byte & SIGN_BIT)
        if done:
            result.append(byte)
            return bytes(result)
        result.append(byte | CONTINUATION_BIT)


def decode_unsigned(data: bytes, logger: Optional[logging.Logger] = None) -> Optional[int]:
    """Decode unsigned LEB128, returning None (and logging) on failure."""
    try:
        value, _ = read_unsigned(data)
    except CodecError as e:
        (logger or log).error(
            "failed to decode unsigned LEB128 from %r: %s", bytes(data), e)
        return None
    return value


def decode_signed(data: bytes, logger: Optional[logging.Logger] = None) -> Optional[int]:
    """Decode signed LEB128, returning None (and logging) on failure."""
    try:
        value, _ = read_signed(data)
    except CodecError as e:
        (logger or log).error(
            "failed to decode signed LEB128 from %r: %s", bytes(data), e)
        return None
    return value


def encode_unsigned(value: int, logger: Optional[logging.Logger] = None) -> Optional[bytes]:
    """Encode unsigned LEB128, returning None (and logging) on failure."""
    try:
        return write_unsigned(value)
    except CodecError as e:
        (logger or log).error("failed to encode %r as unsigned LEB128: %s", value, e)
        return None


def encode_signed(value: int, logger: Optional[logging.Logger] = None) -> Optional[bytes]:
    """Encode signed LEB128, returning None (and logging) on failure."""
    try:
        return write_signed(value)
    except CodecError as e:
        (logger or log).error("failed to encode %r as signed LEB128: %s", value, e)
        return None
