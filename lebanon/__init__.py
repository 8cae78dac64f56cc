# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Lebanon - LEB128 <-> hex/decimal converter library.

This package converts between 64-bit integers, their LEB128 (Little
Endian Base 128) encoding, and the upper-case hex text of that encoding.

Example usage:
    from lebanon import encode_unsigned, decode_signed, encode_hex, decode_hex

    data = encode_unsigned(300)          # b"\\xac\\x02"
    print(encode_hex(data))              # "AC02"
    print(decode_signed(decode_hex("D47D")))  # -300

    # Failures return None and are logged, they never raise
    assert decode_hex("ZZ") is None
"""

from .convert import (
    NAN_TEXT,
    Conversion,
    describe,
    from_hex,
    from_number,
    initial,
    parse_hex,
    parse_number,
)
from .errors import (
    CodecError,
    TruncatedError,
    ValueOverflowError,
    InvalidHexLengthError,
    InvalidHexDigitError,
    EncodingError,
)
from .hexcodec import bytes_to_hex, hex_to_bytes, encode_hex, decode_hex
from .leb128 import (
    read_unsigned,
    read_signed,
    write_unsigned,
    write_signed,
    decode_unsigned,
    decode_signed,
    encode_unsigned,
    encode_signed,
)

__version__ = "0.1.0"

__all__ = [
    # LEB128
    "read_unsigned",
    "read_signed",
    "write_unsigned",
    "write_signed",
    "decode_unsigned",
    "decode_signed",
    "encode_unsigned",
    "encode_signed",
    # Hex
    "bytes_to_hex",
    "hex_to_bytes",
    "encode_hex",
    "decode_hex",
    # Converter
    "NAN_TEXT",
    "Conversion",
    "describe",
    "from_hex",
    "from_number",
    "initial",
    "parse_hex",
    "parse_number",
    # Errors
    "CodecError",
    "TruncatedError",
    "ValueOverflowError",
    "InvalidHexLengthError",
    "InvalidHexDigitError",
    "EncodingError",
]
