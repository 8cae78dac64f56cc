# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Exceptions raised by the strict LEB128 and hex codecs.

All of them derive from ValueError, so callers that only care about
"bad input" can keep catching that.
"""


class CodecError(ValueError):
    """Base exception for codec errors."""
    pass


class TruncatedError(CodecError):
    """Byte sequence ended before a byte with the continuation bit clear."""
    pass


class ValueOverflowError(CodecError):
    """Decoded value does not fit the 64-bit target domain."""
    pass


class InvalidHexLengthError(CodecError):
    """Hex text has an odd number of characters."""
    pass


class InvalidHexDigitError(CodecError):
    """Hex text contains a character outside [0-9a-fA-F]."""

    def __init__(self, char: str, index: int):
        super().__init__(f"Hex decode: invalid character {char!r} at index {index}")
        self.char = char
        self.index = index


class EncodingError(CodecError):
    """Value cannot be written as LEB128."""
    pass
