#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command-line LEB128 converter.

Usage:
    python leb128_convert.py hex AC02
    python leb128_convert.py number 300
    python leb128_convert.py --signed number -300
    python leb128_convert.py --signed hex D47D
"""

import argparse
import logging
import sys
from typing import List, Optional

from lebanon import Conversion, from_hex, from_number


def print_conversion(conversion: Conversion):
    """Print both fields of a conversion."""
    mode = "signed" if conversion.signed else "unsigned"
    print(f"Hex:    {conversion.hex_text}")
    print(f"Number: {conversion.number_text} ({mode})")


def cmd_hex(text: str, signed: bool) -> int:
    """Decode hex text to a number."""
    conversion = from_hex(text, signed)
    if conversion is None:
        print(f"Error: Not valid hex: {text!r}")
        return 1

    print_conversion(conversion)
    return 0 if conversion.is_number else 1


def cmd_number(text: str, signed: bool) -> int:
    """Encode a decimal number to hex."""
    conversion = from_number(text, signed)
    if conversion is None:
        kind = "a signed 64-bit" if signed else "an unsigned 64-bit"
        print(f"Error: Not {kind} integer: {text!r}")
        return 1

    print_conversion(conversion)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert between LEB128 hex and decimal numbers"
    )
    parser.add_argument(
        "--signed", "-s",
        action="store_true",
        help="Treat the number as signed (i64) instead of unsigned (u64)"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Diagnostic log level (default WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # hex command
    hex_parser = subparsers.add_parser("hex", help="Decode LEB128 hex to a number")
    hex_parser.add_argument("text", help="Hex digits, e.g. AC02")

    # number command
    number_parser = subparsers.add_parser("number", help="Encode a number as LEB128 hex")
    number_parser.add_argument("text", help="Decimal integer, e.g. 300")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "hex":
        return cmd_hex(args.text, args.signed)
    elif args.command == "number":
        return cmd_number(args.text, args.signed)
    return 1


if __name__ == "__main__":
    sys.exit(main())
