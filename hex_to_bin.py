#!/usr/bin/env python3
"""
Hex listing to flash image converter.

Converts a firmware image given as whitespace-separated hex byte pairs
into a raw binary, checks the byte count, and zero-pads the result to
the flash size (128KB by default).

The output file must not already exist. On failure any partially written
output is left in place for inspection.
"""

import argparse
import sys
from pathlib import Path

from hexflash.core import (
    FLASH_SIZE,
    ByteCountMismatch,
    HexToBinConverter,
    HexToBinError,
    MalformedHexToken,
)


def parse_size(value: str) -> int:
    """Parse a flash size given in decimal or with a 0x/0o/0b prefix."""
    try:
        size = int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size: {value!r}") from None
    if size <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {size}")
    return size


class UsageErrorParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors exit 1 like every other failure."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = UsageErrorParser(
        prog="hex2bin",
        description="Convert a hex byte listing to a zero-padded flash image",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert an FPGA image listing to a 128KB flash image
  hex2bin firmware.hex firmware.bin

  # Pad to a different flash size
  hex2bin firmware.hex firmware.bin --size 0x40000
""",
    )
    parser.add_argument("hexfile", nargs="?", help="Input hex listing")
    parser.add_argument("binfile", nargs="?", help="Output binary (must not exist)")
    parser.add_argument(
        "-s",
        "--size",
        type=parse_size,
        default=FLASH_SIZE,
        help=f"Padded image size in bytes (default: {FLASH_SIZE})",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Empty invocation prints help, same as --help
    if not args.hexfile:
        parser.print_help()
        return 0

    if not args.binfile:
        parser.error("the following arguments are required: binfile")

    hex_path = Path(args.hexfile)
    if not hex_path.is_file():
        print(f"Error: Input file not found: {hex_path}", file=sys.stderr)
        return 1

    try:
        converter = HexToBinConverter(hex_path, args.binfile, final_size=args.size)
        converter.convert()
    except MalformedHexToken as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ByteCountMismatch as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"Partial output left at: {args.binfile}", file=sys.stderr)
        return 1
    except HexToBinError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {args.size:,} bytes to {args.binfile}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
