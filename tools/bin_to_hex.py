#!/usr/bin/env python3
"""
Flash Image Dumper

Dumps a binary flash image back into a hex listing that hex2bin accepts.
Useful for diffing images or recovering a listing from a padded image.
"""

import argparse
import sys
from pathlib import Path

from hexflash.core.constants import PAD_BYTE
from hexflash.formats.hex_utils import TOKENS_PER_LINE, format_hex_bytes


def strip_padding(data: bytes) -> bytes:
    """Drop trailing fill bytes from an image."""
    return data.rstrip(bytes([PAD_BYTE]))


def dump_image(bin_path: Path, per_line: int, strip: bool) -> str:
    """
    Read a binary image and format it as a hex listing.

    Args:
        bin_path: Binary image to read
        per_line: Tokens per output line
        strip: Remove trailing fill bytes first

    Returns:
        Hex listing text
    """
    data = bin_path.read_bytes()
    if strip:
        data = strip_padding(data)
    return format_hex_bytes(data, per_line=per_line)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Dump a binary flash image as a hex listing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print listing to stdout
  python tools/bin_to_hex.py firmware.bin

  # Recover the unpadded listing
  python tools/bin_to_hex.py firmware.bin --strip-padding -o firmware.hex
""",
    )
    parser.add_argument("bin_file", help="Binary image to dump")
    parser.add_argument(
        "-o", "--output", help="Output listing (must not exist, default: stdout)"
    )
    parser.add_argument(
        "--per-line",
        type=int,
        default=TOKENS_PER_LINE,
        help=f"Bytes per line (default: {TOKENS_PER_LINE})",
    )
    parser.add_argument(
        "--strip-padding",
        action="store_true",
        help="Drop trailing zero padding before dumping",
    )

    args = parser.parse_args(argv)

    bin_path = Path(args.bin_file)
    if not bin_path.is_file():
        print(f"Error: Binary file not found: {bin_path}", file=sys.stderr)
        return 1

    try:
        listing = dump_image(bin_path, args.per_line, args.strip_padding)
        if args.output:
            with open(args.output, "x") as f:
                f.write(listing)
            print(f"Wrote listing to: {args.output}")
        else:
            sys.stdout.write(listing)
    except FileExistsError:
        print(f"Error: Output file already exists: {args.output}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
