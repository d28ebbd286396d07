# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Command-line interface for pdnconv

Converts Polaroid Digital Negative (PDN) files to JPEG, PNG or TIFF.

Copyright 2025 DNAi inc.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from pdnconv.core import PDNConverter
from pdnconv.exceptions import (
    PDNError,
    FileReadError,
    InvalidMagicError,
    UnsupportedCompressionError,
    MissingStripDataError,
)
from pdnconv.image_writer import OUTPUT_FORMATS
from pdnconv.sharpen import parse_sharpen_level, SHARPEN_NONE
from pdnconv.value_formatter import format_header, format_descriptor, format_entry, get_metadata


def split_sharpen_args(args: List[str]) -> Tuple[List[str], Optional[int]]:
    """
    Separate 'sharpen=N' arguments from file arguments.

    Returns:
        Tuple of (remaining arguments, sharpening level or None)
    """
    files = []
    level = None
    for arg in args:
        if arg.lower().startswith('sharpen='):
            level = parse_sharpen_level(arg)
        else:
            files.append(arg)
    return files, level


def describe_error(error: PDNError) -> str:
    """Return a user-facing message for a conversion error."""
    if isinstance(error, FileReadError):
        return f"File does not exist or is of zero length. {error.message}"
    if isinstance(error, InvalidMagicError):
        return f"Invalid file, not a PDN image. {error.message}"
    if isinstance(error, UnsupportedCompressionError):
        return f"Sorry, compressed files cannot be read (compression {error.compression})."
    if isinstance(error, MissingStripDataError):
        return "File contains no image data (no strip offsets)."
    return error.message or str(error)


def process_file(file_path: Path, args: argparse.Namespace, sharpen: int) -> int:
    """
    Convert a single file.

    Returns:
        0 on success, 1 on failure
    """
    if not args.quiet and not args.json:
        print(f"Converting PDN file: {file_path}")

    try:
        with PDNConverter(file_path, strict=args.strict) as pdn:
            image = pdn.parse()

            if args.json:
                metadata = get_metadata(image)
                metadata['SourceFile'] = str(file_path)
                print(json.dumps(metadata, indent=2))
                return 0

            if not args.quiet:
                for line in format_header(image.header):
                    print(line)
                for line in format_descriptor(image):
                    print(line)
            if args.verbose:
                print(f"base numEntries: {len(image.entries)}")
                for entry in image.entries:
                    print(format_entry(entry))

            output = pdn.convert(args.output, sharpen=sharpen, image_format=args.format)
    except PDNError as e:
        print(f"Error: {file_path}: {describe_error(e)}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"Data written to: {output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pdnconv',
        description="pdnconv - Convert Polaroid Digital Negative (PDN) files to standard images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert to IMG0001.PDN.jpeg
  pdnconv IMG0001.PDN

  # Mild sharpening
  pdnconv IMG0001.PDN sharpen=1

  # Strong sharpening, PNG output
  pdnconv -s 2 -f PNG IMG0001.PDN

  # Dump the header and directory as JSON without converting
  pdnconv -j IMG0001.PDN

Only uncompressed PDN files are supported.
"""
    )
    parser.add_argument('files', nargs='+', metavar='FILE',
                        help="PDN files to convert; 'sharpen=0|1|2' is also accepted here")
    parser.add_argument('-s', '--sharpen', type=int, default=None,
                        help='Sharpening level: 0 none, 1 mild, 2 strong (default 0)')
    parser.add_argument('-o', '--output', type=Path, default=None,
                        help='Output file (single input only)')
    parser.add_argument('-f', '--format', default='JPEG', type=str.upper,
                        choices=sorted(OUTPUT_FORMATS),
                        help='Output format (default JPEG)')
    parser.add_argument('-j', '--json', action='store_true',
                        help='Print header and image description as JSON instead of converting')
    parser.add_argument('-v', '--verbose', action='store_true', help='List every directory entry')
    parser.add_argument('-q', '--quiet', action='store_true', help='Only report errors')
    parser.add_argument('--strict', action='store_true',
                        help='Reject files whose directory runs past the end of the file')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    files, positional_level = split_sharpen_args(args.files)
    if not files:
        parser.error("no input files")
    if args.output is not None and len(files) > 1:
        parser.error("-o/--output can only be used with a single input file")

    if args.sharpen is not None:
        sharpen = args.sharpen
    elif positional_level is not None:
        sharpen = positional_level
    else:
        sharpen = SHARPEN_NONE

    if not args.quiet and not args.json:
        print(f"Sharpening level: {sharpen}")

    failures = 0
    for file_arg in files:
        failures += process_file(Path(file_arg), args, sharpen)
        if len(files) > 1 and not args.quiet:
            print()

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
