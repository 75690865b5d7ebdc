#!/usr/bin/env python
# coding=utf-8

"""Command line converter from ASCII raw files to CSV or JSON."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config import get_config
from ..core.constants import OutputFormats
from ..exceptions import RawCsvError
from ..utils.detect_encoding import EncodingDetectError
from .raw_ascii_parser import parse, read_raw_text
from .raw_classes import Document
from .raw_csv import to_csv, to_json

_logger = logging.getLogger("rawcsv.RawConvert")


def convert(document: Document, output_format: str) -> str:
    """Render a document in the requested output format."""
    if output_format == OutputFormats.JSON:
        return to_json(document)
    return to_csv(document)


def list_series(document: Document, raw_file: Path) -> None:
    """Print the variables of a document."""
    print(f"Available variables in {raw_file.name}:")
    for series in document.series:
        print(f"  {series.name} ({series.kind})")


def main(argv: Optional[List[str]] = None) -> None:
    """Command-line interface for converting raw files."""
    config = get_config()
    try:
        config.validate()
    except RawCsvError as e:
        print(f"Error in configuration: {e}", file=sys.stderr)
        sys.exit(1)

    parser = argparse.ArgumentParser(
        description="Convert SPICE ASCII raw waveform files to CSV or JSON"
    )
    parser.add_argument("raw_file", type=Path, help="Path to the raw file to convert")
    parser.add_argument(
        "-o", "--output", type=Path, help="Output file path (default: stdout)"
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=OutputFormats.ALL,
        default=config.output_format,
        help=f"Output format (default: {config.output_format})",
    )
    parser.add_argument(
        "--encoding",
        default=config.default_encoding,
        help="Encoding of the raw file (default: detected)",
    )
    parser.add_argument(
        "--quadrant-aware-phase",
        action=argparse.BooleanOptionalAction,
        default=config.quadrant_aware_phase,
        help="Compute complex phases with atan2 instead of atan(imag/real)",
    )
    parser.add_argument(
        "-l", "--list", action="store_true", help="List available variables and exit"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.raw_file.exists():
        print(f"Error: Raw file '{args.raw_file}' not found", file=sys.stderr)
        sys.exit(1)

    try:
        text = read_raw_text(args.raw_file, args.encoding)
        document = parse(text, quadrant_aware_phase=args.quadrant_aware_phase)
    except (RawCsvError, EncodingDetectError) as e:
        print(f"Error reading raw file: {e}", file=sys.stderr)
        sys.exit(1)

    if args.list:
        list_series(document, args.raw_file)
        sys.exit(0)

    output = convert(document, args.format)
    if args.output:
        try:
            args.output.write_text(output, encoding="utf-8")
        except OSError as e:
            print(f"Error writing output file: {e}", file=sys.stderr)
            sys.exit(1)
        _logger.info("Wrote %s output to %s", args.format, args.output)
    else:
        sys.stdout.write(output)


if __name__ == "__main__":
    main()
