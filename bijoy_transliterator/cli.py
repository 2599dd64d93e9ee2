#!/usr/bin/env python3
"""
Bijoy Transliterator CLI

Command-line interface for converting Bengali text between SutonnyMJ/Bijoy
and Unicode, inside Word documents or plain text.

Usage:
    python -m bijoy_transliterator <source> [options]
    python -m bijoy_transliterator letter.docx                 # Bijoy -> Unicode
    python -m bijoy_transliterator letter.docx --to-bijoy      # Unicode -> Bijoy
    python -m bijoy_transliterator ./documents/ --force        # whole directory
    python -m bijoy_transliterator --text "Avwg evsjvq Mvb MvB"

Options:
    -o, --output DIR     Output directory (default: ./bijoy_output)
    --to-unicode         Convert Bijoy to Unicode (default)
    --to-bijoy           Convert Unicode to Bijoy
    -f, --force          Convert runs whose font is not recognised when they look like Bijoy
    --text TEXT          Convert a string and print it
    --stdout             Print converted text instead of saving files
    --formats            Show all supported formats
"""

import argparse
import logging
import sys

from .config import ConversionOptions, Direction
from .core import FileStatus, Transliterator


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="bijoy-transliterator",
        description=(
            "SutonnyMJ/Bijoy <-> Unicode Bengali Transliterator\n\n"
            "Converts the Bengali text of Word documents and plain-text\n"
            "files between the legacy Bijoy encoding and Unicode, leaving\n"
            "English text and formatting alone."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m bijoy_transliterator report.docx\n"
            "  python -m bijoy_transliterator report.docx --to-bijoy\n"
            "  python -m bijoy_transliterator ./letters/ --force           # whole directory\n"
            "  python -m bijoy_transliterator a.docx b.txt -o ./converted  # custom output dir\n"
            "  python -m bijoy_transliterator notes.txt --stdout           # print to terminal\n"
        ),
    )

    parser.add_argument(
        "sources",
        nargs="*",
        help="Files or directories to convert",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output directory (default: ./bijoy_output)",
    )
    direction = parser.add_mutually_exclusive_group()
    direction.add_argument(
        "--to-unicode",
        dest="direction",
        action="store_const",
        const=Direction.BIJOY_TO_UNICODE,
        help="Convert SutonnyMJ/Bijoy text to Unicode (default)",
    )
    direction.add_argument(
        "--to-bijoy",
        dest="direction",
        action="store_const",
        const=Direction.UNICODE_TO_BIJOY,
        help="Convert Unicode text to SutonnyMJ/Bijoy",
    )
    parser.add_argument(
        "-f", "--force",
        action="store_true",
        help="Also convert runs in unrecognised fonts when their text looks like Bijoy",
    )
    parser.add_argument(
        "--text",
        default=None,
        help="Convert this string and print the result",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print converted text to stdout instead of saving files",
    )
    parser.add_argument(
        "--formats",
        action="store_true",
        help="Show all supported input formats and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log per-part and per-run details",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.formats:
        _show_formats()
        return 0

    options = ConversionOptions(
        direction=args.direction or Direction.BIJOY_TO_UNICODE,
        force_convert=args.force,
    )
    engine = Transliterator(output_dir=args.output, options=options)

    if args.text is not None:
        print(engine.convert_text(args.text))
        return 0

    if not args.sources:
        parser.print_help()
        print("\nError: No sources provided. Specify files or directories to convert.")
        return 1

    save = not args.stdout

    print("=" * 60)
    print("  BIJOY TRANSLITERATOR - SutonnyMJ <-> Unicode Bengali")
    print("=" * 60)
    print()

    success_count = 0
    error_count = 0

    for source in args.sources:
        try:
            results = engine.convert(source, save=save)
        except Exception as e:
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            error_count += 1
            continue

        for result in results:
            if result.status is FileStatus.ERROR:
                print(f"[ERROR] {result.source}: {result.error}", file=sys.stderr)
                error_count += 1
                continue
            success_count += 1
            if result.report is not None:
                print(f"[DONE] {result.source}: {result.report.summary()}")
            if args.stdout and result.text is not None:
                print(result.text)
                print("\n" + "=" * 60 + "\n")

    print()
    print("-" * 60)
    print(f"  Done: {success_count} converted, {error_count} errors")
    if save:
        print(f"  Output: {engine.output_dir}")
    print("-" * 60)

    return 1 if error_count else 0


def _show_formats():
    """Display all supported formats."""
    formats = Transliterator.supported_formats()
    print("\nSupported Input Formats:")
    print("-" * 40)
    for category, extensions in formats.items():
        print(f"\n  {category}:")
        for ext in extensions:
            print(f"    {ext}")
    print()


if __name__ == "__main__":
    sys.exit(main())
