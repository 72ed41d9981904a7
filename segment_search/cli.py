"""Command-line interface for decoding scrambled seven-segment displays."""

import argparse
import sys

from .aggregate import ON_ERROR_CHOICES, Totals, decode_file
from .errors import SegmentSearchError
from .export import to_csv, to_json, to_text
from .glyphs import print_glyph_table
from .verify import verify_mapping


def _verify_records(totals: Totals, verbose: bool) -> int:
    """Cross-check the deduced mappings of decoded records against the SAT model."""
    failures = 0

    for record in totals.records:
        correct, errors = verify_mapping(record.mapping, record.training)
        if not correct:
            failures += 1
            print(f"{totals.source} line {record.line_number}: verification FAILED", file=sys.stderr)
            for err in errors:
                print(f"  {err}", file=sys.stderr)
        elif verbose:
            print(f"{totals.source} line {record.line_number}: verified", file=sys.stderr)

    return failures


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Decode scrambled seven-segment display readouts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  segment-search input.txt                  Print both totals
  segment-search --unique-only input.txt    Only count 1, 4, 7 and 8
  segment-search --on-error skip input.txt  Skip malformed records
  segment-search --verify input.txt         Cross-check deductions with SAT
  segment-search --format json input.txt    Output as JSON
  segment-search --glyph-table              Show the digit glyphs
        """,
    )

    parser.add_argument(
        "files",
        nargs="*",
        help="Input files, one display record per line",
    )
    parser.add_argument(
        "--on-error",
        choices=ON_ERROR_CHOICES,
        default="abort",
        help="What to do with a malformed record (default: abort)",
    )
    parser.add_argument(
        "--unique-only",
        action="store_true",
        help="Only count unique-segment digits, without deducing mappings",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Cross-check every deduced mapping against a SAT model",
    )
    parser.add_argument(
        "--glyph-table",
        action="store_true",
        help="Print the canonical digit glyphs and exit",
    )
    parser.add_argument(
        "--format", "-f",
        choices=["text", "json", "csv"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    if args.glyph_table:
        print_glyph_table()
        return 0

    if not args.files:
        parser.error("at least one input file is required")
    if args.verify and args.unique_only:
        parser.error("--verify needs deduced mappings and cannot be combined with --unique-only")

    try:
        for path in args.files:
            if args.verbose:
                print(f"Decoding {path}...", file=sys.stderr)

            totals = decode_file(path, on_error=args.on_error, unique_only=args.unique_only)

            if args.format == "json":
                print(to_json(totals))
            elif args.format == "csv":
                print(to_csv(totals), end="")
            else:
                print(to_text(totals, verbose=args.verbose))

            if args.verify and _verify_records(totals, args.verbose):
                print(f"\n✗ {path}: deduction disagrees with SAT model", file=sys.stderr)
                return 1

        return 0

    except (SegmentSearchError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
