"""Sum the part numbers of an engine schematic.

A part number is a run of digits with a symbol (any character other than a
digit or the blank marker ``.``) in one of the cells around it, diagonals
included. The schematic is read from a text file, one row per line, or from a
PDF whose glyphs sit on a fixed-width grid.

Pipeline:
  1. read_grid          – rows from the text file or the PDF's page.chars
  2. index_rows         – digit-run tokens and symbol columns per row
  3. find_parts         – footprint test against the row and its two neighbours
  4. sum_part_numbers   – reduce and print
"""

from __future__ import annotations

import argparse
import logging
import sys

from schematic_extract import BLANK_MARKER, MAX_TOKEN_VALUE
from schematic_models import MalformedRow
from schematic_pipeline import sum_part_numbers


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sum the part numbers in an engine schematic.",
    )
    parser.add_argument("input", help="Path to the schematic (text file or PDF)")
    parser.add_argument(
        "--blank",
        default=BLANK_MARKER, metavar="CHAR",
        help="Character marking an empty cell (default: %(default)r)",
    )
    parser.add_argument(
        "--max-value",
        type=int, default=MAX_TOKEN_VALUE, metavar="N",
        help="Largest accepted number (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="List every part number with its adjacent symbols",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if len(args.blank) != 1:
        print(
            f"Error: --blank must be a single character, got {args.blank!r}",
            file=sys.stderr,
        )
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        sum_part_numbers(
            args.input,
            blank=args.blank,
            max_value=args.max_value,
            verbose=args.verbose,
        )
    except MalformedRow as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
