from __future__ import annotations

import logging
import sys
import warnings
from pathlib import Path

import pdfplumber

from schematic_context import adjacent_symbols, find_parts
from schematic_extract import BLANK_MARKER, MAX_TOKEN_VALUE, chars_to_rows, index_rows
from schematic_models import RowRecord, Token

logging.getLogger("pdfminer").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", module="pdfminer")

logger = logging.getLogger(__name__)


def read_grid(path: Path, blank: str = BLANK_MARKER) -> list[str]:
    """Return the schematic rows stored in *path* (plain text or PDF)."""
    if path.suffix.lower() == ".pdf":
        rows: list[str] = []
        with pdfplumber.open(path) as pdf:
            for page in pdf.pages:
                page_rows = chars_to_rows(page.chars, blank)
                logger.debug("page %d: %d rows", page.page_number, len(page_rows))
                rows.extend(page_rows)
        return rows

    lines = path.read_text(encoding="utf-8").splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def _print_part(token: Token, records: list[RowRecord]) -> None:
    symbols = ", ".join(
        f"{h.char!r}@({h.row},{h.col})" for h in adjacent_symbols(token, records)
    )
    cols = f"{token.col_start}-{token.col_end - 1}"
    print(f"  {token.value:>10}  row {token.row:<5} cols {cols:<9} {symbols}")


def sum_part_numbers(
    input_path: str,
    blank: str = BLANK_MARKER,
    max_value: int = MAX_TOKEN_VALUE,
    verbose: bool = False,
) -> int:
    path = Path(input_path)
    if not path.exists():
        print(f"Error: file not found: {path}", file=sys.stderr)
        sys.exit(1)

    lines = read_grid(path, blank)
    records = list(index_rows(lines, blank, max_value))
    token_count = sum(len(r.tokens) for r in records)
    logger.info("indexed %d rows, %d numbers", len(records), token_count)

    parts = list(find_parts(records))
    total = sum(t.value for t in parts)
    logger.info("%d of %d numbers are part numbers", len(parts), token_count)

    print("=" * 64)
    print("RESULTS")
    print("=" * 64)

    if not parts:
        print("No part numbers found in the schematic.")
        return 0

    if verbose:
        print(f"\nPart numbers ({len(parts)} of {token_count}):\n")
        for token in parts:
            _print_part(token, records)

    print(f"\nSum of part numbers: {total}")
    print()
    return total
