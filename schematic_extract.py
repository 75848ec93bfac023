from __future__ import annotations

import logging
import re
from collections import defaultdict
from statistics import median
from typing import Iterable, Iterator

from schematic_models import MalformedRow, RowRecord, SymbolSet, Token

logger = logging.getLogger(__name__)

BLANK_MARKER = "."
MAX_TOKEN_VALUE = 2**32 - 1

_DIGIT_RUN_RE = re.compile(r"[0-9]+")
_DIGITS = frozenset("0123456789")
_DEFAULT_CELL_WIDTH = 5.0


def index_row(
    line: str,
    row: int = 0,
    blank: str = BLANK_MARKER,
    max_value: int = MAX_TOKEN_VALUE,
) -> RowRecord:
    """Split one schematic row into digit-run tokens and symbol columns.

    Any character that is neither a digit nor *blank* is a symbol, whatever it
    is. Raises ``MalformedRow`` when a digit run is larger than *max_value*.
    """
    width = len(line)
    tokens: list[Token] = []
    for m in _DIGIT_RUN_RE.finditer(line):
        value = int(m.group())
        if value > max_value:
            raise MalformedRow(row, m.start(), m.group(), max_value)
        tokens.append(
            Token(value=value, row=row, col_start=m.start(), col_end=m.end(), row_width=width)
        )

    symbols = {col: ch for col, ch in enumerate(line) if ch not in _DIGITS and ch != blank}
    return RowRecord(row=row, width=width, tokens=tuple(tokens), symbols=SymbolSet(symbols))


def index_rows(
    lines: Iterable[str],
    blank: str = BLANK_MARKER,
    max_value: int = MAX_TOKEN_VALUE,
) -> Iterator[RowRecord]:
    """Index *lines* one at a time; the row number is the line's position."""
    for row, line in enumerate(lines):
        record = index_row(line.rstrip("\r\n"), row, blank, max_value)
        logger.debug(
            "row %d: %d tokens, %d symbols", row, len(record.tokens), len(record.symbols)
        )
        yield record


def chars_to_rows(chars: list[dict], blank: str = BLANK_MARKER) -> list[str]:
    """Rebuild grid rows from pdfplumber page.chars laid out in fixed-width cells.

    Characters are grouped by rounded ``top`` and placed in the column nearest
    to ``(x0 - left) / cell_width``; the cell width is the median glyph width.
    Every row is padded with *blank* to the widest row on the page, so blank
    cells that are not drawn as glyphs still take up a column.
    """
    visible = [c for c in chars if c["text"].strip()]
    if not visible:
        return []

    widths = [c["x1"] - c["x0"] for c in visible if c["x1"] > c["x0"]]
    cell_width = median(widths) if widths else _DEFAULT_CELL_WIDTH
    left = min(c["x0"] for c in visible)

    by_y: dict[int, list[dict]] = defaultdict(list)
    for c in visible:
        by_y[round(c["top"])].append(c)

    grid: list[dict[int, str]] = []
    for y_key in sorted(by_y.keys()):
        cells: dict[int, str] = {}
        for c in sorted(by_y[y_key], key=lambda c: c["x0"]):
            col = round((c["x0"] - left) / cell_width)
            if col in cells:
                logger.debug("overlapping glyph %r at y=%d, column %d", c["text"], y_key, col)
                continue
            cells[col] = c["text"]
        grid.append(cells)

    width = max(max(cells) for cells in grid) + 1
    return ["".join(cells.get(col, blank) for col in range(width)) for cells in grid]
