from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, Sequence

from schematic_models import RowIndexOutOfRange, RowRecord, SymbolHit, Token


def _neighbor_rows(row: int, rows: Sequence[RowRecord]) -> list[RowRecord]:
    if not 0 <= row < len(rows):
        raise RowIndexOutOfRange(row, len(rows))
    lo = max(row - 1, 0)
    hi = min(row + 1, len(rows) - 1)
    return [rows[r] for r in range(lo, hi + 1)]


def is_symbol_adjacent(token: Token, rows: Sequence[RowRecord]) -> bool:
    """True when a symbol sits on the token's footprint in its row or the rows above and below."""
    footprint = token.footprint
    return any(rec.symbols.intersects(footprint) for rec in _neighbor_rows(token.row, rows))


def adjacent_symbols(token: Token, rows: Sequence[RowRecord]) -> list[SymbolHit]:
    footprint = token.footprint
    return [
        SymbolHit(row=rec.row, col=col, char=ch, token=token)
        for rec in _neighbor_rows(token.row, rows)
        for col, ch in rec.symbols.hits(footprint)
    ]


def find_parts(rows: Sequence[RowRecord]) -> Iterator[Token]:
    """Yield part numbers in row-major, then column order."""
    for record in rows:
        for token in record.tokens:
            if is_symbol_adjacent(token, rows):
                yield token


def find_symbol_hits(rows: Sequence[RowRecord]) -> Iterator[SymbolHit]:
    for record in rows:
        for token in record.tokens:
            yield from adjacent_symbols(token, rows)


def find_parts_streaming(records: Iterable[RowRecord]) -> Iterator[Token]:
    """Like find_parts, but keeps at most three rows in memory.

    Each row's tokens are resolved once the following row has arrived (or the
    input is exhausted). Records must arrive in row order starting at 0.
    """
    window: deque[RowRecord] = deque(maxlen=3)
    for record in records:
        if record.row != (window[-1].row + 1 if window else 0):
            raise RowIndexOutOfRange(record.row, window[-1].row + 1 if window else 0)
        window.append(record)
        if len(window) >= 2:
            yield from _resolve_middle(window, len(window) - 2)

    if window:
        yield from _resolve_middle(window, len(window) - 1)


def _resolve_middle(window: deque[RowRecord], idx: int) -> Iterator[Token]:
    target = window[idx]
    neighbors = list(window)[max(idx - 1, 0) : idx + 2]
    for token in target.tokens:
        if any(rec.symbols.intersects(token.footprint) for rec in neighbors):
            yield token
