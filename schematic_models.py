from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping


class SchematicError(Exception):
    pass


class MalformedRow(SchematicError):
    """A digit run that does not fit the token value range."""

    def __init__(self, row: int, col: int, raw_text: str, max_value: int) -> None:
        super().__init__(
            f"row {row}, column {col}: {raw_text!r} exceeds maximum token value {max_value}"
        )
        self.row = row
        self.col = col
        self.raw_text = raw_text
        self.max_value = max_value


class RowIndexOutOfRange(SchematicError):
    def __init__(self, row: int, row_count: int) -> None:
        super().__init__(f"token row {row} is not in a grid of {row_count} rows")
        self.row = row
        self.row_count = row_count


@dataclass(frozen=True)
class Token:
    """A maximal run of digits on one schematic row."""

    value: int
    row: int
    col_start: int
    col_end: int        # exclusive
    row_width: int

    @property
    def footprint(self) -> range:
        """Columns tested for adjacency: one either side, clipped to the row."""
        return range(max(self.col_start - 1, 0), min(self.col_end, self.row_width - 1) + 1)


@dataclass(frozen=True)
class SymbolSet:
    """Symbol columns of one row, with the character found at each."""

    chars: Mapping[int, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "chars", MappingProxyType(dict(self.chars)))

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.chars.items())))

    @property
    def columns(self) -> frozenset[int]:
        return frozenset(self.chars)

    def __contains__(self, col: object) -> bool:
        return col in self.chars

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self.chars))

    def __len__(self) -> int:
        return len(self.chars)

    def intersects(self, cols: Iterable[int]) -> bool:
        return any(c in self.chars for c in cols)

    def hits(self, cols: Iterable[int]) -> list[tuple[int, str]]:
        return [(c, self.chars[c]) for c in cols if c in self.chars]


@dataclass(frozen=True)
class RowRecord:
    """One indexed row: its digit-run tokens and its symbol positions."""

    row: int
    width: int
    tokens: tuple[Token, ...] = ()
    symbols: SymbolSet = field(default_factory=SymbolSet)


@dataclass(frozen=True)
class SymbolHit:
    """A symbol cell adjacent to a part number."""

    row: int
    col: int
    char: str
    token: Token
