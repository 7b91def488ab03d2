"""Squares and moves.

Squares are addressed either by label ("c4") or by linearized index into
an 11x11 grid: the 7x7 playing area padded with a two-square border on every
side. Column letters and row digits up to two places beyond 'a'..'g' and
'1'..'7' name border squares, which is what lets move generation look two
squares away from any interior square without bounds checks.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .errors import MoveFormatError

SIDE = 7
EXTENDED_SIDE = SIDE + 4

_MOVE_RE = re.compile(r"^([a-g])([1-7])-([a-g])([1-7])$")
_SQUARE_RE = re.compile(r"^([a-g])([1-7])$")


def index(col: str, row: str) -> int:
    """Linearized index of the square at column COL, row ROW."""
    return (ord(row) - ord("1") + 2) * EXTENDED_SIDE + (ord(col) - ord("a") + 2)


def neighbor(sq: int, dc: int, dr: int) -> int:
    """Index of the square DC columns and DR rows away from SQ."""
    return sq + dc + dr * EXTENDED_SIDE


def column_of(sq: int) -> str:
    return chr(sq % EXTENDED_SIDE - 2 + ord("a"))


def row_of(sq: int) -> str:
    return chr(sq // EXTENDED_SIDE - 2 + ord("1"))


def is_interior(sq: int) -> bool:
    c, r = sq % EXTENDED_SIDE, sq // EXTENDED_SIDE
    return 2 <= c < SIDE + 2 and 2 <= r < SIDE + 2


def square_name(sq: int) -> str:
    return column_of(sq) + row_of(sq)


def parse_square(text: str) -> int:
    """Index of the interior square labelled TEXT (e.g. 'd4')."""
    m = _SQUARE_RE.match(text.strip()) if isinstance(text, str) else None
    if not m:
        raise MoveFormatError(f"Invalid square: {text!r}")
    return index(m.group(1), m.group(2))


# Playing squares, column by column from a1, bottom to top within a column
INTERIOR_SQUARES = tuple(
    index(c, r) for c in "abcdefg" for r in "1234567"
)


@dataclass(frozen=True)
class Move:
    """A placement from one square to another, or a pass.

    Passes have no squares. Placements are either extends (the destination
    is adjacent to the source) or jumps (two squares away).
    """

    from_index: Optional[int] = None
    to_index: Optional[int] = None

    @property
    def is_pass(self) -> bool:
        return self.from_index is None

    @property
    def distance(self) -> int:
        if self.is_pass:
            return 0
        dc = abs(self.to_index % EXTENDED_SIDE - self.from_index % EXTENDED_SIDE)
        dr = abs(self.to_index // EXTENDED_SIDE - self.from_index // EXTENDED_SIDE)
        return max(dc, dr)

    @property
    def is_extend(self) -> bool:
        return self.distance == 1

    @property
    def is_jump(self) -> bool:
        return self.distance == 2

    @property
    def col0(self) -> str:
        return column_of(self.from_index)

    @property
    def row0(self) -> str:
        return row_of(self.from_index)

    @property
    def col1(self) -> str:
        return column_of(self.to_index)

    @property
    def row1(self) -> str:
        return row_of(self.to_index)

    @staticmethod
    def move(col0: str, row0: str, col1: str, row1: str) -> Optional["Move"]:
        """The move COL0ROW0-COL1ROW1, or None if it is neither an extend nor a jump.

        Squares may lie in the border region, so callers can probe every
        offset around a square and let the board reject blocked targets.
        """
        dc = ord(col1) - ord(col0)
        dr = ord(row1) - ord(row0)
        if max(abs(dc), abs(dr)) not in (1, 2):
            return None
        for col, row in ((col0, row0), (col1, row1)):
            if abs(ord(col) - ord("d")) > 5 or abs(ord(row) - ord("4")) > 5:
                return None
        return Move(index(col0, row0), index(col1, row1))

    @staticmethod
    def parse(text: str) -> "Move":
        """Parse 'c0r0-c1r1' or '-' (pass)."""
        if not isinstance(text, str):
            raise MoveFormatError(f"Invalid move: {text!r}")
        text = text.strip()
        if text == "-":
            return PASS
        m = _MOVE_RE.match(text)
        if not m:
            raise MoveFormatError(f"Invalid move: {text!r}")
        move = Move.move(*m.groups())
        if move is None:
            raise MoveFormatError(f"Not an extend or a jump: {text!r}")
        return move

    def __str__(self) -> str:
        if self.is_pass:
            return "-"
        return f"{square_name(self.from_index)}-{square_name(self.to_index)}"


PASS = Move()
