"""Ataxx board: rules, move application with undo, and end-of-game detection."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Union

from .errors import EmptyHistoryError, IllegalMoveError, IllegalSetupError, MoveFormatError
from .move import (
    EXTENDED_SIDE,
    INTERIOR_SQUARES,
    PASS,
    SIDE,
    Move,
    column_of,
    index,
    is_interior,
    neighbor,
    parse_square,
    row_of,
)
from .pieces import BLOCKED, BLUE, EMPTY, RED, PieceColor
from .undo import UndoLog

logger = logging.getLogger(__name__)

# Number of consecutive jumps after which the game ends.
JUMP_LIMIT = 25

# Offsets of the 5x5 neighborhood reachable by one move, and of the 3x3
# neighborhood converted by a placement.
_REACH = tuple(neighbor(0, dc, dr) for dc in range(-2, 3) for dr in range(-2, 3))
_ADJACENT = tuple(
    neighbor(0, dc, dr) for dc in range(-1, 2) for dr in range(-1, 2) if dc or dr
)

MoveLike = Union[Move, str, None]
Notifier = Callable[["Board"], None]


def _nop(board: "Board") -> None:
    pass


class Board:
    """An Ataxx board.

    The 7x7 playing area is stored in an 11x11 list whose outer two rings are
    permanently BLOCKED, so any square within two columns and rows of a
    playing square can be read without bounds checks. Every change to the
    playing area during a game goes through the undo log, one group per
    committed move (passes included), so undo() restores the exact previous
    position.
    """

    def __init__(self):
        self._board: List[PieceColor] = [BLOCKED] * (EXTENDED_SIDE * EXTENDED_SIDE)
        self._undo = UndoLog()
        self._moves: List[Move] = []
        self._counts: Dict[PieceColor, int] = {}
        self._whose_move = RED
        self._num_jumps = 0
        self._winner: Optional[PieceColor] = None
        self._notifier: Notifier = _nop
        self.clear()

    def clear(self):
        """Reset to the starting position: no blocks, Red to move."""
        for sq in range(len(self._board)):
            self._board[sq] = BLOCKED
        for sq in INTERIOR_SQUARES:
            self._board[sq] = EMPTY
        self._board[index("a", "7")] = RED
        self._board[index("g", "1")] = RED
        self._board[index("a", "1")] = BLUE
        self._board[index("g", "7")] = BLUE
        self._counts = {RED: 2, BLUE: 2, EMPTY: SIDE * SIDE - 4, BLOCKED: 0}
        self._whose_move = RED
        self._num_jumps = 0
        self._winner = None
        self._moves.clear()
        self._undo.clear()
        self._announce()

    def copy(self) -> "Board":
        """A scratch copy: same position and history, empty undo log, no notifier."""
        other = Board.__new__(Board)
        other._board = self._board.copy()
        other._undo = UndoLog()
        other._moves = self._moves.copy()
        other._counts = self._counts.copy()
        other._whose_move = self._whose_move
        other._num_jumps = self._num_jumps
        other._winner = self._winner
        other._notifier = _nop
        return other

    __copy__ = copy

    # ------------------------------------------------------------------
    # Queries

    def get(self, sq: int) -> PieceColor:
        """Contents of the square with linearized index SQ."""
        return self._board[sq]

    def get_square(self, col: str, row: str) -> PieceColor:
        """Contents of square COL ROW; border squares are BLOCKED."""
        return self._board[index(col, row)]

    @property
    def whose_move(self) -> PieceColor:
        return self._whose_move

    @property
    def winner(self) -> Optional[PieceColor]:
        """RED or BLUE once decided, EMPTY for a draw, None while the game goes on."""
        return self._winner

    @property
    def game_over(self) -> bool:
        return self._winner is not None

    def num_pieces(self, color: PieceColor) -> int:
        """Number of playing squares holding COLOR."""
        return self._counts[color]

    @property
    def red_pieces(self) -> int:
        return self._counts[RED]

    @property
    def blue_pieces(self) -> int:
        return self._counts[BLUE]

    def total_open(self) -> int:
        """Number of empty playing squares."""
        return self._counts[EMPTY]

    @property
    def num_moves(self) -> int:
        """Moves and passes made since the last clear."""
        return len(self._moves)

    @property
    def num_jumps(self) -> int:
        """Consecutive jumps made since the last extend."""
        return self._num_jumps

    @property
    def all_moves(self) -> List[Move]:
        return list(self._moves)

    def can_move(self, who: PieceColor) -> bool:
        """True iff WHO has a piece with an empty square within two squares.

        Ignores whose turn it is and whether the game is over.
        """
        board = self._board
        for sq in INTERIOR_SQUARES:
            if board[sq] is who:
                for off in _REACH:
                    if board[sq + off] is EMPTY:
                        return True
        return False

    def legal_move(self, move: MoveLike) -> bool:
        """True iff MOVE (a Move or its text form) is legal for the side to move."""
        if move is None:
            return False
        if isinstance(move, str):
            try:
                move = Move.parse(move)
            except MoveFormatError:
                return False
        if move.is_pass:
            return not self.can_move(self._whose_move) and self._counts[self._whose_move] != 0
        if not (is_interior(move.from_index) and is_interior(move.to_index)):
            return False
        if self._board[move.from_index] is not self._whose_move:
            return False
        if self._board[move.to_index] is not EMPTY:
            return False
        return move.is_extend or move.is_jump

    # ------------------------------------------------------------------
    # Moves

    def make_move(self, move: Union[Move, str]):
        """Apply MOVE (a Move, 'c0r0-c1r1', or '-' for a pass).

        Raises IllegalMoveError, leaving the board untouched, if the move
        is not legal.
        """
        if isinstance(move, str):
            move = Move.parse(move)
        if not self.legal_move(move):
            logger.debug("Rejected illegal move %s for %s", move, self._whose_move)
            raise IllegalMoveError(f"Illegal move: {move}")
        if move.is_pass:
            self._pass()
            return

        mover = self._whose_move
        opponent = mover.opposite()
        self._moves.append(move)
        self._undo.begin_group((self._num_jumps, self._winner))
        self._set(move.to_index, mover)
        for off in _ADJACENT:
            sq = move.to_index + off
            if self._board[sq] is opponent:
                self._set(sq, mover)
        if move.is_jump:
            self._num_jumps += 1
            self._set(move.from_index, EMPTY)
        else:
            self._num_jumps = 0

        self._update_winner()
        self._whose_move = opponent
        self._announce()

    def _pass(self):
        self._moves.append(PASS)
        self._undo.begin_group((self._num_jumps, self._winner))
        self._whose_move = self._whose_move.opposite()
        self._announce()

    def undo(self):
        """Take back the last committed move or pass."""
        if not self._moves or not self._undo:
            raise EmptyHistoryError("No move to undo")
        changes, (num_jumps, winner) = self._undo.revert_group()
        for sq, previous in changes:
            self._counts[self._board[sq]] -= 1
            self._counts[previous] += 1
            self._board[sq] = previous
        self._num_jumps = num_jumps
        self._winner = winner
        self._moves.pop()
        self._whose_move = self._whose_move.opposite()
        self._announce()

    def _set(self, sq: int, color: PieceColor):
        """Undoable write of COLOR to SQ."""
        previous = self._board[sq]
        self._undo.record_change(sq, previous)
        self._counts[previous] -= 1
        self._counts[color] += 1
        self._board[sq] = color

    def _update_winner(self):
        red, blue = self._counts[RED], self._counts[BLUE]
        if red == 0:
            self._winner = BLUE
        if blue == 0:
            self._winner = RED
        if self._num_jumps >= JUMP_LIMIT or (not self.can_move(RED) and not self.can_move(BLUE)):
            if red > blue:
                self._winner = RED
            elif red == blue:
                self._winner = EMPTY
            else:
                self._winner = BLUE
        if self._winner is not None:
            logger.debug("Game over after %d moves: %s (red %d, blue %d)",
                         len(self._moves), "draw" if self._winner is EMPTY else self._winner,
                         red, blue)

    # ------------------------------------------------------------------
    # Setup

    @staticmethod
    def _reflections(sq: int):
        col, row = column_of(sq), row_of(sq)
        mcol = chr(ord("a") + ord("g") - ord(col))
        mrow = chr(ord("1") + ord("7") - ord(row))
        return {index(col, row), index(col, mrow), index(mcol, row), index(mcol, mrow)}

    def legal_block(self, square: str) -> bool:
        """True iff a block (and its reflections) may be placed at SQUARE."""
        try:
            sq = parse_square(square)
        except MoveFormatError:
            return False
        if self._moves or self._counts[RED] != 2 or self._counts[BLUE] != 2:
            return False
        return all(self._board[s] is EMPTY for s in self._reflections(sq))

    def set_block(self, square: str):
        """Block SQUARE and its reflections across the middle row and column.

        Only allowed during setup: before the first move, while both sides
        still have their two starting pieces. Blocks are not undoable.
        """
        sq = parse_square(square)
        if not self.legal_block(square):
            logger.debug("Rejected block at %s", square)
            raise IllegalSetupError(f"Illegal block placement: {square}")
        for target in self._reflections(sq):
            self._counts[self._board[target]] -= 1
            self._counts[BLOCKED] += 1
            self._board[target] = BLOCKED
        if not self.can_move(RED) and not self.can_move(BLUE):
            self._winner = EMPTY
        self._announce()

    # ------------------------------------------------------------------
    # Observers and display

    def set_notifier(self, notify: Optional[Notifier]):
        """Call NOTIFY(board) after every change; None disables notification."""
        self._notifier = notify or _nop
        self._announce()

    def _announce(self):
        self._notifier(self)

    def render(self, legend: bool = False) -> str:
        """Text picture of the board, row 7 at the top."""
        lines = []
        for r in "7654321":
            cells = "".join(" " + self.get_square(c, r).symbol for c in "abcdefg")
            lines.append((r if legend else "") + " " + cells)
        if legend:
            lines.append("   a b c d e f g")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<Board {self._whose_move} to move, red={self.red_pieces} blue={self.blue_pieces}>"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._board == other._board

    def __hash__(self) -> int:
        return hash(tuple(self._board))
