"""Static evaluation of Ataxx positions."""

from .board import Board
from .pieces import BLUE, RED

# Magnitude of a won position. Search adds the remaining depth so that
# sooner wins score higher.
WINNING_VALUE = 900000


class Evaluator:
    """Piece-count heuristic.

    Decided games score +/-(WINNING_VALUE + depth), positive for Red, and 0
    for a draw. Otherwise the score is the piece difference seen by the side
    to move on BOARD.
    """

    def evaluate(self, board: Board, depth: int = 0) -> int:
        winner = board.winner
        if winner is not None:
            if winner is RED:
                return WINNING_VALUE + depth
            if winner is BLUE:
                return -(WINNING_VALUE + depth)
            return 0
        if board.whose_move is RED:
            return board.red_pieces - board.blue_pieces
        return board.blue_pieces - board.red_pieces
