import logging
from typing import List, Optional, Tuple

from ataxx.config import CONFIG
from ataxx.core.board import Board
from ataxx.core.errors import GameError
from ataxx.core.pieces import PieceColor
from ataxx.core.search import AIPlayer, SearchEngine, possible_moves

logger = logging.getLogger(__name__)


class Engine:
    """A game in progress plus the searcher that plays it."""

    def __init__(self, depth: Optional[int] = None):
        self.board = Board()
        self.search = SearchEngine(depth=depth or CONFIG.search.depth)

    def reset(self):
        self.board.clear()

    def legal_moves(self) -> List[str]:
        """Legal moves for the side to move, as text."""
        if self.board.legal_move("-"):
            return ["-"]
        return [str(m) for m in possible_moves(self.board, self.board.whose_move)]

    def make_move(self, move: str) -> bool:
        """Apply a move in text form. Returns True if it was legal."""
        try:
            self.board.make_move(move)
        except GameError as exc:
            logger.debug("make_move(%r) failed: %s", move, exc)
            return False
        self._report_end()
        return True

    def set_block(self, square: str) -> bool:
        """Place a block (with reflections). Returns True if it was legal."""
        try:
            self.board.set_block(square)
        except GameError as exc:
            logger.debug("set_block(%r) failed: %s", square, exc)
            return False
        self._report_end()
        return True

    def undo(self) -> bool:
        try:
            self.board.undo()
        except GameError:
            return False
        return True

    def get_best_move(self) -> Tuple[Optional[str], int]:
        """Engine move as text (None once the game is decided) and its score."""
        result = self.search.find_move(self.board)
        return (str(result.move) if result.move is not None else None), result.score

    def ai_move(self, color: Optional[PieceColor] = None) -> Optional[str]:
        """Move chosen by an AIPlayer for COLOR (default: the side to move).

        The player is seeded from the configuration and searches a snapshot
        of the board.
        """
        player = AIPlayer(color or self.board.whose_move, seed=CONFIG.search.seed,
                          depth=self.search.max_depth)
        return player.get_move(self.board.copy())

    def play_best_move(self) -> str:
        """Choose and apply the engine's move; returns its text."""
        move = self.ai_move()
        if move is None:
            raise GameError("Game is already over")
        self.board.make_move(move)
        self._report_end()
        return move

    def _report_end(self):
        winner = self.board.winner
        if winner is not None:
            logger.info("Game over: %s (red %d, blue %d)",
                        "draw" if not winner.is_piece else f"{winner} wins",
                        self.board.red_pieces, self.board.blue_pieces)

    def print_board(self):
        print(self.board.render(legend=True))
