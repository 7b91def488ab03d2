import logging
import random
import time
from dataclasses import dataclass
from typing import List, Optional

from .board import Board
from .evaluator import Evaluator
from .move import INTERIOR_SQUARES, PASS, Move, column_of, row_of
from .pieces import BLUE, RED, PieceColor
from .utils import format_info

logger = logging.getLogger(__name__)

INF = 1000000

# Fixed search depth in plies.
MAX_DEPTH = 4


@dataclass
class SearchResult:
    move: Optional[Move]
    score: int
    nodes: int


def possible_moves(board: Board, color: PieceColor) -> List[Move]:
    """Legal placements for COLOR, in search order.

    Squares are visited column by column from the left, bottom to top
    within a column; targets by column offset, then row offset, -2..2.
    """
    result = []
    for sq in INTERIOR_SQUARES:
        if board.get(sq) is not color:
            continue
        col0, row0 = column_of(sq), row_of(sq)
        for dc in range(-2, 3):
            col1 = chr(ord(col0) + dc)
            for dr in range(-2, 3):
                move = Move.move(col0, row0, col1, chr(ord(row0) + dr))
                if board.legal_move(move):
                    result.append(move)
    return result


class SearchEngine:
    """Fixed-depth minimax with alpha-beta pruning.

    Red maximizes and Blue minimizes. Every child is searched on its own
    copy of the board, so the board passed in is never modified.
    """

    def __init__(self, evaluator: Optional[Evaluator] = None, depth: int = MAX_DEPTH):
        if depth < 1:
            raise ValueError(f"search depth must be at least 1, got {depth}")
        self.evaluator = evaluator or Evaluator()
        self.max_depth = depth
        self.nodes = 0
        self._found_move: Optional[Move] = None

    def search_best_move(self, board: Board) -> Move:
        return self.find_move(board).move

    def find_move(self, board: Board) -> SearchResult:
        """Pick a move for the side to move on BOARD.

        Returns no move (None) when the game on BOARD is already decided,
        and a pass without searching when the side to move has no placement.
        """
        if board.winner is not None:
            return SearchResult(None, self.evaluator.evaluate(board, self.max_depth), 0)
        color = board.whose_move
        if not board.can_move(color):
            return SearchResult(PASS, self.evaluator.evaluate(board, self.max_depth), 0)

        self.nodes = 0
        self._found_move = None
        start_time = time.time()
        sense = 1 if color is RED else -1
        score = self._min_max(board.copy(), self.max_depth, True, sense, -INF, INF)
        move = self._found_move

        elapsed = time.time() - start_time
        logger.info(format_info(self.max_depth, score, self.nodes, elapsed, move))
        return SearchResult(move, score, self.nodes)

    def _min_max(self, board: Board, depth: int, save_move: bool, sense: int,
                 alpha: int, beta: int) -> int:
        """Value of BOARD searched DEPTH plies deep.

        SENSE is 1 when Red is to move (maximize) and -1 for Blue
        (minimize). Only a strictly better score replaces the best move, so
        among equal moves the first one generated wins. Records the best
        move in _found_move iff SAVE_MOVE.
        """
        self.nodes += 1
        if depth <= 0 or board.winner is not None:
            return self.evaluator.evaluate(board, depth)

        if board.legal_move(PASS):
            child = board.copy()
            child.make_move(PASS)
            best = PASS
            best_score = self._min_max(child, depth - 1, False, -sense, alpha, beta)
        else:
            color = RED if sense == 1 else BLUE
            moves = possible_moves(board, color)
            if not moves:
                return self.evaluator.evaluate(board, depth)
            best = None
            best_score = -INF if sense == 1 else INF
            for move in moves:
                child = board.copy()
                child.make_move(move)
                response = self._min_max(child, depth - 1, False, -sense, alpha, beta)
                if sense == 1:
                    if response > best_score:
                        best, best_score = move, response
                        alpha = max(alpha, best_score)
                        if alpha >= beta:
                            break
                elif response < best_score:
                    best, best_score = move, response
                    beta = min(beta, best_score)
                    if alpha >= beta:
                        break

        if save_move:
            self._found_move = best
        return best_score


class AIPlayer:
    """Automated player for one color.

    SEED initializes a private random generator; identical seeds give
    identical behaviour. The search itself is deterministic and does not
    draw from it.
    """

    def __init__(self, color: PieceColor, seed: int = 0, depth: int = MAX_DEPTH):
        self.color = color
        self.random = random.Random(seed)
        self.search = SearchEngine(depth=depth)

    def get_move(self, board: Board) -> Optional[str]:
        """Text of the chosen move on BOARD, where it is this player's turn.

        Returns '-' when this player cannot move and None once the game is
        decided.
        """
        if board.winner is not None:
            return None
        if not board.can_move(self.color):
            return "-"
        return str(self.search.search_best_move(board))
