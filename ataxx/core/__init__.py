"""Core engine components: board, moves, evaluator, and search."""

from .pieces import PieceColor, RED, BLUE, EMPTY, BLOCKED
from .move import Move, PASS
from .board import Board
from .evaluator import Evaluator
from .search import SearchEngine, AIPlayer
from .errors import GameError, IllegalMoveError, IllegalSetupError, EmptyHistoryError, MoveFormatError
