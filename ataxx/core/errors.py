"""Exceptions raised by the Ataxx core."""


class GameError(Exception):
    """Base class for rule violations reported by the board."""


class IllegalMoveError(GameError):
    """A placement or pass that is not legal on the current board."""


class IllegalSetupError(GameError):
    """A block placement attempted outside of the setup phase or on an occupied square."""


class EmptyHistoryError(GameError):
    """Undo requested with no committed move to revert."""


class MoveFormatError(GameError, ValueError):
    """Text that does not denote a square or a move."""
