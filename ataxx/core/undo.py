"""Undo log for board mutations.

Two parallel stacks hold the index of each changed square and the color it
held before the change. A None entry on both stacks marks the start of a
move's change set, so a whole move is reverted by popping back to the
sentinel. Per-move bookkeeping that is not a square (jump counter, winner)
is saved alongside each group.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from .pieces import PieceColor


class UndoLog:
    def __init__(self):
        self._squares: List[Optional[int]] = []
        self._pieces: List[Optional[PieceColor]] = []
        self._states: List[Any] = []

    def begin_group(self, state: Any = None) -> None:
        """Open the change set for a new move, saving STATE for its undo."""
        self._squares.append(None)
        self._pieces.append(None)
        self._states.append(state)

    def record_change(self, sq: int, previous: PieceColor) -> None:
        if not self._states:
            raise RuntimeError("record_change() outside of an undo group")
        self._squares.append(sq)
        self._pieces.append(previous)

    def revert_group(self) -> Tuple[List[Tuple[int, PieceColor]], Any]:
        """Pop the most recent group.

        Returns its changes, most recent first, and the state saved by
        begin_group().
        """
        if not self._states:
            raise IndexError("revert_group() on an empty undo log")
        changes = []
        while self._squares[-1] is not None:
            changes.append((self._squares.pop(), self._pieces.pop()))
        self._squares.pop()
        self._pieces.pop()
        return changes, self._states.pop()

    def clear(self) -> None:
        self._squares.clear()
        self._pieces.clear()
        self._states.clear()

    def __len__(self) -> int:
        """Number of open groups."""
        return len(self._states)
