"""Square states of an Ataxx board."""

from enum import Enum


class PieceColor(Enum):
    """Contents of one square: a player's piece, an empty square, or a block.

    BLOCKED covers both the blocks placed during setup and the artificial
    border around the playing area.
    """

    EMPTY = "-"
    BLOCKED = "X"
    RED = "r"
    BLUE = "b"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_piece(self) -> bool:
        return self is PieceColor.RED or self is PieceColor.BLUE

    def opposite(self) -> "PieceColor":
        """Return the other player's color. Only defined for RED and BLUE."""
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        raise ValueError(f"{self.name} has no opposite color")

    @classmethod
    def parse(cls, name: str) -> "PieceColor":
        """Player color from a name such as 'red' or 'Blue'."""
        try:
            color = cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown color: {name!r}") from None
        if not color.is_piece:
            raise ValueError(f"Not a player color: {name!r}")
        return color

    def __str__(self) -> str:
        return self.name.lower()


RED = PieceColor.RED
BLUE = PieceColor.BLUE
EMPTY = PieceColor.EMPTY
BLOCKED = PieceColor.BLOCKED
