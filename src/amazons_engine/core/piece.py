"""Square contents: the two sides' archers, spears and empty squares."""

from enum import Enum


class Piece(Enum):
    """Contents of a board square."""

    EMPTY = "-"
    LIGHT = "W"
    DARK = "B"
    SPEAR = "S"

    @property
    def symbol(self) -> str:
        """One-letter display symbol."""
        return self.value

    @property
    def is_side(self) -> bool:
        """True for LIGHT and DARK."""
        return self in (Piece.LIGHT, Piece.DARK)

    def opponent(self) -> "Piece":
        """Return the opposing side."""
        if self is Piece.LIGHT:
            return Piece.DARK
        if self is Piece.DARK:
            return Piece.LIGHT
        raise ValueError(f"{self.name} has no opponent")

    @classmethod
    def from_symbol(cls, symbol: str) -> "Piece":
        """Return the piece displayed as SYMBOL."""
        try:
            return cls(symbol.upper())
        except ValueError:
            raise ValueError(f"Unknown piece symbol: {symbol!r}") from None
