"""Core enumerations and flags for the position record."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color; doubles as the active player."""

    WHITE = 0
    BLACK = 1

    @property
    def fen_char(self) -> str:
        """Active-color field value: ``w`` or ``b``."""
        return "w" if self is Color.WHITE else "b"

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def from_flags(
        cls,
        white_kingside: bool = False,
        white_queenside: bool = False,
        black_kingside: bool = False,
        black_queenside: bool = False,
    ) -> CastlingRights:
        """Build a mask from four independent booleans."""
        rights = cls.NONE
        if white_kingside:
            rights |= cls.WHITE_KINGSIDE
        if white_queenside:
            rights |= cls.WHITE_QUEENSIDE
        if black_kingside:
            rights |= cls.BLACK_KINGSIDE
        if black_queenside:
            rights |= cls.BLACK_QUEENSIDE
        return rights


# Castling field letters in canonical serialisation order.
CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}
