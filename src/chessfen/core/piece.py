"""Piece value object and the placement-field letters."""

from __future__ import annotations

from dataclasses import dataclass

from chessfen.core.enums import Color, PieceType
from chessfen.core.errors import FenError, FenErrorKind

# Case-insensitive placement letter → piece kind; case carries the color.
_LETTER_TYPES: dict[str, PieceType] = {
    "R": PieceType.ROOK,
    "B": PieceType.BISHOP,
    "K": PieceType.KING,
    "N": PieceType.KNIGHT,
    "P": PieceType.PAWN,
    "Q": PieceType.QUEEN,
}
_TYPE_LETTERS: dict[PieceType, str] = {v: k for k, v in _LETTER_TYPES.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """One of the 12 board symbols: a piece kind in a color."""

    color: Color
    piece_type: PieceType

    @property
    def letter(self) -> str:
        """Placement letter, uppercase for white and lowercase for black."""
        upper = _TYPE_LETTERS[self.piece_type]
        return upper if self.color is Color.WHITE else upper.lower()

    def __str__(self) -> str:
        return self.letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Decode a placement letter, e.g. 'N' → white knight.

        Raises :class:`FenError` (``INVALID_PIECE``) for anything but one of
        ``RBKNPQ`` in either case.
        """
        ptype = _LETTER_TYPES.get(char.upper()) if len(char) == 1 else None
        if ptype is None or not char.isascii():
            raise FenError(FenErrorKind.INVALID_PIECE, char)
        return cls(Color.WHITE if char.isupper() else Color.BLACK, ptype)
