"""chessfen — parse and serialise chess positions in FEN.

Boundary operations::

    import chessfen

    pos = chessfen.parse("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")
    text = chessfen.serialize(pos)
    empty = chessfen.default()
"""

from chessfen.core import (
    STARTING_FEN,
    Board,
    CastlingRights,
    Color,
    EnPassantTarget,
    FenError,
    FenErrorKind,
    ParseOptions,
    Piece,
    PieceType,
    Position,
    position_from_fen,
    position_to_fen,
)

parse = position_from_fen
serialize = position_to_fen
default = Position.default

__all__ = [
    "STARTING_FEN",
    "Board",
    "CastlingRights",
    "Color",
    "EnPassantTarget",
    "FenError",
    "FenErrorKind",
    "ParseOptions",
    "Piece",
    "PieceType",
    "Position",
    "default",
    "parse",
    "serialize",
]
