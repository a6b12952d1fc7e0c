"""Core domain layer — the position record and its notation codec.

Quick start::

    from chessfen.core import STARTING_FEN, position_from_fen, position_to_fen

    pos = position_from_fen(STARTING_FEN)
    assert position_to_fen(pos) == STARTING_FEN
"""

from chessfen.core.board import Board
from chessfen.core.enums import CastlingRights, Color, PieceType
from chessfen.core.errors import FenError, FenErrorKind
from chessfen.core.notation import (
    STARTING_FEN,
    ParseOptions,
    position_from_fen,
    position_to_fen,
)
from chessfen.core.piece import Piece
from chessfen.core.position import Position
from chessfen.core.types import (
    EnPassantTarget,
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Errors
    "FenError",
    "FenErrorKind",
    # Types / helpers
    "EnPassantTarget",
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Piece",
    "Position",
    # Notation
    "STARTING_FEN",
    "ParseOptions",
    "position_from_fen",
    "position_to_fen",
]
