"""Notation package: FEN tokenising, parsing and serialization."""

from chessfen.core.notation.fen import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    castling_from_fen,
    castling_to_fen,
    position_from_fen,
    position_to_fen,
)
from chessfen.core.notation.options import MAX_COUNTER, ParseOptions
from chessfen.core.notation.tokenizer import Token, Tokenizer, tokenize

__all__ = [
    "STARTING_FEN",
    "MAX_COUNTER",
    "ParseOptions",
    "Token",
    "Tokenizer",
    "tokenize",
    "board_from_fen",
    "board_to_fen",
    "castling_from_fen",
    "castling_to_fen",
    "position_from_fen",
    "position_to_fen",
]
