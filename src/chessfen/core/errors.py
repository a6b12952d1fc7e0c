"""Structured parse / serialisation errors."""

from __future__ import annotations

from enum import Enum


class FenErrorKind(Enum):
    """Why a notation string (or a position) was rejected."""

    FIELD_COUNT = "field count"
    INVALID_PIECE = "piece character"
    INVALID_EMPTY_RUN = "empty-square run"
    RANK_LENGTH_MISMATCH = "rank width"
    RANK_COUNT_MISMATCH = "rank count"
    INVALID_PLAYER = "side-to-move"
    INVALID_CASTLING = "castling field"
    DUPLICATE_CASTLING = "duplicate castling flag"
    INVALID_EN_PASSANT = "en-passant square"
    EN_PASSANT_SIDE_MISMATCH = "en-passant square for side-to-move"
    INVALID_NUMBER = "numeric field"
    COUNTER_OUT_OF_RANGE = "counter range"


class FenError(ValueError):
    """Raised for any malformed notation string or unserialisable position.

    ``kind`` tags the failure; ``field`` holds the offending token when
    there is one.
    """

    def __init__(self, kind: FenErrorKind, field: str | None = None, detail: str = "") -> None:
        self.kind = kind
        self.field = field
        self.detail = detail
        message = f"Invalid FEN {kind.value}"
        if field is not None:
            message += f": {field!r}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)

    def __reduce__(self):
        return type(self), (self.kind, self.field, self.detail)
