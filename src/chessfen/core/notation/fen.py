"""FEN parsing and serialization."""

from __future__ import annotations

import logging

from chessfen.core.board import BOARD_SIZE, Board
from chessfen.core.enums import CASTLING_CHARS, CastlingRights, Color
from chessfen.core.errors import FenError, FenErrorKind
from chessfen.core.notation.options import (
    DEFAULT_OPTIONS,
    MAX_COUNTER,
    MAX_COUNTER_DIGITS,
    ParseOptions,
)
from chessfen.core.notation.tokenizer import Tokenizer
from chessfen.core.piece import Piece
from chessfen.core.position import Position
from chessfen.core.types import EnPassantTarget, make_square

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

FIELD_COUNT = 6
FIELD_DELIMITER = " "
RANK_SEPARATOR = "/"
NONE_MARKER = "-"

_DIGITS = "0123456789"


# ── Tokenising ──────────────────────────────────────────────────────────────


def split_fields(text: str) -> list[str]:
    """Split *text* into its six non-empty fields.

    Any whitespace character (tab, newline, ...) separates fields; it is
    mapped onto the single-character delimiter before tokenising.  Runs of
    whitespace produce empty tokens, which are skipped here rather than in
    the tokenizer.
    """
    normalized = "".join(FIELD_DELIMITER if ch.isspace() else ch for ch in text.strip())
    fields = [
        token.text(normalized)
        for token in Tokenizer(normalized, FIELD_DELIMITER)
        if token.length > 0
    ]
    if len(fields) != FIELD_COUNT:
        raise FenError(
            FenErrorKind.FIELD_COUNT,
            text,
            f"expected {FIELD_COUNT} fields, got {len(fields)}",
        )
    return fields


# ── Field decoders ──────────────────────────────────────────────────────────


def board_from_fen(placement: str) -> Board:
    """Decode the piece-placement field into a fully populated :class:`Board`."""
    ranks = placement.split(RANK_SEPARATOR)
    if len(ranks) != BOARD_SIZE:
        raise FenError(
            FenErrorKind.RANK_COUNT_MISMATCH,
            placement,
            f"expected {BOARD_SIZE} ranks, got {len(ranks)}",
        )

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = BOARD_SIZE - 1 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in _DIGITS:
                run = int(ch)
                if run == 0:
                    raise FenError(FenErrorKind.INVALID_EMPTY_RUN, rank_text)
                if file + run > BOARD_SIZE:
                    raise FenError(
                        FenErrorKind.RANK_LENGTH_MISMATCH, rank_text, "rank overflows"
                    )
                file += run
            else:
                piece = Piece.from_char(ch)
                if file >= BOARD_SIZE:
                    raise FenError(
                        FenErrorKind.RANK_LENGTH_MISMATCH, rank_text, "rank overflows"
                    )
                board[make_square(file, rank)] = piece
                file += 1
        if file != BOARD_SIZE:
            raise FenError(
                FenErrorKind.RANK_LENGTH_MISMATCH,
                rank_text,
                f"rank covers {file} of {BOARD_SIZE} files",
            )
    return board


def active_player_from_fen(field: str) -> Color:
    if field == "w":
        return Color.WHITE
    if field == "b":
        return Color.BLACK
    raise FenError(FenErrorKind.INVALID_PLAYER, field)


def castling_from_fen(field: str, strict: bool = False) -> CastlingRights:
    """Decode the castling field.

    Repeated letters collapse unless *strict* is set.
    """
    castling = CastlingRights.NONE
    if field == NONE_MARKER:
        return castling
    if not field:
        raise FenError(FenErrorKind.INVALID_CASTLING, field)

    seen: set[str] = set()
    for ch in field:
        right = CASTLING_CHARS.get(ch)
        if right is None:
            raise FenError(FenErrorKind.INVALID_CASTLING, field)
        if strict and ch in seen:
            raise FenError(FenErrorKind.DUPLICATE_CASTLING, field)
        seen.add(ch)
        castling |= right
    return castling


def en_passant_from_fen(field: str) -> EnPassantTarget | None:
    if field == NONE_MARKER:
        return None
    return EnPassantTarget.from_str(field)


def counter_from_fen(field: str) -> int:
    """Decode a halfmove / fullmove field of ASCII digits."""
    if not field or any(ch not in _DIGITS for ch in field):
        raise FenError(FenErrorKind.INVALID_NUMBER, field)
    if len(field) > MAX_COUNTER_DIGITS:
        raise FenError(
            FenErrorKind.COUNTER_OUT_OF_RANGE,
            field,
            f"at most {MAX_COUNTER_DIGITS} digits supported",
        )
    return int(field)


# ── Parse ───────────────────────────────────────────────────────────────────


def position_from_fen(fen: str, options: ParseOptions | None = None) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Raises :class:`FenError` (a ``ValueError``) tagged with the failing
    :class:`FenErrorKind`.
    """
    if not isinstance(fen, str):
        raise TypeError(f"FEN must be a str, got {type(fen).__name__}")
    opts = options if options is not None else DEFAULT_OPTIONS

    try:
        placement, side_part, castling_part, ep_part, half_part, full_part = (
            split_fields(fen)
        )

        board = board_from_fen(placement)
        side = active_player_from_fen(side_part)
        castling = castling_from_fen(castling_part, strict=opts.strict_castling)
        ep = en_passant_from_fen(ep_part)
        if ep is not None and opts.check_en_passant_side:
            expected_rank = 6 if side == Color.WHITE else 3
            if ep.rank != expected_rank:
                raise FenError(FenErrorKind.EN_PASSANT_SIDE_MISMATCH, ep_part)
        halfmove = counter_from_fen(half_part)
        fullmove = counter_from_fen(full_part)
    except FenError as exc:
        _LOGGER.debug("Rejected FEN %r: %s", fen, exc)
        raise

    return Position(board, side, castling, ep, halfmove, fullmove)


# ── Serialise ───────────────────────────────────────────────────────────────


def board_to_fen(board: Board) -> str:
    """Piece-placement field, rank 8 first, empty runs as digits."""
    rows: list[str] = []
    for cells in board.ranks():
        empty = 0
        row = ""
        for piece in cells:
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return RANK_SEPARATOR.join(rows)


def castling_to_fen(castling: CastlingRights) -> str:
    """Castling letters in canonical ``KQkq`` order, or ``-``."""
    if not isinstance(castling, int) or isinstance(castling, bool):
        raise FenError(FenErrorKind.INVALID_CASTLING, repr(castling))
    castling = CastlingRights(castling & CastlingRights.ALL)
    text = "".join(ch for ch, right in CASTLING_CHARS.items() if castling & right)
    return text or NONE_MARKER


def counter_to_fen(value: int) -> str:
    """Decimal text of a counter in ``0..MAX_COUNTER``.

    Out-of-range values are rejected, never truncated or wrapped.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise FenError(FenErrorKind.COUNTER_OUT_OF_RANGE, repr(value), "not an integer")
    if not 0 <= value <= MAX_COUNTER:
        raise FenError(
            FenErrorKind.COUNTER_OUT_OF_RANGE,
            str(value),
            f"supported range is 0..{MAX_COUNTER}",
        )
    return str(value)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    try:
        board_str = board_to_fen(pos.board)

        if not isinstance(pos.active_player, Color):
            raise FenError(FenErrorKind.INVALID_PLAYER, repr(pos.active_player))
        side_str = pos.active_player.fen_char

        castling_str = castling_to_fen(pos.castling_rights)

        ep = pos.en_passant_target
        if ep is not None and not isinstance(ep, EnPassantTarget):
            raise FenError(FenErrorKind.INVALID_EN_PASSANT, repr(ep))
        ep_str = str(ep) if ep is not None else NONE_MARKER

        half_str = counter_to_fen(pos.halfmove_clock)
        full_str = counter_to_fen(pos.fullmove_counter)
    except FenError as exc:
        _LOGGER.debug("Cannot serialise %r: %s", pos, exc)
        raise

    return FIELD_DELIMITER.join(
        (board_str, side_str, castling_str, ep_str, half_str, full_str)
    )
