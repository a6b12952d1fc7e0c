"""Position — the decoded notation record (board + metadata)."""

from __future__ import annotations

from chessfen.core.board import Board
from chessfen.core.enums import CastlingRights, Color
from chessfen.core.types import EnPassantTarget


class Position:
    """Board + active player + castling + en passant + clocks.

    A plain value aggregate: fields are assigned directly and two positions
    are equal when every field is.  ``Position()`` is the empty default
    (empty board, white to move, no castling, no en passant, counters 0).
    """

    __slots__ = (
        "board",
        "active_player",
        "castling_rights",
        "en_passant_target",
        "halfmove_clock",
        "fullmove_counter",
    )

    def __init__(
        self,
        board: Board | None = None,
        active_player: Color = Color.WHITE,
        castling_rights: CastlingRights = CastlingRights.NONE,
        en_passant_target: EnPassantTarget | None = None,
        halfmove_clock: int = 0,
        fullmove_counter: int = 0,
    ) -> None:
        self.board = board if board is not None else Board()
        self.active_player = active_player
        self.castling_rights = castling_rights
        self.en_passant_target = en_passant_target
        self.halfmove_clock = halfmove_clock
        self.fullmove_counter = fullmove_counter

    @classmethod
    def default(cls) -> Position:
        return cls()

    # ── Castling flags ───────────────────────────────────────────────────

    @property
    def white_kingside(self) -> bool:
        return bool(self.castling_rights & CastlingRights.WHITE_KINGSIDE)

    @property
    def white_queenside(self) -> bool:
        return bool(self.castling_rights & CastlingRights.WHITE_QUEENSIDE)

    @property
    def black_kingside(self) -> bool:
        return bool(self.castling_rights & CastlingRights.BLACK_KINGSIDE)

    @property
    def black_queenside(self) -> bool:
        return bool(self.castling_rights & CastlingRights.BLACK_QUEENSIDE)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        return Position(
            board=self.board.copy(),
            active_player=self.active_player,
            castling_rights=self.castling_rights,
            en_passant_target=self.en_passant_target,
            halfmove_clock=self.halfmove_clock,
            fullmove_counter=self.fullmove_counter,
        )

    def _fields(self) -> tuple[object, ...]:
        return tuple(getattr(self, name) for name in self.__slots__)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._fields() == other._fields()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        ep = str(self.en_passant_target) if self.en_passant_target else "-"
        return (
            f"Position(active_player={self.active_player}, "
            f"castling_rights={self.castling_rights!r}, en_passant_target={ep}, "
            f"halfmove_clock={self.halfmove_clock}, "
            f"fullmove_counter={self.fullmove_counter})"
        )
