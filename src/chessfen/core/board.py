"""Board - piece placement on a fixed 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessfen.core.enums import Color, PieceType
from chessfen.core.piece import Piece
from chessfen.core.types import Square, is_valid_square, make_square

BOARD_SIZE = 8
SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board.

    Cells are addressed by :data:`~chessfen.core.types.Square` (``a1 = 0``,
    ``h8 = 63``), so internal rank 0 is the bottom rank of the diagram.
    Indexing outside ``0..63`` raises :class:`IndexError`; negative indices
    never wrap around.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * SQUARE_COUNT

    @staticmethod
    def _check(sq: Square) -> Square:
        if isinstance(sq, bool) or not isinstance(sq, int) or not is_valid_square(sq):
            raise IndexError(f"Square out of range: {sq!r}")
        return sq

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[self._check(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if piece is not None and not isinstance(piece, Piece):
            raise TypeError(f"Board cells hold Piece or None, got {piece!r}")
        self._squares[self._check(sq)] = piece

    def __len__(self) -> int:
        return SQUARE_COUNT

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self._squares)

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def piece_at(self, file: int, rank: int) -> Piece | None:
        """Cell at 0-based *file* (a=0) and *rank* (rank 1 = 0)."""
        return self._squares[make_square(file, rank)]

    # -- Rank views ---------------------------------------------------------

    def rank(self, rank: int) -> tuple[Piece | None, ...]:
        """The 8 cells of internal *rank*, a-file first."""
        start = make_square(0, rank)
        return tuple(self._squares[start : start + BOARD_SIZE])

    def ranks(self) -> Iterator[tuple[Piece | None, ...]]:
        """Ranks in notation order: rank 8 first, rank 1 last."""
        for rank in range(BOARD_SIZE - 1, -1, -1):
            yield self.rank(rank)

    def piece_count(self, color: Color | None = None) -> int:
        """Number of occupied cells, optionally for one *color* only."""
        return sum(
            1
            for piece in self._squares
            if piece is not None and (color is None or piece.color == color)
        )

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * SQUARE_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(BOARD_SIZE):
            b[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.WHITE, pt)
            b[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = [str(p) if p else "." for p in self.rank(rank)]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
