"""Square type alias, coordinate helpers and the en passant target.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

Internal rank 0 is notation rank 1 (the *last* group of the placement
field); internal rank 7 is notation rank 8 (the *first* group).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chessfen.core.errors import FenError, FenErrorKind

Square: TypeAlias = int  # 0–63

FILES = "abcdefgh"
EN_PASSANT_RANKS = (3, 6)


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq & 7


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return sq >> 3


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    if not (0 <= file < 8 and 0 <= rank < 8):
        raise IndexError(f"Coordinates out of board: file={file}, rank={rank}")
    return rank * 8 + file


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return FILES[file_of(sq)] + str(rank_of(sq) + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 28."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(FILES.index(name[0]), int(name[1]) - 1)


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < 64


@dataclass(frozen=True, slots=True)
class EnPassantTarget:
    """Square a pawn just skipped over: file ``a``–``h``, rank 3 or 6."""

    file: str
    rank: int

    def __post_init__(self) -> None:
        if (
            not isinstance(self.file, str)
            or len(self.file) != 1
            or self.file not in FILES
            or isinstance(self.rank, bool)
            or not isinstance(self.rank, int)
            or self.rank not in EN_PASSANT_RANKS
        ):
            raise FenError(FenErrorKind.INVALID_EN_PASSANT, f"{self.file}{self.rank}")

    @classmethod
    def from_str(cls, text: str) -> EnPassantTarget:
        """Parse a two-character square such as ``c6``."""
        if len(text) != 2 or text[1] not in "36":
            raise FenError(FenErrorKind.INVALID_EN_PASSANT, text)
        return cls(text[0], int(text[1]))

    @property
    def square(self) -> Square:
        return make_square(FILES.index(self.file), self.rank - 1)

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
