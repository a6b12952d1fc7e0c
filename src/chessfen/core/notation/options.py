"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass

# Counters are written with at most two decimal digits.
MAX_COUNTER_DIGITS = 2
MAX_COUNTER = 10**MAX_COUNTER_DIGITS - 1


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Optional validation beyond the field grammar.

    Both checks are off by default: repeated castling letters collapse and
    the en passant rank is not compared with the side to move.
    """

    strict_castling: bool = False
    check_en_passant_side: bool = False

    @classmethod
    def strict(cls) -> ParseOptions:
        return cls(strict_castling=True, check_en_passant_side=True)


DEFAULT_OPTIONS = ParseOptions()
