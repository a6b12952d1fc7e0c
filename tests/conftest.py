"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessfen.core.notation import STARTING_FEN, position_from_fen
from chessfen.core.position import Position

SICILIAN_FEN = "rnbqkbnr/pp1ppppp/8/2p5/4P3/8/PPPP1PPP/RNBQKBNR w KQkq c6 0 1"
KIWIPETE_FEN = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


@pytest.fixture
def starting_position() -> Position:
    return position_from_fen(STARTING_FEN)


@pytest.fixture
def sicilian_position() -> Position:
    """1. e4 c5 with the c6 en passant square still recorded."""
    return position_from_fen(SICILIAN_FEN)
