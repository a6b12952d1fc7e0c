"""Tests for the package-level boundary operations."""

import threading

import pytest

import chessfen
from chessfen import Color, EnPassantTarget, FenError, FenErrorKind

SICILIAN_FEN = "rnbqkbnr/pp1ppppp/8/2p5/4P3/8/PPPP1PPP/RNBQKBNR w KQkq c6 0 1"


class TestBoundaryOperations:
    def test_parse_serialize_starting(self) -> None:
        assert chessfen.serialize(chessfen.parse(chessfen.STARTING_FEN)) == chessfen.STARTING_FEN

    def test_en_passant_preserved(self) -> None:
        pos = chessfen.parse(SICILIAN_FEN)
        assert pos.active_player == Color.WHITE
        assert pos.en_passant_target == EnPassantTarget("c", 6)
        assert chessfen.serialize(pos) == SICILIAN_FEN

    def test_default(self) -> None:
        pos = chessfen.default()
        assert pos.active_player == Color.WHITE
        assert pos.en_passant_target is None
        assert (pos.halfmove_clock, pos.fullmove_counter) == (0, 0)
        assert pos.board.piece_count() == 0

    def test_parse_accepts_options(self) -> None:
        with pytest.raises(FenError) as excinfo:
            chessfen.parse("8/8/8/8/8/8/8/8 w KK - 0 1", chessfen.ParseOptions.strict())
        assert excinfo.value.kind is FenErrorKind.DUPLICATE_CASTLING

    def test_concurrent_parses_are_independent(self) -> None:
        fens = [chessfen.STARTING_FEN, SICILIAN_FEN, "8/8/8/8/8/8/8/8 b Qk - 5 9"] * 20
        results: dict[int, str] = {}

        def work(idx: int, fen: str) -> None:
            results[idx] = chessfen.serialize(chessfen.parse(fen))

        threads = [threading.Thread(target=work, args=(i, f)) for i, f in enumerate(fens)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert [results[i] for i in range(len(fens))] == fens
