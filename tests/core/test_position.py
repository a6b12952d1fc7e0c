"""Tests for the Position record."""

from chessfen.core.board import Board
from chessfen.core.enums import CastlingRights, Color
from chessfen.core.position import Position
from chessfen.core.types import EnPassantTarget, parse_square


class TestDefaultPosition:
    def test_empty_board(self) -> None:
        pos = Position.default()
        assert pos.board == Board()

    def test_white_to_move(self) -> None:
        assert Position.default().active_player == Color.WHITE

    def test_no_castling(self) -> None:
        pos = Position.default()
        assert pos.castling_rights == CastlingRights.NONE
        assert not any(
            (pos.white_kingside, pos.white_queenside, pos.black_kingside, pos.black_queenside)
        )

    def test_no_en_passant_and_zero_counters(self) -> None:
        pos = Position.default()
        assert pos.en_passant_target is None
        assert pos.halfmove_clock == 0
        assert pos.fullmove_counter == 0

    def test_equals_plain_constructor(self) -> None:
        assert Position.default() == Position()


class TestPositionFields:
    def test_castling_flags(self) -> None:
        pos = Position(
            castling_rights=CastlingRights.WHITE_QUEENSIDE | CastlingRights.BLACK_KINGSIDE
        )
        assert not pos.white_kingside
        assert pos.white_queenside
        assert pos.black_kingside
        assert not pos.black_queenside

    def test_from_flags(self) -> None:
        rights = CastlingRights.from_flags(True, True, True, True)
        assert rights == CastlingRights.ALL
        assert CastlingRights.from_flags() == CastlingRights.NONE

    def test_direct_assignment_affects_equality(self) -> None:
        a = Position()
        b = Position()
        b.halfmove_clock = 3
        assert a != b
        a.halfmove_clock = 3
        assert a == b

    def test_copy_is_deep_for_board(self) -> None:
        pos = Position(board=Board.initial(), en_passant_target=EnPassantTarget("e", 3))
        clone = pos.copy()
        assert clone == pos
        clone.board[parse_square("e1")] = None
        assert clone != pos

    def test_repr_mentions_en_passant(self) -> None:
        pos = Position(en_passant_target=EnPassantTarget("c", 6))
        assert "en_passant_target=c6" in repr(pos)
