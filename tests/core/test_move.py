"""Tests for move values and move text."""

import pytest

from libchess.core import Move, PieceMove
from libchess.core.enums import MoveOption, PieceType
from libchess.core.errors import InvalidPromotionError, MoveParseError
from libchess.core.types import Square


class TestMoveParsing:
    def test_pawn_move(self) -> None:
        move = Move.from_str("e2e4")
        assert move == Move.piece(PieceType.PAWN, Square.E2, Square.E4)

    def test_piece_move(self) -> None:
        move = Move.from_str("Ng1f3")
        assert move.option == MoveOption.MOVE_PIECE
        assert move.piece_move == PieceMove(PieceType.KNIGHT, Square.G1, Square.F3)

    def test_promotion(self) -> None:
        move = Move.from_str("e7e8=Q")
        assert move.piece_move is not None
        assert move.piece_move.promotion == PieceType.QUEEN

    def test_castling(self) -> None:
        assert Move.from_str("O-O") == Move.castle_king_side()
        assert Move.from_str("O-O-O") == Move.castle_queen_side()
        assert Move.from_str("O-O").piece_move is None

    @pytest.mark.parametrize(
        "text", ["e2e4", "Ng1f3", "Qd1h5", "e7e8=Q", "b2b1=N", "O-O", "O-O-O"]
    )
    def test_text_roundtrip(self, text: str) -> None:
        assert str(Move.from_str(text)) == text

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "e2",
            "e2e9",
            "i2i4",
            "nG1f3",
            "Xg1f3",
            "e7e8=q",
            "e7e8=",
            "e7e8=QQ",
            "0-0",
            "O-O-O-O",
            "Ng1f3x",
        ],
    )
    def test_rejects(self, text: str) -> None:
        with pytest.raises(MoveParseError):
            Move.from_str(text)

    @pytest.mark.parametrize("text", ["e7e8=K", "e7e8=P", "Ne7e8=Q"])
    def test_bad_promotion(self, text: str) -> None:
        with pytest.raises(InvalidPromotionError):
            Move.from_str(text)


class TestMoveValues:
    def test_castling_without_piece_move(self) -> None:
        with pytest.raises(ValueError):
            Move(MoveOption.CASTLE_KING_SIDE, PieceMove(PieceType.KING, Square.E1, Square.G1))
        with pytest.raises(ValueError):
            Move(MoveOption.MOVE_PIECE)

    def test_hashable(self) -> None:
        moves = {Move.from_str("e2e4"), Move.from_str("e2e4"), Move.castle_king_side()}
        assert len(moves) == 2

    def test_promotion_only_for_pawns(self) -> None:
        with pytest.raises(InvalidPromotionError):
            PieceMove(PieceType.ROOK, Square.A7, Square.A8, PieceType.QUEEN)
