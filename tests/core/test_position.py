"""Tests for Position: queries, legality, move application and notation."""

import pytest

from libchess.core import BitBoard, Move, PieceMove, Position
from libchess.core.enums import (
    AmbiguityType,
    BoardStatus,
    CastlingRights,
    Color,
    PieceType,
)
from libchess.core.errors import IllegalMoveError
from libchess.core.piece import Piece
from libchess.core.types import Square


def _move(text: str) -> Move:
    return Move.from_str(text)


def _legal_texts(position: Position) -> set[str]:
    return {str(m) for m in position.get_legal_moves()}


# ── Queries ──────────────────────────────────────────────────────────────────


class TestQueries:
    def test_start_position(self, start: Position) -> None:
        assert start.side_to_move == Color.WHITE
        assert start.en_passant is None
        assert start.halfmove_clock == 0
        assert start.fullmove_number == 1
        assert len(start.combined_mask) == 32
        assert len(start.piece_type_mask(PieceType.PAWN)) == 16
        assert len(start.color_mask(Color.BLACK)) == 16
        assert start.castle_rights(Color.WHITE) == CastlingRights.BOTH_SIDES
        assert start.king_square(Color.BLACK) == Square.E8

    def test_square_lookups(self, start: Position) -> None:
        assert start.piece_at(Square.D1) == Piece(PieceType.QUEEN, Color.WHITE)
        assert start.piece_type_at(Square.G8) == PieceType.KNIGHT
        assert start.color_at(Square.G8) == Color.BLACK
        assert start.piece_at(Square.E4) is None
        assert start.color_at(Square.E4) is None
        assert start.is_empty(Square.E4)
        assert not start.is_empty(Square.E2)

    def test_under_attack(self, start: Position) -> None:
        assert start.is_under_attack(Square.F6)
        assert start.is_under_attack(Square.D6)
        assert not start.is_under_attack(Square.E4)
        assert not start.is_under_attack(Square.E5)

    def test_checks(self) -> None:
        position = Position.from_fen("8/8/5k2/8/3Q2N1/5K2/8/8 b - - 0 1")
        assert position.is_check()
        assert set(position.check_mask) == {Square.D4, Square.G4}
        assert not position.pin_mask

    def test_pins(self) -> None:
        position = Position.from_fen("8/8/5k2/4p3/8/2Q2K2/8/8 b - - 0 1")
        assert not position.is_check()
        assert set(position.pin_mask) == {Square.E5}
        assert Move.piece(PieceType.PAWN, Square.E5, Square.E4) not in (
            position.get_legal_moves()
        )

    def test_pins_and_checks_on_other_square(self, start: Position) -> None:
        _, checks = start.get_pins_and_checks(Square.E6)
        assert set(checks) == {Square.D7, Square.F7}
        _, checks = start.get_pins_and_checks(Square.E4)
        assert checks == BitBoard()

    def test_equality_and_hash(self, start: Position) -> None:
        other = Position.default()
        assert start == other
        assert hash(start) == hash(other)
        assert start != start.make_move(_move("e2e4"))

    def test_equality_includes_counters(self) -> None:
        a = Position.from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        b = Position.from_fen("4k3/8/8/8/8/8/8/4K3 w - - 5 1")
        assert a != b
        assert a.zobrist_hash == b.zobrist_hash

    def test_str_is_fen(self, kiwipete: Position) -> None:
        assert str(kiwipete) == kiwipete.as_fen()
        assert repr(kiwipete).startswith("Position('r3k2r/")


# ── Legal moves ──────────────────────────────────────────────────────────────


class TestLegalMoves:
    def test_start_position(self, start: Position) -> None:
        moves = _legal_texts(start)
        assert len(moves) == 20
        assert {"e2e3", "e2e4", "Ng1f3", "Nb1a3"} <= moves

    def test_checkmate(self) -> None:
        position = Position.from_fen("Q2k4/8/3K4/8/8/8/8/8 b - - 0 1")
        assert position.get_legal_moves() == frozenset()
        assert position.is_terminal()
        assert position.get_status() == BoardStatus.CHECKMATE

    def test_stalemate(self) -> None:
        position = Position.from_fen("3k4/3P4/3K4/8/8/8/8/8 b - - 0 1")
        assert position.get_legal_moves() == frozenset()
        assert position.get_status() == BoardStatus.STALEMATE

    def test_open_game(self) -> None:
        position = Position.from_fen(
            "rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR w KQkq e6 0 1"
        )
        assert len(position.get_legal_moves()) == 29
        assert position.get_status() == BoardStatus.ONGOING

    def test_promotion_expands_to_four_moves(self) -> None:
        position = Position.from_fen("1r5k/P7/7K/8/8/8/8/8 w - - 0 1")
        moves = _legal_texts(position)
        assert len(moves) == 11
        assert {"a7a8=N", "a7a8=B", "a7a8=R", "a7a8=Q"} <= moves
        assert {"a7b8=N", "a7b8=B", "a7b8=R", "a7b8=Q"} <= moves
        assert "a7a8" not in moves

    def test_promotion_gives_check(self) -> None:
        position = Position.from_fen("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        assert len(position.get_legal_moves()) == 9
        after = position.make_move(_move("a7a8=Q"))
        assert after.is_check()
        assert after.piece_at(Square.A8) == Piece(PieceType.QUEEN, Color.WHITE)
        assert after.piece_type_at(Square.A7) is None

    def test_promotion_piece_required(self) -> None:
        position = Position.from_fen("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        assert not position.is_legal_move(Move.piece(PieceType.PAWN, Square.A7, Square.A8))
        assert not position.is_legal_move(
            Move.piece(PieceType.PAWN, Square.E2, Square.E4, None)
        )

    def test_generated_moves_are_legal(self, kiwipete: Position) -> None:
        for move in kiwipete.get_legal_moves():
            assert kiwipete.is_legal_move(move)

    def test_legality_matches_generation(self, kiwipete: Position) -> None:
        legal = kiwipete.get_legal_moves()
        for ptype in PieceType:
            for src in Square:
                for dst in Square:
                    if src == dst:
                        continue
                    move = Move.piece(ptype, src, dst)
                    assert kiwipete.is_legal_move(move) == (move in legal)

    def test_no_move_leaves_own_king_attacked(self, kiwipete: Position) -> None:
        for move in kiwipete.get_legal_moves():
            after = kiwipete.make_move(move)
            # Rebuilding validates that the side that just moved is not in check.
            assert Position.from_fen(after.as_fen()) == after

    def test_check_restricts_to_king_moves(self) -> None:
        position = Position.from_fen("7k/8/8/8/8/8/4R3/r3K3 w - - 0 1")
        assert position.is_check()
        assert _legal_texts(position) == {"Ke1d2", "Ke1f2"}

    def test_pinned_rook_stays_on_file(self) -> None:
        position = Position.from_fen("4r1k1/8/8/8/8/8/4R3/4K3 w - - 0 1")
        rook_moves = {t for t in _legal_texts(position) if t.startswith("R")}
        assert rook_moves == {"Re2e3", "Re2e4", "Re2e5", "Re2e6", "Re2e7", "Re2e8"}


# ── Castling ─────────────────────────────────────────────────────────────────


class TestCastling:
    def test_king_side(self) -> None:
        position = Position.from_fen(
            "r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w KQkq - 0 1"
        )
        after = position.make_move(Move.castle_king_side())
        assert after.as_fen() == "r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R4RK1 b kq - 1 1"

    def test_queen_side(self) -> None:
        position = Position.from_fen(
            "r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R b KQkq - 0 1"
        )
        after = position.make_move(Move.castle_queen_side())
        assert after.as_fen() == "2kr3r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w KQ - 1 2"

    def test_attacked_transit_square(self) -> None:
        position = Position.from_fen("4k3/8/8/8/8/8/5r2/R3K2R w KQ - 0 1")
        assert not position.is_legal_move(Move.castle_king_side())
        assert position.is_legal_move(Move.castle_queen_side())

    def test_attacked_rook_does_not_matter(self) -> None:
        position = Position.from_fen("4k3/8/8/8/8/8/1r6/R3K2R w KQ - 0 1")
        assert position.is_legal_move(Move.castle_king_side())
        assert position.is_legal_move(Move.castle_queen_side())

    def test_not_out_of_check(self) -> None:
        position = Position.from_fen("4k3/4r3/8/8/8/8/8/R3K2R w KQ - 0 1")
        assert position.is_check()
        assert not position.is_legal_move(Move.castle_king_side())
        assert not position.is_legal_move(Move.castle_queen_side())

    def test_blocked(self) -> None:
        position = Position.from_fen("4k3/8/8/8/8/8/8/RN2K1NR w KQ - 0 1")
        assert not position.is_legal_move(Move.castle_king_side())
        assert not position.is_legal_move(Move.castle_queen_side())

    def test_without_rights(self) -> None:
        position = Position.from_fen("4k3/8/8/8/8/8/8/R3K2R w - - 0 1")
        assert Move.castle_king_side() not in position.get_legal_moves()

    def test_king_move_clears_rights(self) -> None:
        position = Position.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        after = position.make_move(_move("Ke1d1"))
        assert after.castle_rights(Color.WHITE) == CastlingRights.NEITHER
        assert after.castle_rights(Color.BLACK) == CastlingRights.BOTH_SIDES

    def test_rook_move_clears_one_side(self) -> None:
        position = Position.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        after = position.make_move(_move("Rh1h5"))
        assert after.castle_rights(Color.WHITE) == CastlingRights.QUEEN_SIDE

    def test_rook_capture_clears_opponent_side(self) -> None:
        position = Position.from_fen("r3k2r/8/8/8/8/8/6B1/R3K2R w KQkq - 0 1")
        after = position.make_move(_move("Bg2a8"))
        assert after.castle_rights(Color.BLACK) == CastlingRights.KING_SIDE
        assert after.as_fen().split(" ")[2] == "KQk"


# ── En passant and pawn pushes ───────────────────────────────────────────────


class TestPawns:
    def test_double_step_sets_target(self, start: Position) -> None:
        after = start.make_move(_move("e2e4"))
        assert after.en_passant == Square.E3
        assert after.make_move(_move("Ng8f6")).en_passant is None

    def test_en_passant_capture(self) -> None:
        position = Position.from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        move = _move("e5d6")
        assert move in position.get_legal_moves()
        assert position.is_capture(move)
        after = position.make_move(move)
        assert after.piece_at(Square.D5) is None
        assert after.piece_at(Square.D6) == Piece(PieceType.PAWN, Color.WHITE)
        assert after.as_fen() == "4k3/8/3P4/8/8/8/8/4K3 b - - 0 1"

    def test_en_passant_after_double_step(self) -> None:
        position = Position.from_fen(
            "rnbqkbnr/ppppppp1/8/4P2p/8/8/PPPP1PPP/PNBQKBNR b - - 0 1"
        )
        position = position.make_move(_move("d7d5"))
        assert Move.piece(PieceType.PAWN, Square.E5, Square.D6) in position.get_legal_moves()

    def test_en_passant_exposing_king(self) -> None:
        position = Position.from_fen("8/8/8/K2pP2r/8/8/8/4k3 w - d6 0 1")
        assert not position.is_legal_move(_move("e5d6"))
        assert position.is_legal_move(_move("e5e6"))

    def test_push_blocked_on_landing_square(self) -> None:
        position = Position.from_fen("4k3/8/8/8/4n3/8/4P3/4K3 w - - 0 1")
        assert position.is_legal_move(_move("e2e3"))
        assert not position.is_legal_move(_move("e2e4"))

    def test_push_blocked_on_first_square(self) -> None:
        position = Position.from_fen("4k3/8/8/8/8/4n3/4P3/4K3 w - - 0 1")
        assert not position.is_legal_move(_move("e2e3"))
        assert not position.is_legal_move(_move("e2e4"))

    def test_pawn_cannot_push_into_piece(self) -> None:
        position = Position.from_fen("4k3/8/8/8/4p3/4P3/8/4K3 w - - 0 1")
        assert not position.is_legal_move(_move("e3e4"))

    def test_halfmove_clock(self, start: Position) -> None:
        position = start.make_move(_move("Ng1f3"))
        assert position.halfmove_clock == 1
        position = position.make_move(_move("Ng8f6"))
        assert position.halfmove_clock == 2
        assert position.fullmove_number == 2
        position = position.make_move(_move("e2e4"))
        assert position.halfmove_clock == 0
        position = position.make_move(_move("Nf6e4"))
        assert position.halfmove_clock == 0
        assert position.fullmove_number == 3


# ── Move application ─────────────────────────────────────────────────────────


class TestMakeMove:
    def test_returns_new_position(self, start: Position) -> None:
        fen = start.as_fen()
        after = start.make_move(_move("e2e4"))
        assert start.as_fen() == fen
        assert after.as_fen() == (
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        assert after.context is start.context

    @pytest.mark.parametrize("text", ["e2e5", "Ng1g3", "Ke1e2", "O-O", "e7e5"])
    def test_illegal(self, start: Position, text: str) -> None:
        with pytest.raises(IllegalMoveError) as exc_info:
            start.make_move(_move(text))
        assert exc_info.value.move == _move(text)

    def test_capture_detection(self) -> None:
        position = Position.from_fen("k7/1q6/8/8/8/8/6Q1/5K2 w - - 0 1")
        assert position.is_capture(_move("Qg2b7"))
        assert not position.is_capture(_move("Qg2c6"))
        assert not position.is_capture(Move.castle_king_side())


# ── Notation support ─────────────────────────────────────────────────────────


class TestAmbiguity:
    def test_unique_knight(self, start: Position) -> None:
        pm = PieceMove(PieceType.KNIGHT, Square.G1, Square.F3)
        assert start.get_move_ambiguity_type(pm) == AmbiguityType.NEITHER

    def test_knights_on_different_files(self) -> None:
        position = Position.from_fen("4k3/8/8/8/8/5N2/8/1N2K3 w - - 0 1")
        pm = PieceMove(PieceType.KNIGHT, Square.B1, Square.D2)
        assert position.get_move_ambiguity_type(pm) == AmbiguityType.EXTRA_FILE

    def test_rooks_on_same_file(self) -> None:
        position = Position.from_fen("4k3/8/8/R7/8/8/8/R3K3 w - - 0 1")
        pm = PieceMove(PieceType.ROOK, Square.A1, Square.A3)
        assert position.get_move_ambiguity_type(pm) == AmbiguityType.EXTRA_SQUARE

    def test_pinned_rival_is_ignored(self) -> None:
        position = Position.from_fen("k7/4r3/8/1N6/8/8/4N3/4K3 w - - 0 1")
        pm = PieceMove(PieceType.KNIGHT, Square.B5, Square.C3)
        assert position.get_move_ambiguity_type(pm) == AmbiguityType.NEITHER

    def test_pawn_capture_needs_file(self) -> None:
        position = Position.from_fen("4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1")
        capture = PieceMove(PieceType.PAWN, Square.E4, Square.D5)
        push = PieceMove(PieceType.PAWN, Square.E4, Square.E5)
        assert position.get_move_ambiguity_type(capture) == AmbiguityType.EXTRA_FILE
        assert position.get_move_ambiguity_type(push) == AmbiguityType.NEITHER

    def test_illegal_move_raises(self, start: Position) -> None:
        with pytest.raises(IllegalMoveError):
            start.get_move_ambiguity_type(PieceMove(PieceType.ROOK, Square.A1, Square.A3))
