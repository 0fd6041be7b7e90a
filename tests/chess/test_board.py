"""Unit tests for /src/chess/board.py"""

from dataclasses import FrozenInstanceError
from typing import Optional

import pytest

from src.chess.board import BACK_RANK, Board
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square


class SingleKingBoard:
    """Minimal BoardView: only knows about one white king on e1"""

    def occupant(self, square: Square) -> Optional[Piece]:
        if square == Square(4, 0):
            return Piece(PieceType.KING, Color.WHITE)
        return None


def test_empty_board_has_no_pieces(empty_board: Board) -> None:
    assert empty_board.position == {}
    assert empty_board.occupant(Square(3, 3)) is None


def test_standard_board(standard_board: Board) -> None:
    """White on ranks 0 and 1, Black on ranks 6 and 7, 32 pieces in total"""
    assert len(standard_board.position) == 32
    for file in range(8):
        assert standard_board.occupant(Square(file, 0)) == Piece(BACK_RANK[file], Color.WHITE)
        assert standard_board.occupant(Square(file, 1)) == Piece(PieceType.PAWN, Color.WHITE)
        assert standard_board.occupant(Square(file, 6)) == Piece(PieceType.PAWN, Color.BLACK)
        assert standard_board.occupant(Square(file, 7)) == Piece(BACK_RANK[file], Color.BLACK)
    assert standard_board.occupant(Square(3, 0)) == Piece(PieceType.QUEEN, Color.WHITE)
    assert standard_board.occupant(Square(4, 7)) == Piece(PieceType.KING, Color.BLACK)


def test_board_is_read_only(empty_board: Board) -> None:
    with pytest.raises(TypeError):
        empty_board.position[Square(2, 5)] = Piece(PieceType.KNIGHT, Color.BLACK)  # type: ignore[index]
    with pytest.raises(FrozenInstanceError):
        empty_board.position = {}  # type: ignore[misc]


def test_board_keeps_its_own_copy() -> None:
    pieces = {Square(2, 5): Piece(PieceType.KNIGHT, Color.BLACK)}
    board = Board(pieces)

    pieces[Square(0, 0)] = Piece(PieceType.ROOK, Color.WHITE)
    del pieces[Square(2, 5)]
    assert board.position == {Square(2, 5): Piece(PieceType.KNIGHT, Color.BLACK)}


def test_boards_compare_by_pieces() -> None:
    rook = Piece(PieceType.ROOK, Color.WHITE)
    assert Board({Square(0, 0): rook}) != Board.empty()
    assert Board({Square(0, 0): rook}) == Board({Square(0, 0): rook})
    assert Board({Square(0, 0): rook}) != Board({Square(7, 0): rook})


def test_equal_boards_hash_equal(standard_board: Board) -> None:
    assert hash(Board.standard()) == hash(standard_board)
    assert len({Board.standard(), standard_board, Board.empty()}) == 2


def test_snapshot_from_view() -> None:
    board = Board.from_view(SingleKingBoard())
    assert board.position == {Square(4, 0): Piece(PieceType.KING, Color.WHITE)}
