"""
Pytest will auto-discover / import this file called 'conftest.py'. ]
This file defines fixtures/variables required for testing multiple layers.
"""

import random
import socket
from typing import Callable, Iterator

import pytest

from src.chess.board import Board
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square, all_squares


@pytest.fixture
def empty_board() -> Board:
    return Board.empty()


@pytest.fixture
def standard_board() -> Board:
    return Board.standard()


@pytest.fixture
def random_board() -> Callable[[int], Board]:
    """Call the inner function with a seed to get a reproducible board with pieces scattered around."""

    def _create_board(seed: int) -> Board:
        rng = random.Random(seed)
        position: dict[Square, Piece] = {}
        for square in all_squares():
            if rng.random() < 0.4:
                position[square] = Piece(rng.choice(list(PieceType)), rng.choice(list(Color)))
        return Board(position)

    return _create_board


@pytest.fixture
def socket_pair() -> Iterator[tuple[socket.socket, socket.socket]]:
    """Two connected sockets: write on one end, read on the other."""
    left, right = socket.socketpair()
    try:
        yield left, right
    finally:
        left.close()
        right.close()
