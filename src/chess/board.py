"""
Board snapshots as the protocol sees them.

The rules engine owns the real game state. All the codec needs from it is a way to ask what stands on a square,
so encoding works against the BoardView protocol. Decoding produces the plain Board snapshot below.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Protocol, Self

from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import BOARD_DIMENSIONS, Square, all_squares

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class BoardView(Protocol):
    """Read-only access to a board, whichever engine holds it."""

    def occupant(self, square: Square) -> Optional[Piece]:
        """The piece on the square, or None if it is empty."""
        ...


@dataclass(frozen=True)
class Board:
    """
    Read-only snapshot. Only occupied squares are stored, so two boards with the same pieces on the same squares
    compare (and hash) equal.
    """

    position: Mapping[Square, Piece] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # own copy, so the caller's dict cannot change the snapshot afterwards
        object.__setattr__(self, "position", MappingProxyType(dict(self.position)))

    def __hash__(self) -> int:
        return hash(frozenset(self.position.items()))

    @classmethod
    def empty(cls) -> Self:
        return cls()

    @classmethod
    def standard(cls) -> Self:
        """Standard starting position. White occupies ranks 0 and 1, Black ranks 6 and 7."""
        num_files, num_ranks = BOARD_DIMENSIONS
        position: dict[Square, Piece] = {}
        for file in range(num_files):
            position[Square(file, 0)] = Piece(BACK_RANK[file], Color.WHITE)
            position[Square(file, 1)] = Piece(PieceType.PAWN, Color.WHITE)
            position[Square(file, num_ranks - 2)] = Piece(PieceType.PAWN, Color.BLACK)
            position[Square(file, num_ranks - 1)] = Piece(BACK_RANK[file], Color.BLACK)
        return cls(position)

    @classmethod
    def from_view(cls, view: BoardView) -> Self:
        """Take a snapshot of any board implementing BoardView"""
        position: dict[Square, Piece] = {}
        for square in all_squares():
            piece = view.occupant(square)
            if piece is not None:
                position[square] = piece
        return cls(position)

    def occupant(self, square: Square) -> Optional[Piece]:
        return self.position.get(square)
