"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import InvalidSquareError

# Chess board is always 8x8. Files and ranks are counted from 0, so a1 is (0, 0) and h8 is (7, 7)
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    file: int
    rank: int

    @classmethod
    def create(cls, file: int, rank: int) -> Square:
        """Checked constructor: refuse anything that does not lie on the board."""
        square = cls(file, rank)
        if not square.is_within_bounds():
            raise InvalidSquareError(f"Square ({file}, {rank}) is not on the board.")
        return square

    def is_within_bounds(self) -> bool:
        return (0 <= self.file < BOARD_DIMENSIONS[0]) and (
            0 <= self.rank < BOARD_DIMENSIONS[1]
        )


def all_squares() -> list[Square]:
    """Every square, rank by rank starting at rank 0, files left to right."""
    num_files, num_ranks = BOARD_DIMENSIONS
    return [Square(file, rank) for rank in range(num_ranks) for file in range(num_files)]
