"""
Squares on the wire: one file letter followed by one rank digit, e.g. 'E2'.

Letters are written in upper case but read in either case.
"""

from string import ascii_uppercase, digits

from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidMoveFormatError, InvalidSquareError

FILE_LETTERS = ascii_uppercase[: BOARD_DIMENSIONS[0]]
RANK_DIGITS = digits[1 : BOARD_DIMENSIONS[1] + 1]


def encode_square(square: Square) -> str:
    return f"{FILE_LETTERS[square.file]}{RANK_DIGITS[square.rank]}"


def decode_square(text: str) -> Square:
    if len(text) != 2:
        raise InvalidMoveFormatError(f"Square must be 2 characters, got {text!r}")

    file_char, rank_char = text[0], text[1]
    if file_char not in FILE_LETTERS + FILE_LETTERS.lower() or rank_char not in RANK_DIGITS:
        raise InvalidMoveFormatError(f"Cannot interpret {text!r} as a square.")

    try:
        return Square.create(FILE_LETTERS.index(file_char.upper()), RANK_DIGITS.index(rank_char))
    except InvalidSquareError as exc:
        raise InvalidMoveFormatError(str(exc)) from exc
