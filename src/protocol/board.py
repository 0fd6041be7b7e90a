"""
Board snapshots on the wire.

Same run-length notation as the position part of a FEN string, with one difference in direction:
the first segment is rank 0 (White's back rank) and the last one is rank 7. Inside a segment files are read left to right.

ex) the standard starting position is
RNBQKBNR/PPPPPPPP/8/8/8/8/pppppppp/rnbqkbnr
"""

from string import digits

from src.chess.board import Board, BoardView
from src.chess.pieces import PIECE_CHARACTERS, Piece
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidBoardCharacterError, InvalidBoardLengthError
from src.protocol.constants import RANK_SEPARATOR

NUM_FILES, NUM_RANKS = BOARD_DIMENSIONS
BOARD_SIZE = NUM_FILES * NUM_RANKS


def encode_board(board: BoardView) -> str:
    """Ranks are separated by slashes."""
    return RANK_SEPARATOR.join(_encode_rank(board, rank) for rank in range(NUM_RANKS))


def _encode_rank(board: BoardView, rank: int) -> str:
    characters: list[str] = []
    empty_count = 0
    for file in range(NUM_FILES):
        piece = board.occupant(Square(file, rank))
        if piece is None:
            empty_count += 1
            continue

        if empty_count > 0:
            characters.append(str(empty_count))
            empty_count = 0
        characters.append(piece.to_fen())

    # an entirely empty rank still gets its digit
    if empty_count > 0:
        characters.append(str(empty_count))
    return "".join(characters)


def decode_board(text: str) -> Board:
    segments = text.split(RANK_SEPARATOR)
    if len(segments) > NUM_RANKS:
        raise InvalidBoardLengthError(
            f"Board has {len(segments)} ranks, expected {NUM_RANKS}: {text!r}"
        )

    position: dict[Square, Piece] = {}
    index = 0  # squares consumed so far, rank * NUM_FILES + file
    for segment in segments:
        segment_start = index
        for character in segment:
            if character in digits:
                index += int(character)
                if index > BOARD_SIZE:
                    raise InvalidBoardLengthError(f"Board covers more than {BOARD_SIZE} squares: {text!r}")
                continue

            if character not in PIECE_CHARACTERS:
                raise InvalidBoardCharacterError(f"Invalid piece character {character!r} in board {text!r}")

            if index >= BOARD_SIZE:
                raise InvalidBoardLengthError(f"Board covers more than {BOARD_SIZE} squares: {text!r}")

            rank, file = divmod(index, NUM_FILES)
            position[Square(file, rank)] = Piece.from_fen(character)
            index += 1

        # a short or long rank would shift every following piece onto the wrong file
        if index - segment_start != NUM_FILES:
            raise InvalidBoardLengthError(
                f"Rank {segment!r} covers {index - segment_start} squares, expected {NUM_FILES}"
            )

    if index != BOARD_SIZE:
        raise InvalidBoardLengthError(f"Board covers {index} squares, expected {BOARD_SIZE}: {text!r}")
    return Board(position)
