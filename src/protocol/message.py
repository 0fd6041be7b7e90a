"""
Messages on the wire.

Every message travels as one frame of exactly FRAME_LENGTH bytes: colon separated fields, padded with '0' characters.

ChessMOVE:<move>:<outcome>:<board>:<padding>
ChessQUIT:<reason>:<padding>

* move: source square + destination square + promotion letter (N, B, R, Q) or '0' if the move is not a promotion. ex) E2E40
* outcome: 0-0 game goes on, 1-0 White won, 1-1 draw, 0-1 Black won
* board: see src/protocol/board.py
"""

from typing import Optional, assert_never

from src.chess.pieces import (
    FEN_TO_PIECE,
    PIECE_CHARACTERS,
    PIECE_TO_FEN,
    PROMOTION_PIECES,
    PieceType,
)
from src.core.exceptions import (
    FrameTooLongError,
    InvalidGameStateError,
    InvalidMoveFormatError,
    InvalidPromotionPieceError,
    InvalidQuitReasonError,
    MessageTooLongError,
    UnknownMessageTypeError,
    WrongFieldCountError,
)
from src.core.models import Message, MoveMessage, QuitMessage
from src.core.shared_types import GameOutcome
from src.protocol.board import decode_board, encode_board
from src.protocol.constants import (
    ENCODING,
    FIELD_SEPARATOR,
    FRAME_LENGTH,
    MOVE_FIELD_LENGTH,
    MOVE_TAG,
    NO_PROMOTION,
    PADDING_CHARACTER,
    QUIT_TAG,
)
from src.protocol.position import decode_square, encode_square

OUTCOME_CODES: dict[str, GameOutcome] = {outcome.value: outcome for outcome in GameOutcome}


# --- ENCODING ---
def encode_message(message: Message) -> str:
    """The full frame as text. Always FRAME_LENGTH bytes once encoded."""
    if isinstance(message, MoveMessage):
        return _encode_move(message)
    elif isinstance(message, QuitMessage):
        return _encode_quit(message)
    else:
        assert_never(message)


def encode_frame(message: Message) -> bytes:
    return encode_message(message).encode(ENCODING)


def _encode_move(message: MoveMessage) -> str:
    source, destination = message.move
    move_field = (
        f"{encode_square(source)}{encode_square(destination)}"
        f"{_encode_promotion(message.promotion)}"
    )
    fields = [MOVE_TAG, move_field, message.outcome.value, encode_board(message.board)]
    return _pad(FIELD_SEPARATOR.join(fields) + FIELD_SEPARATOR)


def _encode_promotion(promotion: Optional[PieceType]) -> str:
    if promotion is None:
        return NO_PROMOTION
    if promotion not in PROMOTION_PIECES:
        raise InvalidPromotionPieceError(f"A pawn cannot promote to {promotion.name.lower()}.")
    return PIECE_TO_FEN[promotion].upper()


def _encode_quit(message: QuitMessage) -> str:
    if FIELD_SEPARATOR in message.reason:
        raise InvalidQuitReasonError(
            f"Quit reason must not contain {FIELD_SEPARATOR!r}: {message.reason!r}"
        )
    try:
        message.reason.encode(ENCODING)
    except UnicodeEncodeError as exc:
        raise InvalidQuitReasonError(f"Quit reason cannot be sent as {ENCODING}: {message.reason!r}") from exc
    return _pad(f"{QUIT_TAG}{FIELD_SEPARATOR}{message.reason}{FIELD_SEPARATOR}")


def _pad(serialized: str) -> str:
    """Fill up with padding characters until the frame has its fixed length."""
    length = len(serialized.encode(ENCODING))
    if length > FRAME_LENGTH:
        raise MessageTooLongError(
            f"Message needs {length} bytes, a frame only has {FRAME_LENGTH}."
        )
    return serialized + PADDING_CHARACTER * (FRAME_LENGTH - length)


# --- DECODING ---
def decode_message(raw: str | bytes) -> Message:
    """Parse one frame. Shorter frames are accepted, longer ones never."""
    if isinstance(raw, str):
        # lone surrogates (e.g. undecodable command line bytes) end up as replacement characters below
        raw = raw.encode(ENCODING, errors="surrogatepass")
    if len(raw) > FRAME_LENGTH:
        raise FrameTooLongError(f"Frame has {len(raw)} bytes, maximum is {FRAME_LENGTH}.")
    text = raw.decode(ENCODING, errors="replace")

    tag, *fields = text.split(FIELD_SEPARATOR)
    if tag == MOVE_TAG:
        return _decode_move(fields)
    if tag == QUIT_TAG:
        return _decode_quit(fields)
    raise UnknownMessageTypeError(f"Unknown message type: {tag!r}")


def _decode_move(fields: list[str]) -> MoveMessage:
    if len(fields) != 4:
        raise WrongFieldCountError(
            f"{MOVE_TAG} expects 4 fields after the tag, got {len(fields)}."
        )
    move_field, outcome_code, board_field, _padding = fields

    if len(move_field) != MOVE_FIELD_LENGTH:
        raise InvalidMoveFormatError(f"Cannot interpret {move_field!r} as a move.")
    source = decode_square(move_field[0:2])
    destination = decode_square(move_field[2:4])
    promotion = _decode_promotion(move_field[4])

    if outcome_code not in OUTCOME_CODES:
        raise InvalidGameStateError(f"Invalid game state code: {outcome_code!r}")

    return MoveMessage(
        board=decode_board(board_field),
        move=(source, destination),
        promotion=promotion,
        outcome=OUTCOME_CODES[outcome_code],
    )


def _decode_promotion(character: str) -> Optional[PieceType]:
    if character == NO_PROMOTION:
        return None
    piece_type = FEN_TO_PIECE.get(character.lower()) if character in PIECE_CHARACTERS else None
    if piece_type not in PROMOTION_PIECES:
        raise InvalidMoveFormatError(f"Invalid promotion piece: {character!r}")
    return piece_type


def _decode_quit(fields: list[str]) -> QuitMessage:
    if len(fields) != 2:
        raise WrongFieldCountError(
            f"{QUIT_TAG} expects 2 fields after the tag, got {len(fields)}."
        )
    reason, _padding = fields
    return QuitMessage(reason)
