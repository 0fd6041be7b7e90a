"""
Exceptions shared across layers.

Codec errors are split in the direction they occur (decoding a frame received from the peer, or encoding a frame to send).
Transport errors come from the byte stream itself. NoDataAvailableError is the only one that is not fatal for a session.
"""


class ChessProtocolError(Exception):
    """Base class for everything raised by this package."""


class InvalidSquareError(ChessProtocolError):
    """A (file, rank) pair outside the board."""


class InvalidConfigError(ChessProtocolError):
    """Peer configuration that cannot be used to open a connection."""


# --- DECODING ---
class DecodeError(ChessProtocolError):
    """A received frame could not be turned into a Message."""


class FrameTooLongError(DecodeError):
    pass


class UnknownMessageTypeError(DecodeError):
    pass


class WrongFieldCountError(DecodeError):
    pass


class InvalidMoveFormatError(DecodeError):
    pass


class InvalidGameStateError(DecodeError):
    pass


class InvalidBoardCharacterError(DecodeError):
    pass


class InvalidBoardLengthError(DecodeError):
    pass


# --- ENCODING ---
class EncodeError(ChessProtocolError):
    """A Message could not be turned into a frame."""


class InvalidPromotionPieceError(EncodeError):
    pass


class MessageTooLongError(EncodeError):
    pass


class InvalidQuitReasonError(EncodeError):
    pass


# --- TRANSPORT ---
class TransportError(ChessProtocolError):
    """Problems with the underlying byte stream."""


class ConnectionClosedError(TransportError):
    pass


class NoDataAvailableError(TransportError):
    """Transient: a non-blocking stream has no complete frame yet. Retry the read later."""


class ShortWriteError(TransportError):
    pass


# --- SESSION ---
class SessionTerminatedError(ChessProtocolError):
    """The session with the peer is over and cannot be recovered."""
