"""
Reading and writing whole frames over a byte stream.

A non-blocking socket may hand over part of a frame, or nothing at all. The transport keeps whatever arrived in a
buffer and only decodes once a full frame has been collected. Writes are never retried: a frame is either sent
in one go or the connection is considered broken.
"""

import logging
from typing import Optional, Protocol, Self

from src.core.exceptions import (
    ConnectionClosedError,
    NoDataAvailableError,
    ShortWriteError,
)
from src.core.models import Message
from src.protocol.constants import FRAME_LENGTH
from src.protocol.message import decode_message, encode_frame

logger = logging.getLogger(__name__)


class ByteStream(Protocol):
    """The part of socket.socket the transport uses."""

    def recv(self, bufsize: int) -> bytes: ...

    def send(self, data: bytes) -> int: ...

    def close(self) -> None: ...


class FrameTransport:
    """One frame per read, one frame per write, over a single connection."""

    def __init__(self, stream: ByteStream) -> None:
        self.stream = stream
        self._buffer = bytearray()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def pending(self) -> int:
        """Number of bytes of an incomplete frame already received."""
        return len(self._buffer)

    def read_message(self) -> Message:
        frame = self._read_frame()
        return decode_message(frame)

    def send_message(self, message: Message) -> None:
        # encoding errors surface before anything touches the stream
        frame = encode_frame(message)
        try:
            sent = self.stream.send(frame)
        except BlockingIOError as exc:
            raise ShortWriteError("Stream not ready, frame was not sent.") from exc
        except OSError as exc:
            # reset, broken pipe, timeout, closed descriptor
            raise ConnectionClosedError(f"Connection lost while sending: {exc}") from exc

        if sent != len(frame):
            raise ShortWriteError(f"Only {sent} of {len(frame)} bytes were sent.")
        logger.debug("Sent %s", type(message).__name__)

    def close(self) -> None:
        self._buffer.clear()
        self.stream.close()

    def _read_frame(self) -> bytes:
        while len(self._buffer) < FRAME_LENGTH:
            chunk = self._receive(FRAME_LENGTH - len(self._buffer))
            if chunk is None:
                raise NoDataAvailableError(
                    f"Waiting for data, {len(self._buffer)} of {FRAME_LENGTH} bytes received."
                )
            if not chunk:
                raise ConnectionClosedError(
                    f"Peer closed the connection ({len(self._buffer)} bytes of a frame pending)."
                )
            self._buffer.extend(chunk)

        frame = bytes(self._buffer)
        self._buffer.clear()
        logger.debug("Received frame %r", frame)
        return frame

    def _receive(self, num_bytes: int) -> Optional[bytes]:
        """None means a non-blocking stream has nothing to offer right now."""
        try:
            return self.stream.recv(num_bytes)
        except BlockingIOError:
            return None
        except OSError as exc:
            raise ConnectionClosedError(f"Connection lost while reading: {exc}") from exc
