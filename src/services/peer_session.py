"""Orchestration between the game layer and the connection to the other player."""

import logging
from typing import Optional

from src.chess.pieces import Color
from src.core.exceptions import (
    DecodeError,
    EncodeError,
    NoDataAvailableError,
    SessionTerminatedError,
    TransportError,
)
from src.core.models import Message, MoveMessage, QuitMessage
from src.net.transport import FrameTransport

logger = logging.getLogger(__name__)

DESYNC_REASON = "Desync"


class PeerSession:
    """
    One game against one remote player.

    Only a missing frame is worth waiting for. Anything else that goes wrong (a frame we cannot decode, a message we
    cannot encode, a dropped connection) ends the session, and every later call raises SessionTerminatedError.
    """

    def __init__(self, transport: FrameTransport, playing_as: Color) -> None:
        self.transport = transport
        self.playing_as = playing_as
        self.closed = False

    # --- called by the game layer ---
    def poll(self) -> Optional[Message]:
        """Next message from the opponent, or None if it has not (completely) arrived yet."""
        self._ensure_open()
        try:
            message = self.transport.read_message()
        except NoDataAvailableError:
            return None
        except DecodeError as exc:
            logger.error("Could not decode opponent message: %s", exc)
            self._notify_peer(DESYNC_REASON)
            raise self._terminate(f"Received an invalid message: {exc}") from exc
        except TransportError as exc:
            raise self._terminate(f"Connection lost: {exc}") from exc

        if isinstance(message, QuitMessage):
            logger.info("Opponent quit: %r", message.reason)
            self._close()
        return message

    def send_move(self, message: MoveMessage) -> None:
        self._send(message)

    def quit(self, reason: str = "") -> None:
        """Tell the opponent we are leaving, then close the connection."""
        self._send(QuitMessage(reason))
        self._close()

    def close(self) -> None:
        if not self.closed:
            self._close()

    # --- helpers ---
    def _send(self, message: Message) -> None:
        self._ensure_open()
        try:
            self.transport.send_message(message)
        except EncodeError as exc:
            raise self._terminate(f"Could not encode message: {exc}") from exc
        except TransportError as exc:
            raise self._terminate(f"Could not send message: {exc}") from exc

    def _notify_peer(self, reason: str) -> None:
        """Last attempt to let the opponent know. The session ends either way."""
        try:
            self.transport.send_message(QuitMessage(reason))
        except TransportError as exc:
            logger.warning("Could not notify opponent before closing: %s", exc)

    def _terminate(self, reason: str) -> SessionTerminatedError:
        logger.error("Session terminated: %s", reason)
        self._close()
        return SessionTerminatedError(reason)

    def _close(self) -> None:
        self.closed = True
        self.transport.close()

    def _ensure_open(self) -> None:
        if self.closed:
            raise SessionTerminatedError("Session is already closed.")
