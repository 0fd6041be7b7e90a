"""
Opening the connection between the two players.

The hosting player waits for exactly one opponent and plays White, the joining player plays Black.
After connecting, both sides switch the socket to non-blocking so the game loop can keep polling for moves.
"""

import logging
import socket

from src.chess.pieces import Color
from src.core.config import PeerConfig
from src.core.exceptions import ConnectionClosedError
from src.core.shared_types import PeerRole
from src.net.transport import FrameTransport

logger = logging.getLogger(__name__)


def host_game(config: PeerConfig) -> tuple[FrameTransport, Color]:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            server.bind(config.address)
        except OSError as exc:
            raise ConnectionClosedError(f"Could not bind to {config.host}:{config.port}: {exc}") from exc
        server.listen(1)
        logger.info("Waiting for opponent on %s:%s", config.host, config.port)
        connection, peer_address = server.accept()

    logger.info("Opponent connected from %s:%s", *peer_address[:2])
    connection.setblocking(False)
    return FrameTransport(connection), Color.WHITE


def join_game(config: PeerConfig) -> tuple[FrameTransport, Color]:
    try:
        connection = socket.create_connection(config.address)
    except OSError as exc:
        raise ConnectionClosedError(
            f"Failed to connect to opponent at {config.host}:{config.port}: {exc}"
        ) from exc

    logger.info("Connected to %s:%s", config.host, config.port)
    connection.setblocking(False)
    return FrameTransport(connection), Color.BLACK


def open_peer(config: PeerConfig) -> tuple[FrameTransport, Color]:
    if config.role == PeerRole.HOST:
        return host_game(config)
    return join_game(config)
