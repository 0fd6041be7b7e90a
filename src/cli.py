"""
Command line tool to inspect frames and talk to another player.

Usage:
    chess-peer decode "ChessQUIT:bye:000..."
    chess-peer encode-quit "gotta go"
    chess-peer watch --bind 0.0.0.0 --port 5000
    chess-peer quit --address 192.168.1.20 --port 5000 --reason "gotta go"
"""

import argparse
import logging
import sys
import time
from typing import Optional

from src.core.config import DEFAULT_PORT, PeerConfig
from src.core.exceptions import ChessProtocolError, DecodeError, SessionTerminatedError
from src.core.models import Message, MoveMessage, QuitMessage
from src.core.shared_types import PeerRole
from src.net.connection import open_peer
from src.protocol.board import encode_board
from src.protocol.message import decode_message, encode_message
from src.protocol.position import encode_square
from src.services.peer_session import PeerSession

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def describe(message: Message) -> str:
    """One line summary of a message, for humans"""
    if isinstance(message, MoveMessage):
        source, destination = message.move
        promotion = f" promoting to {message.promotion.name.lower()}" if message.promotion else ""
        return (
            f"MOVE {encode_square(source)}-{encode_square(destination)}{promotion} "
            f"outcome={message.outcome.value} board={encode_board(message.board)}"
        )
    return f"QUIT reason={message.reason!r}"


def decode_command(args: argparse.Namespace) -> int:
    try:
        message = decode_message(args.frame)
    except DecodeError as exc:
        print(f"Error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    print(describe(message))
    return 0


def encode_quit_command(args: argparse.Namespace) -> int:
    try:
        print(encode_message(QuitMessage(args.reason)))
    except ChessProtocolError as exc:
        print(f"Error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    return 0


def watch_command(args: argparse.Namespace) -> int:
    """Host a game and log everything the opponent sends until they leave."""
    config = PeerConfig(role=PeerRole.HOST, host=args.bind, port=args.port)
    transport, playing_as = open_peer(config)
    session = PeerSession(transport, playing_as)
    try:
        while True:
            message = session.poll()
            if message is None:
                time.sleep(config.poll_interval)
                continue
            logger.info(describe(message))
            if isinstance(message, QuitMessage):
                return 0
    except SessionTerminatedError as exc:
        logger.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        session.quit("Host stopped watching")
        return 0
    finally:
        session.close()


def quit_command(args: argparse.Namespace) -> int:
    config = PeerConfig(role=PeerRole.JOIN, host=args.address, port=args.port)
    transport, playing_as = open_peer(config)
    session = PeerSession(transport, playing_as)
    try:
        session.quit(args.reason)
    except SessionTerminatedError as exc:
        logger.error("%s", exc)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Exchange chess moves with another player over TCP")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    decode_p = subparsers.add_parser("decode", help="Decode a frame and print its contents")
    decode_p.add_argument("frame", type=str, help="Frame text")
    decode_p.set_defaults(func=decode_command)

    encode_p = subparsers.add_parser("encode-quit", help="Print the frame for a quit message")
    encode_p.add_argument("reason", type=str, nargs="?", default="", help="Reason for quitting")
    encode_p.set_defaults(func=encode_quit_command)

    watch_p = subparsers.add_parser("watch", help="Host a game and log incoming messages")
    watch_p.add_argument("--bind", type=str, default="0.0.0.0", help="Bind address")
    watch_p.add_argument("--port", type=int, default=DEFAULT_PORT, help="TCP port to listen on")
    watch_p.set_defaults(func=watch_command)

    quit_p = subparsers.add_parser("quit", help="Join a host and send a quit message")
    quit_p.add_argument("--address", type=str, required=True, help="Host IP or address")
    quit_p.add_argument("--port", type=int, default=DEFAULT_PORT, help="TCP port to connect")
    quit_p.add_argument("--reason", type=str, default="", help="Reason for quitting")
    quit_p.set_defaults(func=quit_command)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        return args.func(args)
    except ChessProtocolError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
