"""Unit tests for src/cli.py"""

from unittest.mock import Mock, patch

import pytest

from src.chess.board import Board
from src.chess.pieces import Color, PieceType
from src.chess.square import Square
from src.cli import describe, main
from src.core.exceptions import SessionTerminatedError
from src.core.models import MoveMessage, QuitMessage
from src.core.shared_types import GameOutcome
from src.protocol.message import encode_message


def test_describe_move() -> None:
    message = MoveMessage(Board.empty(), (Square(0, 6), Square(0, 7)), PieceType.QUEEN, GameOutcome.WHITE_WINS)
    assert describe(message) == "MOVE A7-A8 promoting to queen outcome=1-0 board=8/8/8/8/8/8/8/8"


def test_describe_quit() -> None:
    assert describe(QuitMessage("bye")) == "QUIT reason='bye'"


def test_decode_command(capsys: pytest.CaptureFixture[str]) -> None:
    frame = encode_message(QuitMessage("bye"))
    assert main(["decode", frame]) == 0
    assert capsys.readouterr().out.strip() == "QUIT reason='bye'"


def test_decode_command_invalid_frame(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["decode", "Hello:world"]) == 1
    assert "UnknownMessageTypeError" in capsys.readouterr().err


def test_decode_command_with_undecodable_argument(capsys: pytest.CaptureFixture[str]) -> None:
    """Undecodable argv bytes reach the program as lone surrogates"""
    assert main(["decode", "ChessQUIT:\udcff:0"]) == 0
    assert capsys.readouterr().out.startswith("QUIT reason=")


def test_encode_quit_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["encode-quit", "bye"]) == 0
    output = capsys.readouterr().out.strip()
    assert len(output) == 128
    assert output.startswith("ChessQUIT:bye:0")


def test_encode_quit_command_too_long(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["encode-quit", "X" * 200]) == 1
    assert "MessageTooLongError" in capsys.readouterr().err


def test_encode_quit_command_undecodable_reason(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["encode-quit", "bye \udcff"]) == 1
    assert "InvalidQuitReasonError" in capsys.readouterr().err


def test_watch_until_opponent_quits(standard_board: Board) -> None:
    session = Mock()
    session.poll.side_effect = [
        None,
        MoveMessage(standard_board, (Square(4, 6), Square(4, 4))),
        QuitMessage("gg"),
    ]
    with (
        patch("src.cli.open_peer", return_value=(Mock(), Color.WHITE)),
        patch("src.cli.PeerSession", return_value=session),
        patch("src.cli.time.sleep") as sleep,
    ):
        assert main(["watch", "--port", "5001"]) == 0
    assert session.poll.call_count == 3
    sleep.assert_called_once()
    session.close.assert_called_once()


def test_watch_session_terminated() -> None:
    session = Mock()
    session.poll.side_effect = SessionTerminatedError("Connection lost")
    with (
        patch("src.cli.open_peer", return_value=(Mock(), Color.WHITE)),
        patch("src.cli.PeerSession", return_value=session),
    ):
        assert main(["watch"]) == 1


def test_quit_command() -> None:
    session = Mock()
    with (
        patch("src.cli.open_peer", return_value=(Mock(), Color.BLACK)) as open_peer,
        patch("src.cli.PeerSession", return_value=session),
    ):
        assert main(["quit", "--address", "10.0.0.2", "--reason", "gotta go"]) == 0
    config = open_peer.call_args.args[0]
    assert config.address == ("10.0.0.2", 5000)
    session.quit.assert_called_once_with("gotta go")


def test_invalid_port_is_reported() -> None:
    assert main(["quit", "--address", "10.0.0.2", "--port", "70000"]) == 1
