"""
Boundary layer data model(s).

The messages two peers exchange. The rules/presentation layer builds one per player action and hands it to the codec;
the codec hands decoded ones back. Message is a closed union: every place that handles a Message handles both variants.
"""

from dataclasses import dataclass
from typing import Optional, Union

from src.chess.board import Board, BoardView
from src.chess.pieces import PieceType
from src.chess.square import Square
from src.core.shared_types import GameOutcome


@dataclass(frozen=True)
class MoveMessage:
    """A half-move just played, together with the board as it looks afterwards."""

    board: BoardView
    move: tuple[Square, Square]
    promotion: Optional[PieceType] = None
    outcome: GameOutcome = GameOutcome.ONGOING

    def __post_init__(self) -> None:
        # the engine keeps playing on its own board, the message keeps the position at the time of the move
        if not isinstance(self.board, Board):
            object.__setattr__(self, "board", Board.from_view(self.board))


@dataclass(frozen=True)
class QuitMessage:
    """The sender is leaving the session. The reason is free text without ':'."""

    reason: str = ""


Message = Union[MoveMessage, QuitMessage]
