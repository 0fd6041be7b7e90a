"""
Type definitions used across layers
"""

from enum import StrEnum


class GameOutcome(StrEnum):
    """The value is the 3-character code sent over the wire."""

    ONGOING = "0-0"
    WHITE_WINS = "1-0"
    DRAW = "1-1"
    BLACK_WINS = "0-1"


class PeerRole(StrEnum):
    HOST = "host"
    JOIN = "join"
