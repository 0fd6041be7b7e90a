"""Fixed parts of the wire format"""

FRAME_LENGTH = 128
FIELD_SEPARATOR = ":"
RANK_SEPARATOR = "/"
PADDING_CHARACTER = "0"
ENCODING = "utf-8"

MOVE_TAG = "ChessMOVE"
QUIT_TAG = "ChessQUIT"

MOVE_FIELD_LENGTH = 5
NO_PROMOTION = "0"
