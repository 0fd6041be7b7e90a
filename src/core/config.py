"""Settings needed to open a connection to the other player"""

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidConfigError
from src.core.shared_types import PeerRole

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5000


class PeerConfig(BaseModel):
    role: PeerRole
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    poll_interval: float = 0.05  # seconds between reads on a non-blocking socket

    @field_validator("host")
    @classmethod
    def validate_host(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise InvalidConfigError("Host must not be empty.")
        return value

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not (1 <= value <= 65535):
            raise InvalidConfigError(f"Port {value} is outside 1-65535.")
        return value

    @field_validator("poll_interval")
    @classmethod
    def validate_poll_interval(cls, value: float) -> float:
        if value <= 0:
            raise InvalidConfigError(f"Poll interval must be positive, got {value}.")
        return value

    @property
    def address(self) -> tuple[str, int]:
        return (self.host, self.port)
