"""Client settings via pydantic-settings. Loads from environment (CODENAMES_*) and .env file."""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Boards are generated by the server as 5x5 grids.
BOARD_SIZE = 25

# Each keycard has 9 greens, 3 of them shared with the other keycard -> 15 distinct green words.
# NOTE tied to BOARD_SIZE, not computed from the number of cells received.
TOTAL_GREEN = 15


class Settings(BaseSettings):
    """Codenames client configuration.

    All values can be overridden via environment variables or .env file,
    e.g. CODENAMES_SERVER_URL=http://localhost:8080
    """

    # Game server
    server_url: str = "http://localhost:8080"
    request_timeout: float = 30.0  # the events endpoint long-polls

    # Board
    board_size: int = BOARD_SIZE
    total_green: int = TOTAL_GREEN

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CODENAMES_", env_file=".env", extra="ignore"
    )

    @model_validator(mode="after")
    def _check_board(self) -> "Settings":
        if not 0 < self.total_green <= self.board_size:
            raise ValueError(
                f"total_green must be between 1 and board_size ({self.board_size}), got {self.total_green}"
            )
        return self
