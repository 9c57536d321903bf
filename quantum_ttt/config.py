"""
Configuration - player symbols and logging, read from the environment
"""

import os
import logging

from dotenv import load_dotenv
from pydantic import BaseModel, model_validator

# Load environment variables
load_dotenv()


def get_first_player() -> str:
    """Get the symbol of the player who moves first"""
    return os.getenv("QTTT_FIRST_PLAYER", "X")


def get_second_player() -> str:
    """Get the symbol of the player who moves second"""
    return os.getenv("QTTT_SECOND_PLAYER", "O")


def get_log_level() -> str:
    """Get configured log level name"""
    return os.getenv("QTTT_LOG_LEVEL", "WARNING").upper()


class GameConfig(BaseModel):
    """Player symbols for one game.

    Attributes:
        first_player: Owns odd-numbered moves
        second_player: Owns even-numbered moves
    """

    first_player: str = "X"
    second_player: str = "O"

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_symbols(self) -> "GameConfig":
        """Ensure both symbols are single characters and distinct."""
        for symbol in (self.first_player, self.second_player):
            if len(symbol) != 1 or symbol.isspace():
                raise ValueError(f"Player symbol must be one visible character, got {symbol!r}")
        if self.first_player == self.second_player:
            raise ValueError("Players must use different symbols")
        return self

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Build a config from QTTT_FIRST_PLAYER / QTTT_SECOND_PLAYER."""
        return cls(first_player=get_first_player(), second_player=get_second_player())

    @property
    def players(self) -> tuple[str, str]:
        return (self.first_player, self.second_player)

    def opponent(self, player: str) -> str:
        """Return the other player's symbol.

        Raises:
            ValueError: If ``player`` is not one of the configured symbols
        """
        if player == self.first_player:
            return self.second_player
        if player == self.second_player:
            return self.first_player
        raise ValueError(f"Unknown player: {player}")


def configure_logging(level: str | None = None) -> None:
    """Configure a basic log handler for the engine's loggers.

    Args:
        level: Log level name; defaults to QTTT_LOG_LEVEL
    """
    level_name = (level or get_log_level()).upper()
    numeric = logging.getLevelName(level_name)
    if not isinstance(numeric, int):
        raise ValueError(f"Invalid log level: {level_name}")
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("quantum_ttt").setLevel(numeric)
