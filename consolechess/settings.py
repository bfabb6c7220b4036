"""Game settings: difficulty, mode and the user's colour."""

from __future__ import annotations

from dataclasses import dataclass

from .piece import DIFFICULTY_DEFAULT, ONE_PLAYER_MODE, USER_COLOR_DEFAULT


@dataclass
class Settings:
    """Difficulty level, number of human players and the first user's colour."""

    game_level: int = DIFFICULTY_DEFAULT
    game_mode: int = ONE_PLAYER_MODE
    user_color: int = USER_COLOR_DEFAULT

    def reset(self, level: int, mode: int, color: int) -> None:
        """Replace all three settings at once."""
        self.game_level = level
        self.game_mode = mode
        self.user_color = color


def default_settings() -> Settings:
    """Settings a new game starts with."""
    return Settings(DIFFICULTY_DEFAULT, ONE_PLAYER_MODE, USER_COLOR_DEFAULT)