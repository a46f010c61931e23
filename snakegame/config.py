"""
Runtime configuration for the snake game.

Values come from the environment (optionally a .env file) and can be
overridden by command line flags in the entry points.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .domain.constants import DEFAULT_GRID_HEIGHT, DEFAULT_GRID_WIDTH, DEFAULT_TICK_MS

load_dotenv()

DEFAULT_TILE_SIZE = 20
DEFAULT_DB_PATH = str(Path.home() / ".snakegame" / "snakegame.db")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


@dataclass
class Settings:
    grid_width: int = DEFAULT_GRID_WIDTH
    grid_height: int = DEFAULT_GRID_HEIGHT
    tick_ms: int = DEFAULT_TICK_MS
    tile_size: int = DEFAULT_TILE_SIZE
    db_path: str = DEFAULT_DB_PATH
    log_level: str = "INFO"


def load_settings() -> Settings:
    """
    Build Settings from SNAKE_* environment variables.

    Raises:
        ValueError: If a numeric variable is not a positive integer
    """
    return Settings(
        grid_width=_env_int("SNAKE_GRID_WIDTH", DEFAULT_GRID_WIDTH, minimum=2),
        grid_height=_env_int("SNAKE_GRID_HEIGHT", DEFAULT_GRID_HEIGHT),
        tick_ms=_env_int("SNAKE_TICK_MS", DEFAULT_TICK_MS),
        tile_size=_env_int("SNAKE_TILE_SIZE", DEFAULT_TILE_SIZE),
        db_path=os.getenv("SNAKE_DB_PATH") or DEFAULT_DB_PATH,
        log_level=(os.getenv("SNAKE_LOG_LEVEL") or "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
