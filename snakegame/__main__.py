"""
Play the game in a pygame window.

Usage:
    python -m snakegame [--width 20] [--height 20] [--tick-ms 120] [--memory]
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from .config import configure_logging, load_settings
from .data_access import BackgroundScoreStore, InMemoryScoreStore, SqliteScoreStore
from .frontend.colors import DEFAULT_FOOD_STYLE, DEFAULT_SNAKE_COLOR, FOOD_STYLES

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snakegame",
        description="Single-player snake on a fixed grid.",
    )
    parser.add_argument("--width", type=int, default=None,
                        help="Number of grid columns (default: SNAKE_GRID_WIDTH or 20)")
    parser.add_argument("--height", type=int, default=None,
                        help="Number of grid rows (default: SNAKE_GRID_HEIGHT or 20)")
    parser.add_argument("--tick-ms", type=int, default=None,
                        help="Milliseconds between ticks (default: SNAKE_TICK_MS or 120)")
    parser.add_argument("--tile", type=int, default=None,
                        help="Tile size in pixels (default: SNAKE_TILE_SIZE or 20)")
    parser.add_argument("--snake-color", default=DEFAULT_SNAKE_COLOR,
                        help="Snake colour as #rrggbb")
    parser.add_argument("--food-style", default=DEFAULT_FOOD_STYLE, choices=sorted(FOOD_STYLES),
                        help="How food is drawn")
    parser.add_argument("--db-path", default=None,
                        help="SQLite file for best score and leaderboard (default: SNAKE_DB_PATH)")
    parser.add_argument("--memory", action="store_true",
                        help="Keep scores in memory only")
    parser.add_argument("--log-level", default=None,
                        help="Logging level (default: SNAKE_LOG_LEVEL or INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()

    overrides = {
        "grid_width": args.width,
        "grid_height": args.height,
        "tick_ms": args.tick_ms,
        "tile_size": args.tile,
        "db_path": args.db_path,
        "log_level": args.log_level.upper() if args.log_level else None,
    }
    settings = replace(settings, **{k: v for k, v in overrides.items() if v is not None})
    configure_logging(settings.log_level)

    if args.memory:
        store = InMemoryScoreStore()
    else:
        store = BackgroundScoreStore(SqliteScoreStore(settings.db_path))
        logger.info("Scores stored in %s", settings.db_path)

    # pygame is only needed once we actually open a window
    from .frontend.app import run

    return run(settings, store, snake_color=args.snake_color, food_style=args.food_style)


if __name__ == "__main__":
    sys.exit(main())
