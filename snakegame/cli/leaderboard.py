#!/usr/bin/env python3
"""
Show or clear the stored best score and leaderboard.

Usage:
    python -m snakegame.cli.leaderboard [--db-path PATH] [--limit 5]
    python -m snakegame.cli.leaderboard --clear [--confirm]
"""

import argparse
import sys
from typing import Callable, List, Optional

from ..config import configure_logging, load_settings
from ..data_access import ScoreStore, SqliteScoreStore
from ..domain import LEADERBOARD_LIMIT, top_entries


def format_leaderboard(store: ScoreStore, limit: int = LEADERBOARD_LIMIT) -> str:
    lines = [f"Best score: {store.get_best_score()}"]
    entries = top_entries(store.get_leaderboard(), limit)
    if not entries:
        lines.append("No games recorded yet.")
    for rank, entry in enumerate(entries, start=1):
        lines.append(f"{rank:>2}. {entry.score:>6}  {entry.date}")
    return "\n".join(lines)


def clear_scores(
    store: ScoreStore,
    confirm: bool = False,
    prompt: Callable[[str], str] = input,
) -> bool:
    """
    Wipe the best score and every leaderboard entry.

    Args:
        store: Store to clear
        confirm: If True, skip confirmation prompt
        prompt: Input function, replaceable in tests

    Returns:
        True if the store was cleared, False if cancelled
    """
    if not confirm:
        response = prompt("Type 'CLEAR' to delete all scores: ")
        if response != 'CLEAR':
            print("Clear cancelled")
            return False

    store.clear()
    print("Scores cleared")
    return True


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Show or clear snake scores.")
    parser.add_argument("--db-path", default=None, help="SQLite file (default: SNAKE_DB_PATH)")
    parser.add_argument("--limit", type=int, default=LEADERBOARD_LIMIT,
                        help="Number of entries to show")
    parser.add_argument("--clear", action="store_true", help="Delete all stored scores")
    parser.add_argument("--confirm", action="store_true", help="Skip the confirmation prompt")
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(settings.log_level)
    store = SqliteScoreStore(args.db_path or settings.db_path)

    if args.clear:
        return 0 if clear_scores(store, confirm=args.confirm) else 1

    print(format_leaderboard(store, args.limit))
    return 0


if __name__ == "__main__":
    sys.exit(main())
