"""
Database configuration and schema management for the score store.

This module provides SQLite connection management with environment-aware
path selection and schema initialization.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Optional

from .config import DEFAULT_DB_PATH

logger = logging.getLogger(__name__)


def get_database_path(db_path: Optional[str] = None) -> str:
    """
    Determine the database path.

    Args:
        db_path: Explicit path; takes precedence over the environment

    Returns:
        Path to the SQLite database file.
        - explicit argument, if given
        - SNAKE_DB_PATH, if set
        - ~/.snakegame/snakegame.db otherwise
    """
    path = db_path or os.getenv('SNAKE_DB_PATH') or DEFAULT_DB_PATH
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    return path


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """
    Get a database connection with appropriate settings.

    Returns:
        sqlite3.Connection: Database connection with row factory enabled.
    """
    conn = sqlite3.connect(get_database_path(db_path))
    conn.row_factory = sqlite3.Row  # Enable column access by name
    return conn


def init_database(db_path: Optional[str] = None) -> None:
    """
    Initialize the database schema with all required tables and indexes.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    path = get_database_path(db_path)
    logger.debug("Initializing database at: %s", path)

    conn = get_connection(path)
    cursor = conn.cursor()

    try:
        # Scalar settings such as the best score
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS leaderboard (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                score INTEGER NOT NULL CHECK(score > 0),
                created_at TIMESTAMP NOT NULL
            )
        """)

        cursor.execute("CREATE INDEX IF NOT EXISTS idx_leaderboard_score ON leaderboard(score DESC)")

        conn.commit()

    except Exception:
        conn.rollback()
        logger.exception("Error initializing database at %s", path)
        raise
    finally:
        conn.close()


if __name__ == "__main__":
    # Allow running this module directly to initialize the database
    init_database()
    print(f"Database ready at: {get_database_path()}")
