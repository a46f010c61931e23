"""
Score repository for best-score and leaderboard database operations.
"""

import logging
from datetime import datetime
from typing import List, Optional

from ...domain.scores import LeaderboardEntry
from .base import BaseRepository

logger = logging.getLogger(__name__)

BEST_SCORE_KEY = "best_score"


class ScoreRepository(BaseRepository):
    """
    Repository for kv_store and leaderboard table operations.
    """

    # -------------------------------------------------------------------------
    # Key-value operations
    # -------------------------------------------------------------------------

    def get_value(self, key: str) -> Optional[str]:
        with self.read_connection() as (conn, cursor):
            cursor.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row["value"] if row else None

    def set_value(self, key: str, value: str) -> None:
        with self.connection() as (conn, cursor):
            cursor.execute("""
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
            """, (key, value))

    def get_best_score(self) -> int:
        """
        Read the persisted best score.

        Returns:
            The stored value, or 0 when missing or unreadable
        """
        raw = self.get_value(BEST_SCORE_KEY)
        if raw is None:
            return 0
        try:
            return max(int(raw), 0)
        except ValueError:
            logger.warning("Ignoring unreadable best score %r in %s", raw, self.db_path)
            return 0

    def set_best_score(self, score: int) -> None:
        self.set_value(BEST_SCORE_KEY, str(int(score)))

    # -------------------------------------------------------------------------
    # Leaderboard operations
    # -------------------------------------------------------------------------

    def insert_entry(self, entry: LeaderboardEntry) -> None:
        with self.connection() as (conn, cursor):
            cursor.execute(
                "INSERT INTO leaderboard (score, created_at) VALUES (?, ?)",
                (entry.score, entry.timestamp.isoformat()),
            )

    def get_entries(self) -> List[LeaderboardEntry]:
        """
        Get every stored leaderboard entry.

        Returns:
            Entries in insertion order; ranking is left to the caller.
        """
        with self.read_connection() as (conn, cursor):
            cursor.execute("SELECT score, created_at FROM leaderboard ORDER BY id")
            rows = cursor.fetchall()

        entries = []
        for row in rows:
            try:
                entries.append(
                    LeaderboardEntry(
                        score=row["score"],
                        timestamp=datetime.fromisoformat(row["created_at"]),
                    )
                )
            except (TypeError, ValueError):
                logger.warning("Skipping malformed leaderboard row: %s", dict(row))
        return entries

    def clear(self) -> int:
        """
        Delete every leaderboard entry and the best score.

        Returns:
            Number of leaderboard rows deleted
        """
        with self.connection() as (conn, cursor):
            cursor.execute("SELECT COUNT(*) AS n FROM leaderboard")
            deleted = cursor.fetchone()["n"]
            cursor.execute("DELETE FROM leaderboard")
            cursor.execute("DELETE FROM kv_store WHERE key = ?", (BEST_SCORE_KEY,))
        return deleted
