"""
Base repository with connection management.

Provides a context manager for database connections that handles:
- Automatic connection cleanup
- Transaction commit on success
- Transaction rollback on failure
"""

from contextlib import contextmanager
from typing import Any, Generator, Optional

from ...database import get_connection, get_database_path, init_database


class BaseRepository:
    """
    Base class for all repositories.

    Provides connection management via context manager pattern.
    Subclasses should use self.connection() to get database connections.
    """

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = get_database_path(db_path)
        init_database(self.db_path)

    @contextmanager
    def connection(self, auto_commit: bool = True) -> Generator[Any, None, None]:
        """
        Context manager for database connections.

        Automatically handles:
        - Opening a connection to this repository's database
        - Committing on successful exit (if auto_commit=True)
        - Rolling back on exception
        - Closing the connection in all cases

        Args:
            auto_commit: If True, commit transaction on successful exit.

        Yields:
            A tuple of (connection, cursor) for database operations.

        Example:
            with self.connection() as (conn, cursor):
                cursor.execute("SELECT * FROM leaderboard")
                results = cursor.fetchall()
        """
        conn = get_connection(self.db_path)
        cursor = conn.cursor()
        try:
            yield conn, cursor
            if auto_commit:
                conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    @contextmanager
    def read_connection(self) -> Generator[Any, None, None]:
        """
        Context manager for read-only operations.

        Same as connection() but without a commit.
        """
        conn = get_connection(self.db_path)
        cursor = conn.cursor()
        try:
            yield conn, cursor
        finally:
            cursor.close()
            conn.close()
