"""
Score store implementations.

The engine only talks to the ScoreStore interface; persistence details live
behind it.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional

from ..domain.scores import LeaderboardEntry
from .repositories import ScoreRepository

logger = logging.getLogger(__name__)


class ScoreStore:
    """
    Base class/interface for best-score and leaderboard persistence.
    """

    def get_best_score(self) -> int:
        raise NotImplementedError

    def set_best_score(self, score: int) -> None:
        raise NotImplementedError

    def get_leaderboard(self) -> List[LeaderboardEntry]:
        """
        Return every stored entry, in no particular order.
        """
        raise NotImplementedError

    def append_leaderboard_entry(self, entry: LeaderboardEntry) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        """Remove all stored scores. Only used by maintenance tooling."""
        raise NotImplementedError

    def close(self) -> None:
        pass


class InMemoryScoreStore(ScoreStore):
    """Process-local store; nothing survives the process."""

    def __init__(self, best_score: int = 0, entries: Optional[List[LeaderboardEntry]] = None):
        self.best_score = best_score
        self.entries: List[LeaderboardEntry] = list(entries or [])

    def get_best_score(self) -> int:
        return self.best_score

    def set_best_score(self, score: int) -> None:
        self.best_score = score

    def get_leaderboard(self) -> List[LeaderboardEntry]:
        return list(self.entries)

    def append_leaderboard_entry(self, entry: LeaderboardEntry) -> None:
        self.entries.append(entry)

    def clear(self) -> None:
        self.best_score = 0
        self.entries.clear()


class SqliteScoreStore(ScoreStore):
    """
    SQLite-backed store delegating to ScoreRepository.
    """

    def __init__(self, db_path: Optional[str] = None, repository: Optional[ScoreRepository] = None):
        self.repository = repository or ScoreRepository(db_path)

    def get_best_score(self) -> int:
        return self.repository.get_best_score()

    def set_best_score(self, score: int) -> None:
        self.repository.set_best_score(score)

    def get_leaderboard(self) -> List[LeaderboardEntry]:
        return self.repository.get_entries()

    def append_leaderboard_entry(self, entry: LeaderboardEntry) -> None:
        self.repository.insert_entry(entry)

    def clear(self) -> None:
        deleted = self.repository.clear()
        logger.info("Cleared %s leaderboard entries from %s", deleted, self.repository.db_path)


class BackgroundScoreStore(ScoreStore):
    """
    Wraps another store so writes run on a single worker thread.

    Reads go straight to the wrapped store. Writes are queued in order and
    failures are logged, so a slow or broken disk never delays a tick.
    """

    def __init__(self, inner: ScoreStore):
        self.inner = inner
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="score-store")

    def _submit(self, fn, *args) -> Future:
        future = self._executor.submit(fn, *args)
        future.add_done_callback(self._log_failure)
        return future

    @staticmethod
    def _log_failure(future: Future) -> None:
        exc = future.exception()
        if exc is not None:
            logger.warning("Background score write failed: %s", exc)

    def get_best_score(self) -> int:
        return self.inner.get_best_score()

    def set_best_score(self, score: int) -> None:
        self._submit(self.inner.set_best_score, score)

    def get_leaderboard(self) -> List[LeaderboardEntry]:
        return self.inner.get_leaderboard()

    def append_leaderboard_entry(self, entry: LeaderboardEntry) -> None:
        self._submit(self.inner.append_leaderboard_entry, entry)

    def clear(self) -> None:
        self._submit(self.inner.clear).result()

    def flush(self) -> None:
        """Block until every queued write has been applied."""
        self._executor.submit(lambda: None).result()

    def close(self) -> None:
        self._executor.shutdown(wait=True)
        self.inner.close()
