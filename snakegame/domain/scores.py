"""
Score bookkeeping types and leaderboard ranking.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List

from .constants import LEADERBOARD_LIMIT


@dataclass(frozen=True)
class LeaderboardEntry:
    score: int
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if self.score <= 0:
            raise ValueError(f"Leaderboard scores must be positive, got {self.score}.")

    @property
    def date(self) -> str:
        """Human-readable timestamp used by the leaderboard display."""
        return self.timestamp.strftime("%Y-%m-%d %H:%M:%S")


def top_entries(
    entries: Iterable[LeaderboardEntry],
    limit: int = LEADERBOARD_LIMIT,
) -> List[LeaderboardEntry]:
    """
    Rank entries for display: highest score first, newer first on ties.

    Args:
        entries: unordered leaderboard entries
        limit: maximum number of entries to return

    Returns:
        At most ``limit`` entries sorted descending by score.
    """
    ranked = sorted(entries, key=lambda e: (e.score, e.timestamp), reverse=True)
    return ranked[:max(limit, 0)]
