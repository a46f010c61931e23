"""
Data access layer for score persistence.

This module provides the ScoreStore interface the engine depends on, plus
in-memory, SQLite and background-writing implementations.
"""

from .score_store import (
    ScoreStore,
    InMemoryScoreStore,
    SqliteScoreStore,
    BackgroundScoreStore,
)
from .repositories import BaseRepository, ScoreRepository

__all__ = [
    'ScoreStore',
    'InMemoryScoreStore',
    'SqliteScoreStore',
    'BackgroundScoreStore',
    'BaseRepository',
    'ScoreRepository',
]
