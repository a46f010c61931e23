"""
Single-player grid snake: game engine, session control and score storage.
"""

from .engine import GameEngine
from .session import Intent, SessionController

__version__ = "0.1.0"

__all__ = ['GameEngine', 'SessionController', 'Intent', '__version__']
