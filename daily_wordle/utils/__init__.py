"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .game_logger import game_logger
from .locks import KeyedLock

__all__ = ['game_logger', 'KeyedLock']
