"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameOutcome, GuessResult, LetterStatus, Session, ShareRecord
from .stats import LastPlayed, PlayerStats

__all__ = [
    'GameOutcome', 'GuessResult', 'LetterStatus', 'Session', 'ShareRecord',
    'LastPlayed', 'PlayerStats'
]
