"""
Utilities Package

Contains utility functions and helper modules.
"""

from .game_logger import game_logger, GameLogger
from .helpers import build_game_payload

__all__ = ['game_logger', 'GameLogger', 'build_game_payload']
