"""
Services Package

Contains all business logic and service classes.
"""

from .dictionary import Dictionary
from .game_engine import GameEngine
from .game_service import GameService, get_game_service, initialize_game_service
from .guess_evaluator import evaluate_guess

__all__ = [
    'Dictionary', 'GameEngine', 'evaluate_guess',
    'GameService', 'get_game_service', 'initialize_game_service'
]
