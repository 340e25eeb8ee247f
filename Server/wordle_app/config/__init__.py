"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and word lists (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    ALLOWED_GUESSES, ALPHABET, DEFAULT_WORD_LENGTH, MAX_GUESSES, SUPPORTED_WORD_LENGTHS, WORD_LISTS,
    get_word_statistics, load_word_lists, validate_word_list_integrity
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ALLOWED_GUESSES', 'ALPHABET', 'DEFAULT_WORD_LENGTH', 'MAX_GUESSES', 'SUPPORTED_WORD_LENGTHS',
    'WORD_LISTS', 'get_word_statistics', 'load_word_lists', 'validate_word_list_integrity'
]
