"""
Shared fixtures for the game engine and server tests.

Logging is pointed at a temporary directory before the application package is
imported, since the game logger opens its log file at import time.
"""

import os
import random
import tempfile

os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle-logs-'))

import pytest

from wordle_app import create_app
from wordle_app.config import TestingConfig
from wordle_app.services.dictionary import Dictionary
from wordle_app.services.game_engine import GameEngine
from wordle_app.services.game_service import initialize_game_service

GUESS_ONLY_WORDS = ["TRACE", "SLATE", "PILOT", "EERIE", "CAT", "DOG", "BEAR", "BOAT"]


@pytest.fixture
def crane_dictionary():
    """One target word per length, so every game's answer is known."""
    return Dictionary(
        {3: ["CAT"], 4: ["BEAR"], 5: ["CRANE"]},
        extra_guesses=GUESS_ONLY_WORDS,
        rng=random.Random(7),
    )


@pytest.fixture
def engine(crane_dictionary):
    return GameEngine(crane_dictionary, word_length=5)


@pytest.fixture
def strict_engine(crane_dictionary):
    return GameEngine(crane_dictionary, word_length=5, enforce_dictionary=True)


@pytest.fixture
def game_service(crane_dictionary):
    return initialize_game_service(dictionary=crane_dictionary, default_word_length=5, enforce_dictionary=False)


@pytest.fixture
def app(game_service):
    app, socketio = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
