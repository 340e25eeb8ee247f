"""Tests for the structured game logger."""

import importlib
import logging
import os
from datetime import datetime, timedelta

game_logger_module = importlib.import_module('wordle_app.utils.game_logger')
from wordle_app.utils.game_logger import game_logger


def _file_handler():
    return next(handler for handler in game_logger.logger.handlers if isinstance(handler, logging.FileHandler))


class TestGameLogger:
    def test_log_file_matches_handler(self):
        assert game_logger.log_file.name.startswith('game_log_')
        assert _file_handler().baseFilename == os.path.abspath(game_logger.log_file)

    def test_log_file_is_stable_across_midnight(self, monkeypatch):
        opened_at = game_logger.log_file

        class Tomorrow(datetime):
            @classmethod
            def now(cls, tz=None):
                return datetime.now(tz) + timedelta(days=1)

        monkeypatch.setattr(game_logger_module, 'datetime', Tomorrow)
        game_logger.logger.warning('after midnight')

        assert game_logger.log_file == opened_at
        stats = game_logger.get_log_stats()
        assert stats['log_file'] == str(opened_at)
        assert stats['total_entries'] >= 1
