from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from tests.support import make_live_services

from daily_wordle import create_app
from daily_wordle.config import TestingConfig
from daily_wordle.utils.game_logger import game_logger


class GameLoggerConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        self.previous_dir = game_logger.log_dir
        self.previous_level = logging.getLevelName(game_logger.level)
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self) -> None:
        game_logger.configure(self.previous_dir, self.previous_level)
        self.tmp.cleanup()

    def test_app_config_controls_log_dir_and_level(self):
        class LoggingConfig(TestingConfig):
            LOG_DIR = self.tmp.name
            LOG_LEVEL = 'DEBUG'

        create_app(LoggingConfig, services=make_live_services())

        self.assertEqual(game_logger.log_dir, Path(self.tmp.name))
        self.assertEqual(game_logger.logger.level, logging.DEBUG)

        game_logger.log_game_event('p1', 'game_started', puzzle_index=0)
        self.assertEqual(game_logger.get_log_stats()['game_events'], 1)
        self.assertEqual(len(list(Path(self.tmp.name).glob('game_log_*.log'))), 1)

    def test_reconfigure_does_not_stack_handlers(self):
        game_logger.configure(self.tmp.name, 'INFO')
        game_logger.configure(self.tmp.name, 'WARNING')
        self.assertEqual(len(game_logger.logger.handlers), 2)
        self.assertEqual(game_logger.logger.level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
