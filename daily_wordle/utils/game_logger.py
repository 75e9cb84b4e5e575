"""
Game Logger Module for the Daily Wordle service

This module provides structured logging for player actions, server replies,
and game events. Every entry is a single JSON object on one line.
"""

import logging
import json
import os
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path


class GameLogger:
    """
    Centralized logging system for the daily puzzle service.

    Features:
    - Player action tracking keyed by the opaque player id
    - Reply logging with secret-free payload summaries
    - Game event logging (start, resume, win, loss, ignored shares)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.configure(log_dir, level)

    def configure(self, log_dir: str, level: str) -> None:
        """Re-point the logger at a new directory and level (from app config)."""
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, str(level).upper(), logging.INFO)
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('daily_wordle')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        # Create log file with date
        log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

        # File handler for detailed logs
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )

        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          player_id: Optional[str],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'player': player_id,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_player_action(self,
                          player_id: Optional[str],
                          action: str,
                          source: str = 'http',
                          **kwargs):
        """
        Log player actions with full context.

        Args:
            player_id: Opaque player identifier
            action: Type of action (e.g., 'start_game', 'submit_guess', 'view_stats')
            source: Surface the action came through ('http' or 'socket')
            **kwargs: Additional details to log
        """
        details = {'source': source, **kwargs}
        self.logger.info(self._create_log_entry('PLAYER_ACTION', action, player_id, details))

    def log_server_response(self,
                            player_id: Optional[str],
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            **kwargs):
        """
        Log replies sent back to a player.

        Args:
            player_id: Opaque player identifier
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to the player
            **kwargs: Additional details to log
        """
        details = {
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, player_id, details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)

    def log_game_event(self,
                       player_id: Optional[str],
                       event: str,
                       **kwargs):
        """
        Log game-specific events (wins, losses, etc.).

        Args:
            player_id: Opaque player identifier
            event: Type of game event (e.g., 'game_won', 'game_lost', 'share_ignored')
            **kwargs: Additional game details
        """
        self.logger.info(self._create_log_entry('GAME_EVENT', event, player_id, kwargs))

    def log_error(self,
                  player_id: Optional[str],
                  error: Exception,
                  action: str,
                  **kwargs):
        """
        Log errors with full context.

        Args:
            player_id: Opaque player identifier
            error: Exception that occurred
            action: Action that was being performed
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            **kwargs
        }
        self.logger.error(self._create_log_entry('ERROR', action, player_id, details))

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Keep reply logs free of boards and share tokens, which reveal the secret."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()

        if 'content' in sanitized and isinstance(sanitized['content'], str):
            sanitized['content'] = {'length': len(sanitized['content'])}

        if 'components' in sanitized and isinstance(sanitized['components'], list):
            sanitized['components'] = {'count': len(sanitized['components'])}

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'player_actions': 0,
            'server_responses': 0,
            'game_events': 0,
            'errors': 0
        }

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'PLAYER_ACTION' in line:
                            stats['player_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif 'ERROR' in line:
                            stats['errors'] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {str(e)}'}

        return stats


# Global logger instance
game_logger = GameLogger(os.getenv('LOG_DIR', 'logs'), os.getenv('LOG_LEVEL', 'INFO'))
