"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from .game_settings import (
    DEFAULT_ANCHOR_INDEX,
    DEFAULT_ANCHOR_TIMESTAMP,
    DEFAULT_DAILY_WORDS_FILE,
    DEFAULT_GUESS_WORDS_FILE,
)

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Database Settings (stats fall back to memory when MONGO_URI is unset)
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB = os.getenv('MONGO_DB', 'daily_wordle')
    STATS_COLLECTION = os.getenv('STATS_COLLECTION', 'users')

    # Puzzle Settings
    ANCHOR_INDEX = int(os.getenv('ANCHOR_INDEX', DEFAULT_ANCHOR_INDEX))
    ANCHOR_TIMESTAMP = int(os.getenv('ANCHOR_TIMESTAMP', DEFAULT_ANCHOR_TIMESTAMP))
    DAILY_WORDS_FILE = os.getenv('DAILY_WORDS_FILE', DEFAULT_DAILY_WORDS_FILE)
    GUESS_WORDS_FILE = os.getenv('GUESS_WORDS_FILE', DEFAULT_GUESS_WORDS_FILE)

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    MONGO_URI = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
