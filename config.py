"""
Application Configuration

Centralizes Flask, logging and recipe scaling settings.
"""

import os

from constants import DEFAULT_SCALE_FACTOR, SCALE_MIN, SCALE_MAX, SCALE_STEP


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Scale selector settings
    DEFAULT_SCALE_FACTOR = DEFAULT_SCALE_FACTOR
    SCALE_MIN = SCALE_MIN
    SCALE_MAX = SCALE_MAX
    SCALE_STEP = SCALE_STEP


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
