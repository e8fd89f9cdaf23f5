"""
Configuration classes for the Esports Management backend.

Values come from the environment (a local .env file is loaded by the app
factory through python-dotenv) with sensible development defaults.
"""

import os

_BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))


class Config:
    """Base configuration shared by every environment."""

    SECRET_KEY = os.environ.get('SECRET_KEY', 'esports-dev-secret')
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL', 'sqlite:///' + os.path.join(_BASE_DIR, 'esports.db')
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Browsers may call the API from any local dev server port
    CORS_ORIGINS = [r'^http://localhost(:\d+)?$', r'^http://127\.0\.0\.1(:\d+)?$']
    CORS_METHODS = ['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']
    CORS_HEADERS = ['Content-Type', 'Authorization']

    COMPRESS_MIMETYPES = ['application/json', 'text/html', 'text/css', 'application/javascript']
    COMPRESS_LEVEL = 6
    COMPRESS_MIN_SIZE = 500

    LEADERBOARD_DEFAULT_LIMIT = 10
    LEADERBOARD_MAX_LIMIT = int(os.environ.get('LEADERBOARD_MAX_LIMIT', 100))
    LEADERBOARD_DEFAULT_SORT = 'rating'

    SEED_SAMPLE_DATA = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    DEBUG = False
    TESTING = False


class DevelopmentConfig(Config):
    DEBUG = True
    SEED_SAMPLE_DATA = os.environ.get('SEED_SAMPLE_DATA', '1') == '1'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'WARNING'


class ProductionConfig(Config):
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING')


_CONFIGS = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig,
}


def get_config(config_name='default'):
    """Return the configuration class registered under config_name."""
    return _CONFIGS.get(config_name, DevelopmentConfig)
