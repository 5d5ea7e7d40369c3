"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///kitchen_orders.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Page data cache (Flask-Caching). Off unless a backend shared by all
    # workers is configured, e.g. CACHE_TYPE=RedisCache with CACHE_REDIS_URL.
    CACHE_TYPE = os.environ.get('CACHE_TYPE', 'NullCache')
    CACHE_NO_NULL_WARNING = True
    CACHE_REDIS_URL = os.environ.get('CACHE_REDIS_URL')
    CACHE_DEFAULT_TIMEOUT = int(os.environ.get('CACHE_DEFAULT_TIMEOUT', 300))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Dashboard list sizes
    DASHBOARD_RECENT_ORDERS = 5
    DASHBOARD_TOP_INGREDIENTS = 5


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')
    # Single-process dev server
    CACHE_TYPE = os.environ.get('CACHE_TYPE', 'SimpleCache')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    CACHE_TYPE = 'SimpleCache'
    LOG_LEVEL = 'WARNING'


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


# Backends that keep entries inside one process; invalidation in one
# worker cannot reach the others
PROCESS_LOCAL_CACHES = {
    'SimpleCache',
    'simple',
    'flask_caching.backends.SimpleCache',
    'flask_caching.backends.simplecache.SimpleCache',
}
