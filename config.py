"""
Configuration classes for Flask application.

Usage:
    from config import config
    app.config.from_object(config[config_name])
"""
import os


class Config:
    """Base configuration with defaults."""

    # Security
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')

    # Upstream NBP API (table A: average rates of foreign currencies)
    NBP_API_BASE_URL = os.environ.get(
        'NBP_API_BASE_URL',
        'https://api.nbp.pl/api/exchangerates/tables/A/'
    )
    NBP_API_TIMEOUT = float(os.environ.get('NBP_API_TIMEOUT', 5))

    # NBP publishes the day's table around noon; before that hour "today" means yesterday
    RATES_PUBLICATION_HOUR = int(os.environ.get('RATES_PUBLICATION_HOUR', 12))

    # Rate limiting (Flask-Limiter config keys)
    RATELIMIT_DEFAULT = "200 per day; 50 per hour"
    # Use Redis for persistent rate limiting if REDIS_URL is set, otherwise memory
    RATELIMIT_STORAGE_URI = os.environ.get('REDIS_URL', 'memory://')


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False

    # Content Security Policy
    CSP_POLICY = (
        "default-src 'self'; "
        "img-src 'self' data:; "
        "connect-src 'self';"
    )


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True

    # Tests never hit the real API
    NBP_API_BASE_URL = 'https://nbp.test/api/exchangerates/tables/A/'

    # Disable rate limiting for tests
    RATELIMIT_ENABLED = False


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig,
}


def get_config_name():
    """Get configuration name from environment."""
    flask_env = os.environ.get('FLASK_ENV', 'development')
    if flask_env == 'production':
        return 'production'
    elif os.environ.get('TESTING'):
        return 'testing'
    return 'development'
