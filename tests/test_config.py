"""
Tests for configuration
"""
import os
from app.core.config import settings
from app.utils.datetime_utils import parse_unix


def test_settings_loaded():
    """Test that settings are loaded"""
    assert settings.APP_NAME is not None


def test_database_config():
    """Test database configuration exists"""
    assert hasattr(settings, 'DATABASE_URL')
    assert hasattr(settings, 'POSTGRES_HOST')
    assert hasattr(settings, 'POSTGRES_PORT')


def test_celery_config():
    """Celery falls back to REDIS_URL for broker and result backend"""
    if "CELERY_BROKER_URL" not in os.environ:
        assert settings.CELERY_BROKER_URL == settings.REDIS_URL
    if "CELERY_RESULT_BACKEND" not in os.environ:
        assert settings.CELERY_RESULT_BACKEND == settings.REDIS_URL
    assert not hasattr(settings, "DEV_MODE")


def test_reservation_term_defaults():
    """Default term is one year from 2023-11-25 01:00 UTC"""
    assert parse_unix(settings.RESERVATION_TERM_START) == 1700874000
    assert parse_unix(settings.RESERVATION_TERM_END) == 1732496400
