import logging

from streamcatalog.config import Settings
from streamcatalog.logging_config import setup_logging


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://catalog@db/catalog")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings()
    assert settings.DATABASE_URL == "postgresql://catalog@db/catalog"
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.SQL_ECHO is False


def test_setup_logging_sets_level():
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, list(root.handlers)
    try:
        setup_logging("warning")
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert logging.getLogger("sqlalchemy").level == logging.WARNING
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)
