import logging

from article_store import database, log_config
from article_store.config import settings


def test_parse_level_known_and_unknown():
    assert log_config._parse_level("debug") == logging.DEBUG
    assert log_config._parse_level(" warning ") == logging.WARNING
    assert log_config._parse_level("chatty") == logging.INFO


def test_setup_logging_applies_category_levels(monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL_SQL", "ERROR")
    monkeypatch.setattr(settings, "DEBUG", False)
    log_config.setup_logging()
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("article_store").level == log_config._parse_level(settings.LOG_LEVEL)


def test_debug_logs_sql_statements(monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL_SQL", "WARNING")
    monkeypatch.setattr(settings, "DEBUG", True)
    log_config.setup_logging()
    assert logging.getLogger("sqlalchemy.engine").level == logging.INFO


def test_engine_does_not_echo():
    # echo=True would install its own handler and level on the engine logger.
    assert database.engine.echo is False
    assert not logging.getLogger("sqlalchemy.engine.Engine").handlers
