import logging

from core.logging import setup_logging


def test_setup_logging_quiets_third_party_loggers(monkeypatch):
    monkeypatch.setenv("BACKEND_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("NODE_ENV", "test")

    setup_logging(force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("anthropic").level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_records_expose_short_pathname(monkeypatch):
    monkeypatch.setenv("NODE_ENV", "test")
    setup_logging(force=True)

    record = logging.getLogRecordFactory()("core.test", logging.INFO, __file__, 1, "msg", (), None)

    assert not record.shortpathname.startswith("/")
    assert record.shortpathname.endswith("test_logging.py")
