import structlog

from seq_ops import configure_logging, get_settings
from seq_ops.config.settings import SeqOpsSettings
from seq_ops.utils.logging import get_logger


def test_defaults(monkeypatch):
    monkeypatch.delenv("SEQ_OPS_VERBOSE", raising=False)
    monkeypatch.delenv("SEQ_OPS_WARN_DEPRECATED", raising=False)
    settings = SeqOpsSettings(_env_file=None)
    assert settings.verbose is False
    assert settings.warn_deprecated is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SEQ_OPS_VERBOSE", "1")
    monkeypatch.setenv("seq_ops_warn_deprecated", "no")
    settings = SeqOpsSettings(_env_file=None)
    assert settings.verbose is True
    assert settings.warn_deprecated is False


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_configure_logging_verbose(reset_structlog):
    configure_logging(verbose=True)
    assert structlog.is_configured()


def test_configure_logging_reads_settings(monkeypatch, reset_structlog):
    monkeypatch.setenv("SEQ_OPS_VERBOSE", "true")
    get_settings.cache_clear()
    configure_logging()
    assert structlog.is_configured()


def test_get_logger_binds():
    logger = get_logger("seq_ops.test")
    assert logger.bind(op="take") is not None
