import pytest
import structlog

from seq_ops.config.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()
