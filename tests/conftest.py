import os

import pytest

os.environ["APP_ENV"] = "testing"

from src.date_tasks.date_tasks.core.settings import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
