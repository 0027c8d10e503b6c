# tests/conftest.py
from __future__ import annotations

import pytest

from movieservices.common.settings import Settings


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def memory_settings() -> Settings:
    """Settings for an app that keeps records in-process (no MongoDB needed)."""
    return Settings(app_env="test", store_backend="memory", log_level="DEBUG")
