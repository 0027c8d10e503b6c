# tests/services/conftest.py
from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from movieservices.services.api.app import create_movie_info_app, create_review_app


@pytest.fixture()
def movie_info_client(memory_settings):
    """
    TestClient for the movie-info app backed by the in-memory store. The
    lifespan builds a fresh store per client, so every test starts empty.
    """
    app = create_movie_info_app(memory_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def review_client(memory_settings):
    app = create_review_app(memory_settings)
    with TestClient(app) as client:
        yield client
