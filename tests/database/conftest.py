# tests/database/conftest.py
from __future__ import annotations

from uuid import uuid4

import pytest
from pymongo import AsyncMongoClient

from movieservices.common.settings import MongoConfig


@pytest.fixture(scope="session")
def _mongo_container_url():
    """
    A throwaway MongoDB from testcontainers. Tests that need it are skipped
    when Docker is not reachable.
    """
    try:
        from testcontainers.mongodb import MongoDbContainer

        container = MongoDbContainer("mongo:7.0")
        container.start()
    except Exception as exc:  # docker missing / daemon down
        pytest.skip(f"MongoDB container unavailable: {exc}")
    try:
        yield container.get_connection_url()
    finally:
        container.stop()


@pytest.fixture()
def mongo_cfg(_mongo_container_url) -> MongoConfig:
    # fresh database per test so records never leak between tests
    return MongoConfig(uri=_mongo_container_url, db_name=f"movies_{uuid4().hex[:10]}")


@pytest.fixture()
async def mongo_db(mongo_cfg):
    client = AsyncMongoClient(mongo_cfg.uri)
    db = client[mongo_cfg.db_name]
    try:
        yield db
    finally:
        await client.drop_database(mongo_cfg.db_name)
        await client.close()
