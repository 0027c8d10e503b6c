# movieservices/database/core/main.py
from __future__ import annotations

from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from movieservices.common.logging import get_logger
from movieservices.common.settings import MongoConfig

logger = get_logger(__name__)


def create_client(cfg: MongoConfig) -> AsyncMongoClient:
    """
    Build the process-wide async client. Connecting is lazy: nothing touches
    the network until the first operation, so constructing the client at
    startup never fails on an unreachable server.
    """
    return AsyncMongoClient(
        cfg.uri,
        serverSelectionTimeoutMS=cfg.server_selection_timeout_ms,
        appname="movieservices",
    )


def get_database(client: AsyncMongoClient, cfg: MongoConfig) -> AsyncDatabase:
    return client[cfg.db_name]


def movie_info_collection(db: AsyncDatabase, cfg: MongoConfig) -> AsyncCollection:
    return db[cfg.movie_info_collection]


def review_collection(db: AsyncDatabase, cfg: MongoConfig) -> AsyncCollection:
    return db[cfg.review_collection]


async def ensure_indexes(db: AsyncDatabase, cfg: MongoConfig) -> None:
    """Index the fields used by the list filters (year, movieInfoId)."""
    await movie_info_collection(db, cfg).create_index([("year", ASCENDING)], name="ix_year")
    await review_collection(db, cfg).create_index([("movieInfoId", ASCENDING)], name="ix_movie_info_id")
    logger.info("Ensured indexes on %s.%s and %s.%s",
                cfg.db_name, cfg.movie_info_collection, cfg.db_name, cfg.review_collection)
