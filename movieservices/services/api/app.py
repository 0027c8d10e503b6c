# movieservices/services/api/app.py
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Iterable, Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movieservices.common.logging import get_logger
from movieservices.common.settings import Settings, get_settings
from movieservices.database.core.main import (
    create_client,
    ensure_indexes,
    get_database,
    movie_info_collection,
    review_collection,
)
from movieservices.database.repos.memory_repo import InMemoryMovieInfoRepo, InMemoryReviewRepo
from movieservices.database.repos.movie_info_repo import MongoMovieInfoRepo
from movieservices.database.repos.review_repo import MongoReviewRepo
from movieservices.services.api.errors import register_exception_handlers
from movieservices.services.api.routers import health, movie_infos, reviews

MOVIE_INFO = "movie-info"
REVIEW = "review"

logger = get_logger(__name__)


def _lifespan(service: str, cfg: Settings):
    """
    Build the repository for ``service`` on startup and release the Mongo
    client on shutdown. Each app owns its own client; the two services share
    nothing at runtime.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        client = None
        if cfg.store_backend == "memory":
            logger.warning("%s: using in-memory store, data is lost on restart", service)
            app.state.movie_info_repo = InMemoryMovieInfoRepo()
            app.state.review_repo = InMemoryReviewRepo()
        else:
            client = create_client(cfg.mongo)
            db = get_database(client, cfg.mongo)
            if cfg.mongo.ensure_indexes:
                await ensure_indexes(db, cfg.mongo)
            app.state.movie_info_repo = MongoMovieInfoRepo(movie_info_collection(db, cfg.mongo))
            app.state.review_repo = MongoReviewRepo(review_collection(db, cfg.mongo))
            logger.info("%s: connected to %s/%s", service, cfg.mongo.uri, cfg.mongo.db_name)
        try:
            yield
        finally:
            if client is not None:
                await client.close()

    return lifespan


def _create_app(service: str, title: str, routers: Iterable[APIRouter], cfg: Settings) -> FastAPI:
    get_logger("movieservices", level=cfg.log_level)

    app = FastAPI(
        title=title,
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
        lifespan=_lifespan(service, cfg),
    )
    app.state.settings = cfg
    app.state.service_name = service

    allow_origins = ["*"] if cfg.is_dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    register_exception_handlers(app)

    # Routers
    for r in routers:
        app.include_router(r, prefix=cfg.api.prefix)
    app.include_router(health.router)
    return app


def create_movie_info_app(settings: Optional[Settings] = None) -> FastAPI:
    cfg = settings or get_settings()
    return _create_app(MOVIE_INFO, "Movie Info Service", [movie_infos.router], cfg)


def create_review_app(settings: Optional[Settings] = None) -> FastAPI:
    cfg = settings or get_settings()
    return _create_app(REVIEW, "Movie Review Service", [reviews.router, health.hello_router], cfg)


movie_info_app = create_movie_info_app()
review_app = create_review_app()
