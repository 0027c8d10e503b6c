# movieservices/services/api/deps.py
from __future__ import annotations

from fastapi import Depends, Request

from movieservices.domain.ports.repositories import MovieInfoRepoPort, ReviewRepoPort
from movieservices.services.movie_info.service import MovieInfoService
from movieservices.services.reviews.service import ReviewService


def get_movie_info_repo(request: Request) -> MovieInfoRepoPort:
    """
    The repository built by the app lifespan (Mongo or in-memory, per
    STORE_BACKEND). Override this dependency in tests to inject a fake.
    """
    return request.app.state.movie_info_repo


def get_review_repo(request: Request) -> ReviewRepoPort:
    return request.app.state.review_repo


def get_movie_info_service(repo: MovieInfoRepoPort = Depends(get_movie_info_repo)) -> MovieInfoService:
    return MovieInfoService(repo)


def get_review_service(repo: ReviewRepoPort = Depends(get_review_repo)) -> ReviewService:
    return ReviewService(repo)
