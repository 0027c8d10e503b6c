# movieservices/services/reviews/service.py
from __future__ import annotations

from dataclasses import replace
from typing import Any, List, Mapping, Optional

from movieservices.common.logging import get_logger
from movieservices.domain.entities.review import Review
from movieservices.domain.errors import ReviewNotFoundError
from movieservices.domain.ports.repositories import ReviewRepoPort

logger = get_logger(__name__)


class ReviewService:
    # movie_info_id is fixed at creation
    MUTABLE_FIELDS = ("comment", "rating")

    def __init__(self, repo: ReviewRepoPort) -> None:
        self.repo = repo

    async def create(self, review: Review) -> Review:
        saved = await self.repo.insert(replace(review, review_id=None))
        logger.info("Created review %s for movie info %s", saved.review_id, saved.movie_info_id)
        return saved

    async def list_all(self, movie_info_id: Optional[int] = None) -> List[Review]:
        if movie_info_id is not None:
            return await self.repo.find_by_movie_info_id(movie_info_id)
        return await self.repo.find_all()

    async def get_by_id(self, review_id: str) -> Review:
        review = await self.repo.find_by_id(review_id)
        if review is None:
            raise ReviewNotFoundError(review_id)
        return review

    async def update(self, review_id: str, changes: Mapping[str, Any]) -> Review:
        existing = await self.get_by_id(review_id)
        updates = {k: v for k, v in changes.items() if k in self.MUTABLE_FIELDS}
        saved = await self.repo.update(replace(existing, **updates))
        logger.info("Updated review %s fields=%s", review_id, sorted(updates))
        return saved

    async def delete_by_id(self, review_id: str) -> None:
        await self.repo.delete_by_id(review_id)
        logger.info("Deleted review %s", review_id)
