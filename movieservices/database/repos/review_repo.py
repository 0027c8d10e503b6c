# movieservices/database/repos/review_repo.py
from __future__ import annotations

from typing import List, Optional

from pymongo.asynchronous.collection import AsyncCollection

from movieservices.database.repos._mapping import as_key, review_to_doc, to_domain_review
from movieservices.domain.entities.review import Review
from movieservices.domain.errors import ReviewNotFoundError


class MongoReviewRepo:
    def __init__(self, collection: AsyncCollection) -> None:
        self.col = collection

    async def insert(self, review: Review) -> Review:
        doc = review_to_doc(review)
        await self.col.insert_one(doc)
        return to_domain_review(doc)

    async def find_all(self) -> List[Review]:
        return [to_domain_review(d) async for d in self.col.find({})]

    async def find_by_id(self, review_id: str) -> Optional[Review]:
        doc = await self.col.find_one({"_id": as_key(review_id)})
        return to_domain_review(doc) if doc else None

    async def find_by_movie_info_id(self, movie_info_id: int) -> List[Review]:
        cursor = self.col.find({"movieInfoId": movie_info_id})
        return [to_domain_review(d) async for d in cursor]

    async def update(self, review: Review) -> Review:
        if review.review_id is None:
            raise ReviewNotFoundError("<unsaved>")
        res = await self.col.replace_one({"_id": as_key(review.review_id)}, review_to_doc(review))
        if res.matched_count == 0:
            raise ReviewNotFoundError(review.review_id)
        return review

    async def delete_by_id(self, review_id: str) -> None:
        await self.col.delete_one({"_id": as_key(review_id)})
