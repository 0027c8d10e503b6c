# movieservices/services/mappers/review.py
from __future__ import annotations

from typing import Any, Dict

from movieservices.domain.entities.review import Review
from movieservices.services.schemas import ReviewCreate, ReviewRead, ReviewUpdate


def to_domain(payload: ReviewCreate) -> Review:
    return Review(
        movie_info_id=payload.movie_info_id,
        comment=payload.comment,
        rating=payload.rating,
    )


def to_changes(payload: ReviewUpdate) -> Dict[str, Any]:
    return payload.model_dump(exclude_unset=True)


def to_read(r: Review) -> ReviewRead:
    return ReviewRead(
        review_id=r.review_id,
        movie_info_id=r.movie_info_id,
        comment=r.comment,
        rating=r.rating,
    )
