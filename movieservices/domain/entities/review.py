# movieservices/domain/entities/review.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Review:
    """
    A user review of a movie. ``movie_info_id`` points at a MovieInfo by
    convention only; nothing checks that the movie exists.
    """

    movie_info_id: Optional[int] = None
    comment: Optional[str] = None
    rating: Optional[float] = None

    review_id: Optional[str] = None

    @property
    def is_persisted(self) -> bool:
        return self.review_id is not None
