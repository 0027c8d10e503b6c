# movieservices/domain/ports/repositories.py
from __future__ import annotations

from typing import List, Optional, Protocol

from movieservices.domain.entities.movie_info import MovieInfo
from movieservices.domain.entities.review import Review


class MovieInfoRepoPort(Protocol):
    async def insert(self, movie: MovieInfo) -> MovieInfo: ...
    async def find_all(self) -> List[MovieInfo]: ...
    async def find_by_id(self, movie_info_id: str) -> Optional[MovieInfo]: ...
    async def find_by_year(self, year: int) -> List[MovieInfo]: ...
    # raises MovieInfoNotFoundError when movie.id is unknown; never upserts
    async def update(self, movie: MovieInfo) -> MovieInfo: ...
    async def delete_by_id(self, movie_info_id: str) -> None: ...


class ReviewRepoPort(Protocol):
    async def insert(self, review: Review) -> Review: ...
    async def find_all(self) -> List[Review]: ...
    async def find_by_id(self, review_id: str) -> Optional[Review]: ...
    async def find_by_movie_info_id(self, movie_info_id: int) -> List[Review]: ...
    # raises ReviewNotFoundError when review.review_id is unknown; never upserts
    async def update(self, review: Review) -> Review: ...
    async def delete_by_id(self, review_id: str) -> None: ...
