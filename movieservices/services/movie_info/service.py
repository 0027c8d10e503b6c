# movieservices/services/movie_info/service.py
from __future__ import annotations

from dataclasses import replace
from typing import Any, List, Mapping, Optional

from movieservices.common.logging import get_logger
from movieservices.domain.entities.movie_info import MovieInfo
from movieservices.domain.errors import MovieInfoNotFoundError
from movieservices.domain.policies.movie_info_rules import validate_movie_info
from movieservices.domain.ports.repositories import MovieInfoRepoPort

logger = get_logger(__name__)


class MovieInfoService:
    """
    Orchestrates MovieInfo CRUD over a repository port.

    Every method is a single find/insert/replace/delete against the store;
    ``update`` is a find followed by a replace and is not atomic (two
    concurrent updates of the same id can lose one of the writes).
    """

    MUTABLE_FIELDS = ("name", "year", "cast", "release_date")

    def __init__(self, repo: MovieInfoRepoPort) -> None:
        self.repo = repo

    async def create(self, movie: MovieInfo) -> MovieInfo:
        validate_movie_info(movie)
        saved = await self.repo.insert(replace(movie, id=None))
        logger.info("Created movie info %s (%s, %s)", saved.id, saved.name, saved.year)
        return saved

    async def list_all(self, year: Optional[int] = None) -> List[MovieInfo]:
        if year is not None:
            logger.debug("Listing movie infos for year=%s", year)
            return await self.repo.find_by_year(year)
        return await self.repo.find_all()

    async def get_by_id(self, movie_info_id: str) -> MovieInfo:
        movie = await self.repo.find_by_id(movie_info_id)
        if movie is None:
            raise MovieInfoNotFoundError(movie_info_id)
        return movie

    async def update(self, movie_info_id: str, changes: Mapping[str, Any]) -> MovieInfo:
        """
        Overwrite the mutable fields present in ``changes``; omitted fields
        keep their stored values. The merged record is validated with the same
        rules as ``create`` before it is written.
        """
        existing = await self.get_by_id(movie_info_id)
        updates = {k: v for k, v in changes.items() if k in self.MUTABLE_FIELDS}
        merged = validate_movie_info(replace(existing, **updates))
        saved = await self.repo.update(merged)
        logger.info("Updated movie info %s fields=%s", movie_info_id, sorted(updates))
        return saved

    async def delete_by_id(self, movie_info_id: str) -> None:
        await self.repo.delete_by_id(movie_info_id)
        logger.info("Deleted movie info %s", movie_info_id)
