# movieservices/database/repos/movie_info_repo.py
from __future__ import annotations

from typing import List, Optional

from pymongo.asynchronous.collection import AsyncCollection

from movieservices.database.repos._mapping import (
    as_key,
    movie_info_to_doc,
    to_domain_movie_info,
)
from movieservices.domain.entities.movie_info import MovieInfo
from movieservices.domain.errors import MovieInfoNotFoundError


class MongoMovieInfoRepo:
    def __init__(self, collection: AsyncCollection) -> None:
        self.col = collection

    async def insert(self, movie: MovieInfo) -> MovieInfo:
        # any client-side id is ignored; insert_one sets doc["_id"]
        doc = movie_info_to_doc(movie)
        await self.col.insert_one(doc)
        return to_domain_movie_info(doc)

    async def find_all(self) -> List[MovieInfo]:
        return [to_domain_movie_info(d) async for d in self.col.find({})]

    async def find_by_id(self, movie_info_id: str) -> Optional[MovieInfo]:
        doc = await self.col.find_one({"_id": as_key(movie_info_id)})
        return to_domain_movie_info(doc) if doc else None

    async def find_by_year(self, year: int) -> List[MovieInfo]:
        return [to_domain_movie_info(d) async for d in self.col.find({"year": year})]

    async def update(self, movie: MovieInfo) -> MovieInfo:
        if movie.id is None:
            raise MovieInfoNotFoundError("<unsaved>")
        res = await self.col.replace_one({"_id": as_key(movie.id)}, movie_info_to_doc(movie))
        if res.matched_count == 0:
            raise MovieInfoNotFoundError(movie.id)
        return movie

    async def delete_by_id(self, movie_info_id: str) -> None:
        await self.col.delete_one({"_id": as_key(movie_info_id)})
