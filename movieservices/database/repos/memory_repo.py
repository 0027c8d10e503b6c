# movieservices/database/repos/memory_repo.py
from __future__ import annotations

import copy
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from bson import ObjectId

from movieservices.domain.entities.movie_info import MovieInfo
from movieservices.domain.entities.review import Review
from movieservices.domain.errors import MovieInfoNotFoundError, NotFoundError, ReviewNotFoundError

T = TypeVar("T")


class _InMemoryRepo(Generic[T]):
    """
    Dict-backed store keyed by ObjectId-shaped strings. Records are copied on
    the way in and out so callers never share state with the store.
    Iteration order is insertion order.
    """

    id_attr: str = "id"
    not_found: Callable[[str], NotFoundError] = NotFoundError

    def __init__(self) -> None:
        self._rows: Dict[str, T] = {}

    def _id_of(self, obj: T) -> Optional[str]:
        return getattr(obj, self.id_attr)

    async def insert(self, obj: T) -> T:
        stored = copy.deepcopy(obj)
        setattr(stored, self.id_attr, str(ObjectId()))
        self._rows[self._id_of(stored)] = stored
        return copy.deepcopy(stored)

    async def find_all(self) -> List[T]:
        return [copy.deepcopy(o) for o in self._rows.values()]

    async def find_by_id(self, record_id: str) -> Optional[T]:
        obj = self._rows.get(record_id)
        return copy.deepcopy(obj) if obj is not None else None

    async def _find_where(self, attr: str, value: Any) -> List[T]:
        return [copy.deepcopy(o) for o in self._rows.values() if getattr(o, attr) == value]

    async def update(self, obj: T) -> T:
        record_id = self._id_of(obj)
        if record_id is None or record_id not in self._rows:
            raise self.not_found(record_id or "<unsaved>")
        self._rows[record_id] = copy.deepcopy(obj)
        return obj

    async def delete_by_id(self, record_id: str) -> None:
        self._rows.pop(record_id, None)

    def clear(self) -> None:
        self._rows.clear()


class InMemoryMovieInfoRepo(_InMemoryRepo[MovieInfo]):
    id_attr = "id"
    not_found = MovieInfoNotFoundError

    async def find_by_year(self, year: int) -> List[MovieInfo]:
        return await self._find_where("year", year)


class InMemoryReviewRepo(_InMemoryRepo[Review]):
    id_attr = "review_id"
    not_found = ReviewNotFoundError

    async def find_by_movie_info_id(self, movie_info_id: int) -> List[Review]:
        return await self._find_where("movie_info_id", movie_info_id)
