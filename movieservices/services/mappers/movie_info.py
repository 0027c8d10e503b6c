# movieservices/services/mappers/movie_info.py
from __future__ import annotations

from typing import Any, Dict

from movieservices.domain.entities.movie_info import MovieInfo
from movieservices.services.schemas import MovieInfoCreate, MovieInfoRead, MovieInfoUpdate


def to_domain(payload: MovieInfoCreate) -> MovieInfo:
    return MovieInfo(
        name=payload.name,
        year=payload.year,
        cast=list(payload.cast or []),
        release_date=payload.release_date,
    )


def to_changes(payload: MovieInfoUpdate) -> Dict[str, Any]:
    """Only the fields the client actually sent, keyed by domain attribute name."""
    changes = payload.model_dump(exclude_unset=True)
    if "cast" in changes:
        changes["cast"] = list(changes["cast"] or [])
    return changes


def to_read(m: MovieInfo) -> MovieInfoRead:
    return MovieInfoRead(
        id=m.id,
        name=m.name,
        year=m.year,
        cast=list(m.cast),
        release_date=m.release_date,
    )
