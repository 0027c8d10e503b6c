# movieservices/database/repos/_mapping.py
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional

from bson import ObjectId

from movieservices.domain.entities.movie_info import MovieInfo
from movieservices.domain.entities.review import Review


def as_key(record_id: str) -> Any:
    """
    Translate an API id into the stored ``_id``. Inserts always generate
    ObjectIds, but any other string is matched as-is so that a malformed id
    simply misses instead of raising.
    """
    if isinstance(record_id, str) and ObjectId.is_valid(record_id):
        return ObjectId(record_id)
    return record_id


def _date_to_bson(d: Optional[date]) -> Optional[datetime]:
    # BSON has no date-only type; store midnight
    if d is None:
        return None
    return datetime(d.year, d.month, d.day)


def _date_from_bson(v: Any) -> Optional[date]:
    if v is None:
        return None
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    return date.fromisoformat(str(v)[:10])


# ---- MovieInfo ----

def movie_info_to_doc(m: MovieInfo) -> Dict[str, Any]:
    return {
        "name": m.name,
        "year": m.year,
        "cast": list(m.cast or []),
        "releaseDate": _date_to_bson(m.release_date),
    }


def to_domain_movie_info(doc: Dict[str, Any]) -> MovieInfo:
    return MovieInfo(
        id=str(doc["_id"]),
        name=doc.get("name"),
        year=doc.get("year"),
        cast=list(doc.get("cast") or []),
        release_date=_date_from_bson(doc.get("releaseDate")),
    )


# ---- Review ----

def review_to_doc(r: Review) -> Dict[str, Any]:
    return {
        "movieInfoId": r.movie_info_id,
        "comment": r.comment,
        "rating": r.rating,
    }


def to_domain_review(doc: Dict[str, Any]) -> Review:
    rating = doc.get("rating")
    return Review(
        review_id=str(doc["_id"]),
        movie_info_id=doc.get("movieInfoId"),
        comment=doc.get("comment"),
        rating=float(rating) if rating is not None else None,
    )
