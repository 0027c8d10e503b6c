# movieservices/domain/policies/movie_info_rules.py
from __future__ import annotations

from typing import List

from movieservices.domain.entities.movie_info import MovieInfo
from movieservices.domain.errors import MovieValidationError

NAME_BLANK = "Movie name must not be empty"
YEAR_MISSING = "Movie year can't be empty"
YEAR_NOT_POSITIVE = "Movie year must be positive"
CAST_EMPTY = "Movie cast can't be empty"
CAST_NAME_BLANK = "Cast name can't be blank"


def _is_blank(s: str | None) -> bool:
    return s is None or not str(s).strip()


def collect_violations(movie: MovieInfo) -> List[str]:
    """
    Return every constraint message the movie breaks, in field order.
    Nothing short-circuits: a blank name and an empty cast yield two messages,
    and each blank cast entry yields its own message.
    """
    problems: List[str] = []

    if _is_blank(movie.name):
        problems.append(NAME_BLANK)

    if movie.year is None:
        problems.append(YEAR_MISSING)
    elif movie.year <= 0:
        problems.append(YEAR_NOT_POSITIVE)

    if not movie.cast:
        problems.append(CAST_EMPTY)
    else:
        problems.extend(CAST_NAME_BLANK for member in movie.cast if _is_blank(member))

    return problems


def validate_movie_info(movie: MovieInfo) -> MovieInfo:
    problems = collect_violations(movie)
    if problems:
        raise MovieValidationError(problems)
    return movie
