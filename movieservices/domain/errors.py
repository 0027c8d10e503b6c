# movieservices/domain/errors.py
from __future__ import annotations

from typing import Iterable, List


def join_messages(messages: Iterable[str]) -> str:
    """Sorted, comma-space joined form used for 400 response bodies."""
    return ", ".join(sorted(messages))


class MovieValidationError(ValueError):
    """A payload broke one or more field constraints."""

    def __init__(self, messages: Iterable[str]) -> None:
        self.messages: List[str] = list(messages)
        super().__init__(join_messages(self.messages))


class NotFoundError(LookupError):
    entity = "Record"

    def __init__(self, record_id: str) -> None:
        self.record_id = record_id
        super().__init__(f"{self.entity} not found: {record_id}")


class MovieInfoNotFoundError(NotFoundError):
    entity = "MovieInfo"


class ReviewNotFoundError(NotFoundError):
    entity = "Review"
