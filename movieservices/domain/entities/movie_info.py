# movieservices/domain/entities/movie_info.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass
class MovieInfo:
    """
    Catalog entry for a movie. ``id`` is assigned by the store on insert;
    a MovieInfo with ``id is None`` has never been persisted.

    Field constraints (non-blank name, positive year, non-empty cast) are not
    enforced here: they are collected by
    ``movieservices.domain.policies.movie_info_rules`` so that every violation
    can be reported at once.
    """

    name: Optional[str] = None
    year: Optional[int] = None
    cast: List[str] = field(default_factory=list)
    release_date: Optional[date] = None

    # Persistence (optional)
    id: Optional[str] = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
