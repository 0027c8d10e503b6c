# movieservices/services/schemas/movie_info.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# year is stored as a 32-bit int; BSON cannot hold anything past 8 bytes
YEAR_MIN = -(2**31)
YEAR_MAX = 2**31 - 1


class MovieInfoBase(BaseModel):
    # Constraints (non-blank name, positive year, non-empty cast) are checked by
    # domain.policies.movie_info_rules so all violations are reported together.
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    year: Optional[int] = Field(default=None, ge=YEAR_MIN, le=YEAR_MAX)
    cast: Optional[List[Optional[str]]] = None
    release_date: Optional[date] = Field(default=None, alias="releaseDate")


class MovieInfoCreate(MovieInfoBase):
    pass


class MovieInfoUpdate(MovieInfoBase):
    pass


class MovieInfoRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    year: int
    cast: List[str]
    release_date: Optional[date] = Field(default=None, alias="releaseDate")
