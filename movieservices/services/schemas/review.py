# movieservices/services/schemas/review.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# movieInfoId is a 64-bit int in the store
MOVIE_INFO_ID_MIN = -(2**63)
MOVIE_INFO_ID_MAX = 2**63 - 1


class ReviewCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    movie_info_id: Optional[int] = Field(
        default=None, alias="movieInfoId", ge=MOVIE_INFO_ID_MIN, le=MOVIE_INFO_ID_MAX
    )
    comment: Optional[str] = None
    rating: Optional[float] = Field(default=None, allow_inf_nan=False)


class ReviewUpdate(BaseModel):
    # movieInfoId is accepted on the wire but never applied on update
    model_config = ConfigDict(populate_by_name=True)

    comment: Optional[str] = None
    rating: Optional[float] = Field(default=None, allow_inf_nan=False)


class ReviewRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    review_id: str = Field(alias="reviewId")
    movie_info_id: Optional[int] = Field(default=None, alias="movieInfoId")
    comment: Optional[str] = None
    rating: Optional[float] = None
