# movieservices/services/api/routers/reviews.py
from __future__ import annotations

from http import HTTPStatus
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from movieservices.services.api.deps import get_review_service
from movieservices.services.mappers import review as mapper
from movieservices.services.reviews.service import ReviewService
from movieservices.services.schemas import ReviewCreate, ReviewRead, ReviewUpdate
from movieservices.services.schemas.review import MOVIE_INFO_ID_MAX, MOVIE_INFO_ID_MIN

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post("", response_model=ReviewRead, status_code=HTTPStatus.CREATED)
async def add_review(
    payload: ReviewCreate,
    svc: ReviewService = Depends(get_review_service),
) -> ReviewRead:
    return mapper.to_read(await svc.create(mapper.to_domain(payload)))


@router.get("", response_model=List[ReviewRead])
async def list_reviews(
    movie_info_id: Optional[int] = Query(
        None, alias="movieInfoId", ge=MOVIE_INFO_ID_MIN, le=MOVIE_INFO_ID_MAX
    ),
    svc: ReviewService = Depends(get_review_service),
) -> List[ReviewRead]:
    return [mapper.to_read(r) for r in await svc.list_all(movie_info_id=movie_info_id)]


@router.get("/{review_id}", response_model=ReviewRead)
async def get_review(
    review_id: str,
    svc: ReviewService = Depends(get_review_service),
) -> ReviewRead:
    return mapper.to_read(await svc.get_by_id(review_id))


@router.put("/{review_id}", response_model=ReviewRead)
async def update_review(
    review_id: str,
    payload: ReviewUpdate,
    svc: ReviewService = Depends(get_review_service),
) -> ReviewRead:
    return mapper.to_read(await svc.update(review_id, mapper.to_changes(payload)))


@router.delete("/{review_id}", status_code=HTTPStatus.NO_CONTENT)
async def delete_review(
    review_id: str,
    svc: ReviewService = Depends(get_review_service),
) -> None:
    await svc.delete_by_id(review_id)
    return None
