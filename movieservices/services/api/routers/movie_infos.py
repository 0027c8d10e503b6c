# movieservices/services/api/routers/movie_infos.py
from __future__ import annotations

from http import HTTPStatus
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from movieservices.services.api.deps import get_movie_info_service
from movieservices.services.mappers import movie_info as mapper
from movieservices.services.movie_info.service import MovieInfoService
from movieservices.services.schemas import MovieInfoCreate, MovieInfoRead, MovieInfoUpdate
from movieservices.services.schemas.movie_info import YEAR_MAX, YEAR_MIN

router = APIRouter(prefix="/movieinfos", tags=["movieinfos"])


@router.post("", response_model=MovieInfoRead, status_code=HTTPStatus.CREATED)
async def add_movie_info(
    payload: MovieInfoCreate,
    svc: MovieInfoService = Depends(get_movie_info_service),
) -> MovieInfoRead:
    saved = await svc.create(mapper.to_domain(payload))
    return mapper.to_read(saved)


@router.get("", response_model=List[MovieInfoRead])
async def list_movie_infos(
    year: Optional[int] = Query(None, ge=YEAR_MIN, le=YEAR_MAX, description="Only movies released in this year"),
    svc: MovieInfoService = Depends(get_movie_info_service),
) -> List[MovieInfoRead]:
    rows = await svc.list_all(year=year)
    return [mapper.to_read(m) for m in rows]


@router.get("/{movie_info_id}", response_model=MovieInfoRead)
async def get_movie_info(
    movie_info_id: str = Path(...),
    svc: MovieInfoService = Depends(get_movie_info_service),
) -> MovieInfoRead:
    # unknown id -> MovieInfoNotFoundError -> empty 404
    return mapper.to_read(await svc.get_by_id(movie_info_id))


@router.put("/{movie_info_id}", response_model=MovieInfoRead)
async def update_movie_info(
    movie_info_id: str,
    payload: MovieInfoUpdate,
    svc: MovieInfoService = Depends(get_movie_info_service),
) -> MovieInfoRead:
    saved = await svc.update(movie_info_id, mapper.to_changes(payload))
    return mapper.to_read(saved)


@router.delete("/{movie_info_id}", status_code=HTTPStatus.NO_CONTENT)
async def delete_movie_info(
    movie_info_id: str,
    svc: MovieInfoService = Depends(get_movie_info_service),
) -> None:
    await svc.delete_by_id(movie_info_id)
    # 204 whether or not the record existed
    return None
