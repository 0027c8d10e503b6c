# movieservices/services/api/errors.py
from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict, List

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from movieservices.common.logging import get_logger
from movieservices.domain.errors import MovieValidationError, NotFoundError, join_messages

logger = get_logger(__name__)

_LOCATION_ROOTS = {"body", "query", "path"}


def _describe(err: Dict[str, Any]) -> str:
    loc = [str(p) for p in err.get("loc", ())]
    if loc and loc[0] in _LOCATION_ROOTS:
        loc = loc[1:]
    field = ".".join(loc)
    return f"{field}: {err.get('msg', 'invalid value')}" if field else str(err.get("msg", "invalid value"))


def request_validation_messages(exc: RequestValidationError) -> List[str]:
    return [_describe(e) for e in exc.errors()]


async def movie_validation_handler(request: Request, exc: MovieValidationError) -> PlainTextResponse:
    body = join_messages(exc.messages)
    logger.error("Validation failed for %s %s: %s", request.method, request.url.path, body)
    return PlainTextResponse(body, status_code=HTTPStatus.BAD_REQUEST)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    body = join_messages(request_validation_messages(exc))
    logger.error("Malformed request %s %s: %s", request.method, request.url.path, body)
    return PlainTextResponse(body, status_code=HTTPStatus.BAD_REQUEST)


async def not_found_handler(request: Request, exc: NotFoundError) -> Response:
    logger.info("%s %s -> 404 (%s)", request.method, request.url.path, exc)
    return Response(status_code=HTTPStatus.NOT_FOUND)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MovieValidationError, movie_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
