# movieservices/services/api/routers/health.py
from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter()
hello_router = APIRouter()


@router.get("/healthz")
def healthz(request: Request):
    s = request.app.state.settings
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "service": request.app.state.service_name,
    }


@hello_router.get("/helloworld", response_class=PlainTextResponse)
def hello_world() -> str:
    return "Hello World"
