# movieservices/services/api/run.py
from __future__ import annotations

import argparse
from typing import List, Optional

import uvicorn

from movieservices.common.settings import get_settings
from movieservices.services.api.app import MOVIE_INFO, REVIEW

_TARGETS = {
    MOVIE_INFO: "movieservices.services.api.app:movie_info_app",
    REVIEW: "movieservices.services.api.app:review_app",
}


def main(argv: Optional[List[str]] = None) -> None:
    cfg = get_settings()
    default_ports = {MOVIE_INFO: cfg.api.movie_info_port, REVIEW: cfg.api.review_port}

    parser = argparse.ArgumentParser(prog="movieservices-api", description="Run one of the movie services.")
    parser.add_argument("service", choices=sorted(_TARGETS))
    parser.add_argument("--host", default=cfg.api.host)
    parser.add_argument("--port", type=int, default=None, help="defaults to the service's configured port")
    parser.add_argument("--reload", action="store_true")
    args = parser.parse_args(argv)

    uvicorn.run(
        _TARGETS[args.service],
        host=args.host,
        port=args.port or default_ports[args.service],
        reload=args.reload,
        log_level=cfg.log_level.lower(),
    )


if __name__ == "__main__":
    main()
