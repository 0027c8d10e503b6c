# movieservices/common/logging.py
from __future__ import annotations

import logging


def get_logger(name: str = "uvicorn.error", level: int | str | None = None) -> logging.Logger:
    """
    Return a logger that plays nice with Uvicorn if running under it.
    If no handlers are set, we add a basicConfig once.

    ``level`` accepts a logging constant or a level name ("DEBUG", "info", ...).
    When omitted the logger keeps whatever level it already has.
    """
    logger = logging.getLogger(name)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(
            level=level if level is not None else logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    if level is not None:
        logger.setLevel(level)
    return logger
