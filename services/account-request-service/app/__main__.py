"""Development entry point: ``python -m app``."""

from __future__ import annotations

import logging

import uvicorn

from .config import get_settings

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info("listening on %s:%s", settings.http_host, settings.http_port)
    uvicorn.run(
        "app.main:app",
        host=settings.http_host,
        port=settings.http_port,
        log_level=settings.log_level.lower(),
    )
