"""Run the API with uvicorn: `python -m transport_api`."""
from __future__ import annotations

import logging

import uvicorn

from transport_api.core.config import get_settings
from transport_api.core.logging import configure_logging

logger = logging.getLogger("transport_api")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    shown_host = "localhost" if settings.host in ("0.0.0.0", "") else settings.host
    logger.info("Server starting on port %d", settings.port)
    logger.info("API available at http://%s:%d", shown_host, settings.port)
    logger.info("Health check: http://%s:%d/api/health", shown_host, settings.port)
    uvicorn.run(
        "transport_api.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
