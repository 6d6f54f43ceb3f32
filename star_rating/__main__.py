"""Run the star rating service with uvicorn: ``python -m star_rating``."""

import logging

import uvicorn

from star_rating.config import get_settings
from star_rating.log import configure_logging
from star_rating.server import create_app


logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Serving star strips from %s on http://%s:%d (cache ttl %ss)",
        settings.content_root,
        settings.host,
        settings.port,
        settings.cache_ttl_seconds,
    )
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
