"""
CLI entrypoint for the HTTP server. Run from project root:

  python -m app.serve

Listens on HOST:PORT from the environment (defaults 0.0.0.0:5000).
"""

import logging
import sys

import uvicorn

from app.core.config import get_settings

logger = logging.getLogger(__name__)


def main() -> int:
    """Configure logging and serve app.main:app with uvicorn."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    logger.info("Server running at http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
