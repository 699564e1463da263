from __future__ import annotations
import logging
import uvicorn
from loc_aggregator.infrastructure.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Start the uvicorn ASGI server."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    logger.info("Starting server on port %d", settings.port)
    uvicorn.run(
        "loc_aggregator.interface.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
