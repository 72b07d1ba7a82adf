"""Process entry point: serve the API with uvicorn until SIGINT/SIGTERM."""

import logging

import uvicorn

from goodschain.core.config import settings
from goodschain.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def run() -> None:
    """
    Run the HTTP server.

    uvicorn traps SIGINT/SIGTERM, stops accepting connections and drains
    in-flight requests for up to API_SHUTDOWN_TIMEOUT seconds. The app
    lifespan then closes the database pool.
    """
    configure_logging(settings.log_level_number)
    config = uvicorn.Config(
        "goodschain.main:app",
        host=settings.api_host,
        port=settings.api_port,
        timeout_keep_alive=settings.api_idle_timeout,
        timeout_graceful_shutdown=settings.api_shutdown_timeout,
        log_level=settings.log_level,
        # Request logging is done by ErrorHandlingMiddleware
        access_log=False,
        log_config=None,
    )
    server = uvicorn.Server(config)
    logger.info("Server starting on %s:%d", settings.api_host, settings.api_port)
    server.run()
    logger.info("Server exited gracefully")
