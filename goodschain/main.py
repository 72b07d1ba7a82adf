import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from goodschain.api.exception_handlers import register_exception_handlers
from goodschain.api.middleware import ErrorHandlingMiddleware
from goodschain.api.router import api_router
from goodschain.core.config import settings
from goodschain.core.logging_config import configure_logging
from goodschain.db import engine

configure_logging(settings.log_level_number)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Non-sensitive configuration only
    logger.info(
        "Configuration loaded: api_version=%s db_host=%s db_port=%d db_name=%s "
        "db_ssl_mode=%s db_max_open_conns=%d db_max_idle_conns=%d "
        "api_read_timeout=%d api_write_timeout=%d api_idle_timeout=%d",
        settings.api_version,
        settings.db_host,
        settings.db_port,
        settings.db_name,
        settings.db_ssl_mode,
        settings.db_max_open_conns,
        settings.db_max_idle_conns,
        settings.api_read_timeout,
        settings.api_write_timeout,
        settings.api_idle_timeout,
    )
    yield
    logger.info("Closing database connection pool")
    engine.dispose()
    logger.info("Database connection pool closed")


app = FastAPI(title="GoodsChain API", version=settings.api_version, lifespan=lifespan)

app.add_middleware(ErrorHandlingMiddleware, logger=logging.getLogger("goodschain.access"))
register_exception_handlers(app)
app.include_router(api_router)


@app.get("/health")
def health():
    return {"status": "ok"}
