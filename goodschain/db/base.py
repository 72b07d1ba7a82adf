from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from goodschain.core.config import Settings, settings


def engine_options(config: Settings) -> dict:
    """Connection pool limits for the shared engine. SQLite (tests) keeps the defaults."""
    if config.sqlalchemy_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": config.db_max_idle_conns,
        "max_overflow": config.db_max_open_conns - config.db_max_idle_conns,
        "pool_recycle": config.db_conn_max_life,
        "pool_pre_ping": True,
        "connect_args": {"connect_timeout": 10},
    }


engine = create_engine(settings.sqlalchemy_url, **engine_options(settings))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()
