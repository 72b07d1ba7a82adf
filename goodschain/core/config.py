import logging
from urllib.parse import quote_plus

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class Settings(BaseSettings):
    # Full SQLAlchemy URL; when set it takes precedence over the DB_* parts
    database_url: str | None = Field(default=None, alias="DATABASE_URL")

    # Database
    db_host: str = Field(default="localhost", alias="DB_HOST")
    db_port: int = Field(default=5432, alias="DB_PORT")
    db_user: str = Field(default="postgres", alias="DB_USER")
    db_password: str = Field(default="", alias="DB_PASSWORD")
    db_name: str = Field(default="goodschain", alias="DB_NAME")
    db_ssl_mode: str = Field(default="disable", alias="DB_SSL_MODE")
    db_max_open_conns: int = Field(default=25, ge=1, alias="DB_MAX_OPEN_CONNS")
    db_max_idle_conns: int = Field(default=5, ge=0, alias="DB_MAX_IDLE_CONNS")
    db_conn_max_life: int = Field(default=300, ge=0, alias="DB_CONN_MAX_LIFE")

    # API server (timeouts in seconds)
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=3000, ge=1, le=65535, alias="API_PORT")
    api_read_timeout: int = Field(default=15, alias="API_READ_TIMEOUT")
    api_write_timeout: int = Field(default=15, alias="API_WRITE_TIMEOUT")
    api_idle_timeout: int = Field(default=60, alias="API_IDLE_TIMEOUT")
    api_shutdown_timeout: int = Field(default=30, alias="API_SHUTDOWN_TIMEOUT")
    api_version: str = Field(default="v1", alias="API_VERSION")

    log_level: str = Field(default="info", alias="LOG_LEVEL")

    @field_validator("database_url", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: str | None) -> str | None:
        """Convert an empty DATABASE_URL to None so the DB_* parts are used."""
        if v == "":
            return None
        return v

    @field_validator("db_name")
    @classmethod
    def db_name_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("DB_NAME is required")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str | None) -> str:
        level = (v or "info").strip().lower()
        if level == "warn":
            level = "warning"
        if level not in LOG_LEVELS:
            logger.warning("Invalid LOG_LEVEL %r, using 'info'", v)
            return "info"
        return level

    @model_validator(mode="after")
    def check_pool_and_credentials(self) -> "Settings":
        if self.db_max_idle_conns > self.db_max_open_conns:
            self.db_max_idle_conns = self.db_max_open_conns
        if self.database_url is None and self.db_host != "localhost" and not self.db_password:
            logger.warning("Database password is empty for non-localhost database")
        return self

    @property
    def sqlalchemy_url(self) -> str:
        """Connection URL, normalized to the psycopg3 driver for PostgreSQL."""
        if self.database_url:
            url = self.database_url
            if url.startswith("postgresql://") and "+psycopg" not in url:
                url = url.replace("postgresql://", "postgresql+psycopg://", 1)
            return url
        return (
            f"postgresql+psycopg://{quote_plus(self.db_user)}:{quote_plus(self.db_password)}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}?sslmode={self.db_ssl_mode}"
        )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
