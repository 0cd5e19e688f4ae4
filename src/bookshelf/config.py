"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    db_user: str = "postgres"
    db_password: str = ""
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "postgres"
    db_sslmode: str = "disable"
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8080
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def database_url(self) -> URL:
        """Build the PostgreSQL connection URL from the DB_* settings."""
        return URL.create(
            "postgresql+psycopg2",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
            query={"sslmode": self.db_sslmode} if self.db_sslmode else {},
        )


def env_file_present(settings: Settings) -> bool:
    """Return True when one of the configured dotenv files exists."""
    env_files = settings.model_config.get("env_file") or ()
    if isinstance(env_files, str | os.PathLike):
        env_files = (env_files,)
    return any(os.path.isfile(path) for path in env_files)
