"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for everything except
the database credentials, which have no sensible default.  Missing
credentials are reported by ``Settings.validate`` when the application
is created, so a misconfigured process fails at startup instead of on
its first query.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional, Union

from sqlalchemy.engine import URL


class ConfigurationError(RuntimeError):
    """Raised when required settings are missing or malformed."""


# Environment variable names for the Data Store connection, paired with
# the ``Settings`` attribute that holds each one.
REQUIRED_DATABASE_VARIABLES = (
    ("DB_USER", "db_user"),
    ("DB_PASSWORD", "db_password"),
    ("DB_HOST", "db_host"),
    ("DB_PORT", "db_port"),
    ("DB_NAME", "db_name"),
)


def _getenv_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Users API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Data Store connection.  ``None`` means the variable is not set.
    db_user: Optional[str] = field(default_factory=lambda: os.getenv("DB_USER"))
    db_password: Optional[str] = field(default_factory=lambda: os.getenv("DB_PASSWORD"))
    db_host: Optional[str] = field(default_factory=lambda: os.getenv("DB_HOST"))
    db_port: Optional[str] = field(default_factory=lambda: os.getenv("DB_PORT"))
    db_name: Optional[str] = field(default_factory=lambda: os.getenv("DB_NAME"))

    # A full SQLAlchemy URL.  When set it takes precedence over the
    # individual ``DB_*`` variables, which are then not required.
    database_url: Optional[str] = field(default_factory=lambda: os.getenv("DATABASE_URL") or None)

    db_pool_size: int = field(default_factory=lambda: _getenv_int("DB_POOL_SIZE", 5))
    db_max_overflow: int = field(default_factory=lambda: _getenv_int("DB_MAX_OVERFLOW", 10))

    api_host: str = field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    api_port: int = field(default_factory=lambda: _getenv_int("API_PORT", 5000))

    # Presentation client: where it listens and which API address it targets.
    web_host: str = field(default_factory=lambda: os.getenv("WEB_HOST", "0.0.0.0"))
    web_port: int = field(default_factory=lambda: _getenv_int("WEB_PORT", 3000))
    api_base_url: str = field(default_factory=lambda: os.getenv("API_BASE_URL", "http://localhost:5000"))

    def missing_variables(self) -> List[str]:
        """Return the names of required environment variables that are unset."""
        if self.database_url:
            return []
        return [env for env, attr in REQUIRED_DATABASE_VARIABLES if not getattr(self, attr)]

    def validate(self) -> None:
        """Fail fast when the Data Store cannot possibly be reached.

        Raises
        ------
        ConfigurationError
            If any of ``DB_USER``, ``DB_PASSWORD``, ``DB_HOST``,
            ``DB_PORT`` or ``DB_NAME`` is absent (and no
            ``DATABASE_URL`` is given), or if ``DB_PORT`` is not a
            number.
        """
        missing = self.missing_variables()
        if missing:
            raise ConfigurationError(
                "Missing required environment variables: " + ", ".join(missing)
            )
        if not self.database_url and not str(self.db_port).isdigit():
            raise ConfigurationError(f"DB_PORT must be an integer, got {self.db_port!r}")

    def sqlalchemy_url(self) -> Union[URL, str]:
        """Build the connection URL for the PostgreSQL engine."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+psycopg2",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=int(self.db_port),
            database=self.db_name,
        )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should therefore be set before importing this module.
settings = Settings()
