"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  In a
production deployment you should override these via environment
variables or a dedicated configuration service.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "WiseWords API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
    algorithm: str = os.getenv("ALGORITHM", "HS256")

    # Path to the SQLite file backing the counters and record maps.  A
    # relative path is resolved against the package root by ``core.db``.
    database_url: str = os.getenv("DATABASE_URL", "wisewords.db")

    # Upper bound on the serialized size of a single stored record, in
    # bytes.  Records above it are rejected as validation failures.
    max_record_size: int = int(os.getenv("MAX_RECORD_SIZE", "1024"))

    # Number of quotes returned by the recent quotes query.
    recent_quotes_limit: int = int(os.getenv("RECENT_QUOTES_LIMIT", "5"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
