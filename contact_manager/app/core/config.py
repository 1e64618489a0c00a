"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
application starts without any configuration at all; in a deployment
you should at least override ``SECRET_KEY``.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Contact Manager")
    version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Key used to sign the session cookie that carries flash messages.
    secret_key: str = os.getenv("SECRET_KEY", "secret")
    session_cookie: str = os.getenv("SESSION_COOKIE", "session")
    # Lifetime of the session cookie in seconds.  Flash messages only
    # need to survive a single redirect.
    session_max_age: int = int(os.getenv("SESSION_MAX_AGE", "6"))

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by ``core.db``; ``:memory:`` keeps the
    # data in the process only.
    database_url: str = os.getenv("DATABASE_URL", "contacts.db")

    # Region assumed for phone numbers written without a country code,
    # e.g. ``08123456789``.
    phone_region: str = os.getenv("PHONE_REGION", "ID")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
