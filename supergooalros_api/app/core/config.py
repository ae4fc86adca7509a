"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API runs out of the box against two local SQLite files: one for the
entity store and one for the search index.  In a container these are
overridden through the environment (see ``docker/app.yml``).
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Supergooalros API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix used for the alert headers (``X-<app_name>-alert`` etc.)
    # returned by write operations.  Front‑ends read these headers to
    # display translated notifications.
    app_name: str = os.getenv("APP_NAME", "supergooalrosApp")

    # Path to the SQLite database holding the records (system of
    # record).  Relative paths are resolved against the project root by
    # the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "supergooalros.db")

    # Path to the SQLite database holding the FTS5 search index.  Kept
    # separate from ``database_url`` so the index can be dropped and
    # rebuilt with ``reindex.py`` without touching the records.
    search_index_url: str = os.getenv("SEARCH_INDEX_URL", "supergooalros_index.db")

    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))
    max_page_size: int = int(os.getenv("MAX_PAGE_SIZE", "1000"))

    # Seconds to wait before applying migrations at startup.  Useful when
    # the database volume is provided by another container that may
    # still be booting.
    startup_sleep: int = int(os.getenv("STARTUP_SLEEP", "0"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
