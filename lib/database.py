# =============================================================================
# lib/database.py - SQLAlchemy Engine Wrapper
# =============================================================================
# This module owns the process-wide database engine. It implements the
# singleton pattern so every request shares one connection pool:
# - connections are checked out per statement and returned right after
# - pool checkout, connect and statement timeouts bound every call
#
# Usage:
#   from lib.database import Database
#   with Database.get_engine().begin() as conn:
#       conn.execute(text("SELECT 1"))
# =============================================================================

from __future__ import annotations

import logging
import threading
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError

from app.config import Settings, settings

# Set up logging for this module
logger = logging.getLogger(__name__)


class DatabaseError(Exception):
    """
    Error while creating or probing the database engine.

    Carries a code and a suggestion so startup failures say how to fix them.
    """

    def __init__(
        self,
        message: str,
        code: str = "DATABASE_ERROR",
        suggestion: str | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


def _engine_options(url: URL, config: Settings) -> dict[str, Any]:
    """
    Pool and driver options for a URL.

    PostgreSQL gets a server-side statement_timeout; SQLite ignores pool
    sizing and only needs the lock timeout.
    """
    if url.get_backend_name() == "sqlite":
        return {
            "connect_args": {
                "timeout": config.DB_CONNECT_TIMEOUT,
                "check_same_thread": False,
            },
        }

    connect_args: dict[str, Any] = {"connect_timeout": config.DB_CONNECT_TIMEOUT}
    if url.get_backend_name() == "postgresql" and config.DB_STATEMENT_TIMEOUT_MS:
        connect_args["options"] = f"-c statement_timeout={config.DB_STATEMENT_TIMEOUT_MS}"

    return {
        "pool_size": config.DB_POOL_SIZE,
        "max_overflow": config.DB_MAX_OVERFLOW,
        "pool_timeout": config.DB_POOL_TIMEOUT,
        "pool_pre_ping": True,
        "connect_args": connect_args,
    }


def build_engine(config: Settings) -> Engine:
    """
    Create a pooled engine from settings.

    Raises:
        DatabaseError: If the URL or driver is unusable
    """
    url = config.database_url
    try:
        engine = create_engine(url, **_engine_options(url, config))
    except (SQLAlchemyError, ImportError, ValueError) as e:
        raise DatabaseError(
            message=f"Failed to create database engine: {e}",
            code="ENGINE_INIT_FAILED",
            suggestion="Check DATABASE_URL or the DB_* settings in your .env file",
        ) from e

    logger.info(f"Database engine initialized for {url.render_as_string(hide_password=True)}")
    return engine


class Database:
    """
    Holder for the shared engine.

    All methods are class methods for easy access without instantiation.
    """

    _engine: Engine | None = None
    _lock = threading.Lock()

    @classmethod
    def get_engine(cls) -> Engine:
        """
        Get or create the singleton engine.

        Handlers run in a thread pool, so the first requests can race here;
        only one of them builds the engine.
        """
        if cls._engine is None:
            with cls._lock:
                if cls._engine is None:
                    cls._engine = build_engine(settings)
        return cls._engine

    @classmethod
    def dispose(cls) -> None:
        """Close every pooled connection and forget the engine."""
        with cls._lock:
            if cls._engine is not None:
                cls._engine.dispose()
                cls._engine = None
                logger.info("Database engine disposed")

    @staticmethod
    def ping(engine: Engine) -> bool:
        """Run SELECT 1; False if the database cannot be reached."""
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Database ping failed: {e}")
            return False
