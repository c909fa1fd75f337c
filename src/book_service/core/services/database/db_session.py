"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from src.book_service.runtime.config.config_data import ConfigData
from src.book_service.runtime.context import get_config


class DbSessionService:
    """Owns the SQLAlchemy engine and hands out sessions.

    The engine is created once (at application startup) and released with
    ``dispose()`` at shutdown. Tests may pass a ready-made ``engine``.
    """

    def __init__(self, engine: Engine | None = None, config: ConfigData | None = None):
        if engine is not None:
            self._engine = engine
            return

        main_config = config or get_config()
        db_config = main_config.database

        logger.info(
            "Configuring database engine for environment: {}",
            main_config.app.environment,
        )
        engine_kwargs: dict[str, Any] = {
            "echo": db_config.echo,
            "pool_pre_ping": True,
            "connect_args": self._get_connect_args(main_config),
        }

        # SQLite uses a single-file or in-memory pool that rejects sizing options
        if not db_config.is_sqlite:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                    "pool_reset_on_return": "commit",
                }
            )

        self._engine = create_engine(db_config.connection_string, **engine_kwargs)

        if main_config.app.environment == "production":
            logger.bind(
                pool_size=db_config.pool_size,
                max_overflow=db_config.max_overflow,
                pool_timeout=db_config.pool_timeout,
                pool_recycle=db_config.pool_recycle,
            ).info("Database engine initialized")

    @property
    def engine(self) -> Engine:
        return self._engine

    def _get_connect_args(self, config: ConfigData) -> dict:
        """Get database-specific connection arguments."""
        connect_args: dict[str, Any] = {}

        if config.database.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,  # FastAPI runs sync routes in a threadpool
                    "timeout": 20,  # Lock timeout
                }
            )
            if config.app.environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )
        elif "postgresql" in config.database.url:
            connect_args.update(
                {
                    "application_name": f"{config.app.environment}_book_service",
                    "connect_timeout": 30,
                }
            )

        return connect_args

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # Entities are read after commit
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """One transaction: commit on success, rollback and re-raise on failure."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.bind(
                error_type=type(e).__name__,
                error_message=str(e),
            ).debug("Database transaction rolled back")
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.bind(
                error_type=type(e).__name__,
                error_message=str(e),
            ).error("Database health check failed")
            return False

    def dispose(self) -> None:
        """Close every pooled connection."""
        logger.info("Disposing database engine")
        self._engine.dispose()
