"""Question Storage Sessions — one AsyncSession per request, storage failures as DatabaseError.

Invariants:
    - One AsyncSession per request; closed when the request ends
    - A failing statement rolls the whole request back: a question and its answers are
      never half-deleted, an edit is never half-applied
    - Every SQLAlchemyError leaves as DatabaseError (503) carrying the question/user
      the request was about; QuoraError and other exceptions pass through untouched
    - The service commits; this module only rolls back

Design Decisions:
    - One mapping for all SQLAlchemyError subclasses: content uniqueness is checked by
      the service, so there is no constraint violation worth reporting separately
    - expire_on_commit=False: records are read back after commit without lazy IO
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

from quora.core.errors import DatabaseError, ErrorContext

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Owns the engine and hands out request sessions."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self._bind(create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
        ))

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> "DatabaseSessionManager":
        """Wrap an engine built elsewhere (tests, migrations)."""
        manager = cls.__new__(cls)
        manager._bind(engine)
        return manager

    def _bind(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self._session_factory = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(
        self, context: ErrorContext | None = None,
    ) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            error = DatabaseError("question storage unavailable", "execute", context)
            logger.error(
                f"Rolled back request session: {e}",
                extra={
                    "error_code": error.code,
                    "question_id": error.context.question_id,
                    "user_id": error.context.user_id,
                },
            )
            raise error from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """SELECT 1 through a regular session (readiness)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except (DatabaseError, OSError) as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


def get_db_manager() -> DatabaseSessionManager | None:
    """Current manager — read at call time, not import time."""
    return db_manager


def request_context(request: Request) -> ErrorContext:
    """Question/user ids named in the request path, for error reporting."""
    params = request.path_params
    return ErrorContext(
        question_id=params.get("question_id"),
        user_id=params.get("user_id"),
    )


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session(request_context(request)) as session:
        yield session
