"""Shared plumbing for the SQLAlchemy repositories."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from jobportal.errors import StoreFailure

logger = logging.getLogger(__name__)


class SqlRepository:
    """Opens one short-lived session per call so concurrent reads never share one."""

    def __init__(self, sessions: async_sessionmaker[AsyncSession]):
        self._sessions = sessions

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        async with self._sessions() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"Store call failed ({operation}): {e}")
                raise StoreFailure(f"Failed to {operation}", str(e)) from e
