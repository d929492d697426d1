"""SQLAlchemy saved-job repository."""

from datetime import datetime

from sqlalchemy import select, delete

from jobportal.models.saved_job import SavedJob
from jobportal.repositories.base import SqlRepository
from jobportal.repositories.interfaces import SavedJobRepository


class SqlSavedJobRepository(SqlRepository, SavedJobRepository):
    async def list_for_user(self, user_id: str) -> list[SavedJob]:
        async with self._session("list saved jobs") as session:
            result = await session.execute(
                select(SavedJob)
                .where(SavedJob.user_id == user_id)
                .order_by(SavedJob.saved_at.desc())
            )
            return list(result.scalars().all())

    async def save(self, user_id: str, job_id: str, saved_at: datetime) -> SavedJob:
        # Re-saving overwrites savedAt; no history is kept
        async with self._session("save job") as session:
            async with session.begin():
                saved = await session.merge(SavedJob(user_id=user_id, job_id=job_id, saved_at=saved_at))
            return saved

    async def delete(self, user_id: str, job_id: str) -> bool:
        async with self._session("unsave job") as session:
            async with session.begin():
                result = await session.execute(
                    delete(SavedJob).where(SavedJob.user_id == user_id, SavedJob.job_id == job_id)
                )
            return bool(result.rowcount)
