"""Bookmarked jobs per user."""

import logging
from datetime import datetime, timezone
from typing import Callable

from jobportal.errors import ValidationFailure
from jobportal.repositories.interfaces import JobRepository, SavedJobRepository
from jobportal.schemas.job import JobRead
from jobportal.schemas.saved_job import SavedJobRead

logger = logging.getLogger(__name__)


class SavedJobService:
    def __init__(
        self,
        saved_jobs: SavedJobRepository,
        jobs: JobRepository,
        now: Callable[[], datetime] | None = None,
    ):
        self.saved_jobs = saved_jobs
        self.jobs = jobs
        self._now = now or (lambda: datetime.now(timezone.utc))

    async def list_for_user(self, user_id: str) -> list[SavedJobRead]:
        return [SavedJobRead.model_validate(s) for s in await self.saved_jobs.list_for_user(user_id)]

    async def list_with_details(self, user_id: str) -> list[JobRead]:
        """Full jobs in save order (newest save first); deleted jobs drop out."""
        saved = await self.saved_jobs.list_for_user(user_id)
        jobs = {job.id: job for job in await self.jobs.get_many([s.job_id for s in saved])}
        return [JobRead.model_validate(jobs[s.job_id]) for s in saved if s.job_id in jobs]

    async def save(self, user_id: str, job_id: str | None) -> SavedJobRead:
        if not job_id:
            raise ValidationFailure("Job ID is required")
        saved = await self.saved_jobs.save(user_id, job_id, saved_at=self._now())
        logger.debug(f"User {user_id} saved job {job_id}")
        return SavedJobRead.model_validate(saved)

    async def unsave(self, user_id: str, job_id: str | None) -> bool:
        """Removing a bookmark that does not exist still succeeds."""
        if not job_id:
            raise ValidationFailure("Job ID is required")
        return await self.saved_jobs.delete(user_id, job_id)
