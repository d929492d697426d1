"""Application lifecycle: apply, recruiter view, final decision."""

import logging
from datetime import datetime, timezone
from typing import Callable

from jobportal.errors import NotFound, ValidationFailure
from jobportal.models.application import ALLOWED_TRANSITIONS, ApplicationStatus, STATUS_NAMES
from jobportal.repositories.interfaces import ApplicationRepository, JobRepository
from jobportal.schemas.application import ApplicationRead

logger = logging.getLogger(__name__)


class ApplicationService:
    def __init__(
        self,
        applications: ApplicationRepository,
        jobs: JobRepository,
        now: Callable[[], datetime] | None = None,
    ):
        self.applications = applications
        self.jobs = jobs
        self._now = now or (lambda: datetime.now(timezone.utc))

    async def apply(self, user_id: str, job_id: str) -> ApplicationRead:
        if not user_id or not job_id:
            raise ValidationFailure("Missing required fields", "userId and jobId are required")
        if await self.jobs.get(job_id) is None:
            raise NotFound("Job", job_id)
        application = await self.applications.create(user_id, job_id, applied_at=self._now())
        return ApplicationRead.model_validate(application)

    async def list_for_user(self, user_id: str) -> list[ApplicationRead]:
        applications = await self.applications.list_for_user(user_id)
        return [ApplicationRead.model_validate(a) for a in applications]

    async def list_for_job(self, job_id: str) -> list[ApplicationRead]:
        applications = await self.applications.list_for_job(job_id)
        return [ApplicationRead.model_validate(a) for a in applications]

    async def mark_viewed(self, application_id: str) -> ApplicationRead:
        """Recruiter opened the applicant's profile.

        Re-viewing only refreshes viewedAt. An application that already
        reached a final decision keeps its status and its updatedAt, so its
        notification does not resurface.
        """
        application = await self.applications.get(application_id)
        if application is None:
            raise NotFound("Application", application_id)

        now = self._now()
        fields = {"viewed_at": now}
        if application.status_id == ApplicationStatus.APPLIED:
            fields["status_id"] = int(ApplicationStatus.PROFILE_VIEWED)
            fields["updated_at"] = now

        application = await self.applications.update(application_id, fields)
        if application is None:
            raise NotFound("Application", application_id)
        logger.info(f"Application {application_id} viewed")
        return ApplicationRead.model_validate(application)

    async def update_status(self, application_id: str, status_id: int) -> ApplicationRead:
        application = await self.applications.get(application_id)
        if application is None:
            raise NotFound("Application", application_id)

        try:
            current = ApplicationStatus(application.status_id)
            target = ApplicationStatus(status_id)
        except ValueError:
            raise ValidationFailure("Invalid status", str(status_id))

        if target == current:
            return ApplicationRead.model_validate(application)
        if target not in ALLOWED_TRANSITIONS[current]:
            raise ValidationFailure(
                "Invalid status transition",
                f"{STATUS_NAMES[current]} -> {STATUS_NAMES[target]}",
            )

        now = self._now()
        fields = {"status_id": int(target), "updated_at": now}
        if target == ApplicationStatus.PROFILE_VIEWED:
            fields["viewed_at"] = now

        application = await self.applications.update(application_id, fields)
        if application is None:
            raise NotFound("Application", application_id)
        logger.info(f"Application {application_id}: {STATUS_NAMES[current]} -> {STATUS_NAMES[target]}")
        return ApplicationRead.model_validate(application)
