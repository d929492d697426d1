"""Single-job reads and owner mutations (create, update, cascade delete)."""

import logging
from typing import Any

from jobportal.errors import NotFound, ValidationFailure
from jobportal.models.reference import ReferenceKind
from jobportal.repositories.interfaces import JobRepository, ReferenceRepository
from jobportal.schemas.job import JobDetail, JobRead
from jobportal.services.job_query import gather_reads

logger = logging.getLogger(__name__)

# Stored NOT NULL; a null in an update payload leaves the value as is
REQUIRED_COLUMNS = {"title", "description", "company_name", "is_referral", "vacancies", "posted_at"}


class JobService:
    def __init__(self, jobs: JobRepository, references: ReferenceRepository):
        self.jobs = jobs
        self.references = references

    async def get(self, job_id: str) -> JobDetail:
        """Fetch a job and resolve its five references; misses resolve to ''."""
        job = await self.jobs.get(job_id)
        if job is None:
            raise NotFound("Job", job_id)

        location, job_type, workplace_type, experience_level, domain = await gather_reads(
            self.references.get_by_key(ReferenceKind.LOCATION, job.location_id),
            self.references.get_by_key(ReferenceKind.JOB_TYPE, job.job_type_id),
            self.references.get_by_key(ReferenceKind.WORKPLACE_TYPE, job.workplace_type_id),
            self.references.get_by_key(ReferenceKind.EXPERIENCE_LEVEL, job.experience_level_id),
            self.references.get_by_key(ReferenceKind.DOMAIN, job.domain_id),
        )

        return JobDetail(
            **JobRead.model_validate(job).model_dump(),
            location=location.name if location else "",
            type=job_type.name if job_type else "",
            workplace_type=workplace_type.name if workplace_type else "",
            experience_level=experience_level.name if experience_level else "",
            domain=domain.name if domain else "",
        )

    async def create(self, fields: dict[str, Any]) -> JobRead:
        fields = {k: v for k, v in fields.items() if k != "id" and v is not None}
        if not (fields.get("title") or "").strip():
            raise ValidationFailure("Missing required fields", "title")
        job = await self.jobs.create(fields)
        return JobRead.model_validate(job)

    async def update(self, job_id: str, fields: dict[str, Any]) -> JobRead:
        fields = {
            k: v for k, v in fields.items() if k != "id" and not (v is None and k in REQUIRED_COLUMNS)
        }
        if "title" in fields and not (fields["title"] or "").strip():
            raise ValidationFailure("Job title cannot be empty")
        job = await self.jobs.update(job_id, fields)
        if job is None:
            raise NotFound("Job", job_id)
        return JobRead.model_validate(job)

    async def delete(self, job_id: str) -> int:
        """Remove the job together with every application that references it."""
        removed = await self.jobs.delete_cascade(job_id)
        if removed is None:
            raise NotFound("Job", job_id)
        return removed
