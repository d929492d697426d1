"""SQLAlchemy job repository."""

import logging
from typing import Any

from sqlalchemy import select, delete

from jobportal.models.application import Application
from jobportal.models.job import Job
from jobportal.repositories.base import SqlRepository
from jobportal.repositories.interfaces import JobRepository, JobStoreQuery
from jobportal.services.timestamps import normalize_iso

logger = logging.getLogger(__name__)

# Columns callers may write; anything else in a payload is dropped
WRITABLE_FIELDS = {
    "title",
    "description",
    "company_name",
    "salary",
    "posted_at",
    "location_id",
    "domain_id",
    "job_type_id",
    "workplace_type_id",
    "experience_level_id",
    "recruiter_id",
    "employee_id",
    "is_referral",
    "job_link",
    "vacancies",
    "benefits",
}


def _writable(fields: dict[str, Any]) -> dict[str, Any]:
    data = {k: v for k, v in fields.items() if k in WRITABLE_FIELDS}
    if "posted_at" in data:
        data["posted_at"] = normalize_iso(data["posted_at"])
    return data


class SqlJobRepository(SqlRepository, JobRepository):
    async def query(self, store_query: JobStoreQuery) -> list[Job]:
        stmt = select(Job)
        for column, value in store_query.equals.items():
            stmt = stmt.where(getattr(Job, column) == value)
        for column, values in store_query.in_.items():
            stmt = stmt.where(getattr(Job, column).in_(values))
        if store_query.order_by_posted:
            stmt = stmt.order_by(Job.posted_at.desc(), Job.id.desc())
        if store_query.limit is not None:
            stmt = stmt.limit(store_query.limit)

        async with self._session("query jobs") as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def get(self, job_id: str) -> Job | None:
        async with self._session("fetch job") as session:
            return await session.get(Job, job_id)

    async def get_many(self, job_ids: list[str]) -> list[Job]:
        if not job_ids:
            return []
        async with self._session("fetch jobs") as session:
            result = await session.execute(select(Job).where(Job.id.in_(job_ids)))
            return list(result.scalars().all())

    async def create(self, fields: dict[str, Any]) -> Job:
        data = _writable(fields)
        data.setdefault("posted_at", normalize_iso(None))
        job = Job(**data)
        async with self._session("create job") as session:
            async with session.begin():
                session.add(job)
        logger.info(f"Created job {job.id} ({job.title!r})")
        return job

    async def update(self, job_id: str, fields: dict[str, Any]) -> Job | None:
        # Never let a payload rewrite the identifier
        fields = {k: v for k, v in fields.items() if k != "id"}
        async with self._session("update job") as session:
            async with session.begin():
                job = await session.get(Job, job_id)
                if job is None:
                    return None
                for column, value in _writable(fields).items():
                    setattr(job, column, value)
            return job

    async def delete_cascade(self, job_id: str) -> int | None:
        async with self._session("delete job") as session:
            async with session.begin():
                job = await session.get(Job, job_id)
                if job is None:
                    return None
                result = await session.execute(
                    delete(Application).where(Application.job_id == job_id)
                )
                await session.delete(job)
        removed = result.rowcount or 0
        logger.info(f"Deleted job {job_id} and {removed} applications")
        return removed
