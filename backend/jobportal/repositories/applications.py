"""SQLAlchemy application repository."""

import logging
from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from jobportal.errors import DuplicateApplication
from jobportal.models.application import Application, ApplicationStatus
from jobportal.repositories.base import SqlRepository
from jobportal.repositories.interfaces import ApplicationRepository

logger = logging.getLogger(__name__)


class SqlApplicationRepository(SqlRepository, ApplicationRepository):
    async def list_all(self) -> list[Application]:
        async with self._session("list applications") as session:
            result = await session.execute(select(Application))
            return list(result.scalars().all())

    async def list_for_user(self, user_id: str, status_ids: list[int] | None = None) -> list[Application]:
        stmt = select(Application).where(Application.user_id == user_id)
        if status_ids:
            stmt = stmt.where(Application.status_id.in_(status_ids))
        async with self._session("list user applications") as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def list_for_job(self, job_id: str) -> list[Application]:
        async with self._session("list job applications") as session:
            result = await session.execute(
                select(Application)
                .where(Application.job_id == job_id)
                .order_by(Application.applied_at.desc())
            )
            return list(result.scalars().all())

    async def get(self, application_id: str) -> Application | None:
        async with self._session("fetch application") as session:
            return await session.get(Application, application_id)

    async def create(self, user_id: str, job_id: str, applied_at: datetime) -> Application:
        application = Application(
            user_id=user_id,
            job_id=job_id,
            status_id=int(ApplicationStatus.APPLIED),
            applied_at=applied_at,
        )
        async with self._session("create application") as session:
            try:
                async with session.begin():
                    session.add(application)
            except IntegrityError:
                raise DuplicateApplication(user_id, job_id)
        logger.info(f"User {user_id} applied to job {job_id}")
        return application

    async def update(self, application_id: str, fields: dict[str, Any]) -> Application | None:
        async with self._session("update application") as session:
            async with session.begin():
                application = await session.get(Application, application_id)
                if application is None:
                    return None
                for column, value in fields.items():
                    if column != "id":
                        setattr(application, column, value)
            return application
