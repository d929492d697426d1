"""Repository and service providers for FastAPI routes."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from jobportal.config import get_settings
from jobportal.models.base import get_session_factory
from jobportal.repositories.applications import SqlApplicationRepository
from jobportal.repositories.jobs import SqlJobRepository
from jobportal.repositories.references import SqlReferenceRepository
from jobportal.repositories.saved_jobs import SqlSavedJobRepository
from jobportal.repositories.users import SqlUserRepository
from jobportal.services.applications import ApplicationService
from jobportal.services.job_query import JobQueryEngine
from jobportal.services.job_service import JobService
from jobportal.services.notifications import NotificationFeedBuilder
from jobportal.services.profiles import ProfileService
from jobportal.services.saved_jobs import SavedJobService

Sessions = async_sessionmaker[AsyncSession]


def get_job_repository(sessions: Sessions = Depends(get_session_factory)) -> SqlJobRepository:
    return SqlJobRepository(sessions)


def get_application_repository(sessions: Sessions = Depends(get_session_factory)) -> SqlApplicationRepository:
    return SqlApplicationRepository(sessions)


def get_saved_job_repository(sessions: Sessions = Depends(get_session_factory)) -> SqlSavedJobRepository:
    return SqlSavedJobRepository(sessions)


def get_reference_repository(sessions: Sessions = Depends(get_session_factory)) -> SqlReferenceRepository:
    return SqlReferenceRepository(sessions)


def get_user_repository(sessions: Sessions = Depends(get_session_factory)) -> SqlUserRepository:
    return SqlUserRepository(sessions)


def get_job_query_engine(
    jobs: SqlJobRepository = Depends(get_job_repository),
    applications: SqlApplicationRepository = Depends(get_application_repository),
    references: SqlReferenceRepository = Depends(get_reference_repository),
) -> JobQueryEngine:
    return JobQueryEngine(jobs, applications, references, get_settings())


def get_job_service(
    jobs: SqlJobRepository = Depends(get_job_repository),
    references: SqlReferenceRepository = Depends(get_reference_repository),
) -> JobService:
    return JobService(jobs, references)


def get_application_service(
    applications: SqlApplicationRepository = Depends(get_application_repository),
    jobs: SqlJobRepository = Depends(get_job_repository),
) -> ApplicationService:
    return ApplicationService(applications, jobs)


def get_saved_job_service(
    saved_jobs: SqlSavedJobRepository = Depends(get_saved_job_repository),
    jobs: SqlJobRepository = Depends(get_job_repository),
) -> SavedJobService:
    return SavedJobService(saved_jobs, jobs)


def get_notification_feed(
    applications: SqlApplicationRepository = Depends(get_application_repository),
    jobs: SqlJobRepository = Depends(get_job_repository),
) -> NotificationFeedBuilder:
    return NotificationFeedBuilder(applications, jobs, get_settings())


def get_profile_service(
    users: SqlUserRepository = Depends(get_user_repository),
    references: SqlReferenceRepository = Depends(get_reference_repository),
) -> ProfileService:
    return ProfileService(users, references)
