"""Job listing and posting endpoints."""

from fastapi import APIRouter, Depends, Query, Response

from jobportal.api.v1.caching import set_cache_headers
from jobportal.dependencies.services import get_job_query_engine, get_job_service
from jobportal.errors import ValidationFailure
from jobportal.schemas.job import (
    DashboardJobs,
    JobCreate,
    JobDeleted,
    JobDetail,
    JobListItem,
    JobRead,
    JobUpdate,
)
from jobportal.services.job_query import JobQuery, JobQueryEngine
from jobportal.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["jobs"])


def _flag(value: str | None) -> bool | None:
    """'true'/'false' query flags; absent, empty and 'all' mean no filter."""
    if value is None or value in ("", "all"):
        return None
    return value.lower() == "true"


def _days(value: str | None) -> int | None:
    if value is None or value in ("", "all"):
        return None
    try:
        days = int(value)
    except ValueError:
        raise ValidationFailure("Invalid posted filter", value)
    if days < 0:
        raise ValidationFailure("Invalid posted filter", value)
    return days


@router.get("", response_model=list[JobListItem] | DashboardJobs)
async def list_jobs(
    response: Response,
    engine: JobQueryEngine = Depends(get_job_query_engine),
    is_referral: str | None = Query(None, alias="isReferral"),
    recruiter_id: str | None = Query(None, alias="recruiterId"),
    employee_id: str | None = Query(None, alias="employeeId"),
    experience: str | None = Query(None, description="Experience level id"),
    location: list[str] = Query([], description="Location ids (repeatable)"),
    domain: list[str] = Query([], description="Domain ids (repeatable)"),
    job_type: list[str] = Query([], alias="jobType", description="Job type ids (repeatable)"),
    posted: str | None = Query(None, description="Posted within N days, or 'all'"),
    search: str | None = Query(None, description="Case-insensitive title search"),
    limit: int | None = Query(None, ge=1),
    dashboard: bool = Query(False, description="Return recommended and referral lists"),
    admin: bool = Query(False, description="Management view (never cached)"),
):
    """List jobs with filters, or the job seeker dashboard."""
    query = JobQuery(
        is_referral=_flag(is_referral),
        recruiter_id=recruiter_id,
        employee_id=employee_id,
        experience_level_id=experience,
        location_ids=location,
        domain_ids=domain,
        job_type_ids=job_type,
        posted_within_days=_days(posted),
        search_term=search,
        limit=limit,
        dashboard_mode=dashboard,
        dashboard_domain_id=next((d for d in domain if d and d != "all"), None),
        admin=admin,
    )

    if query.dashboard_mode:
        result = await engine.dashboard(query)
        set_cache_headers(response, result.cacheable)
        return result.jobs

    result = await engine.list_jobs(query)
    set_cache_headers(response, result.cacheable)
    return result.jobs


@router.post("", response_model=JobRead, status_code=201)
async def create_job(
    payload: JobCreate,
    service: JobService = Depends(get_job_service),
):
    return await service.create(payload.model_dump(exclude_unset=True))


@router.get("/{job_id}", response_model=JobDetail)
async def get_job(
    job_id: str,
    response: Response,
    fresh: bool = Query(False, description="Bypass shared caches"),
    service: JobService = Depends(get_job_service),
):
    """Get one job with its reference names resolved."""
    job = await service.get(job_id)
    set_cache_headers(response, not fresh)
    return job


@router.put("/{job_id}", response_model=JobRead)
async def update_job(
    job_id: str,
    payload: JobUpdate,
    service: JobService = Depends(get_job_service),
):
    return await service.update(job_id, payload.model_dump(exclude_unset=True))


@router.delete("/{job_id}", response_model=JobDeleted)
async def delete_job(
    job_id: str,
    service: JobService = Depends(get_job_service),
):
    """Delete a job and every application to it."""
    removed = await service.delete(job_id)
    return JobDeleted(message="Job and associated applications deleted successfully", deleted_applications=removed)
