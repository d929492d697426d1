"""Application endpoints: apply, list, recruiter actions."""

from fastapi import APIRouter, Depends, Query

from jobportal.dependencies.services import get_application_service
from jobportal.errors import ValidationFailure
from jobportal.schemas.application import ApplicationCreate, ApplicationRead, ApplicationStatusUpdate
from jobportal.services.applications import ApplicationService

router = APIRouter(prefix="/applications", tags=["applications"])


@router.get("", response_model=list[ApplicationRead])
async def list_applications(
    user_id: str | None = Query(None, alias="userId"),
    job_id: str | None = Query(None, alias="jobId"),
    service: ApplicationService = Depends(get_application_service),
):
    """Applications made by a user, or received by a job."""
    if user_id:
        return await service.list_for_user(user_id)
    if job_id:
        return await service.list_for_job(job_id)
    raise ValidationFailure("User ID or Job ID is required")


@router.post("", response_model=ApplicationRead, status_code=201)
async def apply(
    payload: ApplicationCreate,
    service: ApplicationService = Depends(get_application_service),
):
    return await service.apply(payload.user_id, payload.job_id)


@router.post("/{application_id}/view", response_model=ApplicationRead)
async def mark_viewed(
    application_id: str,
    service: ApplicationService = Depends(get_application_service),
):
    return await service.mark_viewed(application_id)


@router.put("/{application_id}/status", response_model=ApplicationRead)
async def update_status(
    application_id: str,
    payload: ApplicationStatusUpdate,
    service: ApplicationService = Depends(get_application_service),
):
    """Record a recruiter decision (Not Suitable or Selected)."""
    return await service.update_status(application_id, payload.status_id)
