"""Saved (bookmarked) jobs per user."""

from fastapi import APIRouter, Depends, Query, Response

from jobportal.api.v1.caching import set_cache_headers
from jobportal.dependencies.services import get_saved_job_service
from jobportal.schemas.job import JobRead
from jobportal.schemas.saved_job import SavedJobAck, SavedJobCreate, SavedJobRead
from jobportal.services.saved_jobs import SavedJobService

router = APIRouter(prefix="/users/{user_id}/saved-jobs", tags=["saved-jobs"])


@router.get("", response_model=list[JobRead] | list[SavedJobRead])
async def list_saved_jobs(
    user_id: str,
    response: Response,
    include_details: bool = Query(False, alias="includeDetails"),
    service: SavedJobService = Depends(get_saved_job_service),
):
    """Saved job ids, or the full jobs, most recently saved first."""
    set_cache_headers(response, False)
    if include_details:
        return await service.list_with_details(user_id)
    return await service.list_for_user(user_id)


@router.post("", response_model=SavedJobAck, status_code=201)
async def save_job(
    user_id: str,
    payload: SavedJobCreate,
    service: SavedJobService = Depends(get_saved_job_service),
):
    await service.save(user_id, payload.job_id)
    return SavedJobAck(message="Job saved")


@router.delete("", response_model=SavedJobAck)
async def unsave_job(
    user_id: str,
    job_id: str | None = Query(None, alias="jobId"),
    service: SavedJobService = Depends(get_saved_job_service),
):
    await service.unsave(user_id, job_id)
    return SavedJobAck(message="Job unsaved")
