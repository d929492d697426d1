"""User profile endpoints, including profile sub-sections and notification state."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query, Response

from jobportal.api.v1.caching import set_cache_headers
from jobportal.dependencies.services import get_profile_service
from jobportal.schemas.user import (
    ProfileEntryCreate,
    ProfileEntryRead,
    UserCreate,
    UserProfile,
    UserRead,
    UserUpdate,
)
from jobportal.services.profiles import ProfileService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserRead] | UserProfile)
async def list_users(
    response: Response,
    uid: str | None = Query(None, description="Return a single profile"),
    service: ProfileService = Depends(get_profile_service),
):
    """All profiles (admin), or one profile when ``uid`` is given."""
    set_cache_headers(response, False)
    if uid:
        return await service.get(uid)
    return await service.list_all()


@router.post("", response_model=UserRead, status_code=201)
async def create_user(
    payload: UserCreate,
    service: ProfileService = Depends(get_profile_service),
):
    """Create the profile record after signup."""
    return await service.create(payload.model_dump())


@router.get("/{user_id}", response_model=UserProfile)
async def get_user(
    user_id: str,
    response: Response,
    service: ProfileService = Depends(get_profile_service),
):
    set_cache_headers(response, False)
    return await service.get(user_id)


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: str,
    payload: UserUpdate,
    service: ProfileService = Depends(get_profile_service),
):
    return await service.update(user_id, payload.model_dump(exclude_unset=True))


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    service: ProfileService = Depends(get_profile_service),
):
    await service.delete(user_id)
    return {"message": "User profile deleted successfully"}


@router.post("/{user_id}/notifications/seen")
async def mark_notifications_seen(
    user_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> dict[str, datetime]:
    """Everything up to now counts as read."""
    seen_at = await service.mark_notifications_seen(user_id)
    return {"notificationLastViewedAt": seen_at}


# --- Profile sub-sections ---

@router.get("/{user_id}/profile/{section}", response_model=list[ProfileEntryRead])
async def list_profile_entries(
    user_id: str,
    section: str,
    service: ProfileService = Depends(get_profile_service),
):
    return await service.list_entries(user_id, section)


@router.post("/{user_id}/profile/{section}", response_model=ProfileEntryRead, status_code=201)
async def add_profile_entry(
    user_id: str,
    section: str,
    payload: ProfileEntryCreate,
    service: ProfileService = Depends(get_profile_service),
):
    return await service.add_entry(user_id, section, payload.details)


@router.delete("/{user_id}/profile/{section}/{entry_id}", status_code=204)
async def delete_profile_entry(
    user_id: str,
    section: str,
    entry_id: str,
    service: ProfileService = Depends(get_profile_service),
):
    await service.delete_entry(user_id, section, entry_id)
    return Response(status_code=204)
