"""Notification feed endpoints."""

from fastapi import APIRouter, Depends, Query, Response

from jobportal.api.v1.caching import set_cache_headers
from jobportal.dependencies.services import get_notification_feed, get_profile_service
from jobportal.errors import ValidationFailure
from jobportal.schemas.notification import NotificationRead, UnreadCount
from jobportal.services.notifications import NotificationFeedBuilder, count_unread
from jobportal.services.profiles import ProfileService

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _require_user_id(user_id: str | None) -> str:
    if not user_id:
        raise ValidationFailure("User ID is required")
    return user_id


@router.get("", response_model=list[NotificationRead])
async def list_notifications(
    response: Response,
    user_id: str | None = Query(None, alias="userId"),
    feed: NotificationFeedBuilder = Depends(get_notification_feed),
):
    """All of a user's notifications, newest first."""
    notifications = await feed.build(_require_user_id(user_id))
    # Per-user data
    set_cache_headers(response, False)
    return notifications


@router.get("/unread-count", response_model=UnreadCount)
async def unread_count(
    response: Response,
    user_id: str | None = Query(None, alias="userId"),
    feed: NotificationFeedBuilder = Depends(get_notification_feed),
    profiles: ProfileService = Depends(get_profile_service),
):
    user_id = _require_user_id(user_id)
    user = await profiles.get(user_id)
    notifications = await feed.build(user_id)
    set_cache_headers(response, False)
    return UnreadCount(
        unread=count_unread(notifications, user.notification_last_viewed_at),
        total=len(notifications),
    )
