"""Notification feed: application status changes rendered as messages."""

import logging
from datetime import datetime, timezone
from typing import Callable, Iterable

from jobportal.config import Settings, get_settings
from jobportal.models.application import Application, ApplicationStatus, STATUS_NAMES
from jobportal.repositories.interfaces import ApplicationRepository, JobRepository
from jobportal.schemas.notification import NotificationRead

logger = logging.getLogger(__name__)

# Applied (1) never produces a notification
NOTIFYING_STATUSES = [
    ApplicationStatus.PROFILE_VIEWED,
    ApplicationStatus.NOT_SUITABLE,
    ApplicationStatus.SELECTED,
]

FALLBACK_TITLE = "a job"

MESSAGES = {
    ApplicationStatus.PROFILE_VIEWED: "Your profile was viewed for the {title} position.",
    ApplicationStatus.NOT_SUITABLE: (
        "Your application for {title} was reviewed. The company decided to move "
        "forward with other candidates at this time."
    ),
    ApplicationStatus.SELECTED: "Congratulations! You have been selected for the {title} position.",
}
DEFAULT_MESSAGE = "Your application status for {title} has been updated."

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def render_message(status_id: int, title: str) -> str:
    template = MESSAGES.get(status_id, DEFAULT_MESSAGE)
    return template.format(title=title)


def count_unread(notifications: Iterable[NotificationRead], last_viewed_at: datetime | None) -> int:
    """Notifications strictly newer than the high-water mark; all of them without one."""
    notifications = list(notifications)
    if last_viewed_at is None:
        return len(notifications)
    if last_viewed_at.tzinfo is None:
        last_viewed_at = last_viewed_at.replace(tzinfo=timezone.utc)
    return sum(1 for n in notifications if n.timestamp > last_viewed_at)


class NotificationFeedBuilder:
    def __init__(
        self,
        applications: ApplicationRepository,
        jobs: JobRepository,
        settings: Settings | None = None,
        now: Callable[[], datetime] | None = None,
    ):
        self.applications = applications
        self.jobs = jobs
        self.settings = settings or get_settings()
        self._now = now or (lambda: datetime.now(timezone.utc))

    def _timestamp(self, application: Application) -> datetime:
        for stamp in (application.updated_at, application.viewed_at, application.applied_at):
            if stamp is not None:
                return stamp
        if self.settings.notification_fallback == "epoch":
            return EPOCH
        return self._now()

    async def build(self, user_id: str) -> list[NotificationRead]:
        """All notifications for a user, newest first."""
        applications = await self.applications.list_for_user(
            user_id, status_ids=[int(s) for s in NOTIFYING_STATUSES]
        )
        if not applications:
            return []

        jobs = await self.jobs.get_many(sorted({a.job_id for a in applications}))
        titles = {job.id: job.title for job in jobs}

        notifications = []
        for application in applications:
            title = titles.get(application.job_id) or FALLBACK_TITLE
            status_name = STATUS_NAMES.get(application.status_id, "Updated")
            notifications.append(
                NotificationRead(
                    id=application.id,
                    application_id=application.id,
                    job_id=application.job_id,
                    job_title=title,
                    status_id=application.status_id,
                    status_name=status_name,
                    message=render_message(application.status_id, title),
                    timestamp=self._timestamp(application),
                )
            )

        notifications.sort(key=lambda n: n.timestamp, reverse=True)
        logger.debug(f"Built {len(notifications)} notifications for user {user_id}")
        return notifications
