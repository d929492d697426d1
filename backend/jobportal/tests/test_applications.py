from datetime import timedelta

import pytest

from jobportal.errors import DuplicateApplication, NotFound, ValidationFailure
from jobportal.models.application import ApplicationStatus
from jobportal.services.applications import ApplicationService
from jobportal.services.notifications import NotificationFeedBuilder, count_unread
from jobportal.tests.helpers import NOW, posted


@pytest.fixture
def service(application_repo, job_repo, clock):
    return ApplicationService(application_repo, job_repo, now=clock)


@pytest.fixture
async def job(job_repo):
    return await job_repo.create({"title": "Platform Engineer", "posted_at": posted(2)})


async def test_apply_creates_applied_record(service, job):
    application = await service.apply("u1", job.id)

    assert application.status_id == ApplicationStatus.APPLIED
    assert application.status_name == "Applied"
    assert application.applied_at == NOW
    assert application.viewed_at is None
    assert application.updated_at is None


async def test_apply_twice_is_rejected(service, job):
    await service.apply("u1", job.id)

    with pytest.raises(DuplicateApplication) as exc_info:
        await service.apply("u1", job.id)

    assert exc_info.value.status_code == 409


async def test_apply_to_missing_job(service):
    with pytest.raises(NotFound):
        await service.apply("u1", "missing")


async def test_mark_viewed_stamps_and_moves_to_profile_viewed(service, job):
    application = await service.apply("u1", job.id)

    viewed = await service.mark_viewed(application.id)

    assert viewed.status_id == ApplicationStatus.PROFILE_VIEWED
    assert viewed.viewed_at == NOW
    assert viewed.updated_at == NOW


async def test_mark_viewed_keeps_final_decision(service, job):
    application = await service.apply("u1", job.id)
    await service.update_status(application.id, ApplicationStatus.SELECTED)

    viewed = await service.mark_viewed(application.id)

    assert viewed.status_id == ApplicationStatus.SELECTED


async def test_mark_viewed_missing_application(service):
    with pytest.raises(NotFound):
        await service.mark_viewed("missing")


@pytest.mark.parametrize("target", [ApplicationStatus.NOT_SUITABLE, ApplicationStatus.SELECTED])
async def test_status_moves_forward(service, job, target):
    application = await service.apply("u1", job.id)
    await service.mark_viewed(application.id)

    updated = await service.update_status(application.id, target)

    assert updated.status_id == target
    assert updated.updated_at == NOW


async def test_status_never_moves_backwards(service, job):
    application = await service.apply("u1", job.id)
    await service.update_status(application.id, ApplicationStatus.NOT_SUITABLE)

    with pytest.raises(ValidationFailure):
        await service.update_status(application.id, ApplicationStatus.APPLIED)
    with pytest.raises(ValidationFailure):
        await service.update_status(application.id, ApplicationStatus.SELECTED)


async def test_lists_by_user_and_job(service, job, job_repo):
    other = await job_repo.create({"title": "Other", "posted_at": posted(1)})
    await service.apply("u1", job.id)
    await service.apply("u2", job.id)
    await service.apply("u1", other.id)

    assert {a.job_id for a in await service.list_for_user("u1")} == {job.id, other.id}
    assert {a.user_id for a in await service.list_for_job(job.id)} == {"u1", "u2"}


async def test_viewing_decided_application_does_not_resurface_notification(
    application_repo, job_repo, settings, job
):
    decided_at = NOW + timedelta(hours=1)
    seen_at = NOW + timedelta(days=1)
    viewed_at = NOW + timedelta(days=3)
    application = await ApplicationService(application_repo, job_repo, now=lambda: NOW).apply("u1", job.id)
    await ApplicationService(application_repo, job_repo, now=lambda: decided_at).update_status(
        application.id, ApplicationStatus.NOT_SUITABLE
    )
    feed = NotificationFeedBuilder(application_repo, job_repo, settings, now=lambda: viewed_at)
    assert count_unread(await feed.build("u1"), seen_at) == 0

    viewed = await ApplicationService(application_repo, job_repo, now=lambda: viewed_at).mark_viewed(
        application.id
    )

    assert viewed.status_id == ApplicationStatus.NOT_SUITABLE
    assert viewed.viewed_at == viewed_at
    assert viewed.updated_at == decided_at
    [notification] = await feed.build("u1")
    assert notification.timestamp == decided_at
    assert count_unread([notification], seen_at) == 0
