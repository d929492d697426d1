import pytest

from jobportal.errors import NotFound, ValidationFailure
from jobportal.models.reference import ReferenceKind
from jobportal.schemas.user import ProfileStats, UserRead
from jobportal.services.profiles import ProfileService, profile_strength, strength_level
from jobportal.tests.helpers import NOW


@pytest.fixture
def service(user_repo, reference_repo, clock):
    return ProfileService(user_repo, reference_repo, now=clock)


async def _seeker(service, **extra):
    user = await service.create({"id": "u1", "name": "Asha", "email": "asha@example.com", "role": "Job Seeker"})
    if extra:
        user = await service.update(
            user.id, {"name": user.name, "email": user.email, "phone": "9876543210", **extra}
        )
    return user


@pytest.mark.parametrize("missing", ["id", "name", "email", "role"])
async def test_create_requires_identity_fields(service, missing):
    fields = {"id": "u1", "name": "Asha", "email": "asha@example.com", "role": "Job Seeker"}
    fields[missing] = None

    with pytest.raises(ValidationFailure) as exc_info:
        await service.create(fields)

    assert exc_info.value.message == "Missing required fields for profile creation"


async def test_create_fills_profile_defaults(service):
    user = await _seeker(service)

    assert user.phone == ""
    assert user.headline == ""
    assert user.location_id is None
    assert user.domain_id is None


async def test_update_requires_contact_fields(service):
    await _seeker(service)

    with pytest.raises(ValidationFailure) as exc_info:
        await service.update("u1", {"name": "Asha", "email": "asha@example.com"})

    assert exc_info.value.message == "Missing required fields"


async def test_update_missing_user(service):
    with pytest.raises(NotFound):
        await service.update("ghost", {"name": "a", "email": "b", "phone": "c"})


async def test_get_attaches_location_and_stats(service, reference_repo):
    await reference_repo.create(ReferenceKind.LOCATION, "Chennai", legacy_id=4)
    await _seeker(service, location_id="4", headline="Backend developer")
    await service.add_entry("u1", "education", {"degree": "B.Tech"})
    await service.add_entry("u1", "skills", {"name": "Python"})

    profile = await service.get("u1")

    assert profile.location == "Chennai"
    assert profile.profile_stats == ProfileStats(has_education=True, has_skills=True)
    # name, email, phone, headline, location, education, skills
    assert profile.profile_strength.completion == 64
    assert profile.profile_strength.level == "Intermediate"
    assert profile.profile_strength.missing_sections == ["domain", "resume", "work experience"]


async def test_recruiters_have_no_profile_stats(service):
    await service.create({"id": "r1", "name": "Ravi", "email": "ravi@example.com", "role": "Recruiter"})

    profile = await service.get("r1")

    assert profile.profile_stats is None
    assert profile.profile_strength is None


async def test_unknown_section_is_rejected(service):
    await _seeker(service)

    with pytest.raises(ValidationFailure):
        await service.add_entry("u1", "hobbies", {})


async def test_delete_entry(service):
    await _seeker(service)
    entry = await service.add_entry("u1", "projects", {"name": "Portfolio"})

    await service.delete_entry("u1", "projects", entry.id)

    assert await service.list_entries("u1", "projects") == []
    with pytest.raises(NotFound):
        await service.delete_entry("u1", "projects", entry.id)


async def test_delete_user(service):
    await _seeker(service)
    await service.add_entry("u1", "skills", {"name": "SQL"})

    await service.delete("u1")

    with pytest.raises(NotFound):
        await service.get("u1")


async def test_mark_notifications_seen(service):
    await _seeker(service)

    assert await service.mark_notifications_seen("u1") == NOW
    assert (await service.get("u1")).notification_last_viewed_at == NOW


def test_strength_levels():
    assert strength_level(45) == "Beginner"
    assert strength_level(50) == "Intermediate"
    assert strength_level(79) == "Intermediate"
    assert strength_level(80) == "All-Star"


def test_complete_profile_is_all_star():
    user = UserRead(
        id="u1",
        name="Asha",
        email="asha@example.com",
        phone="1",
        role="Job Seeker",
        headline="Engineer",
        location_id="1",
        domain_id="d1",
        resume_url="https://example.com/cv.pdf",
    )
    stats = ProfileStats(has_education=True, has_employment=True, has_projects=True, has_skills=True)

    strength = profile_strength(user, stats)

    assert strength.completion == 100
    assert strength.level == "All-Star"
    assert strength.missing_sections == []
