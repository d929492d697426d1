"""User profiles: creation after signup, edits, derived stats and strength."""

import logging
from datetime import datetime, timezone
from typing import Any, Callable

from jobportal.errors import NotFound, ValidationFailure
from jobportal.models.profile_entry import ProfileSection
from jobportal.models.reference import ReferenceKind
from jobportal.models.user import User, UserRole
from jobportal.repositories.interfaces import ReferenceRepository, UserRepository
from jobportal.schemas.user import (
    ProfileEntryRead,
    ProfileStats,
    ProfileStrength,
    UserProfile,
    UserRead,
)

logger = logging.getLogger(__name__)

STRENGTH_TOTAL_POINTS = 11


def profile_stats(section_counts: dict[str, int]) -> ProfileStats:
    def has(section: ProfileSection) -> bool:
        return section_counts.get(section.value, 0) > 0

    return ProfileStats(
        has_education=has(ProfileSection.EDUCATION),
        has_employment=has(ProfileSection.EMPLOYMENT),
        has_projects=has(ProfileSection.PROJECTS),
        has_skills=has(ProfileSection.SKILLS),
        has_languages=has(ProfileSection.LANGUAGES),
    )


def strength_level(completion: int) -> str:
    if completion < 50:
        return "Beginner"
    if completion < 80:
        return "Intermediate"
    return "All-Star"


def profile_strength(user: UserRead, stats: ProfileStats | None) -> ProfileStrength:
    """Score eleven profile items; missing ones are listed in suggestion order."""
    score = 0
    missing = []

    for present in (user.name, user.email, user.phone):
        if present:
            score += 1
    for present, label in (
        (user.headline, "headline"),
        (user.location_id, "location"),
        (user.domain_id, "domain"),
        (user.resume_url, "resume"),
    ):
        if present:
            score += 1
        else:
            missing.append(label)

    if stats is not None:
        for present, label in (
            (stats.has_education, "education"),
            (stats.has_employment, "work experience"),
            (stats.has_projects, None),
            (stats.has_skills, "skills"),
        ):
            if present:
                score += 1
            elif label:
                missing.append(label)
    else:
        missing.append("profile details")

    completion = round(score / STRENGTH_TOTAL_POINTS * 100)
    return ProfileStrength(completion=completion, level=strength_level(completion), missing_sections=missing)


def _section(section: str) -> ProfileSection:
    try:
        return ProfileSection(section)
    except ValueError:
        raise ValidationFailure("Unknown profile section", section)


class ProfileService:
    def __init__(
        self,
        users: UserRepository,
        references: ReferenceRepository,
        now: Callable[[], datetime] | None = None,
    ):
        self.users = users
        self.references = references
        self._now = now or (lambda: datetime.now(timezone.utc))

    async def _require(self, user_id: str) -> User:
        user = await self.users.get(user_id)
        if user is None:
            raise NotFound("User", user_id)
        return user

    async def get(self, user_id: str) -> UserProfile:
        user = await self._require(user_id)
        base = UserRead.model_validate(user)

        location = None
        if user.location_id:
            entity = await self.references.get_by_key(ReferenceKind.LOCATION, user.location_id)
            location = entity.name if entity else None

        stats = None
        if user.role == UserRole.JOB_SEEKER.value:
            stats = profile_stats(await self.users.section_counts(user_id))

        return UserProfile(
            **base.model_dump(),
            location=location,
            profile_stats=stats,
            profile_strength=profile_strength(base, stats) if stats is not None else None,
        )

    async def list_all(self) -> list[UserRead]:
        return [UserRead.model_validate(u) for u in await self.users.list_all()]

    async def create(self, fields: dict[str, Any]) -> UserRead:
        if not all(fields.get(key) for key in ("id", "name", "email", "role")):
            raise ValidationFailure("Missing required fields for profile creation")
        role = fields["role"]
        if role not in {r.value for r in UserRole}:
            raise ValidationFailure("Unknown role", role)

        user = await self.users.create(
            {
                "id": fields["id"],
                "name": fields["name"],
                "email": fields["email"],
                "role": role,
                "phone": "",
                "headline": "",
                "resume_url": "",
                "domain_id": None,
                "location_id": None,
            }
        )
        return UserRead.model_validate(user)

    async def update(self, user_id: str, fields: dict[str, Any]) -> UserRead:
        if not all(fields.get(key) for key in ("name", "email", "phone")):
            raise ValidationFailure("Missing required fields")

        update = {
            "name": fields["name"],
            "email": fields["email"],
            "phone": fields["phone"],
            "headline": fields.get("headline") or "",
            "location_id": fields.get("location_id") or None,
            "domain_id": fields.get("domain_id") or None,
            "linkedin_url": fields.get("linkedin_url") or "",
        }
        if "resume_url" in fields:
            update["resume_url"] = fields["resume_url"] or ""

        user = await self.users.update(user_id, update)
        if user is None:
            raise NotFound("User", user_id)
        return UserRead.model_validate(user)

    async def delete(self, user_id: str) -> None:
        if not await self.users.delete(user_id):
            raise NotFound("User", user_id)
        logger.info(f"Deleted profile for user {user_id}")

    async def mark_notifications_seen(self, user_id: str) -> datetime:
        """Move the unread high-water mark to now."""
        seen_at = self._now()
        if await self.users.update(user_id, {"notification_last_viewed_at": seen_at}) is None:
            raise NotFound("User", user_id)
        return seen_at

    async def list_entries(self, user_id: str, section: str) -> list[ProfileEntryRead]:
        entries = await self.users.list_entries(user_id, _section(section).value)
        return [ProfileEntryRead.model_validate(e) for e in entries]

    async def add_entry(self, user_id: str, section: str, details: dict) -> ProfileEntryRead:
        section = _section(section)
        await self._require(user_id)
        entry = await self.users.add_entry(user_id, section.value, details)
        return ProfileEntryRead.model_validate(entry)

    async def delete_entry(self, user_id: str, section: str, entry_id: str) -> None:
        _section(section)
        if not await self.users.delete_entry(user_id, entry_id):
            raise NotFound("Profile entry", entry_id)
