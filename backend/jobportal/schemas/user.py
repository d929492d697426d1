"""Pydantic schemas for user profiles."""

from datetime import datetime
from typing import Any

from jobportal.schemas.base import CamelModel


class UserCreate(CamelModel):
    id: str | None = None
    name: str | None = None
    email: str | None = None
    role: str | None = None


class UserUpdate(CamelModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    headline: str | None = None
    location_id: str | None = None
    domain_id: str | None = None
    linkedin_url: str | None = None
    resume_url: str | None = None


class ProfileStats(CamelModel):
    has_education: bool = False
    has_employment: bool = False
    has_projects: bool = False
    has_skills: bool = False
    has_languages: bool = False


class ProfileStrength(CamelModel):
    completion: int
    level: str
    missing_sections: list[str]


class UserRead(CamelModel):
    id: str
    name: str
    email: str
    phone: str = ""
    role: str
    headline: str | None = ""
    location_id: str | None = None
    domain_id: str | None = None
    linkedin_url: str | None = ""
    resume_url: str | None = ""
    notification_last_viewed_at: datetime | None = None


class UserProfile(UserRead):
    """User with derived, non-persisted fields."""

    location: str | None = None
    profile_stats: ProfileStats | None = None
    profile_strength: ProfileStrength | None = None


class ProfileEntryCreate(CamelModel):
    details: dict[str, Any] = {}


class ProfileEntryRead(CamelModel):
    id: str
    section: str
    details: dict[str, Any] | None = None
    created_at: datetime
