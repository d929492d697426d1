"""SQLAlchemy user-profile repository."""

import logging
from typing import Any

from sqlalchemy import select, delete, func

from jobportal.models.profile_entry import ProfileEntry
from jobportal.models.user import User
from jobportal.repositories.base import SqlRepository
from jobportal.repositories.interfaces import UserRepository

logger = logging.getLogger(__name__)

WRITABLE_FIELDS = {
    "name",
    "email",
    "phone",
    "role",
    "headline",
    "location_id",
    "domain_id",
    "linkedin_url",
    "resume_url",
    "notification_last_viewed_at",
}


class SqlUserRepository(SqlRepository, UserRepository):
    async def get(self, user_id: str) -> User | None:
        async with self._session("fetch user") as session:
            return await session.get(User, user_id)

    async def list_all(self) -> list[User]:
        async with self._session("list users") as session:
            result = await session.execute(select(User).order_by(User.created_at))
            return list(result.scalars().all())

    async def create(self, fields: dict[str, Any]) -> User:
        user = User(id=fields["id"], **{k: v for k, v in fields.items() if k in WRITABLE_FIELDS})
        async with self._session("create user") as session:
            async with session.begin():
                # Profile creation after signup is a set(), not an insert-only
                user = await session.merge(user)
        logger.info(f"Created profile for user {user.id} ({user.role})")
        return user

    async def update(self, user_id: str, fields: dict[str, Any]) -> User | None:
        async with self._session("update user") as session:
            async with session.begin():
                user = await session.get(User, user_id)
                if user is None:
                    return None
                for column, value in fields.items():
                    if column != "id" and column in WRITABLE_FIELDS:
                        setattr(user, column, value)
            return user

    async def delete(self, user_id: str) -> bool:
        async with self._session("delete user") as session:
            async with session.begin():
                await session.execute(delete(ProfileEntry).where(ProfileEntry.user_id == user_id))
                result = await session.execute(delete(User).where(User.id == user_id))
            return bool(result.rowcount)

    async def section_counts(self, user_id: str) -> dict[str, int]:
        async with self._session("count profile entries") as session:
            result = await session.execute(
                select(ProfileEntry.section, func.count(ProfileEntry.id).label("count"))
                .where(ProfileEntry.user_id == user_id)
                .group_by(ProfileEntry.section)
            )
            return {row.section: row.count for row in result}

    async def list_entries(self, user_id: str, section: str) -> list[ProfileEntry]:
        async with self._session("list profile entries") as session:
            result = await session.execute(
                select(ProfileEntry)
                .where(ProfileEntry.user_id == user_id, ProfileEntry.section == section)
                .order_by(ProfileEntry.created_at)
            )
            return list(result.scalars().all())

    async def add_entry(self, user_id: str, section: str, details: dict) -> ProfileEntry:
        entry = ProfileEntry(user_id=user_id, section=section, details=details)
        async with self._session("add profile entry") as session:
            async with session.begin():
                session.add(entry)
        return entry

    async def delete_entry(self, user_id: str, entry_id: str) -> bool:
        async with self._session("delete profile entry") as session:
            async with session.begin():
                result = await session.execute(
                    delete(ProfileEntry).where(ProfileEntry.id == entry_id, ProfileEntry.user_id == user_id)
                )
            return bool(result.rowcount)
