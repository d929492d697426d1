"""Repository interfaces.

The query engine and services depend only on these contracts; the SQLAlchemy
implementations live next to this module and can be swapped in tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from jobportal.models.application import Application
from jobportal.models.job import Job
from jobportal.models.profile_entry import ProfileEntry
from jobportal.models.reference import ReferenceEntity, ReferenceKind
from jobportal.models.saved_job import SavedJob
from jobportal.models.user import User


@dataclass
class JobStoreQuery:
    """Predicates the job store evaluates natively.

    ``equals`` and ``in_`` are keyed by Job column name. When
    ``order_by_posted`` is false the store returns rows in no particular order
    and the caller sorts.
    """

    equals: dict[str, Any] = field(default_factory=dict)
    in_: dict[str, list[str]] = field(default_factory=dict)
    order_by_posted: bool = False
    limit: int | None = None


class JobRepository(ABC):
    @abstractmethod
    async def query(self, store_query: JobStoreQuery) -> list[Job]:
        ...

    @abstractmethod
    async def get(self, job_id: str) -> Job | None:
        ...

    @abstractmethod
    async def get_many(self, job_ids: list[str]) -> list[Job]:
        """Fetch jobs by id; missing ids are skipped, order is unspecified."""
        ...

    @abstractmethod
    async def create(self, fields: dict[str, Any]) -> Job:
        ...

    @abstractmethod
    async def update(self, job_id: str, fields: dict[str, Any]) -> Job | None:
        ...

    @abstractmethod
    async def delete_cascade(self, job_id: str) -> int | None:
        """Delete the job's applications and the job together.

        Returns the number of applications removed, or None when the job does
        not exist.
        """
        ...


class ApplicationRepository(ABC):
    @abstractmethod
    async def list_all(self) -> list[Application]:
        ...

    @abstractmethod
    async def list_for_user(self, user_id: str, status_ids: list[int] | None = None) -> list[Application]:
        ...

    @abstractmethod
    async def list_for_job(self, job_id: str) -> list[Application]:
        ...

    @abstractmethod
    async def get(self, application_id: str) -> Application | None:
        ...

    @abstractmethod
    async def create(self, user_id: str, job_id: str, applied_at: datetime) -> Application:
        """Raises DuplicateApplication when the (user, job) pair already exists."""
        ...

    @abstractmethod
    async def update(self, application_id: str, fields: dict[str, Any]) -> Application | None:
        ...


class SavedJobRepository(ABC):
    @abstractmethod
    async def list_for_user(self, user_id: str) -> list[SavedJob]:
        """Most recently saved first."""
        ...

    @abstractmethod
    async def save(self, user_id: str, job_id: str, saved_at: datetime) -> SavedJob:
        ...

    @abstractmethod
    async def delete(self, user_id: str, job_id: str) -> bool:
        ...


class ReferenceRepository(ABC):
    @abstractmethod
    async def list_by_kind(self, kind: ReferenceKind) -> list[ReferenceEntity]:
        ...

    @abstractmethod
    async def lookup_map(self, kind: ReferenceKind) -> dict[str, ReferenceEntity]:
        """Entities keyed by the identifier job and user records carry for this kind."""
        ...

    @abstractmethod
    async def get_by_key(self, kind: ReferenceKind, key: str) -> ReferenceEntity | None:
        ...

    @abstractmethod
    async def create(
        self,
        kind: ReferenceKind,
        name: str,
        legacy_id: int | None = None,
        attributes: dict | None = None,
    ) -> ReferenceEntity:
        ...


class UserRepository(ABC):
    @abstractmethod
    async def get(self, user_id: str) -> User | None:
        ...

    @abstractmethod
    async def list_all(self) -> list[User]:
        ...

    @abstractmethod
    async def create(self, fields: dict[str, Any]) -> User:
        ...

    @abstractmethod
    async def update(self, user_id: str, fields: dict[str, Any]) -> User | None:
        ...

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        ...

    @abstractmethod
    async def section_counts(self, user_id: str) -> dict[str, int]:
        ...

    @abstractmethod
    async def list_entries(self, user_id: str, section: str) -> list[ProfileEntry]:
        ...

    @abstractmethod
    async def add_entry(self, user_id: str, section: str, details: dict) -> ProfileEntry:
        ...

    @abstractmethod
    async def delete_entry(self, user_id: str, entry_id: str) -> bool:
        ...
