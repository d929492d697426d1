"""Reference data: small lookup collections referenced from jobs and users."""

from enum import Enum

from sqlalchemy import Column, String, Integer, JSON, UniqueConstraint

from jobportal.models.base import Base, TimestampMixin, StringIdMixin


class ReferenceKind(str, Enum):
    LOCATION = "location"
    DOMAIN = "domain"
    JOB_TYPE = "job_type"
    WORKPLACE_TYPE = "workplace_type"
    EXPERIENCE_LEVEL = "experience_level"

    @property
    def keyed_by_legacy_id(self) -> bool:
        """Jobs and users point at domains by durable id, at everything else by legacy id."""
        return self is not ReferenceKind.DOMAIN


class ReferenceEntity(StringIdMixin, TimestampMixin, Base):
    __tablename__ = "reference_entities"

    kind = Column(String(32), nullable=False, index=True)
    legacy_id = Column(Integer)
    name = Column(String(255), nullable=False)
    attributes = Column(JSON, default=dict)  # e.g. {"country": "India"} for locations

    __table_args__ = (
        UniqueConstraint("kind", "legacy_id", name="uq_reference_kind_legacy"),
    )

    @property
    def lookup_key(self) -> str:
        if ReferenceKind(self.kind).keyed_by_legacy_id and self.legacy_id is not None:
            return str(self.legacy_id)
        return self.id
