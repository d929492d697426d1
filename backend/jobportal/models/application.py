"""Application model: one record per (user, job) with a forward-only status."""

from enum import IntEnum

from sqlalchemy import Column, String, Integer, ForeignKey, UniqueConstraint, Index

from jobportal.models.base import Base, StringIdMixin, UTCDateTime


class ApplicationStatus(IntEnum):
    APPLIED = 1
    PROFILE_VIEWED = 2
    NOT_SUITABLE = 3
    SELECTED = 4


STATUS_NAMES = {
    ApplicationStatus.APPLIED: "Applied",
    ApplicationStatus.PROFILE_VIEWED: "Profile Viewed",
    ApplicationStatus.NOT_SUITABLE: "Not Suitable",
    ApplicationStatus.SELECTED: "Selected",
}

# Status only moves forward; nothing reverts to Applied or leaves a final state
ALLOWED_TRANSITIONS = {
    ApplicationStatus.APPLIED: {
        ApplicationStatus.PROFILE_VIEWED,
        ApplicationStatus.NOT_SUITABLE,
        ApplicationStatus.SELECTED,
    },
    ApplicationStatus.PROFILE_VIEWED: {
        ApplicationStatus.NOT_SUITABLE,
        ApplicationStatus.SELECTED,
    },
    ApplicationStatus.NOT_SUITABLE: set(),
    ApplicationStatus.SELECTED: set(),
}


class Application(StringIdMixin, Base):
    __tablename__ = "applications"

    job_id = Column(String(64), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    status_id = Column(Integer, nullable=False, default=int(ApplicationStatus.APPLIED))

    # Each stamp is only set when the matching transition happens
    applied_at = Column(UTCDateTime)
    viewed_at = Column(UTCDateTime)
    updated_at = Column(UTCDateTime)

    __table_args__ = (
        UniqueConstraint("user_id", "job_id", name="uq_applications_user_job"),
        Index("idx_applications_user_status", "user_id", "status_id"),
    )

    @property
    def status_name(self) -> str:
        try:
            return STATUS_NAMES[ApplicationStatus(self.status_id)]
        except ValueError:
            return "Unknown"
