"""Job model: postings owned by a recruiter or a referring employee."""

from sqlalchemy import Column, String, Boolean, Integer, Text, JSON, Index

from jobportal.models.base import Base, TimestampMixin, StringIdMixin


class Job(StringIdMixin, TimestampMixin, Base):
    __tablename__ = "jobs"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    company_name = Column(String(255), nullable=False, default="")
    salary = Column(String(100))  # free text, e.g. "12-15 LPA"

    # Fixed-width ISO-8601 UTC ("2024-01-05T00:00:00.000Z"), so string order is time order
    posted_at = Column(String(32), nullable=False, index=True)

    # Scalar references into reference_entities (domain: durable id, others: legacy id)
    location_id = Column(String(64), index=True)
    domain_id = Column(String(64), index=True)
    job_type_id = Column(String(64), index=True)
    workplace_type_id = Column(String(64))
    experience_level_id = Column(String(64), index=True)

    # Ownership
    recruiter_id = Column(String(64), index=True)
    employee_id = Column(String(64), index=True)

    is_referral = Column(Boolean, default=False, nullable=False, index=True)
    job_link = Column(Text)
    vacancies = Column(Integer, default=1, nullable=False)
    benefits = Column(JSON)

    __table_args__ = (
        Index("idx_jobs_referral_posted", "is_referral", "posted_at"),
    )
