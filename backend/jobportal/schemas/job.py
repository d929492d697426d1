"""Pydantic schemas for jobs."""

from pydantic import ConfigDict

from jobportal.schemas.base import CamelModel


class JobBase(CamelModel):
    """Fields a recruiter or employee supplies."""

    title: str | None = None
    description: str | None = None
    company_name: str | None = None
    salary: str | None = None
    posted_at: str | None = None
    location_id: str | None = None
    domain_id: str | None = None
    job_type_id: str | None = None
    workplace_type_id: str | None = None
    experience_level_id: str | None = None
    recruiter_id: str | None = None
    employee_id: str | None = None
    is_referral: bool | None = None
    job_link: str | None = None
    vacancies: int | None = None
    benefits: list[str] | None = None


class JobCreate(JobBase):
    model_config = ConfigDict(extra="ignore")


class JobUpdate(JobBase):
    """Partial update; an ``id`` in the payload is ignored."""

    model_config = ConfigDict(extra="ignore")


class JobRead(CamelModel):
    """Stored job fields."""

    id: str
    title: str
    description: str = ""
    company_name: str = ""
    salary: str | None = None
    posted_at: str
    location_id: str | None = None
    domain_id: str | None = None
    job_type_id: str | None = None
    workplace_type_id: str | None = None
    experience_level_id: str | None = None
    recruiter_id: str | None = None
    employee_id: str | None = None
    is_referral: bool = False
    job_link: str | None = None
    vacancies: int = 1
    benefits: list[str] | None = None


class JobSummary(JobRead):
    """Dashboard card: location and job type names only."""

    location: str
    type: str


class JobListItem(JobSummary):
    """Job list entry with every reference name and applicant counts."""

    domain: str
    workplace_type: str
    experience_level: str
    applicant_count: int = 0
    selected_applicant_count: int = 0


class JobDetail(JobRead):
    """Single job with resolved reference names ('' when unresolved)."""

    location: str
    type: str
    domain: str
    workplace_type: str
    experience_level: str


class DashboardJobs(CamelModel):
    recommended: list[JobSummary]
    referral: list[JobSummary]


class JobDeleted(CamelModel):
    message: str
    deleted_applications: int
