"""Initial schema — jobs, applications, saved_jobs, reference_entities, users, profile_entries.

Revision ID: 001
Revises:
Create Date: 2026-10-18
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    # Jobs
    op.create_table(
        "jobs",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("company_name", sa.String(255), nullable=False, server_default=""),
        sa.Column("salary", sa.String(100)),
        sa.Column("posted_at", sa.String(32), nullable=False, index=True),
        sa.Column("location_id", sa.String(64), index=True),
        sa.Column("domain_id", sa.String(64), index=True),
        sa.Column("job_type_id", sa.String(64), index=True),
        sa.Column("workplace_type_id", sa.String(64)),
        sa.Column("experience_level_id", sa.String(64), index=True),
        sa.Column("recruiter_id", sa.String(64), index=True),
        sa.Column("employee_id", sa.String(64), index=True),
        sa.Column("is_referral", sa.Boolean, nullable=False, server_default=sa.false(), index=True),
        sa.Column("job_link", sa.Text),
        sa.Column("vacancies", sa.Integer, nullable=False, server_default=sa.text("1")),
        sa.Column("benefits", sa.JSON),
        *_timestamps(),
    )
    op.create_index("idx_jobs_referral_posted", "jobs", ["is_referral", "posted_at"])

    # Applications
    op.create_table(
        "applications",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("job_id", sa.String(64), sa.ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("user_id", sa.String(64), nullable=False, index=True),
        sa.Column("status_id", sa.Integer, nullable=False, server_default=sa.text("1")),
        sa.Column("applied_at", sa.DateTime(timezone=True)),
        sa.Column("viewed_at", sa.DateTime(timezone=True)),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
        sa.UniqueConstraint("user_id", "job_id", name="uq_applications_user_job"),
    )
    op.create_index("idx_applications_user_status", "applications", ["user_id", "status_id"])

    # Saved jobs
    op.create_table(
        "saved_jobs",
        sa.Column("user_id", sa.String(64), primary_key=True),
        sa.Column("job_id", sa.String(64), primary_key=True, index=True),
        sa.Column("saved_at", sa.DateTime(timezone=True), nullable=False),
    )

    # Reference data
    op.create_table(
        "reference_entities",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("kind", sa.String(32), nullable=False, index=True),
        sa.Column("legacy_id", sa.Integer),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("attributes", sa.JSON),
        *_timestamps(),
        sa.UniqueConstraint("kind", "legacy_id", name="uq_reference_kind_legacy"),
    )

    # Users
    op.create_table(
        "users",
        sa.Column("id", sa.String(128), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=False, index=True),
        sa.Column("phone", sa.String(32), nullable=False, server_default=""),
        sa.Column("role", sa.String(32), nullable=False, server_default="Job Seeker"),
        sa.Column("headline", sa.String(255), server_default=""),
        sa.Column("location_id", sa.String(64)),
        sa.Column("domain_id", sa.String(64)),
        sa.Column("linkedin_url", sa.Text, server_default=""),
        sa.Column("resume_url", sa.Text, server_default=""),
        sa.Column("notification_last_viewed_at", sa.DateTime(timezone=True)),
        *_timestamps(),
    )

    # Profile sub-section entries
    op.create_table(
        "profile_entries",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.String(128), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("section", sa.String(32), nullable=False),
        sa.Column("details", sa.JSON),
        *_timestamps(),
    )
    op.create_index("idx_profile_entries_user_section", "profile_entries", ["user_id", "section"])


def downgrade() -> None:
    op.drop_table("profile_entries")
    op.drop_table("users")
    op.drop_table("reference_entities")
    op.drop_table("saved_jobs")
    op.drop_table("applications")
    op.drop_table("jobs")
