"""Maintenance tasks — removal of long-expired postings."""

import logging
from datetime import datetime, timezone

from sqlalchemy import and_, delete, or_, select

from jobportal.config import get_settings
from jobportal.models.application import Application
from jobportal.models.base import SyncSessionLocal
from jobportal.models.job import Job
from jobportal.services.timestamps import days_ago_iso
from jobportal.tasks.celery_app import celery_app

logger = logging.getLogger(__name__)


def expired_job_ids(db, now: datetime | None = None) -> list[str]:
    """Postings past their TTL plus the retention window."""
    settings = get_settings()
    now = now or datetime.now(timezone.utc)
    retention = settings.expired_job_retention_days
    referral_cutoff = days_ago_iso(settings.referral_job_ttl_days + retention, now)
    recruiter_cutoff = days_ago_iso(settings.recruiter_job_ttl_days + retention, now)

    result = db.execute(
        select(Job.id).where(
            or_(
                and_(Job.employee_id.isnot(None), Job.employee_id != "", Job.posted_at < referral_cutoff),
                and_(
                    or_(Job.employee_id.is_(None), Job.employee_id == ""),
                    Job.recruiter_id.isnot(None),
                    Job.recruiter_id != "",
                    Job.posted_at < recruiter_cutoff,
                ),
            )
        )
    )
    return [row[0] for row in result]


@celery_app.task(name="jobportal.tasks.maintenance_tasks.cleanup_expired_postings")
def cleanup_expired_postings():
    """Delete expired postings and their applications in one transaction."""
    db = SyncSessionLocal()
    try:
        job_ids = expired_job_ids(db)
        if not job_ids:
            logger.info("No expired postings to remove")
            return {"deleted_jobs": 0, "deleted_applications": 0}

        applications = db.execute(delete(Application).where(Application.job_id.in_(job_ids)))
        jobs = db.execute(delete(Job).where(Job.id.in_(job_ids)))
        db.commit()
        logger.info(f"Deleted {jobs.rowcount} expired postings and {applications.rowcount} applications")
        return {"deleted_jobs": jobs.rowcount, "deleted_applications": applications.rowcount}
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
