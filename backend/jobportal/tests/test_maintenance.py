from datetime import datetime, timedelta, timezone

from jobportal.models.application import Application
from jobportal.models.job import Job
from jobportal.services.timestamps import to_iso
from jobportal.tasks.maintenance_tasks import cleanup_expired_postings


def _days_ago(days: int) -> str:
    return to_iso(datetime.now(timezone.utc) - timedelta(days=days))


def test_cleanup_removes_long_expired_postings_with_applications(db_session):
    # recruiter TTL 30 + retention 90, referral TTL 14 + retention 90
    stale_recruiter = Job(title="Stale", posted_at=_days_ago(121), recruiter_id="r1")
    stale_referral = Job(title="Stale referral", posted_at=_days_ago(105), employee_id="e1", is_referral=True)
    recent_referral = Job(title="Recent referral", posted_at=_days_ago(100), employee_id="e1", is_referral=True)
    unowned = Job(title="Unowned", posted_at=_days_ago(1000))
    db_session.add_all([stale_recruiter, stale_referral, recent_referral, unowned])
    db_session.flush()
    db_session.add(Application(user_id="u1", job_id=stale_recruiter.id))
    db_session.add(Application(user_id="u1", job_id=recent_referral.id))
    db_session.commit()

    result = cleanup_expired_postings()

    assert result == {"deleted_jobs": 2, "deleted_applications": 1}
    db_session.expire_all()
    remaining = {job.title for job in db_session.query(Job).all()}
    assert remaining == {"Recent referral", "Unowned"}
    assert [a.job_id for a in db_session.query(Application).all()] == [recent_referral.id]


def test_cleanup_with_nothing_to_do(db_session):
    db_session.add(Job(title="Fresh", posted_at=_days_ago(1), recruiter_id="r1"))
    db_session.commit()

    assert cleanup_expired_postings() == {"deleted_jobs": 0, "deleted_applications": 0}
