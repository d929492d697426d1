from datetime import datetime, timedelta, timezone

from jobportal.models.job import Job
from jobportal.models.reference import ReferenceEntity, ReferenceKind
from jobportal.services.timestamps import to_iso

CACHEABLE = "public, s-maxage=60, stale-while-revalidate=300"


def _recent(days: float) -> str:
    return to_iso(datetime.now(timezone.utc) - timedelta(days=days))


def _seed_job(db, **fields) -> Job:
    data = {"title": "Software Engineer", "posted_at": _recent(1)}
    data.update(fields)
    job = Job(**data)
    db.add(job)
    db.commit()
    return job


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"


def test_list_jobs_is_camel_cased_and_cacheable(client, db_session):
    db_session.add(ReferenceEntity(kind=ReferenceKind.LOCATION.value, legacy_id=1, name="Bengaluru"))
    _seed_job(db_session, location_id="1")

    r = client.get("/api/v1/jobs")

    assert r.status_code == 200
    assert r.headers["cache-control"] == CACHEABLE
    [job] = r.json()
    assert job["location"] == "Bengaluru"
    assert job["domain"] == "N/A"
    assert job["applicantCount"] == 0
    assert "postedAt" in job


def test_owner_list_is_not_cached(client, db_session):
    _seed_job(db_session, recruiter_id="r1")

    r = client.get("/api/v1/jobs", params={"recruiterId": "r1"})

    assert r.status_code == 200
    assert r.headers["cache-control"] == "no-store"
    assert len(r.json()) == 1


def test_list_filters_and_search(client, db_session):
    _seed_job(db_session, title="Senior Software Engineer", location_id="1", posted_at=_recent(2))
    _seed_job(db_session, title="Data Engineer", location_id="2")
    _seed_job(db_session, title="Designer", location_id="1")
    _seed_job(db_session, title="Old Engineer", location_id="1", posted_at=_recent(40))

    r = client.get(
        "/api/v1/jobs",
        params=[("location", "1"), ("location", "2"), ("search", "ENGINEER"), ("posted", "30")],
    )

    assert [j["title"] for j in r.json()] == ["Data Engineer", "Senior Software Engineer"]


def test_invalid_posted_filter(client):
    r = client.get("/api/v1/jobs", params={"posted": "last-week"})

    assert r.status_code == 400
    assert r.json()["error"] == "Invalid posted filter"


def test_dashboard(client, db_session):
    _seed_job(db_session, title="j1", is_referral=False, domain_id="d1")
    _seed_job(db_session, title="j2", is_referral=True, domain_id="d1")
    _seed_job(db_session, title="j3", is_referral=False, domain_id="d2")

    r = client.get("/api/v1/jobs", params={"dashboard": "true", "domain": "d1"})

    assert r.status_code == 200
    body = r.json()
    assert [j["title"] for j in body["recommended"]] == ["j1"]
    assert [j["title"] for j in body["referral"]] == ["j2"]


def test_job_crud_and_cascade(client):
    r = client.post("/api/v1/jobs", json={"title": "ML Engineer", "companyName": "Acme", "recruiterId": "r1"})
    assert r.status_code == 201
    job_id = r.json()["id"]

    r = client.get(f"/api/v1/jobs/{job_id}")
    assert r.status_code == 200
    assert r.json()["companyName"] == "Acme"
    assert r.json()["location"] == ""
    assert r.headers["cache-control"] == CACHEABLE

    r = client.get(f"/api/v1/jobs/{job_id}", params={"fresh": "true"})
    assert r.headers["cache-control"] == "no-store"

    r = client.put(f"/api/v1/jobs/{job_id}", json={"id": "other", "salary": "30 LPA"})
    assert r.status_code == 200
    assert r.json()["id"] == job_id
    assert r.json()["salary"] == "30 LPA"

    assert client.post("/api/v1/applications", json={"userId": "u1", "jobId": job_id}).status_code == 201

    r = client.delete(f"/api/v1/jobs/{job_id}")
    assert r.status_code == 200
    assert r.json()["deletedApplications"] == 1
    assert client.get("/api/v1/applications", params={"userId": "u1"}).json() == []


def test_missing_job_error_body(client):
    r = client.get("/api/v1/jobs/nope")

    assert r.status_code == 404
    assert r.json() == {"error": "Job not found", "details": "nope"}


def test_application_flow_and_notifications(client, db_session):
    job = _seed_job(db_session, title="Backend Developer")
    client.post("/api/v1/users", json={"id": "u1", "name": "Asha", "email": "a@example.com", "role": "Job Seeker"})

    r = client.post("/api/v1/applications", json={"userId": "u1", "jobId": job.id})
    assert r.status_code == 201
    application_id = r.json()["id"]

    r = client.post("/api/v1/applications", json={"userId": "u1", "jobId": job.id})
    assert r.status_code == 409

    r = client.post(f"/api/v1/applications/{application_id}/view")
    assert r.json()["statusId"] == 2

    r = client.get("/api/v1/notifications", params={"userId": "u1"})
    assert r.status_code == 200
    [notification] = r.json()
    assert notification["message"] == "Your profile was viewed for the Backend Developer position."
    assert notification["applicationId"] == application_id

    assert client.get("/api/v1/notifications/unread-count", params={"userId": "u1"}).json() == {
        "unread": 1,
        "total": 1,
    }
    assert client.post("/api/v1/users/u1/notifications/seen").status_code == 200
    assert client.get("/api/v1/notifications/unread-count", params={"userId": "u1"}).json()["unread"] == 0

    r = client.put(f"/api/v1/applications/{application_id}/status", json={"statusId": 4})
    assert r.json()["statusName"] == "Selected"
    r = client.put(f"/api/v1/applications/{application_id}/status", json={"statusId": 1})
    assert r.status_code == 400


def test_notifications_require_user_id(client):
    r = client.get("/api/v1/notifications")

    assert r.status_code == 400
    assert r.json()["error"] == "User ID is required"


def test_saved_jobs(client, db_session):
    job = _seed_job(db_session, title="Saved one")

    r = client.post("/api/v1/users/u1/saved-jobs", json={"jobId": job.id})
    assert r.status_code == 201
    assert r.json() == {"success": True, "message": "Job saved"}

    assert client.post("/api/v1/users/u1/saved-jobs", json={}).json()["error"] == "Job ID is required"

    ids = client.get("/api/v1/users/u1/saved-jobs").json()
    assert [s["jobId"] for s in ids] == [job.id]

    details = client.get("/api/v1/users/u1/saved-jobs", params={"includeDetails": "true"}).json()
    assert [j["title"] for j in details] == ["Saved one"]

    r = client.delete("/api/v1/users/u1/saved-jobs", params={"jobId": job.id})
    assert r.json()["message"] == "Job unsaved"
    # Unsaving again is still a success
    assert client.delete("/api/v1/users/u1/saved-jobs", params={"jobId": job.id}).status_code == 200


def test_user_profile_routes(client, db_session):
    db_session.add(ReferenceEntity(kind=ReferenceKind.LOCATION.value, legacy_id=3, name="Pune"))
    db_session.commit()

    r = client.post("/api/v1/users", json={"id": "u1", "name": "Asha", "email": "a@example.com"})
    assert r.status_code == 400
    assert r.json()["error"] == "Missing required fields for profile creation"

    r = client.post("/api/v1/users", json={"id": "u1", "name": "Asha", "email": "a@example.com", "role": "Job Seeker"})
    assert r.status_code == 201

    r = client.put("/api/v1/users/u1", json={"name": "Asha", "email": "a@example.com", "phone": "12345", "locationId": "3"})
    assert r.status_code == 200

    assert client.post("/api/v1/users/u1/profile/skills", json={"details": {"name": "Go"}}).status_code == 201

    profile = client.get("/api/v1/users/u1").json()
    assert profile["location"] == "Pune"
    assert profile["profileStats"]["hasSkills"] is True
    assert profile["profileStrength"]["level"] == "Beginner"

    assert client.get("/api/v1/users", params={"uid": "u1"}).json()["id"] == "u1"
    assert [u["id"] for u in client.get("/api/v1/users").json()] == ["u1"]

    assert client.delete("/api/v1/users/u1").status_code == 200
    assert client.get("/api/v1/users/u1").status_code == 404


def test_reference_listing(client, db_session):
    db_session.add_all(
        [
            ReferenceEntity(kind=ReferenceKind.JOB_TYPE.value, legacy_id=2, name="Part-time"),
            ReferenceEntity(kind=ReferenceKind.JOB_TYPE.value, legacy_id=1, name="Full-time"),
        ]
    )
    db_session.commit()

    r = client.get("/api/v1/reference/job_type")

    assert [e["name"] for e in r.json()] == ["Full-time", "Part-time"]
    assert client.get("/api/v1/reference/planets").status_code == 422
