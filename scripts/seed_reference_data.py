"""Seed reference data: locations, domains, job types, workplace types, experience levels.

Jobs and users carry the legacy numeric id for every kind except domains, so
the ids below are stable and must not be renumbered once jobs exist.

Usage:
    docker compose exec backend python -m scripts.seed_reference_data
"""

from jobportal.models.base import SyncSessionLocal
from jobportal.models.reference import ReferenceEntity, ReferenceKind

LOCATIONS = [
    (1, "Bengaluru", {"country": "India"}),
    (2, "Hyderabad", {"country": "India"}),
    (3, "Pune", {"country": "India"}),
    (4, "Chennai", {"country": "India"}),
    (5, "Mumbai", {"country": "India"}),
    (6, "Delhi NCR", {"country": "India"}),
    (7, "Remote", {}),
]

DOMAINS = [
    (1, "Software Engineering"),
    (2, "Data Science"),
    (3, "Product Management"),
    (4, "Design"),
    (5, "Sales & Marketing"),
    (6, "Finance"),
]

JOB_TYPES = [(1, "Full-time"), (2, "Part-time"), (3, "Contract"), (4, "Internship")]

WORKPLACE_TYPES = [(1, "On-site"), (2, "Hybrid"), (3, "Remote")]

EXPERIENCE_LEVELS = [
    (1, "Fresher"),
    (2, "1-3 years"),
    (3, "3-5 years"),
    (4, "5-10 years"),
    (5, "10+ years"),
]


def _rows():
    for legacy_id, name, attributes in LOCATIONS:
        yield ReferenceKind.LOCATION, legacy_id, name, attributes
    for kind, entries in (
        (ReferenceKind.DOMAIN, DOMAINS),
        (ReferenceKind.JOB_TYPE, JOB_TYPES),
        (ReferenceKind.WORKPLACE_TYPE, WORKPLACE_TYPES),
        (ReferenceKind.EXPERIENCE_LEVEL, EXPERIENCE_LEVELS),
    ):
        for legacy_id, name in entries:
            yield kind, legacy_id, name, {}


def seed():
    db = SyncSessionLocal()
    try:
        created = 0
        skipped = 0
        for kind, legacy_id, name, attributes in _rows():
            existing = db.query(ReferenceEntity).filter(
                ReferenceEntity.kind == kind.value,
                ReferenceEntity.legacy_id == legacy_id,
            ).first()
            if existing:
                skipped += 1
                continue

            db.add(ReferenceEntity(kind=kind.value, legacy_id=legacy_id, name=name, attributes=attributes))
            created += 1
            print(f"  Added {kind.value}: {name}")

        db.commit()
        print(f"\nDone: {created} created, {skipped} already present")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
