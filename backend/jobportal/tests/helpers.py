"""Shared test clock and posting-date helpers."""

from datetime import datetime, timedelta, timezone

from jobportal.services.timestamps import to_iso

NOW = datetime(2024, 1, 10, 12, 0, 0, tzinfo=timezone.utc)


def posted(days_ago: float, now: datetime = NOW) -> str:
    return to_iso(now - timedelta(days=days_ago))
