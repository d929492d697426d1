"""ISO-8601 helpers for posting timestamps.

Postings store ``postedAt`` as text in one fixed-width form,
``YYYY-MM-DDTHH:MM:SS.mmmZ``, so lexicographic order equals time order both in
the database and in the date-window filter.
"""

from datetime import datetime, timedelta, timezone

from jobportal.errors import ValidationFailure


def to_iso(value: datetime) -> str:
    """Render a datetime as a fixed-width UTC ISO string."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_iso(text: str) -> datetime:
    """Parse an ISO-8601 timestamp ('Z' suffix allowed); naive values are taken as UTC."""
    try:
        parsed = datetime.fromisoformat(text.strip().replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        raise ValidationFailure("Invalid timestamp", repr(text))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def normalize_iso(value: str | datetime | None, default: datetime | None = None) -> str:
    """Canonical posting timestamp for a caller-supplied value (now when absent)."""
    if value is None or value == "":
        return to_iso(default or datetime.now(timezone.utc))
    if isinstance(value, datetime):
        return to_iso(value)
    return to_iso(parse_iso(value))


def days_ago_iso(days: int, now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return to_iso(now - timedelta(days=days))
