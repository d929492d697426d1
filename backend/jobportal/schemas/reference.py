"""Pydantic schemas for reference data."""

from typing import Any

from jobportal.schemas.base import CamelModel


class ReferenceRead(CamelModel):
    id: str
    legacy_id: int | None = None
    name: str
    attributes: dict[str, Any] | None = None
