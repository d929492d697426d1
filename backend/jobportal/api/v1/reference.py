"""Reference data (locations, domains, job types, ...)."""

from fastapi import APIRouter, Depends, Response

from jobportal.api.v1.caching import set_cache_headers
from jobportal.dependencies.services import get_reference_repository
from jobportal.models.reference import ReferenceKind
from jobportal.repositories.interfaces import ReferenceRepository
from jobportal.schemas.reference import ReferenceRead

router = APIRouter(prefix="/reference", tags=["reference"])


@router.get("/{kind}", response_model=list[ReferenceRead])
async def list_reference(
    kind: ReferenceKind,
    response: Response,
    references: ReferenceRepository = Depends(get_reference_repository),
):
    entities = await references.list_by_kind(kind)
    set_cache_headers(response, True)
    return [ReferenceRead.model_validate(e) for e in entities]
