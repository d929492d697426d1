"""SQLAlchemy reference-data repository.

Jobs and users point at domains by durable id and at every other kind by the
legacy numeric id. That duality stops here: ``lookup_map`` and ``get_by_key``
take and return plain string keys.
"""

from sqlalchemy import and_, or_, select

from jobportal.models.reference import ReferenceEntity, ReferenceKind
from jobportal.repositories.base import SqlRepository
from jobportal.repositories.interfaces import ReferenceRepository


class SqlReferenceRepository(SqlRepository, ReferenceRepository):
    async def list_by_kind(self, kind: ReferenceKind) -> list[ReferenceEntity]:
        async with self._session(f"list {kind.value} entities") as session:
            result = await session.execute(
                select(ReferenceEntity)
                .where(ReferenceEntity.kind == kind.value)
                .order_by(ReferenceEntity.name)
            )
            return list(result.scalars().all())

    async def lookup_map(self, kind: ReferenceKind) -> dict[str, ReferenceEntity]:
        return {entity.lookup_key: entity for entity in await self.list_by_kind(kind)}

    async def get_by_key(self, kind: ReferenceKind, key: str) -> ReferenceEntity | None:
        if not key:
            return None
        stmt = select(ReferenceEntity).where(ReferenceEntity.kind == kind.value)
        if kind.keyed_by_legacy_id:
            # entities without a legacy id are keyed by their durable id
            by_id = and_(ReferenceEntity.legacy_id.is_(None), ReferenceEntity.id == key)
            try:
                stmt = stmt.where(or_(ReferenceEntity.legacy_id == int(key), by_id))
            except ValueError:
                stmt = stmt.where(by_id)
        else:
            stmt = stmt.where(ReferenceEntity.id == key)

        async with self._session(f"fetch {kind.value}") as session:
            result = await session.execute(stmt.limit(1))
            return result.scalar_one_or_none()

    async def create(
        self,
        kind: ReferenceKind,
        name: str,
        legacy_id: int | None = None,
        attributes: dict | None = None,
    ) -> ReferenceEntity:
        entity = ReferenceEntity(kind=kind.value, name=name, legacy_id=legacy_id, attributes=attributes or {})
        async with self._session(f"create {kind.value}") as session:
            async with session.begin():
                session.add(entity)
        return entity
