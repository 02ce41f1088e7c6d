"""SQL Resource Repository — CRUD over the resources table.

Invariants:
    - The only module that reads or writes the resources table
    - Absence returns None / False, never raises
    - Every mutation with at least one change bumps updated_at strictly forward
    - Each operation commits its own unit of work (one request, one transaction)

Design Decisions:
    - Session injected by the caller: tests pass an isolated in-memory store
    - Tag filter tests each array element via json_each(), so "b" matches
      ["b"] but neither ["ab"] nor ['x"b']; = keeps the match case-sensitive
"""

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.core.domain_types import ResourceId, ResourceStatus
from resource_api.core.timestamps import next_timestamp, utc_now
from resource_api.models.resource import Resource as ResourceModel
from resource_api.schemas.resource import (
    ResourceCreate, ResourceListFilters, ResourceRecord, ResourceUpdate,
)


def to_record(row: ResourceModel) -> ResourceRecord:
    """Map a storage row to the public record shape."""
    return ResourceRecord(
        id=row.id,
        title=row.title,
        description=row.description,
        status=ResourceStatus(row.status),
        tags=list(row.tags or []),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlResourceRepository:
    """ResourceRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, payload: ResourceCreate) -> ResourceRecord:
        now = utc_now()
        row = ResourceModel(
            title=payload.title,
            description=payload.description if payload.description is not None else "",
            status=(payload.status or ResourceStatus.DRAFT).value,
            tags=list(payload.tags or []),
            created_at=now,
            updated_at=now,
        )
        self._db.add(row)
        await self._db.commit()
        await self._db.refresh(row)
        return to_record(row)

    async def get_by_id(self, resource_id: ResourceId) -> ResourceRecord | None:
        row = await self._db.get(ResourceModel, resource_id)
        return to_record(row) if row else None

    async def list(self, filters: ResourceListFilters) -> list[ResourceRecord]:
        query = select(ResourceModel)
        if filters.status:
            query = query.where(ResourceModel.status == filters.status.value)
        if filters.q:
            query = query.where(or_(
                ResourceModel.title.contains(filters.q, autoescape=True),
                ResourceModel.description.contains(filters.q, autoescape=True),
            ))
        if filters.tag:
            elements = func.json_each(ResourceModel.tags).table_valued("value")
            query = query.where(
                select(elements.c.value)
                .where(elements.c.value == filters.tag)
                .exists(),
            )
        query = query.order_by(
            ResourceModel.created_at.desc(), ResourceModel.id.desc(),
        ).limit(filters.limit).offset(filters.offset)

        result = await self._db.execute(query)
        return [to_record(row) for row in result.scalars().all()]

    async def update(
        self, resource_id: ResourceId, changes: ResourceUpdate,
    ) -> ResourceRecord | None:
        row = await self._db.get(ResourceModel, resource_id)
        if row is None:
            return None

        fields = changes.changes()
        if not fields:
            return to_record(row)

        for name, value in fields.items():
            setattr(row, name, value)
        row.updated_at = next_timestamp(row.updated_at)
        await self._db.commit()
        return to_record(row)

    async def delete(self, resource_id: ResourceId) -> bool:
        result = await self._db.execute(
            delete(ResourceModel).where(ResourceModel.id == resource_id),
        )
        await self._db.commit()
        return result.rowcount > 0
