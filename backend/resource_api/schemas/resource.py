"""Resource Schemas — validated payloads and the public Resource record.

Invariants:
    - ResourceCreate.title is always present and non-empty
    - Optional payload fields are None when the client did not supply them
    - ResourceRecord dumps with camelCase keys (createdAt, updatedAt)

Design Decisions:
    - Payloads are plain containers: field rules live in validate_resource.py
      so error messages stay under our control instead of Pydantic's wording
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from resource_api.core.domain_types import (
    DEFAULT_LIST_LIMIT, ResourceStatus,
)


class ResourceCreate(BaseModel):
    """Validated input for creating a resource."""
    title: str
    description: str | None = None
    status: ResourceStatus | None = None
    tags: list[str] | None = None


class ResourceUpdate(BaseModel):
    """Validated partial update; only non-None fields are applied."""
    title: str | None = None
    description: str | None = None
    status: ResourceStatus | None = None
    tags: list[str] | None = None

    def changes(self) -> dict:
        """Supplied fields as storage-ready values."""
        return self.model_dump(mode="json", exclude_none=True)


class ResourceListFilters(BaseModel):
    """Validated listing options."""
    status: ResourceStatus | None = None
    q: str | None = None
    tag: str | None = None
    limit: int = DEFAULT_LIST_LIMIT
    offset: int = 0


class ResourceRecord(BaseModel):
    """Public representation of a stored resource."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True,
    )

    id: int
    title: str
    description: str
    status: ResourceStatus
    tags: list[str] = Field(default_factory=list)
    created_at: str
    updated_at: str

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class ResourceList(BaseModel):
    """Listing envelope; `total` counts the returned page only."""
    data: list[ResourceRecord]
    total: int

    def to_json(self) -> dict:
        return {
            "data": [r.to_json() for r in self.data],
            "total": self.total,
        }
