"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Absence is a sentinel (None / False), never an exception
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async in Protocol: implementations do IO; validation stays sync and pure
"""

from typing import Protocol

from resource_api.core.domain_types import ResourceId
from resource_api.schemas.resource import (
    ResourceCreate, ResourceListFilters, ResourceRecord, ResourceUpdate,
)


class ResourceRepository(Protocol):
    """Contract for resource persistence — implemented by shell."""
    async def create(self, payload: ResourceCreate) -> ResourceRecord: ...
    async def get_by_id(self, resource_id: ResourceId) -> ResourceRecord | None: ...
    async def list(self, filters: ResourceListFilters) -> list[ResourceRecord]: ...
    async def update(
        self, resource_id: ResourceId, changes: ResourceUpdate,
    ) -> ResourceRecord | None: ...
    async def delete(self, resource_id: ResourceId) -> bool: ...
