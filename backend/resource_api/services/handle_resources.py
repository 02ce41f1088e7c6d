"""Resource Handlers — one function per CRUD operation: validate, persist, wrap.

Invariants:
    - Validation always runs before the repository is touched
    - Each handler returns Ok | Invalid | NotFound (core/outcomes.py)
    - Repository sentinels (None / False) become NotFound here, nowhere else

Design Decisions:
    - Repository passed in (not imported): handlers are testable with any
      object satisfying the ResourceRepository protocol
"""

import logging
from collections.abc import Mapping

from resource_api.core.domain_types import ResourceId
from resource_api.core.outcomes import Invalid, NotFound, Ok, Outcome
from resource_api.core.repository_protocols import ResourceRepository
from resource_api.core.validate_resource import (
    parse_create_payload, parse_list_filters, parse_resource_id,
    parse_update_payload,
)
from resource_api.schemas.resource import ResourceList, ResourceRecord

logger = logging.getLogger(__name__)


def _not_found(resource_id: ResourceId) -> NotFound:
    return NotFound(f"Resource with id {resource_id} not found.")


async def create_resource(
    repo: ResourceRepository, body: object,
) -> Outcome[ResourceRecord]:
    payload = parse_create_payload(body)
    if isinstance(payload, Invalid):
        return payload
    record = await repo.create(payload)
    logger.info("Resource created", extra={"resource_id": record.id})
    return Ok(record)


async def list_resources(
    repo: ResourceRepository, query: Mapping[str, object],
) -> Outcome[ResourceList]:
    filters = parse_list_filters(query)
    if isinstance(filters, Invalid):
        return filters
    records = await repo.list(filters)
    # total is the size of the returned page, not of the full match set
    return Ok(ResourceList(data=records, total=len(records)))


async def get_resource(
    repo: ResourceRepository, raw_id: str,
) -> Outcome[ResourceRecord]:
    resource_id = parse_resource_id(raw_id)
    if isinstance(resource_id, Invalid):
        return resource_id
    record = await repo.get_by_id(resource_id)
    if record is None:
        return _not_found(resource_id)
    return Ok(record)


async def update_resource(
    repo: ResourceRepository, raw_id: str, body: object,
) -> Outcome[ResourceRecord]:
    resource_id = parse_resource_id(raw_id)
    if isinstance(resource_id, Invalid):
        return resource_id
    changes = parse_update_payload(body)
    if isinstance(changes, Invalid):
        return changes
    record = await repo.update(resource_id, changes)
    if record is None:
        return _not_found(resource_id)
    logger.info("Resource updated", extra={"resource_id": record.id})
    return Ok(record)


async def delete_resource(
    repo: ResourceRepository, raw_id: str,
) -> Outcome[None]:
    resource_id = parse_resource_id(raw_id)
    if isinstance(resource_id, Invalid):
        return resource_id
    if not await repo.delete(resource_id):
        return _not_found(resource_id)
    logger.info("Resource deleted", extra={"resource_id": resource_id})
    return Ok(None)
