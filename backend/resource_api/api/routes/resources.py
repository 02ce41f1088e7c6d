"""Resource Routes — HTTP surface for resource CRUD.

Invariants:
    - Raw path/query/body handed to handlers untouched; handlers validate
    - Malformed JSON answered with 400 before any handler runs
    - Success statuses: POST 201, GET/PATCH 200, DELETE 204

Design Decisions:
    - Body read from the Request instead of a Pydantic body parameter: absent
      keys, explicit nulls and wrong types must reach validate_resource.py as sent
    - Repository built per request from the injected session (get_resource_repository)
"""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.api.responses import render_outcome
from resource_api.core.outcomes import Invalid
from resource_api.core.validate_resource import parse_json_body
from resource_api.infrastructure.database import get_db
from resource_api.services import handle_resources
from resource_api.services.resource_repository import SqlResourceRepository

router = APIRouter(prefix="/resources", tags=["resources"])


def get_resource_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlResourceRepository:
    """FastAPI dependency: repository bound to the request's session."""
    return SqlResourceRepository(db)


def _query_dict(request: Request) -> dict[str, object]:
    """Flatten query params; a repeated key keeps all of its values."""
    params = request.query_params
    flat: dict[str, object] = {}
    for key in params.keys():
        values = params.getlist(key)
        flat[key] = values[0] if len(values) == 1 else values
    return flat


@router.post("")
async def create_resource(
    request: Request,
    repo: SqlResourceRepository = Depends(get_resource_repository),
) -> Response:
    """Create a resource."""
    body = parse_json_body(await request.body())
    if isinstance(body, Invalid):
        return render_outcome(body)
    outcome = await handle_resources.create_resource(repo, body)
    return render_outcome(outcome, status.HTTP_201_CREATED)


@router.get("")
async def list_resources(
    request: Request,
    repo: SqlResourceRepository = Depends(get_resource_repository),
) -> Response:
    """List resources, newest first, filtered and paginated."""
    outcome = await handle_resources.list_resources(repo, _query_dict(request))
    return render_outcome(outcome)


@router.get("/{resource_id}")
async def get_resource(
    resource_id: str,
    repo: SqlResourceRepository = Depends(get_resource_repository),
) -> Response:
    """Get one resource."""
    outcome = await handle_resources.get_resource(repo, resource_id)
    return render_outcome(outcome)


@router.patch("/{resource_id}")
async def update_resource(
    resource_id: str,
    request: Request,
    repo: SqlResourceRepository = Depends(get_resource_repository),
) -> Response:
    """Apply a partial update."""
    body = parse_json_body(await request.body())
    if isinstance(body, Invalid):
        return render_outcome(body)
    outcome = await handle_resources.update_resource(repo, resource_id, body)
    return render_outcome(outcome)


@router.delete("/{resource_id}")
async def delete_resource(
    resource_id: str,
    repo: SqlResourceRepository = Depends(get_resource_repository),
) -> Response:
    """Hard-delete a resource."""
    outcome = await handle_resources.delete_resource(repo, resource_id)
    return render_outcome(outcome, status.HTTP_204_NO_CONTENT)
