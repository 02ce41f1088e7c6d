"""Outcome Rendering — converts handler outcomes into HTTP responses.

Invariants:
    - Ok -> success status with JSON body, or empty body when value is None
    - Invalid -> 400, NotFound -> 404, both as {error, details}
    - Every Outcome variant has an explicit branch (assert_never guards the rest)
"""

from typing import assert_never

from fastapi import Response, status
from fastapi.responses import JSONResponse

from resource_api.core.outcomes import Invalid, NotFound, Ok, Outcome


def render_outcome(
    outcome: Outcome, success_status: int = status.HTTP_200_OK,
) -> Response:
    """Render a handler outcome as a response."""
    match outcome:
        case Ok(value=None):
            return Response(status_code=success_status)
        case Ok(value=value):
            return JSONResponse(
                status_code=success_status, content=value.to_json(),
            )
        case Invalid() | NotFound():
            return JSONResponse(
                status_code=outcome.http_status, content=outcome.to_response(),
            )
        case _:
            assert_never(outcome)
