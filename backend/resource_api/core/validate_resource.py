"""Resource Input Validation — turns untyped request input into typed payloads.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return a payload on success, an Invalid outcome on the first violation
    - A JSON null counts as "not supplied" for every optional field
    - parse_update_payload only validates keys present in the body

Design Decisions:
    - Hand-written checks over Pydantic field validators: messages name the
      offending field exactly ('Field "tags[1]" must be a string.') and the
      difference between "absent" and "explicit value" is preserved
    - One check function per field, shared by create and update, so both
      operations apply identical rules
"""

import json
import re
from collections.abc import Callable, Mapping

from resource_api.core.domain_types import (
    MAX_LIST_LIMIT, MAX_RESOURCE_ID, RESOURCE_STATUSES, ResourceId,
    ResourceStatus,
)
from resource_api.core.outcomes import Invalid
from resource_api.schemas.resource import (
    ResourceCreate, ResourceListFilters, ResourceUpdate,
)

BODY_NOT_OBJECT = "Request body must be a JSON object."
MALFORMED_BODY = "Malformed JSON in request body."
NO_UPDATE_FIELDS = "No valid fields supplied for update."
INVALID_ID = 'Parameter "id" must be a positive integer.'
INVALID_LIMIT = (
    f'Field "limit" must be an integer between 1 and {MAX_LIST_LIMIT}.'
)
INVALID_OFFSET = 'Field "offset" must be a non-negative integer.'

_DIGITS = re.compile(r"[0-9]+")
_SIGNED_DIGITS = re.compile(r"[+-]?[0-9]+")


# ─── Field checks ────────────────────────────────────────────────

def _check_string(
    value: object, field: str, *, required: bool = False,
    allow_empty: bool = False,
) -> str | None | Invalid:
    if value is None:
        if required:
            return Invalid(f'Field "{field}" is required.')
        return None
    if not isinstance(value, str):
        return Invalid(f'Field "{field}" must be a string.')
    trimmed = value.strip()
    if not allow_empty and not trimmed:
        return Invalid(f'Field "{field}" cannot be empty.')
    return trimmed


def _check_status(value: object, field: str) -> ResourceStatus | None | Invalid:
    if value is None:
        return None
    if not isinstance(value, str):
        return Invalid(f'Field "{field}" must be a string.')
    if value not in RESOURCE_STATUSES:
        return Invalid(
            f'Field "{field}" must be one of: {", ".join(RESOURCE_STATUSES)}.',
        )
    return ResourceStatus(value)


def _check_string_list(value: object, field: str) -> list[str] | None | Invalid:
    if value is None:
        return None
    if not isinstance(value, list):
        return Invalid(f'Field "{field}" must be an array of strings.')
    items = []
    for index, item in enumerate(value):
        if not isinstance(item, str):
            return Invalid(f'Field "{field}[{index}]" must be a string.')
        items.append(item.strip())
    return items


def _check_int(
    value: object, *, default: int, minimum: int, maximum: int | None,
    message: str,
) -> int | Invalid:
    if value is None:
        return default
    if isinstance(value, str) and _SIGNED_DIGITS.fullmatch(value.strip()):
        number = int(value)
    elif isinstance(value, int) and not isinstance(value, bool):
        number = value
    else:
        return Invalid(message)
    if number < minimum or (maximum is not None and number > maximum):
        return Invalid(message)
    return number


_FIELD_CHECKS: dict[str, Callable[[object], object]] = {
    "title": lambda v: _check_string(v, "title", required=True),
    "description": lambda v: _check_string(v, "description", allow_empty=True),
    "status": lambda v: _check_status(v, "status"),
    "tags": lambda v: _check_string_list(v, "tags"),
}


# ─── Public parsers ──────────────────────────────────────────────

def parse_json_body(raw: bytes) -> object | Invalid:
    """Decode a request body. An empty body reads as an empty object."""
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        return Invalid(MALFORMED_BODY)


def parse_create_payload(body: object) -> ResourceCreate | Invalid:
    """Validate a creation body. title is required, everything else optional."""
    if not isinstance(body, dict):
        return Invalid(BODY_NOT_OBJECT)

    fields = {}
    for name, check in _FIELD_CHECKS.items():
        result = check(body.get(name))
        if isinstance(result, Invalid):
            return result
        fields[name] = result
    return ResourceCreate(**fields)


def parse_update_payload(body: object) -> ResourceUpdate | Invalid:
    """Validate a partial update. At least one recognized key must be present."""
    if not isinstance(body, dict):
        return Invalid(BODY_NOT_OBJECT)

    supplied = [name for name in _FIELD_CHECKS if name in body]
    if not supplied:
        return Invalid(NO_UPDATE_FIELDS)

    fields = {}
    for name in supplied:
        result = _FIELD_CHECKS[name](body[name])
        if isinstance(result, Invalid):
            return result
        fields[name] = result
    return ResourceUpdate(**fields)


def parse_list_filters(query: Mapping[str, object]) -> ResourceListFilters | Invalid:
    """Validate listing options. Empty q / tag are treated as absent."""
    status = _check_status(query.get("status"), "status")
    if isinstance(status, Invalid):
        return status

    q = _check_string(query.get("q"), "q", allow_empty=True)
    if isinstance(q, Invalid):
        return q

    tag = _check_string(query.get("tag"), "tag", allow_empty=True)
    if isinstance(tag, Invalid):
        return tag

    limit = _check_int(
        query.get("limit"), default=ResourceListFilters().limit,
        minimum=1, maximum=MAX_LIST_LIMIT, message=INVALID_LIMIT,
    )
    if isinstance(limit, Invalid):
        return limit

    offset = _check_int(
        query.get("offset"), default=0, minimum=0, maximum=MAX_RESOURCE_ID,
        message=INVALID_OFFSET,
    )
    if isinstance(offset, Invalid):
        return offset

    return ResourceListFilters(
        status=status, q=q or None, tag=tag or None,
        limit=limit, offset=offset,
    )


def parse_resource_id(raw: str) -> ResourceId | Invalid:
    """Validate a path id: decimal digits, 1..MAX_RESOURCE_ID."""
    candidate = raw.strip()
    if not _DIGITS.fullmatch(candidate):
        return Invalid(INVALID_ID)
    number = int(candidate)
    if number < 1 or number > MAX_RESOURCE_ID:
        return Invalid(INVALID_ID)
    return ResourceId(number)
