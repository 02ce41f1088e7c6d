"""Outcome Rendering — every Outcome variant maps to one response shape."""

import json

from resource_api.api.responses import render_outcome
from resource_api.core.outcomes import Invalid, NotFound, Ok
from resource_api.schemas.resource import ResourceList


def test_ok_with_value_renders_json_with_success_status():
    """Ok(value) → JSON body with the success status."""
    res = render_outcome(Ok(ResourceList(data=[], total=0)), 200)
    assert res.status_code == 200
    assert json.loads(res.body) == {"data": [], "total": 0}


def test_ok_without_value_renders_empty_body():
    """Ok(None) → empty body."""
    res = render_outcome(Ok(None), 204)
    assert res.status_code == 204
    assert res.body == b""


def test_invalid_renders_400():
    """Invalid → 400 error envelope."""
    res = render_outcome(Invalid("bad"))
    assert res.status_code == 400
    assert json.loads(res.body) == {"error": "bad", "details": None}


def test_not_found_renders_404():
    """NotFound → 404 error envelope."""
    res = render_outcome(NotFound("Resource with id 3 not found."))
    assert res.status_code == 404
    assert json.loads(res.body) == {
        "error": "Resource with id 3 not found.", "details": None,
    }
