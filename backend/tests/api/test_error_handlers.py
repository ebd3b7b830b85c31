"""Error Handlers — envelope shape for domain, validation and unexpected errors.

Tests cover:
    - Domain errors keep their status and code
    - Unexpected exceptions answer 500 without leaking their text
"""

import json

from starlette.requests import Request

from taskboard.api.error_handlers import (
    handle_taskboard_error, handle_unexpected_error,
)
from taskboard.core.errors import StalePositionError


def _request(path="/api/v1/reorder-notes"):
    return Request({
        "type": "http", "method": "POST", "path": path, "headers": [],
        "query_string": b"", "scheme": "http", "server": ("test", 80),
    })


async def test_domain_error_keeps_status_and_code():
    res = await handle_taskboard_error(_request(), StalePositionError(0, 2))
    assert res.status_code == 409
    assert json.loads(res.body)["error"]["code"] == "STALE_POSITION"


async def test_unexpected_error_hides_details():
    res = await handle_unexpected_error(_request(), RuntimeError("secret dsn"))
    body = json.loads(res.body)["error"]
    assert res.status_code == 500
    assert body["code"] == "INTERNAL_ERROR"
    assert "secret dsn" not in res.body.decode()

