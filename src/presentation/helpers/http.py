"""Response shapers.

Why helpers:
- Every controller maps outcomes to the same status codes.
- `to_payload` gives the CLI (or any transport) a JSON-ready view.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from presentation.errors import PresentationError, ServerError
from presentation.protocols import HttpResponse


def bad_request(error: PresentationError) -> HttpResponse:
    return HttpResponse(status_code=400, body=error)


def server_error() -> HttpResponse:
    return HttpResponse(status_code=500, body=ServerError())


def ok(data: Any) -> HttpResponse:
    return HttpResponse(status_code=200, body=data)


def to_payload(response: HttpResponse) -> dict[str, Any]:
    """Render a response as `{"statusCode": ..., "body": ...}`.

    Errors become `{"error", "message", "param"}`; models are dumped in JSON mode.
    """

    body = response.body
    if isinstance(body, PresentationError):
        rendered: Any = {
            "error": body.kind,
            "message": body.message,
            "param": body.param_name,
        }
    elif isinstance(body, BaseModel):
        rendered = body.model_dump(mode="json")
    else:
        rendered = body
    return {"statusCode": response.status_code, "body": rendered}
