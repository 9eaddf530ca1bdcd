"""HTTP-shaped request/response contracts for controllers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, runtime_checkable


@dataclass(frozen=True)
class HttpRequest:
    """Request as handed over by the (external) transport layer."""

    body: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class HttpResponse:
    """Structured result: a status code and either an error or a payload."""

    status_code: int
    body: Any = None


@runtime_checkable
class Controller(Protocol):
    def handle(self, request: HttpRequest) -> HttpResponse:
        ...
