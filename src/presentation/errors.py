"""Errors returned as response bodies.

They are exceptions so they carry a readable message, but the controller
returns them instead of raising them. Equality is by value: two
`MissingParamError("name")` built independently compare equal.
"""

from __future__ import annotations


class PresentationError(Exception):
    kind: str = "error"

    def __init__(self, message: str, param_name: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.param_name = param_name

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.message, self.param_name) == (other.message, other.param_name)

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.param_name))

    def __repr__(self) -> str:
        if self.param_name is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.param_name!r})"


class MissingParamError(PresentationError):
    kind = "missing parameter"

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Missing param: {param_name}", param_name)


class InvalidParamError(PresentationError):
    kind = "invalid parameter"

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Invalid param: {param_name}", param_name)


class ServerError(PresentationError):
    """Generic 500 body. Never carries the original fault."""

    kind = "server error"

    def __init__(self) -> None:
        super().__init__("Internal server error")
