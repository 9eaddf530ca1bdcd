from presentation.helpers.http import bad_request, ok, server_error, to_payload

__all__ = [
    "bad_request",
    "ok",
    "server_error",
    "to_payload",
]
