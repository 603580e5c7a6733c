# created: 10/19/2026
# last updated: 10/19/2026
# error kinds returned to the browser

from enum import Enum
from typing import Optional

INTERNAL_ERROR_MESSAGE = "An internal server error occurred."


class ErrorKind(Enum):
    # (code, status, message shown to the client)
    INVALID_METHOD = ("invalid_method", 405, "Method Not Allowed")
    MISSING_QUERY = ("missing_query", 400, "Search query is required.")
    MISCONFIGURED_CREDENTIAL = (
        "misconfigured_credential", 500, "API key is not configured on the server.")
    UPSTREAM_REJECTED = (
        "upstream_rejected", 502, "Failed to get a response from the AI model.")
    MALFORMED_UPSTREAM_PAYLOAD = ("malformed_upstream_payload", 500, INTERNAL_ERROR_MESSAGE)
    TRANSPORT = ("transport", 500, INTERNAL_ERROR_MESSAGE)
    UNKNOWN = ("unknown", 500, INTERNAL_ERROR_MESSAGE)

    def __init__(self, code: str, status: int, message: str):
        self.code = code
        self.status = status
        self.message = message


class ProxyError(Exception):
    """A failure of one request, tagged with its ErrorKind.

    `detail` is for the server log only. `status` overrides the kind's
    default status (used to mirror the upstream status).
    """

    def __init__(self, kind: ErrorKind, detail: str = "", status: Optional[int] = None):
        super().__init__(detail or kind.message)
        self.kind = kind
        self.detail = detail
        self.status = status if status is not None else kind.status
