"""
Exceptions raised by netbridge.
"""

from enum import Enum


class NetbridgeError(Exception):
    """Base exception for all netbridge errors."""

    pass


class NetworkErrorKind(Enum):
    """Flat set of failure kinds a request can end with."""

    INVALID_PARAMETERS = "invalid parameters"
    BAD_REQUEST = "bad request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not found"
    SERVER_ERROR = "server error"
    UNKNOWN = "unknown error"
    DECODING = "decoding failed"


class NetworkError(NetbridgeError):
    """
    A request failed before a typed result could be produced.

    Attributes:
        kind: Which of the failure kinds this is.
        status: HTTP status code, when a response was received.
        body: Response body text, when a response was received.
        uri: The requested URL, when known.
    """

    def __init__(
        self,
        kind: NetworkErrorKind,
        status: int | None = None,
        body: str | None = None,
        uri: str | None = None,
    ):
        self.kind = kind
        self.status = status
        self.body = body
        self.uri = uri
        message = kind.value if status is None else f"HTTP {status}: {kind.value}"
        if uri:
            message = f"{message} (uri={uri})"
        super().__init__(message)
