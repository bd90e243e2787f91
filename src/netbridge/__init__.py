"""
netbridge: one async request API over interchangeable HTTP transports.
"""

from .exceptions import NetbridgeError
from .exceptions import NetworkError
from .exceptions import NetworkErrorKind
from .logger import FileHTTPLogger
from .logger import HTTPLogger
from .manager import NetworkManager
from .manager import NetworkManagerProtocol
from .request import build_request
from .response import classify_status
from .response import decode_payload
from .response import interpret_response
from .transport import AiohttpSession
from .transport import NetworkSession
from .transport import RequestsSession
from .types import Endpoint
from .types import HTTPResponseMetadata
from .types import PreparedRequest
from .types import ResponseMetadata

__all__ = [
    "AiohttpSession",
    "Endpoint",
    "FileHTTPLogger",
    "HTTPLogger",
    "HTTPResponseMetadata",
    "NetbridgeError",
    "NetworkError",
    "NetworkErrorKind",
    "NetworkManager",
    "NetworkManagerProtocol",
    "NetworkSession",
    "PreparedRequest",
    "RequestsSession",
    "ResponseMetadata",
    "build_request",
    "classify_status",
    "decode_payload",
    "interpret_response",
]
