"""
Turns endpoints into prepared requests.
"""

import json
import logging

from .exceptions import NetworkError
from .exceptions import NetworkErrorKind
from .types import Endpoint
from .types import PreparedRequest

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def serialize_parameters(parameters: object) -> bytes:
    """
    Encode a parameter payload as pretty-printed JSON.

    Raises:
        NetworkError: INVALID_PARAMETERS if the payload is not a JSON object
            or array, or cannot be serialized.
    """
    if not isinstance(parameters, dict | list | tuple):
        raise NetworkError(NetworkErrorKind.INVALID_PARAMETERS)
    try:
        return json.dumps(parameters, indent=2, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise NetworkError(NetworkErrorKind.INVALID_PARAMETERS) from e


def build_request(endpoint: Endpoint) -> PreparedRequest:
    """
    Build a PreparedRequest. Only POST gets a body.

    A POST without a Content-Type header is tagged as JSON so every
    transport sends the same header.
    """
    headers = dict(endpoint.headers)
    body = None
    if endpoint.method == "POST":
        try:
            body = serialize_parameters(endpoint.parameters)
        except NetworkError:
            logger.warning(f"Could not serialize parameters for POST {endpoint.url}")
            raise
        if not any(key.lower() == "content-type" for key in headers):
            headers["Content-Type"] = JSON_CONTENT_TYPE

    return PreparedRequest(
        url=endpoint.url,
        method=endpoint.method,
        headers=headers,
        body=body,
    )
