"""
Status classification and payload decoding.
"""

import logging
from typing import TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError

from .exceptions import NetworkError
from .exceptions import NetworkErrorKind
from .types import HTTPResponseMetadata
from .types import ResponseMetadata

logger = logging.getLogger(__name__)

T = TypeVar("T")

STATUS_ERRORS: dict[int, NetworkErrorKind] = {
    400: NetworkErrorKind.BAD_REQUEST,
    401: NetworkErrorKind.UNAUTHORIZED,
    403: NetworkErrorKind.FORBIDDEN,
    404: NetworkErrorKind.NOT_FOUND,
    500: NetworkErrorKind.SERVER_ERROR,
}


def _body_text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def classify_status(status: int) -> NetworkErrorKind | None:
    """Return the error kind for a status code, or None for 2xx."""
    if 200 <= status < 300:
        return None
    return STATUS_ERRORS.get(status, NetworkErrorKind.UNKNOWN)


def interpret_response(metadata: ResponseMetadata, data: bytes = b"") -> HTTPResponseMetadata:
    """
    Check that a response is HTTP-shaped and successful.

    Args:
        metadata: Metadata returned by the transport
        data: Raw payload, attached to the error for diagnostics

    Returns:
        The metadata, narrowed to HTTPResponseMetadata

    Raises:
        NetworkError: UNKNOWN for non-HTTP metadata or unmapped statuses,
            otherwise the kind mapped from the status code.
    """
    if not isinstance(metadata, HTTPResponseMetadata):
        logger.warning(f"Response for {metadata.url} carries no HTTP status")
        raise NetworkError(NetworkErrorKind.UNKNOWN, uri=metadata.url)

    kind = classify_status(metadata.status)
    if kind is not None:
        logger.warning(f"{metadata.url} answered {metadata.status} ({kind.value})")
        raise NetworkError(kind, metadata.status, _body_text(data), metadata.url)
    return metadata


def decode_payload(data: bytes, response_type: type[T]) -> T:
    """
    Validate JSON bytes against the requested type.

    Raises:
        NetworkError: DECODING if the payload is not valid JSON for the type.
    """
    try:
        return TypeAdapter(response_type).validate_json(data)
    except ValidationError as e:
        raise NetworkError(NetworkErrorKind.DECODING, body=_body_text(data)) from e
