"""
Transport capability shared by every HTTP backend.
"""

from typing import Protocol
from typing import runtime_checkable

from ..types import PreparedRequest
from ..types import ResponseMetadata


@runtime_checkable
class NetworkSession(Protocol):
    """Send a prepared request and return the raw payload with its metadata."""

    async def perform_request(self, request: PreparedRequest) -> tuple[bytes, ResponseMetadata]:
        """Perform one network round trip."""
        ...
